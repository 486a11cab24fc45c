"""Application service (use case) for product records."""

from inventory.application.interfaces import RecordStore
from inventory.domain.entities import ImageHandle, ProductRecord
from inventory.domain.exceptions import EntityNotFoundError


class ProductService:
    """Orchestrates product add/edit/delete. Depends on the record store port (DI)."""

    def __init__(self, store: RecordStore[ProductRecord]):
        self._store = store

    @property
    def store(self) -> RecordStore[ProductRecord]:
        return self._store

    def get_product(self, product_id: str) -> ProductRecord:
        product = self._store.get(product_id)
        if product is None:
            raise EntityNotFoundError("Product", product_id)
        return product

    def list_products(self) -> tuple[ProductRecord, ...]:
        return self._store.list()

    def product_count(self) -> int:
        return len(self._store)

    def add_product(
        self, name: str, price: int = 0, image: ImageHandle | None = None
    ) -> str:
        return self._store.add(name=name, price=price, image=image)

    def edit_product(
        self,
        product_id: str,
        name: str,
        price: int,
        image: ImageHandle | None,
    ) -> ProductRecord:
        found = self._store.edit(product_id, name=name, price=price, image=image)
        if not found:
            raise EntityNotFoundError("Product", product_id)
        return self.get_product(product_id)

    def set_product_image(self, product_id: str, image: ImageHandle | None) -> ProductRecord:
        product = self.get_product(product_id)
        return self.edit_product(product_id, product.name, product.price, image)

    def delete_product(self, product_id: str) -> bool:
        return self._store.delete(product_id) > 0
