"""Unit tests for the ProductService."""

import pytest

from inventory.application.services import ProductService
from inventory.domain.entities import ImageHandle, ProductRecord
from inventory.domain.exceptions import EntityNotFoundError
from inventory.infrastructure.memory import InMemoryRecordStore


@pytest.fixture
def service() -> ProductService:
    return ProductService(InMemoryRecordStore(ProductRecord, name="products"))


def test_add_product(service: ProductService):
    product_id = service.add_product("Coffee", 12)
    product = service.get_product(product_id)
    assert product.name == "Coffee"
    assert product.price == 12
    assert product.image is None


def test_price_defaults_to_zero(service: ProductService):
    product_id = service.add_product("Sample")
    assert service.get_product(product_id).price == 0


def test_negative_price_is_stored_as_given(service: ProductService):
    product_id = service.add_product("Refund", -5)
    assert service.get_product(product_id).price == -5


def test_list_products_keeps_insertion_order(service: ProductService):
    for name in ["Tea", "Coffee", "Milk"]:
        service.add_product(name, 1)
    assert [p.name for p in service.list_products()] == ["Tea", "Coffee", "Milk"]
    assert service.product_count() == 3


def test_edit_product(service: ProductService):
    tea = service.add_product("Tea", 3)
    milk = service.add_product("Milk", 2)
    handle = ImageHandle(id="img-1", content_type="image/png")

    updated = service.edit_product(tea, "Green tea", 4, handle)

    assert updated.name == "Green tea"
    assert updated.price == 4
    assert updated.image == handle
    assert service.get_product(milk).name == "Milk"


def test_edit_unknown_product_raises(service: ProductService):
    with pytest.raises(EntityNotFoundError):
        service.edit_product("missing", "x", 1, None)


def test_set_product_image_keeps_other_fields(service: ProductService):
    product_id = service.add_product("Tea", 3)
    handle = ImageHandle(id="img-9")

    updated = service.set_product_image(product_id, handle)

    assert updated.image == handle
    assert (updated.name, updated.price) == ("Tea", 3)


def test_delete_product_is_idempotent(service: ProductService):
    product_id = service.add_product("Tea", 3)
    assert service.delete_product(product_id) is True
    assert service.delete_product(product_id) is False
    assert service.product_count() == 0
