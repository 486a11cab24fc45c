"""Domain entity for a product managed from the mobile client."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from .image_handle import ImageHandle


@dataclass
class ProductRecord:
    """A product entry held by the product store.

    ``price`` is an integer amount; negative values are not rejected here.
    """

    id: str
    name: str
    price: int = 0
    image: ImageHandle | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, *, name: str, price: int, image: ImageHandle | None) -> None:
        """Replace every mutable field and refresh the updated_at timestamp."""
        self.name = name
        self.price = price
        self.image = image
        self.updated_at = datetime.now(timezone.utc)
