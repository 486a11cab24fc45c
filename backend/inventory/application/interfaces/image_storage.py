"""Abstract image storage interface (port)."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from inventory.domain.entities import ImageHandle


@dataclass
class StoredImage:
    """Result of storing a single image on disk."""

    id: str
    stored_path: str
    filename: str
    original_filename: str
    file_size: int
    content_type: str

    @property
    def handle(self) -> ImageHandle:
        return ImageHandle(id=self.id, content_type=self.content_type)


class ImageStorage(ABC):
    """Port for keeping uploaded image bytes — implemented in the infrastructure layer."""

    @abstractmethod
    async def store_image(
        self, content: bytes, filename: str, content_type: str | None = None
    ) -> StoredImage:
        """Persist image bytes and return their metadata.

        Raises:
            UnsupportedImageError: The file is not an image.
            ImageTooLargeError: The file exceeds the size limit.
        """
        ...

    @abstractmethod
    def get_image(self, image_id: str) -> StoredImage | None:
        ...

    @abstractmethod
    def get_file_path(self, image_id: str) -> Path | None:
        ...

    @abstractmethod
    async def delete_image(self, image_id: str) -> bool:
        """Delete a stored image. Returns True if deleted, False if not found."""
        ...
