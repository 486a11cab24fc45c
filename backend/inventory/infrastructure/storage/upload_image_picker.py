"""Image picker backed by a file the client uploaded with its request."""

from inventory.application.interfaces import ImagePicker, ImageStorage
from inventory.domain.entities import ImageHandle


class UploadImagePicker(ImagePicker):
    """Hands the upload to image storage; no file, or an empty one, counts as a cancel."""

    def __init__(
        self,
        storage: ImageStorage,
        content: bytes | None,
        filename: str | None,
        content_type: str | None = None,
    ):
        self._storage = storage
        self._content = content
        self._filename = filename or "image"
        self._content_type = content_type

    async def request_image(self) -> ImageHandle | None:
        if not self._content:
            return None
        stored = await self._storage.store_image(
            self._content, self._filename, self._content_type
        )
        return stored.handle
