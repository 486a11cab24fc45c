"""Application service for choosing an image through a picker."""

import logging

from inventory.application.interfaces import ImagePicker, ImageStorage
from inventory.domain.entities import ImageHandle
from inventory.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class ImageSelectionService:
    """Resolves image handles and runs picker requests.

    A picker that comes back empty means the user cancelled, which keeps
    whatever image was there before.
    """

    def __init__(self, storage: ImageStorage):
        self._storage = storage

    async def select(
        self, picker: ImagePicker, current: ImageHandle | None = None
    ) -> ImageHandle | None:
        handle = await picker.request_image()
        if handle is None:
            logger.debug("Image selection cancelled, keeping %s", current)
            return current
        return handle

    def resolve(self, image_id: str | None) -> ImageHandle | None:
        """Turn an image id sent by a client into a handle.

        Raises:
            EntityNotFoundError: The id does not name a stored image.
        """
        if image_id is None:
            return None
        stored = self._storage.get_image(image_id)
        if stored is None:
            raise EntityNotFoundError("Image", image_id)
        return stored.handle
