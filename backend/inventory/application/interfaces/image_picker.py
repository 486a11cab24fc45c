"""Abstract image picker interface (port)."""

from abc import ABC, abstractmethod

from inventory.domain.entities import ImageHandle


class ImagePicker(ABC):
    """Port — asks the user for an image.

    Implementations decide where the image comes from (an upload, a camera
    bridge, a fixture in tests). The caller only ever sees the handle.
    """

    @abstractmethod
    async def request_image(self) -> ImageHandle | None:
        """Return the chosen image, or None if the user cancelled."""
        ...
