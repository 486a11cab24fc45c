"""Local filesystem storage for uploaded images.

Storage layout:
    <upload_dir>/<stem>_<YYYYMMDD_HHmmss>_<id8><ext>

The id → file index is kept in memory only, like the records that point
at the images.
"""

import logging
import mimetypes
import re
from datetime import datetime, timezone
from pathlib import Path
from uuid import uuid4

from inventory.application.interfaces import ImageStorage, StoredImage
from inventory.domain.exceptions import ImageTooLargeError, UnsupportedImageError

logger = logging.getLogger(__name__)

_GENERIC_CONTENT_TYPE = "application/octet-stream"


def _datetime_stamp() -> str:
    """Return a UTC datetime stamp suitable for filenames: YYYYMMDD_HHmmss."""
    return datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")


def _sanitise(name: str, max_len: int = 80) -> str:
    """Replace non-word characters with underscores and truncate."""
    return re.sub(r"[^\w\-]", "_", name)[:max_len].strip("_") or "unnamed"


class LocalImageStorage(ImageStorage):
    """Infrastructure adapter for local image storage."""

    def __init__(self, upload_dir: str | Path, max_size_bytes: int | None = None):
        self._upload_dir = Path(upload_dir)
        self._upload_dir.mkdir(parents=True, exist_ok=True)
        self._max_size_bytes = max_size_bytes
        self._images: dict[str, StoredImage] = {}

    async def store_image(
        self, content: bytes, filename: str, content_type: str | None = None
    ) -> StoredImage:
        """Store an image in ``<upload_dir>/``.

        The filename is augmented with a UTC datetime stamp and the start of
        the image id to avoid collisions: ``<stem>_<YYYYMMDD_HHmmss>_<id8><ext>``.
        """
        mime_type = content_type
        if not mime_type or mime_type == _GENERIC_CONTENT_TYPE:
            mime_type = mimetypes.guess_type(filename)[0] or _GENERIC_CONTENT_TYPE
        if not mime_type.startswith("image/"):
            raise UnsupportedImageError(filename, mime_type)
        if self._max_size_bytes is not None and len(content) > self._max_size_bytes:
            raise ImageTooLargeError(filename, len(content), self._max_size_bytes)

        image_id = str(uuid4())
        stem = Path(filename).stem
        suffix = Path(filename).suffix or (mimetypes.guess_extension(mime_type) or "")
        stamped_name = f"{_sanitise(stem)}_{_datetime_stamp()}_{image_id[:8]}{suffix}"

        dest_path = self._upload_dir / stamped_name
        dest_path.write_bytes(content)

        logger.info("Stored image: %s (%d bytes)", dest_path, len(content))

        stored = StoredImage(
            id=image_id,
            stored_path=str(dest_path),
            filename=stamped_name,
            original_filename=filename,
            file_size=len(content),
            content_type=mime_type,
        )
        self._images[image_id] = stored
        return stored

    def get_image(self, image_id: str) -> StoredImage | None:
        return self._images.get(image_id)

    def get_file_path(self, image_id: str) -> Path | None:
        """Return the path of a stored image, or None if unknown or gone from disk."""
        stored = self._images.get(image_id)
        if stored is None:
            return None
        path = Path(stored.stored_path)
        return path if path.exists() else None

    async def delete_image(self, image_id: str) -> bool:
        """Delete a stored image from disk and forget it.

        Returns True if successfully deleted, False if not found.
        """
        stored = self._images.pop(image_id, None)
        if stored is None:
            return False

        Path(stored.stored_path).unlink(missing_ok=True)
        logger.info("Deleted image from disk: %s", stored.stored_path)
        return True

    @property
    def image_count(self) -> int:
        return len(self._images)
