"""Image upload/download endpoints and the upload-to-handle helpers used by records."""

from fastapi import APIRouter, Depends, HTTPException, UploadFile, status
from fastapi.responses import FileResponse

from inventory.application.interfaces import StoredImage
from inventory.application.schemas import ImageResponse
from inventory.application.services import ImageSelectionService
from inventory.domain.entities import ImageHandle
from inventory.domain.exceptions import (
    EntityNotFoundError,
    ImageTooLargeError,
    UnsupportedImageError,
)
from inventory.infrastructure.dependencies import get_image_storage
from inventory.infrastructure.storage import LocalImageStorage, UploadImagePicker

router = APIRouter(prefix="/images", tags=["Images"])


# ── Helpers ──────────────────────────────────────────────────────────

def image_url(handle: ImageHandle | None) -> str | None:
    return f"/api/v1/images/{handle.id}" if handle else None


def _to_response(stored: StoredImage) -> ImageResponse:
    return ImageResponse(
        id=stored.id,
        filename=stored.filename,
        content_type=stored.content_type,
        file_size=stored.file_size,
        url=image_url(stored.handle) or "",
    )


def resolve_image(images: ImageSelectionService, image_id: str | None) -> ImageHandle | None:
    """Map a client-supplied image id to a handle, 404 if it is unknown."""
    try:
        return images.resolve(image_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


async def pick_uploaded_image(
    file: UploadFile | None,
    storage: LocalImageStorage,
    images: ImageSelectionService,
    current: ImageHandle | None,
) -> ImageHandle | None:
    """Run an upload through the picker; a missing or empty file keeps ``current``."""
    if file is None:
        picker = UploadImagePicker(storage, None, None)
    else:
        picker = UploadImagePicker(storage, await file.read(), file.filename, file.content_type)
    try:
        return await images.select(picker, current=current)
    except UnsupportedImageError as e:
        raise HTTPException(status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, detail=str(e))
    except ImageTooLargeError as e:
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=str(e))


# ── Endpoints ────────────────────────────────────────────────────────

@router.post("", response_model=ImageResponse, status_code=status.HTTP_201_CREATED)
async def upload_image(
    file: UploadFile,
    storage: LocalImageStorage = Depends(get_image_storage),
) -> ImageResponse:
    """Upload an image and get back the handle records can point at."""
    content = await file.read()
    if not content:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Empty file")
    try:
        stored = await storage.store_image(content, file.filename or "image", file.content_type)
    except UnsupportedImageError as e:
        raise HTTPException(status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, detail=str(e))
    except ImageTooLargeError as e:
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=str(e))
    return _to_response(stored)


@router.get("/{image_id}")
async def download_image(
    image_id: str,
    storage: LocalImageStorage = Depends(get_image_storage),
) -> FileResponse:
    """Download a stored image."""
    stored = storage.get_image(image_id)
    path = storage.get_file_path(image_id)
    if stored is None or path is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Image not found")
    return FileResponse(path=path, media_type=stored.content_type, filename=stored.filename)
