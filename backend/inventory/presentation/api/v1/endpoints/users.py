"""User CRUD endpoints (the Users tab)."""

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from inventory.application.schemas import UserCreate, UserResponse, UserUpdate
from inventory.application.services import ImageSelectionService, UserService
from inventory.domain.entities import UserRecord
from inventory.domain.exceptions import EntityNotFoundError
from inventory.infrastructure.dependencies import (
    get_image_selection_service,
    get_image_storage,
    get_user_service,
)
from inventory.infrastructure.storage import LocalImageStorage
from inventory.presentation.api.v1.endpoints.images import (
    image_url,
    pick_uploaded_image,
    resolve_image,
)

router = APIRouter(prefix="/users", tags=["Users"])


def to_user_response(user: UserRecord) -> UserResponse:
    return UserResponse(
        id=user.id,
        username=user.username,
        pincode=user.pincode,
        profile_image_id=user.profile_image.id if user.profile_image else None,
        profile_image_url=image_url(user.profile_image),
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


@router.get("", response_model=list[UserResponse])
async def list_users(
    service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    """Retrieve all users in the order they were added."""
    return [to_user_response(u) for u in service.list_users()]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Retrieve a single user by ID."""
    try:
        user = service.get_user(user_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return to_user_response(user)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    data: UserCreate,
    service: UserService = Depends(get_user_service),
    images: ImageSelectionService = Depends(get_image_selection_service),
) -> UserResponse:
    """Add a user. Username and pincode must not be blank."""
    profile_image = resolve_image(images, data.profile_image_id)
    user_id = service.add_user(data.username, data.pincode, profile_image)
    return to_user_response(service.get_user(user_id))


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    data: UserUpdate,
    service: UserService = Depends(get_user_service),
    images: ImageSelectionService = Depends(get_image_selection_service),
) -> UserResponse:
    """Replace a user's username, pincode and profile image."""
    profile_image = resolve_image(images, data.profile_image_id)
    try:
        user = service.edit_user(user_id, data.username, data.pincode, profile_image)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return to_user_response(user)


@router.put("/{user_id}/profile-image", response_model=UserResponse)
async def update_profile_image(
    user_id: str,
    file: UploadFile | None = File(None),
    service: UserService = Depends(get_user_service),
    images: ImageSelectionService = Depends(get_image_selection_service),
    storage: LocalImageStorage = Depends(get_image_storage),
) -> UserResponse:
    """Pick a new profile image. Sending no file (or an empty one) keeps the current image."""
    try:
        user = service.get_user(user_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    handle = await pick_uploaded_image(file, storage, images, user.profile_image)
    if handle == user.profile_image:
        return to_user_response(user)

    try:
        user = service.set_profile_image(user_id, handle)
    except EntityNotFoundError as e:
        # The user was deleted while the upload was stored.
        await storage.delete_image(handle.id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return to_user_response(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> None:
    """Delete a user by ID. Nothing changes when the ID is unknown."""
    if not service.delete_user(user_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User with id '{user_id}' not found",
        )
