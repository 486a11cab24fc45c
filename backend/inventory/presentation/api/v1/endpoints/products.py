"""Product CRUD endpoints (the Products tab)."""

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from inventory.application.schemas import ProductCreate, ProductResponse, ProductUpdate
from inventory.application.services import ImageSelectionService, ProductService
from inventory.domain.entities import ProductRecord
from inventory.domain.exceptions import EntityNotFoundError
from inventory.infrastructure.dependencies import (
    get_image_selection_service,
    get_image_storage,
    get_product_service,
)
from inventory.infrastructure.storage import LocalImageStorage
from inventory.presentation.api.v1.endpoints.images import (
    image_url,
    pick_uploaded_image,
    resolve_image,
)

router = APIRouter(prefix="/products", tags=["Products"])


def _to_response(product: ProductRecord) -> ProductResponse:
    return ProductResponse(
        id=product.id,
        name=product.name,
        price=product.price,
        image_id=product.image.id if product.image else None,
        image_url=image_url(product.image),
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


@router.get("", response_model=list[ProductResponse])
async def list_products(
    service: ProductService = Depends(get_product_service),
) -> list[ProductResponse]:
    """Retrieve all products in the order they were added."""
    return [_to_response(p) for p in service.list_products()]


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    try:
        product = service.get_product(product_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _to_response(product)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    data: ProductCreate,
    service: ProductService = Depends(get_product_service),
    images: ImageSelectionService = Depends(get_image_selection_service),
) -> ProductResponse:
    """Add a product. The name must not be blank; the price is taken as given."""
    image = resolve_image(images, data.image_id)
    product_id = service.add_product(data.name, data.price, image)
    return _to_response(service.get_product(product_id))


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str,
    data: ProductUpdate,
    service: ProductService = Depends(get_product_service),
    images: ImageSelectionService = Depends(get_image_selection_service),
) -> ProductResponse:
    """Replace a product's name, price and image."""
    image = resolve_image(images, data.image_id)
    try:
        product = service.edit_product(product_id, data.name, data.price, image)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _to_response(product)


@router.put("/{product_id}/image", response_model=ProductResponse)
async def update_product_image(
    product_id: str,
    file: UploadFile | None = File(None),
    service: ProductService = Depends(get_product_service),
    images: ImageSelectionService = Depends(get_image_selection_service),
    storage: LocalImageStorage = Depends(get_image_storage),
) -> ProductResponse:
    """Pick a new product image; no file keeps the current one."""
    try:
        product = service.get_product(product_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    image = await pick_uploaded_image(file, storage, images, product.image)
    if image == product.image:
        return _to_response(product)

    try:
        product = service.set_product_image(product_id, image)
    except EntityNotFoundError as e:
        await storage.delete_image(image.id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _to_response(product)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> None:
    if not service.delete_product(product_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product with id '{product_id}' not found",
        )
