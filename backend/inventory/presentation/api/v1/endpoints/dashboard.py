"""Dashboard summary endpoint."""

from fastapi import APIRouter, Depends

from inventory.application.schemas import DashboardResponse
from inventory.application.services import ProductService, UserService
from inventory.infrastructure.dependencies import get_product_service, get_user_service
from inventory.presentation.api.v1.endpoints.users import to_user_response

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    users: UserService = Depends(get_user_service),
    products: ProductService = Depends(get_product_service),
) -> DashboardResponse:
    """Record counts and the user list shown on the Dashboard tab."""
    return DashboardResponse(
        user_count=users.user_count(),
        product_count=products.product_count(),
        users=[to_user_response(u) for u in users.list_users()],
    )
