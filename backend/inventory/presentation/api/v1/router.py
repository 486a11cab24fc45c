"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from inventory.presentation.api.v1.endpoints.health import router as health_router
from inventory.presentation.api.v1.endpoints.dashboard import router as dashboard_router
from inventory.presentation.api.v1.endpoints.users import router as users_router
from inventory.presentation.api.v1.endpoints.products import router as products_router
from inventory.presentation.api.v1.endpoints.images import router as images_router
from inventory.presentation.api.v1.endpoints.pokemon import router as pokemon_router
from inventory.presentation.api.v1.endpoints.events import router as events_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(dashboard_router)
router.include_router(users_router)
router.include_router(products_router)
router.include_router(images_router)
router.include_router(pokemon_router)
router.include_router(events_router)
