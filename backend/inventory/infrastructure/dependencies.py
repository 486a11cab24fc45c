"""FastAPI dependency injection — wires infrastructure to application layer.

The stores and the services wrapping them are built once in
``inventory.main.create_app`` and kept on ``app.state``; these providers
only hand them out, so every request sees the same collections.
"""

from collections.abc import AsyncGenerator

from fastapi import Request

from inventory.application.services import (
    ImageSelectionService,
    PokemonLookupService,
    ProductService,
    SSEManager,
    UserService,
)
from inventory.config import Settings
from inventory.infrastructure.pokeapi import PokeApiClient
from inventory.infrastructure.storage import LocalImageStorage


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_user_service(request: Request) -> UserService:
    """Provides the application's UserService (one user store per app)."""
    return request.app.state.user_service


def get_product_service(request: Request) -> ProductService:
    """Provides the application's ProductService (one product store per app)."""
    return request.app.state.product_service


def get_image_storage(request: Request) -> LocalImageStorage:
    return request.app.state.image_storage


def get_image_selection_service(request: Request) -> ImageSelectionService:
    return request.app.state.image_selection_service


def get_sse_manager(request: Request) -> SSEManager:
    return request.app.state.sse_manager


async def get_pokemon_lookup_service(
    request: Request,
) -> AsyncGenerator[PokemonLookupService, None]:
    """Provides a PokemonLookupService backed by PokéAPI."""
    settings: Settings = request.app.state.settings
    provider = PokeApiClient(
        base_url=settings.pokeapi_base_url,
        timeout=settings.pokeapi_timeout,
    )
    yield PokemonLookupService(provider)
