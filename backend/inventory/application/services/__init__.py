from .user_service import UserService
from .product_service import ProductService
from .image_selection_service import ImageSelectionService
from .pokemon_lookup_service import PokemonLookupService
from .sse_manager import SSEManager

__all__ = [
    "UserService",
    "ProductService",
    "ImageSelectionService",
    "PokemonLookupService",
    "SSEManager",
]
