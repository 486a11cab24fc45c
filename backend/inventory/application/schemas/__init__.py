from .user import UserCreate, UserUpdate, UserResponse
from .product import ProductCreate, ProductUpdate, ProductResponse
from .image import ImageResponse
from .pokemon import PokemonPayload, PokemonSchema, PokemonLookupResponse
from .dashboard import DashboardResponse

__all__ = [
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "ImageResponse",
    "PokemonPayload",
    "PokemonSchema",
    "PokemonLookupResponse",
    "DashboardResponse",
]
