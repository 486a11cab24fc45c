from .image_handle import ImageHandle
from .user_record import UserRecord
from .product_record import ProductRecord
from .pokemon import Pokemon, PokemonLookup, LookupStatus, FetchErrorKind
from .store_change import StoreChange, ChangeKind

__all__ = [
    "ImageHandle",
    "UserRecord",
    "ProductRecord",
    "Pokemon",
    "PokemonLookup",
    "LookupStatus",
    "FetchErrorKind",
    "StoreChange",
    "ChangeKind",
]
