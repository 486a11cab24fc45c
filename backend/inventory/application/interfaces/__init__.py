from .record_store import RecordStore, StoreListener, Subscription
from .image_picker import ImagePicker
from .image_storage import ImageStorage, StoredImage
from .pokemon_provider import PokemonProvider

__all__ = [
    "RecordStore",
    "StoreListener",
    "Subscription",
    "ImagePicker",
    "ImageStorage",
    "StoredImage",
    "PokemonProvider",
]
