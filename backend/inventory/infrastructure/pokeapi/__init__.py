from .pokeapi_client import PokeApiClient

__all__ = ["PokeApiClient"]
