"""Abstract Pokémon data source (port) for the lookup demo."""

from abc import ABC, abstractmethod

from inventory.domain.entities import Pokemon


class PokemonProvider(ABC):
    """Port — defines what the lookup service needs from a Pokémon API client."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        ...

    @abstractmethod
    async def fetch_pokemon(self, name: str) -> Pokemon:
        """Fetch a Pokémon by name.

        Raises:
            PokemonFetchError: On transport failure, unknown name, or an
                undecodable response body.
        """
        ...
