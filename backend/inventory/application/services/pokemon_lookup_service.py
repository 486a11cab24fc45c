"""Application service for the Pokémon lookup demo on the Manage screen."""

import logging

from inventory.application.interfaces import PokemonProvider
from inventory.domain.entities import FetchErrorKind, LookupStatus, PokemonLookup
from inventory.domain.exceptions import PokemonFetchError

logger = logging.getLogger(__name__)


class PokemonLookupService:
    """Turns fetch results into what the client displays.

    Fetch failures never escape: they become a ``no_data`` lookup that
    still says which kind of failure happened.
    """

    def __init__(self, provider: PokemonProvider):
        self._provider = provider

    async def lookup(self, name: str) -> PokemonLookup:
        query = name.strip()
        if not query:
            return PokemonLookup(
                query=name,
                status=LookupStatus.NO_DATA,
                error=FetchErrorKind.NOT_FOUND,
                message="No Pokémon name given",
            )

        try:
            pokemon = await self._provider.fetch_pokemon(query)
        except PokemonFetchError as e:
            logger.warning(
                "Pokémon lookup for %r via %s failed: %s",
                query,
                self._provider.provider_name,
                e,
            )
            return PokemonLookup(
                query=query,
                status=LookupStatus.NO_DATA,
                error=e.kind,
                message=e.message,
            )

        return PokemonLookup(query=query, status=LookupStatus.FETCHED, pokemon=pokemon)
