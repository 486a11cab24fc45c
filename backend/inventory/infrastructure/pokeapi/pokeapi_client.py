"""PokéAPI client — implements the PokemonProvider interface.

Talks to the public PokéAPI (https://pokeapi.co/api/v2) with httpx and
decodes the response into the few fields the Manage screen shows.
"""

import logging
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from inventory.application.interfaces import PokemonProvider
from inventory.application.schemas.pokemon import PokemonPayload
from inventory.domain.entities import FetchErrorKind, Pokemon
from inventory.domain.exceptions import PokemonFetchError

logger = logging.getLogger(__name__)


class PokeApiClient(PokemonProvider):
    """Infrastructure adapter — connects to PokéAPI.

    An injected ``httpx.AsyncClient`` is reused and left open; otherwise a
    client is created for each request and closed afterwards.
    """

    def __init__(
        self,
        base_url: str = "https://pokeapi.co/api/v2",
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client

    @property
    def provider_name(self) -> str:
        return "pokeapi"

    def build_url(self, name: str) -> str:
        """URL for a Pokémon; the API only knows lowercase names."""
        return f"{self._base_url}/pokemon/{quote(name.strip().lower(), safe='')}"

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def fetch_pokemon(self, name: str) -> Pokemon:
        url = self.build_url(name)
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            try:
                response = await client.get(url, headers={"Accept": "application/json"})
            except httpx.HTTPError as e:
                raise PokemonFetchError(
                    FetchErrorKind.NETWORK, name, f"{type(e).__name__}: {e}"
                ) from e

            logger.debug("GET %s -> %d", url, response.status_code)

            if response.status_code == 404:
                raise PokemonFetchError(
                    FetchErrorKind.NOT_FOUND,
                    name,
                    "Unknown Pokémon",
                    status_code=404,
                )
            if response.status_code != 200:
                raise PokemonFetchError(
                    FetchErrorKind.NETWORK,
                    name,
                    f"Unexpected status {response.status_code}",
                    status_code=response.status_code,
                )

            return self._parse_pokemon(name, response)

        finally:
            if should_close:
                await client.aclose()

    @staticmethod
    def _parse_pokemon(name: str, response: httpx.Response) -> Pokemon:
        """Decode a 200 response body into a Pokemon entity."""
        try:
            payload = PokemonPayload.model_validate_json(response.content)
        except ValidationError as e:
            raise PokemonFetchError(
                FetchErrorKind.DECODE,
                name,
                f"Could not decode response: {e.error_count()} error(s)",
                status_code=response.status_code,
            ) from e

        return Pokemon(name=payload.name, height=payload.height, weight=payload.weight)
