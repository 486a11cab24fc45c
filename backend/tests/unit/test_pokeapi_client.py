"""Unit tests for the PokeApiClient."""

import httpx
import pytest

from inventory.domain.entities import FetchErrorKind, Pokemon
from inventory.domain.exceptions import PokemonFetchError
from inventory.infrastructure.pokeapi import PokeApiClient


# ── Helpers ──


def _pokemon_body(name: str = "pikachu", height: int = 4, weight: int = 60) -> dict:
    """Trimmed-down PokéAPI body, extra keys included."""
    return {
        "id": 25,
        "name": name,
        "height": height,
        "weight": weight,
        "base_experience": 112,
        "abilities": [{"ability": {"name": "static"}}],
    }


def _make_mock_transport(
    status_code: int = 200,
    json_data: dict | None = None,
    text: str | None = None,
    seen: list[httpx.Request] | None = None,
) -> httpx.MockTransport:
    """Create a mock transport that returns a fixed response."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        if text is not None:
            return httpx.Response(status_code, text=text)
        return httpx.Response(status_code, json=json_data or {})

    return httpx.MockTransport(handler)


def _client(transport: httpx.MockTransport) -> PokeApiClient:
    return PokeApiClient(
        base_url="https://pokeapi.test/api/v2/",
        http_client=httpx.AsyncClient(transport=transport),
    )


# ── Tests ──


@pytest.mark.asyncio
async def test_fetch_pokemon_parses_response():
    seen: list[httpx.Request] = []
    client = _client(_make_mock_transport(json_data=_pokemon_body(), seen=seen))

    pokemon = await client.fetch_pokemon("pikachu")

    assert pokemon == Pokemon(name="pikachu", height=4, weight=60)
    assert str(seen[0].url) == "https://pokeapi.test/api/v2/pokemon/pikachu"


@pytest.mark.asyncio
async def test_fetch_pokemon_lowercases_and_strips_name():
    seen: list[httpx.Request] = []
    client = _client(_make_mock_transport(json_data=_pokemon_body(), seen=seen))

    await client.fetch_pokemon("  PikaChu ")

    assert seen[0].url.path == "/api/v2/pokemon/pikachu"


def test_build_url_quotes_path_characters():
    client = PokeApiClient(base_url="https://pokeapi.test/api/v2")
    assert client.build_url("mr mime/x") == "https://pokeapi.test/api/v2/pokemon/mr%20mime%2Fx"


@pytest.mark.asyncio
async def test_unknown_name_raises_not_found():
    client = _client(_make_mock_transport(status_code=404, text="Not Found"))

    with pytest.raises(PokemonFetchError) as exc_info:
        await client.fetch_pokemon("missingno")

    assert exc_info.value.kind is FetchErrorKind.NOT_FOUND
    assert exc_info.value.status_code == 404
    assert exc_info.value.name == "missingno"


@pytest.mark.asyncio
async def test_server_error_raises_network_error():
    client = _client(_make_mock_transport(status_code=503, text="unavailable"))

    with pytest.raises(PokemonFetchError) as exc_info:
        await client.fetch_pokemon("pikachu")

    assert exc_info.value.kind is FetchErrorKind.NETWORK
    assert exc_info.value.status_code == 503


@pytest.mark.asyncio
async def test_transport_failure_raises_network_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = _client(httpx.MockTransport(handler))

    with pytest.raises(PokemonFetchError) as exc_info:
        await client.fetch_pokemon("pikachu")

    assert exc_info.value.kind is FetchErrorKind.NETWORK
    assert exc_info.value.status_code is None
    assert "ConnectError" in exc_info.value.message


@pytest.mark.asyncio
async def test_non_json_body_raises_decode_error():
    client = _client(_make_mock_transport(text="<html>oops</html>"))

    with pytest.raises(PokemonFetchError) as exc_info:
        await client.fetch_pokemon("pikachu")

    assert exc_info.value.kind is FetchErrorKind.DECODE


@pytest.mark.asyncio
async def test_missing_fields_raise_decode_error():
    client = _client(_make_mock_transport(json_data={"name": "pikachu", "height": 4}))

    with pytest.raises(PokemonFetchError) as exc_info:
        await client.fetch_pokemon("pikachu")

    assert exc_info.value.kind is FetchErrorKind.DECODE


@pytest.mark.asyncio
async def test_injected_client_is_left_open():
    http_client = httpx.AsyncClient(transport=_make_mock_transport(json_data=_pokemon_body()))
    client = PokeApiClient(http_client=http_client)

    await client.fetch_pokemon("pikachu")

    assert http_client.is_closed is False
    await http_client.aclose()
