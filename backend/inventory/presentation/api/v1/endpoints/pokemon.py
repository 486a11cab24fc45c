"""Pokémon lookup endpoint (the Manage tab demo)."""

from fastapi import APIRouter, Depends, HTTPException, status

from inventory.application.schemas import PokemonLookupResponse, PokemonSchema
from inventory.application.services import PokemonLookupService
from inventory.domain.entities import FetchErrorKind
from inventory.infrastructure.dependencies import get_pokemon_lookup_service

router = APIRouter(prefix="/pokemon", tags=["Pokemon"])

_ERROR_STATUS = {
    FetchErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    FetchErrorKind.DECODE: status.HTTP_502_BAD_GATEWAY,
    FetchErrorKind.NETWORK: status.HTTP_502_BAD_GATEWAY,
}


@router.get("/{name}", response_model=PokemonLookupResponse)
async def lookup_pokemon(
    name: str,
    service: PokemonLookupService = Depends(get_pokemon_lookup_service),
) -> PokemonLookupResponse:
    """Fetch a Pokémon's name, height and weight from PokéAPI.

    Failures answer with the lookup outcome in ``detail`` so the client can
    show "No data fetched" and the reason.
    """
    lookup = await service.lookup(name)
    response = PokemonLookupResponse(
        query=lookup.query,
        status=lookup.status.value,
        pokemon=PokemonSchema.model_validate(lookup.pokemon) if lookup.pokemon else None,
        error=lookup.error.value if lookup.error else None,
        message=lookup.message,
    )
    if lookup.error is not None:
        raise HTTPException(
            status_code=_ERROR_STATUS[lookup.error],
            detail=response.model_dump(),
        )
    return response
