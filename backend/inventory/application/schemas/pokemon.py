"""Pydantic schemas for the Pokémon lookup demo."""

from pydantic import BaseModel, ConfigDict


class PokemonPayload(BaseModel):
    """Shape of the upstream JSON body; keys beyond these are ignored."""

    model_config = ConfigDict(extra="ignore")

    name: str
    height: int
    weight: int


class PokemonSchema(BaseModel):
    name: str
    height: int
    weight: int

    model_config = {"from_attributes": True}


class PokemonLookupResponse(BaseModel):
    """What the Manage screen renders: the Pokémon, or why there is no data."""

    query: str
    status: str
    pokemon: PokemonSchema | None = None
    error: str | None = None
    message: str | None = None
