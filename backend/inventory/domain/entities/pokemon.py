"""Domain entities for the Pokémon lookup demo."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Pokemon:
    """The subset of a Pokémon the Manage screen displays."""

    name: str
    height: int
    weight: int


class LookupStatus(str, Enum):
    FETCHED = "fetched"
    NO_DATA = "no_data"


class FetchErrorKind(str, Enum):
    """Why a Pokémon fetch produced no data."""

    NETWORK = "network"
    NOT_FOUND = "not_found"
    DECODE = "decode"


@dataclass(frozen=True)
class PokemonLookup:
    """Outcome of a lookup as the client sees it: data, or "No data fetched"."""

    query: str
    status: LookupStatus
    pokemon: Pokemon | None = None
    error: FetchErrorKind | None = None
    message: str | None = None

    @property
    def has_data(self) -> bool:
        return self.status is LookupStatus.FETCHED
