"""Abstract record store interface (port) shared by users and products."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from inventory.domain.entities import StoreChange

R = TypeVar("R")

StoreListener = Callable[[StoreChange], None]


class Subscription(ABC):
    """Handle returned by ``RecordStore.subscribe``; closing it detaches the listener."""

    @abstractmethod
    def close(self) -> None:
        ...

    @property
    @abstractmethod
    def active(self) -> bool:
        ...

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class RecordStore(ABC, Generic[R]):
    """Port — the single owner of an ordered collection of one record kind.

    Records are created, edited and removed only through this interface;
    every successful mutation is announced to subscribers as a StoreChange.
    """

    @abstractmethod
    def add(self, **fields: Any) -> str:
        """Create a record from ``fields`` with a fresh id, append it, return the id."""
        ...

    @abstractmethod
    def edit(self, record_id: str, **fields: Any) -> bool:
        """Overwrite the mutable fields of a record. Returns False if no record matches."""
        ...

    @abstractmethod
    def delete(self, record_id: str) -> int:
        """Remove every record with this id. Returns how many were removed."""
        ...

    @abstractmethod
    def list(self) -> tuple[R, ...]:
        """Snapshot of the collection in insertion order."""
        ...

    @abstractmethod
    def get(self, record_id: str) -> R | None:
        """Snapshot of a single record, or None."""
        ...

    @abstractmethod
    def subscribe(self, listener: StoreListener, *, weak: bool = False) -> Subscription:
        """Register a listener for store changes."""
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...

    def __contains__(self, record_id: object) -> bool:
        return isinstance(record_id, str) and self.get(record_id) is not None
