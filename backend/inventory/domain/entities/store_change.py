"""Change notification published by record stores."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ChangeKind(str, Enum):
    ADDED = "added"
    EDITED = "edited"
    DELETED = "deleted"


@dataclass(frozen=True)
class StoreChange:
    """One mutation of a store.

    ``records`` is a snapshot of the whole collection right after the
    mutation; ``version`` increases by one per mutation so listeners can
    order events coming from different threads.
    """

    kind: ChangeKind
    record_ids: tuple[str, ...]
    records: tuple[Any, ...]
    version: int

    @property
    def count(self) -> int:
        return len(self.records)
