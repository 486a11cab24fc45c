"""In-memory record store — the only owner of a record collection.

Records live in a plain list in insertion order. Lookups are linear scans,
which is fine for the handful of records a client manages per session.
Nothing is written to disk; the collection disappears with the process.
"""

import copy
import logging
import threading
import weakref
from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar
from uuid import uuid4

from inventory.application.interfaces import RecordStore, StoreListener, Subscription
from inventory.domain.entities import ChangeKind, StoreChange

logger = logging.getLogger(__name__)

R = TypeVar("R")

RecordFactory = Callable[..., R]
IdFactory = Callable[[], str]


def _new_id() -> str:
    return str(uuid4())


class _ListenerSubscription(Subscription):
    """Ties a listener to the store that notifies it."""

    def __init__(self, store: "InMemoryRecordStore[Any]", listener: StoreListener, weak: bool):
        self._store_ref = weakref.ref(store)
        self._listener_ref: Callable[[], StoreListener | None]
        if not weak:
            self._listener_ref = lambda: listener
        elif hasattr(listener, "__self__") and hasattr(listener, "__func__"):
            self._listener_ref = weakref.WeakMethod(listener)  # type: ignore[arg-type]
        else:
            self._listener_ref = weakref.ref(listener)
        self._closed = False

    @property
    def listener(self) -> StoreListener | None:
        if self._closed:
            return None
        return self._listener_ref()

    @property
    def active(self) -> bool:
        return self.listener is not None

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        store = self._store_ref()
        if store is not None:
            store._detach(self)


class InMemoryRecordStore(RecordStore[R], Generic[R]):
    """Implements the RecordStore port over a list guarded by a re-entrant lock.

    Args:
        factory: Builds a record from ``id=...`` plus the fields given to ``add``.
            The record type must offer ``update(**fields)`` for ``edit``.
        name: Label used in log messages and change events.
        id_factory: Produces candidate ids; ids already handed out are skipped
            so an id is never reused, even after its record is deleted.
    """

    def __init__(
        self,
        factory: RecordFactory[R],
        *,
        name: str = "records",
        id_factory: IdFactory = _new_id,
    ):
        self._factory = factory
        self._name = name
        self._id_factory = id_factory
        self._records: list[R] = []
        self._issued_ids: set[str] = set()
        self._subscriptions: list[_ListenerSubscription] = []
        self._version = 0
        self._lock = threading.RLock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def version(self) -> int:
        """Number of mutations applied so far."""
        return self._version

    # ── Mutations ───────────────────────────────────────────────────

    def add(self, **fields: Any) -> str:
        with self._lock:
            record_id = self._next_id()
            record = self._factory(id=record_id, **fields)
            self._records.append(record)
            change = self._record_change(ChangeKind.ADDED, (record_id,))

        logger.debug("%s: added %s (%d total)", self._name, record_id, change.count)
        self._notify(change)
        return record_id

    def edit(self, record_id: str, **fields: Any) -> bool:
        with self._lock:
            record = self._find(record_id)
            if record is None:
                logger.debug("%s: edit skipped, %s not found", self._name, record_id)
                return False
            record.update(**fields)  # type: ignore[attr-defined]
            change = self._record_change(ChangeKind.EDITED, (record_id,))

        logger.debug("%s: edited %s", self._name, record_id)
        self._notify(change)
        return True

    def delete(self, record_id: str) -> int:
        with self._lock:
            kept = [r for r in self._records if r.id != record_id]  # type: ignore[attr-defined]
            removed = len(self._records) - len(kept)
            if not removed:
                logger.debug("%s: delete skipped, %s not found", self._name, record_id)
                return 0
            self._records = kept
            change = self._record_change(ChangeKind.DELETED, (record_id,))

        logger.debug("%s: deleted %s (%d removed)", self._name, record_id, removed)
        self._notify(change)
        return removed

    # ── Subscriptions ───────────────────────────────────────────────

    def subscribe(self, listener: StoreListener, *, weak: bool = False) -> Subscription:
        subscription = _ListenerSubscription(self, listener, weak)
        with self._lock:
            self._subscriptions.append(subscription)
        return subscription

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return sum(1 for s in self._subscriptions if s.active)

    def _detach(self, subscription: _ListenerSubscription) -> None:
        with self._lock:
            if subscription in self._subscriptions:
                self._subscriptions.remove(subscription)

    def _notify(self, change: StoreChange) -> None:
        """Call every live listener; drop the ones whose owner is gone."""
        with self._lock:
            subscriptions = list(self._subscriptions)

        for subscription in subscriptions:
            listener = subscription.listener
            if listener is None:
                self._detach(subscription)
                continue
            try:
                listener(change)
            except Exception:
                logger.exception(
                    "%s: listener %r failed on %s event",
                    self._name,
                    listener,
                    change.kind.value,
                )

    # ── Reads ───────────────────────────────────────────────────────

    def get(self, record_id: str) -> R | None:
        with self._lock:
            record = self._find(record_id)
            return copy.copy(record) if record is not None else None

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __iter__(self) -> Iterator[R]:
        return iter(self.list())

    # ── Helpers (call with the lock held) ───────────────────────────

    def _next_id(self) -> str:
        record_id = self._id_factory()
        while record_id in self._issued_ids:
            record_id = self._id_factory()
        self._issued_ids.add(record_id)
        return record_id

    def _find(self, record_id: str) -> R | None:
        for record in self._records:
            if record.id == record_id:  # type: ignore[attr-defined]
                return record
        return None

    def _record_change(self, kind: ChangeKind, record_ids: tuple[str, ...]) -> StoreChange:
        self._version += 1
        return StoreChange(
            kind=kind,
            record_ids=record_ids,
            records=self._snapshot(),
            version=self._version,
        )

    def _snapshot(self) -> tuple[R, ...]:
        return tuple(copy.copy(r) for r in self._records)

    def list(self) -> tuple[R, ...]:
        with self._lock:
            return self._snapshot()
