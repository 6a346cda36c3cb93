"""
LocalCollectionStore — an ordered collection of identifiable records mirrored
to one durable location.

Usage::

    store = LocalCollectionStore(FileBackend(docs / "Cards"), Card)

    store.prepend(Card(prompt="2 + 2", answer="4"))   # persisted immediately
    store.remove_at({0})
    store.replace(card.id, new_card)

    unsubscribe = store.subscribe(lambda records: render(records))

Contract
────────
* The collection is loaded once, in the constructor.  A missing or
  undecodable location yields an empty collection; nothing is raised.
* Every mutation updates memory, then re-serialises the *whole* collection
  and replaces the durable file atomically (O(n) per mutation, one write per
  mutation, no batching).  Collections here are small and edited at human
  speed; larger ones should not use this store.
* A failed write is logged and kept in ``last_error``; it is never raised.
  The in-memory collection stays authoritative until the process ends.
* Caller mistakes (out-of-range offset, duplicate id) raise and leave both
  memory and file untouched.
* One owner per store.  No locking; calls are expected to be sequential.
"""

import logging
from operator import attrgetter
from typing import Any, Callable, Generic, Hashable, Iterable, Iterator, Optional, TypeVar

from appsui.exceptions import (
    DuplicateIdError,
    OffsetOutOfRangeError,
    StorageDecodeError,
    StorageWriteError,
)
from appsui.store.backends import StorageBackend

__all__ = ["LocalCollectionStore", "Subscriber"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

Subscriber = Callable[[list], None]


class LocalCollectionStore(Generic[T]):
    """
    In-memory ordered collection of records of one type, persisted on change.

    Args:
        backend:     where the encoded collection lives.
        record_type: class providing ``from_dict`` (and instances ``to_dict``);
                     optional when *decode* and *encode* are given.
        decode:      JSON value → record; overrides ``record_type.from_dict``.
        encode:      record → JSON value; overrides ``record.to_dict()``.
        id_of:       record → identifier (default: ``record.id``).
        keep:        predicate applied on load; records failing it are dropped
                     from memory (the file is rewritten on the next mutation).
    """

    def __init__(
        self,
        backend: StorageBackend,
        record_type: Optional[type] = None,
        *,
        decode: Optional[Callable[[Any], T]] = None,
        encode: Optional[Callable[[T], Any]] = None,
        id_of:  Optional[Callable[[T], Hashable]] = None,
        keep:   Optional[Callable[[T], bool]] = None,
    ) -> None:
        if decode is None:
            if record_type is None:
                raise TypeError("LocalCollectionStore needs record_type or decode")
            decode = record_type.from_dict
        self._backend = backend
        self._decode  = decode
        self._encode  = encode or (lambda record: record.to_dict())
        self._id_of   = id_of or attrgetter("id")
        self._keep    = keep

        self._records:     list[T]          = []
        self._subscribers: list[Subscriber] = []
        self.last_error:   Optional[Exception] = None

        self.load()

    # ── Loading ───────────────────────────────────────────────────────────

    def _decode_all(self, raw: Any) -> list[T]:
        if not isinstance(raw, list):
            raise StorageDecodeError(f"{self._backend.location}: expected a JSON array")
        records: list[T] = []
        seen: set = set()
        for position, item in enumerate(raw):
            try:
                record = self._decode(item)
            except (KeyError, TypeError, ValueError, AttributeError) as exc:
                raise StorageDecodeError(
                    f"{self._backend.location}: item {position} is not decodable: {exc}"
                ) from exc
            if self._keep is not None and not self._keep(record):
                logger.debug("%s: skipping item %d on load", self._backend.location, position)
                continue
            key = self._id_of(record)
            if key in seen:
                logger.warning(
                    "%s: dropping duplicate id %r at position %d",
                    self._backend.location, key, position,
                )
                continue
            seen.add(key)
            records.append(record)
        return records

    def load(self) -> list[T]:
        """
        (Re)load the collection from the backend, discarding in-memory changes.

        Never raises for storage problems: absent or undecodable content
        results in an empty collection.
        """
        try:
            raw = self._backend.read()
            if raw is None:
                logger.debug("%s: nothing stored yet", self._backend.location)
                self._records = []
            else:
                self._records = self._decode_all(raw)
        except StorageDecodeError as exc:
            logger.warning("%s: starting empty (%s)", self._backend.location, exc)
            self._records = []
        logger.debug("%s: loaded %d record(s)", self._backend.location, len(self._records))
        return self.snapshot()

    # ── Read access ───────────────────────────────────────────────────────

    def snapshot(self) -> list[T]:
        """Return the current collection as a new list."""
        return list(self._records)

    @property
    def records(self) -> list[T]:
        return self.snapshot()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[T]:
        return iter(self.snapshot())

    def __getitem__(self, index: int) -> T:
        return self._records[index]

    def index_of(self, record_id: Hashable) -> Optional[int]:
        """Position of the record with *record_id*, or None."""
        for index, record in enumerate(self._records):
            if self._id_of(record) == record_id:
                return index
        return None

    def get(self, record_id: Hashable) -> Optional[T]:
        index = self.index_of(record_id)
        return None if index is None else self._records[index]

    def contains(self, record_id: Hashable) -> bool:
        return self.index_of(record_id) is not None

    def __contains__(self, record_id: Hashable) -> bool:
        return self.contains(record_id)

    # ── Mutation ──────────────────────────────────────────────────────────

    def _check_new(self, record: T) -> None:
        if self.contains(self._id_of(record)):
            raise DuplicateIdError(f"id {self._id_of(record)!r} already in collection")

    def append(self, record: T) -> list[T]:
        """Add *record* at the end and persist."""
        self._check_new(record)
        self._records.append(record)
        return self._commit()

    def prepend(self, record: T) -> list[T]:
        """Add *record* at the start and persist."""
        self._check_new(record)
        self._records.insert(0, record)
        return self._commit()

    def remove_at(self, offsets: Iterable[int]) -> list[T]:
        """
        Remove the records at *offsets* and persist.

        Raises:
            OffsetOutOfRangeError: any offset is outside [0, len); nothing is removed.
        """
        wanted = set(offsets)
        for offset in wanted:
            if not 0 <= offset < len(self._records):
                raise OffsetOutOfRangeError(
                    f"offset {offset} out of range for collection of {len(self._records)}"
                )
        if not wanted:
            return self.snapshot()
        self._records = [r for i, r in enumerate(self._records) if i not in wanted]
        return self._commit()

    def remove_by_id(self, record_id: Hashable) -> list[T]:
        """Remove the record with *record_id* and persist; absent id is a no-op."""
        index = self.index_of(record_id)
        if index is None:
            return self.snapshot()
        del self._records[index]
        return self._commit()

    def replace(self, record_id: Hashable, new_record: T) -> list[T]:
        """
        Overwrite the record with *record_id* in place and persist.

        *new_record* may carry a different id as long as no other record
        uses it.  Absent *record_id* is a no-op.
        """
        index = self.index_of(record_id)
        if index is None:
            return self.snapshot()
        new_id = self._id_of(new_record)
        if new_id != record_id and self.contains(new_id):
            raise DuplicateIdError(f"id {new_id!r} already in collection")
        self._records[index] = new_record
        return self._commit()

    # ── Persistence ───────────────────────────────────────────────────────

    def persist(self) -> bool:
        """
        Write the whole collection to the backend.

        Returns True on success.  Failures are logged and stored in
        ``last_error``; they are never raised.
        """
        payload = [self._encode(record) for record in self._records]
        try:
            self._backend.write(payload)
        except StorageWriteError as exc:
            logger.warning("Unable to save data: %s", exc)
            self.last_error = exc
            return False
        self.last_error = None
        return True

    def _commit(self) -> list[T]:
        self.persist()
        snapshot = self.snapshot()
        for callback in list(self._subscribers):
            callback(snapshot)
        return snapshot

    # ── Observation ───────────────────────────────────────────────────────

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Call *callback(snapshot)* after every mutation.

        Returns a function that removes the subscription.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe
