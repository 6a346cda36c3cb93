"""FavoritesStore — a persisted set of identifiers (e.g. favourite resort ids)."""

import logging
from typing import Callable

from appsui.store.backends import StorageBackend
from appsui.store.collection import LocalCollectionStore

__all__ = ["FavoritesStore"]

logger = logging.getLogger(__name__)


def _decode_identifier(value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"favourite identifiers are strings, got {type(value).__name__}")
    return value


class FavoritesStore:
    """
    Identifier set backed by a LocalCollectionStore[str].

    Insertion order is kept so the file content is stable between saves.
    """

    def __init__(self, backend: StorageBackend) -> None:
        self._store: LocalCollectionStore[str] = LocalCollectionStore(
            backend,
            decode=_decode_identifier,
            encode=lambda identifier: identifier,
            id_of=lambda identifier: identifier,
        )

    def contains(self, identifier: str) -> bool:
        return self._store.contains(identifier)

    def __contains__(self, identifier: str) -> bool:
        return self.contains(identifier)

    def __len__(self) -> int:
        return len(self._store)

    def add(self, identifier: str) -> None:
        """Mark *identifier* as favourite; already present is a no-op."""
        if self._store.contains(identifier):
            return
        self._store.append(identifier)
        logger.debug("Favourite added: %s", identifier)

    def remove(self, identifier: str) -> None:
        """Unmark *identifier*; absent is a no-op."""
        self._store.remove_by_id(identifier)

    def toggle(self, identifier: str) -> bool:
        """Flip membership; returns the new state."""
        if self.contains(identifier):
            self.remove(identifier)
            return False
        self.add(identifier)
        return True

    def identifiers(self) -> list[str]:
        return self._store.snapshot()

    def subscribe(self, callback: Callable[[list], None]) -> Callable[[], None]:
        return self._store.subscribe(callback)

    @property
    def last_error(self):
        return self._store.last_error
