"""
store — local JSON persistence shared by every screen.

Public API
──────────
LocalCollectionStore — ordered, identifiable records mirrored to one location
FavoritesStore       — persisted set of identifiers
FileBackend          — one JSON file per store
DefaultsBackend      — one key of a shared defaults file
JsonRecord           — dataclass mixin for camelCase JSON objects
new_id               — fresh string-encoded unique identifier
"""

from appsui.store.backends import DefaultsBackend, FileBackend, StorageBackend
from appsui.store.collection import LocalCollectionStore
from appsui.store.favorites import FavoritesStore
from appsui.store.models import JsonRecord, new_id

__all__ = [
    "LocalCollectionStore",
    "FavoritesStore",
    "StorageBackend",
    "FileBackend",
    "DefaultsBackend",
    "JsonRecord",
    "new_id",
]
