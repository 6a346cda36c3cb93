"""
Storage backends — where a LocalCollectionStore keeps its encoded collection.

FileBackend      — one JSON file per store (documents directory)
DefaultsBackend  — one key inside a shared JSON "defaults" object file

Both replace their file atomically: the payload is written to a temporary
file in the destination directory, flushed and fsync'd, then moved over the
destination with os.replace().  A crash mid-write leaves either the old file
or the new one, never a partial one.
"""

import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional

from appsui.exceptions import StorageDecodeError, StorageWriteError

__all__ = ["StorageBackend", "FileBackend", "DefaultsBackend", "atomic_write_text"]

logger = logging.getLogger(__name__)


def atomic_write_text(path: Path, text: str) -> None:
    """
    Replace *path* with *text* in a single atomic rename.

    Raises:
        StorageWriteError: directory not creatable, disk full, text not encodable…
    """
    tmp_name: Optional[str] = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as fh:
            tmp_name = fh.name
            fh.write(text)
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_name, path)
        tmp_name = None
    except (OSError, UnicodeError) as exc:
        raise StorageWriteError(f"Could not write {path}: {exc}") from exc
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except OSError:
                logger.debug("Could not remove temporary file %s", tmp_name)


def _read_json(path: Path) -> Optional[Any]:
    """Parsed JSON content of *path*, or None if the file does not exist."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as exc:
        raise StorageDecodeError(f"Could not read {path}: {exc}") from exc
    try:
        return json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise StorageDecodeError(f"{path} is not valid JSON: {exc}") from exc


class StorageBackend(ABC):
    """Reads and atomically replaces one durable, JSON-encoded value."""

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable location, used in log messages."""

    @abstractmethod
    def read(self) -> Optional[Any]:
        """
        Return the stored JSON value, or None if nothing has been stored yet.

        Raises:
            StorageDecodeError: content exists but cannot be read or parsed.
        """

    @abstractmethod
    def write(self, payload: Any) -> None:
        """
        Replace the stored value with *payload*.

        Raises:
            StorageWriteError: the durable location could not be replaced.
        """


class FileBackend(StorageBackend):
    """One JSON document per file."""

    def __init__(self, path: Path, indent: Optional[int] = None) -> None:
        self.path   = Path(path).expanduser()
        self.indent = indent

    @property
    def location(self) -> str:
        return str(self.path)

    def read(self) -> Optional[Any]:
        return _read_json(self.path)

    def write(self, payload: Any) -> None:
        try:
            text = json.dumps(payload, indent=self.indent, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise StorageWriteError(f"Could not encode payload for {self.path}: {exc}") from exc
        atomic_write_text(self.path, text)


class DefaultsBackend(StorageBackend):
    """
    One key of a shared JSON object file (the "user defaults" of the app).

    Several backends may point at the same file as long as each owns a
    distinct key; a write re-reads the object so sibling keys are preserved.
    """

    def __init__(self, path: Path, key: str, indent: Optional[int] = None) -> None:
        self.path   = Path(path).expanduser()
        self.key    = key
        self.indent = indent

    @property
    def location(self) -> str:
        return f"{self.path}[{self.key!r}]"

    def _load_object(self) -> Optional[dict]:
        data = _read_json(self.path)
        if data is None:
            return None
        if not isinstance(data, dict):
            raise StorageDecodeError(f"{self.path} does not hold a JSON object")
        return data

    def read(self) -> Optional[Any]:
        data = self._load_object()
        if data is None:
            return None
        return data.get(self.key)

    def write(self, payload: Any) -> None:
        try:
            data = self._load_object() or {}
        except StorageDecodeError:
            logger.warning("Defaults file %s is unreadable; rewriting it", self.path)
            data = {}
        data[self.key] = payload
        try:
            text = json.dumps(data, indent=self.indent, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise StorageWriteError(f"Could not encode {self.location}: {exc}") from exc
        atomic_write_text(self.path, text)
