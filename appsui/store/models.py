"""Record helpers shared by every persisted value type."""

import typing
import uuid
from dataclasses import fields
from typing import Any, TypeVar

__all__ = ["JsonRecord", "new_id", "camel_case"]

R = TypeVar("R", bound="JsonRecord")

# Scalar annotations checked on decode; anything else is passed through.
_SCALARS = (str, int, float, bool)


def new_id() -> str:
    """Return a freshly generated, string-encoded unique identifier."""
    return str(uuid.uuid4()).upper()


def camel_case(name: str) -> str:
    """email_address → emailAddress"""
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _matches(value: Any, annotation: Any) -> bool:
    if annotation is float:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if annotation is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, annotation)


class JsonRecord:
    """
    Mixin for dataclass records encoded as JSON objects.

    Field names are written in camelCase (``email_address`` → ``emailAddress``)
    so files stay compatible with the keyed-object layout the screens have
    always used.  Decoding is strict: a missing key or a scalar of the wrong
    type raises, and the owning store treats that as an undecodable file.

    Subclasses with nested values override ``to_dict`` / ``from_dict``.
    """

    # Dataclass field names excluded from the JSON object
    _json_exclude: typing.ClassVar[frozenset] = frozenset()

    def to_dict(self) -> dict:
        return {
            camel_case(f.name): getattr(self, f.name)
            for f in fields(self)  # type: ignore[arg-type]
            if f.name not in self._json_exclude
        }

    @classmethod
    def from_dict(cls: type[R], data: dict) -> R:
        if not isinstance(data, dict):
            raise TypeError(f"{cls.__name__} expects a JSON object, got {type(data).__name__}")
        hints = typing.get_type_hints(cls)
        kwargs: dict[str, Any] = {}
        for f in fields(cls):  # type: ignore[arg-type]
            if f.name in cls._json_exclude:
                continue
            key = camel_case(f.name)
            if key not in data:
                raise KeyError(f"{cls.__name__}: missing key {key!r}")
            value = data[key]
            annotation = hints.get(f.name)
            if annotation in _SCALARS and not _matches(value, annotation):
                raise TypeError(
                    f"{cls.__name__}.{f.name}: expected {annotation.__name__}, "
                    f"got {type(value).__name__}"
                )
            kwargs[f.name] = float(value) if annotation is float else value
        return cls(**kwargs)
