"""
Project-wide custom exception hierarchy.
All modules raise subclasses of AppSUIBaseError — never bare Exception.
"""

__all__ = [
    "AppSUIBaseError",
    "StoreError",
    "StorageDecodeError",
    "StorageWriteError",
    "DuplicateIdError",
    "OffsetOutOfRangeError",
    "BundleError",
    "ResourceNotFoundError",
    "ResourceDecodeError",
    "UnknownFacilityError",
    "MissingAstronautError",
    "FetchError",
    "NetworkError",
    "PayloadDecodeError",
]


class AppSUIBaseError(Exception):
    """Root exception for all appsui errors."""


# ── Store ─────────────────────────────────────────────────────────────────────

class StoreError(AppSUIBaseError):
    """Base class for local collection store errors."""


class StorageDecodeError(StoreError):
    """Raised by a backend when stored content is not a valid collection."""


class StorageWriteError(StoreError):
    """Raised by a backend when the durable location cannot be replaced."""


class DuplicateIdError(StoreError):
    """Raised when a record is added whose id is already in the collection."""


class OffsetOutOfRangeError(StoreError, IndexError):
    """Raised when remove_at() receives an offset outside the collection."""


# ── Bundled resources ─────────────────────────────────────────────────────────

class BundleError(AppSUIBaseError):
    """Base class for bundled (read-only) resource errors."""


class ResourceNotFoundError(BundleError):
    """Raised when a bundled resource file does not exist."""


class ResourceDecodeError(BundleError):
    """Raised when a bundled resource cannot be decoded."""


class UnknownFacilityError(BundleError, KeyError):
    """Raised when a resort lists a facility with no icon/description entry."""


class MissingAstronautError(BundleError):
    """Raised when a mission crew entry names an unknown astronaut."""


# ── Network ───────────────────────────────────────────────────────────────────

class FetchError(AppSUIBaseError):
    """Base class for network fetch errors."""


class NetworkError(FetchError):
    """Raised on transport failure or a non-2xx HTTP status."""


class PayloadDecodeError(FetchError):
    """Raised when a response body cannot be decoded."""
