"""
Bucket list — saved map places plus a place editor with nearby lookups.

Public API
──────────
Location               — one saved place
BucketListViewModel    — saved places (``SavedPlaces``) and the selection
EditPlaceViewModel     — edits one place; fetches nearby Wikipedia pages
"""

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from appsui.config import AppConfig
from appsui.exceptions import FetchError
from appsui.net.wikipedia import Page, fetch_nearby
from appsui.store import FileBackend, JsonRecord, LocalCollectionStore, new_id
from appsui.viewmodels.state import LoadingState

__all__ = ["Location", "BucketListViewModel", "EditPlaceViewModel", "SAVE_FILE"]

logger = logging.getLogger(__name__)

SAVE_FILE = "SavedPlaces"

# Initial map centre
_DEFAULT_CENTER = (50.0, 0.0)


@dataclass(frozen=True)
class Location(JsonRecord):
    name:        str
    description: str
    latitude:    float
    longitude:   float
    id:          str = field(default_factory=new_id)

    @property
    def coordinate(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


class BucketListViewModel:
    """
    Attributes
    ──────────
    locations      — store of saved Location records
    map_center     — (lat, lon) where new places are dropped
    selected_place — place currently opened in the editor, or None
    """

    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self.config = config or AppConfig.from_env()
        backend = FileBackend(self.config.document(SAVE_FILE), indent=self.config.json_indent)
        self.locations: LocalCollectionStore[Location] = LocalCollectionStore(backend, Location)
        self.map_center: tuple[float, float] = _DEFAULT_CENTER
        self.selected_place: Optional[Location] = None

    def add_location(self, latitude: Optional[float] = None, longitude: Optional[float] = None) -> Location:
        """Drop a "New location" pin (at the map centre unless given)."""
        lat, lon = self.map_center
        location = Location(
            name="New location",
            description="",
            latitude=lat if latitude is None else latitude,
            longitude=lon if longitude is None else longitude,
        )
        self.locations.append(location)
        return location

    def select(self, location: Optional[Location]) -> None:
        self.selected_place = location

    def update(self, location: Location) -> None:
        """
        Replace the selected place with *location* (which may carry a new id).

        Without a selection this does nothing.
        """
        if self.selected_place is None:
            return
        self.locations.replace(self.selected_place.id, location)
        self.selected_place = None


class EditPlaceViewModel:
    """
    Attributes
    ──────────
    location       — the place being edited (unchanged until saved)
    name           — edited name
    description    — edited description
    loading_state  — LOADING until fetch_nearby() completes
    pages          — nearby pages, sorted by title
    """

    def __init__(
        self,
        location: Location,
        config: Optional[AppConfig] = None,
        fetcher: Optional[Callable[[float, float], list[Page]]] = None,
    ) -> None:
        self.config = config or AppConfig.from_env()
        self.location = location
        self.name = location.name
        self.description = location.description
        self.loading_state = LoadingState.LOADING
        self.pages: list[Page] = []
        self._fetcher = fetcher or self._default_fetcher

    def _default_fetcher(self, latitude: float, longitude: float) -> list[Page]:
        return fetch_nearby(
            latitude, longitude,
            url=self.config.wikipedia_url,
            timeout=self.config.http_timeout,
        )

    def fetch_nearby(self) -> LoadingState:
        """Load nearby pages once; any fetch failure ends in FAILED."""
        try:
            pages = self._fetcher(self.location.latitude, self.location.longitude)
        except FetchError as exc:
            logger.warning("Nearby lookup failed: %s", exc)
            self.loading_state = LoadingState.FAILED
            return self.loading_state
        self.pages = sorted(pages)
        self.loading_state = LoadingState.LOADED
        return self.loading_state

    def edited_location(self) -> Location:
        """The place to save: edited fields and a fresh id."""
        return dataclasses.replace(
            self.location,
            id=new_id(),
            name=self.name,
            description=self.description,
        )
