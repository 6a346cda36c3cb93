"""
Ski resorts — browse bundled resorts, sort, search, and keep favourites.

Resorts come from the bundled ``resorts.json``; favourites (resort ids) are
persisted to ``Favorites`` in the documents directory.
"""

import dataclasses
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from appsui.bundle import decode_resource
from appsui.config import AppConfig
from appsui.exceptions import UnknownFacilityError
from appsui.store import FavoritesStore, FileBackend, JsonRecord

__all__ = [
    "Resort",
    "Facility",
    "SortOrder",
    "ResortsViewModel",
    "load_resorts",
    "SAVE_FILE",
]

logger = logging.getLogger(__name__)

SAVE_FILE = "Favorites"

_FACILITY_ICONS = {
    "Accommodation": "house",
    "Beginners":     "1.circle",
    "Cross-country": "map",
    "Eco-friendly":  "leaf.arrow.circlepath",
    "Family":        "person.3",
}

_FACILITY_DESCRIPTIONS = {
    "Accommodation": "This resort has popular on-site accommodation.",
    "Beginners":     "This resort has lots of ski schools.",
    "Cross-country": "This resort has many cross-country ski routes.",
    "Eco-friendly":  "This resort has won an award for environmental friendliness.",
    "Family":        "This resort is popular with families.",
}

_SIZE_LABELS = {1: "Small", 2: "Average"}


@dataclass(frozen=True)
class Facility:
    name: str

    @property
    def icon(self) -> str:
        try:
            return _FACILITY_ICONS[self.name]
        except KeyError:
            raise UnknownFacilityError(f"Unknown facility type: {self.name}") from None

    @property
    def description(self) -> str:
        try:
            return _FACILITY_DESCRIPTIONS[self.name]
        except KeyError:
            raise UnknownFacilityError(f"Unknown facility type: {self.name}") from None


@dataclass(frozen=True)
class Resort(JsonRecord):
    id:           str
    name:         str
    country:      str
    description:  str
    image_credit: str
    price:        int
    size:         int
    snow_depth:   int
    elevation:    int
    runs:         int
    facilities:   tuple = ()

    @classmethod
    def from_dict(cls, data: dict) -> "Resort":
        resort = super().from_dict(data)
        facilities = resort.facilities
        if not isinstance(facilities, list) or not all(isinstance(f, str) for f in facilities):
            raise TypeError("Resort.facilities must be a list of strings")
        return dataclasses.replace(resort, facilities=tuple(facilities))

    @property
    def facility_types(self) -> list[Facility]:
        return [Facility(name) for name in self.facilities]

    @property
    def size_label(self) -> str:
        return _SIZE_LABELS.get(self.size, "Large")

    @property
    def price_label(self) -> str:
        return "$" * self.price


def load_resorts(data_dir: Optional[Path] = None) -> list[Resort]:
    """Decode the bundled resort list (raises BundleError on a bad bundle)."""
    return decode_resource("resorts.json", lambda raw: [Resort.from_dict(r) for r in raw], data_dir)


class SortOrder(str, Enum):
    NONE       = "none"
    ALPHABETIC = "alphabetic"
    COUNTRY    = "country"


class ResortsViewModel:
    """
    Attributes
    ──────────
    resorts      — every bundled resort, bundle order
    order        — SortOrder applied before filtering
    search_text  — case-insensitive substring matched against the name
    favorites    — FavoritesStore of resort ids
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        resorts: Optional[list[Resort]] = None,
    ) -> None:
        self.config = config or AppConfig.from_env()
        self.resorts: list[Resort] = list(resorts) if resorts is not None else load_resorts()
        self.order: SortOrder = SortOrder.NONE
        self.search_text: str = ""
        backend = FileBackend(self.config.document(SAVE_FILE), indent=self.config.json_indent)
        self.favorites = FavoritesStore(backend)
        logger.debug("%d resort(s), %d favourite(s)", len(self.resorts), len(self.favorites))

    @property
    def ordered_resorts(self) -> list[Resort]:
        if self.order is SortOrder.ALPHABETIC:
            return sorted(self.resorts, key=lambda r: r.name)
        if self.order is SortOrder.COUNTRY:
            return sorted(self.resorts, key=lambda r: r.country)
        return list(self.resorts)

    @property
    def filtered_resorts(self) -> list[Resort]:
        if not self.search_text:
            return self.ordered_resorts
        query = self.search_text.casefold()
        return [r for r in self.ordered_resorts if query in r.name.casefold()]

    def is_favorite(self, resort: Resort) -> bool:
        return self.favorites.contains(resort.id)

    def add_favorite(self, resort: Resort) -> None:
        self.favorites.add(resort.id)

    def remove_favorite(self, resort: Resort) -> None:
        self.favorites.remove(resort.id)

    def toggle_favorite(self, resort: Resort) -> bool:
        return self.favorites.toggle(resort.id)
