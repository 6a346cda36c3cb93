"""
ProspectsViewModel — people met at events, contacted or not.

Prospects are added from a scanned code whose text is ``name\\nemail``.
Persisted to ``SavedData`` in the documents directory.
"""

import dataclasses
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from appsui.config import AppConfig
from appsui.store import FileBackend, JsonRecord, LocalCollectionStore, new_id

__all__ = ["Prospect", "FilterType", "SortingType", "ProspectsViewModel", "SAVE_FILE"]

logger = logging.getLogger(__name__)

SAVE_FILE = "SavedData"


@dataclass(frozen=True)
class Prospect(JsonRecord):
    name:          str  = "Anonymous"
    email_address: str  = ""
    is_contacted:  bool = False
    id:            str  = field(default_factory=new_id)


class FilterType(str, Enum):
    NONE        = "none"
    CONTACTED   = "contacted"
    UNCONTACTED = "uncontacted"


class SortingType(str, Enum):
    MOST_RECENT = "most_recent"
    BY_NAME     = "by_name"


_TITLES = {
    FilterType.NONE:        "Everyone",
    FilterType.CONTACTED:   "Contacted people",
    FilterType.UNCONTACTED: "Uncontacted people",
}


class ProspectsViewModel:
    """
    Attributes
    ──────────
    people — store of Prospect records, insertion order
    """

    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self.config = config or AppConfig.from_env()
        backend = FileBackend(self.config.document(SAVE_FILE), indent=self.config.json_indent)
        self.people: LocalCollectionStore[Prospect] = LocalCollectionStore(backend, Prospect)

    @staticmethod
    def title(filter_type: FilterType) -> str:
        return _TITLES[filter_type]

    def add(self, prospect: Prospect) -> None:
        self.people.append(prospect)

    def toggle(self, prospect_id: str) -> Optional[Prospect]:
        """Flip the contacted flag of *prospect_id*; returns the new record or None."""
        current = self.people.get(prospect_id)
        if current is None:
            return None
        updated = dataclasses.replace(current, is_contacted=not current.is_contacted)
        self.people.replace(prospect_id, updated)
        return updated

    def handle_scan(self, text: str) -> Optional[Prospect]:
        """
        Add a prospect from scanned text ``name\\nemail``.

        Anything that does not split into exactly two lines is ignored.
        """
        details = text.split("\n")
        if len(details) != 2:
            logger.info("Ignoring scanned code with %d line(s)", len(details))
            return None
        prospect = Prospect(name=details[0], email_address=details[1])
        self.add(prospect)
        return prospect

    def filtered(
        self,
        filter_type: FilterType = FilterType.NONE,
        sorting: SortingType = SortingType.MOST_RECENT,
    ) -> list[Prospect]:
        """Prospects for one tab: sorted first, then filtered."""
        people = self.people.snapshot()
        if sorting is SortingType.BY_NAME:
            people.sort(key=lambda p: p.name)
        else:
            people.reverse()

        if filter_type is FilterType.CONTACTED:
            return [p for p in people if p.is_contacted]
        if filter_type is FilterType.UNCONTACTED:
            return [p for p in people if not p.is_contacted]
        return people
