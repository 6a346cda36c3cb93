"""
ExpensesViewModel — personal and business expense lists.

Both lists live in the app's defaults file, one key each.  On load each list
is filtered to its own type so a stray entry never shows in the wrong
section.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from appsui.config import AppConfig
from appsui.store import DefaultsBackend, JsonRecord, LocalCollectionStore, new_id

__all__ = ["ExpenseItem", "ExpensesViewModel", "EXPENSE_TYPES", "amount_band"]

logger = logging.getLogger(__name__)

PERSONAL = "Personal"
BUSINESS = "Business"
EXPENSE_TYPES = [PERSONAL, BUSINESS]

_PERSONAL_KEY = "personal"
_BUSINESS_KEY = "business"


@dataclass(frozen=True)
class ExpenseItem(JsonRecord):
    name:   str
    type:   str
    amount: float
    id:     str = field(default_factory=new_id)


def amount_band(amount: float) -> str:
    """Colour band used when listing an amount: low / medium / high."""
    if amount < 10.0:
        return "low"
    if amount < 100.0:
        return "medium"
    return "high"


class ExpensesViewModel:
    """
    Attributes
    ──────────
    personal — store of Personal expenses (defaults key "personal")
    business — store of Business expenses (defaults key "business")
    """

    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self.config = config or AppConfig.from_env()
        self.personal: LocalCollectionStore[ExpenseItem] = self._open(_PERSONAL_KEY, PERSONAL)
        self.business: LocalCollectionStore[ExpenseItem] = self._open(_BUSINESS_KEY, BUSINESS)

    def _open(self, key: str, expense_type: str) -> LocalCollectionStore[ExpenseItem]:
        backend = DefaultsBackend(self.config.defaults_path, key, indent=self.config.json_indent)
        return LocalCollectionStore(
            backend,
            ExpenseItem,
            keep=lambda item: item.type == expense_type,
        )

    def add(self, name: str, expense_type: str, amount: float) -> ExpenseItem:
        """Create an expense and append it to the list matching *expense_type*."""
        if expense_type not in EXPENSE_TYPES:
            raise ValueError(f"Unknown expense type {expense_type!r}; expected one of {EXPENSE_TYPES}")
        item = ExpenseItem(name=name, type=expense_type, amount=float(amount))
        target = self.personal if expense_type == PERSONAL else self.business
        target.append(item)
        logger.debug("Added %s expense %r (%.2f)", expense_type, name, item.amount)
        return item

    def remove_personal(self, offsets: Iterable[int]) -> None:
        self.personal.remove_at(offsets)

    def remove_business(self, offsets: Iterable[int]) -> None:
        self.business.remove_at(offsets)

    @property
    def total(self) -> float:
        return sum(i.amount for i in self.personal) + sum(i.amount for i in self.business)
