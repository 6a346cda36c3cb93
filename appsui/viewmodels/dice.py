"""
DiceViewModel — roll up to six dice and keep a history of rolls.

History rows are persisted to ``savedDices``; the list is shown newest
first, so offsets coming from the display are converted before removal.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Iterable, Optional

from appsui.config import AppConfig
from appsui.store import FileBackend, JsonRecord, LocalCollectionStore, new_id

__all__ = ["Die", "Row", "DiceViewModel", "POSSIBLE_SIDES", "MIN_DICE", "MAX_DICE", "SAVE_FILE"]

logger = logging.getLogger(__name__)

SAVE_FILE      = "savedDices"
POSSIBLE_SIDES = [4, 6, 8, 10, 12, 20, 100]
MIN_DICE       = 1
MAX_DICE       = 6


@dataclass(frozen=True)
class Die(JsonRecord):
    result: str
    id:     str = field(default_factory=new_id)


@dataclass(frozen=True)
class Row(JsonRecord):
    dice: tuple = ()
    id:   str   = field(default_factory=new_id)

    def to_dict(self) -> dict:
        return {"id": self.id, "dices": [d.to_dict() for d in self.dice]}

    @classmethod
    def from_dict(cls, data: dict) -> "Row":
        if not isinstance(data, dict):
            raise TypeError("Row expects a JSON object")
        if not isinstance(data["id"], str) or not isinstance(data["dices"], list):
            raise TypeError("Row: malformed id or dices")
        return cls(id=data["id"], dice=tuple(Die.from_dict(d) for d in data["dices"]))

    @property
    def total(self) -> int:
        return sum(int(d.result) for d in self.dice)


class DiceViewModel:
    """
    Attributes
    ──────────
    sides       — faces per die, one of POSSIBLE_SIDES
    dice_count  — number of dice, MIN_DICE … MAX_DICE
    current     — dice currently on the table (all "0" before a roll)
    history     — store of Row records, oldest first
    """

    def __init__(self, config: Optional[AppConfig] = None, rng: Optional[random.Random] = None) -> None:
        self.config = config or AppConfig.from_env()
        self._rng   = rng or random.Random()
        self.sides:      int       = POSSIBLE_SIDES[0]
        self.dice_count: int       = MIN_DICE
        self.current:    list[Die] = []
        backend = FileBackend(self.config.document(SAVE_FILE), indent=self.config.json_indent)
        self.history: LocalCollectionStore[Row] = LocalCollectionStore(backend, Row)
        self.reset_dice()

    def set_sides(self, sides: int) -> None:
        if sides not in POSSIBLE_SIDES:
            raise ValueError(f"Unsupported die with {sides} sides; choose from {POSSIBLE_SIDES}")
        self.sides = sides

    def set_dice_count(self, count: int) -> None:
        """Clamp to MIN_DICE…MAX_DICE and reset the table."""
        self.dice_count = max(MIN_DICE, min(MAX_DICE, count))
        self.reset_dice()

    def reset_dice(self) -> None:
        self.current = [Die(result="0") for _ in range(self.dice_count)]

    def roll(self) -> list[Die]:
        """Throw every die on the table (not saved)."""
        self.current = [Die(result=str(self._rng.randint(1, self.sides))) for _ in range(self.dice_count)]
        return list(self.current)

    def save_roll(self) -> Row:
        """Append the dice on the table as a new history row."""
        row = Row(dice=tuple(self.current))
        self.history.append(row)
        logger.debug("Saved roll %s", [d.result for d in row.dice])
        return row

    def roll_and_save(self) -> Row:
        self.roll()
        return self.save_roll()

    def rows_for_display(self) -> list[Row]:
        """History newest first."""
        return list(reversed(self.history.snapshot()))

    def remove_rows(self, display_offsets: Iterable[int]) -> None:
        """Remove rows given as offsets into rows_for_display()."""
        last = len(self.history) - 1
        self.history.remove_at({last - offset for offset in display_offsets})
