"""
Flashcards — a timed review session over a persisted card list.

Two view-models share the ``Cards`` file:

CardEditorViewModel   — add / delete cards (persisted)
FlashcardsViewModel   — the review session: a deck copied from disk,
                        a countdown, and right/wrong answers.  Session
                        changes are never written back; reset() reloads.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from appsui.config import AppConfig
from appsui.store import FileBackend, JsonRecord, LocalCollectionStore, new_id

__all__ = ["Card", "CardEditorViewModel", "FlashcardsViewModel", "SESSION_SECONDS", "SAVE_FILE"]

logger = logging.getLogger(__name__)

SAVE_FILE       = "Cards"
SESSION_SECONDS = 99


@dataclass(frozen=True)
class Card(JsonRecord):
    prompt: str
    answer: str
    id:     str = field(default_factory=new_id)


def _open_cards(config: AppConfig) -> LocalCollectionStore[Card]:
    backend = FileBackend(config.document(SAVE_FILE), indent=config.json_indent)
    return LocalCollectionStore(backend, Card)


class CardEditorViewModel:
    """Edits the persisted card list; newest card first."""

    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self.config = config or AppConfig.from_env()
        self.cards: LocalCollectionStore[Card] = _open_cards(self.config)
        self.new_prompt: str = ""
        self.new_answer: str = ""

    def add_card(self) -> Optional[Card]:
        """
        Add a card from ``new_prompt`` / ``new_answer``.

        Both fields are trimmed; if either is empty nothing happens.
        On success the inputs are cleared.
        """
        prompt = self.new_prompt.strip()
        answer = self.new_answer.strip()
        if not prompt or not answer:
            return None
        card = Card(prompt=prompt, answer=answer)
        self.cards.prepend(card)
        self.new_prompt = ""
        self.new_answer = ""
        return card

    def remove_cards(self, offsets: Iterable[int]) -> None:
        self.cards.remove_at(offsets)


class FlashcardsViewModel:
    """
    Review session.

    Attributes
    ──────────
    deck            — cards still to answer; the top card is the last one
    time_remaining  — seconds left (SESSION_SECONDS at reset)
    is_active       — the countdown only runs while active
    """

    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self.config = config or AppConfig.from_env()
        self._cards: LocalCollectionStore[Card] = _open_cards(self.config)
        self.deck:           list[Card] = []
        self.time_remaining: int        = SESSION_SECONDS
        self.is_active:      bool       = False
        self.reset()

    def reset(self) -> None:
        """Start again: reload cards from disk and restart the countdown."""
        self.deck = self._cards.load()
        self.time_remaining = SESSION_SECONDS
        self.is_active = True

    def tick(self) -> None:
        """One second elapsed."""
        if self.is_active and self.time_remaining > 0:
            self.time_remaining -= 1

    def set_scene_active(self, active: bool) -> None:
        """
        App moved to / from the foreground.

        Going to the background always pauses.  Coming back resumes only if
        cards remain; with an empty deck the flag is left as it was.
        """
        if not active:
            self.is_active = False
        elif self.deck:
            self.is_active = True

    @property
    def accepts_answers(self) -> bool:
        return self.time_remaining > 0

    @property
    def is_finished(self) -> bool:
        return not self.deck

    def answer(self, index: int, correct: bool) -> None:
        """
        Take the card at *index* off the deck.

        A wrong answer puts a fresh copy of the card back at the bottom so
        it comes round again.  Negative indexes are ignored.
        """
        if index < 0:
            return
        card = self.deck.pop(index)
        if not correct:
            self.deck.insert(0, Card(prompt=card.prompt, answer=card.answer))
        if not self.deck:
            self.is_active = False

    def answer_top(self, correct: bool) -> None:
        self.answer(len(self.deck) - 1, correct)
