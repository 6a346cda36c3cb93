"""
Bookworm — a personal bookshelf with ratings and reviews.

Books are persisted to ``Books``.  The shelf is always displayed newest
first, then by title, then by author; offsets coming from the display refer
to that order.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Optional

from appsui.config import AppConfig
from appsui.exceptions import OffsetOutOfRangeError
from appsui.store import FileBackend, JsonRecord, LocalCollectionStore, new_id

__all__ = [
    "Book",
    "BookwormViewModel",
    "AddBookViewModel",
    "GENRES",
    "MAX_RATING",
    "emoji_for",
    "stars",
    "SAVE_FILE",
]

logger = logging.getLogger(__name__)

SAVE_FILE  = "Books"
GENRES     = ["Fantasy", "Horror", "Kids", "Mystery", "Poetry", "Romance", "Thriller"]
MAX_RATING = 5

_EMOJI = {1: "😡", 2: "☹️", 3: "😐", 4: "☺️"}


def _now() -> str:
    return datetime.now(tz=timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def emoji_for(rating: int) -> str:
    return _EMOJI.get(rating, "❤️")


def stars(rating: int, maximum: int = MAX_RATING) -> str:
    """Rating as filled/empty stars, e.g. ``★★★☆☆``."""
    return "".join("★" if number <= rating else "☆" for number in range(1, maximum + 1))


@dataclass(frozen=True)
class Book(JsonRecord):
    title:  str
    author: str
    genre:  str
    rating: int
    review: str
    date:   str = field(default_factory=_now)   # ISO-8601 UTC, sortable as text
    id:     str = field(default_factory=new_id)

    @property
    def is_low_rated(self) -> bool:
        return self.rating == 1


def _display_key(book: Book) -> tuple:
    return (book.title, book.author)


class BookwormViewModel:
    """
    Attributes
    ──────────
    books — store of Book records (insertion order on disk)
    """

    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self.config = config or AppConfig.from_env()
        backend = FileBackend(self.config.document(SAVE_FILE), indent=self.config.json_indent)
        self.books: LocalCollectionStore[Book] = LocalCollectionStore(backend, Book)

    @property
    def sorted_books(self) -> list[Book]:
        """Date descending, then title, then author."""
        ordered = sorted(self.books, key=_display_key)
        return sorted(ordered, key=lambda b: b.date, reverse=True)

    def add_book(self, book: Book) -> None:
        self.books.append(book)
        logger.debug("Added book %r by %r", book.title, book.author)

    def delete_books(self, offsets: Iterable[int]) -> None:
        """Delete books given as offsets into sorted_books."""
        shown = self.sorted_books
        wanted = set(offsets)
        for offset in wanted:
            if not 0 <= offset < len(shown):
                raise OffsetOutOfRangeError(
                    f"offset {offset} out of range for shelf of {len(shown)}"
                )
        self.books.remove_at({self.books.index_of(shown[offset].id) for offset in wanted})

    def delete_book(self, book_id: str) -> None:
        self.books.remove_by_id(book_id)


class AddBookViewModel:
    """Form state for a new book."""

    def __init__(self) -> None:
        self.title:  str = ""
        self.author: str = ""
        self.rating: int = MAX_RATING
        self.genre:  str = GENRES[0]
        self.review: str = ""

    @property
    def can_save(self) -> bool:
        return all((self.title, self.author, self.genre, self.review))

    def set_rating(self, rating: int) -> None:
        self.rating = max(1, min(MAX_RATING, rating))

    def build(self) -> Optional[Book]:
        """The Book to save, or None while the form is incomplete."""
        if not self.can_save:
            return None
        return Book(
            title=self.title,
            author=self.author,
            genre=self.genre,
            rating=self.rating,
            review=self.review,
        )
