"""
CLI entry point for appsui.

Usage
─────
  # Roll two six-sided dice and keep the roll
  appsui roll --sides 6 --count 2

  # Add records
  appsui card add --prompt "2 + 2" --answer "4"
  appsui prospect add --name "Paul" --email "paul@example.com"
  appsui expense add --name "Lunch" --type Personal --amount 12.5
  appsui book add --title "Dune" --author "Frank Herbert" --genre Fantasy --rating 5 --review "Spice"
  appsui favorite add whistler

  # List and remove (index = position in the listing)
  appsui list cards
  appsui remove cards --index 0

Subcommands are implemented as standalone functions (cmd_list, cmd_roll, …)
so they can be unit-tested without invoking argparse.
"""

import argparse
import logging
import random
import sys
from typing import Optional

from appsui.config import DEFAULT_DOCUMENTS_DIR, AppConfig
from appsui.exceptions import OffsetOutOfRangeError
from appsui.viewmodels.bookworm import GENRES, MAX_RATING, Book, BookwormViewModel, emoji_for
from appsui.viewmodels.bucket_list import BucketListViewModel
from appsui.viewmodels.dice import MAX_DICE, MIN_DICE, POSSIBLE_SIDES, DiceViewModel
from appsui.viewmodels.expenses import EXPENSE_TYPES, ExpensesViewModel, amount_band
from appsui.viewmodels.flashcards import CardEditorViewModel
from appsui.viewmodels.prospects import Prospect, ProspectsViewModel
from appsui.viewmodels.resorts import ResortsViewModel

__all__ = [
    "SCREENS",
    "REMOVABLE",
    "build_parser",
    "cmd_list",
    "cmd_remove",
    "cmd_roll",
    "cmd_card_add",
    "cmd_prospect_add",
    "cmd_prospect_toggle",
    "cmd_expense_add",
    "cmd_book_add",
    "cmd_favorite",
    "main",
]

logger = logging.getLogger(__name__)

SCREENS   = ["dice", "cards", "prospects", "places", "expenses", "books", "favorites"]
# expenses are removed per section
REMOVABLE = ["dice", "cards", "prospects", "places", "books", "personal", "business"]


# ── Argument parser ────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    """
    Build and return the top-level argument parser.

    Subcommands: list | remove | roll | card | prospect | expense | book | favorite
    """
    parser = argparse.ArgumentParser(
        prog="appsui",
        description="Local record stores behind the appsui screens",
    )
    parser.add_argument(
        "--documents",
        default=None,
        metavar="PATH",
        help=f"Documents directory (default: $APPSUI_DOCUMENTS or {DEFAULT_DOCUMENTS_DIR})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Enable verbose debug logging",
    )

    sub = parser.add_subparsers(dest="subcommand")

    # ── list / remove ─────────────────────────────────────────────────────
    lst = sub.add_parser("list", help="List the records of one screen")
    lst.add_argument("screen", choices=SCREENS)

    rem = sub.add_parser("remove", help="Remove one record by its listed index")
    rem.add_argument("screen", choices=REMOVABLE)
    rem.add_argument("--index", required=True, type=int, metavar="N", help="Index shown by `list`")

    # ── roll ──────────────────────────────────────────────────────────────
    roll = sub.add_parser("roll", help="Roll dice and save the roll")
    roll.add_argument("--sides", type=int, choices=POSSIBLE_SIDES, default=6)
    roll.add_argument("--count", type=int, default=1, help=f"Number of dice ({MIN_DICE}-{MAX_DICE})")
    roll.add_argument("--seed", type=int, default=None, help="Random seed (repeatable rolls)")

    # ── card ──────────────────────────────────────────────────────────────
    card = sub.add_parser("card", help="Flashcards")
    card_sub = card.add_subparsers(dest="action", required=True)
    card_add = card_sub.add_parser("add", help="Add a card (newest first)")
    card_add.add_argument("--prompt", required=True)
    card_add.add_argument("--answer", required=True)

    # ── prospect ──────────────────────────────────────────────────────────
    prospect = sub.add_parser("prospect", help="Prospects")
    prospect_sub = prospect.add_subparsers(dest="action", required=True)
    p_add = prospect_sub.add_parser("add", help="Add a prospect")
    p_add.add_argument("--name", default="Anonymous")
    p_add.add_argument("--email", default="")
    p_toggle = prospect_sub.add_parser("toggle", help="Flip the contacted flag")
    p_toggle.add_argument("--id", required=True, dest="prospect_id", metavar="ID")

    # ── expense ───────────────────────────────────────────────────────────
    expense = sub.add_parser("expense", help="Expenses")
    expense_sub = expense.add_subparsers(dest="action", required=True)
    e_add = expense_sub.add_parser("add", help="Add an expense")
    e_add.add_argument("--name", required=True)
    e_add.add_argument("--type", dest="expense_type", choices=EXPENSE_TYPES, default=EXPENSE_TYPES[0])
    e_add.add_argument("--amount", required=True, type=float)

    # ── book ──────────────────────────────────────────────────────────────
    book = sub.add_parser("book", help="Bookshelf")
    book_sub = book.add_subparsers(dest="action", required=True)
    b_add = book_sub.add_parser("add", help="Add a book")
    b_add.add_argument("--title", required=True)
    b_add.add_argument("--author", required=True)
    b_add.add_argument("--genre", choices=GENRES, default=GENRES[0])
    b_add.add_argument("--rating", type=int, choices=range(1, MAX_RATING + 1), default=MAX_RATING)
    b_add.add_argument("--review", required=True)

    # ── favorite ──────────────────────────────────────────────────────────
    fav = sub.add_parser("favorite", help="Favourite resorts")
    fav.add_argument("action", choices=["add", "remove"])
    fav.add_argument("resort_id", metavar="ID")

    return parser


# ── Command implementations ───────────────────────────────────────────────────


def cmd_list(config: AppConfig, screen: str) -> int:
    """Print the records of *screen*; returns the number printed."""
    lines: list[str] = []
    if screen == "dice":
        for i, row in enumerate(DiceViewModel(config).rows_for_display()):
            lines.append(f"[{i:>3}]  {' '.join(d.result for d in row.dice):<24} total={row.total}")
    elif screen == "cards":
        for i, c in enumerate(CardEditorViewModel(config).cards):
            lines.append(f"[{i:>3}]  {c.prompt:<40} → {c.answer}")
    elif screen == "prospects":
        for i, p in enumerate(ProspectsViewModel(config).people):
            mark = "x" if p.is_contacted else " "
            lines.append(f"[{i:>3}]  [{mark}] {p.name:<25} {p.email_address:<30} {p.id}")
    elif screen == "places":
        for i, loc in enumerate(BucketListViewModel(config).locations):
            lines.append(f"[{i:>3}]  {loc.name:<30} ({loc.latitude:.3f}, {loc.longitude:.3f})")
    elif screen == "expenses":
        vm = ExpensesViewModel(config)
        for section, store in (("personal", vm.personal), ("business", vm.business)):
            for i, item in enumerate(store):
                lines.append(f"{section:<8} [{i:>3}]  {item.name:<30} {item.amount:>10.2f}  {amount_band(item.amount)}")
    elif screen == "books":
        for i, b in enumerate(BookwormViewModel(config).sorted_books):
            lines.append(f"[{i:>3}]  {emoji_for(b.rating)} {b.title:<30} {b.author:<25} {b.genre}")
    elif screen == "favorites":
        vm = ResortsViewModel(config)
        names = {r.id: r.name for r in vm.resorts}
        for i, rid in enumerate(vm.favorites.identifiers()):
            lines.append(f"[{i:>3}]  {rid:<15} {names.get(rid, '?')}")
    else:
        raise ValueError(f"Unknown screen {screen!r}")

    if not lines:
        print(f"0 {screen} found.")
    for line in lines:
        print(line)
    return len(lines)


def cmd_remove(config: AppConfig, screen: str, index: int) -> None:
    """
    Remove the record listed at *index* for *screen*.

    Raises:
        OffsetOutOfRangeError: no record at that index.
    """
    if screen == "dice":
        DiceViewModel(config).remove_rows({index})
    elif screen == "cards":
        CardEditorViewModel(config).remove_cards({index})
    elif screen == "prospects":
        ProspectsViewModel(config).people.remove_at({index})
    elif screen == "places":
        BucketListViewModel(config).locations.remove_at({index})
    elif screen == "books":
        BookwormViewModel(config).delete_books({index})
    elif screen == "personal":
        ExpensesViewModel(config).remove_personal({index})
    elif screen == "business":
        ExpensesViewModel(config).remove_business({index})
    else:
        raise ValueError(f"Cannot remove from {screen!r}")
    logger.info("Removed %s #%d", screen, index)


def cmd_roll(config: AppConfig, sides: int, count: int, seed: Optional[int] = None) -> list[str]:
    """Roll *count* dice with *sides* faces, save the row, return the results."""
    vm = DiceViewModel(config, rng=random.Random(seed))
    vm.set_sides(sides)
    vm.set_dice_count(count)
    row = vm.roll_and_save()
    results = [d.result for d in row.dice]
    print(f"Rolled {' '.join(results)} (total {row.total})")
    return results


def cmd_card_add(config: AppConfig, prompt: str, answer: str) -> bool:
    vm = CardEditorViewModel(config)
    vm.new_prompt, vm.new_answer = prompt, answer
    card = vm.add_card()
    if card is None:
        print("Prompt and answer must both be non-empty.", file=sys.stderr)
        return False
    print(f"Added card {card.id}")
    return True


def cmd_prospect_add(config: AppConfig, name: str, email: str) -> Prospect:
    prospect = Prospect(name=name, email_address=email)
    ProspectsViewModel(config).add(prospect)
    print(f"Added prospect {prospect.id}")
    return prospect


def cmd_prospect_toggle(config: AppConfig, prospect_id: str) -> bool:
    updated = ProspectsViewModel(config).toggle(prospect_id)
    if updated is None:
        print(f"No prospect with id={prospect_id}", file=sys.stderr)
        return False
    state = "contacted" if updated.is_contacted else "uncontacted"
    print(f"{updated.name} is now {state}")
    return True


def cmd_expense_add(config: AppConfig, name: str, expense_type: str, amount: float) -> None:
    item = ExpensesViewModel(config).add(name, expense_type, amount)
    print(f"Added {item.type.lower()} expense {item.name} ({item.amount:.2f})")


def cmd_book_add(
    config: AppConfig,
    title: str,
    author: str,
    genre: str,
    rating: int,
    review: str,
) -> Optional[Book]:
    if not all((title, author, genre, review)):
        print("Title, author, genre and review are required.", file=sys.stderr)
        return None
    book = Book(title=title, author=author, genre=genre, rating=rating, review=review)
    BookwormViewModel(config).add_book(book)
    print(f"Added {book.title} by {book.author}")
    return book


def cmd_favorite(config: AppConfig, action: str, resort_id: str) -> None:
    vm = ResortsViewModel(config)
    if action == "add":
        vm.favorites.add(resort_id)
    else:
        vm.favorites.remove(resort_id)
    print(f"Favourites: {', '.join(vm.favorites.identifiers()) or '(none)'}")


# ── Entry point ───────────────────────────────────────────────────────────────


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point. Returns exit code."""
    parser = build_parser()
    ns = parser.parse_args(argv)

    level = logging.DEBUG if ns.debug else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")

    if ns.subcommand is None:
        parser.print_help()
        return 0

    config = AppConfig.from_env(ns.documents)

    if ns.subcommand == "list":
        cmd_list(config, ns.screen)
        return 0

    if ns.subcommand == "remove":
        try:
            cmd_remove(config, ns.screen, ns.index)
        except OffsetOutOfRangeError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        return 0

    if ns.subcommand == "roll":
        cmd_roll(config, ns.sides, ns.count, ns.seed)
        return 0

    if ns.subcommand == "card":
        return 0 if cmd_card_add(config, ns.prompt, ns.answer) else 1

    if ns.subcommand == "prospect":
        if ns.action == "add":
            cmd_prospect_add(config, ns.name, ns.email)
            return 0
        return 0 if cmd_prospect_toggle(config, ns.prospect_id) else 1

    if ns.subcommand == "expense":
        cmd_expense_add(config, ns.name, ns.expense_type, ns.amount)
        return 0

    if ns.subcommand == "book":
        book = cmd_book_add(config, ns.title, ns.author, ns.genre, ns.rating, ns.review)
        return 0 if book is not None else 1

    if ns.subcommand == "favorite":
        cmd_favorite(config, ns.action, ns.resort_id)
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
