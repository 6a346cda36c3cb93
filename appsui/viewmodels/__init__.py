"""
viewmodels — pure-Python screen state, one module per screen.

No Qt imports here; every class is testable without a display.

Public API
──────────
ExpensesViewModel     — personal / business expenses (defaults file)
ProspectsViewModel    — scanned contacts, contacted flag, filters
DiceViewModel         — dice rolls and roll history
CardEditorViewModel   — flashcard list editing
FlashcardsViewModel   — timed flashcard review session
BucketListViewModel   — saved map places
EditPlaceViewModel    — place editor with nearby-page lookup
ResortsViewModel      — bundled ski resorts, sorting, search, favourites
MissionsViewModel     — bundled Apollo missions and crews
CheckoutViewModel     — cupcake order checkout
BookwormViewModel     — bookshelf with ratings
AddBookViewModel      — new-book form
LoadingState          — loading / loaded / failed
"""

from appsui.viewmodels.bookworm import AddBookViewModel, BookwormViewModel
from appsui.viewmodels.bucket_list import BucketListViewModel, EditPlaceViewModel
from appsui.viewmodels.cupcakes import CheckoutViewModel
from appsui.viewmodels.dice import DiceViewModel
from appsui.viewmodels.expenses import ExpensesViewModel
from appsui.viewmodels.flashcards import CardEditorViewModel, FlashcardsViewModel
from appsui.viewmodels.missions import MissionsViewModel
from appsui.viewmodels.prospects import ProspectsViewModel
from appsui.viewmodels.resorts import ResortsViewModel
from appsui.viewmodels.state import LoadingState

__all__ = [
    "ExpensesViewModel",
    "ProspectsViewModel",
    "DiceViewModel",
    "CardEditorViewModel",
    "FlashcardsViewModel",
    "BucketListViewModel",
    "EditPlaceViewModel",
    "ResortsViewModel",
    "MissionsViewModel",
    "CheckoutViewModel",
    "BookwormViewModel",
    "AddBookViewModel",
    "LoadingState",
]
