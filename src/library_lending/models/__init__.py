"""
Library lending models.

This package contains the Pydantic models for the entities the lending
registry works with:
- Patron: Library members who can borrow books, and their read-only views
- Book: An optional catalogue key; any hashable value may stand in for it
- InventoryEntry / LendingReport: Shelf counts and registry-wide snapshots
"""

from .book import Book
from .inventory import InventoryEntry, LendingReport
from .patron import Patron, PatronView

__all__ = [
    "Book",
    "InventoryEntry",
    "LendingReport",
    "Patron",
    "PatronView",
]
