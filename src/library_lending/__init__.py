"""
Library Lending Package.

This package models a small library's lending operations: registering
patrons, stocking book copies, lending and returning books, and reporting
inventory and loan state.

Key Components:
- registry: The LendingRegistry enforcing every lending policy
- models: Pydantic models for patrons, book keys and inventory snapshots
- exceptions: The lending error taxonomy
- config: Policy limits and logging settings with pydantic-settings
- observability: Logging setup, logfire spans and circulation metrics
"""

__version__ = "0.1.0"

from .config import MAX_BOOKS_PER_PATRON, MIN_COPIES_TO_LEND, LendingConfig
from .exceptions import (
    DuplicateLoanError,
    InvalidQuantityError,
    InvalidReturnError,
    LendingError,
    LoanLimitExceededError,
    UnregisteredPatronError,
)
from .models import Book, InventoryEntry, LendingReport, Patron, PatronView
from .registry import LendingRegistry

__all__ = [
    "MAX_BOOKS_PER_PATRON",
    "MIN_COPIES_TO_LEND",
    "Book",
    "DuplicateLoanError",
    "InvalidQuantityError",
    "InvalidReturnError",
    "InventoryEntry",
    "LendingConfig",
    "LendingError",
    "LendingRegistry",
    "LendingReport",
    "LoanLimitExceededError",
    "Patron",
    "PatronView",
    "UnregisteredPatronError",
    "__version__",
]
