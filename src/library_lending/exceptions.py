"""
Exceptions raised by the lending registry.

Policy violations are errors; a book that simply cannot be lent right now
(unknown title, shelf floor reached) is reported as a ``False`` result
instead and never raises.
"""

from collections.abc import Hashable


class LendingError(Exception):
    """Base exception for lending operations."""


class UnregisteredPatronError(LendingError):
    """Raised when a loan is requested for a patron the registry does not know."""

    def __init__(self, patron_id: int):
        self.patron_id = patron_id
        super().__init__(f"Patron {patron_id} is not registered")


class LoanLimitExceededError(LendingError):
    """Raised when a patron already holds the maximum number of books."""

    def __init__(self, patron_id: int, limit: int):
        self.patron_id = patron_id
        self.limit = limit
        super().__init__(f"Patron {patron_id} has reached the loan limit of {limit}")


class InvalidReturnError(LendingError):
    """Raised when a patron returns a book they do not hold."""

    def __init__(self, patron_id: int, book: Hashable):
        self.patron_id = patron_id
        self.book = book
        super().__init__(f"Patron {patron_id} does not hold {book!r}")


class DuplicateLoanError(LendingError):
    """Raised when a patron asks for a book they already hold."""

    def __init__(self, patron_id: int, book: Hashable):
        self.patron_id = patron_id
        self.book = book
        super().__init__(f"Patron {patron_id} already holds {book!r}")


class InvalidQuantityError(LendingError, ValueError):
    """Raised when copies are acquired in a non-positive quantity."""

    def __init__(self, book: Hashable, quantity: object):
        self.book = book
        self.quantity = quantity
        super().__init__(f"Quantity must be a positive integer, got {quantity!r} for {book!r}")
