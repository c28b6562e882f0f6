"""
Patron model for the library lending registry.

A patron is a library member who can borrow books. The registry keeps the
one mutable ``Patron`` record per identifier and hands callers frozen
``PatronView`` snapshots, so loan state only ever changes through the
registry's borrow and return operations.
"""

from collections.abc import Hashable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from ..exceptions import DuplicateLoanError, InvalidReturnError


class Patron(BaseModel):
    """
    Represents a library patron who can borrow books.

    Identity is the numeric ``id`` alone: two patrons with the same id are
    the same entity even when their name or address differ. Books held by
    the patron are opaque hashable keys.
    """

    id: int = Field(
        ...,
        description="Unique identifier for the patron",
        frozen=True,
        examples=[111, 40028922],
    )

    name: str = Field(
        ...,
        description="Display name of the patron",
        examples=["John Smith", "Maria Garcia"],
    )

    address: str | None = Field(
        None,
        description="Mailing address for the patron",
        examples=["123 Main St, Anytown, ST 12345"],
    )

    _borrowed: set[Any] = PrivateAttr(default_factory=set)

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
        str_strip_whitespace=True,
    )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Patron):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def borrowed_count(self) -> int:
        """Number of books currently checked out to the patron."""
        return len(self._borrowed)

    @property
    def borrowed_books(self) -> frozenset[Any]:
        """Books currently checked out to the patron."""
        return frozenset(self._borrowed)

    def set_profile(self, name: str, address: str | None) -> None:
        """Overwrite the mutable profile fields."""
        self.name = name
        self.address = address

    def holds(self, book: Hashable) -> bool:
        """Check whether the patron currently holds ``book``."""
        return book in self._borrowed

    def record_loan(self, book: Hashable) -> None:
        """
        Record a book checkout for the patron.

        Raises:
            DuplicateLoanError: If the patron already holds the book
        """
        if book in self._borrowed:
            raise DuplicateLoanError(self.id, book)
        self._borrowed.add(book)

    def record_return(self, book: Hashable) -> None:
        """
        Record a book return for the patron.

        Raises:
            InvalidReturnError: If the patron does not hold the book
        """
        if book not in self._borrowed:
            raise InvalidReturnError(self.id, book)
        self._borrowed.remove(book)

    def view(self) -> "PatronView":
        """Take a read-only snapshot of the patron."""
        return PatronView(
            id=self.id,
            name=self.name,
            address=self.address,
            borrowed_books=frozenset(self._borrowed),
        )


class PatronView(BaseModel):
    """Frozen snapshot of a registered patron, safe to share with callers."""

    id: int
    name: str
    address: str | None = None
    borrowed_books: frozenset[Any] = Field(default_factory=frozenset)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def borrowed_count(self) -> int:
        return len(self.borrowed_books)

    def holds(self, book: Hashable) -> bool:
        return book in self.borrowed_books
