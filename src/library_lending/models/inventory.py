"""
Inventory models for the library lending registry.

An inventory entry is the ``(available, total)`` pair the registry tracks
per book. ``LendingReport`` bundles every entry with the registry-wide
totals for reporting.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class InventoryEntry(BaseModel):
    """Shelf and acquisition counts for one book."""

    book: Any = Field(..., description="The book key this entry belongs to")

    available: int = Field(
        ...,
        description="Copies currently on the shelf",
        ge=0,
    )

    total: int = Field(
        ...,
        description="Copies ever acquired by the library",
        ge=0,
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def validate_counts(self) -> "InventoryEntry":
        """Shelf count can never exceed the copies acquired."""
        if self.available > self.total:
            raise ValueError("Available copies cannot exceed total copies")
        return self

    @property
    def loaned(self) -> int:
        """Copies currently out on loan."""
        return self.total - self.available


class LendingReport(BaseModel):
    """Point-in-time snapshot of inventory and loan state."""

    registered_patrons: int = Field(..., ge=0)
    active_borrowers: int = Field(
        ...,
        description="Registered patrons holding at least one book",
        ge=0,
    )
    loans_outstanding: int = Field(..., description="Books out on loan across all patrons", ge=0)
    books: list[InventoryEntry] = Field(default_factory=list)
    min_copies_to_lend: int = Field(..., ge=0)
    max_books_per_patron: int = Field(..., ge=1)
    generated_at: datetime = Field(default_factory=datetime.now)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def shelved_total(self) -> int:
        return sum(entry.available for entry in self.books)

    @property
    def acquired_total(self) -> int:
        return sum(entry.total for entry in self.books)

    @property
    def loaned_total(self) -> int:
        return sum(entry.loaned for entry in self.books)
