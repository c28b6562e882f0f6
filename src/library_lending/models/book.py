"""
Book key model for the library lending registry.

The registry treats books as opaque keys and accepts any hashable value.
``Book`` is a convenient frozen key for callers that want one: it compares
and hashes by all of its fields.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Book(BaseModel):
    """A catalogue entry usable as a registry book key."""

    isbn: str = Field(
        ...,
        description="International Standard Book Number (ISBN-10 or ISBN-13)",
        pattern=r"^\d{3}-\d{1,5}-\d{1,7}-\d{1,7}-\d{1}$|^\d{9}[\dX]$|^\d{13}$",
        examples=["978-0-134-68547-9", "9780134685479"],
    )

    title: str = Field(
        ...,
        description="The title of the book",
        min_length=1,
        max_length=500,
        examples=["The Great Gatsby", "Dom Casmurro"],
    )

    author: str | None = Field(
        None,
        description="Author name as printed on the cover",
        max_length=200,
    )

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Ensure title is not just whitespace."""
        if not v.strip():
            raise ValueError("Title cannot be empty or just whitespace")
        return v.strip()

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        str_strip_whitespace=True,
    )

    def __str__(self) -> str:
        return f"{self.title} ({self.isbn})"
