"""
Tests for the Patron model.

These tests verify that the Patron model correctly:
1. Uses the identifier as its only identity
2. Keeps the held-books set and its count consistent
3. Guards against duplicate loans and invalid returns
4. Produces read-only views
"""

import pytest
from pydantic import ValidationError

from library_lending.exceptions import DuplicateLoanError, InvalidReturnError
from library_lending.models.patron import Patron, PatronView


class TestPatronModel:
    """Test suite for the Patron model."""

    def test_create_valid_patron(self):
        """Test creating a patron with valid data."""
        patron = Patron(id=111, name="  John Smith ", address="123 Main St")

        assert patron.id == 111
        assert patron.name == "John Smith"  # Whitespace stripped
        assert patron.address == "123 Main St"
        assert patron.borrowed_count == 0
        assert patron.borrowed_books == frozenset()

    def test_address_is_optional(self):
        patron = Patron(id=1, name="No Address")
        assert patron.address is None

    def test_id_is_immutable(self):
        """Test the identifier cannot be reassigned."""
        patron = Patron(id=111, name="John Smith")

        with pytest.raises(ValidationError):
            patron.id = 222

        assert patron.id == 111

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            Patron(id=1, name="John Smith", email="john@example.com")

    def test_equality_by_identifier(self):
        """Test two patrons with the same id are the same entity."""
        first = Patron(id=111, name="John Smith", address="Old Street")
        second = Patron(id=111, name="Johnny", address="New Street")
        third = Patron(id=222, name="John Smith", address="Old Street")

        assert first == second
        assert first != third
        assert hash(first) == hash(second)
        assert len({first, second, third}) == 2
        assert {first: "x"}[second] == "x"

    def test_not_equal_to_other_types(self):
        assert Patron(id=111, name="John Smith") != 111

    def test_set_profile(self):
        """Test profile fields are overwritten and loans untouched."""
        patron = Patron(id=111, name="John Smith", address="Old Street")
        patron.record_loan("book-1")

        patron.set_profile("John A. Smith", "New Street")

        assert patron.name == "John A. Smith"
        assert patron.address == "New Street"
        assert patron.borrowed_count == 1

    def test_set_profile_clears_address(self):
        patron = Patron(id=111, name="John Smith", address="Old Street")
        patron.set_profile("John Smith", None)
        assert patron.address is None


class TestPatronLoans:
    """Test the held-books set."""

    def test_record_loan(self):
        """Test a loan adds the book and bumps the count."""
        patron = Patron(id=111, name="John Smith")

        patron.record_loan("book-1")
        patron.record_loan("book-2")

        assert patron.borrowed_count == 2
        assert patron.holds("book-1")
        assert patron.holds("book-2")
        assert not patron.holds("book-3")

    def test_duplicate_loan_raises(self):
        """Test the same book cannot be held twice."""
        patron = Patron(id=111, name="John Smith")
        patron.record_loan("book-1")

        with pytest.raises(DuplicateLoanError) as exc_info:
            patron.record_loan("book-1")

        assert exc_info.value.patron_id == 111
        assert patron.borrowed_count == 1

    def test_record_return(self):
        """Test a return removes the book and drops the count."""
        patron = Patron(id=111, name="John Smith")
        patron.record_loan("book-1")

        patron.record_return("book-1")

        assert patron.borrowed_count == 0
        assert not patron.holds("book-1")

    def test_return_not_held_raises(self):
        """Test returning a book not held is rejected and leaves the count alone."""
        patron = Patron(id=111, name="John Smith")
        patron.record_loan("book-1")

        with pytest.raises(InvalidReturnError) as exc_info:
            patron.record_return("book-2")

        assert exc_info.value.book == "book-2"
        assert patron.borrowed_count == 1

    def test_borrowed_books_is_a_copy(self):
        """Test the exposed set cannot change the patron's loans."""
        patron = Patron(id=111, name="John Smith")
        patron.record_loan("book-1")

        books = patron.borrowed_books

        assert isinstance(books, frozenset)
        assert books == {"book-1"}

    def test_loans_not_serialized(self):
        """Test loan state is not part of the public field set."""
        patron = Patron(id=111, name="John Smith")
        patron.record_loan("book-1")

        assert patron.model_dump() == {"id": 111, "name": "John Smith", "address": None}


class TestPatronView:
    """Test read-only patron snapshots."""

    def test_view_matches_patron(self):
        patron = Patron(id=111, name="John Smith", address="Main St")
        patron.record_loan("book-1")

        view = patron.view()

        assert isinstance(view, PatronView)
        assert view.id == 111
        assert view.name == "John Smith"
        assert view.address == "Main St"
        assert view.borrowed_count == 1
        assert view.holds("book-1")

    def test_view_is_frozen(self):
        view = Patron(id=111, name="John Smith").view()

        with pytest.raises(ValidationError):
            view.name = "Changed"

    def test_view_does_not_follow_later_changes(self):
        """Test a view is a snapshot taken at the time of the call."""
        patron = Patron(id=111, name="John Smith")
        view = patron.view()

        patron.record_loan("book-1")
        patron.set_profile("Changed", None)

        assert view.borrowed_count == 0
        assert view.name == "John Smith"
