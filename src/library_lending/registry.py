"""
Lending registry for the library.

The registry is the single place lending policy lives. It owns three
mappings:

1. **Shelf counts** - copies of each book currently on the shelf
2. **Acquisition counts** - copies of each book ever acquired
3. **Patrons** - the one mutable record per patron identifier

Callers never hold a mutable patron record: ``get_patron`` returns frozen
views, and every operation that takes a patron resolves it to the
registry's own record by identifier.

A loan request is checked in a fixed order. Loan-limit and registration
problems are errors; an unknown book or a shelf at its floor is an ordinary
refusal and returns ``False``.
"""

import logging
from collections.abc import Hashable

from .config import MAX_BOOKS_PER_PATRON, MIN_COPIES_TO_LEND, LendingConfig, get_config
from .exceptions import (
    DuplicateLoanError,
    InvalidQuantityError,
    InvalidReturnError,
    LoanLimitExceededError,
    UnregisteredPatronError,
)
from .models.inventory import InventoryEntry, LendingReport
from .models.patron import Patron, PatronView
from .observability.decorators import trace_operation
from .observability.metrics import (
    record_acquisition,
    record_circulation_event,
    record_loan_refusal,
)

logger = logging.getLogger(__name__)

# Anything that identifies a patron: the record, a snapshot, or the bare id
PatronRef = Patron | PatronView | int


def _patron_id(patron: PatronRef) -> int:
    if isinstance(patron, int):
        return patron
    return patron.id


class LendingRegistry:
    """
    Coordinates inventory counts, patron loan limits and the shelf floor.

    Each instance is an independent unit of state. Limits come from the
    ``LendingConfig`` given at construction, or the global configuration.
    """

    MIN_COPIES_TO_LEND = MIN_COPIES_TO_LEND
    MAX_BOOKS_PER_PATRON = MAX_BOOKS_PER_PATRON

    def __init__(self, config: LendingConfig | None = None):
        self.config = config or get_config()
        self.min_copies_to_lend = self.config.min_copies_to_lend
        self.max_books_per_patron = self.config.max_books_per_patron

        self._available: dict[Hashable, int] = {}
        self._acquired: dict[Hashable, int] = {}
        self._patrons: dict[int, Patron] = {}
        logger.debug("Lending registry created with policy %s", self.config.policy)

    # === Patrons ===

    @trace_operation("register_patron")
    def register_patron(self, patron: Patron | PatronView) -> None:
        """
        Register a patron, or update the profile of a known one.

        A known identifier only has its name and address overwritten; the
        books it holds are untouched. A new identifier gets a fresh record
        with no loans.
        """
        existing = self._patrons.get(patron.id)
        if existing is not None:
            existing.set_profile(patron.name, patron.address)
            logger.info("Updated profile for patron %s", patron.id)
            return

        self._patrons[patron.id] = Patron(id=patron.id, name=patron.name, address=patron.address)
        logger.info("Registered patron %s (%s)", patron.id, patron.name)

    def get_patron(self, patron_id: int) -> PatronView | None:
        """Return a snapshot of the patron, or ``None`` if not registered."""
        record = self._patrons.get(patron_id)
        if record is None:
            return None
        return record.view()

    def is_registered(self, patron: PatronRef) -> bool:
        return _patron_id(patron) in self._patrons

    def total_registered_patrons(self) -> int:
        return len(self._patrons)

    # === Inventory ===

    @trace_operation("acquire_copies")
    def acquire_copies(self, book: Hashable, quantity: int) -> None:
        """
        Add ``quantity`` copies of ``book`` to the shelf and the collection.

        Raises:
            InvalidQuantityError: If quantity is not a positive integer
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            logger.warning("Rejected acquisition of %r copies of %r", quantity, book)
            raise InvalidQuantityError(book, quantity)

        self._available[book] = self._available.get(book, 0) + quantity
        self._acquired[book] = self._acquired.get(book, 0) + quantity
        record_acquisition(quantity)
        logger.info(
            "Acquired %d copies of %r (shelf %d, total %d)",
            quantity,
            book,
            self._available[book],
            self._acquired[book],
        )

    def shelved_copies(self, book: Hashable) -> int:
        """Copies of ``book`` on the shelf; 0 for a book never acquired."""
        return self._available.get(book, 0)

    def acquired_copies(self, book: Hashable) -> int:
        """Copies of ``book`` ever acquired; 0 for a book never acquired."""
        return self._acquired.get(book, 0)

    def loaned_copies(self, book: Hashable) -> int:
        return self.acquired_copies(book) - self.shelved_copies(book)

    def total_shelved_copies(self) -> int:
        """Sum of shelf copies across the whole collection."""
        return sum(self._available.values())

    def inventory(self, book: Hashable) -> InventoryEntry | None:
        if book not in self._available:
            return None
        return InventoryEntry(book=book, available=self._available[book], total=self._acquired[book])

    def is_lendable(self, book: Hashable) -> bool:
        """Check whether the shelf floor would allow a copy of ``book`` to leave."""
        available = self._available.get(book)
        return available is not None and available > self.min_copies_to_lend

    # === Circulation ===

    @trace_operation("lend_book")
    def lend_book(self, book: Hashable, patron: PatronRef) -> bool:
        """
        Lend a copy of ``book`` to ``patron``.

        The checks run in this order:
        1. Patron already at the loan limit -> LoanLimitExceededError
        2. Patron not registered -> UnregisteredPatronError
        3. Book never acquired -> False
        4. Shelf at or below the floor -> False
        5. Patron already holds this book -> DuplicateLoanError

        Returns:
            True if the loan was granted

        Raises:
            LoanLimitExceededError: If the patron holds the maximum number of books
            UnregisteredPatronError: If the patron is not registered
            DuplicateLoanError: If the patron already holds this book
        """
        patron_id = _patron_id(patron)
        record = self._patrons.get(patron_id)

        # An unregistered patron value is judged on the loans it reports
        if record is not None:
            borrowed = record.borrowed_count
        elif isinstance(patron, int):
            borrowed = 0
        else:
            borrowed = patron.borrowed_count

        if borrowed >= self.max_books_per_patron:
            logger.warning(
                "Loan refused: patron %s holds %d of %d books",
                patron_id,
                borrowed,
                self.max_books_per_patron,
            )
            record_loan_refusal("loan_limit")
            raise LoanLimitExceededError(patron_id, self.max_books_per_patron)

        if record is None:
            logger.warning("Loan refused: patron %s is not registered", patron_id)
            record_loan_refusal("unregistered_patron")
            raise UnregisteredPatronError(patron_id)

        available = self._available.get(book)
        if available is None:
            logger.info("Loan refused: %r is not in the collection", book)
            record_loan_refusal("unknown_book")
            return False

        if available <= self.min_copies_to_lend:
            logger.info(
                "Loan refused: %d copies of %r on the shelf, floor is %d",
                available,
                book,
                self.min_copies_to_lend,
            )
            record_loan_refusal("shelf_floor")
            return False

        if record.holds(book):
            logger.warning("Loan refused: patron %s already holds %r", patron_id, book)
            record_loan_refusal("duplicate_loan")
            raise DuplicateLoanError(patron_id, book)

        self._available[book] = available - 1
        record.record_loan(book)
        record_circulation_event("checkout")
        logger.info(
            "Lent %r to patron %s (%d left on shelf, patron holds %d)",
            book,
            patron_id,
            self._available[book],
            record.borrowed_count,
        )
        return True

    @trace_operation("return_book")
    def return_book(self, book: Hashable, patron: PatronRef) -> None:
        """
        Take back a copy of ``book`` from ``patron``.

        Raises:
            InvalidReturnError: If the patron does not hold the book
        """
        patron_id = _patron_id(patron)
        record = self._patrons.get(patron_id)

        if record is None or not record.holds(book):
            logger.warning("Return refused: patron %s does not hold %r", patron_id, book)
            raise InvalidReturnError(patron_id, book)

        record.record_return(book)
        self._available[book] += 1
        record_circulation_event("return")
        logger.info(
            "Patron %s returned %r (%d on shelf)", patron_id, book, self._available[book]
        )

    def loans_outstanding(self, patron: PatronRef | None) -> int:
        """
        Number of books the patron currently holds.

        Never raises: an unknown id or ``None`` owes nothing.
        """
        if patron is None:
            return 0
        record = self._patrons.get(_patron_id(patron))
        if record is not None:
            return record.borrowed_count
        if isinstance(patron, int):
            return 0
        return patron.borrowed_count

    # === Reporting ===

    def report(self) -> LendingReport:
        """Snapshot the registry's inventory and loan state."""
        books = [
            InventoryEntry(book=book, available=available, total=self._acquired[book])
            for book, available in self._available.items()
        ]
        return LendingReport(
            registered_patrons=len(self._patrons),
            active_borrowers=sum(1 for p in self._patrons.values() if p.borrowed_count),
            loans_outstanding=sum(p.borrowed_count for p in self._patrons.values()),
            books=books,
            **self.config.policy,
        )
