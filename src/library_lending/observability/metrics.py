"""Custom metrics for the library lending registry."""

import logfire

# Library Business Metrics
books_circulation = logfire.metric_counter(
    "library.books.circulation", description="Book circulation events (checkout/return)"
)

loan_refusals = logfire.metric_counter(
    "library.loans.refused", description="Loan requests refused, by reason"
)

copies_acquired = logfire.metric_counter(
    "library.copies.acquired", description="Book copies added to the collection"
)


def record_circulation_event(event_type: str):
    """Record a checkout or return."""
    books_circulation.add(1, {"event_type": event_type})


def record_loan_refusal(reason: str):
    """Record a refused loan request."""
    loan_refusals.add(1, {"reason": reason})


def record_acquisition(quantity: int):
    """Record copies entering the collection."""
    copies_acquired.add(quantity)
