"""Decorators for tracing registry operations."""

import functools
from collections.abc import Callable
from datetime import datetime
from typing import Any

import logfire

from ..models.patron import Patron, PatronView


def trace_operation(operation: str):
    """Decorator to trace a lending registry operation in a logfire span."""

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with logfire.span(
                f"lending.{operation}",
                operation=operation,
                operation_category=_categorize_operation(operation),
            ) as span:
                start_time = datetime.now()

                # args[0] is the registry itself
                _add_attributes(span, "input", args[1:])

                try:
                    result = func(*args, **kwargs)

                    span.set_attribute("operation.success", True)
                    span.set_attribute(
                        "operation.duration_ms", (datetime.now() - start_time).total_seconds() * 1000
                    )
                    _add_result_attributes(span, result)

                    return result

                except Exception as e:
                    span.set_attribute("operation.success", False)
                    span.set_attribute("operation.error", type(e).__name__)
                    span.set_attribute("operation.error_message", str(e))
                    raise

        return wrapper

    return decorator


def _categorize_operation(operation: str) -> str:
    """Categorize operations for grouping in dashboards."""
    if "lend" in operation or "return" in operation:
        return "circulation"
    if "acquire" in operation:
        return "inventory"
    if "patron" in operation:
        return "membership"
    return "general"


def _add_attributes(span, prefix: str, args: tuple[Any, ...]):
    """Add positional arguments to the span as readable attributes."""
    for index, value in enumerate(args):
        if isinstance(value, str | int | float | bool):
            span.set_attribute(f"{prefix}.{index}", value)
        elif isinstance(value, Patron | PatronView):
            span.set_attribute(f"{prefix}.{index}.patron_id", value.id)
        else:
            span.set_attribute(f"{prefix}.{index}", repr(value))


def _add_result_attributes(span, result: Any):
    """Record simple results such as the loan-granted flag."""
    if isinstance(result, bool | int):
        span.set_attribute("result.value", result)
