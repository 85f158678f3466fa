"""Report-and-capture wrapper for domain operations.

``attempt`` runs one constructor or entity mutation, forwards the outcome to a
reporter as a (sequence_id, message, payload) tuple, and hands the outcome
back as a Result. It is a reporting seam, not a recovery mechanism: it never
retries and never substitutes a default, and it captures only
ValidationError. Any other exception is a bug and propagates.

Usage:
    from src.application.attempt import attempt
    from src.core.container import get_reporter
    from src.domain.entities.table import Table

    table = Table.create(5, 4)
    attempt(get_reporter(), 4, "Seat party of 3", table.seat_guests, 3)
    attempt(get_reporter(), 4, "Seat party of 2", table.seat_guests, 2)
    # second call reports "exceeds capacity" and returns Failure
"""

from collections.abc import Callable
from dataclasses import fields, is_dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, ParamSpec, TypeVar

from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.protocols.reporter_protocol import ReporterProtocol
from src.domain.value_objects.money import Money

P = ParamSpec("P")
T = TypeVar("T")


def to_payload(value: Any) -> Any:
    """Convert a domain value into plain data for a reporter.

    - Money becomes its formatted string plus minor units and currency
    - Objects with ``to_dict()`` (entities) use it
    - Single-field value objects collapse to their field
    - Other dataclasses become dicts of converted fields
    - Decimals become strings (exact), Enums their value
    - Lists, tuples and dicts are converted element-wise

    Args:
        value: Anything returned by a constructor or mutation.

    Returns:
        JSON-friendly representation.
    """
    if isinstance(value, Money):
        return {
            "amount": value.format(),
            "minor_units": value.minor_units,
            "currency": value.currency.value,
        }
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if is_dataclass(value) and not isinstance(value, type):
        data = {f.name: to_payload(getattr(value, f.name)) for f in fields(value)}
        if len(data) == 1:
            return next(iter(data.values()))
        return data
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [to_payload(item) for item in value]
    if isinstance(value, dict):
        return {str(key): to_payload(item) for key, item in value.items()}
    return value


def attempt(
    reporter: ReporterProtocol,
    sequence_id: int,
    message: str,
    operation: Callable[P, T],
    *args: P.args,
    **kwargs: P.kwargs,
) -> Result[T, ValidationError]:
    """Run operation, report the outcome, return it as a Result.

    Args:
        reporter: Destination for the outcome.
        sequence_id: Scenario or step identifier forwarded to the reporter.
        message: Summary forwarded with a success.
        operation: Constructor, factory or mutation to run.
        *args: Positional arguments for operation.
        **kwargs: Keyword arguments for operation.

    Returns:
        Success(value) with the operation's return value, or
        Failure(error) with the ValidationError it raised.

    Raises:
        Exception: Anything other than ValidationError, unchanged.
    """
    try:
        value = operation(*args, **kwargs)
    except ValidationError as error:
        reporter.report_failure(
            sequence_id,
            message,
            {
                "error_type": type(error).__name__,
                "reason": error.reason,
                "field": error.field,
                "error_message": error.message,
            },
        )
        return Failure(error=error)

    reporter.report(sequence_id, message, {"result": to_payload(value)})
    return Success(value=value)
