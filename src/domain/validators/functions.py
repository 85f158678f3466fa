"""Centralized validation functions (DRY principle).

Every smart constructor in ``src.domain.value_objects`` and every guarded
mutation in ``src.domain.entities`` is built from these checks. Validators are
pure functions: they either return the normalized input or raise
ValidationError. They never log and never default.

Reference:
    - src/domain/validators/registry.py (catalog of constructors built on these)
"""

import re
from decimal import Decimal, InvalidOperation

from src.core.enums import ErrorCode
from src.core.errors import ValidationError


def require_number(value: object, *, field: str) -> Decimal:
    """Convert a real number to Decimal, rejecting non-numbers.

    Floats go through ``str()`` so ``12.5`` becomes ``Decimal("12.5")`` rather
    than its binary expansion.

    Args:
        value: Candidate number (int, float or Decimal; bool is rejected).
        field: Field name reported on failure.

    Returns:
        Finite Decimal with the same numeric content.

    Raises:
        ValidationError: NOT_A_NUMBER for other types, NaN or infinity.

    Example:
        >>> require_number(12.5, field="price")
        Decimal('12.5')
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise ValidationError(
            ErrorCode.NOT_A_NUMBER,
            f"{field} must be a number, got {type(value).__name__}",
            field=field,
        )
    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as e:
        raise ValidationError(
            ErrorCode.NOT_A_NUMBER, f"{field} must be a number", field=field
        ) from e
    if not number.is_finite():
        raise ValidationError(
            ErrorCode.NOT_A_NUMBER, f"{field} cannot be NaN or infinite", field=field
        )
    return number


def require_integer(
    value: object,
    *,
    field: str,
    code: ErrorCode = ErrorCode.NOT_INTEGER,
) -> int:
    """Return value as int if it is a whole number.

    Integral floats and Decimals (``3.0``) are accepted and converted; booleans
    are not numbers here even though ``bool`` subclasses ``int``.

    Args:
        value: Candidate whole number.
        field: Field name reported on failure.
        code: Error code to raise (Money uses NON_INTEGER_MINOR_UNITS).

    Returns:
        The value as a plain int.

    Raises:
        ValidationError: If value is not a whole number.

    Example:
        >>> require_integer(3.0, field="quantity")
        3
        >>> require_integer(2.5, field="quantity")
        ValidationError: quantity must be a whole number
    """
    if isinstance(value, bool):
        raise ValidationError(code, f"{field} must be a whole number", field=field)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, Decimal) and value.is_finite() and value == value.to_integral_value():
        return int(value)
    raise ValidationError(code, f"{field} must be a whole number", field=field)


def require_positive(value: int, *, field: str) -> int:
    """Reject zero and negative counts.

    Raises:
        ValidationError: NOT_POSITIVE if value <= 0.
    """
    if value <= 0:
        raise ValidationError(
            ErrorCode.NOT_POSITIVE, f"{field} must be positive, got {value}", field=field
        )
    return value


def require_text(value: object, *, field: str) -> str:
    """Trim a string and reject it if nothing is left.

    Args:
        value: Candidate string.
        field: Field name reported on failure.

    Returns:
        The trimmed string.

    Raises:
        ValidationError: BAD_FORMAT if not a string, EMPTY if blank.
    """
    if not isinstance(value, str):
        raise ValidationError(
            ErrorCode.BAD_FORMAT,
            f"{field} must be a string, got {type(value).__name__}",
            field=field,
        )
    trimmed = value.strip()
    if not trimmed:
        raise ValidationError(ErrorCode.EMPTY, f"{field} cannot be empty", field=field)
    return trimmed


def require_match(value: str, pattern: re.Pattern[str], *, field: str) -> str:
    """Reject a string that does not fully match pattern.

    Raises:
        ValidationError: BAD_FORMAT on mismatch.
    """
    if not pattern.fullmatch(value):
        raise ValidationError(
            ErrorCode.BAD_FORMAT, f"Invalid {field} format: {value!r}", field=field
        )
    return value
