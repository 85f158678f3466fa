"""Validation reason codes (machine-readable).

Every rejected construction or mutation carries exactly one of these codes.
The enum value is the human-readable reason string exposed as
``ValidationError.reason``.

Categories:
- Numeric rules (NEGATIVE, TOO_LARGE, NOT_INTEGER, NOT_POSITIVE, OUT_OF_RANGE)
- Text rules (EMPTY, BAD_FORMAT)
- Money rules (NON_INTEGER_MINOR_UNITS, INVALID_CURRENCY, CURRENCY_MISMATCH)
- Table rules (CAPACITY_NOT_POSITIVE, EXCEEDS_CAPACITY, NEGATIVE_OCCUPANCY)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Reason a value or state transition was rejected."""

    # Numeric rules
    NOT_A_NUMBER = "not a number"
    NEGATIVE = "negative"
    TOO_LARGE = "too large"
    NOT_INTEGER = "not integer"
    NOT_POSITIVE = "not positive"
    OUT_OF_RANGE = "out of range"

    # Text rules
    EMPTY = "empty"
    BAD_FORMAT = "bad format"

    # Money rules
    NON_INTEGER_MINOR_UNITS = "non-integer minor units"
    INVALID_CURRENCY = "invalid currency"
    CURRENCY_MISMATCH = "currency mismatch"

    # Table rules
    CAPACITY_NOT_POSITIVE = "capacity must be positive"
    EXCEEDS_CAPACITY = "exceeds capacity"
    NEGATIVE_OCCUPANCY = "negative occupancy"
