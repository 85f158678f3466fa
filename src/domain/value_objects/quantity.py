"""Quantity value object.

How many of one menu item a customer orders. The upper bound is a business
rule (no single line of 50,000 coffees), not a technical limit.
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.domain.validators.functions import require_integer, require_positive

MAX_QUANTITY = 100


def _validate_quantity(n: object) -> int:
    count = require_positive(require_integer(n, field="quantity"), field="quantity")
    if count > MAX_QUANTITY:
        raise ValidationError(
            ErrorCode.TOO_LARGE,
            f"Quantity {count} exceeds maximum of {MAX_QUANTITY} per order",
            field="quantity",
        )
    return count


@dataclass(frozen=True, order=True)
class Quantity:
    """Whole number of items, 1 to MAX_QUANTITY inclusive.

    Attributes:
        value: The count.
    """

    value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _validate_quantity(self.value))

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


def create_quantity(n: "Quantity | int | float") -> Quantity:
    """Validate n and return it as a Quantity.

    Raises:
        ValidationError: "not integer", "not positive" or "too large".
    """
    if isinstance(n, Quantity):
        n = n.value
    return Quantity(n)  # type: ignore[arg-type]
