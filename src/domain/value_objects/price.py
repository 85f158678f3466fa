"""Price value object.

A menu price in major currency units. Prices are bounded: nothing on the menu
is free-with-a-refund (negative) or more than the house maximum.

Usage:
    from src.domain.value_objects.price import calculate_total, create_price
    from src.domain.value_objects.quantity import create_quantity

    price = create_price(12.5)
    total = calculate_total(price, create_quantity(3))  # Decimal('37.5')
"""

from dataclasses import dataclass
from decimal import Decimal

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.domain.validators.functions import require_number
from src.domain.value_objects.quantity import Quantity

MIN_PRICE = Decimal("0")
MAX_PRICE = Decimal("10000")


def _validate_price(amount: object) -> Decimal:
    number = require_number(amount, field="price")
    if number < MIN_PRICE:
        raise ValidationError(
            ErrorCode.NEGATIVE, f"Price cannot be negative: {number}", field="price"
        )
    if number > MAX_PRICE:
        raise ValidationError(
            ErrorCode.TOO_LARGE,
            f"Price {number} exceeds maximum of {MAX_PRICE}",
            field="price",
        )
    return number


@dataclass(frozen=True)
class Price:
    """Non-negative menu price, at most MAX_PRICE.

    Attributes:
        value: Price as Decimal in major units.

    Raises:
        ValidationError: "negative", "too large" or "not a number".
    """

    value: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _validate_price(self.value))

    def __str__(self) -> str:
        return str(self.value)


def create_price(amount: "Price | Decimal | int | float") -> Price:
    """Validate amount and return it as a Price.

    Passing an existing Price re-runs construction on its numeric content, so
    ``create_price(create_price(x)) == create_price(x)``.

    Args:
        amount: Raw number or Price.

    Returns:
        Price with the same numeric content.

    Raises:
        ValidationError: If amount < 0 ("negative") or > 10000 ("too large").
    """
    if isinstance(amount, Price):
        amount = amount.value
    return Price(amount)  # type: ignore[arg-type]


def calculate_total(price: Price, quantity: Quantity) -> Decimal:
    """Line total for a validated price and quantity.

    Only accepts already-validated values; raw numbers are a TypeError rather
    than silently trusted.

    Raises:
        TypeError: If either argument is not the validated type.
    """
    if not isinstance(price, Price) or not isinstance(quantity, Quantity):
        raise TypeError("calculate_total requires a Price and a Quantity")
    return price.value * quantity.value
