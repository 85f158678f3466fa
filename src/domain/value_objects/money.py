"""Immutable Money value object stored in integer minor units.

Amounts are held as a whole number of cents (pence, euro cents) so repeated
addition never drifts the way binary floats do. Conversion from major units
happens once, at construction, with round-half-away-from-zero
(``ROUND_HALF_UP`` on the decimal string of the input).

Error Handling:
    Arithmetic and comparison between different currencies raise
    CurrencyMismatchError (a ValidationError, reason "currency mismatch").
    Sums never overflow: Python integers widen as needed.

Usage:
    from src.domain.value_objects.money import Money

    burger = Money.from_dollars(12.50, "USD")
    pizza = Money.from_dollars(18.50, "USD")
    (burger + pizza).format()  # '$31.00'
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Self

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.domain.validators.functions import require_integer, require_number
from src.domain.value_objects.quantity import Quantity

MINOR_UNITS_PER_MAJOR = 100


class Currency(str, Enum):
    """Supported currencies (ISO 4217)."""

    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"

    @property
    def symbol(self) -> str:
        """Display symbol used by Money.format()."""
        return _CURRENCY_SYMBOLS[self]


_CURRENCY_SYMBOLS: dict[Currency, str] = {
    Currency.USD: "$",
    Currency.EUR: "€",
    Currency.GBP: "£",
}


class CurrencyMismatchError(ValidationError):
    """Raised when combining Money of different currencies."""

    def __init__(self, currency1: Currency, currency2: Currency) -> None:
        """Initialize currency mismatch error.

        Args:
            currency1: Currency of the left operand.
            currency2: Currency of the right operand.
        """
        super().__init__(
            ErrorCode.CURRENCY_MISMATCH,
            f"Cannot combine {currency1.value} and {currency2.value}",
            field="currency",
        )
        self.currency1 = currency1
        self.currency2 = currency2


def validate_currency(code: "Currency | str") -> Currency:
    """Validate and normalize a currency code.

    Args:
        code: Currency member or code string (case-insensitive).

    Returns:
        Currency member.

    Raises:
        ValidationError: "invalid currency" if the code is not supported.

    Example:
        >>> validate_currency("usd")
        <Currency.USD: 'USD'>
    """
    if isinstance(code, Currency):
        return code
    if not isinstance(code, str) or not code.strip():
        raise ValidationError(
            ErrorCode.INVALID_CURRENCY, "Currency code cannot be empty", field="currency"
        )
    try:
        return Currency(code.strip().upper())
    except ValueError as e:
        raise ValidationError(
            ErrorCode.INVALID_CURRENCY,
            f"Unsupported currency code: {code}",
            field="currency",
        ) from e


@dataclass(frozen=True)
class Money:
    """Immutable amount of one currency, in minor units.

    Attributes:
        minor_units: Whole number of cents (or pence, euro cents).
        currency: Currency of the amount.

    Immutability:
        Frozen dataclass; arithmetic returns new instances.

    Example:
        >>> Money.from_major_units(12.345, "USD")
        Money(minor_units=1235, currency='USD')
    """

    minor_units: int
    currency: Currency

    def __post_init__(self) -> None:
        """Validate minor units and normalize currency.

        Raises:
            ValidationError: "non-integer minor units" or "invalid currency".
        """
        object.__setattr__(
            self,
            "minor_units",
            require_integer(
                self.minor_units,
                field="minor_units",
                code=ErrorCode.NON_INTEGER_MINOR_UNITS,
            ),
        )
        object.__setattr__(self, "currency", validate_currency(self.currency))

    # -------------------------------------------------------------------------
    # Factory Methods
    # -------------------------------------------------------------------------

    @classmethod
    def from_major_units(cls, amount: Decimal | int | float, currency: "Currency | str") -> Self:
        """Create Money from an amount in major units (dollars, euros, pounds).

        Args:
            amount: Major-unit amount; rounded half away from zero to cents.
            currency: Currency code.

        Returns:
            Money holding round(amount * 100) minor units.

        Raises:
            ValidationError: If amount is not a finite number or currency is invalid.
        """
        number = require_number(amount, field="amount")
        minor = (number * MINOR_UNITS_PER_MAJOR).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return cls(int(minor), validate_currency(currency))

    @classmethod
    def from_minor_units(cls, minor_units: int, currency: "Currency | str") -> Self:
        """Create Money from a whole number of minor units.

        Raises:
            ValidationError: "non-integer minor units" if minor_units is fractional.
        """
        return cls(minor_units, validate_currency(currency))

    @classmethod
    def from_dollars(cls, amount: Decimal | int | float, currency: "Currency | str") -> Self:
        """Alias of from_major_units."""
        return cls.from_major_units(amount, currency)

    @classmethod
    def from_cents(cls, cents: int, currency: "Currency | str") -> Self:
        """Alias of from_minor_units."""
        return cls.from_minor_units(cents, currency)

    @classmethod
    def zero(cls, currency: "Currency | str" = Currency.USD) -> Self:
        """Money with zero amount in currency."""
        return cls(0, validate_currency(currency))

    # -------------------------------------------------------------------------
    # Arithmetic Operations (Same Currency Only)
    # -------------------------------------------------------------------------

    def add(self, other: "Money") -> "Money":
        """Add two Money values.

        Raises:
            CurrencyMismatchError: If currencies differ.
        """
        self._check_same_currency(other)
        return Money(self.minor_units + other.minor_units, self.currency)

    def subtract(self, other: "Money") -> "Money":
        """Subtract other from this amount. The result may be negative.

        Raises:
            CurrencyMismatchError: If currencies differ.
        """
        self._check_same_currency(other)
        return Money(self.minor_units - other.minor_units, self.currency)

    def multiply(self, factor: "Quantity | int") -> "Money":
        """Scale by a whole-number factor (typically a Quantity).

        Raises:
            ValidationError: "not integer" if factor is fractional.
        """
        if isinstance(factor, Quantity):
            factor = factor.value
        return Money(self.minor_units * require_integer(factor, field="factor"), self.currency)

    def __add__(self, other: object) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, factor: object) -> "Money":
        if isinstance(factor, bool) or not isinstance(factor, (int, Quantity)):
            return NotImplemented
        return self.multiply(factor)

    def __rmul__(self, factor: object) -> "Money":
        return self.__mul__(factor)

    def __neg__(self) -> "Money":
        return Money(-self.minor_units, self.currency)

    # -------------------------------------------------------------------------
    # Comparison Operations (Same Currency Only)
    # -------------------------------------------------------------------------

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.minor_units < other.minor_units

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.minor_units <= other.minor_units

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.minor_units > other.minor_units

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.minor_units >= other.minor_units

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    @property
    def major_units(self) -> Decimal:
        """Amount in major units, exact (e.g. Decimal('31.00'))."""
        return Decimal(self.minor_units).scaleb(-2)

    def is_zero(self) -> bool:
        return self.minor_units == 0

    def is_negative(self) -> bool:
        return self.minor_units < 0

    def is_positive(self) -> bool:
        return self.minor_units > 0

    # -------------------------------------------------------------------------
    # String Representations
    # -------------------------------------------------------------------------

    def format(self) -> str:
        """Render with currency symbol and exactly two decimals.

        Example:
            >>> Money.from_minor_units(3100, "USD").format()
            '$31.00'
            >>> Money.from_minor_units(-505, "GBP").format()
            '-£5.05'
        """
        sign = "-" if self.minor_units < 0 else ""
        magnitude = Decimal(abs(self.minor_units)).scaleb(-2)
        return f"{sign}{self.currency.symbol}{magnitude:.2f}"

    def __repr__(self) -> str:
        return f"Money(minor_units={self.minor_units!r}, currency={self.currency.value!r})"

    def __str__(self) -> str:
        """Human-readable string like "1,234.56 USD"."""
        return f"{self.major_units:,.2f} {self.currency.value}"

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    def _check_same_currency(self, other: "Money") -> None:
        if not isinstance(other, Money):
            raise TypeError(f"Expected Money, got {type(other).__name__}")
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency, other.currency)
