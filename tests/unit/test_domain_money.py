"""Unit tests for Money value object.

Tests cover:
- Construction from minor and major units (rounding half away from zero)
- Currency validation
- Arithmetic (add, subtract, multiply, neg) in integer minor units
- Comparison operations (lt, le, gt, ge)
- CurrencyMismatchError handling
- Formatting (format, str, repr)

Architecture:
- Unit tests for domain value object (no dependencies)
- Tests immutability and exactness of repeated addition
"""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.domain.value_objects.money import (
    Currency,
    CurrencyMismatchError,
    Money,
    validate_currency,
)
from src.domain.value_objects.quantity import Quantity


def usd(cents: int) -> Money:
    """Helper to create USD Money from cents."""
    return Money.from_cents(cents, "USD")


# =============================================================================
# Currency Validation Tests
# =============================================================================


@pytest.mark.unit
class TestCurrencyValidation:
    """Test currency validation function."""

    def test_validate_currency_normalizes_case_and_whitespace(self):
        assert validate_currency("usd") is Currency.USD
        assert validate_currency(" Gbp ") is Currency.GBP
        assert validate_currency(Currency.EUR) is Currency.EUR

    @pytest.mark.parametrize("code", ["", "   ", "JPY", "US", 840])
    def test_validate_currency_rejects_unsupported(self, code):
        with pytest.raises(ValidationError) as exc_info:
            validate_currency(code)
        assert exc_info.value.reason == "invalid currency"

    def test_currency_symbols(self):
        assert Currency.USD.symbol == "$"
        assert Currency.EUR.symbol == "€"
        assert Currency.GBP.symbol == "£"


# =============================================================================
# Creation Tests
# =============================================================================


@pytest.mark.unit
class TestMoneyCreation:
    """Test Money construction."""

    def test_from_minor_units(self):
        money = Money.from_minor_units(1250, "usd")
        assert money.minor_units == 1250
        assert money.currency is Currency.USD

    def test_fractional_minor_units_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Money(12.5, "USD")  # type: ignore[arg-type]
        assert exc_info.value.reason == "non-integer minor units"
        assert exc_info.value.code is ErrorCode.NON_INTEGER_MINOR_UNITS

    def test_integral_float_minor_units_accepted(self):
        assert Money(1200.0, "USD").minor_units == 1200  # type: ignore[arg-type]

    def test_unsupported_currency_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Money(100, "JPY")  # type: ignore[arg-type]
        assert exc_info.value.reason == "invalid currency"

    @pytest.mark.parametrize(
        ("amount", "expected_cents"),
        [
            (12.5, 1250),
            (12.345, 1235),
            (-12.345, -1235),
            (0.005, 1),
            (1.005, 101),
            (Decimal("19.994"), 1999),
            (7, 700),
        ],
    )
    def test_from_major_units_rounds_half_away_from_zero(self, amount, expected_cents):
        assert Money.from_major_units(amount, "USD").minor_units == expected_cents

    @pytest.mark.parametrize("amount", [float("nan"), float("inf"), True, "12.50", None])
    def test_from_major_units_rejects_non_numbers(self, amount):
        with pytest.raises(ValidationError) as exc_info:
            Money.from_major_units(amount, "USD")
        assert exc_info.value.reason == "not a number"

    def test_from_dollars_is_from_major_units(self):
        assert Money.from_dollars(3.1, "EUR") == Money.from_major_units(3.1, "EUR")

    def test_zero(self):
        zero = Money.zero()
        assert zero.is_zero()
        assert zero.currency is Currency.USD
        assert Money.zero("GBP").currency is Currency.GBP

    def test_money_is_immutable(self):
        money = usd(100)
        with pytest.raises(FrozenInstanceError):
            money.minor_units = 200  # type: ignore[misc]


# =============================================================================
# Arithmetic Tests
# =============================================================================


@pytest.mark.unit
class TestMoneyArithmetic:
    """Test arithmetic stays in exact minor units."""

    def test_burger_and_pizza_total(self):
        burger = Money.from_dollars(12.50, "USD")
        pizza = Money.from_dollars(18.50, "USD")
        assert (burger + pizza).format() == "$31.00"

    def test_repeated_addition_is_exact(self):
        """Test adding ten cents ten times is exactly one dollar."""
        total = Money.zero()
        for _ in range(10):
            total = total + Money.from_dollars(0.10, "USD")
        assert total == usd(100)

    def test_subtract_can_go_negative(self):
        result = usd(500).subtract(usd(1005))
        assert result.minor_units == -505
        assert result.is_negative()

    def test_multiply_by_quantity(self):
        assert usd(1500).multiply(Quantity(3)) == usd(4500)
        assert usd(1500) * 3 == usd(4500)
        assert 3 * usd(1500) == usd(4500)

    def test_multiply_by_fraction_rejected(self):
        with pytest.raises(ValidationError):
            usd(100).multiply(2.5)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            usd(100) * 2.5  # type: ignore[operator]

    def test_negation(self):
        assert -usd(250) == usd(-250)

    def test_large_sums_do_not_overflow(self):
        big = Money.from_minor_units(10**30, "USD")
        assert (big + big).minor_units == 2 * 10**30

    def test_add_non_money_is_type_error(self):
        with pytest.raises(TypeError):
            usd(100) + 5  # type: ignore[operator]
        with pytest.raises(TypeError):
            usd(100).add(5)  # type: ignore[arg-type]


# =============================================================================
# Currency Mismatch Tests
# =============================================================================


@pytest.mark.unit
class TestCurrencyMismatch:
    """Test cross-currency operations are rejected."""

    def test_add_mismatch(self):
        with pytest.raises(CurrencyMismatchError) as exc_info:
            usd(100) + Money.from_cents(100, "EUR")
        error = exc_info.value
        assert error.reason == "currency mismatch"
        assert error.currency1 is Currency.USD
        assert error.currency2 is Currency.EUR
        assert isinstance(error, ValidationError)

    def test_subtract_mismatch(self):
        with pytest.raises(CurrencyMismatchError):
            usd(100) - Money.from_cents(100, "GBP")

    @pytest.mark.parametrize("op", ["__lt__", "__le__", "__gt__", "__ge__"])
    def test_comparison_mismatch(self, op):
        with pytest.raises(CurrencyMismatchError):
            getattr(usd(100), op)(Money.from_cents(100, "EUR"))

    def test_same_amount_different_currency_not_equal(self):
        assert usd(100) != Money.from_cents(100, "EUR")


# =============================================================================
# Comparison and Query Tests
# =============================================================================


@pytest.mark.unit
class TestMoneyComparison:
    """Test ordering within one currency."""

    def test_ordering(self):
        assert usd(100) < usd(200)
        assert usd(200) > usd(100)
        assert usd(100) <= usd(100)
        assert usd(100) >= usd(100)
        assert max(usd(5), usd(50), usd(1)) == usd(50)

    def test_sign_queries(self):
        assert usd(1).is_positive()
        assert usd(-1).is_negative()
        assert usd(0).is_zero()


# =============================================================================
# Formatting Tests
# =============================================================================


@pytest.mark.unit
class TestMoneyFormatting:
    """Test string representations."""

    @pytest.mark.parametrize(
        ("money", "expected"),
        [
            (Money.from_cents(3100, "USD"), "$31.00"),
            (Money.from_cents(5, "USD"), "$0.05"),
            (Money.from_cents(-505, "GBP"), "-£5.05"),
            (Money.from_cents(123456789, "EUR"), "€1234567.89"),
        ],
    )
    def test_format(self, money, expected):
        assert money.format() == expected

    def test_str_groups_thousands(self):
        assert str(usd(123456)) == "1,234.56 USD"

    def test_repr(self):
        assert repr(usd(1235)) == "Money(minor_units=1235, currency='USD')"

    def test_major_units_round_trip(self):
        money = Money.from_major_units(12.34, "USD")
        assert money.major_units == Decimal("12.34")
        assert Money.from_major_units(money.major_units, money.currency) == money
