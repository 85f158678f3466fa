"""Unit tests for OrderId value object.

Tests cover:
- create_order_id format (ORD- plus five or more digits)
- generate_order_id output always passes create_order_id
- Generator at clock edge cases (epoch, far future)
"""

import re

import pytest
from freezegun import freeze_time

from src.core.errors import ValidationError
from src.domain.value_objects.order_id import (
    ORDER_ID_MIN_DIGITS,
    ORDER_ID_PATTERN,
    ORDER_ID_PREFIX,
    OrderId,
    create_order_id,
    generate_order_id,
)


@pytest.mark.unit
class TestCreateOrderId:
    """Test validating order ids from outside."""

    @pytest.mark.parametrize("raw", ["ORD-10001", "ORD-00000", "ORD-1729384756123"])
    def test_accepts_conforming_ids(self, raw):
        assert create_order_id(raw).value == raw

    @pytest.mark.parametrize(
        "raw",
        [
            "ORD-1234",
            "ORD-",
            "ord-12345",
            "ORD12345",
            "ORD-12a45",
            "ORD-12345-abcde",
            " ORD-12345x",
            "12345",
        ],
    )
    def test_rejects_malformed_ids(self, raw):
        with pytest.raises(ValidationError) as exc_info:
            create_order_id(raw)
        assert exc_info.value.reason == "bad format"

    @pytest.mark.parametrize("raw", ["  ORD-12345", "ORD-12345\n", "  ORD-12345\n", "\tORD-10001 "])
    def test_rejects_padded_ids(self, raw):
        """Test surrounding whitespace is not trimmed away."""
        with pytest.raises(ValidationError) as exc_info:
            create_order_id(raw)
        assert exc_info.value.reason == "bad format"

    @pytest.mark.parametrize("raw", ["ORD-\u0661\u0662\u0663\u0664\u0665", "ORD-\uff11\uff12\uff13\uff14\uff15"])
    def test_rejects_non_ascii_digits(self, raw):
        """Test Arabic-Indic and full-width digits are not accepted."""
        with pytest.raises(ValidationError) as exc_info:
            create_order_id(raw)
        assert exc_info.value.reason == "bad format"

    def test_rejects_empty_id(self):
        with pytest.raises(ValidationError) as exc_info:
            create_order_id("")
        assert exc_info.value.reason == "empty"

    def test_order_ids_compare_by_value(self):
        assert create_order_id("ORD-10001") == OrderId("ORD-10001")
        assert create_order_id("ORD-10001") != create_order_id("ORD-10002")


@pytest.mark.unit
class TestGenerateOrderId:
    """The generator skips validation, so its output must always conform."""

    def test_generated_ids_pass_validation(self):
        for _ in range(500):
            generated = generate_order_id()
            assert create_order_id(generated.value) == generated

    def test_generated_ids_match_shared_pattern(self):
        generated = generate_order_id()
        assert ORDER_ID_PATTERN.fullmatch(generated.value)
        assert generated.value.startswith(ORDER_ID_PREFIX)

    @freeze_time("1970-01-01 00:00:00")
    def test_generated_at_epoch_still_conforms(self):
        """Test a zero timestamp still yields at least five digits."""
        generated = generate_order_id()
        assert create_order_id(generated.value) == generated
        digits = generated.value.removeprefix(ORDER_ID_PREFIX)
        assert len(digits) >= ORDER_ID_MIN_DIGITS

    @freeze_time("2999-12-31 23:59:59")
    def test_generated_far_future_still_conforms(self):
        generated = generate_order_id()
        assert create_order_id(generated.value) == generated

    @freeze_time("2026-10-19 12:00:00")
    def test_generated_id_embeds_millisecond_timestamp(self):
        generated = generate_order_id()
        assert re.fullmatch(r"ORD-1792411200000\d{5}", generated.value)

    def test_generated_ids_are_distinct(self):
        """Test ids minted back to back differ (random suffix)."""
        ids = {generate_order_id() for _ in range(50)}
        assert len(ids) > 1
