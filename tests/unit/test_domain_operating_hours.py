"""Unit tests for OperatingHours value object.

Tests cover:
- Same-day windows (09-17)
- Overnight windows crossing midnight (22-06)
- Boundary hours (opening hour open, closing hour closed)
- Invalid hours propagating the Hour error reason
"""

import pytest

from src.core.errors import ValidationError
from src.domain.value_objects.hour import Hour
from src.domain.value_objects.operating_hours import OperatingHours


@pytest.mark.unit
class TestOperatingHoursCreation:
    """Test OperatingHours.create."""

    def test_create_from_raw_hours(self):
        hours = OperatingHours.create(9, 17)
        assert hours.opens == Hour(9)
        assert hours.closes == Hour(17)
        assert str(hours) == "09:00-17:00"

    def test_closing_before_opening_is_allowed(self):
        hours = OperatingHours.create(22, 6)
        assert hours.is_overnight is True

    @pytest.mark.parametrize(
        ("opens", "closes", "reason"),
        [
            (25, 6, "out of range"),
            (9, -5, "out of range"),
            (9.5, 17, "not integer"),
            (9, "17", "not integer"),
        ],
    )
    def test_invalid_hour_reason_propagates(self, opens, closes, reason):
        with pytest.raises(ValidationError) as exc_info:
            OperatingHours.create(opens, closes)
        assert exc_info.value.reason == reason
        assert exc_info.value.field == "hour"

    def test_direct_construction_validates_too(self):
        with pytest.raises(ValidationError):
            OperatingHours(24, 6)  # type: ignore[arg-type]


@pytest.mark.unit
class TestIsOpenAt:
    """Test is_open_at for same-day and overnight windows."""

    @pytest.mark.parametrize(("hour", "expected"), [(12, True), (20, False)])
    def test_same_day_window(self, hour, expected):
        assert OperatingHours.create(9, 17).is_open_at(hour) is expected

    @pytest.mark.parametrize(("hour", "expected"), [(2, True), (10, False)])
    def test_overnight_window(self, hour, expected):
        assert OperatingHours.create(22, 6).is_open_at(hour) is expected

    def test_opening_hour_is_open_and_closing_hour_is_closed(self):
        day = OperatingHours.create(9, 17)
        night = OperatingHours.create(22, 6)
        assert day.is_open_at(9) is True
        assert day.is_open_at(17) is False
        assert night.is_open_at(22) is True
        assert night.is_open_at(0) is True
        assert night.is_open_at(6) is False

    def test_full_overnight_schedule(self):
        night = OperatingHours.create(22, 6)
        open_hours = [h for h in range(24) if night.is_open_at(h)]
        assert open_hours == [0, 1, 2, 3, 4, 5, 22, 23]

    def test_equal_opening_and_closing_is_never_open(self):
        hours = OperatingHours.create(12, 12)
        assert hours.is_overnight is False
        assert not any(hours.is_open_at(h) for h in range(24))

    def test_accepts_hour_instances(self):
        assert OperatingHours.create(9, 17).is_open_at(Hour(10)) is True

    def test_invalid_query_hour_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            OperatingHours.create(9, 17).is_open_at(24)
        assert exc_info.value.reason == "out of range"
