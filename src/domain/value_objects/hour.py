"""Hour-of-day value object (24-hour clock, whole hours)."""

from dataclasses import dataclass

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.domain.validators.functions import require_integer

FIRST_HOUR = 0
LAST_HOUR = 23


@dataclass(frozen=True, order=True)
class Hour:
    """Hour of the day, FIRST_HOUR to LAST_HOUR inclusive.

    Attributes:
        value: The hour.

    Raises:
        ValidationError: "not integer" or "out of range".
    """

    value: int

    def __post_init__(self) -> None:
        hour = require_integer(self.value, field="hour")
        if not FIRST_HOUR <= hour <= LAST_HOUR:
            raise ValidationError(
                ErrorCode.OUT_OF_RANGE,
                f"Hour must be {FIRST_HOUR}-{LAST_HOUR}, got {hour}",
                field="hour",
            )
        object.__setattr__(self, "value", hour)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"{self.value:02d}:00"


def create_hour(h: "Hour | int") -> Hour:
    """Validate h and return it as an Hour."""
    if isinstance(h, Hour):
        return h
    return Hour(h)
