"""OperatingHours value object.

Opening and closing hour of a restaurant. There is no ordering constraint
between the two: a bar that opens at 22 and closes at 6 is a valid overnight
span, and ``is_open_at`` handles the midnight crossover.

Usage:
    from src.domain.value_objects.operating_hours import OperatingHours

    late_night = OperatingHours.create(22, 6)
    late_night.is_open_at(2)   # True
    late_night.is_open_at(10)  # False
"""

from dataclasses import dataclass
from typing import Self

from src.domain.value_objects.hour import Hour, create_hour


@dataclass(frozen=True)
class OperatingHours:
    """Daily opening window.

    Attributes:
        opens: First hour the restaurant is open.
        closes: First hour the restaurant is closed again.
    """

    opens: Hour
    closes: Hour

    def __post_init__(self) -> None:
        object.__setattr__(self, "opens", create_hour(self.opens))
        object.__setattr__(self, "closes", create_hour(self.closes))

    @classmethod
    def create(cls, opens_hour: Hour | int, closes_hour: Hour | int) -> Self:
        """Build from two raw hours.

        Args:
            opens_hour: Opening hour, 0-23.
            closes_hour: Closing hour, 0-23. May be earlier than opens_hour.

        Returns:
            OperatingHours with both hours validated.

        Raises:
            ValidationError: Same reason as create_hour for the offending hour.
        """
        return cls(create_hour(opens_hour), create_hour(closes_hour))

    @property
    def is_overnight(self) -> bool:
        """True if the window crosses midnight."""
        return self.opens > self.closes

    def is_open_at(self, hour: Hour | int) -> bool:
        """Check whether the restaurant is open during the given hour.

        Same-day window (opens <= closes): open iff opens <= hour < closes.
        Overnight window (opens > closes): open iff hour >= opens or
        hour < closes.

        Args:
            hour: Hour to check. Raw ints are validated first.

        Raises:
            ValidationError: If a raw hour is not a valid Hour.
        """
        hour = create_hour(hour)
        if self.is_overnight:
            return hour >= self.opens or hour < self.closes
        return self.opens <= hour < self.closes

    def __str__(self) -> str:
        return f"{self.opens}-{self.closes}"
