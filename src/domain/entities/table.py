"""Restaurant table domain entity.

A table has an identity (its number) and one piece of mutable state: how many
guests are currently seated. The invariant ``0 <= occupancy <= capacity``
holds in every observable state.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Occupancy changes only through seat_guests / remove_guests / clear
    - Every transition validates before it mutates, so a rejected call
      leaves the table exactly as it was
    - Equality is identity (table_number), not state

State Machine:
    occupancy in [0, capacity]
    seat_guests(n):   occupancy -> occupancy + n   (guarded by capacity)
    remove_guests(n): occupancy -> occupancy - n   (guarded by zero)

Usage:
    from src.domain.entities.table import Table

    table = Table.create(5, capacity=4)
    table.seat_guests(3)
    table.seat_guests(2)  # ValidationError: exceeds capacity; occupancy stays 3

Note:
    Not thread-safe. Callers sharing a Table between threads must hold a lock
    around each transition (the guard and the mutation are separate steps).
"""

from dataclasses import dataclass, field
from typing import Any, Self

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.domain.validators.functions import require_integer, require_positive

_IMMUTABLE_FIELDS = frozenset({"table_number", "capacity"})


@dataclass(eq=False)
class Table:
    """Restaurant table with a seating-capacity invariant.

    Attributes:
        table_number: Identity of the table within the restaurant.
        capacity: Maximum number of seated guests (> 0, fixed).
        occupancy: Currently seated guests (read-only property).

    Example:
        >>> table = Table.create(3, 6)
        >>> table.remove_guests(1)
        ValidationError: Cannot remove 1 guest(s) from table 3 with 0 seated
        >>> table.occupancy
        0
    """

    table_number: int
    capacity: int
    _occupancy: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate identity and capacity.

        Raises:
            ValidationError: "not integer" for a fractional number/capacity,
                "capacity must be positive" if capacity <= 0.
        """
        object.__setattr__(
            self, "table_number", require_integer(self.table_number, field="table_number")
        )
        capacity = require_integer(self.capacity, field="capacity")
        if capacity <= 0:
            raise ValidationError(
                ErrorCode.CAPACITY_NOT_POSITIVE,
                f"Table capacity must be positive, got {capacity}",
                field="capacity",
            )
        object.__setattr__(self, "capacity", capacity)

    def __setattr__(self, name: str, value: Any) -> None:
        """Block reassignment of identity and capacity after creation."""
        if name in _IMMUTABLE_FIELDS and name in self.__dict__:
            raise AttributeError(f"Cannot modify Table.{name} after creation")
        super().__setattr__(name, value)

    @classmethod
    def create(cls, table_number: int, capacity: int) -> Self:
        """Create an empty table.

        Args:
            table_number: Identity of the table.
            capacity: Maximum number of guests, must be positive.

        Returns:
            Table with occupancy 0.

        Raises:
            ValidationError: "capacity must be positive" if capacity <= 0.
        """
        return cls(table_number, capacity)

    # -------------------------------------------------------------------------
    # Query Methods (Read-Only)
    # -------------------------------------------------------------------------

    @property
    def occupancy(self) -> int:
        """Number of guests currently seated."""
        return self._occupancy

    @property
    def available_seats(self) -> int:
        return self.capacity - self._occupancy

    def is_empty(self) -> bool:
        return self._occupancy == 0

    def is_full(self) -> bool:
        return self._occupancy == self.capacity

    # -------------------------------------------------------------------------
    # State Transition Methods
    # -------------------------------------------------------------------------

    def seat_guests(self, count: int) -> None:
        """Seat count more guests.

        Args:
            count: Number of arriving guests.

        Raises:
            ValidationError: "not integer" / "not positive" for a bad count,
                "exceeds capacity" if the table would overflow.
        """
        count = require_positive(require_integer(count, field="count"), field="count")
        if self._occupancy + count > self.capacity:
            raise ValidationError(
                ErrorCode.EXCEEDS_CAPACITY,
                f"Seating {count} guest(s) at table {self.table_number} would exceed "
                f"capacity {self.capacity} ({self._occupancy} already seated)",
                field="count",
            )
        self._occupancy += count

    def remove_guests(self, count: int) -> None:
        """Remove count departing guests.

        Args:
            count: Number of departing guests.

        Raises:
            ValidationError: "not integer" / "not positive" for a bad count,
                "negative occupancy" if more guests leave than are seated.
        """
        count = require_positive(require_integer(count, field="count"), field="count")
        if self._occupancy - count < 0:
            raise ValidationError(
                ErrorCode.NEGATIVE_OCCUPANCY,
                f"Cannot remove {count} guest(s) from table {self.table_number} "
                f"with {self._occupancy} seated",
                field="count",
            )
        self._occupancy -= count

    def clear(self) -> None:
        """Free the table. Always valid."""
        self._occupancy = 0

    # -------------------------------------------------------------------------
    # Identity
    # -------------------------------------------------------------------------

    def same_identity_as(self, other: "Table") -> bool:
        """Check whether other is the same table, regardless of current state."""
        return isinstance(other, Table) and self.table_number == other.table_number

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return self.same_identity_as(other)

    def __hash__(self) -> int:
        return hash(("Table", self.table_number))

    def to_dict(self) -> dict[str, Any]:
        """Snapshot of the table for reporting."""
        return {
            "table_number": self.table_number,
            "capacity": self.capacity,
            "occupancy": self._occupancy,
        }
