"""Order identifier value object.

Two ways to get an OrderId:
- ``create_order_id(raw)`` validates an id that came from outside
  (a ticket, a URL, a database row).
- ``generate_order_id()`` mints a new id. It skips validation because its
  output is correct by construction: the prefix plus a millisecond timestamp
  plus a zero-padded random suffix of ORDER_ID_MIN_DIGITS digits.

Both paths are built from the same ORDER_ID_PREFIX / ORDER_ID_MIN_DIGITS
constants. Changing the format means changing those constants, and the
generator follows automatically.

Uniqueness across a collection is not checked here; that belongs to whatever
stores orders.
"""

import re
import secrets
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Self

from src.domain.validators.functions import require_match, require_text

ORDER_ID_PREFIX = "ORD-"
ORDER_ID_MIN_DIGITS = 5
ORDER_ID_PATTERN = re.compile(
    rf"^{re.escape(ORDER_ID_PREFIX)}\d{{{ORDER_ID_MIN_DIGITS},}}$", re.ASCII
)


@dataclass(frozen=True)
class OrderId:
    """Order identifier: ``ORD-`` followed by at least five digits.

    Attributes:
        value: The identifier string.

    Example:
        >>> OrderId("ORD-10001")
        OrderId('ORD-10001')
        >>> OrderId("10001")
        ValidationError: Invalid order_id format: '10001'
    """

    value: str

    def __post_init__(self) -> None:
        # Ids are matched as given, padding included.
        require_text(self.value, field="order_id")
        require_match(self.value, ORDER_ID_PATTERN, field="order_id")

    @classmethod
    def _from_trusted(cls, value: str) -> Self:
        """Build without validation. Only for values correct by construction."""
        instance = object.__new__(cls)
        object.__setattr__(instance, "value", value)
        return instance

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"OrderId('{self.value}')"


def create_order_id(raw: "OrderId | str") -> OrderId:
    """Validate raw and return it as an OrderId.

    Raises:
        ValidationError: "empty" or "bad format".
    """
    if isinstance(raw, OrderId):
        return raw
    return OrderId(raw)


def generate_order_id() -> OrderId:
    """Mint a new OrderId from the current time and a random suffix.

    Returns:
        OrderId like ``ORD-172938475612304817``.
    """
    millis = int(datetime.now(UTC).timestamp() * 1000)
    suffix = secrets.randbelow(10**ORDER_ID_MIN_DIGITS)
    return OrderId._from_trusted(
        f"{ORDER_ID_PREFIX}{millis}{suffix:0{ORDER_ID_MIN_DIGITS}d}"
    )
