"""Menu item value object."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Self

from src.domain.validators.functions import require_text
from src.domain.value_objects.money import Currency, Money


@dataclass(frozen=True)
class MenuItem:
    """A dish or drink with its price.

    Attributes:
        name: Trimmed, non-empty item name.
        price: Unit price.
    """

    name: str
    price: Money

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", require_text(self.name, field="item_name"))
        if not isinstance(self.price, Money):
            raise TypeError("MenuItem.price must be Money")

    @classmethod
    def create(
        cls, name: str, price: Decimal | float | int, currency: Currency | str = Currency.USD
    ) -> Self:
        """Build from a name and a major-unit price, e.g. ``("Burger", 12.5)``."""
        return cls(name, Money.from_major_units(price, currency))

    @property
    def currency(self) -> Currency:
        return self.price.currency
