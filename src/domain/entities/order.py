"""Order domain entity.

An order is identified by its OrderId and accumulates lines (menu item plus
quantity). All lines share one currency; a line in another currency is
rejected before the order changes.

Usage:
    from src.domain.entities.order import Order
    from src.domain.value_objects.menu_item import MenuItem

    order = Order.create(generate_order_id(), "Alice")
    order.add_line(MenuItem.create("Pizza", 15), 3)
    order.total().format()  # '$45.00'

    # With contact details from a form
    customer = Customer.create("Alice", "alice@example.com", "555-1234567")
    order = Order.for_customer(generate_order_id(), customer)
"""

from dataclasses import dataclass, field
from typing import Any, Self

from src.domain.value_objects.customer import Customer
from src.domain.value_objects.customer_name import CustomerName, create_customer_name
from src.domain.value_objects.menu_item import MenuItem
from src.domain.value_objects.money import Currency, CurrencyMismatchError, Money
from src.domain.value_objects.order_id import OrderId, create_order_id
from src.domain.value_objects.quantity import Quantity, create_quantity

_IMMUTABLE_FIELDS = frozenset({"order_id"})


@dataclass(frozen=True)
class OrderLine:
    """One menu item ordered some number of times.

    Attributes:
        item: Ordered item.
        quantity: How many.
    """

    item: MenuItem
    quantity: Quantity

    def total(self) -> Money:
        """Item price times quantity."""
        return self.item.price.multiply(self.quantity)


@dataclass(eq=False)
class Order:
    """Customer order.

    Attributes:
        order_id: Identity of the order.
        customer_name: Who placed it.
        customer: Full contact details, when the order was placed with them.
        lines: Ordered lines (read-only view; use add_line).
    """

    order_id: OrderId
    customer_name: CustomerName
    customer: Customer | None = None
    _lines: list[OrderLine] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "order_id", create_order_id(self.order_id))
        self.customer_name = create_customer_name(self.customer_name)
        if self.customer is not None:
            if not isinstance(self.customer, Customer):
                raise TypeError("Order.customer must be a Customer")
            if self.customer.name != self.customer_name:
                raise ValueError("Order.customer_name must match customer.name")

    def __setattr__(self, name: str, value: Any) -> None:
        """Block reassignment of the order id after creation."""
        if name in _IMMUTABLE_FIELDS and name in self.__dict__:
            raise AttributeError(f"Cannot modify Order.{name} after creation")
        super().__setattr__(name, value)

    @classmethod
    def create(cls, order_id: OrderId | str, customer_name: CustomerName | str) -> Self:
        """Create an empty order.

        Raises:
            ValidationError: If the id or the customer name is invalid.
        """
        return cls(order_id, customer_name)  # type: ignore[arg-type]

    @classmethod
    def for_customer(cls, order_id: OrderId | str, customer: Customer) -> Self:
        """Create an empty order carrying the customer's contact details.

        Raises:
            ValidationError: If the id is invalid.
            TypeError: If customer is not a Customer.
        """
        if not isinstance(customer, Customer):
            raise TypeError("Order.customer must be a Customer")
        return cls(order_id, customer.name, customer)  # type: ignore[arg-type]

    @property
    def lines(self) -> tuple[OrderLine, ...]:
        return tuple(self._lines)

    @property
    def currency(self) -> Currency | None:
        """Currency of the order, None until the first line is added."""
        return self._lines[0].item.currency if self._lines else None

    def add_line(self, item: MenuItem, quantity: Quantity | int) -> OrderLine:
        """Append a line.

        Args:
            item: Menu item being ordered.
            quantity: Raw count or Quantity.

        Returns:
            The new line.

        Raises:
            ValidationError: Invalid quantity, or "currency mismatch" if the
                item is priced in a different currency than the order.
        """
        line = OrderLine(item, create_quantity(quantity))
        if self.currency is not None and item.currency != self.currency:
            raise CurrencyMismatchError(self.currency, item.currency)
        self._lines.append(line)
        return line

    def total(self, currency: Currency | str = Currency.USD) -> Money:
        """Sum of all line totals.

        Args:
            currency: Currency of the zero returned for an empty order.
        """
        if not self._lines:
            return Money.zero(currency)
        total = Money.zero(self._lines[0].item.currency)
        for line in self._lines:
            total = total.add(line.total())
        return total

    def same_identity_as(self, other: "Order") -> bool:
        return isinstance(other, Order) and self.order_id == other.order_id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return self.same_identity_as(other)

    def __hash__(self) -> int:
        return hash(("Order", self.order_id))

    def to_dict(self) -> dict[str, Any]:
        """Snapshot of the order for reporting."""
        data: dict[str, Any] = {
            "order_id": str(self.order_id),
            "customer_name": str(self.customer_name),
            "lines": [
                {
                    "item": line.item.name,
                    "quantity": line.quantity.value,
                    "total": line.total().format(),
                }
                for line in self._lines
            ],
            "total": self.total().format(),
        }
        if self.customer is not None:
            data["email"] = str(self.customer.email)
            data["phone"] = str(self.customer.phone)
        return data
