"""Order input schemas.

Pydantic models for raw order input (a form post, a queued message). Each
field is parsed into its domain type during model validation, and
``to_domain()`` assembles the domain objects without re-checking anything.
"""

from pydantic import BaseModel, Field

from src.domain.entities.order import Order
from src.domain.types import (
    ParsedCustomerName,
    ParsedEmail,
    ParsedOrderId,
    ParsedPhone,
    ParsedPrice,
    ParsedQuantity,
)
from src.domain.value_objects.customer import Customer
from src.domain.value_objects.menu_item import MenuItem
from src.domain.value_objects.money import Currency
from src.domain.value_objects.order_id import generate_order_id


class CustomerRequest(BaseModel):
    """Customer contact details as submitted.

    Attributes:
        name: Display name.
        email: Email address.
        phone: Phone number.
    """

    name: ParsedCustomerName = Field(..., description="Customer name", examples=["John Doe"])
    email: ParsedEmail = Field(..., description="Email address", examples=["john@example.com"])
    phone: ParsedPhone = Field(..., description="Phone number", examples=["555-1234567"])

    def to_domain(self) -> Customer:
        return Customer(name=self.name, email=self.email, phone=self.phone)


class OrderLineRequest(BaseModel):
    """One ordered item.

    Attributes:
        item_name: Menu item name.
        unit_price: Price per item in major units.
        quantity: How many.
    """

    item_name: str = Field(..., min_length=1, description="Menu item name")
    unit_price: ParsedPrice = Field(..., description="Price per item (0-10000)", examples=[12.5])
    quantity: ParsedQuantity = Field(..., description="Number of items (1-100)")


class OrderRequest(BaseModel):
    """A whole order as submitted.

    Attributes:
        order_id: Existing order id; a new one is generated when omitted.
        customer: Who is ordering.
        currency: Currency of every line.
        lines: Ordered items.
    """

    order_id: ParsedOrderId | None = Field(default=None, description="Order id (ORD-XXXXX)")
    customer: CustomerRequest
    currency: Currency = Field(default=Currency.USD, description="Order currency")
    lines: list[OrderLineRequest] = Field(default_factory=list)

    def to_domain(self) -> Order:
        """Build the Order entity.

        Raises:
            ValidationError: If an item name is blank after trimming.
        """
        order = Order.for_customer(
            self.order_id or generate_order_id(), self.customer.to_domain()
        )
        for line in self.lines:
            order.add_line(
                MenuItem.create(line.item_name, line.unit_price.value, self.currency),
                line.quantity,
            )
        return order
