"""Domain value objects with validation.

Immutable value objects that enforce business constraints at construction.
Each one has a smart constructor (``create_*`` / ``parse_email``) and cannot
exist in an invalid state.
"""

from src.domain.value_objects.customer import Customer
from src.domain.value_objects.customer_name import CustomerName, create_customer_name
from src.domain.value_objects.email import Email, create_email, parse_email
from src.domain.value_objects.hour import Hour, create_hour
from src.domain.value_objects.menu_item import MenuItem
from src.domain.value_objects.money import (
    Currency,
    CurrencyMismatchError,
    Money,
    validate_currency,
)
from src.domain.value_objects.operating_hours import OperatingHours
from src.domain.value_objects.order_id import OrderId, create_order_id, generate_order_id
from src.domain.value_objects.phone import Phone, create_phone
from src.domain.value_objects.price import Price, calculate_total, create_price
from src.domain.value_objects.quantity import Quantity, create_quantity

__all__ = [
    "Currency",
    "CurrencyMismatchError",
    "Customer",
    "CustomerName",
    "Email",
    "Hour",
    "MenuItem",
    "Money",
    "OperatingHours",
    "OrderId",
    "Phone",
    "Price",
    "Quantity",
    "calculate_total",
    "create_customer_name",
    "create_email",
    "create_hour",
    "create_order_id",
    "create_phone",
    "create_price",
    "create_quantity",
    "generate_order_id",
    "parse_email",
    "validate_currency",
]
