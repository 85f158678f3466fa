"""Annotated types for parsing domain values at a pydantic boundary.

Each type runs the matching smart constructor as a pydantic validator, so a
request model declared with these fields holds real value objects after
validation, and dumps back to plain JSON values.

A ValidationError raised by a constructor is a ValueError, which pydantic
reports as a field error ("Value error, Price cannot be negative: -1").

Usage:
    from pydantic import BaseModel
    from src.domain.types import ParsedEmail, ParsedQuantity

    class AddLineRequest(BaseModel):
        quantity: ParsedQuantity

    AddLineRequest(quantity=3).quantity  # Quantity(value=3)
"""

from decimal import Decimal
from typing import Annotated

from pydantic import PlainSerializer, PlainValidator

from src.domain.value_objects.customer_name import CustomerName, create_customer_name
from src.domain.value_objects.email import Email, create_email
from src.domain.value_objects.hour import Hour, create_hour
from src.domain.value_objects.order_id import OrderId, create_order_id
from src.domain.value_objects.phone import Phone, create_phone
from src.domain.value_objects.price import Price, create_price
from src.domain.value_objects.quantity import Quantity, create_quantity

ParsedPrice = Annotated[
    Price,
    PlainValidator(create_price),
    PlainSerializer(lambda price: price.value, return_type=Decimal),
]
"""Price parsed from a raw number (0 to 10000)."""

ParsedQuantity = Annotated[
    Quantity,
    PlainValidator(create_quantity),
    PlainSerializer(lambda quantity: quantity.value, return_type=int),
]
"""Quantity parsed from a whole number (1 to 100)."""

ParsedHour = Annotated[
    Hour,
    PlainValidator(create_hour),
    PlainSerializer(lambda hour: hour.value, return_type=int),
]

ParsedEmail = Annotated[
    Email,
    PlainValidator(create_email),
    PlainSerializer(str, return_type=str),
]
"""Email parsed from raw input, trimmed and lower-cased.

Examples:
    >>> class Signup(BaseModel):
    ...     email: ParsedEmail
    >>> Signup(email=" User@Example.COM ").model_dump()
    {'email': 'user@example.com'}
"""

ParsedPhone = Annotated[
    Phone,
    PlainValidator(create_phone),
    PlainSerializer(str, return_type=str),
]

ParsedCustomerName = Annotated[
    CustomerName,
    PlainValidator(create_customer_name),
    PlainSerializer(str, return_type=str),
]

ParsedOrderId = Annotated[
    OrderId,
    PlainValidator(create_order_id),
    PlainSerializer(str, return_type=str),
]
