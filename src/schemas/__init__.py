"""Request schemas for raw restaurant input.

Pydantic models that parse untrusted input into domain value objects.
Schemas are kept separate from domain entities (boundary concerns only).

Usage:
    from src.schemas import OrderRequest
"""

from src.schemas.order_schemas import (
    CustomerRequest,
    OrderLineRequest,
    OrderRequest,
)
from src.schemas.restaurant_schemas import OperatingHoursRequest

__all__ = [
    "CustomerRequest",
    "OperatingHoursRequest",
    "OrderLineRequest",
    "OrderRequest",
]
