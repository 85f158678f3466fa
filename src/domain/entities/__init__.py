"""Domain entities.

Identity-bearing, mutable objects whose invariants are enforced by their own
methods. Compared by identity, never by state.
"""

from src.domain.entities.order import Order, OrderLine
from src.domain.entities.table import Table

__all__ = [
    "Order",
    "OrderLine",
    "Table",
]
