"""Smart Constructor Registry.

Single catalog of every scalar smart constructor, with examples of input it
accepts and input it rejects (and the reason it must give). The compliance
tests walk this registry, so a new constructor is covered as soon as it is
registered.

Pattern: Registry Pattern with metadata catalog and helper functions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from src.core.enums import ErrorCode
from src.domain.value_objects.customer_name import create_customer_name
from src.domain.value_objects.email import create_email
from src.domain.value_objects.hour import create_hour
from src.domain.value_objects.order_id import create_order_id
from src.domain.value_objects.phone import create_phone
from src.domain.value_objects.price import create_price
from src.domain.value_objects.quantity import create_quantity


class ConstructorCategory(str, Enum):
    """Groups constructors by the kind of raw input they parse."""

    NUMERIC = "numeric"  # Price, Quantity
    TEMPORAL = "temporal"  # Hour
    CONTACT = "contact"  # Email, Phone, CustomerName
    IDENTIFIER = "identifier"  # OrderId


@dataclass(frozen=True, kw_only=True)
class ConstructorMetadata:
    """Metadata for one smart constructor.

    Attributes:
        rule_name: Unique identifier (e.g. 'price', 'email').
        constructor: Callable turning raw input into the domain type.
        description: Human-readable summary of the rules.
        valid_examples: Raw inputs that must be accepted.
        invalid_examples: (raw input, expected ErrorCode) pairs that must be rejected.
        category: Grouping for documentation and statistics.
    """

    rule_name: str
    constructor: Callable[[Any], Any]
    description: str
    valid_examples: list[Any]
    invalid_examples: list[tuple[Any, ErrorCode]]
    category: ConstructorCategory


# =============================================================================
# Constructor Registry
# =============================================================================

CONSTRUCTOR_REGISTRY: dict[str, ConstructorMetadata] = {
    "price": ConstructorMetadata(
        rule_name="price",
        constructor=create_price,
        description="Non-negative price in major units, at most 10000",
        valid_examples=[0, 12.5, 10000],
        invalid_examples=[
            (-0.01, ErrorCode.NEGATIVE),
            (10000.01, ErrorCode.TOO_LARGE),
            (float("nan"), ErrorCode.NOT_A_NUMBER),
        ],
        category=ConstructorCategory.NUMERIC,
    ),
    "quantity": ConstructorMetadata(
        rule_name="quantity",
        constructor=create_quantity,
        description="Whole number of items from 1 to 100",
        valid_examples=[1, 3, 100],
        invalid_examples=[
            (2.5, ErrorCode.NOT_INTEGER),
            (0, ErrorCode.NOT_POSITIVE),
            (-3, ErrorCode.NOT_POSITIVE),
            (101, ErrorCode.TOO_LARGE),
        ],
        category=ConstructorCategory.NUMERIC,
    ),
    "hour": ConstructorMetadata(
        rule_name="hour",
        constructor=create_hour,
        description="Hour of day from 0 to 23",
        valid_examples=[0, 12, 23],
        invalid_examples=[
            (24, ErrorCode.OUT_OF_RANGE),
            (-1, ErrorCode.OUT_OF_RANGE),
            (7.5, ErrorCode.NOT_INTEGER),
        ],
        category=ConstructorCategory.TEMPORAL,
    ),
    "email": ConstructorMetadata(
        rule_name="email",
        constructor=create_email,
        description="local@domain.tld without whitespace, trimmed and lower-cased",
        valid_examples=["alice@example.com", "  Bob@Example.ORG "],
        invalid_examples=[
            ("", ErrorCode.EMPTY),
            ("   ", ErrorCode.EMPTY),
            ("not-an-email", ErrorCode.BAD_FORMAT),
            ("a b@example.com", ErrorCode.BAD_FORMAT),
        ],
        category=ConstructorCategory.CONTACT,
    ),
    "phone": ConstructorMetadata(
        rule_name="phone",
        constructor=create_phone,
        description="Leading digit then digits or hyphens, 7+ characters",
        valid_examples=["555-1234567", "1234567"],
        invalid_examples=[
            ("", ErrorCode.BAD_FORMAT),
            ("-5551234", ErrorCode.BAD_FORMAT),
            ("555-12", ErrorCode.BAD_FORMAT),
            ("555 1234567", ErrorCode.BAD_FORMAT),
        ],
        category=ConstructorCategory.CONTACT,
    ),
    "customer_name": ConstructorMetadata(
        rule_name="customer_name",
        constructor=create_customer_name,
        description="Any non-blank name, trimmed",
        valid_examples=["John Doe", "  Ana  "],
        invalid_examples=[("", ErrorCode.EMPTY), ("\t \n", ErrorCode.EMPTY)],
        category=ConstructorCategory.CONTACT,
    ),
    "order_id": ConstructorMetadata(
        rule_name="order_id",
        constructor=create_order_id,
        description="ORD- followed by at least five digits",
        valid_examples=["ORD-10001", "ORD-1729384756123"],
        invalid_examples=[
            ("ORD-1234", ErrorCode.BAD_FORMAT),
            ("ord-12345", ErrorCode.BAD_FORMAT),
            ("ORD-12345-ab", ErrorCode.BAD_FORMAT),
            ("", ErrorCode.EMPTY),
        ],
        category=ConstructorCategory.IDENTIFIER,
    ),
}


# =============================================================================
# Helper Functions
# =============================================================================


def get_constructor(rule_name: str) -> ConstructorMetadata | None:
    """Get constructor metadata by name.

    Example:
        >>> rule = get_constructor("email")
        >>> if rule:
        ...     email = rule.constructor("user@example.com")
    """
    return CONSTRUCTOR_REGISTRY.get(rule_name)


def get_all_constructors() -> list[ConstructorMetadata]:
    return list(CONSTRUCTOR_REGISTRY.values())


def get_constructors_by_category(category: ConstructorCategory) -> list[ConstructorMetadata]:
    """Get all constructors in a specific category."""
    return [rule for rule in CONSTRUCTOR_REGISTRY.values() if rule.category == category]


def get_statistics() -> dict[str, int | dict[str, int]]:
    """Get registry statistics.

    Returns:
        Dictionary with:
        - total_constructors: Number of registered constructors
        - by_category: Count per category
    """
    category_counts: dict[str, int] = {}
    for rule in CONSTRUCTOR_REGISTRY.values():
        category_key = rule.category.value
        category_counts[category_key] = category_counts.get(category_key, 0) + 1

    return {
        "total_constructors": len(CONSTRUCTOR_REGISTRY),
        "by_category": category_counts,
    }
