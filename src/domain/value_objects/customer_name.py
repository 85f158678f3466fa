"""Customer name value object."""

from dataclasses import dataclass

from src.domain.validators.functions import require_text


@dataclass(frozen=True)
class CustomerName:
    """Customer display name, trimmed and non-empty.

    Attributes:
        value: The trimmed name.
    """

    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", require_text(self.value, field="customer_name"))

    def __str__(self) -> str:
        return self.value


def create_customer_name(s: "CustomerName | str") -> CustomerName:
    """Trim s and return it as a CustomerName.

    Raises:
        ValidationError: "empty" if nothing is left after trimming.
    """
    if isinstance(s, CustomerName):
        return s
    return CustomerName(s)
