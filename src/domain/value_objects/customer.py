"""Customer value object.

Groups the three contact values a customer gives when ordering. Each field is
its own nominal type, so an email can never land in the phone slot.
"""

from dataclasses import dataclass
from typing import Self

from src.domain.value_objects.customer_name import CustomerName, create_customer_name
from src.domain.value_objects.email import Email, parse_email
from src.domain.value_objects.phone import Phone, create_phone


@dataclass(frozen=True)
class Customer:
    """Customer contact details.

    Attributes:
        name: Display name.
        email: Normalized email address.
        phone: Phone number.
    """

    name: CustomerName
    email: Email
    phone: Phone

    def __post_init__(self) -> None:
        if not isinstance(self.name, CustomerName):
            raise TypeError("Customer.name must be a CustomerName")
        if not isinstance(self.email, Email):
            raise TypeError("Customer.email must be an Email")
        if not isinstance(self.phone, Phone):
            raise TypeError("Customer.phone must be a Phone")

    @classmethod
    def create(cls, name: str, email: str, phone: str) -> Self:
        """Parse raw form input into a Customer.

        Fields are validated in order (name, email, phone); the first failure
        is raised.

        Raises:
            ValidationError: From the first invalid field.
        """
        return cls(
            name=create_customer_name(name),
            email=parse_email(email),
            phone=create_phone(phone),
        )
