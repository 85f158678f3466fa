"""Phone number value object.

Illustrative format only: a digit, then digits or hyphens, seven characters
or more ("555-1234567"). No country codes, no spaces, no parentheses.
"""

import re
from dataclasses import dataclass

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.domain.validators.functions import require_match

PHONE_MIN_LENGTH = 7
PHONE_PATTERN = re.compile(r"^\d[\d-]{%d,}$" % (PHONE_MIN_LENGTH - 1), re.ASCII)


@dataclass(frozen=True)
class Phone:
    """Phone number matching PHONE_PATTERN.

    Attributes:
        value: The number as given.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError(
                ErrorCode.BAD_FORMAT, "Phone must be a string", field="phone"
            )
        require_match(self.value, PHONE_PATTERN, field="phone")

    @property
    def digits(self) -> str:
        """Number with hyphens removed."""
        return self.value.replace("-", "")

    def __str__(self) -> str:
        return self.value


def create_phone(s: "Phone | str") -> Phone:
    """Validate s and return it as a Phone.

    Raises:
        ValidationError: "bad format".
    """
    if isinstance(s, Phone):
        return s
    return Phone(s)
