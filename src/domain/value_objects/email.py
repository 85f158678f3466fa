"""Email value object ("parse, don't validate").

Raw input from a form or an API payload is parsed exactly once, at the
boundary, into an Email. Everything downstream takes an Email and never
re-checks the format.

The format check is structural (``local@domain.tld``, no whitespace), not
RFC 5322 compliance.
"""

import re
from dataclasses import dataclass

from src.domain.validators.functions import require_match, require_text

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class Email:
    """Trimmed, lower-cased email address.

    Attributes:
        value: The normalized address.

    Raises:
        ValidationError: "empty" if blank, "bad format" if not local@domain.tld.

    Example:
        >>> Email("  Alice@Example.COM ")
        Email('alice@example.com')
    """

    value: str

    def __post_init__(self) -> None:
        """Trim, check shape, then normalize to lowercase.

        Use object.__setattr__ because dataclass is frozen.
        """
        trimmed = require_match(
            require_text(self.value, field="email"), EMAIL_PATTERN, field="email"
        )
        object.__setattr__(self, "value", trimmed.lower())

    @property
    def domain(self) -> str:
        """Part after the @."""
        return self.value.rsplit("@", 1)[1]

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"


def parse_email(raw: str) -> Email:
    """Parse raw external input into an Email.

    Args:
        raw: Untrusted input string.

    Returns:
        Email holding the trimmed, lower-cased address.

    Raises:
        ValidationError: "empty" or "bad format".
    """
    return Email(raw)


def create_email(s: "Email | str") -> Email:
    """Smart constructor for Email; same rules as parse_email."""
    if isinstance(s, Email):
        return s
    return parse_email(s)
