"""Validation error raised by every smart constructor and entity mutation.

ValidationError is the single error type of the domain. It subclasses
ValueError (Python's convention for "right type, wrong value"), so code that
already guards with ``except ValueError`` keeps working.

Each error carries a machine-readable ErrorCode whose value is the reason
string ("negative", "too large", "exceeds capacity", ...). The reason is the
contract; the message is for humans and may change.

Usage:
    from src.core.errors import ValidationError
    from src.core.enums import ErrorCode

    raise ValidationError(
        ErrorCode.NEGATIVE,
        "Price cannot be negative",
        field="price",
    )
"""

from src.core.enums import ErrorCode


class ValidationError(ValueError):
    """A value or state transition violated a domain rule.

    Attributes:
        code: ErrorCode identifying the violated rule.
        message: Human-readable description.
        field: Name of the offending field, when there is one.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str | None = None,
        *,
        field: str | None = None,
    ) -> None:
        """Initialize validation error.

        Args:
            code: Violated rule.
            message: Human-readable message. Defaults to the reason string.
            field: Optional field name that failed validation.
        """
        self.code = code
        self.message = message or code.value
        self.field = field
        super().__init__(self.message)

    @property
    def reason(self) -> str:
        """Reason string naming the violated rule."""
        return self.code.value

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={self.code.name}, "
            f"message={self.message!r}, field={self.field!r})"
        )
