"""Outcome of a captured domain operation.

Constructors in the domain raise ValidationError. Code that would rather
branch on the outcome than catch (the reporting wrapper in
``src.application.attempt``) gets back a Success holding the constructed
value or a Failure holding the error that was raised.

Usage:
    from src.application.attempt import attempt
    from src.domain.value_objects.price import create_price

    result = attempt(reporter, 1, "Price accepted", create_price, 12.5)
    match result:
        case Success(value=price):
            print(f"Price: {price}")
        case Failure(error=error):
            print(f"Rejected: {error.reason}")

    price = result.unwrap()  # re-raises the captured error on Failure
"""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar

T = TypeVar("T")
D = TypeVar("D")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Operation returned normally.

    Attributes:
        value: What the operation returned.
    """

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def value_or(self, default: D) -> T | D:
        return self.value


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Operation raised a captured error.

    Attributes:
        error: The exception the operation raised.
    """

    error: E

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        """Raise the captured error again."""
        raise self.error

    def value_or(self, default: D) -> D:
        return default


Result = Success[T] | Failure[E]
