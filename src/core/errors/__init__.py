"""Core errors package.

Usage:
    from src.core.errors import ValidationError
"""

from src.core.errors.validation_error import ValidationError

__all__ = ["ValidationError"]
