"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- ValidationError and ErrorCode (the single error taxonomy)
- Result types for railway-oriented programming
- Settings

The core module has NO dependencies on other application layers.
"""

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success

__all__ = [
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
    "ValidationError",
]
