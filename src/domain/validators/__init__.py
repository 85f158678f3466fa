"""Validators package exports.

Exports the pure validation functions. The constructor registry lives in
``src.domain.validators.registry`` and is imported explicitly (it depends on
the value objects, which depend on these functions).
"""

from src.domain.validators.functions import (
    require_integer,
    require_match,
    require_number,
    require_positive,
    require_text,
)

__all__ = [
    "require_integer",
    "require_match",
    "require_number",
    "require_positive",
    "require_text",
]
