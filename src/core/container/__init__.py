"""Container module - Centralized dependency injection.

Usage:
    from src.core.container import get_reporter
"""

from src.core.container.infrastructure import get_reporter

__all__ = ["get_reporter"]
