"""Reporter adapters (structlog-backed)."""

from src.infrastructure.reporting.console_reporter import ConsoleReporter

__all__ = ["ConsoleReporter"]
