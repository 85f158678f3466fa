"""Pytest configuration and shared helpers.

Provides:
1. A recording reporter that captures (sequence_id, message, payload) tuples
2. Settings cache isolation between tests
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import pytest

from src.core.config import get_settings
from src.core.container import get_reporter


@dataclass
class RecordedReport:
    """One call received by RecordingReporter."""

    level: str
    sequence_id: int
    message: str
    payload: dict[str, Any]
    context: dict[str, Any] = field(default_factory=dict)


class RecordingReporter:
    """In-memory ReporterProtocol implementation for assertions.

    Bound reporters share the parent's record list so a test can inspect
    everything reported through any of them.
    """

    def __init__(
        self,
        records: list[RecordedReport] | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        self.records: list[RecordedReport] = records if records is not None else []
        self._context = context or {}

    def report(
        self, sequence_id: int, message: str, payload: Mapping[str, Any] | None = None
    ) -> None:
        self.records.append(
            RecordedReport("info", sequence_id, message, dict(payload or {}), dict(self._context))
        )

    def report_failure(
        self, sequence_id: int, message: str, payload: Mapping[str, Any] | None = None
    ) -> None:
        self.records.append(
            RecordedReport(
                "warning", sequence_id, message, dict(payload or {}), dict(self._context)
            )
        )

    def bind(self, **context: Any) -> "RecordingReporter":
        return RecordingReporter(self.records, self._context | context)


@pytest.fixture
def reporter() -> RecordingReporter:
    """Fresh recording reporter."""
    return RecordingReporter()


@pytest.fixture(autouse=True)
def clear_cached_singletons():
    """Reset cached settings and reporter so env patches take effect."""
    get_settings.cache_clear()
    get_reporter.cache_clear()
    yield
    get_settings.cache_clear()
    get_reporter.cache_clear()
