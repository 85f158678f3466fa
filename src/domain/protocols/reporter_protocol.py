"""ReporterProtocol definition for reporting validation outcomes.

A reporter receives (sequence_id, message, payload) tuples describing what
happened when a value was constructed or an entity was mutated. It formats
and ships them somewhere; it never validates, retries or mutates.

Implementations MUST keep payloads structured (key-value) and MUST NOT raise
on well-formed input.

Usage:
    from src.core.container import get_reporter
    from src.domain.protocols.reporter_protocol import ReporterProtocol

    reporter: ReporterProtocol = get_reporter()
    reporter.report(4, "Table state after operations", {"occupancy": 3})
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class ReporterProtocol(Protocol):
    """Protocol for outcome reporters.

    Structural typing: any object with these methods is a reporter.
    """

    def report(
        self,
        sequence_id: int,
        message: str,
        payload: Mapping[str, Any] | None = None,
    ) -> None:
        """Report a successful outcome.

        Args:
            sequence_id: Identifies the scenario or step being reported.
            message: Human-readable summary.
            payload: Structured data describing the outcome.
        """
        ...

    def report_failure(
        self,
        sequence_id: int,
        message: str,
        payload: Mapping[str, Any] | None = None,
    ) -> None:
        """Report a rejected operation.

        Same arguments as report(); implementations typically use a higher
        severity.
        """
        ...

    def bind(self, **context: Any) -> ReporterProtocol:
        """Return new reporter with permanently bound context.

        Original reporter instance remains unchanged.
        """
        ...
