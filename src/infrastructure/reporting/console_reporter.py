"""Console reporting adapter.

Outputs structured reports to stdout using structlog.
- Development: human-readable console renderer with colors
- Testing/CI/Production: JSON renderer for machine parsing

Implementation intentionally does NOT inherit from ReporterProtocol (PEP 544
structural subtyping).
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from typing import Any

import structlog


class ConsoleReporter:
    """Console reporter for validation outcomes.

    Args:
        use_json (bool): JSON output when True, human-readable when False.
        level (int): Minimum level emitted (logging module constant).
    """

    def __init__(self, *, use_json: bool = False, level: int = logging.INFO) -> None:
        """Initialize the console reporter.

        Args:
            use_json (bool): JSON output when True, human-readable when False.
            level (int): Minimum level emitted.
        """
        processors: list[structlog.types.Processor] = [
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ]

        if use_json:
            processors.append(structlog.processors.JSONRenderer(default=str))
        else:
            processors.append(structlog.dev.ConsoleRenderer(colors=True))

        structlog.configure(
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )

        self._logger = structlog.get_logger()

    def report(
        self,
        sequence_id: int,
        message: str,
        payload: Mapping[str, Any] | None = None,
    ) -> None:
        """Report a successful outcome at info level.

        Args:
            sequence_id (int): Scenario or step identifier.
            message (str): Summary text.
            payload (Mapping | None): Structured outcome data.
        """
        self._logger.info(message, sequence_id=sequence_id, **dict(payload or {}))

    def report_failure(
        self,
        sequence_id: int,
        message: str,
        payload: Mapping[str, Any] | None = None,
    ) -> None:
        """Report a rejected operation at warning level.

        Args:
            sequence_id (int): Scenario or step identifier.
            message (str): Summary text.
            payload (Mapping | None): Structured failure data.
        """
        self._logger.warning(message, sequence_id=sequence_id, **dict(payload or {}))

    def bind(self, **context: Any) -> ConsoleReporter:
        """Return new reporter with bound context.

        Args:
            **context: Context to bind to all subsequent reports.

        Returns:
            ConsoleReporter: New reporter instance with bound context.
        """
        bound_reporter = ConsoleReporter.__new__(ConsoleReporter)
        bound_reporter._logger = self._logger.bind(**context)
        return bound_reporter
