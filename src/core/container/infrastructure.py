"""Infrastructure dependency factories.

Application-scoped singletons for infrastructure services:
- Reporting (console, human-readable or JSON)

Adapter selection is centralized here (composition root); domain and
application code depend only on the protocols.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings

if TYPE_CHECKING:
    from src.domain.protocols.reporter_protocol import ReporterProtocol


# ============================================================================
# Reporting (Application-Scoped)
# ============================================================================


@lru_cache()
def get_reporter() -> "ReporterProtocol":
    """Return the application-scoped reporter singleton.

    Output format follows settings:
    - development: ConsoleReporter (human-readable, colored)
    - testing/ci/production: ConsoleReporter (JSON)
    - LOG_JSON overrides either way

    Returns:
        ReporterProtocol: Reporter instance implementing the protocol.
    """
    from src.infrastructure.reporting.console_reporter import ConsoleReporter

    settings = get_settings()
    return ConsoleReporter(
        use_json=settings.use_json_output,
        level=settings.log_level_value,
    )
