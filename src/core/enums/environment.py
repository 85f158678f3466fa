"""Runtime environment types.

Used by Settings to pick the reporter output format:
- DEVELOPMENT: colored console output
- TESTING / CI: JSON lines for machine parsing
- PRODUCTION: JSON lines
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"

    @property
    def prefers_json(self) -> bool:
        """Whether log output should be machine-readable by default."""
        return self is not Environment.DEVELOPMENT
