"""Domain protocols (ports).

Structural interfaces the domain and application layers depend on;
infrastructure provides the implementations.
"""

from src.domain.protocols.reporter_protocol import ReporterProtocol

__all__ = ["ReporterProtocol"]
