"""Infrastructure layer - Adapters for domain protocols.

Structure:
- reporting/: ReporterProtocol implementations (structlog console/JSON)

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
