"""Domain layer - Pure business logic.

This layer contains the restaurant value objects, entities, validators and the
reporter protocol. It has NO dependencies on infrastructure.

Structure:
- value_objects/: Immutable, self-validating values (Price, Email, Money, ...)
- entities/: Identity-bearing objects with guarded state (Table, Order)
- validators/: Shared validation functions and the constructor registry
- protocols/: Ports implemented by infrastructure (ReporterProtocol)
- types.py: Annotated types for parsing domain values at a pydantic boundary
"""
