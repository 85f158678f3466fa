"""Test suite for the restaurant domain.

Test structure:
- unit/: Unit tests - domain logic, boundary schemas and reporting in isolation

No database, network or external services are needed.
"""
