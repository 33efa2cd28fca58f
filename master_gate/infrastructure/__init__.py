"""
Infrastructure layer - External adapters for Master Gate.

This layer contains:
- Signature scheme primitives (cryptography)
- In-memory stubs for the identity registry, ledger and event sink
- Observability (structlog configuration, correlation IDs)

IMPORT RULES:
- CAN import from: domain, application
- Implements ports defined in application layer
"""

__all__: list[str] = []
