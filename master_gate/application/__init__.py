"""
Application layer - Use cases and orchestration for Master Gate.

This layer contains:
- Port definitions (identity registry, ledger, signature schemes, events)
- Application services (verification, round sequencing, execution)

IMPORT RULES:
- CAN import from: domain
- CANNOT import from: api
- Infrastructure imports limited to observability
"""

__all__: list[str] = []
