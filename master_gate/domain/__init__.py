"""
Domain layer - Pure authorization logic for Master Gate.

This layer contains:
- Value objects (Did, PublicKey, Proposal, Vote, VoteSet, QuorumPolicy)
- Execution outcomes and per-vote verdicts
- Domain events (master.executed)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or api.
Only stdlib and typing imports are allowed.
"""

from master_gate.domain.exceptions import MasterGateError

__all__: list[str] = ["MasterGateError"]
