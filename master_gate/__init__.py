"""
Master Gate - Threshold multi-signature authorization for privileged instructions

A fixed council of DID-bearing members jointly authorizes privileged,
state-mutating instructions on a shared ledger. No single member holds
unilateral control.

Guarantees:
- Signatures cover a canonical, domain-separated proposal encoding
- Only votes that verify against a member's active key are counted
- A round counter fences every authorization against replay
- An authorized instruction and the round advance commit together or not at all
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
