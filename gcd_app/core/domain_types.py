"""Domain Types — the per-request operand pair and its numeric bounds.

Invariants:
    - GcdRequest is immutable once constructed
    - Operands lie in the unsigned 64-bit range [0, U64_MAX]
"""

from dataclasses import dataclass


U64_MAX: int = 2**64 - 1


@dataclass(frozen=True)
class GcdRequest:
    """Operand pair parsed from a POST /gcd form body."""
    n: int
    m: int
