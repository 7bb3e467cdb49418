"""GCD Engine — iterative Euclidean algorithm over positive integers.

Invariants:
    - Both operands must be > 0; violation raises PreconditionViolationError
    - Result is independent of argument order
    - Intermediate values never exceed the larger operand

Design Decisions:
    - Explicit raise over assert: the check survives python -O
"""

from gcd_app.core.errors import ErrorContext, PreconditionViolationError


def gcd(n: int, m: int) -> int:
    """Greatest common divisor of two positive integers."""
    if n <= 0 or m <= 0:
        raise PreconditionViolationError(
            "gcd() requires two positive operands",
            ErrorContext(debug_info={"n": n, "m": m}),
        )
    while m != 0:
        if m < n:
            n, m = m, n
        m = m % n
    return n
