"""Input Validation — zero-operand gate run before the GCD engine.

Invariants:
    - Rejects when n == 0 OR m == 0 (both fields checked)
    - No side effects; returns None on success
"""

from gcd_app.core.errors import ErrorContext, ZeroInputError


def validate_inputs(n: int, m: int) -> None:
    """Raise ZeroInputError if either operand is zero."""
    if n == 0 or m == 0:
        raise ZeroInputError(ErrorContext(debug_info={"n": n, "m": m}))
