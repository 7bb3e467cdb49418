"""GCD Engine — verifies the Euclidean algorithm and its precondition.

Tests cover:
    - Known values, including coprime and u64 boundary operands
    - Result divides both operands and no larger common divisor exists
    - Commutativity, identity, repeatability
    - Zero or negative operands raise PreconditionViolationError
"""

import pytest

from gcd_app.core.domain_types import U64_MAX
from gcd_app.core.errors import (
    ErrorSeverity, PreconditionViolationError, ZERO_INPUT_MESSAGE,
)
from gcd_app.core.gcd import gcd


@pytest.mark.parametrize("n, m, expected", [
    (48, 18, 6),
    (18, 48, 6),
    (17, 5, 1),
    (1, 1, 1),
    (1, 999, 1),
    (14, 15, 1),
    (2 * 3 * 5 * 11 * 17, 3 * 7 * 11 * 13 * 19, 3 * 11),
    (U64_MAX, U64_MAX, U64_MAX),
    (U64_MAX, 1, 1),
    (2**63, 2**40, 2**40),
    (U64_MAX, 5, 5),  # 2**64 - 1 is divisible by 3, 5 and 17
])
def test_gcd_known_values(n, m, expected):
    assert gcd(n, m) == expected


def test_gcd_divides_both_and_is_greatest():
    for n in range(1, 60):
        for m in range(1, 60):
            d = gcd(n, m)
            assert n % d == 0
            assert m % d == 0
            assert not any(
                n % k == 0 and m % k == 0 for k in range(d + 1, min(n, m) + 1)
            )


def test_gcd_is_commutative():
    for n in range(1, 80):
        for m in range(1, 80):
            assert gcd(n, m) == gcd(m, n)


def test_gcd_of_value_with_itself_is_value():
    for n in (1, 2, 7, 1000, 2**32, U64_MAX):
        assert gcd(n, n) == n


def test_gcd_repeated_calls_are_identical():
    assert gcd(3_918_848, 1_653_264) == gcd(3_918_848, 1_653_264) == 61_232


@pytest.mark.parametrize("n, m", [(0, 5), (5, 0), (0, 0), (-4, 6)])
def test_gcd_rejects_non_positive_operands(n, m):
    with pytest.raises(PreconditionViolationError) as exc_info:
        gcd(n, m)
    err = exc_info.value
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.http_status == 500
    assert err.context.debug_info == {"n": n, "m": m}
    assert err.user_message() != ZERO_INPUT_MESSAGE
