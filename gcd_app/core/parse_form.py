"""Form Parsing — turns raw form fields into a GcdRequest.

Invariants:
    - Fields parsed in order n, m; the first bad field is the one reported
    - Accepts only ASCII decimal digits (after stripping surrounding whitespace)
    - Values above U64_MAX are rejected, zero is accepted (validate_inputs owns that rule)
    - A field sent more than once is rejected, never silently resolved
    - Digit strings of any length are classified without int() overflow errors

Design Decisions:
    - Hand-written parse over a framework model: the route hands over the raw
      mapping, so the rules here are testable with a plain dict
    - str.isdigit() is not used: it accepts non-ASCII digits like '²'
"""

from collections.abc import Mapping

from gcd_app.core.domain_types import GcdRequest, U64_MAX
from gcd_app.core.errors import MalformedFieldError

_ASCII_DIGITS = frozenset("0123456789")
_U64_MAX_DIGITS = len(str(U64_MAX))


def parse_gcd_form(form: Mapping[str, str]) -> GcdRequest:
    """Parse fields n and m into a GcdRequest or raise MalformedFieldError."""
    return GcdRequest(
        n=parse_u64_field(form, "n"),
        m=parse_u64_field(form, "m"),
    )


def parse_u64_field(form: Mapping[str, str], name: str) -> int:
    # Starlette FormData keeps repeated keys; plain dicts cannot hold them
    getlist = getattr(form, "getlist", None)
    if getlist is not None and len(getlist(name)) > 1:
        raise MalformedFieldError(name, "duplicate field")
    raw = form.get(name)
    if raw is None:
        raise MalformedFieldError(name, "missing")
    if not isinstance(raw, str):
        # UploadFile from a multipart body
        raise MalformedFieldError(name, "not an unsigned integer")
    text = raw.strip()
    if not text or not set(text) <= _ASCII_DIGITS:
        raise MalformedFieldError(name, "not an unsigned integer")
    digits = text.lstrip("0") or "0"
    if len(digits) > _U64_MAX_DIGITS:
        raise MalformedFieldError(name, "out of range")
    value = int(digits)
    if value > U64_MAX:
        raise MalformedFieldError(name, "out of range")
    return value
