"""Error Hierarchy — typed, categorized exceptions for all GCD service failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Input errors (400-level) are recoverable; contract violations (500-level) are critical
    - user_message() never exposes internal details for critical errors

Design Decisions:
    - Single hierarchy with GcdError base: one global handler catches all
    - ErrorContext as dataclass: observability data without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


ZERO_INPUT_MESSAGE = "Computing the GCD with zero is boring."
INTERNAL_ERROR_MESSAGE = "An unexpected error occurred."


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logging and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    field: str | None = None
    debug_info: dict[str, Any] | None = None


class GcdError(Exception):
    """Base exception for all GCD service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    @property
    def recoverable(self) -> bool:
        return self.severity in (ErrorSeverity.INFO, ErrorSeverity.WARNING)

    def user_message(self) -> str:
        """Message safe to show in the response body."""
        if self.severity == ErrorSeverity.CRITICAL:
            return INTERNAL_ERROR_MESSAGE
        return self.message


# ─── Input Errors (400-level) ───────────────────────────────────

class ZeroInputError(GcdError):
    """One of the operands is zero."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            ZERO_INPUT_MESSAGE, "ZERO_INPUT", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )


class MalformedFieldError(GcdError):
    """Form field missing or not an unsigned 64-bit integer."""
    def __init__(self, field: str, reason: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = field
        super().__init__(
            f"Invalid form field '{field}': {reason}.",
            "MALFORMED_FIELD", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.field = field
        self.reason = reason


# ─── Contract Errors (500-level) ────────────────────────────────

class PreconditionViolationError(GcdError):
    """Internal function called with arguments its contract forbids."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "PRECONDITION_VIOLATION", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
