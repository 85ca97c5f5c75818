"""Error Hierarchy: typed, categorized exceptions for onion failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Only infrastructure raises; services/ and api/ forward errors untouched
    - to_response() produces the error envelope printed by the entry point

Design Decisions:
    - Single hierarchy with OnionError base: the entry point catches one type
    - ErrorContext as dataclass: observability data without coupling to logging
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    DATA_SOURCE = "data_source"


@dataclass
class ErrorContext:
    """Context attached to an error for debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    source: str | None = None


class OnionError(Exception):
    """Base exception for all onion errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        """Convert to the standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "operation": self.context.operation,
                    "source": self.context.source,
                },
            }
        }


# ─── Infrastructure Errors ──────────────────────────────────────

class FetchError(OnionError):
    """The external operand could not be obtained."""
    def __init__(
        self,
        source: str,
        reason: str,
        operation: str = "fetch_x",
        context: ErrorContext | None = None,
    ):
        base = context or ErrorContext()
        ctx = replace(
            base,
            operation=base.operation or operation,
            source=base.source or source,
        )
        super().__init__(
            f"Fetching operand from {source} failed: {reason}",
            "FETCH_FAILED", ErrorCategory.DATA_SOURCE,
            ErrorSeverity.CRITICAL, ctx,
        )
        self.source = source
        self.reason = reason
