"""Error Hierarchy — typed, categorized exceptions for all Mutant API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST error envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with MutantApiError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - RecordConflictError is internal: MutantService absorbs it, never reaches a client
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


class InvalidDnaReason(str, Enum):
    """Why a DNA grid was rejected — one member per validation check."""
    EMPTY = "empty"
    TOO_SMALL = "too_small"
    NULL_ROW = "null_row"
    NOT_SQUARE = "not_square"
    INVALID_BASE = "invalid_base"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    fingerprint: str | None = None
    row: int | None = None
    column: int | None = None
    debug_info: dict[str, Any] | None = None


class MutantApiError(Exception):
    """Base exception for all Mutant API errors."""

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

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "row": self.context.row,
                    "column": self.context.column,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidDnaError(MutantApiError):
    """DNA grid failed structural or alphabet validation."""
    def __init__(
        self,
        message: str,
        reason: InvalidDnaReason,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "INVALID_DNA", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.reason = reason

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["context"]["reason"] = self.reason.value
        return response


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreUnavailableError(MutantApiError):
    """Record store could not be reached or the operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Record store {operation} failed: {message}",
            "STORE_UNAVAILABLE", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class RecordConflictError(MutantApiError):
    """A record with this fingerprint was inserted concurrently."""
    def __init__(self, fingerprint: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.fingerprint = fingerprint
        super().__init__(
            f"DNA record '{fingerprint}' already exists",
            "RECORD_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )
        self.fingerprint = fingerprint
