"""Error Hierarchy: typed, categorized exceptions for all deckpool failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are user-correctable; infrastructure errors (500-level) are critical
    - to_response() produces the one REST envelope every API error uses
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with DeckPoolError base: one FastAPI handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
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
    BUSINESS_RULE = "business_rule"
    PERSISTENCE = "persistence"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for observability."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    data_file: str | None = None
    operation: str | None = None


class DeckPoolError(Exception):
    """Base exception for all deckpool errors."""

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
        self.details: list[dict] = []

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
                    "operation": self.context.operation,
                },
                "details": self.details,
            }
        }


# --- Domain Errors (400-level) ----------------------------------------------

class PoolExhaustedError(DeckPoolError):
    """Draw attempted while both piles are empty."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Deck was empty",
            "POOL_EXHAUSTED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )


class PayloadTooLargeError(DeckPoolError):
    """Request body exceeds the configured limit."""
    def __init__(self, size: int, limit: int, context: ErrorContext | None = None):
        super().__init__(
            f"Request body of {size} bytes exceeds the {limit} byte limit",
            "PAYLOAD_TOO_LARGE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 413,
        )
        self.size = size
        self.limit = limit


class RequestValidationFailedError(DeckPoolError):
    """Request body or parameters failed schema validation."""
    def __init__(self, details: list[dict], context: ErrorContext | None = None):
        super().__init__(
            "Invalid request data",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.details = details


# --- Infrastructure Errors (500-level) --------------------------------------

class PersistenceError(DeckPoolError):
    """Reading or writing the pool file failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Pool {operation} failed: {message}",
            "PERSISTENCE_ERROR", ErrorCategory.PERSISTENCE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.operation = operation


class MalformedStateError(DeckPoolError):
    """Persisted pool state does not match the expected record."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = ctx.operation or "load"
        super().__init__(
            f"Malformed pool state: {message}",
            "MALFORMED_STATE", ErrorCategory.PERSISTENCE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )


class PoolNotInitializedError(DeckPoolError):
    """Pool handle requested before application startup loaded it."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Pool is not initialized",
            "POOL_NOT_INITIALIZED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 503,
        )


class InternalError(DeckPoolError):
    """Unexpected failure; the cause is logged, never returned."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "An unexpected error occurred",
            "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
