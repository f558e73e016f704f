"""Error Hierarchy: typed, categorized exceptions for all Values Service failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (422) describe a rejected submission and carry no side effects
    - Infrastructure errors (500) describe a backing service that failed a call
    - to_response() produces the REST envelope; no driver details leak into it
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


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
    CACHE = "cache"
    NOTIFICATION = "notification"
    STARTUP = "startup"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    index: int | None = None
    debug_info: dict[str, Any] | None = None


class ValuesServiceError(Exception):
    """Base exception for all Values Service errors."""

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
            }
        }


# ─── Domain Errors (422) ────────────────────────────────────────

class InvalidIndexError(ValuesServiceError):
    """Submitted index is not representable as an integer."""
    def __init__(self, raw: object, context: ErrorContext | None = None):
        super().__init__(
            f"Index must be an integer, got {raw!r}",
            "INVALID_INDEX", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 422,
        )
        self.raw = raw


class IndexTooHighError(ValuesServiceError):
    """Submitted index exceeds the upper bound."""
    def __init__(self, index: int, limit: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.index = index
        super().__init__(
            "Index too high",
            "INDEX_TOO_HIGH", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 422,
        )
        self.index = index
        self.limit = limit


# ─── Infrastructure Errors (500) ────────────────────────────────

class DatabaseError(ValuesServiceError):
    """Durable store operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class CacheError(ValuesServiceError):
    """Cache operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Cache {operation} failed: {message}",
            "CACHE_ERROR", ErrorCategory.CACHE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class NotificationError(ValuesServiceError):
    """Publishing to the notification channel failed."""
    def __init__(self, message: str, topic: str, context: ErrorContext | None = None):
        super().__init__(
            f"Publish to '{topic}' failed: {message}",
            "NOTIFICATION_ERROR", ErrorCategory.NOTIFICATION,
            ErrorSeverity.ERROR, context, 500,
        )
        self.topic = topic


class StartupError(ValuesServiceError):
    """Startup gate could not verify the durable store; the process must exit."""
    def __init__(self, message: str, attempts: int, context: ErrorContext | None = None):
        super().__init__(
            message, "STARTUP_FAILED", ErrorCategory.STARTUP,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.attempts = attempts
