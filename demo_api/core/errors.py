"""Error Hierarchy — typed, categorized exceptions for the demo catalog API.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the REST envelope consumed by the global handler
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with DemoApiError base: FastAPI global handler catches all (ADR: uniform error shape)
    - Accessors themselves never raise; errors only come from catalog lifecycle
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    UNAVAILABLE = "unavailable"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for observability."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None


class DemoApiError(Exception):
    """Base exception for all demo catalog API errors."""

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


# ─── Infrastructure Errors (500-level) ──────────────────────────

class CatalogNotReadyError(DemoApiError):
    """Seed data requested before the catalog was initialized."""
    def __init__(self, resource: str, context: ErrorContext | None = None):
        ctx = replace(context or ErrorContext(), resource=resource)
        super().__init__(
            f"{resource} catalog is not initialized",
            "CATALOG_NOT_READY", ErrorCategory.UNAVAILABLE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.resource = resource
