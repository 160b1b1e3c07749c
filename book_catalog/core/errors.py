"""Error Hierarchy — typed, categorized exceptions for every catalog failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are client mistakes; infrastructure errors (500-level) are critical
    - to_response() produces the REST error envelope used by every failing endpoint
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with BookCatalogError base: one global handler renders all of them
    - ErrorContext as dataclass: observability data without coupling to logging
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    isbn: str | None = None
    debug_info: dict[str, Any] | None = None


class BookCatalogError(Exception):
    """Base exception for all Book Catalog errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        details: list[str] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.details = details or []

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        error = {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
            "context": {"isbn": self.context.isbn},
        }
        if self.details:
            error["details"] = list(self.details)
        return {"error": error}


# ─── Domain Errors (400-level) ──────────────────────────────────

class BookValidationError(BookCatalogError):
    """Submitted book record failed schema validation."""
    def __init__(self, errors: list[str], context: ErrorContext | None = None):
        super().__init__(
            "Invalid book data", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400, details=errors,
        )
        self.errors = errors


class BookNotFoundError(BookCatalogError):
    """No book row exists for the given ISBN."""
    def __init__(self, isbn: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.isbn = isbn
        super().__init__(
            f"Book with isbn '{isbn}' not found",
            "BOOK_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.isbn = isbn


class BookConflictError(BookCatalogError):
    """Storage constraint violated, usually a duplicate ISBN."""
    def __init__(self, isbn: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.isbn = isbn
        super().__init__(
            f"Book with isbn '{isbn}' already exists",
            "BOOK_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )
        self.isbn = isbn


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(BookCatalogError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
