"""Error Hierarchy - typed, categorized exceptions for all roster failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; store errors (500-level) are critical
    - public_message never carries internal details, only the HTTP reason phrase
    - severity picks the log level; category and code go into log records

Design Decisions:
    - Single hierarchy with RosterError base: one FastAPI handler catches all
    - ErrorContext as dataclass: log context without coupling to a logger
"""

import logging
from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus


class ErrorSeverity(str, Enum):
    """Error severity; decides the level the error is logged at."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"

    @property
    def log_level(self) -> int:
        return getattr(logging, self.name)


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    STORE = "store"


@dataclass
class ErrorContext:
    """Context attached to an error for logging."""
    individual_id: str | None = None
    operation: str | None = None


class RosterError(Exception):
    """Base exception for all roster errors."""

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
    def public_message(self) -> str:
        """Text sent to the client: the bare reason phrase of the status."""
        return HTTPStatus(self.http_status).phrase

    def to_log_extra(self) -> dict:
        """Structured fields for the logger's ``extra`` argument."""
        return {
            "error_code": self.code,
            "error_category": self.category.value,
            "individual_id": self.context.individual_id,
            "operation": self.context.operation,
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class ValidationError(RosterError):
    """Candidate record failed Resource Model validation."""
    def __init__(
        self,
        message: str,
        details: list[dict] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.details = details or []


class NotFoundError(RosterError):
    """Requested Individual does not exist."""
    def __init__(self, individual_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.individual_id = individual_id
        super().__init__(
            f"Individual '{individual_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.individual_id = individual_id


# ─── Store Errors (500-level) ───────────────────────────────────

class StoreError(RosterError):
    """Persistence operation failed (connectivity, malformed query, driver)."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Store {operation} failed: {message}",
            "STORE_ERROR", ErrorCategory.STORE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation
