"""Error Hierarchy — typed, categorized exceptions for gradation failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Business failures answer 409; unexpected failures answer 500
    - to_response() produces the shared envelope: {"message": ..., **echoed input}

Design Decisions:
    - Single hierarchy with GradationError base: FastAPI global handler catches all
    - Echoed input travels with the error so the handler stays generic
    - Expected negatives (nothing found, already liked) are NOT errors; services
      return them as values and routes decide the status code
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from gradation.core.domain_types import (
    GradationExhibitionId, UniversityExhibitionId, UserId,
)


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Ids of the records a failure concerns, surfaced as log extras."""
    exhibition_id: GradationExhibitionId | None = None
    university_exhibition_id: UniversityExhibitionId | None = None
    user_id: UserId | None = None

    def log_extra(self) -> dict[str, int]:
        """Non-empty ids, keyed the way JSONFormatter reads them."""
        ids = {
            "exhibition_id": self.exhibition_id,
            "university_exhibition_id": self.university_exhibition_id,
            "user_id": self.user_id,
        }
        return {k: v for k, v in ids.items() if v is not None}


class GradationError(Exception):
    """Base exception for all gradation errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        echo: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.echo = echo or {}

    def to_response(self) -> dict:
        """Convert to the shared REST envelope."""
        return {"message": self.message, **self.echo}


# ─── Business Errors (409) ──────────────────────────────────────

class ExhibitionNotFoundError(GradationError):
    """No main exhibition has been registered yet."""
    def __init__(self, message: str = "Failed to load the exhibition.", context: ErrorContext | None = None):
        super().__init__(
            message, "EXHIBITION_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 409,
        )


class RegistrationConflictError(GradationError):
    """A registration could not be completed; the submitted input is echoed back."""
    def __init__(
        self, message: str, echo: dict[str, Any] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "REGISTRATION_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409, echo,
        )


# ─── Infrastructure Errors (500) ────────────────────────────────

class DatabaseError(GradationError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class ServerError(GradationError):
    """Unexpected failure surfaced to the caller with its description."""
    def __init__(
        self, cause: str, echo: dict[str, Any] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Server error: {cause}", "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500, echo,
        )
