"""Error Hierarchy — typed, categorized exceptions for HTTP-visible failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors map to 4xx; anything unanticipated maps to 500
    - to_response() produces the single REST error envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with EmployeeRegistryError base: FastAPI global handler
      catches all (ADR: uniform error shape)
    - The store never raises these — the adapter raises them when translating
      a Failure (see services/employee_adapter.py)
"""

from dataclasses import dataclass, field
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
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context surfaced alongside the error message."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    employee_id: str | None = None


class EmployeeRegistryError(Exception):
    """Base exception for all registry errors."""

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
                    "employee_id": self.context.employee_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class EmployeeAlreadyExistsError(EmployeeRegistryError):
    """Create attempted with an identifier that is already stored."""
    def __init__(self, message: str, employee_id: str | None = None):
        super().__init__(
            message, "ALREADY_EXISTS", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ErrorContext(employee_id=employee_id), 409,
        )


class EmployeeNotFoundError(EmployeeRegistryError):
    """Update or delete referenced an identifier that is not stored."""
    def __init__(self, message: str, employee_id: str | None = None):
        super().__init__(
            message, "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ErrorContext(employee_id=employee_id), 404,
        )


# ─── Internal Errors (500-level) ────────────────────────────────

class InternalRegistryError(EmployeeRegistryError):
    """Store reported a failure with no dedicated HTTP mapping."""
    def __init__(self, message: str = "An unexpected error occurred"):
        super().__init__(
            message, "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, None, 500,
        )
