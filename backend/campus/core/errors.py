"""Error Hierarchy - typed, categorized exceptions for every campus failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Callers tell errors apart by type or code, never by message text
    - to_response() produces the REST envelope; to_extensions() the GraphQL extensions
    - AuthenticationError never says which factor (email or password) was wrong

Design Decisions:
    - Single hierarchy with CampusError base: one handler per transport catches all
    - ErrorContext as dataclass: observability detail without coupling to logging
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
    CONFLICT = "conflict"
    RESOURCE_NOT_FOUND = "resource_not_found"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and client envelopes."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    entity_kind: str | None = None
    entity_id: str | None = None
    field: str | None = None
    debug_info: dict[str, Any] | None = None


class CampusError(Exception):
    """Base exception for all campus errors."""

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
                    "entity_kind": self.context.entity_kind,
                    "entity_id": self.context.entity_id,
                    "field": self.context.field,
                },
            }
        }

    def to_extensions(self) -> dict:
        """Convert to the `extensions` member of a GraphQL error."""
        extensions: dict[str, Any] = {
            "code": self.code,
            "category": self.category.value,
        }
        if self.context.field:
            extensions["field"] = self.context.field
        if self.context.entity_kind:
            extensions["entityKind"] = self.context.entity_kind
        if self.context.entity_id:
            extensions["entityId"] = self.context.entity_id
        return extensions


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(CampusError):
    """A supplied value is malformed or out of range."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = field
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.field = field


class ConflictError(CampusError):
    """A unique field (email, subject code) is already taken."""
    def __init__(
        self, kind: str, field: str, value: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity_kind = kind
        ctx.field = field
        super().__init__(
            f"{kind} with {field} '{value}' already exists",
            "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )
        self.kind = kind
        self.field = field


class NotFoundError(CampusError):
    """Requested entity does not exist."""
    def __init__(self, kind: str, entity_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.entity_kind = kind
        ctx.entity_id = entity_id
        super().__init__(
            f"{kind} '{entity_id}' not found",
            "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.kind = kind
        self.entity_id = entity_id


class AuthenticationError(CampusError):
    """Login failed. The message is identical for unknown email and bad password."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid email or password",
            "AUTHENTICATION_FAILED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class AuthorizationError(CampusError):
    """Operation needs a valid bearer token and none was presented."""
    def __init__(self, operation: str | None = None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            "Authentication required",
            "UNAUTHORIZED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, ctx, 401,
        )
