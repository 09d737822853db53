"""Error Hierarchy — typed exceptions with a fixed HTTP status per kind.

Invariants:
    - Every error has a message, code (str), category (ErrorCategory), severity (ErrorSeverity)
    - http_status is a class attribute: fixed per kind, never overridden by the raiser
    - Typed errors are recognized by isinstance(exc, ClientsApiError), never by message text
    - Untyped errors may carry an integer `cause` attribute (100-599) as a secondary status channel

Design Decisions:
    - Single hierarchy with ClientsApiError base: one global handler catches all (ADR: uniform error shape)
    - resolve_status/resolve_message live next to the taxonomy so every handler
      resolves status in the same order: typed → cause → 500
"""

from enum import Enum

DEFAULT_ERROR_MESSAGE = "Something went wrong"
MIN_HTTP_STATUS = 100
MAX_HTTP_STATUS = 599


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    BUSINESS_RULE = "business_rule"
    DATABASE = "database"
    INTERNAL = "internal"


class ClientsApiError(Exception):
    """Base exception for all application errors with an HTTP status."""

    http_status: int = 500
    code: str = "INTERNAL_ERROR"
    category: ErrorCategory = ErrorCategory.INTERNAL
    severity: ErrorSeverity = ErrorSeverity.CRITICAL
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message


# ─── Client Errors (400-level) ──────────────────────────────────

class BadRequestError(ClientsApiError):
    """Request is malformed (e.g. identifier format)."""
    http_status = 400
    code = "BAD_REQUEST"
    category = ErrorCategory.VALIDATION
    severity = ErrorSeverity.WARNING
    default_message = "Bad request"


class UnauthorizedError(ClientsApiError):
    """Authentication is required and has failed."""
    http_status = 401
    code = "UNAUTHORIZED"
    category = ErrorCategory.AUTHENTICATION
    severity = ErrorSeverity.WARNING
    default_message = "Unauthorized"


class ForbiddenError(ClientsApiError):
    """Caller is authenticated but not allowed to perform the action."""
    http_status = 403
    code = "FORBIDDEN"
    category = ErrorCategory.AUTHORIZATION
    severity = ErrorSeverity.WARNING
    default_message = "Forbidden"


class NotFoundError(ClientsApiError):
    """Requested resource does not exist."""
    http_status = 404
    code = "RESOURCE_NOT_FOUND"
    category = ErrorCategory.RESOURCE_NOT_FOUND
    severity = ErrorSeverity.WARNING
    default_message = "Resource not found"


class ConflictError(ClientsApiError):
    """Resource state conflicts with the request."""
    http_status = 409
    code = "CONFLICT"
    category = ErrorCategory.CONFLICT
    severity = ErrorSeverity.WARNING
    default_message = "Conflict"


class UnprocessableEntityError(ClientsApiError):
    """Request is well-formed but semantically invalid."""
    http_status = 422
    code = "UNPROCESSABLE_ENTITY"
    category = ErrorCategory.BUSINESS_RULE
    severity = ErrorSeverity.WARNING
    default_message = "Unprocessable Entity"


# ─── Server Errors (500-level) ──────────────────────────────────

class InternalError(ClientsApiError):
    """Unexpected server-side failure."""


class DatabaseError(InternalError):
    """Database operation failed."""
    code = "DATABASE_ERROR"
    category = ErrorCategory.DATABASE

    def __init__(self, message: str, operation: str):
        super().__init__(f"Database {operation} failed: {message}")
        self.operation = operation


# ─── Resolution ─────────────────────────────────────────────────

def resolve_status(exc: BaseException) -> int:
    """Typed status first, then an integer `cause` in the HTTP range, then 500."""
    if isinstance(exc, ClientsApiError):
        return exc.http_status
    cause = getattr(exc, "cause", None)
    if (
        isinstance(cause, int)
        and not isinstance(cause, bool)
        and MIN_HTTP_STATUS <= cause <= MAX_HTTP_STATUS
    ):
        return cause
    return 500


def resolve_message(exc: BaseException) -> str:
    """Error message, or the fixed fallback when it is empty."""
    if isinstance(exc, ClientsApiError):
        message = exc.message
    else:
        message = str(exc)
    return message or DEFAULT_ERROR_MESSAGE
