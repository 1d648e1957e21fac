"""Error Hierarchy: typed, categorized exceptions for every demo server failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the public envelope {"error": <public message>}
    - The internal message is for logs only, never sent to the client

Design Decisions:
    - Single hierarchy with DemoServerError base: one global handler catches all
    - Body parsing failures share the generic 500 message with unhandled exceptions
"""

from enum import Enum

from app.core.messages import INTERNAL_ERROR_MESSAGE, ROUTE_NOT_FOUND_MESSAGE


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


class DemoServerError(Exception):
    """Base exception for all demo server errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
        public_message: str = INTERNAL_ERROR_MESSAGE,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.public_message = public_message

    def to_response(self) -> dict:
        """Convert to the public REST error envelope."""
        return {"error": self.public_message}


# ─── Routing Errors (400-level) ─────────────────────────────────

class RouteNotFoundError(DemoServerError):
    """No handler registered for the requested method and path."""
    def __init__(self, method: str, path: str):
        super().__init__(
            f"No route for {method} {path}",
            "ROUTE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404, ROUTE_NOT_FOUND_MESSAGE,
        )
        self.method = method
        self.path = path


# ─── Body Errors (generic 500) ──────────────────────────────────

class MalformedBodyError(DemoServerError):
    """Request body could not be decoded for its declared content type."""
    def __init__(self, detail: str):
        super().__init__(
            f"Malformed request body: {detail}",
            "MALFORMED_BODY", ErrorCategory.VALIDATION,
        )
        self.detail = detail


class BodyTooLargeError(DemoServerError):
    """Request body exceeds the configured size limit."""
    def __init__(self, size: int, limit: int):
        super().__init__(
            f"Request body of {size} bytes exceeds limit of {limit} bytes",
            "BODY_TOO_LARGE", ErrorCategory.VALIDATION,
        )
        self.size = size
        self.limit = limit
