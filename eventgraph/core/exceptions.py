# eventgraph/core/exceptions.py
"""
Exception hierarchy for the event graph service.

Every error a resolver can raise inherits from EventGraphError. The
`extensions` attribute is picked up by graphql-core when it wraps the
exception, so clients receive `errors[].extensions.code` next to the message.
"""

from typing import Optional


class EventGraphError(Exception):
    """Base exception for all service errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "INTERNAL_SERVER_ERROR",
        details: Optional[dict] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    @property
    def extensions(self) -> dict:
        extensions = {"code": self.error_code}
        if self.details:
            extensions["details"] = self.details
        return extensions


class ValidationError(EventGraphError):
    """Malformed or missing input."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(
            message,
            error_code="BAD_USER_INPUT",
            details={"field": field} if field else None,
        )
        self.field = field


class AuthError(EventGraphError):
    """Missing or insufficient authentication."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message, error_code="UNAUTHENTICATED")


class NotFoundError(EventGraphError):
    """A referenced entity does not exist."""

    def __init__(self, message: str):
        super().__init__(message, error_code="NOT_FOUND")


class ConflictError(EventGraphError):
    """A uniqueness constraint would be violated."""

    def __init__(self, message: str):
        super().__init__(message, error_code="CONFLICT")
