"""Self-describing HTTP exception hierarchy and debuggable errors.

Exception Hierarchy:
    AbortError (HTTPException)
    ├── ClientError (4xx errors)
    │   ├── BadRequestError (400)
    │   ├── UnauthorizedError (401)
    │   ├── ForbiddenError (403)
    │   ├── NotFoundError (404)
    │   ├── ConflictError (409)
    │   └── UnprocessableEntityError (422)
    └── ServerError (5xx errors)
        ├── InternalServerError (500)
        ├── NotImplementedAppError (501)
        └── ServiceUnavailableError (503)

    DebuggableError (Exception)

Usage:
    raise NotFoundError("User not found")

    raise UnprocessableEntityError(
        "Email is malformed",
        headers={"X-Detail": "email"},
    )

    # Detail only reaches clients outside release environments
    raise DebuggableError(
        identifier="cacheMiss",
        reason="Redis returned no value for key user:42",
    )
"""

from collections.abc import Mapping, Sequence

from fastapi import HTTPException, status


class AbortError(HTTPException):
    """Base exception for errors that carry their own reason, status and headers."""

    def __init__(
        self,
        reason: str = "An error occurred",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(
            status_code=status_code,
            detail=reason,
            headers=dict(headers) if headers else None,
        )

    @property
    def reason(self) -> str:
        return self.detail


# ============================================================================
# Client Exceptions (4xx)
# ============================================================================


class ClientError(AbortError):
    """Base exception for client errors (4xx)."""

    def __init__(
        self,
        reason: str = "Client error",
        status_code: int = status.HTTP_400_BAD_REQUEST,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(reason, status_code, headers)


class BadRequestError(ClientError):
    """400 Bad Request - Invalid request parameters."""

    def __init__(self, reason: str = "Bad request", headers: Mapping[str, str] | None = None) -> None:
        super().__init__(reason, status.HTTP_400_BAD_REQUEST, headers)


class UnauthorizedError(ClientError):
    """401 Unauthorized - Authentication required."""

    def __init__(self, reason: str = "Unauthorized", headers: Mapping[str, str] | None = None) -> None:
        super().__init__(reason, status.HTTP_401_UNAUTHORIZED, headers)


class ForbiddenError(ClientError):
    """403 Forbidden - Insufficient permissions."""

    def __init__(self, reason: str = "Forbidden", headers: Mapping[str, str] | None = None) -> None:
        super().__init__(reason, status.HTTP_403_FORBIDDEN, headers)


class NotFoundError(ClientError):
    """404 Not Found - Resource does not exist."""

    def __init__(self, reason: str = "Not found", headers: Mapping[str, str] | None = None) -> None:
        super().__init__(reason, status.HTTP_404_NOT_FOUND, headers)


class ConflictError(ClientError):
    """409 Conflict - Resource already exists or state conflict."""

    def __init__(self, reason: str = "Conflict", headers: Mapping[str, str] | None = None) -> None:
        super().__init__(reason, status.HTTP_409_CONFLICT, headers)


class UnprocessableEntityError(ClientError):
    """422 Unprocessable Entity - Validation error."""

    def __init__(
        self, reason: str = "Unprocessable entity", headers: Mapping[str, str] | None = None
    ) -> None:
        # HTTP_422_UNPROCESSABLE_ENTITY is deprecated in recent Starlette
        super().__init__(reason, 422, headers)


# ============================================================================
# Server Exceptions (5xx)
# ============================================================================


class ServerError(AbortError):
    """Base exception for server errors (5xx)."""

    def __init__(
        self,
        reason: str = "Server error",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(reason, status_code, headers)


class InternalServerError(ServerError):
    """500 Internal Server Error - Unexpected server error."""

    def __init__(
        self, reason: str = "Internal server error", headers: Mapping[str, str] | None = None
    ) -> None:
        super().__init__(reason, status.HTTP_500_INTERNAL_SERVER_ERROR, headers)


class NotImplementedAppError(ServerError):
    """501 Not Implemented - Feature not yet implemented."""

    def __init__(self, reason: str = "Not implemented", headers: Mapping[str, str] | None = None) -> None:
        super().__init__(reason, status.HTTP_501_NOT_IMPLEMENTED, headers)


class ServiceUnavailableError(ServerError):
    """503 Service Unavailable - Service temporarily unavailable."""

    def __init__(
        self, reason: str = "Service unavailable", headers: Mapping[str, str] | None = None
    ) -> None:
        super().__init__(reason, status.HTTP_503_SERVICE_UNAVAILABLE, headers)


# ============================================================================
# Debuggable Errors
# ============================================================================


class DebuggableError(Exception):
    """Error carrying internal diagnostics alongside a safe public message.

    ``str(error)`` is the public message. The identifier and reason are
    surfaced through :meth:`debuggable_help`; causes and fixes only through
    :meth:`full_help`, which the interceptor never calls.
    """

    def __init__(
        self,
        identifier: str,
        reason: str,
        message: str = "Internal server error",
        possible_causes: Sequence[str] = (),
        suggested_fixes: Sequence[str] = (),
    ) -> None:
        super().__init__(message)
        self.identifier = identifier
        self.reason = reason
        self.possible_causes = tuple(possible_causes)
        self.suggested_fixes = tuple(suggested_fixes)

    def debuggable_help(self) -> str:
        """Short single-line diagnostic: ``<TypeName>.<identifier>: <reason>``."""
        return f"{type(self).__name__}.{self.identifier}: {self.reason}"

    def full_help(self) -> str:
        """The short diagnostic plus possible causes and suggested fixes."""
        help_text = self.debuggable_help()
        if self.possible_causes:
            help_text += f" (possible causes: {'; '.join(self.possible_causes)})"
        if self.suggested_fixes:
            help_text += f" (suggested fixes: {'; '.join(self.suggested_fixes)})"
        return help_text
