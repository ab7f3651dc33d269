"""Exception handling package.

Provides the self-describing exception hierarchy, the failure capability
protocols and the classification result model.
"""

from .capabilities import DiagnosticCapable, SelfDescribing
from .http_exceptions import (
    AbortError,
    BadRequestError,
    ClientError,
    ConflictError,
    DebuggableError,
    ForbiddenError,
    InternalServerError,
    NotFoundError,
    NotImplementedAppError,
    ServerError,
    ServiceUnavailableError,
    UnauthorizedError,
    UnprocessableEntityError,
)
from .result import ClassificationResult

__all__ = [
    # Base exceptions
    "AbortError",
    # Client exceptions (4xx)
    "BadRequestError",
    # Models
    "ClassificationResult",
    "ClientError",
    "ConflictError",
    "DebuggableError",
    # Capabilities
    "DiagnosticCapable",
    "ForbiddenError",
    # Server exceptions (5xx)
    "InternalServerError",
    "NotFoundError",
    "NotImplementedAppError",
    "SelfDescribing",
    "ServerError",
    "ServiceUnavailableError",
    "UnauthorizedError",
    "UnprocessableEntityError",
]
