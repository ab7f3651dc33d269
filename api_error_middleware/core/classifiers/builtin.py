"""Framework-level classifiers with no storage dependency."""

from collections.abc import Mapping
from typing import Any

from fastapi.exceptions import RequestValidationError

from api_error_middleware.core.exceptions.result import ClassificationResult

__all__ = ["ExceptionTypeClassifier", "RequestValidationClassifier"]


class ExceptionTypeClassifier:
    """Map one or more exception types to a fixed status.

    Usage:
        ExceptionTypeClassifier(PermissionError, status=403, message="Forbidden")
        ExceptionTypeClassifier((KeyError, LookupError), status=404)
    """

    def __init__(
        self,
        exc_types: type[Exception] | tuple[type[Exception], ...],
        status: int,
        message: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self.exc_types = exc_types
        self.status = status
        self.message = message
        self.headers = dict(headers) if headers else None

    def convert(self, failure: Exception, request: Any) -> ClassificationResult | None:
        if not isinstance(failure, self.exc_types):
            return None
        return ClassificationResult(
            message=self.message if self.message is not None else str(failure),
            status=self.status,
            headers=self.headers,
        )


class RequestValidationClassifier:
    """Pydantic request validation errors (422)."""

    message = "Request validation failed"

    def convert(self, failure: Exception, request: Any) -> ClassificationResult | None:
        if not isinstance(failure, RequestValidationError):
            return None
        return ClassificationResult(message=self.message, status=422)
