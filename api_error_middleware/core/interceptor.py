"""Funnel every downstream failure into a uniform JSON error response.

Resolution order for a failure:
    1. The first registered classifier that returns a result
    2. Self-describing failures (reason, status and headers of their own)
    3. Diagnostic-capable failures, outside release environments only (500)
    4. ``str(failure)``, or "Unknown error." when that is empty or unavailable

The response body is always ``{"error": "<message>"}`` with
``Content-Type: application/json``; the status defaults to 400.

Building a response logs nothing and touches no shared state. The one
exception is the classifier registry, which logs a warning when it skips a
classifier that raised, since that is a configuration defect.

Usage:
    interceptor = ErrorInterceptor(Environment.PROD, [ModelNotFoundClassifier()])

    async def dispatch(request, call_next):
        return await interceptor.intercept(request, call_next)
"""

import inspect
from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from api_error_middleware.core.classifiers.registry import Classifier, ClassifierRegistry
from api_error_middleware.core.enums import Environment
from api_error_middleware.core.exceptions.capabilities import DiagnosticCapable, SelfDescribing
from api_error_middleware.core.exceptions.result import ClassificationResult

__all__ = [
    "DEFAULT_STATUS",
    "ENCODING_FAILURE_BODY",
    "UNKNOWN_ERROR_MESSAGE",
    "ErrorInterceptor",
    "render_error",
]

DEFAULT_STATUS = status.HTTP_400_BAD_REQUEST
UNKNOWN_ERROR_MESSAGE = "Unknown error."
ENCODING_FAILURE_BODY = b'{"error": "Unable to encode error to JSON"}'

Downstream = Callable[[Any], Awaitable[Response] | Response]


class ErrorInterceptor:
    """Stateless per request; share one instance across the whole app."""

    def __init__(
        self,
        environment: Environment,
        classifiers: ClassifierRegistry | Iterable[Classifier] = (),
    ) -> None:
        self.environment = environment
        if isinstance(classifiers, ClassifierRegistry):
            self.registry = classifiers
        else:
            self.registry = ClassifierRegistry(classifiers)

    async def intercept(self, request: Any, downstream: Downstream) -> Response:
        """Call ``downstream(request)`` and turn any failure into a response.

        Covers both a raise during the call and a raise while awaiting its
        result. Cancellation is not intercepted.
        """
        try:
            response = downstream(request)
            if inspect.isawaitable(response):
                response = await response
        except Exception as exc:
            return self.build_response(exc, request)
        return response

    def build_response(self, failure: Exception, request: Any) -> Response:
        """Create a JSON error response for ``failure``. Never raises."""
        try:
            result = self.classify(failure, request)
        except Exception:
            result = ClassificationResult(message=UNKNOWN_ERROR_MESSAGE)
        return render_error(result)

    def classify(self, failure: Exception, request: Any) -> ClassificationResult:
        result = self.registry.classify(failure, request)

        if result is None:
            result = _abort_result(failure)

        if result is None and not self.environment.is_release:
            # Diagnostics may contain sensitive data, never disclose them in release
            result = _debug_result(failure)

        if result is None:
            result = ClassificationResult(message=_describe(failure))

        return result


def render_error(result: ClassificationResult) -> Response:
    """Serialize a classification result to a JSON response."""
    status_code = result.status if result.status is not None else DEFAULT_STATUS
    headers = _response_headers(result.headers)

    try:
        return JSONResponse(
            content={"error": result.message},
            status_code=status_code,
            headers=headers,
        )
    except (TypeError, ValueError):
        # Lone surrogates and similar cannot be encoded as UTF-8 JSON
        return Response(
            content=ENCODING_FAILURE_BODY,
            status_code=status_code,
            headers=headers,
            media_type="application/json",
        )


def _abort_result(failure: Exception) -> ClassificationResult | None:
    try:
        if isinstance(failure, SelfDescribing):
            reason, status_code = failure.reason, failure.status_code
        elif isinstance(failure, StarletteHTTPException):
            reason, status_code = failure.detail, failure.status_code
        else:
            return None
        message = reason if isinstance(reason, str) else str(reason)
    except Exception:
        return None

    return ClassificationResult(
        message=message,
        status=_abort_status(status_code),
        headers=_abort_headers(failure),
    )


def _abort_status(status_code: Any) -> int | None:
    """A usable HTTP status, or ``None`` to fall back to the default."""
    if isinstance(status_code, bool) or not isinstance(status_code, int):
        return None
    if not 100 <= status_code <= 599:
        return None
    return status_code


def _abort_headers(failure: Exception) -> dict[str, str] | None:
    """Extra headers of a self-describing failure; malformed entries are dropped."""
    try:
        headers = failure.headers
        if not headers:
            return None
        entries = list(headers.items()) if isinstance(headers, Mapping) else list(headers)
    except Exception:
        return None

    collected: dict[str, str] = {}
    for entry in entries:
        try:
            name, value = entry
        except (TypeError, ValueError):
            continue
        if isinstance(name, str) and isinstance(value, str | int):
            collected[name] = str(value)
    return collected or None


def _debug_result(failure: Exception) -> ClassificationResult | None:
    try:
        if not isinstance(failure, DiagnosticCapable):
            return None
        help_text = failure.debuggable_help()
        return ClassificationResult(
            message=help_text if isinstance(help_text, str) else str(help_text),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    except Exception:
        return None


def _describe(failure: Exception) -> str:
    try:
        description = str(failure)
    except Exception:
        return UNKNOWN_ERROR_MESSAGE
    return description or UNKNOWN_ERROR_MESSAGE


def _response_headers(headers: Mapping[str, str] | None) -> dict[str, str]:
    """Drop headers that would clash with the JSON body or cannot go on the wire."""
    if not headers:
        return {}

    safe: dict[str, str] = {}
    for name, value in headers.items():
        if name.lower() in ("content-type", "content-length"):
            continue
        if any(char in part for part in (name, value) for char in "\r\n"):
            continue
        try:
            name.encode("latin-1")
            value.encode("latin-1")
        except UnicodeEncodeError:
            continue
        safe[name] = value
    return safe
