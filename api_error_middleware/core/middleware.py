"""FastAPI wiring for the error interceptor.

Two paths reach the interceptor:
- ``HTTPException`` and ``RequestValidationError`` are answered by Starlette's
  inner exception middleware, so handlers for them delegate to
  ``interceptor.build_response``.
- Everything else propagates out of the router and is caught by
  ``ErrorInterceptorMiddleware``.

Usage:
    app = FastAPI()
    register_exception_handlers(app)  # interceptor built from Settings
"""

from collections.abc import Iterable
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from api_error_middleware.core.classifiers import Classifier, RequestValidationClassifier
from api_error_middleware.core.classifiers.database import (
    IntegrityErrorClassifier,
    ModelNotFoundClassifier,
)
from api_error_middleware.core.interceptor import ErrorInterceptor
from api_error_middleware.main_config import Settings, get_settings

__all__ = [
    "ErrorInterceptorMiddleware",
    "default_classifiers",
    "make_interceptor",
    "register_exception_handlers",
]


class ErrorInterceptorMiddleware(BaseHTTPMiddleware):
    """Catch all errors raised further down the middleware chain."""

    def __init__(self, app: ASGIApp, interceptor: ErrorInterceptor) -> None:
        super().__init__(app)
        self.interceptor = interceptor

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        return await self.interceptor.intercept(request, call_next)


def default_classifiers() -> list[Classifier]:
    """Classifiers registered when none are configured explicitly."""
    return [
        ModelNotFoundClassifier(),
        IntegrityErrorClassifier(),
        RequestValidationClassifier(),
    ]


def make_interceptor(
    settings: Settings | None = None,
    classifiers: Iterable[Classifier] | None = None,
) -> ErrorInterceptor:
    """Build an interceptor for the configured environment.

    Args:
        settings: Application settings (defaults to the cached ``get_settings()``)
        classifiers: Ordered classifiers (defaults to ``default_classifiers()``)
    """
    if settings is None:
        settings = get_settings()
    if classifiers is None:
        classifiers = default_classifiers()
    return ErrorInterceptor(environment=settings.env, classifiers=classifiers)


def register_exception_handlers(app: Any, interceptor: ErrorInterceptor | None = None) -> ErrorInterceptor:
    """Route every failure of a FastAPI app through ``interceptor``.

    Must be called before the app serves its first request.

    Args:
        app: FastAPI application instance
        interceptor: Interceptor to install (defaults to ``make_interceptor()``)

    Returns:
        The installed interceptor
    """
    if interceptor is None:
        interceptor = make_interceptor()

    async def intercepted_exception_handler(request: Request, exc: Exception) -> Response:
        return interceptor.build_response(exc, request)

    app.add_exception_handler(StarletteHTTPException, intercepted_exception_handler)
    app.add_exception_handler(RequestValidationError, intercepted_exception_handler)
    app.add_middleware(ErrorInterceptorMiddleware, interceptor=interceptor)
    return interceptor
