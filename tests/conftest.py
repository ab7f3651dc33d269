"""Shared fixtures for interceptor tests."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api_error_middleware.core import Environment, ErrorInterceptor, register_exception_handlers
from api_error_middleware.core.middleware import default_classifiers


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def dev_interceptor() -> ErrorInterceptor:
    """Interceptor that discloses diagnostics."""
    return ErrorInterceptor(Environment.LOCAL, default_classifiers())


@pytest.fixture
def prod_interceptor() -> ErrorInterceptor:
    """Interceptor that withholds diagnostics."""
    return ErrorInterceptor(Environment.PROD, default_classifiers())


@pytest.fixture
def app(dev_interceptor: ErrorInterceptor) -> FastAPI:
    """Create test FastAPI application."""
    test_app = FastAPI()
    register_exception_handlers(test_app, dev_interceptor)
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create test client."""
    return TestClient(app)
