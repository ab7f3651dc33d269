"""
Demo FastAPI application with the error interceptor installed.

This module initializes the FastAPI application with:
- Structured logging with request correlation IDs
- The error interceptor, configured for the current ENV
- Demo routes raising each failure shape

Architecture:
    - Logging configured before app creation (JSON/console)
    - The correlation ID middleware is added last so it wraps the interceptor
      and error responses still carry X-Request-ID
"""

import uuid

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI

from api_error_middleware.core import register_exception_handlers, setup_logging
from api_error_middleware.main_config import get_fastapi_config
from api_error_middleware.routes.demo import router as demo_router

# =============================================================================
# Setup Logging (before app creation)
# =============================================================================
setup_logging()

fastapi_config = get_fastapi_config()

app = FastAPI(
    title=fastapi_config.title,
    description=fastapi_config.description,
    version=fastapi_config.version,
    debug=fastapi_config.debug,
)

register_exception_handlers(app)

app.add_middleware(
    CorrelationIdMiddleware,
    header_name="X-Request-ID",
    generator=lambda: uuid.uuid4().hex[:16],
    validator=None,
    transformer=lambda x: x,
)

app.include_router(demo_router)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api_error_middleware.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_config=None,  # Disable uvicorn's logging config to use our structlog setup
    )
