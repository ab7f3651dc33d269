"""Structured logging for services that install the error interceptor.

Console output (colored when ``rich`` is installed) for local work, JSON lines
for production, and the ``X-Request-ID`` correlation id on every event so a
skipped-classifier warning can be matched to the request that hit it.

Usage:
    from api_error_middleware.core.logging_config import setup_logging
    setup_logging()  # once, before the app is created
"""

import importlib.util
import logging
import sys
from typing import Any

import structlog
from asgi_correlation_id import correlation_id
from structlog.typing import Processor

from api_error_middleware.main_config import LoggingConfig, get_logging_config

SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def get_request_id(_logger: Any, _method_name: str, event_dict: dict) -> dict:
    """Add request_id from asgi-correlation-id contextvar to log events."""
    request_id = correlation_id.get()
    if request_id:
        event_dict["request_id"] = request_id
    return event_dict


def build_renderer(logging_config: LoggingConfig) -> Processor:
    """Final processor: JSON lines or the console renderer."""
    if logging_config.format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=importlib.util.find_spec("rich") is not None)


def _pre_chain() -> list[Processor]:
    """Processors shared by structlog loggers and stdlib records."""
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        get_request_id,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]


def setup_logging(logging_config: LoggingConfig | None = None) -> logging.Handler:
    """Route stdlib and structlog output through one stdout handler.

    Returns the installed handler.
    """
    if logging_config is None:
        logging_config = get_logging_config()
    level = logging_config.level.upper()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_pre_chain(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=build_renderer(logging_config),
            foreign_pre_chain=_pre_chain(),
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # uvicorn installs its own handlers; replace them so server lines share the format
    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers = [handler]
        server_logger.propagate = False
        server_logger.setLevel(level)
    logging.getLogger("uvicorn.access").setLevel(logging_config.level_uvicorn_access.upper())
    logging.getLogger("sqlalchemy.engine").setLevel(logging_config.level_sqlalchemy.upper())

    structlog.get_logger(__name__).info(
        "logging_configured",
        log_format=logging_config.format,
        log_level=level,
    )
    return handler
