"""
Core components of the error interceptor.

This module contains the interceptor itself, the classifier registry,
FastAPI wiring, environment handling and logging configuration.
"""

from .classifiers import Classifier, ClassifierRegistry, RegistryFrozenError
from .enums import Environment
from .interceptor import ErrorInterceptor, render_error
from .logging_config import setup_logging
from .middleware import (
    ErrorInterceptorMiddleware,
    default_classifiers,
    make_interceptor,
    register_exception_handlers,
)

__all__ = [
    "Classifier",
    "ClassifierRegistry",
    "Environment",
    "ErrorInterceptor",
    "ErrorInterceptorMiddleware",
    "RegistryFrozenError",
    "default_classifiers",
    "make_interceptor",
    "register_exception_handlers",
    "render_error",
    "setup_logging",
]
