"""Catch errors raised anywhere below a FastAPI app and answer with ``{"error": ...}`` JSON."""

from .core import (
    Classifier,
    ClassifierRegistry,
    Environment,
    ErrorInterceptor,
    ErrorInterceptorMiddleware,
    RegistryFrozenError,
    default_classifiers,
    make_interceptor,
    register_exception_handlers,
)
from .core.exceptions import ClassificationResult, DiagnosticCapable, SelfDescribing

__version__ = "0.1.0"

__all__ = [
    "ClassificationResult",
    "Classifier",
    "ClassifierRegistry",
    "DiagnosticCapable",
    "Environment",
    "ErrorInterceptor",
    "ErrorInterceptorMiddleware",
    "RegistryFrozenError",
    "SelfDescribing",
    "default_classifiers",
    "make_interceptor",
    "register_exception_handlers",
]
