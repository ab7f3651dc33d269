"""Classifier registry and framework-level classifiers.

SQLAlchemy classifiers live in :mod:`.database` and are imported explicitly.
"""

from .builtin import ExceptionTypeClassifier, RequestValidationClassifier
from .registry import Classifier, ClassifierRegistry, RegistryFrozenError

__all__ = [
    "Classifier",
    "ClassifierRegistry",
    "ExceptionTypeClassifier",
    "RegistryFrozenError",
    "RequestValidationClassifier",
]
