"""Ordered chain of pluggable failure classifiers.

Classifiers are consulted in registration order and the first non-empty
result wins, so specific classifiers must be registered ahead of general
ones:

    registry = ClassifierRegistry([
        ModelNotFoundClassifier(),
        ExceptionTypeClassifier(LookupError, status=404),
    ])
    result = registry.classify(exc, request)

A classifier that raises is skipped and logged at WARNING. This is the only
logging on the error path; the interceptor itself emits nothing.
"""

import logging
from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

from api_error_middleware.core.exceptions.result import ClassificationResult

__all__ = ["Classifier", "ClassifierRegistry", "RegistryFrozenError"]

logger = logging.getLogger(__name__)


@runtime_checkable
class Classifier(Protocol):
    """Converts a failure, plus the request it came from, to a result.

    Returns ``None`` when the classifier does not handle this kind of failure.
    """

    def convert(self, failure: Exception, request: Any) -> ClassificationResult | None: ...


class RegistryFrozenError(RuntimeError):
    """Raised when a classifier is registered after the registry was first used."""


class ClassifierRegistry:
    """Read-only after first use; safe to share across concurrent requests."""

    def __init__(self, classifiers: Iterable[Classifier] = ()) -> None:
        self._classifiers: list[Classifier] = []
        self._frozen = False
        for classifier in classifiers:
            self.register(classifier)

    def __len__(self) -> int:
        return len(self._classifiers)

    @property
    def classifiers(self) -> tuple[Classifier, ...]:
        return tuple(self._classifiers)

    def register(self, classifier: Classifier) -> None:
        """Append a classifier to the end of the chain.

        Raises:
            RegistryFrozenError: If ``classify`` has already been called
            TypeError: If the object has no ``convert`` method
        """
        if self._frozen:
            msg = (
                f"Cannot register {type(classifier).__name__}: "
                "the registry is read-only once it has classified a failure"
            )
            raise RegistryFrozenError(msg)
        if not isinstance(classifier, Classifier):
            msg = f"{type(classifier).__name__} does not implement convert(failure, request)"
            raise TypeError(msg)
        self._classifiers.append(classifier)

    def classify(self, failure: Exception, request: Any) -> ClassificationResult | None:
        """Return the first classifier result for ``failure``, or ``None``.

        A classifier that raises, or returns something other than a
        ``ClassificationResult``, counts as no match.
        """
        self._frozen = True

        for classifier in self._classifiers:
            try:
                result = classifier.convert(failure, request)
            except Exception:
                logger.warning(
                    "Classifier %s failed on %s; skipping it",
                    type(classifier).__name__,
                    type(failure).__name__,
                    exc_info=True,
                )
                continue

            if result is None:
                continue
            if not isinstance(result, ClassificationResult):
                logger.warning(
                    "Classifier %s returned %s instead of ClassificationResult; skipping it",
                    type(classifier).__name__,
                    type(result).__name__,
                )
                continue
            return result

        return None
