"""SQLAlchemy classifiers.

Optional unit: the interceptor core never imports this module, so services
without a database can leave these classifiers out of their registry.
"""

from typing import Any

from fastapi import status
from sqlalchemy.exc import IntegrityError, NoResultFound

from api_error_middleware.core.exceptions.result import ClassificationResult

__all__ = ["IntegrityErrorClassifier", "ModelNotFoundClassifier"]


class ModelNotFoundClassifier:
    """``Result.one()`` / ``scalar_one()`` found no row (404)."""

    message = "Not found"

    def convert(self, failure: Exception, request: Any) -> ClassificationResult | None:
        if not isinstance(failure, NoResultFound):
            return None
        return ClassificationResult(message=self.message, status=status.HTTP_404_NOT_FOUND)


class IntegrityErrorClassifier:
    """Database constraint violations (409).

    The driver message names tables and constraints, so it is never echoed.
    """

    message = "Database constraint violation"

    def convert(self, failure: Exception, request: Any) -> ClassificationResult | None:
        if not isinstance(failure, IntegrityError):
            return None
        return ClassificationResult(message=self.message, status=status.HTTP_409_CONFLICT)
