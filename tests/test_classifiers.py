"""Tests for the bundled classifiers."""

from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError, NoResultFound

from api_error_middleware.core.classifiers import ExceptionTypeClassifier, RequestValidationClassifier
from api_error_middleware.core.classifiers.database import (
    IntegrityErrorClassifier,
    ModelNotFoundClassifier,
)
from api_error_middleware.core.exceptions import ClassificationResult


def test_exception_type_classifier_uses_description_by_default() -> None:
    classifier = ExceptionTypeClassifier(PermissionError, status=403)

    result = classifier.convert(PermissionError("read-only"), None)

    assert result == ClassificationResult(message="read-only", status=403)


def test_exception_type_classifier_matches_subclasses_and_tuples() -> None:
    classifier = ExceptionTypeClassifier((KeyError, TimeoutError), status=404, message="missing")

    assert classifier.convert(KeyError("id"), None).message == "missing"
    assert classifier.convert(TimeoutError(), None).status == 404
    assert classifier.convert(ValueError(), None) is None


def test_request_validation_classifier() -> None:
    classifier = RequestValidationClassifier()

    result = classifier.convert(RequestValidationError([]), None)

    assert result == ClassificationResult(message="Request validation failed", status=422)
    assert classifier.convert(ValueError(), None) is None


def test_model_not_found_classifier() -> None:
    classifier = ModelNotFoundClassifier()

    assert classifier.convert(NoResultFound("no row"), None) == ClassificationResult(
        message="Not found", status=404
    )
    assert classifier.convert(LookupError(), None) is None


def test_integrity_error_classifier() -> None:
    classifier = IntegrityErrorClassifier()
    exc = IntegrityError("INSERT INTO users", {}, Exception("duplicate key"))

    assert classifier.convert(exc, None) == ClassificationResult(
        message="Database constraint violation", status=409
    )
    assert classifier.convert(NoResultFound(), None) is None
