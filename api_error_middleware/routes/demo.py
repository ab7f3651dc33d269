"""Example routes raising every failure shape the interceptor recognises.

Run the application and test:
    curl http://localhost:8000/api/demo/success
    curl http://localhost:8000/api/demo/not-found
    curl -i http://localhost:8000/api/demo/abort-with-headers
    curl http://localhost:8000/api/demo/debuggable
    # restart with ENV=prod and repeat: the diagnostic is withheld
"""

from fastapi import APIRouter
from sqlalchemy.exc import NoResultFound

from api_error_middleware.core.exceptions import (
    DebuggableError,
    NotFoundError,
    UnprocessableEntityError,
)

router = APIRouter(prefix="/api/demo", tags=["Demo"])


@router.get("/success")
async def demo_success() -> dict:
    """Successful responses pass through untouched."""
    return {"message": "Success!"}


@router.get("/not-found")
async def demo_not_found() -> dict:
    raise NotFoundError("User not found")


@router.get("/abort-with-headers")
async def demo_abort_with_headers() -> dict:
    raise UnprocessableEntityError("bad input", headers={"X-Detail": "foo"})


@router.get("/debuggable")
async def demo_debuggable() -> dict:
    """500 with the diagnostic outside release, 400 with the public message in release."""
    raise DebuggableError(
        identifier="cacheMiss",
        reason="Redis returned no value for key user:42",
        possible_causes=["Key expired"],
    )


@router.get("/model-not-found")
async def demo_model_not_found() -> dict:
    raise NoResultFound("No row was found when one was required")


@router.get("/unexpected-error")
def demo_unexpected_error() -> dict:
    """Sync handlers are intercepted the same way."""
    raise ValueError("Unexpected error occurred!")
