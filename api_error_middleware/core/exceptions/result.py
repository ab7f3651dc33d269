"""Structured outcome of classifying a failure."""

from pydantic import BaseModel, ConfigDict, Field


class ClassificationResult(BaseModel):
    """Message, status and headers used to build an error response."""

    model_config = ConfigDict(frozen=True)

    message: str = Field(description="Value of the 'error' key in the response body")
    status: int | None = Field(default=None, description="HTTP status, 400 when omitted")
    headers: dict[str, str] | None = Field(default=None, description="Extra response headers")
