"""Pydantic request/response schemas for the API."""

from loresearch.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)
from loresearch.schemas.search import (
    ErrorResponse,
    SearchResponse,
    SearchResultResponse,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "SearchResponse",
    "SearchResultResponse",
]
