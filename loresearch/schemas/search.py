"""Search API schemas.

Field names are camelCase on the wire (matchCount, relevanceLabel).
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SearchResultResponse(_CamelModel):
    """One matching entity with its pruned, highlighted attributes."""

    entity: str = Field(..., description="Entity name (store key)")
    info: dict[str, Any] = Field(
        ..., description="Matched attributes only; matches wrapped in highlight markers"
    )
    match_count: int = Field(..., ge=1, description="Number of matched leaf values")
    relevance: float | None = Field(
        default=None, description="Externally supplied score; null when not scored"
    )
    relevance_label: Literal["high", "medium"] | None = Field(
        default=None, description="Badge derived from relevance"
    )


class SearchResponse(_CamelModel):
    """Successful search (results may be empty)."""

    success: Literal[True] = True
    results: list[SearchResultResponse]
    total: int = Field(..., ge=0)


class ErrorResponse(_CamelModel):
    """Failure body shared by all error responses."""

    success: Literal[False] = False
    error: str
    error_code: str
    details: dict[str, Any] = Field(default_factory=dict)
