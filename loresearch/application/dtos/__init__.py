"""Application DTOs: plain data passed between use cases and the API layer."""

from loresearch.application.dtos.search import NO_MATCH, Reduction, SearchResult

__all__ = [
    "NO_MATCH",
    "Reduction",
    "SearchResult",
]
