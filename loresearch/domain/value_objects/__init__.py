"""Domain value objects and shared value types."""

from loresearch.domain.value_objects.core import MatchSpan, SearchQuery

__all__ = [
    "MatchSpan",
    "SearchQuery",
]
