"""Service interfaces (ports) for the application layer.

Protocols define contracts for the pluggable parts of a search (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from loresearch.application.dtos.search import SearchResult
    from loresearch.domain.value_objects import MatchSpan, SearchQuery


# Matcher interface
class IMatcher(Protocol):
    """Protocol for computing match spans of a query inside one string."""

    def find_spans(self, text: str, query: SearchQuery) -> list[MatchSpan]:
        """Return ordered, non-overlapping spans into the original text."""


# Highlighter interface
class IHighlighter(Protocol):
    """Protocol for wrapping already-computed spans with markers."""

    def highlight(self, text: str, spans: list[MatchSpan]) -> str:
        """Return text with a marker pair around each span."""


# Relevance scorer interface
class IRelevanceScorer(Protocol):
    """Protocol for an externally supplied relevance score.

    No scorer ships with loresearch; without one, results carry no
    relevance and sorting by relevance keeps store order.
    """

    def score(self, result: SearchResult, query: SearchQuery) -> float | None:
        """Return a score in [0, 1], or None when the result cannot be scored."""
