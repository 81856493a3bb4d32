"""DTOs for search results (no dependency on transport)."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Reduction:
    """Outcome of reducing one attribute against a query.

    `value` is None when nothing under the attribute matched; otherwise it
    is the highlighted string or the pruned mapping.
    """

    value: str | Mapping[str, Any] | None
    match_count: int = 0

    @property
    def matched(self) -> bool:
        return self.value is not None


# Shared instance for the non-matching case
NO_MATCH = Reduction(value=None, match_count=0)


@dataclass(frozen=True)
class SearchResult:
    """Single search hit: one entity with its pruned, highlighted attributes."""

    entity: str
    info: Mapping[str, Any]
    match_count: int  # matched leaves, not spans
    relevance: float | None = None  # only set when a relevance scorer is configured
