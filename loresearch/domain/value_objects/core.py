"""Domain value objects for loresearch.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MatchSpan:
    """Half-open offset range [start, end) of one match inside a string.

    Offsets index the original (unhighlighted) string in code points.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Enforce 0 <= start < end.

        Raises:
            ValueError: If start is negative or the span is empty or reversed.
        """
        if self.start < 0:
            raise ValueError("Match span start must not be negative")
        if self.end <= self.start:
            raise ValueError("Match span end must be greater than start")

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class SearchQuery:
    """Query text plus matching options, passed unchanged through a search.

    Text is stripped on construction. A blank query is valid and simply
    matches nothing. `fuzzy` is carried for callers but exact matching is
    always used; `sort_by_relevance` only has an effect when a relevance
    scorer is configured.
    """

    text: str
    case_sensitive: bool = False
    whole_words: bool = False
    fuzzy: bool = False
    sort_by_relevance: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "text", (self.text or "").strip())

    @property
    def is_blank(self) -> bool:
        """True when there is nothing to search for."""
        return not self.text
