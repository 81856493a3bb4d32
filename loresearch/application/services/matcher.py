"""Match detection for a single string value.

Queries are always matched literally. Case-insensitive matching uses
Unicode case folding of the regex engine, so offsets always index the
original string. Whole-word matching anchors the literal with a
word-boundary assertion on both sides (Unicode letters, digits and
underscore are word characters). A query that starts or ends with
punctuation therefore needs a word character on the far side of that edge.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache

from loresearch.domain.value_objects import MatchSpan, SearchQuery

logger = logging.getLogger(__name__)

_PATTERN_CACHE_SIZE = 256


@lru_cache(maxsize=_PATTERN_CACHE_SIZE)
def compile_query(query: str, case_sensitive: bool, whole_words: bool) -> re.Pattern[str]:
    """Compile a literal query into a pattern (cached per query and flags)."""
    body = re.escape(query)
    if whole_words:
        body = rf"\b{body}\b"
    flags = 0 if case_sensitive else re.IGNORECASE
    return re.compile(body, flags)


def find_spans(
    text: str,
    query: str,
    case_sensitive: bool = False,
    whole_words: bool = False,
) -> list[MatchSpan]:
    """Return every non-overlapping occurrence of query in text, left to right.

    Args:
        text: String to search in.
        query: Literal text to look for; blank means no match.
        case_sensitive: Compare exactly when True, case-insensitively otherwise.
        whole_words: Only accept occurrences anchored by word boundaries.

    Returns:
        Spans ordered by start; empty when nothing matched.
    """
    if not query or not query.strip():
        return []
    pattern = compile_query(query, case_sensitive, whole_words)
    return [MatchSpan(m.start(), m.end()) for m in pattern.finditer(text)]


class ExactMatcher:
    """Literal matcher honouring the query's case and whole-word flags (IMatcher).

    Fuzzy matching is not implemented: a query with fuzzy=True is matched
    exactly. A fuzzy strategy would be a separate IMatcher.
    """

    def find_spans(self, text: str, query: SearchQuery) -> list[MatchSpan]:
        return find_spans(
            text,
            query.text,
            case_sensitive=query.case_sensitive,
            whole_words=query.whole_words,
        )
