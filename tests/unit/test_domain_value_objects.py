"""Tests for domain value objects (SearchQuery, MatchSpan)."""

import dataclasses

import pytest

from loresearch.domain.value_objects.core import MatchSpan, SearchQuery


class TestSearchQuery:
    """SearchQuery: stripped text, flags default to False, immutable."""

    def test_defaults(self) -> None:
        q = SearchQuery("cat")
        assert q.text == "cat"
        assert q.case_sensitive is False
        assert q.whole_words is False
        assert q.fuzzy is False
        assert q.sort_by_relevance is False

    def test_text_is_stripped(self) -> None:
        assert SearchQuery("  cat \n").text == "cat"

    def test_blank(self) -> None:
        assert SearchQuery("").is_blank
        assert SearchQuery("   ").is_blank
        assert not SearchQuery(" x ").is_blank

    def test_immutable(self) -> None:
        q = SearchQuery("cat")
        with pytest.raises(dataclasses.FrozenInstanceError):
            q.text = "dog"  # type: ignore[misc]


class TestMatchSpan:
    """MatchSpan: half-open, 0 <= start < end."""

    def test_valid(self) -> None:
        s = MatchSpan(2, 5)
        assert (s.start, s.end) == (2, 5)
        assert len(s) == 3

    def test_negative_start_rejected(self) -> None:
        with pytest.raises(ValueError, match="negative"):
            MatchSpan(-1, 2)

    @pytest.mark.parametrize("start, end", [(3, 3), (4, 2)])
    def test_empty_or_reversed_rejected(self, start: int, end: int) -> None:
        with pytest.raises(ValueError, match="greater than start"):
            MatchSpan(start, end)

    def test_equality_by_value(self) -> None:
        assert MatchSpan(0, 1) == MatchSpan(0, 1)
        assert MatchSpan(0, 1) != MatchSpan(0, 2)
