"""Tests for TreeReducer (leaf matching, pruning, key order, malformed values)."""

import copy
from typing import Any

from loresearch.application.dtos.search import NO_MATCH, Reduction
from loresearch.application.services.highlighter import Highlighter
from loresearch.application.services.matcher import ExactMatcher
from loresearch.application.services.tree_reducer import TreeReducer
from loresearch.domain.value_objects import MatchSpan, SearchQuery


def _reduce(attribute: Any, text: str, **flags: bool) -> Reduction:
    return TreeReducer().reduce(attribute, SearchQuery(text, **flags))


class TestLeaf:
    """String leaves: highlighted on match, absent otherwise."""

    def test_match(self) -> None:
        assert _reduce("Hello world", "hello") == Reduction("<mark>Hello</mark> world", 1)

    def test_several_spans_count_once(self) -> None:
        r = _reduce("cat and cat", "cat")
        assert r.value == "<mark>cat</mark> and <mark>cat</mark>"
        assert r.match_count == 1

    def test_no_match(self) -> None:
        assert _reduce("Hello world", "cat") == NO_MATCH


class TestMapping:
    """Mappings keep only matched branches, in input order."""

    def test_nested_pruning(self) -> None:
        entity = {"sentence": {"content": "Hello world", "tone": "calm"}}
        r = _reduce(entity, "hello")
        assert r.value == {"sentence": {"content": "<mark>Hello</mark> world"}}
        assert r.match_count == 1

    def test_key_order_preserved(self) -> None:
        entity = {"z": "cat", "a": "dog", "m": "a cat", "b": "cat!"}
        r = _reduce(entity, "cat")
        assert list(r.value) == ["z", "m", "b"]
        assert r.match_count == 3

    def test_count_is_matched_leaves(self) -> None:
        entity = {"a": "cat", "b": {"c": "cat", "d": {"e": "cat cat"}}, "f": "dog"}
        r = _reduce(entity, "cat")
        assert r.match_count == 3
        assert r.value == {
            "a": "<mark>cat</mark>",
            "b": {"c": "<mark>cat</mark>", "d": {"e": "<mark>cat</mark> <mark>cat</mark>"}},
        }

    def test_no_matching_leaves(self) -> None:
        assert _reduce({"a": "dog", "b": {"c": "bird"}}, "cat") == NO_MATCH

    def test_empty_mapping(self) -> None:
        assert _reduce({}, "cat") == NO_MATCH

    def test_empty_child_mapping_dropped(self) -> None:
        r = _reduce({"empty": {}, "name": "cat"}, "cat")
        assert r.value == {"name": "<mark>cat</mark>"}

    def test_input_not_modified(self) -> None:
        entity = {"sentence": {"content": "Hello world", "tone": "calm"}}
        before = copy.deepcopy(entity)
        _reduce(entity, "hello")
        assert entity == before


class TestMalformedValues:
    """Values that are neither strings nor mappings never match and never raise."""

    def test_skipped_alongside_matches(self) -> None:
        entity = {
            "age": 42,
            "alive": True,
            "nickname": None,
            "tags": ["cat"],
            "bio": "cat lover",
        }
        r = _reduce(entity, "cat")
        assert r.value == {"bio": "<mark>cat</mark> lover"}
        assert r.match_count == 1

    def test_number_searched_as_query_text(self) -> None:
        assert _reduce({"age": 42}, "42") == NO_MATCH

    def test_top_level_non_attribute(self) -> None:
        assert _reduce(42, "42") == NO_MATCH
        assert _reduce(None, "x") == NO_MATCH


class TestDepthLimit:
    """Subtrees nested deeper than max_depth are skipped."""

    def test_deep_subtree_skipped(self) -> None:
        reducer = TreeReducer(max_depth=2)
        entity = {"a": {"b": {"c": "cat"}}, "d": "cat"}
        r = reducer.reduce(entity, SearchQuery("cat"))
        assert r.value == {"d": "<mark>cat</mark>"}

    def test_within_limit(self) -> None:
        reducer = TreeReducer(max_depth=3)
        r = reducer.reduce({"a": {"b": {"c": "cat"}}}, SearchQuery("cat"))
        assert r.match_count == 1


class TestCollaborators:
    """The highlighter receives exactly the matcher's spans."""

    def test_highlighter_gets_matcher_spans(self) -> None:
        seen: list[tuple[str, list[MatchSpan]]] = []

        class RecordingHighlighter(Highlighter):
            def highlight(self, text: str, spans: list[MatchSpan]) -> str:
                seen.append((text, list(spans)))
                return super().highlight(text, spans)

        reducer = TreeReducer(matcher=ExactMatcher(), highlighter=RecordingHighlighter("<", ">"))
        r = reducer.reduce({"a": "a cat", "b": "dog"}, SearchQuery("cat"))
        assert seen == [("a cat", [MatchSpan(2, 5)])]
        assert r.value == {"a": "a <cat>"}
