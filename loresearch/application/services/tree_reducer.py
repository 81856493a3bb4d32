"""Reduction of an entity's attribute tree to its matching branches.

Walks nested attributes, runs the matcher on every string leaf, and
rebuilds only the parts of the tree that contain a match. Leaf strings in
the output carry highlight markers; mappings keep the input key order.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from loresearch.application.dtos.search import NO_MATCH, Reduction
from loresearch.application.interfaces.services import IHighlighter, IMatcher
from loresearch.application.services.highlighter import Highlighter
from loresearch.application.services.matcher import ExactMatcher
from loresearch.domain.entities import classify_attribute
from loresearch.domain.enums import AttributeKind
from loresearch.domain.value_objects import SearchQuery

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 100


class TreeReducer:
    """Prunes an attribute tree to matched leaves and their ancestor keys."""

    def __init__(
        self,
        matcher: IMatcher | None = None,
        highlighter: IHighlighter | None = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        self.matcher = matcher or ExactMatcher()
        self.highlighter = highlighter or Highlighter()
        self.max_depth = max_depth

    def reduce(self, attribute: Any, query: SearchQuery) -> Reduction:
        """Reduce one attribute against query.

        Args:
            attribute: String leaf, nested mapping, or any other loaded value.
            query: Query and options, unchanged for the whole traversal.

        Returns:
            Reduction with the highlighted leaf or pruned mapping and the
            number of matched leaves; NO_MATCH when nothing matched.
        """
        return self._reduce(attribute, query, depth=0)

    def _reduce(self, attribute: Any, query: SearchQuery, depth: int) -> Reduction:
        kind = classify_attribute(attribute)
        if kind is AttributeKind.STRING:
            return self._reduce_leaf(attribute, query)
        if kind is AttributeKind.MAPPING:
            if depth >= self.max_depth:
                logger.warning("Attribute nesting exceeds %s levels; subtree skipped", self.max_depth)
                return NO_MATCH
            return self._reduce_mapping(attribute, query, depth)
        logger.debug("Skipping non-searchable attribute of type %s", type(attribute).__name__)
        return NO_MATCH

    def _reduce_leaf(self, text: str, query: SearchQuery) -> Reduction:
        spans = self.matcher.find_spans(text, query)
        if not spans:
            return NO_MATCH
        return Reduction(value=self.highlighter.highlight(text, spans), match_count=1)

    def _reduce_mapping(
        self, mapping: Mapping[str, Any], query: SearchQuery, depth: int
    ) -> Reduction:
        kept: dict[str, Any] = {}
        total = 0
        for key, child in mapping.items():
            reduced = self._reduce(child, query, depth + 1)
            if reduced.matched:
                kept[key] = reduced.value
                total += reduced.match_count
        if not kept:
            return NO_MATCH
        return Reduction(value=kept, match_count=total)
