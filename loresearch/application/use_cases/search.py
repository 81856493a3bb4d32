"""Keyword search use case over a store snapshot. Delegates per entity to TreeReducer."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import TYPE_CHECKING

from loresearch.application.dtos.search import SearchResult
from loresearch.application.services.tree_reducer import TreeReducer

if TYPE_CHECKING:
    from loresearch.application.interfaces.services import IRelevanceScorer
    from loresearch.domain.entities import Store
    from loresearch.domain.value_objects import SearchQuery

logger = logging.getLogger(__name__)


class SearchService:
    """Search every entity of a store and collect those with at least one match.

    The store is read, never modified; the caller passes one snapshot and
    the whole traversal sees only that snapshot.
    """

    def __init__(
        self,
        tree_reducer: TreeReducer | None = None,
        relevance_scorer: "IRelevanceScorer | None" = None,
    ) -> None:
        self.tree_reducer = tree_reducer or TreeReducer()
        self.relevance_scorer = relevance_scorer

    def search(self, store: "Store", query: "SearchQuery") -> list[SearchResult]:
        """Return one result per matching entity, in store order.

        A blank query returns [] without touching the store. Entities whose
        root is not a mapping are skipped.
        """
        if query.is_blank:
            return []
        if query.fuzzy:
            logger.debug("Fuzzy matching is not supported; using exact matching")

        results: list[SearchResult] = []
        for entity, root in store.items():
            if not isinstance(root, Mapping):
                logger.warning("Entity %r has no attribute mapping; skipped", entity)
                continue
            reduction = self.tree_reducer.reduce(root, query)
            if reduction.match_count > 0:
                results.append(
                    SearchResult(
                        entity=entity,
                        info=reduction.value,
                        match_count=reduction.match_count,
                    )
                )

        if self.relevance_scorer is not None:
            results = self._apply_relevance(results, query)
        logger.debug(
            "Search %r matched %d of %d entities", query.text, len(results), len(store)
        )
        return results

    def _apply_relevance(
        self, results: list[SearchResult], query: "SearchQuery"
    ) -> list[SearchResult]:
        """Attach scorer output; when requested, stable-sort by score (unscored last)."""
        scored = [
            replace(r, relevance=self.relevance_scorer.score(r, query)) for r in results
        ]
        if not query.sort_by_relevance:
            return scored
        return sorted(
            scored,
            key=lambda r: (r.relevance is None, -(r.relevance or 0.0)),
        )
