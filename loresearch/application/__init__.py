"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (store repository).
"""

from loresearch.application.interfaces import (
    IHighlighter,
    IMatcher,
    IRelevanceScorer,
    IStoreRepository,
)
from loresearch.application.services import ExactMatcher, Highlighter, TreeReducer
from loresearch.application.use_cases import SearchService

__all__ = [
    "ExactMatcher",
    "Highlighter",
    "IHighlighter",
    "IMatcher",
    "IRelevanceScorer",
    "IStoreRepository",
    "SearchService",
    "TreeReducer",
]
