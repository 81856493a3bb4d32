"""Application services: matcher, highlighter, tree reducer."""

from loresearch.application.services.highlighter import (
    Highlighter,
    highlight,
    strip_markers,
)
from loresearch.application.services.matcher import ExactMatcher, find_spans
from loresearch.application.services.tree_reducer import TreeReducer

__all__ = [
    "ExactMatcher",
    "Highlighter",
    "TreeReducer",
    "find_spans",
    "highlight",
    "strip_markers",
]
