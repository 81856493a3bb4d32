"""Presentation pages and display configuration (labels, relevance badges)."""

from loresearch.pages.labels import FIELD_LABELS, RELEVANCE_LABEL_TEXT, relevance_label
from loresearch.pages.root import render_root_page

__all__ = [
    "FIELD_LABELS",
    "RELEVANCE_LABEL_TEXT",
    "relevance_label",
    "render_root_page",
]
