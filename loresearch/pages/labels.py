"""Display labels for the search page.

Static configuration used only at the presentation boundary; the search
core never looks at labels.
"""

from typing import Literal

RelevanceLabel = Literal["high", "medium"]

# Attribute key -> label shown next to the value. Unknown keys are shown as-is.
FIELD_LABELS: dict[str, str] = {
    "name": "Name",
    "description": "Description",
    "introduce": "Introduction",
    "sentence": "Quotes",
    "content": "Content",
    "tone": "Tone",
    "source": "Source",
}

HIGH_RELEVANCE_THRESHOLD = 0.8
MEDIUM_RELEVANCE_THRESHOLD = 0.5

RELEVANCE_LABEL_TEXT: dict[str, str] = {
    "high": "Highly relevant",
    "medium": "Relevant",
}


def relevance_label(relevance: float | None) -> RelevanceLabel | None:
    """Map a relevance score to a badge, or None when no badge applies."""
    if relevance is None:
        return None
    if relevance >= HIGH_RELEVANCE_THRESHOLD:
        return "high"
    if relevance >= MEDIUM_RELEVANCE_THRESHOLD:
        return "medium"
    return None
