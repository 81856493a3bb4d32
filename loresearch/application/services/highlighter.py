"""Highlighting of matched spans.

The highlighter never searches on its own: it only wraps the spans the
matcher produced for the same string, so marks always cover exactly what
matched.
"""

from collections.abc import Sequence

from loresearch.domain.value_objects import MatchSpan

DEFAULT_START_MARKER = "<mark>"
DEFAULT_END_MARKER = "</mark>"


def highlight(
    text: str,
    spans: Sequence[MatchSpan],
    start_marker: str = DEFAULT_START_MARKER,
    end_marker: str = DEFAULT_END_MARKER,
) -> str:
    """Wrap each span of text with start_marker/end_marker.

    Args:
        text: Original string the spans were computed on.
        spans: Ordered, non-overlapping spans into text.
        start_marker: Inserted before each span.
        end_marker: Inserted after each span.

    Returns:
        The highlighted string; text itself when spans is empty.

    Raises:
        ValueError: If spans overlap, are out of order, or exceed text.
    """
    if not spans:
        return text
    parts: list[str] = []
    cursor = 0
    for span in spans:
        if span.start < cursor or span.end > len(text):
            raise ValueError(
                f"Span {span.start}:{span.end} is out of order or out of range for text of length {len(text)}"
            )
        parts.append(text[cursor : span.start])
        parts.append(start_marker)
        parts.append(text[span.start : span.end])
        parts.append(end_marker)
        cursor = span.end
    parts.append(text[cursor:])
    return "".join(parts)


def strip_markers(
    text: str,
    start_marker: str = DEFAULT_START_MARKER,
    end_marker: str = DEFAULT_END_MARKER,
) -> str:
    """Remove highlight markers, giving back the original string."""
    return text.replace(start_marker, "").replace(end_marker, "")


class Highlighter:
    """Highlighter bound to configured markers (IHighlighter)."""

    def __init__(
        self,
        start_marker: str = DEFAULT_START_MARKER,
        end_marker: str = DEFAULT_END_MARKER,
    ) -> None:
        if not start_marker or not end_marker:
            raise ValueError("Highlight markers must be non-empty strings")
        self.start_marker = start_marker
        self.end_marker = end_marker

    def highlight(self, text: str, spans: Sequence[MatchSpan]) -> str:
        return highlight(text, spans, self.start_marker, self.end_marker)

    def strip(self, text: str) -> str:
        return strip_markers(text, self.start_marker, self.end_marker)
