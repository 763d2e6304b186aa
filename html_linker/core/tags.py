"""
Raw-text tag removal and insertion.

Tags are found by literal, case-insensitive substring search; no HTML is
parsed. The first start marker is always paired with the first end marker in
the document, so nested tags of one kind, or the end marker appearing as
literal text, are not handled.
"""

import re
from dataclasses import dataclass

from html_linker.exceptions import UnbalancedTagError

HEAD_CLOSE = "</head>"


@dataclass(frozen=True)
class TagSpec:
    """Marker pair identifying a removable tag kind."""

    start_marker: str
    end_marker: str


SCRIPT_TAG = TagSpec("<script", "</script>")
STYLESHEET_TAG = TagSpec('<link rel="stylesheet"', 'css">')


def _find_first(content: str, marker: str) -> int:
    match = re.search(re.escape(marker), content, re.IGNORECASE)
    return match.start() if match else -1


def strip_tags(content: str, start_marker: str, end_marker: str) -> str:
    """
    Remove every ``start_marker ... end_marker`` span from ``content``.

    Each pass deletes from the first start marker through the end of the
    first end marker, until no start marker is left.

    Raises:
        UnbalancedTagError: a start marker remains but no end marker follows it
    """
    if not start_marker or not end_marker:
        raise ValueError("Markers must be non-empty strings")

    updated = content
    start = _find_first(updated, start_marker)
    while start != -1:
        end = _find_first(updated, end_marker)
        if end < start:
            raise UnbalancedTagError(start_marker, end_marker)
        updated = updated[:start] + updated[end + len(end_marker):]
        start = _find_first(updated, start_marker)
    return updated


def inject_tag(content: str, tag: str, marker: str = HEAD_CLOSE) -> str:
    """Insert ``tag`` right before the first ``marker``; append it if there is none."""
    index = content.find(marker)
    if index == -1:
        return content + tag
    return content[:index] + tag + content[index:]


def script_tag(src: str) -> str:
    return f'<script src="{src}"></script>'


def stylesheet_tag(href: str) -> str:
    return f'<link rel="stylesheet" href="{href}">'
