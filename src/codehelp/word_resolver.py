"""Identifier-under-cursor resolution for a single line of text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

DEFAULT_COMMENT_MARKER = "--"

# Apostrophe is accepted only to the right of the cursor, so suffixed
# names such as foo' resolve while a leading quote never starts a word.
_START_CHAR = re.compile(r"[0-9a-zA-Z_]")
_END_CHAR = re.compile(r"[0-9a-zA-Z_']")


@dataclass(frozen=True)
class IdentifierSpan:
    """Half-open character range ``[start, end)`` on ``line``."""

    line: int
    start: int
    end: int

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


@dataclass(frozen=True)
class WordAtCursor:
    identifier: Optional[str] = None
    span: Optional[IdentifierSpan] = None

    @property
    def found(self) -> bool:
        return self.identifier is not None


def strip_line(line_text: str, comment_marker: str = DEFAULT_COMMENT_MARKER) -> str:
    """Drop a trailing line comment, then trailing whitespace."""
    if comment_marker:
        index = line_text.find(comment_marker)
        if index >= 0:
            line_text = line_text[:index]
    return line_text.rstrip()


def locate_identifier(
    line_text: str,
    cursor_offset: int,
    line: int = 0,
    comment_marker: str = DEFAULT_COMMENT_MARKER,
) -> WordAtCursor:
    """Find the identifier touching ``cursor_offset``.

    Args:
        line_text: Full text of the line
        cursor_offset: Cursor column; 0 is before the first character
        line: Line number recorded on the returned span
        comment_marker: Line comment introducer, stripped before matching

    Returns:
        WordAtCursor with the identifier and its span. The identifier is
        empty (zero-length span) when the cursor touches no word, and both
        fields are None when the cursor lies past the end of the stripped
        line.
    """
    text = strip_line(line_text, comment_marker)
    if cursor_offset < 0 or cursor_offset > len(text):
        return WordAtCursor()

    start = cursor_offset
    while start > 0 and _START_CHAR.match(text[start - 1]):
        start -= 1

    end = cursor_offset
    while end < len(text) and _END_CHAR.match(text[end]):
        end += 1

    return WordAtCursor(
        identifier=text[start:end],
        span=IdentifierSpan(line=line, start=start, end=end),
    )
