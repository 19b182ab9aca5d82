"""Cursor-based scanner for ``{@tag ...}`` inline tags in comment text."""

import logging
from typing import List, Optional, Tuple, Union

from .inline_tag import InlineTag

logger = logging.getLogger(__name__)

# A segment is either a run of plain text or an inline tag.
Segment = Union[str, InlineTag]


def _is_word_char(char: str) -> bool:
    return char.isalnum() or char == "_"


def _match_tag_marker(text: str, index: int) -> Optional[Tuple[str, int]]:
    """Match ``{@name<whitespace>`` at ``index``.

    Returns:
        The tag name and the offset where the tag body begins, or None
    """
    if not text.startswith("{@", index):
        return None
    cursor = index + 2
    while cursor < len(text) and _is_word_char(text[cursor]):
        cursor += 1
    if cursor == index + 2 or cursor >= len(text) or not text[cursor].isspace():
        return None
    # The body starts after exactly one whitespace character.
    return text[index + 2 : cursor], cursor + 1


def _find_inline_tag(text: str, start: int) -> Optional[Tuple[int, str, int]]:
    """Find the next inline tag marker at or after ``start``.

    Returns:
        The marker offset, the tag name and the body offset, or None
    """
    index = text.find("{@", start)
    while index != -1:
        marker = _match_tag_marker(text, index)
        if marker is not None:
            if text.find("}", index) == -1:
                return None
            name, body_start = marker
            return index, name, body_start
        index = text.find("{@", index + 1)
    return None


def find_inline_tag_start(text: str, start: int = 0) -> int:
    """Find the offset of the next inline tag marker at or after ``start``.

    A marker is only reported if a closing brace exists somewhere after it.

    Returns:
        Offset of the opening brace, or -1
    """
    found = _find_inline_tag(text, start)
    return -1 if found is None else found[0]


def find_inline_tag_end(text: str, start: int) -> int:
    """Find the brace closing the tag whose body begins at ``start``.

    Braces are balanced: each unescaped ``{`` must be closed before the
    tag's own ``}`` is accepted. A ``{`` preceded by a backslash does not
    open a nesting level.

    Returns:
        Offset of the closing brace, or -1 if the tag is unterminated
    """
    depth = 0
    cursor = start
    while cursor < len(text):
        char = text[cursor]
        if char == "{" and not (cursor > 0 and text[cursor - 1] == "\\"):
            depth += 1
        elif char == "}":
            if depth == 0:
                return cursor
            depth -= 1
        cursor += 1
    return -1


class InlineTagScanner:
    """
    Splits comment text into plain-text runs and inline tags.
    """

    @classmethod
    def scan(cls, text: Optional[str]) -> List[Segment]:
        """
        Scan text left to right, returning its segments in order.

        An unterminated tag turns the rest of the text, starting at the end of
        the previous segment, into a single plain-text segment.
        """
        segments: List[Segment] = []
        if not text:
            return segments

        start = 0
        while start < len(text):
            found = _find_inline_tag(text, start)
            if found is None:
                segments.append(text[start:])
                break
            tag_start, name, body_start = found

            tag_end = find_inline_tag_end(text, body_start)
            if tag_end == -1:
                logger.debug(
                    f"Unterminated inline tag {{@{name}}} at offset {tag_start}"
                )
                segments.append(text[start:])
                break

            if tag_start > start:
                segments.append(text[start:tag_start])
            segments.append(
                InlineTag(
                    name=name,
                    body=text[body_start:tag_end],
                    start=tag_start,
                    end=tag_end,
                )
            )
            start = tag_end + 1

        return segments
