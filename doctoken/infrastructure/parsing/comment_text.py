"""Helpers for pulling description text out of raw ``/** ... */`` blocks."""

from dataclasses import dataclass
from typing import Any, List, Optional


@dataclass(frozen=True)
class StringPosition:
    """A region of a comment block.

    Lines are 1-based and inclusive; positions are 0-based column offsets.
    The start position points at the character just before the described
    text, usually the space following an annotation such as ``@deprecated``.
    The end position is exclusive.
    """

    start_line: int
    position_on_start_line: int
    end_line: int
    position_on_end_line: int


@dataclass(frozen=True)
class Marker:
    """A block annotation such as ``@deprecated`` and where its text lies."""

    annotation: str
    description: Optional[StringPosition] = None


def left_trim_comment_line(line: str) -> str:
    """Strip leading whitespace up to and including a single ``*``.

    Lines without a leading ``*`` are returned unchanged.
    """
    for index, char in enumerate(line):
        if char == "*":
            return line[index + 1 :]
        if not char.isspace():
            break
    return line


def _strip_comment_end(line: str) -> str:
    end = line.find("*/")
    return line if end == -1 else line[:end]


def extract_comment_string(
    original_comment: str, position: Optional[StringPosition]
) -> str:
    """Extract the text a StringPosition describes from a raw comment.

    Args:
        original_comment: The comment block as written in the source
        position: Region to extract, or None

    Returns:
        The described text with comment-line markers and any closing ``*/``
        removed, or an empty string when there is no position
    """
    if position is None:
        return ""

    lines = original_comment.split("\n")[position.start_line - 1 : position.end_line]
    if not lines:
        return ""

    extracted: List[str] = []
    last = len(lines) - 1
    for i, line in enumerate(lines):
        if i == last:
            line = line[: position.position_on_end_line]
        if i == 0:
            line = line[position.position_on_start_line + 1 :]
        else:
            line = left_trim_comment_line(line)
        extracted.append(_strip_comment_end(line))

    return "\n".join(extracted)


def get_marker_description(jsdoc: Any, annotation: str) -> str:
    """Extract the text following the first marker for an annotation.

    Args:
        jsdoc: JSDoc-like object with ``markers`` and
            ``original_comment_string`` attributes, or None
        annotation: Annotation name without the ``@``, e.g. ``"deprecated"``

    Returns:
        The marker's description, or an empty string if the annotation is absent
    """
    if jsdoc is None:
        return ""
    for marker in getattr(jsdoc, "markers", None) or ():
        if marker.annotation == annotation:
            return extract_comment_string(
                getattr(jsdoc, "original_comment_string", None) or "",
                marker.description,
            )
    return ""
