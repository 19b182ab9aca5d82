"""Inline tag records produced by the inline tag scanner."""

from dataclasses import dataclass


@dataclass(frozen=True)
class InlineTag:
    """A ``{@name body}`` construct found in comment text.

    ``start`` is the offset of the opening brace and ``end`` the offset of
    the closing brace, both within the scanned text.
    """

    name: str
    body: str
    start: int
    end: int
