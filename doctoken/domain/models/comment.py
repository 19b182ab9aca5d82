"""
Domain comment model.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple


@dataclass(frozen=True)
class Token:
    """An atomic unit of formatted comment output.

    A token is plain text unless exactly one of ``is_code`` or ``is_literal``
    is set. ``href`` may accompany any styling.
    """

    text: str
    is_code: bool = False
    is_literal: bool = False
    href: Optional[str] = None
    unresolved_link: bool = False

    def __post_init__(self):
        if self.is_code and self.is_literal:
            raise ValueError("A token cannot be both code and literal")

    @property
    def is_plain(self) -> bool:
        return not self.is_code and not self.is_literal

    @property
    def is_link(self) -> bool:
        return self.href is not None


class Comment:
    """An immutable, ordered sequence of tokens."""

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Optional[Iterable[Token]] = None):
        self._tokens: Tuple[Token, ...] = tuple(tokens) if tokens else ()

    @classmethod
    def empty(cls) -> "Comment":
        return cls()

    @property
    def tokens(self) -> Tuple[Token, ...]:
        return self._tokens

    @property
    def text(self) -> str:
        """Concatenated text of every token, ignoring styling."""
        return "".join(token.text for token in self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __getitem__(self, index: int) -> Token:
        return self._tokens[index]

    def __bool__(self) -> bool:
        return bool(self._tokens)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Comment):
            return NotImplemented
        return self._tokens == other._tokens

    def __hash__(self) -> int:
        return hash(self._tokens)

    def __repr__(self) -> str:
        return f"Comment({list(self._tokens)!r})"


_WHITESPACE = re.compile(r"\s")


@dataclass(frozen=True)
class LinkInfo:
    """The target and display text of a ``{@link}`` body."""

    target: str
    display_text: str

    @classmethod
    def from_text(cls, text: str) -> "LinkInfo":
        """Split a link body on its first whitespace character.

        Args:
            text: Body of the link tag, e.g. ``"goog.Foo the foo class"``

        Returns:
            LinkInfo whose target is the text before the whitespace and whose
            display text is the remainder. Without whitespace, or with nothing
            after it, the display text is the target itself.
        """
        match = _WHITESPACE.search(text)
        if match is None:
            return cls(target=text, display_text=text)
        target = text[: match.start()]
        display_text = text[match.end() :]
        return cls(target=target, display_text=display_text or target)
