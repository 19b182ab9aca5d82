"""Service for turning documentation comment text into token streams."""

import logging
import re
from typing import Any, List, Optional

from doctoken.application.interfaces.ilink_resolver import ILinkResolver
from doctoken.config import Settings
from doctoken.domain.models.comment import Comment, LinkInfo, Token
from doctoken.infrastructure.parsing.inline_tag import InlineTag
from doctoken.infrastructure.parsing.inline_tag_scanner import InlineTagScanner

SUMMARY_PATTERN = re.compile(r"(.*?\.)(?=\s|$)", re.DOTALL)


def summarize(text: Optional[str]) -> str:
    """Extract the first sentence of a comment.

    The summary runs up to and including the first period followed by
    whitespace or the end of the text. Abbreviations such as "e.g." end the
    sentence early.

    Args:
        text: Comment text

    Returns:
        The first sentence, or the whole text if no sentence end is found
    """
    if not text:
        return ""
    match = SUMMARY_PATTERN.match(text)
    if match:
        return match.group(1)
    return text


class CommentParser:
    """
    A service that converts documentation comment text into Comments.

    Recognizes the ``code``, ``link``, ``linkplain`` and ``literal`` inline
    tags. Other tags keep their body as plain text.
    """

    def __init__(self, resolver: ILinkResolver, settings: Optional[Settings] = None):
        """Initialize the parser.

        Args:
            resolver: Resolver used for ``{@link}`` targets
            settings: Settings; defaults to built-in values without reading .env
        """
        self.resolver = resolver
        self.settings = settings or Settings(_env_file=None)
        self.logger = logging.getLogger(__name__)

    def parse_comment(self, text: Optional[str]) -> Comment:
        """Tokenize comment text.

        Args:
            text: Comment text, possibly empty or None

        Returns:
            The tokens of the comment in source order
        """
        tokens: List[Token] = []
        for segment in InlineTagScanner.scan(text):
            if isinstance(segment, InlineTag):
                token = self._tag_to_token(segment)
                if token is not None:
                    tokens.append(token)
            elif segment:
                tokens.append(Token(text=segment))
        return Comment(tokens)

    def get_summary(self, text: Optional[str]) -> Comment:
        """Tokenize the first sentence of the comment text."""
        return self.parse_comment(summarize(text))

    def get_block_description(self, jsdoc: Any) -> Comment:
        """Tokenize the block comment of a JSDoc object, if there is one."""
        if jsdoc is None:
            return Comment.empty()
        return self.parse_comment(getattr(jsdoc, "block_comment", None))

    def get_fileoverview(self, jsdoc: Any) -> Comment:
        """Tokenize the file overview of a JSDoc object, if there is one."""
        if jsdoc is None:
            return Comment.empty()
        return self.parse_comment(getattr(jsdoc, "fileoverview", None))

    def _tag_to_token(self, tag: InlineTag) -> Optional[Token]:
        if tag.name == "code":
            return Token(text=tag.body, is_code=True)

        if tag.name in ("link", "linkplain"):
            info = LinkInfo.from_text(tag.body)
            if not info.display_text:
                return None
            href = self.resolver.resolve(info.target)
            if href is None:
                self.logger.debug(f"Unresolved link target: {info.target}")
            return Token(
                text=info.display_text,
                is_code=tag.name == "link",
                href=href,
                unresolved_link=href is None,
            )

        if tag.name == "literal":
            return Token(text=tag.body, is_literal=True)

        if self.settings.WARN_UNKNOWN_TAGLETS:
            self.logger.warning(f"Unknown inline tag: {{@{tag.name}}}")
        return Token(text=tag.body) if tag.body else None


def tokenize(
    text: Optional[str], resolver: ILinkResolver, settings: Optional[Settings] = None
) -> Comment:
    """Tokenize comment text with a one-off CommentParser."""
    return CommentParser(resolver, settings).parse_comment(text)
