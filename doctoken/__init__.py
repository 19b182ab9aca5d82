"""
doctoken: documentation comment tokenizer and type expression formatter for JavaScript documentation generators.
"""

from doctoken.application.interfaces.ilink_resolver import ILinkResolver
from doctoken.application.services.comment_parser import (
    CommentParser,
    summarize,
    tokenize,
)
from doctoken.application.services.type_formatter import (
    TypeExpressionFormatter,
    format_declared_type,
    format_type,
)
from doctoken.domain.models import Comment, LinkInfo, Token
from doctoken.infrastructure.linking.registry_link_resolver import (
    RegistryLinkResolver,
)
from doctoken.config import Settings, get_settings

__version__ = "0.1.0"

__all__ = [
    "Comment",
    "CommentParser",
    "ILinkResolver",
    "LinkInfo",
    "RegistryLinkResolver",
    "Settings",
    "Token",
    "TypeExpressionFormatter",
    "format_declared_type",
    "format_type",
    "get_settings",
    "summarize",
    "tokenize",
]
