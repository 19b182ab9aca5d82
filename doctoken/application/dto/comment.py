from pydantic import BaseModel
from typing import Optional, List

from doctoken.domain.models.comment import Comment, Token


class TokenResponse(BaseModel):
    text: str
    is_code: bool = False
    is_literal: bool = False
    href: Optional[str] = None
    unresolved_link: bool = False

    @classmethod
    def from_token(cls, token: Token) -> "TokenResponse":
        return cls(
            text=token.text,
            is_code=token.is_code,
            is_literal=token.is_literal,
            href=token.href,
            unresolved_link=token.unresolved_link,
        )

    def to_token(self) -> Token:
        return Token(
            text=self.text,
            is_code=self.is_code,
            is_literal=self.is_literal,
            href=self.href,
            unresolved_link=self.unresolved_link,
        )


class CommentResponse(BaseModel):
    tokens: List[TokenResponse] = []

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentResponse":
        return cls(tokens=[TokenResponse.from_token(token) for token in comment])

    def to_comment(self) -> Comment:
        return Comment(token.to_token() for token in self.tokens)
