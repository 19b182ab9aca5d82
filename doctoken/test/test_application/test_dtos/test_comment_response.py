import pytest
from pydantic import ValidationError

from doctoken.application.dto.comment import CommentResponse, TokenResponse
from doctoken.domain.models import Comment, Token


def test_token_response_from_token():
    token = Token(text="Foo", is_code=True, href="Foo.html")
    response = TokenResponse.from_token(token)
    assert response.text == "Foo"
    assert response.is_code
    assert not response.is_literal
    assert response.href == "Foo.html"
    assert not response.unresolved_link


def test_token_response_missing_text():
    with pytest.raises(ValidationError) as exc:
        TokenResponse(is_code=True)  # type: ignore
    assert "text" in str(exc.value)


def test_comment_response_round_trip():
    comment = Comment(
        [
            Token(text="See "),
            Token(text="pkg.Bar", is_code=True, unresolved_link=True),
            Token(text="<b>", is_literal=True),
        ]
    )
    response = CommentResponse.from_comment(comment)
    assert len(response.tokens) == 3
    assert response.to_comment() == comment


def test_comment_response_dump_excludes_missing_href():
    response = CommentResponse.from_comment(Comment([Token(text="plain")]))
    dumped = response.model_dump(exclude_none=True)
    assert dumped == {
        "tokens": [
            {
                "text": "plain",
                "is_code": False,
                "is_literal": False,
                "unresolved_link": False,
            }
        ]
    }


def test_comment_response_empty():
    assert CommentResponse().tokens == []
    assert CommentResponse().to_comment() == Comment.empty()
