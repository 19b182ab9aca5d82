from doctoken.infrastructure.parsing.inline_tag import InlineTag
from doctoken.infrastructure.parsing.inline_tag_scanner import (
    InlineTagScanner,
    find_inline_tag_end,
    find_inline_tag_start,
)


def test_scan_empty():
    assert InlineTagScanner.scan("") == [], "Empty content should yield an empty list."
    assert InlineTagScanner.scan(None) == []


def test_scan_plain_text():
    assert InlineTagScanner.scan("no tags here") == ["no tags here"]


def test_scan_single_tag():
    result = InlineTagScanner.scan("see {@link a.B text} now")
    assert result == [
        "see ",
        InlineTag(name="link", body="a.B text", start=4, end=19),
        " now",
    ]


def test_scan_nested_tag_body_is_verbatim():
    result = InlineTagScanner.scan("{@code a{@code b}c}")
    assert result == [InlineTag(name="code", body="a{@code b}c", start=0, end=18)]


def test_scan_unterminated_tag():
    text = "x {@link a {@code b}"
    assert InlineTagScanner.scan(text) == [text]


def test_find_start_requires_word_and_whitespace():
    assert find_inline_tag_start("{@ code}") == -1
    assert find_inline_tag_start("{@code}") == -1
    assert find_inline_tag_start("{@code\tx}") == 0
    assert find_inline_tag_start("ab {@code x}") == 3


def test_find_start_skips_non_tag_markers():
    assert find_inline_tag_start("{@} and {@code x}") == 8


def test_find_start_requires_closing_brace():
    assert find_inline_tag_start("{@code never closed") == -1


def test_find_start_from_offset():
    text = "{@code a} {@code b}"
    assert find_inline_tag_start(text, 1) == 10


def test_find_end_simple():
    assert find_inline_tag_end("{@code abc}", 7) == 10


def test_find_end_nested():
    text = "{@code {a{b}c}d}"
    assert find_inline_tag_end(text, 7) == len(text) - 1


def test_find_end_unterminated_nested():
    assert find_inline_tag_end("{@link a {@code b}", 7) == -1


def test_find_end_escaped_brace_does_not_nest():
    text = "{@code \\{}"
    assert find_inline_tag_end(text, 7) == len(text) - 1


def test_scan_skips_non_tag_markers():
    assert InlineTagScanner.scan("{@} {@code x}") == [
        "{@} ",
        InlineTag(name="code", body="x", start=4, end=12),
    ]
