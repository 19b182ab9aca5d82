from types import SimpleNamespace

from doctoken.infrastructure.parsing.comment_text import (
    Marker,
    StringPosition,
    extract_comment_string,
    get_marker_description,
    left_trim_comment_line,
)

COMMENT = """/**
 * Does things.
 * @deprecated Use the other thing
 *     instead, it is faster.
 * @param {string} x The value.
 */"""


def test_left_trim_comment_line():
    assert left_trim_comment_line("   * text") == " text"
    assert left_trim_comment_line("* text") == " text"
    assert left_trim_comment_line("   text * more") == "   text * more"
    assert left_trim_comment_line("") == ""


def test_extract_without_position():
    assert extract_comment_string(COMMENT, None) == ""


def test_extract_single_line():
    # " * @deprecated Use ..." -> the annotation ends at column 14.
    position = StringPosition(
        start_line=3, position_on_start_line=14, end_line=3, position_on_end_line=34
    )
    assert extract_comment_string(COMMENT, position) == "Use the other thing"


def test_extract_multiple_lines():
    position = StringPosition(
        start_line=3, position_on_start_line=14, end_line=4, position_on_end_line=30
    )
    assert (
        extract_comment_string(COMMENT, position)
        == "Use the other thing\n     instead, it is faster."
    )


def test_extract_strips_comment_end():
    text = "/** Short one. */"
    position = StringPosition(
        start_line=1, position_on_start_line=3, end_line=1, position_on_end_line=len(text)
    )
    assert extract_comment_string(text, position) == "Short one. "


def test_get_marker_description():
    deprecated = StringPosition(
        start_line=3, position_on_start_line=14, end_line=4, position_on_end_line=30
    )
    jsdoc = SimpleNamespace(
        original_comment_string=COMMENT,
        markers=[Marker("param"), Marker("deprecated", deprecated)],
    )
    assert get_marker_description(jsdoc, "deprecated") == (
        "Use the other thing\n     instead, it is faster."
    )
    assert get_marker_description(jsdoc, "param") == ""
    assert get_marker_description(jsdoc, "see") == ""


def test_get_marker_description_without_jsdoc():
    assert get_marker_description(None, "deprecated") == ""
    assert get_marker_description(SimpleNamespace(), "deprecated") == ""
