import pytest

from doctor.parser import normalize_lines, strip_delimiters, strip_line_marker


def _normalize(comment: str):
    return [(line.content.text, line.terminator) for line in normalize_lines(strip_delimiters(comment))]


@pytest.mark.parametrize(
    "raw, expected",
    [
        (" * text", "text"),
        ("\t*\ttext", "text"),
        ("*text", "text"),
        (" *   indented", "  indented"),
        ("   no marker", "no marker"),
        (" *", ""),
        ("", ""),
        (" ** double", "* double"),
    ],
)
def test_strip_line_marker(raw, expected):
    assert strip_line_marker(raw, 0, len(raw)).text == expected


def test_strip_line_marker_keeps_original_offsets():
    source = "xx  * body"
    span = strip_line_marker(source, 2, len(source))
    assert span.source is source
    assert span.start == 6
    assert span.text == "body"


def test_normalization_is_idempotent_on_normalized_text():
    for raw in [" * text", "\t* text  ", "  plain", " *"]:
        once = strip_line_marker(raw, 0, len(raw)).text
        assert strip_line_marker(once, 0, len(once)).text == once


def test_conventional_layout_drops_marker_lines():
    assert _normalize("/**\n * Hello world.\n */") == [("Hello world.", "\n")]


def test_keeps_blank_separator_lines():
    comment = "/**\n * First.\n *\n * Second.\n */"
    assert _normalize(comment) == [
        ("First.", "\n"),
        ("", "\n"),
        ("Second.", "\n"),
    ]


def test_crlf_terminators_are_recorded():
    comment = "/**\r\n * One\r\n * Two\r\n */"
    assert _normalize(comment) == [("One", "\r\n"), ("Two", "\r\n")]


def test_single_line_comment_keeps_trailing_whitespace():
    assert _normalize("/** One-line description. */") == [("One-line description. ", "")]


def test_empty_comments_have_no_lines():
    assert _normalize("/**/") == []
    assert _normalize("/** */") == []
    assert _normalize("/**\n */") == []
    assert _normalize("/**\n **/") == []


def test_content_spans_point_into_the_input():
    comment = "/**\n   * Alpha\n   * Beta\n   */"
    for line in normalize_lines(strip_delimiters(comment)):
        assert line.content.source is comment
        assert comment[line.content.start : line.content.end] == line.content.text
