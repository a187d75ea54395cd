"""Tests for comment delimiter and decoration removal."""

from javadoc_to_md.strip_comment import strip_comment


def test_strip_multiline_comment() -> None:
    """Delimiters and leading stars go; extra indentation is kept."""
    raw = "/**\n * Hello\n *   indented\n */"
    assert strip_comment(raw) == ["Hello", "  indented"]


def test_strip_single_line_comment() -> None:
    """A one-line comment yields one line."""
    assert strip_comment("/** One line. */") == ["One line."]


def test_already_stripped_text_is_accepted() -> None:
    """Text without delimiters is returned as lines."""
    assert strip_comment("Already stripped\nsecond") == ["Already stripped", "second"]


def test_blank_edges_and_crlf() -> None:
    """Leading and trailing blank lines are trimmed; CRLF is normalized."""
    raw = "/**\r\n *\r\n * Body\r\n *\r\n */"
    assert strip_comment(raw) == ["Body"]
