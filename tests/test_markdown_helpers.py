"""Tests for Markdown building blocks."""

from javadoc_to_md.header_slug import anchor_for, header_slug, member_slug, unique_anchor
from javadoc_to_md.md_code import md_code_span, md_codeblock
from javadoc_to_md.md_table import md_table


def test_md_table() -> None:
    """Test Markdown table generation."""
    assert md_table([], []) == ""
    expected = "| Name | Value |\n| --- | --- |\n| A | 1 |\n| B | 2 |"
    assert md_table(["Name", "Value"], [["A", "1"], ["B", "2"]]) == expected


def test_md_table_escapes_cells() -> None:
    """Pipes are escaped and newlines folded inside cells."""
    assert md_table(["Name"], [["a|b\nc"]]) == "| Name |\n| --- |\n| a\\|b c |"


def test_md_code_span() -> None:
    """The fence is longer than any backtick run inside."""
    assert md_code_span("x") == "`x`"
    assert md_code_span("a`b") == "``a`b``"
    assert md_code_span("`x") == "`` `x ``"
    assert md_code_span("") == ""


def test_md_codeblock() -> None:
    """Code blocks carry the info string and grow their fence when needed."""
    assert md_codeblock("java", "int x = 1;\n") == "```java\nint x = 1;\n```"
    assert md_codeblock("", "```") == "````\n```\n````"


def test_header_slug() -> None:
    """Slugs are lower case and hyphenated; arrays are spelled out."""
    assert header_slug("m(int, String)") == "m-int-string"
    assert header_slug("m(int[])") == "m-int-array"
    assert header_slug("n()") == "n"
    assert header_slug("!!!") == "section"


def test_anchor_for() -> None:
    """Nested type members carry the nested type path."""
    assert anchor_for("p.A#m(int)", "p.A") == "m-int-"
    assert anchor_for("p.A.In#g()", "p.A") == "in-g--"
    assert anchor_for("p.A.In", "p.A") == "in"
    assert anchor_for("p.A", "p.A") == ""


def test_member_slug() -> None:
    """Callables end in a hyphen so they never share a slug with a field."""
    assert member_slug("x") == "x"
    assert member_slug("x()") == "x--"
    assert member_slug("m(int,String)") == "m-int-string-"
    assert member_slug("m(int[])") == "m-int-array-"
    assert member_slug("put(java.util.List<T>)") == "put-java-util-list-"


def test_unique_anchor() -> None:
    """Repeated anchors in one document get numeric suffixes."""
    taken: set[str] = set()
    assert unique_anchor("in", taken) == "in"
    assert unique_anchor("in", taken) == "in-1"
    assert unique_anchor("in", taken) == "in-2"
    assert taken == {"in", "in-1", "in-2"}
