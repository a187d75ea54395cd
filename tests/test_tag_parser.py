"""Tests for block tag parsing."""

from javadoc_to_md.doc_comment import DocComment, InlineTag, Text
from javadoc_to_md.tag_parser import BODY, IN_BLOCK_TAG, CommentStateMachine, parse_comment

COMMENT = """/**
 * Adds things.
 *
 * @param a the first
 *        value
 * @param <T> the element type
 * @return the sum
 * @throws IllegalStateException if closed
 * @see Other#m(int, String) other one
 * @custom whatever
 */"""


def test_body_and_block_tags() -> None:
    """The body ends where the first block tag begins."""
    comment = parse_comment(COMMENT, "p.A#add(int)")
    assert comment.body == (Text("Adds things."),)
    assert [t.name for t in comment.block_tags] == [
        "param",
        "param",
        "return",
        "throws",
        "see",
        "custom",
    ]


def test_param_tags() -> None:
    """The first word of @param is the parameter name."""
    comment = parse_comment(COMMENT, "p.A#add(int)")
    first, second = comment.tags("param")
    assert first.argument == "a"
    assert first.description == (Text("the first\n       value"),)
    assert second.argument == "<T>"


def test_throws_and_see_carry_references() -> None:
    """@throws and @see targets become unqualified references."""
    comment = parse_comment(COMMENT, "p.A#add(int)")
    throws = comment.first_tag("throws")
    assert throws is not None
    assert throws.argument == "IllegalStateException"
    assert throws.reference is not None
    assert throws.reference.state == "unqualified"

    see = comment.first_tag("see")
    assert see is not None
    assert see.argument == "Other#m(int, String)"
    assert see.description == (Text("other one"),)


def test_unknown_block_tag_warns() -> None:
    """Unknown tags are kept as opaque text with a warning."""
    comment = parse_comment(COMMENT, "p.A#add(int)")
    custom = comment.first_tag("custom")
    assert custom is not None
    assert not custom.known
    assert custom.description == (Text("@custom whatever"),)
    assert comment.warnings == ("unknown block tag @custom",)


def test_configured_custom_tag() -> None:
    """Configured custom tags are known and raise no warning."""
    comment = parse_comment(COMMENT, "p.A#add(int)", custom_tags=("custom",))
    custom = comment.first_tag("custom")
    assert custom is not None
    assert custom.known
    assert custom.description == (Text("whatever"),)
    assert comment.warnings == ()


def test_see_forms() -> None:
    """Quoted text and HTML links carry no reference."""
    comment = parse_comment('/**\n * @see "The Book"\n * @see <a href="u">site</a>\n */', "p.A")
    quoted, link = comment.tags("see")
    assert quoted.reference is None
    assert quoted.description == (Text("The Book"),)
    assert link.reference is None
    assert link.description[0].tag == "a"


def test_open_inline_tag_suppresses_block_tags() -> None:
    """A line starting with @ inside an open inline tag stays in the body."""
    comment = parse_comment("/**\n * {@code\n * @Override\n * }\n */", "p.A")
    assert comment.block_tags == ()
    tag = comment.body[0]
    assert isinstance(tag, InlineTag)
    assert tag.name == "code"
    assert "@Override" in tag.text


def test_state_machine_modes() -> None:
    """The machine switches to IN_BLOCK_TAG at the first block tag."""
    machine = CommentStateMachine()
    machine.feed("Body text.")
    assert machine.mode == BODY
    machine.feed("@return something")
    machine.feed("more of it")
    assert machine.mode == IN_BLOCK_TAG
    assert machine.body_lines == ["Body text."]
    assert machine.tags[0].lines == ["something", "more of it"]


def test_mid_line_at_sign_is_text() -> None:
    """An @ inside a word, before punctuation or naming no known tag is text."""
    comment = parse_comment("/** Mail me@example.com or use @see. Mark @Override here. */", "p.A")
    assert comment.block_tags == ()


def test_single_line_block_tags() -> None:
    """Known tags open mid-line, so one-line comments keep their tags."""
    comment = parse_comment("/** Does m. @see B#n */", "p.A#m()")
    assert comment.body == (Text("Does m."),)
    (see,) = comment.block_tags
    assert see.name == "see"
    assert see.argument == "B#n"

    comment = parse_comment("/** Adds. @param x the x @return the sum */", "p.A#add(int)")
    assert [(t.name, t.argument) for t in comment.block_tags] == [
        ("param", "x"),
        ("return", None),
    ]
    assert comment.block_tags[0].description == (Text("the x"),)


def test_mid_line_tags_respect_code() -> None:
    """Tag names inside inline code or <pre> blocks stay in the text."""
    comment = parse_comment("/** Write {@code a @see b} here. */", "p.A")
    assert comment.block_tags == ()

    comment = parse_comment("/**\n * <pre>\n * @return x\n * x @see y\n * </pre>\n */", "p.A")
    assert comment.block_tags == ()


def test_empty_comment() -> None:
    """Missing comments parse to an empty DocComment."""
    assert parse_comment("", "p.A") == DocComment()
    assert parse_comment("", "p.A").is_empty
