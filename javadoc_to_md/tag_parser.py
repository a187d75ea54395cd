"""Parse a raw documentation comment into a DocComment.

Comment lines are fed through a small state machine. In ``BODY`` mode lines
accumulate into the main description; a line starting with ``@name`` switches
to ``IN_BLOCK_TAG`` and every following line belongs to that tag until the
next block tag begins. Known tag names also open a block tag in mid-line,
after whitespace. No tag is opened while an inline tag or a ``<pre>`` block
is still unterminated, so ``{@code`` payloads and code samples spanning
lines may contain ``@Override`` and similar text.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from javadoc_to_md.doc_comment import BlockTag, DocComment, Segment, Text
from javadoc_to_md.inline_parser import has_open_inline, parse_inline, split_reference
from javadoc_to_md.reference import Reference
from javadoc_to_md.strip_comment import strip_comment

BODY = "BODY"
IN_BLOCK_TAG = "IN_BLOCK_TAG"

BLOCK_TAG_RE = re.compile(r"^\s*@([A-Za-z][\w-]*)(?=\s|$)")
MID_LINE_TAG_RE = re.compile(r"(?<=\s)@([A-Za-z][\w-]*)(?=\s|$)")
PRE_OPEN_RE = re.compile(r"<pre\b", re.IGNORECASE)
PRE_CLOSE_RE = re.compile(r"</pre\s*>", re.IGNORECASE)

KNOWN_BLOCK_TAGS = frozenset(
    {
        "param",
        "return",
        "throws",
        "exception",
        "see",
        "deprecated",
        "author",
        "version",
        "since",
        "serial",
        "serialData",
        "serialField",
        "apiNote",
        "implSpec",
        "implNote",
        "hidden",
    }
)


@dataclass
class _PendingTag:
    name: str
    lines: list[str] = field(default_factory=list)


class CommentStateMachine:
    """Splits stripped comment lines into the body and raw block tags.

    Any ``@name`` at the start of a line opens a block tag. A known tag name
    also opens one mid-line after whitespace, so ``Does m. @see B#n`` yields
    a body and a ``@see`` tag.
    """

    def __init__(self, known: Iterable[str] = KNOWN_BLOCK_TAGS) -> None:
        """Start in BODY mode with nothing collected."""
        self.known = frozenset(known)
        self.mode = BODY
        self.body_lines: list[str] = []
        self.tags: list[_PendingTag] = []

    def feed(self, line: str) -> None:
        """Consume one stripped comment line."""
        m = BLOCK_TAG_RE.match(line)
        if m and self._can_open(""):
            self._open(m.group(1))
            line = line[m.end() :].strip()

        while True:
            cut = self._find_mid_line_tag(line)
            if cut is None:
                self._current_lines().append(line)
                return
            head, name, line = cut
            if head:
                self._current_lines().append(head)
            self._open(name)

    def _open(self, name: str) -> None:
        self.tags.append(_PendingTag(name))
        self.mode = IN_BLOCK_TAG

    def _find_mid_line_tag(self, line: str) -> tuple[str, str, str] | None:
        for m in MID_LINE_TAG_RE.finditer(line):
            if m.group(1) in self.known and self._can_open(line[: m.start()]):
                return line[: m.start()].rstrip(), m.group(1), line[m.end() :].strip()
        return None

    def _can_open(self, prefix: str) -> bool:
        """No tag starts inside an unterminated inline tag or ``<pre>`` block."""
        text = "\n".join([*self._current_lines(), prefix])
        if has_open_inline(text):
            return False
        return len(PRE_OPEN_RE.findall(text)) <= len(PRE_CLOSE_RE.findall(text))

    def _current_lines(self) -> list[str]:
        if self.mode == BODY:
            return self.body_lines
        return self.tags[-1].lines


def parse_comment(raw: str, origin: str, custom_tags: Iterable[str] = ()) -> DocComment:
    """Parse ``raw`` (with or without ``/** */``) owned by declaration ``origin``."""
    if not raw or not raw.strip():
        return DocComment()

    known = KNOWN_BLOCK_TAGS | set(custom_tags)
    machine = CommentStateMachine(known)
    for line in strip_comment(raw):
        machine.feed(line)

    warnings: list[str] = []
    body = parse_inline(_join(machine.body_lines), origin, warnings)
    tags = [
        _parse_block_tag(t.name, _join(t.lines), origin, known, warnings)
        for t in machine.tags
    ]
    return DocComment(body=tuple(body), block_tags=tuple(tags), warnings=tuple(warnings))


def _join(lines: list[str]) -> str:
    return "\n".join(lines).strip()


def _first_word(text: str) -> tuple[str, str]:
    parts = text.split(None, 1)
    if not parts:
        return "", ""
    return parts[0], parts[1] if len(parts) > 1 else ""


def _parse_block_tag(
    name: str,
    text: str,
    origin: str,
    known: set[str] | frozenset[str],
    warnings: list[str],
) -> BlockTag:
    if name not in known:
        warnings.append(f"unknown block tag @{name}")
        opaque = f"@{name} {text}".strip()
        return BlockTag(name=name, description=(Text(opaque),), known=False)

    if name == "param":
        pname, rest = _first_word(text)
        if not pname:
            warnings.append("@param without a parameter name")
        return BlockTag(
            name=name,
            argument=pname or None,
            description=_segments(rest, origin, warnings),
        )

    if name in ("throws", "exception"):
        etype, rest = _first_word(text)
        if not etype:
            warnings.append(f"@{name} without an exception type")
            return BlockTag(name=name, description=_segments(rest, origin, warnings))
        return BlockTag(
            name=name,
            argument=etype,
            reference=Reference(text=etype, origin=origin),
            description=_segments(rest, origin, warnings),
        )

    if name == "see":
        return _parse_see(text, origin, warnings)

    return BlockTag(name=name, description=_segments(text, origin, warnings))


def _parse_see(text: str, origin: str, warnings: list[str]) -> BlockTag:
    """Handle the three ``@see`` forms: quoted text, HTML link, reference."""
    if not text:
        warnings.append("@see without a target")
        return BlockTag(name="see")
    if text.startswith('"'):
        return BlockTag(name="see", description=(Text(text.strip('"')),))
    if text.startswith("<"):
        return BlockTag(name="see", description=_segments(text, origin, warnings))
    target, label = split_reference(text)
    return BlockTag(
        name="see",
        argument=target,
        reference=Reference(text=target, origin=origin),
        description=_segments(label, origin, warnings),
    )


def _segments(text: str, origin: str, warnings: list[str]) -> tuple[Segment, ...]:
    if not text:
        return ()
    return tuple(parse_inline(text, origin, warnings))
