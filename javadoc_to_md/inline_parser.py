"""Tokenizer for inline tags and HTML spans inside comment text."""

import re

from javadoc_to_md.doc_comment import HtmlSpan, InlineTag, Segment, Text
from javadoc_to_md.reference import Reference

INLINE_NAME_RE = re.compile(r"\{@([A-Za-z][\w-]*)")
NEXT_SPECIAL_RE = re.compile(r"\{@|<")
HTML_TAG_RE = re.compile(r"<(/?)([A-Za-z][A-Za-z0-9]*)(\s[^<>]*?)?\s*(/?)>")
ATTR_RE = re.compile(
    r"""([A-Za-z_:][\w:.-]*)(?:\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'>]+)))?""",
)

# Payload scanned to the next unescaped "}" with no nesting.
LITERAL_TAGS = frozenset({"code", "literal"})
REFERENCE_TAGS = frozenset({"link", "linkplain", "see", "value"})
# Payload is itself comment text, parsed into nested segments.
TEXT_PAYLOAD_TAGS = frozenset({"summary", "index", "return"})
KNOWN_INLINE_TAGS = LITERAL_TAGS | REFERENCE_TAGS | TEXT_PAYLOAD_TAGS | {"inheritDoc", "docRoot"}


def scan_inline_end(text: str, start: int) -> int | None:
    """Return the index of the ``}`` closing the inline tag opened at ``start``."""
    m = INLINE_NAME_RE.match(text, start)
    if not m:
        return None
    i = m.end()
    n = len(text)
    if m.group(1) in LITERAL_TAGS:
        while i < n:
            if text[i] == "}" and text[i - 1] != "\\":
                return i
            i += 1
        return None

    depth = 1
    while i < n:
        ch = text[i]
        if ch == "\\" and i + 1 < n and text[i + 1] in "{}":
            i += 2
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
        i += 1
    return None


def has_open_inline(text: str) -> bool:
    """Check whether ``text`` ends inside an unterminated inline tag."""
    i = 0
    while True:
        m = INLINE_NAME_RE.search(text, i)
        if not m:
            return False
        end = scan_inline_end(text, m.start())
        if end is None:
            return True
        i = end + 1


def split_reference(text: str) -> tuple[str, str]:
    """Split ``Foo#bar(int, String) the label`` into target and label.

    Whitespace inside the parameter list belongs to the target.
    """
    depth = 0
    for idx, ch in enumerate(text):
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(depth - 1, 0)
        elif ch.isspace() and depth == 0:
            return text[:idx], text[idx:].strip()
    return text, ""


def parse_html_tag(m: re.Match) -> HtmlSpan:
    attrs = []
    for am in ATTR_RE.finditer(m.group(3) or ""):
        value = am.group(2) or am.group(3) or am.group(4) or ""
        attrs.append((am.group(1).lower(), value))
    return HtmlSpan(
        tag=m.group(2).lower(),
        raw=m.group(0),
        closing=bool(m.group(1)),
        attributes=tuple(attrs),
    )


def parse_inline(text: str, origin: str, warnings: list[str]) -> list[Segment]:
    """Split comment text into Text, InlineTag and HtmlSpan segments.

    Problems are appended to ``warnings``; parsing never fails.
    """
    segments: list[Segment] = []
    pending: list[str] = []

    def flush() -> None:
        if pending:
            segments.append(Text("".join(pending)))
            pending.clear()

    i = 0
    n = len(text)
    while i < n:
        m = NEXT_SPECIAL_RE.search(text, i)
        if not m:
            pending.append(text[i:])
            break
        pending.append(text[i : m.start()])
        i = m.start()

        if m.group(0) == "<":
            hm = HTML_TAG_RE.match(text, i)
            if hm:
                flush()
                segments.append(parse_html_tag(hm))
                i = hm.end()
            else:
                pending.append("<")
                i += 1
            continue

        nm = INLINE_NAME_RE.match(text, i)
        if not nm:
            pending.append("{@")
            i += 2
            continue
        end = scan_inline_end(text, i)
        if end is None:
            warnings.append(f"unterminated inline tag {{@{nm.group(1)}")
            pending.append(text[i:])
            break
        flush()
        segments.append(_make_inline_tag(nm.group(1), text[nm.end() : end], origin, warnings))
        i = end + 1

    flush()
    return segments


def _make_inline_tag(name: str, payload: str, origin: str, warnings: list[str]) -> InlineTag:
    if name in LITERAL_TAGS:
        return InlineTag(name=name, text=payload.lstrip().replace("\\}", "}"))

    body = payload.strip()
    if name in REFERENCE_TAGS and body:
        target, label = split_reference(body)
        return InlineTag(
            name=name,
            text=body,
            reference=Reference(text=target, origin=origin),
            label=label,
        )
    if name in TEXT_PAYLOAD_TAGS:
        nested = parse_inline(body, origin, warnings)
        return InlineTag(name=name, text=body, segments=tuple(nested))
    if name not in KNOWN_INLINE_TAGS:
        warnings.append(f"unknown inline tag {{@{name}}}")
    return InlineTag(name=name, text=body)
