"""Rendering of comment segments (text, inline tags, HTML) to Markdown."""

import html
import re
import textwrap
from collections.abc import Iterable
from dataclasses import dataclass, replace

from javadoc_to_md.build_link_targets import doc_root_href, link_href
from javadoc_to_md.doc_comment import HtmlSpan, InlineTag, Segment, Text
from javadoc_to_md.documentation_model import DocumentationModel
from javadoc_to_md.html_subset import HtmlTranslator
from javadoc_to_md.inline_parser import LITERAL_TAGS, TEXT_PAYLOAD_TAGS
from javadoc_to_md.link_target import LinkTarget
from javadoc_to_md.md_code import md_code_span, md_codeblock
from javadoc_to_md.options import ConverterOptions
from javadoc_to_md.reference import Reference

BLANK_LINES_RE = re.compile(r"\n{3,}")
SENTENCE_END_RE = re.compile(r"[.!?](?=\s|$)")


@dataclass(frozen=True)
class RenderContext:
    """What the renderer needs to know about the document being written."""

    model: DocumentationModel
    targets: dict[str, LinkTarget]
    options: ConverterOptions
    document: str  # identifier of the document being rendered
    owner: str = ""  # signature whose comment is being rendered

    def for_owner(self, signature: str) -> "RenderContext":
        return replace(self, owner=signature)


def render_segments(segments: Iterable[Segment], ctx: RenderContext) -> str:
    """Render segments to Markdown paragraphs separated by blank lines."""
    blocks: list[str] = []
    text: list[str] = []
    pre: list[str] | None = None
    translator = HtmlTranslator(
        ctx.options.is_github, doc_root_href(ctx.document, ctx.options)
    )

    def flush_text() -> None:
        rendered = _normalize(text)
        if rendered:
            blocks.append(rendered)
        text.clear()

    def flush_pre() -> None:
        code = textwrap.dedent("".join(pre or [])).strip("\n")
        if code.strip():
            blocks.append(md_codeblock("java" if ctx.options.is_github else "", code))

    for seg in segments:
        if pre is not None:
            if isinstance(seg, HtmlSpan) and seg.tag == "pre" and seg.closing:
                flush_pre()
                pre = None
            else:
                pre.append(_plain(seg))
            continue
        if isinstance(seg, HtmlSpan) and seg.tag == "pre" and not seg.closing:
            flush_text()
            pre = []
        elif isinstance(seg, Text):
            text.append(seg.text)
        elif isinstance(seg, HtmlSpan):
            text.append(translator.translate(seg))
        else:
            text.append(render_inline_tag(seg, ctx))

    if pre is not None:
        flush_pre()
    flush_text()
    return "\n\n".join(blocks)


def render_inline_tag(tag: InlineTag, ctx: RenderContext) -> str:
    name = tag.name
    if name in LITERAL_TAGS:
        return md_code_span(tag.text)
    if name in ("link", "linkplain", "see") and tag.reference is not None:
        return render_reference(tag.reference, tag.label, ctx, code=name == "link")
    if name == "value":
        return _render_value(tag, ctx)
    if name == "docRoot":
        return doc_root_href(ctx.document, ctx.options)
    if name == "inheritDoc":
        return ""
    if name in TEXT_PAYLOAD_TAGS:
        nested = tag.segments[:1] if name == "index" else tag.segments
        rendered = render_segments(nested, ctx)
        return f"Returns {rendered}" if name == "return" else rendered
    return f"{{@{name} {tag.text}}}" if tag.text else f"{{@{name}}}"


def render_reference(
    ref: Reference,
    label: str,
    ctx: RenderContext,
    *,
    code: bool,
) -> str:
    """Render a link for a resolved reference, inline code otherwise."""
    href = _reference_href(ref, ctx)
    if href is None:
        return md_code_span(ref.text)
    text = label or reference_label(ref.text)
    if code:
        return f"[{md_code_span(text)}]({href})"
    return f"[{_escape_label(text)}]({href})"


def reference_label(text: str) -> str:
    """Default link text: ``B#n()`` reads ``B.n()``, ``#n()`` reads ``n()``."""
    owner, sep, member = text.partition("#")
    if not sep:
        return owner
    return f"{owner}.{member}" if owner else member


def first_sentence(markdown: str) -> str:
    """The first sentence of the first paragraph, for index tables."""
    paragraph = markdown.strip().split("\n\n", 1)[0]
    paragraph = " ".join(paragraph.split())
    if paragraph.startswith("```"):
        return ""
    m = SENTENCE_END_RE.search(paragraph)
    return paragraph[: m.end()] if m else paragraph


def _reference_href(ref: Reference, ctx: RenderContext) -> str | None:
    if not ref.is_resolved or ref.target is None:
        return None
    if ref.external_url:
        return ref.external_url
    target = ctx.targets.get(ref.target)
    if target is None:
        return None
    return link_href(target, ctx.document, ctx.options)


def _render_value(tag: InlineTag, ctx: RenderContext) -> str:
    ref = tag.reference
    if ref is None:
        signature: str | None = ctx.owner
    elif ref.is_resolved and not ref.external_url:
        signature = ref.target
    else:
        signature = None

    entry = ctx.model.get(signature) if signature else None
    if entry is not None and entry.declaration.constant_value is not None:
        return md_code_span(entry.declaration.constant_value)
    if ref is not None:
        return render_reference(ref, tag.label, ctx, code=True)
    return ""


def _plain(seg: Segment) -> str:
    """Text of a segment inside ``<pre>``, where Markdown is not interpreted."""
    if isinstance(seg, Text):
        return html.unescape(seg.text)
    if isinstance(seg, HtmlSpan):
        return "" if seg.allowed else seg.raw
    if seg.name in LITERAL_TAGS:
        return seg.text
    if seg.reference is not None:
        return seg.label or reference_label(seg.reference.text)
    return seg.text


def _normalize(parts: list[str]) -> str:
    lines = [line.strip() for line in "".join(parts).split("\n")]
    return BLANK_LINES_RE.sub("\n\n", "\n".join(lines)).strip()


def _escape_label(text: str) -> str:
    return text.replace("[", "\\[").replace("]", "\\]")
