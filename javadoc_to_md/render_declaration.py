"""Rendering of a single declaration: heading, signature and comment sections.

Sections always come in the same order so documents diff cleanly between
runs: heading, signature block, summary text, metadata line, notes and
custom tags, parameters, return value, exceptions, see-also list and the
deprecation callout.
"""

from javadoc_to_md.declaration import FIELD, METHOD, PACKAGE, TYPE, Declaration
from javadoc_to_md.doc_comment import BlockTag, DocComment
from javadoc_to_md.documentation_model import DocumentationModel, ModelEntry
from javadoc_to_md.md_code import md_code_span, md_codeblock
from javadoc_to_md.md_table import md_table
from javadoc_to_md.options import ConverterOptions
from javadoc_to_md.reference import UNRESOLVED
from javadoc_to_md.render_inline import (
    RenderContext,
    reference_label,
    render_reference,
    render_segments,
)

KIND_KEYWORDS = {
    "class": "class",
    "interface": "interface",
    "enum": "enum",
    "annotation": "@interface",
    "record": "record",
}
KIND_TITLES = {
    "class": "Class",
    "interface": "Interface",
    "enum": "Enum",
    "annotation": "Annotation Type",
    "record": "Record",
}
NOTE_TITLES = {
    "apiNote": "API Note",
    "implSpec": "Implementation Requirements",
    "implNote": "Implementation Note",
    "serial": "Serial",
    "serialData": "Serial Data",
    "serialField": "Serial Field",
}
# Rendered by their own sections, never as note paragraphs.
STRUCTURED_TAGS = frozenset(
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
        "hidden",
    }
)


def heading_text(decl: Declaration) -> str:
    """``Class A``, ``Interface A.Inner``, ``Package p`` or a member label."""
    if decl.kind == PACKAGE:
        return f"Package {decl.name}"
    if decl.kind == TYPE:
        name = decl.signature[len(decl.package) + 1 :] if decl.package else decl.signature
        return f"{KIND_TITLES.get(decl.type_kind, 'Class')} {name}"
    return decl.label


def java_signature(decl: Declaration) -> str:
    """Reconstruct the declaration as Java source, without its body."""
    words = list(decl.modifiers)
    type_params = f"<{', '.join(decl.type_parameters)}>" if decl.type_parameters else ""
    if decl.kind == PACKAGE:
        return f"package {decl.name};"
    if decl.kind == TYPE:
        words += [KIND_KEYWORDS.get(decl.type_kind, "class"), decl.name + type_params]
        if decl.supertypes:
            words += ["extends", ", ".join(decl.supertypes)]
        if decl.interfaces:
            words += ["implements", ", ".join(decl.interfaces)]
        return " ".join(words)
    if decl.kind == FIELD:
        if decl.return_type:
            words.append(decl.return_type)
        words.append(decl.name)
        text = " ".join(words)
        return f"{text} = {decl.constant_value}" if decl.constant_value is not None else text

    if type_params:
        words.append(type_params)
    if decl.kind == METHOD:
        words.append(decl.return_type or "void")
    params = ", ".join(f"{p.type} {p.name}" for p in decl.parameters)
    text = " ".join([*words, f"{decl.name}({params})"])
    if decl.exceptions:
        text += " throws " + ", ".join(decl.exceptions)
    return text


def render_declaration(entry: ModelEntry, ctx: RenderContext, level: int) -> list[str]:
    """Render one declaration's heading and every comment section."""
    decl = entry.declaration
    ctx = ctx.for_owner(decl.signature)
    options = ctx.options

    heading = f"{'#' * min(level, 6)} {heading_text(decl)}{_source_link(decl, options)}"
    parts = [heading, ""]
    if options.include_signatures and decl.kind != PACKAGE:
        lang = "java" if options.is_github else ""
        parts += [md_codeblock(lang, java_signature(decl)), ""]

    comment = entry.effective_comment
    summary = render_segments(comment.body, ctx)
    if summary:
        parts += [summary, ""]
    parts.extend(_render_metadata(comment, ctx))
    parts.extend(_render_notes(comment, ctx))
    parts.extend(_render_params(decl, comment, ctx))
    parts.extend(_render_return(comment, ctx))
    parts.extend(_render_throws(comment, ctx))
    parts.extend(_render_see(comment, ctx))
    parts.extend(_render_deprecated(comment, ctx))
    return parts


def declaration_warnings(entry: ModelEntry, model: DocumentationModel) -> list[str]:
    """Parse, model and resolution warnings for one declaration, in that order."""
    sig = entry.declaration.signature
    messages = list(entry.comment.warnings)
    messages.extend(model.warnings_for(sig))
    messages.extend(
        ref.reason or ref.text
        for ref in entry.comment.references()
        if ref.state == UNRESOLVED
    )
    return [f"{sig}: {m}" for m in messages]


def _source_link(decl: Declaration, options: ConverterOptions) -> str:
    if not options.source_base_url or decl.line is None:
        return ""
    return f" [[src]]({options.source_base_url.rstrip('/')}/{decl.origin}#L{decl.line})"


def _describe(tag: BlockTag, ctx: RenderContext) -> str:
    return render_segments(tag.description, ctx)


def _render_metadata(comment: DocComment, ctx: RenderContext) -> list[str]:
    """Render the @since/@author/@version line."""
    items = []
    for name, title in (("since", "Since"), ("author", "Author"), ("version", "Version")):
        values = [d for d in (_describe(t, ctx) for t in comment.tags(name)) if d]
        if values:
            items.append(f"**{title}:** {', '.join(values)}")
    return [" · ".join(items), ""] if items else []


def _render_notes(comment: DocComment, ctx: RenderContext) -> list[str]:
    """Render note tags, configured custom tags and unknown tags in source order."""
    parts = []
    for tag in comment.block_tags:
        if tag.known and tag.name in STRUCTURED_TAGS:
            continue
        text = _describe(tag, ctx)
        if not tag.known:
            parts += [text, ""]
        elif text:
            parts += [f"**{NOTE_TITLES.get(tag.name, tag.name)}:** {text}", ""]
    return parts


def _render_params(decl: Declaration, comment: DocComment, ctx: RenderContext) -> list[str]:
    """Render @param tags as a Name | Type | Description table."""
    types = {p.name: p.type for p in decl.parameters}
    rows = []
    for tag in comment.tags("param"):
        if not tag.argument:
            continue
        ptype = types.get(tag.argument, "")
        rows.append(
            [
                md_code_span(tag.argument),
                md_code_span(ptype) if ptype else "",
                _describe(tag, ctx),
            ]
        )
    table = md_table(["Name", "Type", "Description"], rows)
    return ["**Parameters:**", "", table, ""] if table else []


def _render_return(comment: DocComment, ctx: RenderContext) -> list[str]:
    tag = comment.first_tag("return")
    text = _describe(tag, ctx) if tag else ""
    return [f"**Returns:** {text}", ""] if text else []


def _render_throws(comment: DocComment, ctx: RenderContext) -> list[str]:
    """Render @throws/@exception tags as a Type | Description table."""
    rows = []
    for tag in comment.tags("throws", "exception"):
        if tag.reference is not None:
            etype = render_reference(tag.reference, "", ctx, code=True)
        else:
            etype = md_code_span(tag.argument or "")
        rows.append([etype, _describe(tag, ctx)])
    table = md_table(["Type", "Description"], rows)
    return ["**Throws:**", "", table, ""] if table else []


def _render_see(comment: DocComment, ctx: RenderContext) -> list[str]:
    """Render @see tags as a bullet list."""
    items = []
    for tag in comment.tags("see"):
        label = _describe(tag, ctx)
        if tag.reference is not None:
            item = render_reference(
                tag.reference, label or reference_label(tag.reference.text), ctx, code=False
            )
        else:
            item = label
        if item:
            items.append(f"- {item}")
    return ["**See also:**", "", *items, ""] if items else []


def _render_deprecated(comment: DocComment, ctx: RenderContext) -> list[str]:
    tag = comment.first_tag("deprecated")
    if tag is None:
        return []
    text = _describe(tag, ctx)
    lines = f"**Deprecated.** {text}".rstrip().split("\n")
    return [*(f"> {line}".rstrip() for line in lines), ""]
