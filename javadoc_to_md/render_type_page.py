"""Logic for rendering the document of one top-level type."""

from javadoc_to_md.declaration import CONSTRUCTOR, FIELD, METHOD, TYPE
from javadoc_to_md.documentation_model import DocumentationModel
from javadoc_to_md.link_target import LinkTarget
from javadoc_to_md.options import ConverterOptions
from javadoc_to_md.render_declaration import declaration_warnings, render_declaration
from javadoc_to_md.render_inline import RenderContext
from javadoc_to_md.rendered_document import RenderedDocument

MEMBER_GROUPS = (
    ("Fields", FIELD),
    ("Constructors", CONSTRUCTOR),
    ("Methods", METHOD),
)


def render_type_page(
    model: DocumentationModel,
    targets: dict[str, LinkTarget],
    options: ConverterOptions,
    signature: str,
) -> RenderedDocument:
    """Render a top-level type, its members and its nested types."""
    document = targets[signature].document
    ctx = RenderContext(model, targets, options, document)
    warnings: list[str] = []
    parts = _render_type(model, signature, ctx, 1, warnings)
    return RenderedDocument(
        identifier=document,
        signature=signature,
        content="\n".join(parts).rstrip() + "\n",
        warnings=tuple(warnings),
    )


def _anchor_line(ctx: RenderContext, signature: str) -> list[str]:
    return [f'<a id="{ctx.targets[signature].anchor}"></a>', ""]


def _render_type(
    model: DocumentationModel,
    signature: str,
    ctx: RenderContext,
    level: int,
    warnings: list[str],
) -> list[str]:
    """Render one type at heading ``level``; members sit two levels below."""
    entry = model.entries[signature]
    parts = _anchor_line(ctx, signature) if level > 1 else []
    parts += render_declaration(entry, ctx, level)
    warnings.extend(declaration_warnings(entry, model))

    members = model.members_of(signature)
    for title, kind in MEMBER_GROUPS:
        group = [m for m in members if m.kind == kind]
        if not group:
            continue
        parts += [f"{'#' * min(level + 1, 6)} {title}", ""]
        for member in group:
            member_entry = model.entries[member.signature]
            parts += _anchor_line(ctx, member.signature)
            parts += render_declaration(member_entry, ctx, level + 2)
            warnings.extend(declaration_warnings(member_entry, model))

    for nested in members:
        if nested.kind == TYPE:
            parts += _render_type(model, nested.signature, ctx, level + 1, warnings)
    return parts
