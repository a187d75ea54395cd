"""Logic for rendering package index documents."""

from javadoc_to_md.build_link_targets import link_href, package_document_id
from javadoc_to_md.documentation_model import DocumentationModel
from javadoc_to_md.link_target import LinkTarget
from javadoc_to_md.md_table import md_table
from javadoc_to_md.options import ConverterOptions
from javadoc_to_md.render_declaration import (
    KIND_TITLES,
    declaration_warnings,
    render_declaration,
)
from javadoc_to_md.render_inline import RenderContext, first_sentence, render_segments
from javadoc_to_md.rendered_document import RenderedDocument


def child_packages(model: DocumentationModel, package: str) -> list[str]:
    """Packages whose nearest enclosing package in the model is ``package``."""
    known = set(model.packages())
    children = []
    for name in sorted(known):
        if not name.startswith(package + "."):
            continue
        parent = name.rsplit(".", 1)[0]
        while parent not in known and "." in parent:
            parent = parent.rsplit(".", 1)[0]
        if parent == package:
            children.append(name)
    return children


def render_package_page(
    model: DocumentationModel,
    targets: dict[str, LinkTarget],
    options: ConverterOptions,
    package: str,
) -> RenderedDocument:
    """Render the index of one package: its documentation, types and subpackages.

    The default package (``""``) gets an index of its types only.
    """
    document = package_document_id(package)
    ctx = RenderContext(model, targets, options, document)
    warnings: list[str] = []

    entry = model.get(package)
    if entry is not None:
        parts = render_declaration(entry, ctx, 1)
        warnings.extend(declaration_warnings(entry, model))
    else:
        parts = [f"# Package {package}" if package else "# Default package", ""]

    rows = []
    for sig in model.types_in_package(package):
        type_entry = model.entries[sig]
        decl = type_entry.declaration
        summary = render_segments(type_entry.effective_comment.body, ctx.for_owner(sig))
        rows.append(
            [
                f"[{decl.name}]({link_href(targets[sig], document, options)})",
                KIND_TITLES.get(decl.type_kind, "Class"),
                first_sentence(summary),
            ]
        )
    table = md_table(["Type", "Kind", "Description"], rows)
    if table:
        parts += ["## Types", "", table, ""]

    children = child_packages(model, package)
    if children:
        parts += ["## Packages", ""]
        parts += [f"- [{c}]({link_href(targets[c], document, options)})" for c in children]
        parts.append("")

    return RenderedDocument(
        identifier=document,
        signature=package,
        content="\n".join(parts).rstrip() + "\n",
        warnings=tuple(warnings),
    )
