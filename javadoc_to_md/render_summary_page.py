"""Logic for rendering the SUMMARY table of contents."""

from javadoc_to_md.build_link_targets import SUMMARY_DOCUMENT, link_href
from javadoc_to_md.documentation_model import DocumentationModel
from javadoc_to_md.link_target import LinkTarget
from javadoc_to_md.options import ConverterOptions
from javadoc_to_md.rendered_document import RenderedDocument


def render_summary_page(
    model: DocumentationModel,
    targets: dict[str, LinkTarget],
    options: ConverterOptions,
) -> RenderedDocument:
    """Render an mdBook-style list of every package and its top-level types."""

    def item(signature: str, title: str, indent: str = "") -> str:
        href = link_href(targets[signature], SUMMARY_DOCUMENT, options)
        return f"{indent}- [{title}]({href})"

    parts = ["# Summary", ""]
    for sig in model.types_in_package(""):
        parts.append(item(sig, model.declaration(sig).name))
    for package in model.packages():
        parts.append(item(package, package))
        for sig in model.types_in_package(package):
            parts.append(item(sig, model.declaration(sig).name, "  "))

    return RenderedDocument(
        identifier=SUMMARY_DOCUMENT,
        signature="",
        content="\n".join(parts).rstrip() + "\n",
    )
