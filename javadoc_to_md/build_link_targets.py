"""Logic for mapping signatures to rendered documents and anchors."""

import posixpath

from javadoc_to_md.declaration import PACKAGE, TYPE
from javadoc_to_md.documentation_model import DocumentationModel
from javadoc_to_md.header_slug import anchor_for, unique_anchor
from javadoc_to_md.link_target import LinkTarget
from javadoc_to_md.options import ABSOLUTE, ConverterOptions
from javadoc_to_md.signature import display_name

PACKAGE_SUMMARY = "package-summary"
SUMMARY_DOCUMENT = "SUMMARY"


def package_path(package: str) -> str:
    return package.replace(".", "/")


def type_document_id(signature: str, package: str) -> str:
    """``p.q.A`` in package ``p.q`` is rendered to ``p/q/A``."""
    name = signature[len(package) + 1 :] if package else signature
    return f"{package_path(package)}/{name}" if package else name


def package_document_id(package: str) -> str:
    if not package:
        return PACKAGE_SUMMARY
    return f"{package_path(package)}/{PACKAGE_SUMMARY}"


def build_link_targets(model: DocumentationModel) -> dict[str, LinkTarget]:
    """Map every package and rendered declaration signature to its target.

    Anchors are unique per document; on a clash the signature that sorts
    later gets a numeric suffix.
    """
    targets: dict[str, LinkTarget] = {}
    taken: dict[str, set[str]] = {}
    for package in model.packages():
        targets[package] = LinkTarget(title=package, document=package_document_id(package))

    for sig in sorted(model.entries):
        decl = model.declaration(sig)
        if decl.kind == PACKAGE:
            continue
        top = model.top_level_type(sig)
        if top is None:
            continue
        document = type_document_id(top, model.package_of(top))
        if decl.kind == TYPE and sig == top:
            targets[sig] = LinkTarget(title=decl.name, document=document)
        else:
            targets[sig] = LinkTarget(
                title=display_name(sig, decl.package),
                document=document,
                anchor=unique_anchor(anchor_for(sig, top), taken.setdefault(document, set())),
            )
    return targets


def link_href(target: LinkTarget, from_document: str, options: ConverterOptions) -> str:
    """Href of ``target`` as written in the document ``from_document``."""
    anchor = f"#{target.anchor}" if target.anchor else ""
    if target.document == from_document and anchor:
        return anchor
    if options.link_base_style == ABSOLUTE:
        path = f"{options.link_root.rstrip('/')}/{target.document}{options.link_suffix}"
    else:
        base = posixpath.dirname(from_document) or "."
        path = posixpath.relpath(target.document + options.link_suffix, base)
    return path + anchor


def doc_root_href(from_document: str, options: ConverterOptions) -> str:
    """What ``{@docRoot}`` expands to inside ``from_document``."""
    if options.link_base_style == ABSOLUTE:
        return options.link_root.rstrip("/") or "/"
    return posixpath.relpath(".", posixpath.dirname(from_document) or ".")
