"""Flatten compilation units into declarations and merge them."""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from javadoc_to_md.declaration import PACKAGE, CompilationUnit, Declaration
from javadoc_to_md.doc_comment import DocComment
from javadoc_to_md.errors import DuplicateDeclarationError
from javadoc_to_md.tag_parser import parse_comment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScannedDeclaration:
    """A declaration paired with its parsed comment."""

    declaration: Declaration
    comment: DocComment


@dataclass(frozen=True)
class ScanResult:
    """Everything one compilation unit contributes to the model."""

    path: str
    package: str
    imports: tuple[str, ...]
    declarations: tuple[ScannedDeclaration, ...]


def iter_declarations(
    decls: Iterable[Declaration],
    *,
    include_private: bool = False,
    ignore_modifiers: Iterable[str] = (),
) -> Iterator[Declaration]:
    """Walk the declaration tree pre-order, skipping private and ignored subtrees.

    A declaration carrying any of ``ignore_modifiers`` is skipped together
    with its members.
    """
    ignored = frozenset(ignore_modifiers)
    for d in decls:
        if d.is_private and not include_private:
            continue
        if ignored.intersection(d.modifiers):
            continue
        yield d
        yield from iter_declarations(
            d.members, include_private=include_private, ignore_modifiers=ignored
        )


def package_declaration(unit: CompilationUnit) -> Declaration:
    """Build the package declaration documented by a ``package-info.java``."""
    return Declaration(
        kind=PACKAGE,
        name=unit.package,
        signature=unit.package,
        package=unit.package,
        origin=unit.path,
        raw_doc=unit.package_doc,
    )


def scan_unit(
    unit: CompilationUnit,
    *,
    include_private: bool = False,
    custom_tags: Iterable[str] = (),
    ignore_modifiers: Iterable[str] = (),
) -> ScanResult:
    """Scan one unit and parse every attached comment.

    Declarations without a comment are kept; the model decides what to do
    with them.
    """
    tags = tuple(custom_tags)
    decls: list[Declaration] = []
    if unit.package_doc.strip() and unit.package:
        decls.append(package_declaration(unit))
    decls.extend(
        iter_declarations(
            unit.declarations,
            include_private=include_private,
            ignore_modifiers=ignore_modifiers,
        )
    )

    scanned = tuple(
        ScannedDeclaration(d, parse_comment(d.raw_doc, d.signature, tags)) for d in decls
    )
    logger.debug("Scanned %d declarations from %s", len(scanned), unit.path)
    return ScanResult(
        path=unit.path,
        package=unit.package,
        imports=tuple(unit.imports),
        declarations=scanned,
    )


def merge_scan_results(results: Iterable[ScanResult]) -> dict[str, ScannedDeclaration]:
    """Merge per-unit results in order, keyed by signature.

    Raises DuplicateDeclarationError on the first signature collision.
    """
    merged: dict[str, ScannedDeclaration] = {}
    for result in results:
        for sd in result.declarations:
            sig = sd.declaration.signature
            existing = merged.get(sig)
            if existing is not None:
                raise DuplicateDeclarationError(
                    sig, existing.declaration.origin, sd.declaration.origin
                )
            merged[sig] = sd
    return merged
