"""Tests for flattening and merging compilation units."""

import pytest

from javadoc_to_md.declaration import PACKAGE, CompilationUnit
from javadoc_to_md.errors import DuplicateDeclarationError
from javadoc_to_md.load_compilation_unit import unit_from_mapping
from javadoc_to_md.scanner import merge_scan_results, scan_unit


def make_unit(path: str, package: str, types: list[dict], **extra: object) -> CompilationUnit:
    """Create a CompilationUnit from a descriptor mapping."""
    return unit_from_mapping({"path": path, "package": package, "types": types, **extra}, path)


UNIT = make_unit(
    "p/A.java",
    "p",
    [
        {
            "name": "A",
            "doc": "/** A class. */",
            "methods": [
                {"name": "visible"},
                {"name": "hidden", "modifiers": ["private"], "doc": "/** Secret. */"},
            ],
            "types": [
                {
                    "name": "Secret",
                    "modifiers": ["private"],
                    "methods": [{"name": "inner", "modifiers": ["public"]}],
                }
            ],
        }
    ],
)


def test_scan_is_preorder_and_skips_private() -> None:
    """Private members and everything nested under them are dropped."""
    result = scan_unit(UNIT)
    assert [sd.declaration.signature for sd in result.declarations] == [
        "p.A",
        "p.A#visible()",
    ]


def test_include_private() -> None:
    """includePrivate keeps private subtrees."""
    result = scan_unit(UNIT, include_private=True)
    assert [sd.declaration.signature for sd in result.declarations] == [
        "p.A",
        "p.A#visible()",
        "p.A#hidden()",
        "p.A.Secret",
        "p.A.Secret#inner()",
    ]


def test_ignore_modifiers_skip_subtrees() -> None:
    """Declarations carrying an ignored modifier are dropped with their members."""
    unit = make_unit(
        "p/A.java",
        "p",
        [
            {
                "name": "A",
                "methods": [
                    {"name": "open", "modifiers": ["public"]},
                    {"name": "hook", "modifiers": ["protected"]},
                ],
                "types": [
                    {
                        "name": "Base",
                        "modifiers": ["protected", "static"],
                        "methods": [{"name": "run", "modifiers": ["public"]}],
                    }
                ],
            }
        ],
    )
    result = scan_unit(unit, ignore_modifiers=["protected"])
    assert [sd.declaration.signature for sd in result.declarations] == [
        "p.A",
        "p.A#open()",
    ]


def test_empty_comments_are_kept() -> None:
    """Undocumented declarations are scanned with an empty comment."""
    result = scan_unit(UNIT)
    visible = result.declarations[1]
    assert visible.comment.is_empty


def test_package_doc_becomes_declaration() -> None:
    """A package-info comment yields a package declaration."""
    unit = make_unit("p/package-info.java", "p", [], packageDoc="/** The p package. */")
    result = scan_unit(unit)
    assert len(result.declarations) == 1
    decl = result.declarations[0].declaration
    assert decl.kind == PACKAGE
    assert decl.signature == "p"


def test_duplicate_signature_is_fatal() -> None:
    """Two units declaring the same type abort the merge."""
    first = scan_unit(make_unit("a/A.java", "p", [{"name": "A"}]))
    second = scan_unit(make_unit("b/A.java", "p", [{"name": "A"}]))
    with pytest.raises(DuplicateDeclarationError) as exc_info:
        merge_scan_results([first, second])
    err = exc_info.value
    assert err.signature == "p.A"
    assert (err.first_origin, err.second_origin) == ("a/A.java", "b/A.java")
    assert str(err) == "duplicate declaration p.A: declared in a/A.java and in b/A.java"
