"""The documentation model: every documented entity keyed by signature.

All declarations live in one dictionary (an arena); relations between them
(enclosing type, overrides, inherited docs, references) are signature
strings, never object pointers, so mutually linking types form no cycles.
"""

from dataclasses import dataclass, field

from javadoc_to_md.declaration import PACKAGE, TYPE, Declaration
from javadoc_to_md.doc_comment import DocComment
from javadoc_to_md.reference import UNRESOLVED, Reference

DOCUMENTS = "documents"
OVERRIDES = "overrides"
INHERITS_DOC_FROM = "inherits-doc-from"
REFERENCES = "references"


@dataclass
class ModelEntry:
    """A declaration, its own comment and the comment actually rendered."""

    declaration: Declaration
    comment: DocComment
    effective_comment: DocComment
    inherits_from: str | None = None
    overrides: str | None = None


@dataclass(frozen=True)
class Edge:
    """A directed, typed relation between two model nodes."""

    kind: str
    source: str
    target: str


@dataclass
class DocumentationModel:
    """Arena of documented entities plus every reference found in comments."""

    entries: dict[str, ModelEntry]
    imports: dict[str, tuple[str, ...]] = field(default_factory=dict)  # by origin
    edges: list[Edge] = field(default_factory=list)
    references: list[Reference] = field(default_factory=list)
    warnings: dict[str, list[str]] = field(default_factory=dict)
    _members: dict[str, list[str]] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        """Index members by their enclosing declaration."""
        for sig, entry in self.entries.items():
            parent = entry.declaration.enclosing
            if parent:
                self._members.setdefault(parent, []).append(sig)

    def __contains__(self, signature: object) -> bool:
        return signature in self.entries

    def get(self, signature: str) -> ModelEntry | None:
        return self.entries.get(signature)

    def declaration(self, signature: str) -> Declaration:
        return self.entries[signature].declaration

    def is_type(self, signature: str) -> bool:
        entry = self.entries.get(signature)
        return entry is not None and entry.declaration.kind == TYPE

    def members_of(self, signature: str) -> list[Declaration]:
        """Direct members (and nested types) of a type, in declaration order."""
        return [self.entries[s].declaration for s in self._members.get(signature, [])]

    def imports_for(self, signature: str) -> tuple[str, ...]:
        entry = self.entries.get(signature)
        if entry is None:
            return ()
        return self.imports.get(entry.declaration.origin, ())

    def package_of(self, signature: str) -> str:
        entry = self.entries.get(signature)
        return entry.declaration.package if entry else ""

    def enclosing_types(self, signature: str) -> list[str]:
        """Types enclosing ``signature``, nearest first; a type includes itself."""
        chain: list[str] = []
        current: str | None = signature
        while current:
            entry = self.entries.get(current)
            if entry is None:
                break
            if entry.declaration.kind == TYPE:
                chain.append(current)
            current = entry.declaration.enclosing
        return chain

    def top_level_type(self, signature: str) -> str | None:
        chain = self.enclosing_types(signature)
        return chain[-1] if chain else None

    def top_level_types(self) -> list[str]:
        return sorted(
            sig
            for sig, e in self.entries.items()
            if e.declaration.kind == TYPE and not e.declaration.enclosing
        )

    def packages(self) -> list[str]:
        """Every package that holds a type or has package documentation."""
        names = {
            e.declaration.package
            for e in self.entries.values()
            if e.declaration.kind in (TYPE, PACKAGE)
        }
        return sorted(n for n in names if n)

    def types_in_package(self, package: str) -> list[str]:
        return [
            sig for sig in self.top_level_types() if self.package_of(sig) == package
        ]

    def add_warning(self, signature: str, message: str) -> None:
        self.warnings.setdefault(signature, []).append(message)

    def warnings_for(self, signature: str) -> list[str]:
        return list(self.warnings.get(signature, []))

    def edges_of(self, kind: str) -> list[Edge]:
        return [e for e in self.edges if e.kind == kind]

    def unresolved_references(self) -> list[Reference]:
        return [r for r in self.references if r.state == UNRESOLVED]
