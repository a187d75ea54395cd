"""Data models for compilation units and the declarations they define."""

from dataclasses import dataclass, field

from javadoc_to_md.signature import erase_type

PACKAGE = "package"
TYPE = "type"
METHOD = "method"
FIELD = "field"
CONSTRUCTOR = "constructor"

DECLARATION_KINDS = (PACKAGE, TYPE, METHOD, FIELD, CONSTRUCTOR)
TYPE_KINDS = ("class", "interface", "enum", "annotation", "record")


@dataclass(frozen=True)
class Parameter:
    """A formal parameter of a method or constructor."""

    name: str
    type: str  # as written, e.g. List<String>


@dataclass
class Declaration:
    """A documentable entity: package, type, method, field or constructor."""

    kind: str
    name: str
    signature: str
    package: str
    origin: str  # path of the defining compilation unit
    enclosing: str | None = None
    type_kind: str = ""  # class/interface/enum/... for types only
    parameters: tuple[Parameter, ...] = ()
    type_parameters: tuple[str, ...] = ()
    return_type: str | None = None
    exceptions: tuple[str, ...] = ()
    supertypes: tuple[str, ...] = ()  # extends
    interfaces: tuple[str, ...] = ()  # implements
    modifiers: tuple[str, ...] = ()
    raw_doc: str = ""
    constant_value: str | None = None
    line: int | None = None
    members: list["Declaration"] = field(default_factory=list)

    @property
    def is_private(self) -> bool:
        return "private" in self.modifiers

    @property
    def all_supertypes(self) -> tuple[str, ...]:
        return self.supertypes + self.interfaces

    @property
    def is_callable(self) -> bool:
        return self.kind in (METHOD, CONSTRUCTOR)

    @property
    def label(self) -> str:
        """Heading text: ``m(int, String)``, ``f`` or the type name."""
        if self.is_callable:
            args = ", ".join(erase_type(p.type) for p in self.parameters)
            return f"{self.name}({args})"
        return self.name


@dataclass
class CompilationUnit:
    """An already-parsed Java source file, as supplied by the host."""

    path: str
    package: str
    imports: tuple[str, ...] = ()
    declarations: list[Declaration] = field(default_factory=list)
    package_doc: str = ""
