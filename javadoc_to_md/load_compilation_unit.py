"""Logic for loading compilation unit descriptors (YAML or JSON)."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from javadoc_to_md.declaration import (
    CONSTRUCTOR,
    FIELD,
    METHOD,
    TYPE,
    TYPE_KINDS,
    CompilationUnit,
    Declaration,
    Parameter,
)
from javadoc_to_md.errors import UnitFormatError
from javadoc_to_md.signature import member_signature, type_signature

logger = logging.getLogger(__name__)

UNIT_SUFFIXES = (".yml", ".yaml", ".json")
ENUM_CONSTANT_MODIFIERS = ("public", "static", "final")


def find_unit_files(units_dir: Path) -> list[Path]:
    """Every descriptor under ``units_dir``, in a stable order."""
    return sorted(p for p in units_dir.rglob("*") if p.suffix in UNIT_SUFFIXES and p.is_file())


def load_compilation_unit(path: Path) -> CompilationUnit:
    """Load and validate one unit descriptor; raises UnitFormatError."""
    text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text) if path.suffix == ".json" else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise UnitFormatError(str(path), f"cannot parse descriptor: {exc}") from exc
    return unit_from_mapping(data, str(path))


def unit_from_mapping(data: Any, source: str) -> CompilationUnit:
    """Build a CompilationUnit from an already-parsed descriptor mapping."""
    reader = _Reader(source)
    if not isinstance(data, dict):
        raise UnitFormatError(source, "top level must be a mapping")

    origin = reader.string(data, "path", "") or source
    package = reader.string(data, "package", "")
    types = [
        reader.type_declaration(t, package, None, origin, f"types[{i}]")
        for i, t in enumerate(reader.items(data, "types", ""))
    ]
    unit = CompilationUnit(
        path=origin,
        package=package,
        imports=tuple(reader.strings(data, "imports", "")),
        declarations=types,
        package_doc=reader.string(data, "packageDoc", ""),
    )
    logger.debug("Loaded %s: %d top-level types", source, len(types))
    return unit


class _Reader:
    """Typed access to descriptor fields; errors name the file and field."""

    def __init__(self, source: str) -> None:
        """Remember the descriptor file for error messages."""
        self.source = source

    def fail(self, where: str, detail: str) -> UnitFormatError:
        return UnitFormatError(self.source, f"{where}: {detail}" if where else detail)

    def string(self, data: dict[str, Any], key: str, where: str, default: str = "") -> str:
        value = data.get(key)
        if value is None:
            return default
        if not isinstance(value, str):
            raise self.fail(_join(where, key), f"expected a string, got {value!r}")
        return value

    def required(self, data: dict[str, Any], key: str, where: str) -> str:
        value = self.string(data, key, where)
        if not value:
            raise self.fail(_join(where, key), "is required")
        return value

    def items(self, data: dict[str, Any], key: str, where: str) -> list[Any]:
        value = data.get(key)
        if value is None:
            return []
        if not isinstance(value, list):
            raise self.fail(_join(where, key), "expected a list")
        return value

    def strings(self, data: dict[str, Any], key: str, where: str) -> list[str]:
        values = self.items(data, key, where)
        for i, v in enumerate(values):
            if not isinstance(v, str):
                raise self.fail(f"{_join(where, key)}[{i}]", f"expected a string, got {v!r}")
        return values

    def mapping(self, value: Any, where: str) -> dict[str, Any]:
        if not isinstance(value, dict):
            raise self.fail(where, "expected a mapping")
        return value

    def line(self, data: dict[str, Any], where: str) -> int | None:
        value = data.get("line")
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, int):
            raise self.fail(_join(where, "line"), f"expected an integer, got {value!r}")
        return value

    def parameters(self, data: dict[str, Any], where: str) -> tuple[Parameter, ...]:
        params = []
        for i, raw in enumerate(self.items(data, "parameters", where)):
            pwhere = f"{_join(where, 'parameters')}[{i}]"
            p = self.mapping(raw, pwhere)
            params.append(
                Parameter(self.required(p, "name", pwhere), self.required(p, "type", pwhere))
            )
        return tuple(params)

    def type_declaration(
        self,
        raw: Any,
        package: str,
        enclosing: str | None,
        origin: str,
        where: str,
    ) -> Declaration:
        data = self.mapping(raw, where)
        name = self.required(data, "name", where)
        kind = self.string(data, "kind", where, "class")
        if kind not in TYPE_KINDS:
            raise self.fail(_join(where, "kind"), f"must be one of {', '.join(TYPE_KINDS)}")
        sig = type_signature(package, name, enclosing)
        decl = Declaration(
            kind=TYPE,
            name=name,
            signature=sig,
            package=package,
            origin=origin,
            enclosing=enclosing,
            type_kind=kind,
            type_parameters=tuple(self.strings(data, "typeParameters", where)),
            supertypes=tuple(self.strings(data, "extends", where)),
            interfaces=tuple(self.strings(data, "implements", where)),
            modifiers=tuple(self.strings(data, "modifiers", where)),
            raw_doc=self.string(data, "doc", where),
            line=self.line(data, where),
        )

        for i, c in enumerate(self.items(data, "constants", where)):
            cwhere = f"{_join(where, 'constants')}[{i}]"
            c = self.mapping(c, cwhere)
            cname = self.required(c, "name", cwhere)
            decl.members.append(
                Declaration(
                    kind=FIELD,
                    name=cname,
                    signature=member_signature(sig, cname),
                    package=package,
                    origin=origin,
                    enclosing=sig,
                    return_type=name,
                    modifiers=ENUM_CONSTANT_MODIFIERS,
                    raw_doc=self.string(c, "doc", cwhere),
                    line=self.line(c, cwhere),
                )
            )

        for i, f in enumerate(self.items(data, "fields", where)):
            fwhere = f"{_join(where, 'fields')}[{i}]"
            f = self.mapping(f, fwhere)
            fname = self.required(f, "name", fwhere)
            value = f.get("value")
            decl.members.append(
                Declaration(
                    kind=FIELD,
                    name=fname,
                    signature=member_signature(sig, fname),
                    package=package,
                    origin=origin,
                    enclosing=sig,
                    return_type=self.required(f, "type", fwhere),
                    modifiers=tuple(self.strings(f, "modifiers", fwhere)),
                    raw_doc=self.string(f, "doc", fwhere),
                    constant_value=_constant_text(value),
                    line=self.line(f, fwhere),
                )
            )

        for i, c in enumerate(self.items(data, "constructors", where)):
            cwhere = f"{_join(where, 'constructors')}[{i}]"
            decl.members.append(self.callable(c, CONSTRUCTOR, name, sig, package, origin, cwhere))

        for i, m in enumerate(self.items(data, "methods", where)):
            mwhere = f"{_join(where, 'methods')}[{i}]"
            mname = self.required(self.mapping(m, mwhere), "name", mwhere)
            decl.members.append(self.callable(m, METHOD, mname, sig, package, origin, mwhere))

        for i, t in enumerate(self.items(data, "types", where)):
            decl.members.append(
                self.type_declaration(t, package, sig, origin, f"{_join(where, 'types')}[{i}]")
            )
        return decl

    def callable(
        self,
        raw: Any,
        kind: str,
        name: str,
        owner: str,
        package: str,
        origin: str,
        where: str,
    ) -> Declaration:
        data = self.mapping(raw, where)
        params = self.parameters(data, where)
        return Declaration(
            kind=kind,
            name=name,
            signature=member_signature(owner, name, [p.type for p in params]),
            package=package,
            origin=origin,
            enclosing=owner,
            parameters=params,
            type_parameters=tuple(self.strings(data, "typeParameters", where)),
            return_type=self.string(data, "returns", where, "void") if kind == METHOD else None,
            exceptions=tuple(self.strings(data, "throws", where)),
            modifiers=tuple(self.strings(data, "modifiers", where)),
            raw_doc=self.string(data, "doc", where),
            line=self.line(data, where),
        )


def _join(where: str, key: str) -> str:
    return f"{where}.{key}" if where else key


def _constant_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
