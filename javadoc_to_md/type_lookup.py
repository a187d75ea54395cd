"""Name qualification shared by doc inheritance and reference resolution."""

from typing import TYPE_CHECKING

from javadoc_to_md.declaration import FIELD, TYPE
from javadoc_to_md.signature import parse_member_part, simple_type_name

if TYPE_CHECKING:
    from javadoc_to_md.documentation_model import DocumentationModel


def import_candidates(name: str, imports: tuple[str, ...]) -> list[str]:
    """Qualify a (possibly dotted) simple name through a unit's imports.

    Single-type imports come first, on-demand (``.*``) imports after.
    The candidates are not checked against the model.
    """
    head, _, tail = name.partition(".")
    suffix = f".{tail}" if tail else ""
    single = [
        imp + suffix
        for imp in imports
        if not imp.endswith(".*") and imp.rsplit(".", 1)[-1] == head
    ]
    on_demand = [imp[:-2] + "." + name for imp in imports if imp.endswith(".*")]
    return single + on_demand


def qualify_type_name(
    model: "DocumentationModel",
    name: str,
    origin: str,
) -> tuple[str, str] | None:
    """Find the type ``name`` refers to when written in ``origin``'s comment.

    Returns ``(signature, rule)`` with rule one of ``exact``, ``member``,
    ``import`` or ``package``, or ``None`` when no type in the model matches.
    """
    if model.is_type(name):
        return name, "exact"

    for scope in model.enclosing_types(origin):
        candidate = f"{scope}.{name}"
        if model.is_type(candidate):
            return candidate, "member"

    for candidate in import_candidates(name, model.imports_for(origin)):
        if model.is_type(candidate):
            return candidate, "import"

    package = model.package_of(origin)
    candidate = f"{package}.{name}" if package else name
    if model.is_type(candidate):
        return candidate, "package"
    return None


def find_member(model: "DocumentationModel", type_sig: str, member: str) -> str | None:
    """Find ``m(int)``, ``m`` or ``f`` among the direct members of ``type_sig``.

    Without parentheses a field wins over methods; among overloads the
    lowest signature is chosen so the result is stable.
    """
    name, params = parse_member_part(member)
    candidates = [
        d for d in model.members_of(type_sig) if d.name == name and d.kind != TYPE
    ]
    if not candidates:
        return None

    if params is None:
        for d in candidates:
            if d.kind == FIELD:
                return d.signature
        callables = sorted(d.signature for d in candidates if d.is_callable)
        return callables[0] if callables else None

    wanted = [simple_type_name(p) for p in params]
    for d in candidates:
        if d.is_callable and [simple_type_name(p.type) for p in d.parameters] == wanted:
            return d.signature
    return None
