"""Helpers for building and normalizing declaration signatures.

Signatures are the keys of the documentation model:

- package: ``p.q``
- type: ``p.A``, nested ``p.A.Inner``
- method / constructor: ``p.A#m(int,String[])``
- field: ``p.A#f``
"""

import re

ANNOTATION_RE = re.compile(r"@[\w.]+(?:\([^)]*\))?\s*")
WHITESPACE_RE = re.compile(r"\s+")


def strip_generics(text: str) -> str:
    """Remove every ``<...>`` group, including nested ones."""
    out: list[str] = []
    depth = 0
    for ch in text:
        if ch == "<":
            depth += 1
        elif ch == ">":
            depth = max(depth - 1, 0)
        elif depth == 0:
            out.append(ch)
    return "".join(out)


def erase_type(type_text: str) -> str:
    """Erase a type as written in source to its signature form.

    ``final Map<K, V>`` becomes ``Map``, ``String...`` becomes ``String[]``.
    """
    t = ANNOTATION_RE.sub("", type_text or "")
    t = strip_generics(t)
    t = t.replace("final ", "")
    t = WHITESPACE_RE.sub("", t)
    if t.endswith("..."):
        t = t[:-3] + "[]"
    return t


def simple_type_name(type_text: str) -> str:
    """Return the erased type without its package/outer-type qualifier."""
    erased = erase_type(type_text)
    dims = ""
    while erased.endswith("[]"):
        dims += "[]"
        erased = erased[:-2]
    return erased.rsplit(".", 1)[-1] + dims


def type_signature(package: str, name: str, enclosing: str | None = None) -> str:
    """Build the signature of a top-level or nested type."""
    if enclosing:
        return f"{enclosing}.{name}"
    return f"{package}.{name}" if package else name


def member_signature(owner: str, name: str, param_types: list[str] | None = None) -> str:
    """Build the signature of a field (``param_types=None``) or callable."""
    if param_types is None:
        return f"{owner}#{name}"
    args = ",".join(erase_type(t) for t in param_types)
    return f"{owner}#{name}({args})"


def split_member(signature: str) -> tuple[str, str]:
    """Split ``p.A#m(int)`` into ``("p.A", "m(int)")``; types give ``(sig, "")``."""
    owner, sep, member = signature.partition("#")
    return (owner, member) if sep else (signature, "")


def parse_member_part(member: str) -> tuple[str, list[str] | None]:
    """Split ``m(int, String)`` into the name and erased parameter types.

    Returns ``None`` for the parameter list when no parentheses were written,
    so callers can tell a field/any-overload reference from ``m()``.
    """
    name, paren, rest = member.partition("(")
    if not paren:
        return member.strip(), None
    inner = rest.rsplit(")", 1)[0]
    params: list[str] = []
    for raw in _split_top_level(inner):
        words = ANNOTATION_RE.sub("", strip_generics(raw)).replace("final ", "").split()
        if not words:
            continue
        # "int count" -> "int": Javadoc tolerates parameter names here
        params.append(erase_type(words[0]))
    return name.strip(), params


def _split_top_level(text: str) -> list[str]:
    """Split on commas that are not inside generic brackets."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for ch in text:
        if ch == "<":
            depth += 1
        elif ch == ">":
            depth -= 1
        if ch == "," and depth == 0:
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    parts.append("".join(current))
    return parts


def display_name(signature: str, package: str = "") -> str:
    """Render a signature the way Javadoc displays it, ``A.m(int)``."""
    owner, member = split_member(signature)
    if package and owner.startswith(package + "."):
        owner = owner[len(package) + 1 :]
    if not member:
        return owner
    return f"{owner}.{member.replace(',', ', ')}"
