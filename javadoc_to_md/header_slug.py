"""Anchor ids for declarations rendered inside a type document."""

import re

from javadoc_to_md.signature import parse_member_part, split_member


def header_slug(s: str) -> str:
    """Slugify ``s`` GitHub style: lower case, runs of non-alnum become ``-``.

    Array brackets are spelled out so ``m(int[])`` and ``m(int)`` differ.
    """
    s = s.strip().replace("[]", "-array").lower()
    s = re.sub(r"[^a-z0-9]+", "-", s).strip("-")
    return s or "section"


def member_slug(member: str) -> str:
    """Slug of a member part: ``f`` for fields, ``x--`` or ``m-int-`` for callables."""
    name, params = parse_member_part(member)
    if params is None:
        return header_slug(name)
    return f"{header_slug(name)}-{'-'.join(header_slug(p) for p in params)}-"


def anchor_for(signature: str, top_level: str) -> str:
    """Anchor of ``signature`` within the document of type ``top_level``.

    Members of nested types carry the nested type path, so ``p.A.In#m()``
    on ``p/A`` becomes ``in-m--``.
    """
    owner, member = split_member(signature)
    nested = header_slug(owner[len(top_level) + 1 :]) if owner.startswith(top_level + ".") else ""
    slug = member_slug(member) if member else ""
    return "-".join(p for p in (nested, slug) if p)


def unique_anchor(anchor: str, taken: set[str]) -> str:
    """Return ``anchor`` or the first free ``anchor-N``, and mark it taken."""
    candidate = anchor
    n = 1
    while candidate in taken:
        candidate = f"{anchor}-{n}"
        n += 1
    taken.add(candidate)
    return candidate
