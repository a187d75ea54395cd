"""Data models for representing link targets."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkTarget:
    """Where a declaration is rendered: a document plus an optional anchor."""

    title: str
    document: str  # document identifier, e.g. p/A
    anchor: str = ""  # e.g. m-int-, empty for the document itself
