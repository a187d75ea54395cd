"""Parsed form of a documentation comment."""

from collections.abc import Iterator
from dataclasses import dataclass

from javadoc_to_md.reference import Reference

ALLOWED_HTML = frozenset({"p", "pre", "code", "ul", "li", "b", "i", "a"})


@dataclass(frozen=True)
class Text:
    """Free-form text."""

    text: str


@dataclass(frozen=True)
class InlineTag:
    """An inline tag such as ``{@link Foo#bar label}`` or ``{@code x}``."""

    name: str
    text: str  # raw payload after the tag name
    reference: Reference | None = None
    label: str = ""
    segments: tuple["Segment", ...] = ()  # parsed payload of {@summary}, {@index}, {@return}


@dataclass(frozen=True)
class HtmlSpan:
    """A single HTML start, end or self-closing tag."""

    tag: str  # lower-cased element name
    raw: str  # the tag exactly as written
    closing: bool = False
    attributes: tuple[tuple[str, str], ...] = ()

    @property
    def allowed(self) -> bool:
        return self.tag in ALLOWED_HTML

    def attribute(self, name: str) -> str | None:
        for key, value in self.attributes:
            if key == name:
                return value
        return None


Segment = Text | InlineTag | HtmlSpan


@dataclass(frozen=True)
class BlockTag:
    """A block tag such as ``@param x the x value``."""

    name: str
    description: tuple[Segment, ...] = ()
    argument: str | None = None  # param name, exception type or @see target
    reference: Reference | None = None
    known: bool = True


@dataclass(frozen=True)
class DocComment:
    """Body segments plus block tags, created once by the tag parser."""

    body: tuple[Segment, ...] = ()
    block_tags: tuple[BlockTag, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.block_tags and all(
            isinstance(s, Text) and not s.text.strip() for s in self.body
        )

    @property
    def inherits_doc(self) -> bool:
        """True when the body or any block tag description holds {@inheritDoc}."""
        if any(is_inherit_doc(s) for s in self.body):
            return True
        return any(is_inherit_doc(s) for t in self.block_tags for s in t.description)

    def tags(self, *names: str) -> list[BlockTag]:
        return [t for t in self.block_tags if t.name in names]

    def first_tag(self, *names: str) -> BlockTag | None:
        found = self.tags(*names)
        return found[0] if found else None

    def references(self) -> Iterator[Reference]:
        """Yield every reference owned by this comment, in source order."""
        for seg in self.body:
            yield from _segment_references(seg)
        for tag in self.block_tags:
            if tag.reference is not None:
                yield tag.reference
            for seg in tag.description:
                yield from _segment_references(seg)


def is_inherit_doc(segment: Segment) -> bool:
    return isinstance(segment, InlineTag) and segment.name == "inheritDoc"


def _segment_references(segment: Segment) -> Iterator[Reference]:
    if not isinstance(segment, InlineTag):
        return
    if segment.reference is not None:
        yield segment.reference
    for nested in segment.segments:
        yield from _segment_references(nested)
