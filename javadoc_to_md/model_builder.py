"""Assemble the documentation model and apply documentation inheritance."""

import logging
from collections.abc import Iterable
from dataclasses import replace

from javadoc_to_md.declaration import METHOD, Declaration
from javadoc_to_md.doc_comment import BlockTag, DocComment, Segment, Text, is_inherit_doc
from javadoc_to_md.documentation_model import (
    DOCUMENTS,
    INHERITS_DOC_FROM,
    OVERRIDES,
    REFERENCES,
    DocumentationModel,
    Edge,
    ModelEntry,
)
from javadoc_to_md.scanner import ScanResult, merge_scan_results
from javadoc_to_md.signature import simple_type_name
from javadoc_to_md.type_lookup import qualify_type_name

logger = logging.getLogger(__name__)

NO_INHERITANCE_SOURCE = "no overridden declaration found to inherit documentation from"


def build_model(results: Iterable[ScanResult]) -> DocumentationModel:
    """Merge scan results into one model; references stay unqualified.

    Must see every unit before returning: inheritance looks across files.
    """
    results = list(results)
    merged = merge_scan_results(results)

    entries = {
        sig: ModelEntry(
            declaration=sd.declaration,
            comment=sd.comment,
            effective_comment=sd.comment,
        )
        for sig, sd in merged.items()
    }
    model = DocumentationModel(
        entries=entries,
        imports={r.path: r.imports for r in results},
    )

    for sig, entry in entries.items():
        if not entry.comment.is_empty:
            model.edges.append(Edge(DOCUMENTS, sig, sig))
        for ref in entry.comment.references():
            model.references.append(ref)
            model.edges.append(Edge(REFERENCES, sig, ref.text))
        _check_tag_names(model, entry)

    for sig, entry in entries.items():
        if entry.declaration.kind == METHOD:
            _link_override(model, entry)
        elif entry.comment.inherits_doc:
            model.add_warning(sig, "{@inheritDoc} used outside a method")

    builder = _EffectiveCommentBuilder(model)
    for sig in entries:
        entries[sig].effective_comment = builder.effective(sig)

    logger.info(
        "Built documentation model: %d declarations, %d references",
        len(entries),
        len(model.references),
    )
    return model


def find_overridden(model: DocumentationModel, method: Declaration) -> list[str]:
    """Return the nearest structurally matching overridden methods.

    Walks the supertypes named on the enclosing type breadth-first; only the
    candidates found at the nearest depth are returned, in declared order.
    """
    owner = method.enclosing
    if owner is None or owner not in model:
        return []
    wanted = [simple_type_name(p.type) for p in method.parameters]

    seen = {owner}
    frontier = [owner]
    while frontier:
        found: list[str] = []
        next_frontier: list[str] = []
        for type_sig in frontier:
            for super_name in model.declaration(type_sig).all_supertypes:
                qualified = qualify_type_name(model, super_name, type_sig)
                if qualified is None or qualified[0] in seen:
                    continue
                super_sig = qualified[0]
                seen.add(super_sig)
                next_frontier.append(super_sig)
                for m in model.members_of(super_sig):
                    if (
                        m.kind == METHOD
                        and m.name == method.name
                        and [simple_type_name(p.type) for p in m.parameters] == wanted
                    ):
                        found.append(m.signature)
        if found:
            return found
        frontier = next_frontier
    return []


def _link_override(model: DocumentationModel, entry: ModelEntry) -> None:
    decl = entry.declaration
    candidates = find_overridden(model, decl)
    if candidates:
        entry.overrides = candidates[0]
        model.edges.append(Edge(OVERRIDES, decl.signature, candidates[0]))

    if not (entry.comment.is_empty or entry.comment.inherits_doc):
        return
    if not candidates:
        model.add_warning(decl.signature, NO_INHERITANCE_SOURCE)
        return
    if len(candidates) > 1:
        model.add_warning(
            decl.signature,
            "ambiguous documentation inheritance: "
            f"{', '.join(candidates)} all match; using {candidates[0]}",
        )
    entry.inherits_from = candidates[0]
    model.edges.append(Edge(INHERITS_DOC_FROM, decl.signature, candidates[0]))


def _check_tag_names(model: DocumentationModel, entry: ModelEntry) -> None:
    """Warn about @param/@throws tags that do not match the declaration."""
    decl = entry.declaration
    params = {p.name for p in decl.parameters}
    type_params = {f"<{t}>" for t in decl.type_parameters}
    declared = {simple_type_name(e) for e in decl.exceptions}

    for tag in entry.comment.tags("param"):
        if tag.argument and tag.argument not in params | type_params:
            model.add_warning(
                decl.signature,
                f"@param {tag.argument} does not match any parameter of {decl.label}",
            )
    for tag in entry.comment.tags("throws", "exception"):
        if tag.argument and simple_type_name(tag.argument) not in declared:
            model.add_warning(
                decl.signature,
                f"@{tag.name} {tag.argument} is not declared by {decl.label}",
            )


class _EffectiveCommentBuilder:
    """Compute the comment each declaration renders, following inherits-doc-from."""

    def __init__(self, model: DocumentationModel) -> None:
        """Bind to a model whose inheritance edges are already recorded."""
        self.model = model
        self.memo: dict[str, DocComment] = {}

    def effective(self, signature: str, stack: frozenset[str] = frozenset()) -> DocComment:
        if signature in self.memo:
            return self.memo[signature]
        entry = self.model.entries[signature]
        source = entry.inherits_from
        if source is None or source in stack or signature in stack:
            result = entry.comment
        else:
            inherited = self.effective(source, stack | {signature})
            result = _merge(
                entry.comment,
                inherited,
                entry.declaration,
                self.model.declaration(source),
            )
        self.memo[signature] = result
        return result


def _merge(
    own: DocComment,
    inherited: DocComment,
    decl: Declaration,
    source: Declaration,
) -> DocComment:
    body = _splice(own.body if _has_body(own.body) else (), inherited.body)

    params = _inherited_params(inherited, decl, source)
    tags = [_expand_tag(t, _counterpart(t, inherited, params)) for t in own.block_tags]
    if not own.tags("return"):
        tags.extend(inherited.tags("return"))

    own_params = {t.argument for t in own.tags("param")}
    for name, tag in params.items():
        if name not in own_params:
            tags.append(BlockTag(name="param", argument=name, description=tag.description))

    own_throws = {simple_type_name(t.argument or "") for t in own.tags("throws", "exception")}
    for tag in inherited.tags("throws", "exception"):
        if simple_type_name(tag.argument or "") not in own_throws:
            tags.append(tag)

    return DocComment(body=body, block_tags=tuple(tags), warnings=own.warnings)


def _splice(segments: tuple[Segment, ...], inherited: tuple[Segment, ...]) -> tuple[Segment, ...]:
    """Replace each {@inheritDoc} in ``segments``; with none, return ``inherited``."""
    source = [s for s in inherited if not is_inherit_doc(s)]
    if not segments:
        return tuple(source)
    expanded: list[Segment] = []
    for seg in segments:
        if is_inherit_doc(seg):
            expanded.extend(source)
        else:
            expanded.append(seg)
    return tuple(expanded)


def _inherited_params(
    inherited: DocComment,
    decl: Declaration,
    source: Declaration,
) -> dict[str, BlockTag]:
    """Inherited @param tags keyed by the overriding method's parameter names."""
    positions = {p.name: i for i, p in enumerate(source.parameters)}
    params: dict[str, BlockTag] = {}
    for tag in inherited.tags("param"):
        pos = positions.get(tag.argument or "")
        if pos is None or pos >= len(decl.parameters):
            continue
        params.setdefault(decl.parameters[pos].name, tag)
    return params


def _counterpart(
    tag: BlockTag,
    inherited: DocComment,
    params: dict[str, BlockTag],
) -> BlockTag | None:
    """The inherited tag a block tag's {@inheritDoc} copies from."""
    if tag.name == "return":
        return inherited.first_tag("return")
    if tag.name == "param":
        return params.get(tag.argument or "")
    if tag.name in ("throws", "exception"):
        wanted = simple_type_name(tag.argument or "")
        for candidate in inherited.tags("throws", "exception"):
            if simple_type_name(candidate.argument or "") == wanted:
                return candidate
    return None


def _expand_tag(tag: BlockTag, counterpart: BlockTag | None) -> BlockTag:
    if not any(is_inherit_doc(s) for s in tag.description):
        return tag
    description = _splice(tag.description, counterpart.description if counterpart else ())
    return replace(tag, description=description)


def _has_body(body: tuple[Segment, ...]) -> bool:
    return any(not (isinstance(s, Text) and not s.text.strip()) for s in body)
