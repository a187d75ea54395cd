"""The conversion pipeline: units in, rendered Markdown documents out.

``convert`` does no I/O. Scanning and rendering fan out over a bounded
thread pool; the model is built and references are resolved on the calling
thread, which is the only writer.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from functools import partial
from typing import Any

from javadoc_to_md.build_link_targets import build_link_targets
from javadoc_to_md.declaration import CompilationUnit
from javadoc_to_md.documentation_model import DocumentationModel
from javadoc_to_md.errors import UnresolvedReferenceError
from javadoc_to_md.model_builder import build_model
from javadoc_to_md.options import ConverterOptions
from javadoc_to_md.reference_resolver import ReferenceResolver
from javadoc_to_md.render_package_page import render_package_page
from javadoc_to_md.render_summary_page import render_summary_page
from javadoc_to_md.render_type_page import render_type_page
from javadoc_to_md.rendered_document import RenderedDocument
from javadoc_to_md.scanner import scan_unit

logger = logging.getLogger(__name__)

Mapper = Callable[[Callable[[Any], Any], Iterable[Any]], Iterator[Any]]


@contextmanager
def worker_map(workers: int) -> Iterator[Mapper]:
    """Yield an order-preserving ``map``; parallel when ``workers > 1``."""
    if workers <= 1:
        yield map
        return
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="javadoc_to_md") as pool:
        yield pool.map


def build_documentation_model(
    units: Iterable[CompilationUnit],
    options: ConverterOptions,
    mapper: Mapper = map,
) -> DocumentationModel:
    """Scan every unit, build the model and resolve its references.

    Raises UnresolvedReferenceError in strict mode.
    """
    scan = partial(
        scan_unit,
        include_private=options.include_private,
        custom_tags=options.custom_tags,
        ignore_modifiers=options.ignore_modifiers,
    )
    results = list(mapper(scan, units))
    logger.info("Scanned %d compilation units", len(results))

    model = build_model(results)
    ReferenceResolver(model, options.external_links).resolve_model()

    if options.fail_on_unresolved_reference:
        unresolved = model.unresolved_references()
        if unresolved:
            raise UnresolvedReferenceError([r.reason or r.text for r in unresolved])
    return model


def render_documents(
    model: DocumentationModel,
    options: ConverterOptions,
    mapper: Mapper = map,
) -> list[RenderedDocument]:
    """Render every type and package document, sorted by identifier."""
    targets = build_link_targets(model)
    jobs: list[Callable[[], RenderedDocument]] = [
        partial(render_type_page, model, targets, options, sig)
        for sig in model.top_level_types()
    ]
    packages = model.packages()
    if model.types_in_package(""):
        packages.insert(0, "")
    jobs += [
        partial(render_package_page, model, targets, options, package)
        for package in packages
    ]
    documents = list(mapper(_run, jobs))
    if options.generate_summary:
        documents.append(render_summary_page(model, targets, options))

    documents.sort(key=lambda d: d.identifier)
    for doc in documents:
        for warning in doc.warnings:
            logger.debug("%s: %s", doc.identifier, warning)
    logger.info("Rendered %d documents", len(documents))
    return documents


def convert(
    units: Iterable[CompilationUnit],
    options: ConverterOptions | None = None,
) -> list[RenderedDocument]:
    """Convert compilation units to Markdown documents.

    Fatal errors (duplicate declarations, unresolved references in strict
    mode) propagate and no documents are produced.
    """
    options = options or ConverterOptions()
    units = list(units)
    with worker_map(options.workers) as mapper:
        model = build_documentation_model(units, options, mapper)
        return render_documents(model, options, mapper)


def _run(job: Callable[[], RenderedDocument]) -> RenderedDocument:
    return job()
