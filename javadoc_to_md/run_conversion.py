"""Orchestration: load descriptors, convert, lint or write."""

import argparse
import logging
from typing import Any

from javadoc_to_md.convert import build_documentation_model, render_documents, worker_map
from javadoc_to_md.errors import NoUnitDescriptorsError
from javadoc_to_md.lint import lint_model
from javadoc_to_md.load_compilation_unit import find_unit_files, load_compilation_unit
from javadoc_to_md.load_config import load_config
from javadoc_to_md.options import ConverterOptions
from javadoc_to_md.write_documents import write_documents

logger = logging.getLogger(__name__)


def options_from_args(args: argparse.Namespace) -> ConverterOptions:
    """Load the config file and let command-line flags override it."""
    config: dict[str, Any] = load_config(args.config)
    if args.include_private:
        config["includePrivate"] = True
    if args.fail_on_unresolved:
        config["failOnUnresolvedReference"] = True
    if args.summary:
        config["generateSummary"] = True
    ignored = config["ignoreModifiers"] or []
    if args.ignore and isinstance(ignored, list):
        config["ignoreModifiers"] = [*ignored, *args.ignore]
    return ConverterOptions.from_config(config)


def run_conversion(args: argparse.Namespace) -> int:
    """Execute the full conversion pipeline; returns the exit status."""
    unit_files = find_unit_files(args.units_dir)
    if not unit_files:
        msg = f"No unit descriptors (*.yml, *.yaml, *.json) found under: {args.units_dir}"
        raise NoUnitDescriptorsError(msg)

    options = options_from_args(args)
    units = [load_compilation_unit(p) for p in unit_files]
    logger.info("Loaded %d compilation units from %s", len(units), args.units_dir)

    with worker_map(options.workers) as mapper:
        model = build_documentation_model(units, options, mapper)
        if args.lint:
            return _report_lint(lint_model(model))
        documents = render_documents(model, options, mapper)

    warning_count = sum(len(d.warnings) for d in documents)
    if args.dry_run:
        print(f"Dry run: {len(documents)} documents, {warning_count} warnings")
        return 0

    out_root = args.out_dir.resolve()
    written = write_documents(documents, out_root, clean=args.clean)
    print(f"Generated {written} Markdown documents into: {out_root}")
    if warning_count:
        print(f"{warning_count} warnings (run with -v to list them)")
    return 0


def _report_lint(findings: list[str]) -> int:
    for finding in findings:
        print(finding)
    print(f"{len(findings)} problems found")
    return 1 if findings else 0
