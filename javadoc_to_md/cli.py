"""Convert Java documentation comments to Markdown.

Reads compilation unit descriptors (YAML or JSON, one per Java source file)
from a directory and writes one Markdown document per top-level type plus a
package index per package.
"""

import argparse
import logging
import sys
from pathlib import Path

from javadoc_to_md.errors import JavadocToMdError
from javadoc_to_md.run_conversion import run_conversion

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="javadoc-to-md",
        description="Convert Javadoc comments in Java compilation units to Markdown.",
    )
    ap.add_argument(
        "units_dir",
        type=Path,
        help="Directory containing compilation unit descriptors (*.yml, *.yaml, *.json)",
    )
    ap.add_argument(
        "out_dir",
        type=Path,
        help="Output directory for the generated Markdown",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--lint",
        action="store_true",
        help="Report documentation problems instead of writing documents",
    )
    ap.add_argument(
        "--clean",
        action="store_true",
        help="Delete the output directory before writing",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Run the whole pipeline but write nothing",
    )
    ap.add_argument(
        "--summary",
        action="store_true",
        help="Also write a SUMMARY.md table of contents",
    )
    ap.add_argument(
        "--include-private",
        action="store_true",
        help="Document private declarations too",
    )
    ap.add_argument(
        "-i",
        "--ignore",
        action="append",
        default=[],
        metavar="MODIFIER",
        help="Skip declarations with this modifier (repeatable), e.g. protected",
    )
    ap.add_argument(
        "--fail-on-unresolved",
        action="store_true",
        help="Fail when any reference cannot be resolved",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output, including every warning",
    )
    return ap


def main() -> int:
    """Run the conversion process."""
    args = build_parser().parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return run_conversion(args)
    except JavadocToMdError as exc:
        logger.debug("Conversion failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
