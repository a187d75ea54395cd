"""Logic for writing rendered documents to disk."""

import logging
import shutil
from collections.abc import Iterable
from pathlib import Path

from javadoc_to_md.rendered_document import RenderedDocument

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


def output_file_for_document(out_root: Path, identifier: str) -> Path:
    """``p/A`` is written to ``out_root/p/A.md``; parent folders are created."""
    p = out_root / (identifier + MARKDOWN_SUFFIX)
    p.parent.mkdir(parents=True, exist_ok=True)
    return p


def write_documents(
    documents: Iterable[RenderedDocument],
    out_root: Path,
    *,
    clean: bool = False,
) -> int:
    """Write every document under ``out_root`` and return how many were written.

    With ``clean`` the output directory is removed first.
    """
    if clean and out_root.exists():
        logger.info("Removing %s", out_root)
        shutil.rmtree(out_root)
    out_root.mkdir(parents=True, exist_ok=True)

    documents = list(documents)
    total = len(documents)
    print(f"Writing {total} documents...")
    written = 0
    for doc in documents:
        output_file_for_document(out_root, doc.identifier).write_bytes(doc.data)
        written += 1
        if written % 50 == 0:
            print(f"  ... wrote {written}/{total} documents")
    return written
