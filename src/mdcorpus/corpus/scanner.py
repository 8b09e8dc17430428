"""Discover markdown documents beneath the corpus root."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

from mdcorpus.models import DocumentEntry
from mdcorpus.utils.files import has_doc_extension, strip_doc_extension

LOGGER = logging.getLogger(__name__)


def _is_hidden(name: str) -> bool:
    return name.startswith(".")


def _raise(error: OSError) -> None:
    raise error


def scan_corpus(root: Path | str) -> List[DocumentEntry]:
    """Return every markdown document under *root*, sorted by relative path.

    Hidden files are skipped and hidden directories are pruned with their
    whole subtree. Any traversal error aborts the scan.
    """
    root_path = os.fspath(root)
    entries: List[DocumentEntry] = []

    for dirpath, dirnames, filenames in os.walk(root_path, onerror=_raise):
        # Pruning in place stops os.walk from descending.
        dirnames[:] = [name for name in dirnames if not _is_hidden(name)]

        for filename in filenames:
            if _is_hidden(filename) or not has_doc_extension(filename):
                continue
            relative = os.path.relpath(os.path.join(dirpath, filename), root_path)
            entries.append(
                DocumentEntry(
                    relative_path=Path(relative).as_posix(),
                    base_name=strip_doc_extension(filename),
                )
            )

    entries.sort(key=lambda entry: entry.relative_path)
    LOGGER.debug("Found %d markdown documents under %s", len(entries), root_path)
    return entries
