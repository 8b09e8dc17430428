"""Utility helpers for working with markdown files on disk."""

from __future__ import annotations

import posixpath
from pathlib import Path
from typing import Optional

DOC_EXTENSION = ".md"


def has_doc_extension(name: str) -> bool:
    """Return True when *name* ends in the markdown extension, any casing."""
    return name.lower().endswith(DOC_EXTENSION)


def strip_doc_extension(name: str) -> str:
    """Remove a trailing markdown extension, any casing."""
    if has_doc_extension(name):
        return name[: -len(DOC_EXTENSION)]
    return name


def resolve_document_path(root: Path, url_path: str) -> Optional[Path]:
    """Map a URL path to an existing markdown file beneath *root*.

    The lower-case extension is tried first, then the upper-case one.
    The URL path is normalised before lookup so `..` cannot climb above
    *root*; symlinked documents listed by the scanner are still served.
    Returns None when neither file exists.
    """
    if "\0" in url_path:
        return None
    relative = posixpath.normpath("/" + url_path.strip("/")).lstrip("/")
    if not relative or relative == ".":
        return None

    base = root.resolve()
    for extension in (DOC_EXTENSION, DOC_EXTENSION.upper()):
        candidate = base / (relative + extension)
        if candidate.is_file():
            return candidate
    return None


def read_document(root: Path, url_path: str) -> Optional[bytes]:
    """Read the raw bytes of the document addressed by *url_path*.

    A file that disappears between lookup and read is reported as missing.
    """
    path = resolve_document_path(root, url_path)
    if path is None:
        return None
    try:
        return path.read_bytes()
    except FileNotFoundError:
        return None
