"""Rewrite links between markdown documents into server routes.

Authors link sibling files the way they would when browsing the repository
(``[setup](../guide/setup.md)``); the served site addresses the same
documents through extension-free routes (``/guide/setup``).

When a fragment contains a link to rewrite it is parsed and serialised again
with BeautifulSoup. Entities such as ``&nbsp;`` come back as literal
characters and unbalanced raw HTML is repaired by the parser.
"""

from __future__ import annotations

import posixpath
from urllib.parse import urlsplit

from bs4 import BeautifulSoup

from mdcorpus.utils.files import DOC_EXTENSION, has_doc_extension, strip_doc_extension


def is_external(target: str) -> bool:
    """Return True for targets carrying a URL scheme or network location."""
    parts = urlsplit(target)
    return bool(parts.scheme or parts.netloc)


def resolve_link(target: str, current_dir: str) -> str:
    """Resolve a markdown link target into a root-relative route.

    Root-relative targets are taken as-is. Relative targets are joined onto
    *current_dir* and normalised; ``..`` never climbs above the corpus root.
    """
    if target.startswith("/"):
        resolved = target[1:]
    else:
        directory = current_dir.strip("/")
        joined = posixpath.join(directory, target) if directory else target
        resolved = posixpath.normpath("/" + joined).lstrip("/")

    route = strip_doc_extension(resolved)
    if not route.startswith("/"):
        route = "/" + route
    return route


def rewrite_links(fragment: str, current_dir: str) -> str:
    """Rewrite every ``href`` ending in ``.md`` found in an HTML fragment.

    External URLs and all other attributes are left as they are. A fragment
    without any markdown link is returned unchanged.
    """
    if DOC_EXTENSION not in fragment.lower():
        return fragment

    soup = BeautifulSoup(fragment, "html.parser")
    changed = False
    for tag in soup.find_all(href=True):
        target = tag["href"]
        if not has_doc_extension(target) or is_external(target):
            continue
        tag["href"] = resolve_link(target, current_dir)
        changed = True

    if not changed:
        return fragment
    return soup.decode(formatter="minimal")
