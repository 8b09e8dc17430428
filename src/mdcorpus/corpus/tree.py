"""Fold scanned documents into a navigation tree and render it as HTML."""

from __future__ import annotations

import html
from typing import Iterable, List
from urllib.parse import quote

from mdcorpus.models import DirectoryNode, DocumentEntry, DocumentNode, NavigationNode
from mdcorpus.utils.files import strip_doc_extension

ROOT_NAME = "root"


def _route_for(entry: DocumentEntry) -> str:
    return "/" + strip_doc_extension(entry.relative_path).lstrip("/")


def _child_directory(parent: DirectoryNode, name: str) -> DirectoryNode:
    # Linear search is fine for corpora of a few thousand documents.
    for child in parent.children:
        if isinstance(child, DirectoryNode) and child.name == name:
            return child
    directory = DirectoryNode(name=name)
    parent.children.append(directory)
    return directory


def _insert(root: DirectoryNode, entry: DocumentEntry) -> None:
    *directories, _ = entry.relative_path.split("/")
    node = root
    for name in directories:
        node = _child_directory(node, name)
    node.children.append(DocumentNode(name=entry.base_name, route=_route_for(entry)))


def _sort_key(node: NavigationNode) -> tuple:
    return (isinstance(node, DocumentNode), node.name.lower())


def _sort(node: DirectoryNode) -> None:
    node.children.sort(key=_sort_key)
    for child in node.children:
        if isinstance(child, DirectoryNode):
            _sort(child)


def build_tree(entries: Iterable[DocumentEntry]) -> DirectoryNode:
    """Build the navigation tree for *entries*.

    Directories sort before documents at every level; names within each
    group sort case-insensitively. The returned root is synthetic and is
    never rendered itself.
    """
    root = DirectoryNode(name=ROOT_NAME)
    for entry in entries:
        _insert(root, entry)
    _sort(root)
    return root


def _render_node(node: NavigationNode, out: List[str]) -> None:
    name = html.escape(node.name, quote=True)
    if isinstance(node, DocumentNode):
        href = html.escape(quote(node.route, safe="/"), quote=True)
        out.append(f'<li><a href="{href}" class="file">{name}</a></li>\n')
        return

    out.append(f'<li><span class="folder">{name}</span>\n')
    if node.children:
        out.append("<ul>\n")
        for child in node.children:
            _render_node(child, out)
        out.append("</ul>\n")
    out.append("</li>\n")


def render_tree(root: DirectoryNode) -> str:
    """Render the children of *root* as nested HTML lists."""
    out = ['<ul class="file-tree">\n']
    for child in root.children:
        _render_node(child, out)
    out.append("</ul>\n")
    return "".join(out)
