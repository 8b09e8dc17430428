"""Core mdcorpus data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union


@dataclass(frozen=True, slots=True)
class Metadata:
    """Fields parsed from a document's leading metadata block."""

    title: Optional[str] = None
    author: Optional[str] = None


@dataclass(frozen=True, slots=True)
class DocumentEntry:
    """A markdown file discovered beneath the corpus root."""

    relative_path: str
    base_name: str


@dataclass(slots=True)
class DocumentNode:
    """Leaf of the navigation tree pointing at a rendered document."""

    name: str
    route: str


@dataclass(slots=True)
class DirectoryNode:
    """Folder in the navigation tree."""

    name: str
    children: List["NavigationNode"] = field(default_factory=list)


NavigationNode = Union[DirectoryNode, DocumentNode]
