"""Corpus discovery and navigation tree construction."""

from mdcorpus.corpus.scanner import scan_corpus
from mdcorpus.corpus.tree import build_tree, render_tree

__all__ = ["build_tree", "render_tree", "scan_corpus"]
