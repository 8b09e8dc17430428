"""Markdown to HTML rendering pipeline."""

from mdcorpus.render.converter import ConversionError, MarkdownConverter, render_document
from mdcorpus.render.links import rewrite_links
from mdcorpus.render.metadata import extract_metadata

__all__ = [
    "ConversionError",
    "MarkdownConverter",
    "extract_metadata",
    "render_document",
    "rewrite_links",
]
