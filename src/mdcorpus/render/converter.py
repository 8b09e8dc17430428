"""Markdown to HTML conversion backed by Python-Markdown and Pygments."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import markdown
from markdown.extensions.codehilite import CodeHiliteExtension
from markdown.extensions.fenced_code import FencedCodeExtension
from markdown.extensions.tables import TableExtension
from markdown.extensions.toc import TocExtension

from mdcorpus.config import DEFAULT_HIGHLIGHT_STYLE
from mdcorpus.render.links import rewrite_links

LOGGER = logging.getLogger(__name__)


class ConversionError(RuntimeError):
    """Raised when a document body cannot be converted to HTML."""


@dataclass(frozen=True, slots=True)
class ConverterConfig:
    """Settings shared by every conversion; built once at startup."""

    highlight_style: str = DEFAULT_HIGHLIGHT_STYLE
    hard_wraps: bool = True
    heading_ids: bool = True

    def extensions(self) -> List[Any]:
        extensions: List[Any] = [
            TableExtension(),
            FencedCodeExtension(),
            # Inline styles keep highlighted blocks readable without a stylesheet.
            CodeHiliteExtension(
                css_class="highlight",
                guess_lang=False,
                noclasses=True,
                pygments_style=self.highlight_style,
            ),
            "pymdownx.tilde",
            "pymdownx.magiclink",
            "pymdownx.tasklist",
        ]
        if self.heading_ids:
            extensions.append(TocExtension())
        if self.hard_wraps:
            extensions.append("nl2br")
        return extensions

    def extension_configs(self) -> Dict[str, Dict[str, Any]]:
        # Strikethrough only; subscript via single tildes is not GFM.
        return {"pymdownx.tilde": {"subscript": False}}


class MarkdownConverter:
    """Convert markdown bodies into HTML fragments.

    A new ``markdown.Markdown`` instance is created per call because the
    engine keeps per-document state and is not safe to share between
    concurrent requests.
    """

    def __init__(self, config: Optional[ConverterConfig] = None) -> None:
        self.config = config or ConverterConfig()

    def _engine(self) -> markdown.Markdown:
        return markdown.Markdown(
            extensions=self.config.extensions(),
            extension_configs=self.config.extension_configs(),
            output_format="html",
        )

    def convert(self, body: bytes) -> str:
        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ConversionError(f"Document is not valid UTF-8: {exc}") from exc

        try:
            return self._engine().convert(text)
        except Exception as exc:
            raise ConversionError(f"Markdown conversion failed: {exc}") from exc


def render_document(
    body: bytes, current_dir: str, converter: Optional[MarkdownConverter] = None
) -> str:
    """Convert *body* to HTML and rewrite links to sibling documents.

    *current_dir* is the directory of the rendered document relative to the
    corpus root, or an empty string for documents at the root.
    """
    converter = converter or MarkdownConverter()
    html = converter.convert(body)
    LOGGER.debug("Converted %d bytes of markdown (dir=%r)", len(body), current_dir)
    return rewrite_links(html, current_dir)
