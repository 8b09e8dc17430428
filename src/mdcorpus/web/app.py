"""FastAPI application serving the markdown corpus."""

from __future__ import annotations

import asyncio
import logging
import posixpath
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse, Response

from mdcorpus import __version__
from mdcorpus.config import AppConfig
from mdcorpus.corpus.scanner import scan_corpus
from mdcorpus.corpus.tree import build_tree, render_tree
from mdcorpus.render.converter import (
    ConversionError,
    ConverterConfig,
    MarkdownConverter,
    render_document,
)
from mdcorpus.render.metadata import extract_metadata
from mdcorpus.utils.files import read_document
from mdcorpus.web.frontend import load_stylesheet, render_index, render_page

LOGGER = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(_: FastAPI) -> AsyncIterator[None]:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    yield


def _current_dir(url_path: str) -> str:
    directory = posixpath.dirname(url_path.strip("/"))
    return "" if directory == "." else directory


def _build_index(root: Path) -> str:
    entries = scan_corpus(root)
    return render_tree(build_tree(entries))


def create_app(config: AppConfig | None = None) -> FastAPI:
    """Create the web application for *config*'s corpus root."""
    config = config or AppConfig()
    root = config.resolve_root_dir(Path.cwd())
    converter = MarkdownConverter(ConverterConfig(highlight_style=config.highlight_style))

    app = FastAPI(title="mdcorpus", version=__version__, lifespan=_lifespan)
    app.state.config = config
    app.state.root_dir = root

    @app.get("/", response_class=HTMLResponse)
    async def index() -> HTMLResponse:
        try:
            tree_html = await asyncio.to_thread(_build_index, root)
        except OSError as exc:
            LOGGER.error("Error scanning %s: %s", root, exc)
            raise HTTPException(status_code=500, detail=f"Error scanning directory: {exc}") from exc

        return HTMLResponse(content=render_index(site_title=config.site_title, tree_html=tree_html))

    @app.get("/static/style.css")
    async def stylesheet() -> Response:
        return Response(content=load_stylesheet(), media_type="text/css; charset=utf-8")

    @app.get("/{url_path:path}", response_class=HTMLResponse)
    async def document(url_path: str) -> HTMLResponse:
        try:
            content = await asyncio.to_thread(read_document, root, url_path)
        except OSError as exc:
            LOGGER.warning("Unable to read %s: %s", url_path, exc)
            content = None
        if content is None:
            raise HTTPException(status_code=404, detail="File not found")

        metadata, body = extract_metadata(content)
        current_dir = _current_dir(url_path)
        try:
            fragment = await asyncio.to_thread(render_document, body, current_dir, converter)
        except ConversionError as exc:
            LOGGER.exception("Rendering %s failed", url_path)
            raise HTTPException(status_code=500, detail=f"Error rendering markdown: {exc}") from exc

        title = metadata.title or posixpath.basename(url_path.strip("/"))
        page = render_page(
            title=title,
            site_title=config.site_title,
            author=metadata.author,
            content=fragment,
            path="/" + url_path.strip("/"),
        )
        return HTMLResponse(content=page)

    return app


app = create_app()
