"""Command line interface for mdcorpus."""

from __future__ import annotations

import logging
import posixpath
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from mdcorpus.config import AppConfig
from mdcorpus.corpus.scanner import scan_corpus
from mdcorpus.corpus.tree import build_tree
from mdcorpus.models import DirectoryNode, DocumentNode
from mdcorpus.render.converter import (
    ConversionError,
    ConverterConfig,
    MarkdownConverter,
    render_document,
)
from mdcorpus.render.metadata import extract_metadata
from mdcorpus.utils.files import read_document


console = Console()
app = typer.Typer(help="mdcorpus - serve a folder of markdown files as a website")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _resolve_root(directory: Path) -> Path:
    try:
        return AppConfig(root_dir=directory).validate(Path.cwd())
    except OSError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _add_branch(branch: Tree, node: DirectoryNode) -> None:
    for child in node.children:
        if isinstance(child, DocumentNode):
            branch.add(f"{escape(child.name)} [dim]{escape(child.route)}[/dim]")
        else:
            _add_branch(branch.add(f"[bold]{escape(child.name)}/[/bold]"), child)


@app.command()
def serve(
    directory: Path = typer.Option(Path("."), "--dir", "-d", help="Directory with markdown files"),
    host: str = typer.Option(AppConfig().host, help="Host interface"),
    port: int = typer.Option(AppConfig().port, help="Server port"),
    title: str = typer.Option(AppConfig().site_title, help="Site title shown on every page"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Start the web server."""
    _setup_logging(verbose)
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - uvicorn is a core dependency
        raise typer.BadParameter("uvicorn is not installed.") from exc

    from mdcorpus.web.app import create_app

    root = _resolve_root(directory)
    config = AppConfig(root_dir=root, host=host, port=port, site_title=title)

    console.print(f"[bold]{title}[/bold] - Markdown Documentation Server")
    console.print(f"Serving files from [bold]{root}[/bold] on http://{host}:{port}")
    uvicorn.run(
        create_app(config),
        host=host,
        port=port,
        reload=False,
        log_level="debug" if verbose else "info",
    )


@app.command()
def tree(
    directory: Path = typer.Option(Path("."), "--dir", "-d", help="Directory with markdown files"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Print the navigation tree of the corpus."""
    _setup_logging(verbose)
    root = _resolve_root(directory)

    entries = scan_corpus(root)
    if not entries:
        console.print("[yellow]No markdown files found.[/yellow]")
        return

    view = Tree(f"[bold]{escape(str(root))}[/bold]")
    _add_branch(view, build_tree(entries))
    console.print(view)


@app.command()
def render(
    route: str = typer.Argument(..., help="Document route, e.g. docs/setup"),
    directory: Path = typer.Option(Path("."), "--dir", "-d", help="Directory with markdown files"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Print the HTML fragment rendered for a document route."""
    _setup_logging(verbose)
    root = _resolve_root(directory)

    try:
        content = read_document(root, route)
    except OSError as exc:
        console.print(f"[red]Unable to read {escape(route)}: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc
    if content is None:
        console.print(f"[red]Document not found: {route}[/red]")
        raise typer.Exit(code=1)

    _, body = extract_metadata(content)
    current_dir = posixpath.dirname(route.strip("/"))
    converter = MarkdownConverter(ConverterConfig(highlight_style=AppConfig().highlight_style))
    try:
        fragment = render_document(body, current_dir, converter)
    except ConversionError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc

    typer.echo(fragment)
