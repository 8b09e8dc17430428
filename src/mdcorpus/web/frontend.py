"""HTML page chrome for the mdcorpus web UI."""

from __future__ import annotations

from importlib.resources import files

from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup

_ENV = Environment(
    loader=PackageLoader("mdcorpus.web", "templates"),
    autoescape=select_autoescape(["html"]),
)


def load_stylesheet() -> str:
    stylesheet = files("mdcorpus.web").joinpath("static", "style.css")
    return stylesheet.read_text(encoding="utf-8")


def render_page(
    *,
    title: str,
    site_title: str,
    content: str,
    path: str,
    author: str | None = None,
) -> str:
    """Wrap a rendered document fragment in the page template."""
    template = _ENV.get_template("page.html")
    return template.render(
        title=title,
        site_title=site_title,
        author=author,
        content=Markup(content),
        path=path,
    )


def render_index(*, site_title: str, tree_html: str, title: str = "Index") -> str:
    """Wrap the navigation tree fragment in the index template."""
    template = _ENV.get_template("index.html")
    return template.render(title=title, site_title=site_title, tree_html=Markup(tree_html))
