from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlparse
import xml.etree.ElementTree as etree

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markdown import Markdown
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from formatting import format_date, format_reading_time
from paths import TEMPLATES_DIR

if TYPE_CHECKING:
    from pathlib import Path

    from jinja2 import Template

    from nav import NavItem

SITE_TITLE = "Beyond Big-O"
SITE_TAGLINE = "Deep dives into algorithms, theory, and computational thinking"
EXTERNAL_SCHEMES = ("http", "https")


def is_external_link(href: str) -> bool:
    """Check whether href points off-site."""
    parsed = urlparse(href)
    return parsed.scheme in EXTERNAL_SCHEMES and bool(parsed.netloc)


class ExternalLinkTreeprocessor(Treeprocessor):
    """Open off-site links in a new tab."""

    def run(self, root: etree.Element):
        for el in root.iter("a"):
            href = el.get("href", "")
            if is_external_link(href):
                el.set("target", "_blank")
                el.set("rel", "noopener noreferrer")


class ExternalLinkExtension(Extension):
    """Markdown extension to mark external links."""

    def extendMarkdown(self, md):
        md.treeprocessors.register(
            ExternalLinkTreeprocessor(md),
            "external_link",
            5,
        )


def build_markdown_renderer() -> Markdown:
    """Create a Markdown renderer with site extensions."""
    return Markdown(
        extensions=[
            "extra",
            "sane_lists",
            "toc",
            ExternalLinkExtension(),
        ],
        output_format="html",
    )


def render_markdown(renderer: Markdown, content: str) -> str:
    """Render Markdown content into HTML."""
    renderer.reset()
    return renderer.convert(content)


def get_template_env(templates_dir: "Path" = TEMPLATES_DIR) -> Environment:
    """Create a Jinja environment for HTML templates."""
    env = Environment(
        loader=FileSystemLoader(templates_dir),
        autoescape=select_autoescape(["html"]),
    )
    env.filters["format_date"] = format_date
    env.filters["format_reading_time"] = format_reading_time
    env.globals["site_title"] = SITE_TITLE
    env.globals["site_tagline"] = SITE_TAGLINE
    return env


def render_page(
    template: "Template",
    *,
    page_title: str,
    nav_items: list["NavItem"],
    **context,
) -> str:
    """Render a full HTML page using Jinja templates."""
    return template.render(
        page_title=page_title,
        nav_items=nav_items,
        **context,
    )
