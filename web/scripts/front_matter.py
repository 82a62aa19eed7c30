"""Split YAML front matter from the body of a markdown document."""

from __future__ import annotations

import logging
import re
from typing import Any

import yaml

logger = logging.getLogger(__name__)

FRONTMATTER_OPEN_RE = re.compile(r"^---[ \t]*\r?\n")
FRONTMATTER_RE = re.compile(
    r"^---[ \t]*\r?\n(?:(.*?)\r?\n)??---[ \t]*(?:\r?\n|$)", re.DOTALL
)


class FrontMatterError(ValueError):
    """Raised when a front matter block cannot be read as a mapping."""


def parse_front_matter_block(raw: str) -> dict[str, Any]:
    """Parse the text between the markers into a mapping."""
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise FrontMatterError(f"invalid YAML in front matter: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FrontMatterError(
            f"front matter must be a mapping, got {type(data).__name__}"
        )
    return {str(key): value for key, value in data.items()}


def split_front_matter(content: str) -> tuple[dict[str, Any], str]:
    """Split front matter from body content.

    A document without an opening marker is all body. A block that is
    unterminated or unreadable is logged and the whole document becomes
    the body with empty metadata. The body is always whitespace-trimmed.
    """
    match = FRONTMATTER_RE.match(content)
    if not match:
        if FRONTMATTER_OPEN_RE.match(content):
            logger.warning("Unterminated front matter block, treating as body")
        return {}, content.strip()
    try:
        fm = parse_front_matter_block(match.group(1) or "")
    except FrontMatterError as exc:
        logger.warning("Ignoring front matter: %s", exc)
        return {}, content.strip()
    body = content[match.end() :].strip()
    return fm, body


def dump_front_matter(meta: dict[str, Any], body: str) -> str:
    """Render metadata and body back into a front matter document."""
    yaml_txt = yaml.safe_dump(
        meta,
        allow_unicode=True,
        sort_keys=False,
        default_flow_style=False,
        width=1000,
    )
    return f"---\n{yaml_txt}---\n\n{body}"
