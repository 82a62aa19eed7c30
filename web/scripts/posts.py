from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from datetime import date
import logging
import re
from pathlib import Path
from typing import Any

from front_matter import dump_front_matter, split_front_matter
from paths import POSTS_DIR

logger = logging.getLogger(__name__)

INT_RE = re.compile(r"^-?\d+$")
TEXT_FIELDS = ("layout", "title", "date", "author", "excerpt")

POST_DEFAULTS: dict[str, Any] = {
    "layout": "post",
    "title": "",
    "date": "",
    "author": "",
    "excerpt": "",
    "tags": (),
    "reading_time": 5,
}


@dataclass(frozen=True)
class BlogFrontmatter:
    """Recognised metadata as read from a document, None where missing."""

    layout: str | None = None
    title: str | None = None
    date: str | None = None
    author: str | None = None
    excerpt: str | None = None
    tags: tuple[str, ...] | None = None
    reading_time: int | None = None


@dataclass(frozen=True)
class BlogPost:
    slug: str
    layout: str
    title: str
    date: str
    author: str
    excerpt: str
    tags: tuple[str, ...]
    reading_time: int
    content: str


def coerce_text(value: Any) -> str | None:
    if value is None or isinstance(value, (list, dict)):
        return None
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def coerce_tags(value: Any) -> tuple[str, ...] | None:
    if not isinstance(value, list):
        return None
    return tuple(str(tag) for tag in value if tag is not None)


def coerce_reading_time(value: Any) -> int | None:
    if value is None:
        return None
    minutes = None
    if isinstance(value, int) and not isinstance(value, bool):
        minutes = value
    elif isinstance(value, float) and value.is_integer():
        minutes = int(value)
    elif isinstance(value, str) and INT_RE.match(value.strip()):
        minutes = int(value.strip())
    if minutes is None or minutes < 0:
        logger.warning("Ignoring unusable reading_time %r", value)
        return None
    return minutes


def read_front_matter(meta: dict[str, Any]) -> BlogFrontmatter:
    """Pick recognised keys out of a parsed front matter mapping."""
    values: dict[str, Any] = {key: coerce_text(meta.get(key)) for key in TEXT_FIELDS}
    values["tags"] = coerce_tags(meta.get("tags"))
    values["reading_time"] = coerce_reading_time(meta.get("reading_time"))
    return BlogFrontmatter(**values)


def apply_defaults(fm: BlogFrontmatter, slug: str, content: str) -> BlogPost:
    """Fill every missing metadata field from POST_DEFAULTS."""
    values = {}
    for field in fields(BlogFrontmatter):
        value = getattr(fm, field.name)
        values[field.name] = POST_DEFAULTS[field.name] if value is None else value
    return BlogPost(slug=slug, content=content, **values)


def parse_blog_post(content: str, slug: str) -> BlogPost:
    """Parse a raw markdown document into a post."""
    meta, body = split_front_matter(content)
    return apply_defaults(read_front_matter(meta), slug, body)


def post_to_document(post: BlogPost) -> str:
    """Serialize a post back into a front matter document, without its slug."""
    meta = asdict(post)
    meta.pop("slug")
    body = meta.pop("content")
    meta["tags"] = list(post.tags)
    return dump_front_matter(meta, body)


def load_post(path: Path, posts_dir: Path = POSTS_DIR) -> BlogPost:
    """Load a post from disk, using its relative path as the slug."""
    slug = path.relative_to(posts_dir).with_suffix("").as_posix()
    return parse_blog_post(path.read_text(encoding="utf-8"), slug)


def sort_key(post: BlogPost) -> tuple[bool, str]:
    return (post.date != "", post.date)


def get_posts(posts_dir: Path = POSTS_DIR) -> list[BlogPost]:
    """Load all posts, newest first, undated posts last."""
    if not posts_dir.exists():
        return []
    posts = [load_post(path, posts_dir) for path in posts_dir.rglob("*.md")]
    posts.sort(key=lambda post: post.slug)
    posts.sort(key=sort_key, reverse=True)
    return posts
