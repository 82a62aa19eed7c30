#!/usr/bin/env -S uv run
# /// script
# requires-python = ">=3.10"
# dependencies = ["jinja2", "markdown", "pyyaml"]
# ///
"""Static site build for the blog."""

from __future__ import annotations

import argparse
import json
import logging
import shutil
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from front_matter import split_front_matter
from nav import build_nav
from paths import ABOUT_MD, BUILD_DIR, CONTENT_DIR
from posts import get_posts, load_post
from render import (
    build_markdown_renderer,
    get_template_env,
    render_markdown,
    render_page,
)
from static_assets import cleanup_empty_dirs, sync_static_items

if TYPE_CHECKING:
    from jinja2 import Environment
    from markdown import Markdown
    from posts import BlogPost

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def post_output(build_dir: Path, slug: str) -> Path:
    return build_dir / "blogs" / slug / "index.html"


def build_post(
    post: "BlogPost",
    env: "Environment",
    renderer: "Markdown",
    build_dir: Path = BUILD_DIR,
) -> Path:
    """Build a single post detail page, return output path."""
    output = post_output(build_dir, post.slug)
    content_html = render_markdown(renderer, post.content)
    try:
        page_html = render_page(
            env.get_template("post.html"),
            page_title=post.title or post.slug,
            nav_items=build_nav(f"/blogs/{post.slug}"),
            post=post,
            content_html=content_html,
        )
    except ValueError as exc:
        raise ValueError(f"{post.slug}: {exc}") from exc
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(page_html, encoding="utf-8")
    logger.debug("Rendered post %s", post.slug)
    return output


def build_blogs_index(
    posts: list["BlogPost"],
    env: "Environment",
    build_dir: Path = BUILD_DIR,
) -> list[Path]:
    """Build the article list at the site root and under /blogs."""
    try:
        page_html = render_page(
            env.get_template("blogs.html"),
            page_title="All Articles",
            nav_items=build_nav("/blogs"),
            posts=posts,
        )
    except ValueError as exc:
        raise ValueError(f"article list: {exc}") from exc

    outputs = [build_dir / "index.html", build_dir / "blogs" / "index.html"]
    for output in outputs:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(page_html, encoding="utf-8")
    return outputs


def build_about(
    env: "Environment",
    renderer: "Markdown",
    build_dir: Path = BUILD_DIR,
    about_md: Path = ABOUT_MD,
) -> Path:
    """Build the about page from about.md."""
    output = build_dir / "about" / "index.html"
    output.parent.mkdir(parents=True, exist_ok=True)

    about_content = about_md.read_text(encoding="utf-8") if about_md.exists() else ""
    fm, body = split_front_matter(about_content)
    title = str(fm.get("title") or "About")
    page_html = render_page(
        env.get_template("page.html"),
        page_title=title,
        nav_items=build_nav("/about"),
        title=title,
        subtitle=str(fm.get("subtitle") or ""),
        content_html=render_markdown(renderer, body),
    )
    output.write_text(page_html, encoding="utf-8")
    return output


def build_not_found(env: "Environment", build_dir: Path = BUILD_DIR) -> Path:
    """Build the 404 page shown for unknown articles."""
    output = build_dir / "404.html"
    output.parent.mkdir(parents=True, exist_ok=True)
    page_html = render_page(
        env.get_template("page.html"),
        page_title="Article Not Found",
        nav_items=build_nav(),
        title="Article Not Found",
        subtitle="",
        content_html="<p>The article you're looking for doesn't exist.</p>",
        back_url="/blogs",
        back_label="Back to Articles",
    )
    output.write_text(page_html, encoding="utf-8")
    return output


def prune_removed_posts(
    posts: list["BlogPost"], build_dir: Path = BUILD_DIR
) -> list[Path]:
    """Remove detail pages for posts no longer present."""
    blogs_dir = build_dir / "blogs"
    if not blogs_dir.exists():
        return []

    live = {post_output(build_dir, post.slug) for post in posts}
    live.add(blogs_dir / "index.html")
    removed = []
    for output in sorted(blogs_dir.rglob("index.html")):
        if output in live:
            continue
        output.unlink()
        cleanup_empty_dirs(output.parent, blogs_dir)
        removed.append(output)
    return removed


def build_index_pages(
    posts: list["BlogPost"],
    env: "Environment",
    renderer: "Markdown",
    build_dir: Path,
    about_md: Path,
) -> list[Path]:
    changed = build_blogs_index(posts, env, build_dir)
    changed.append(build_about(env, renderer, build_dir, about_md))
    changed.append(build_not_found(env, build_dir))
    return changed


def build_all(
    posts: list["BlogPost"],
    env: "Environment",
    renderer: "Markdown",
    build_dir: Path,
    about_md: Path,
) -> list[Path]:
    """Full rebuild of every page and static item."""
    changed: list[Path] = []
    built: list["BlogPost"] = []
    for post in posts:
        try:
            changed.append(build_post(post, env, renderer, build_dir))
        except ValueError as exc:
            logger.warning("Skipping post %s", exc)
            continue
        built.append(post)
    changed.extend(build_index_pages(built, env, renderer, build_dir, about_md))
    changed.extend(prune_removed_posts(built, build_dir))
    changed.extend(sync_static_items(build_dir))
    return changed


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build static blog")
    parser.add_argument("--post", help="Build a single post by slug")
    parser.add_argument(
        "--index", action="store_true", help="Rebuild list, about and 404 pages"
    )
    parser.add_argument("--static", action="store_true", help="Sync static files only")
    parser.add_argument("--clean", action="store_true", help="Remove build directory")
    parser.add_argument(
        "--json", action="store_true", help="Output changed files as JSON"
    )
    parser.add_argument(
        "--content", type=Path, default=CONTENT_DIR, help="Content directory"
    )
    parser.add_argument("--out", type=Path, default=BUILD_DIR, help="Build directory")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
    build_dir: Path = args.out
    posts_dir = args.content / "posts"
    about_md = args.content / "about.md"

    if args.clean:
        if build_dir.exists():
            shutil.rmtree(build_dir)
        print(f"Cleaned {build_dir}")
        return

    env = get_template_env()
    renderer = build_markdown_renderer()
    changed_files: list[Path] = []

    try:
        if args.post:
            post_path = posts_dir / f"{args.post}.md"
            if not post_path.resolve().is_relative_to(posts_dir.resolve()):
                print(f"Error: {args.post} is outside {posts_dir}", file=sys.stderr)
                sys.exit(1)
            if not post_path.exists():
                print(f"Error: {post_path} not found", file=sys.stderr)
                sys.exit(1)
            post = load_post(post_path.resolve(), posts_dir.resolve())
            changed_files.append(build_post(post, env, renderer, build_dir))
            changed_files.extend(sync_static_items(build_dir))

        elif args.index:
            posts = get_posts(posts_dir)
            changed_files.extend(
                build_index_pages(posts, env, renderer, build_dir, about_md)
            )
            changed_files.extend(sync_static_items(build_dir))

        elif args.static:
            changed_files.extend(sync_static_items(build_dir))

        else:
            posts = get_posts(posts_dir)
            logger.info("Building %d posts from %s", len(posts), posts_dir)
            changed_files.extend(build_all(posts, env, renderer, build_dir, about_md))
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(json.dumps([p.relative_to(build_dir).as_posix() for p in changed_files]))
    else:
        for f in changed_files:
            print(f"Built: {f.relative_to(build_dir).as_posix()}")


if __name__ == "__main__":
    main()
