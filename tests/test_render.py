from dataclasses import replace

import pytest

from nav import build_nav
from posts import parse_blog_post
from render import (
    SITE_TITLE,
    build_markdown_renderer,
    get_template_env,
    is_external_link,
    render_markdown,
    render_page,
)

POST_DOC = """---
title: "Suffix <Trees>"
date: "2024-03-15"
author: Ada
excerpt: Linear time.
tags: [strings, trees]
reading_time: 65
---

## Building

See [Ukkonen](https://example.com/ukkonen) and [about](/about).
"""


@pytest.fixture
def renderer():
    return build_markdown_renderer()


@pytest.fixture
def env():
    return get_template_env()


@pytest.mark.parametrize(
    "href, expected",
    [
        ("https://example.com", True),
        ("http://example.com/a", True),
        ("/about", False),
        ("#section", False),
        ("mailto:me@example.com", False),
        ("", False),
    ],
)
def test_is_external_link(href, expected):
    assert is_external_link(href) is expected


def test_external_links_open_in_new_tab(renderer):
    html = render_markdown(renderer, "[a](https://example.com) [b](/about)")
    external = html.split("</a>")[0]
    assert 'href="https://example.com"' in external
    assert 'target="_blank"' in external
    assert 'rel="noopener noreferrer"' in external
    assert '<a href="/about">b</a>' in html


def test_markdown_extensions(renderer):
    html = render_markdown(
        renderer,
        "# Hello World\n\n```python\nx = 1\n```\n\n| a | b |\n|---|---|\n| 1 | 2 |\n",
    )
    assert '<h1 id="hello-world">Hello World</h1>' in html
    assert '<code class="language-python">' in html
    assert "<table>" in html


def test_renderer_is_reset_between_documents(renderer):
    render_markdown(renderer, "# Same")
    assert '<h1 id="same">' in render_markdown(renderer, "# Same")


def test_template_env_registers_filters(env):
    assert env.filters["format_date"]("2024-03-15") == "March 15, 2024"
    assert env.filters["format_reading_time"](65) == "1h 5m read"


def test_render_post_page(env, renderer):
    post = parse_blog_post(POST_DOC, "suffix-trees")
    html = render_page(
        env.get_template("post.html"),
        page_title=post.title,
        nav_items=build_nav("/blogs/suffix-trees"),
        post=post,
        content_html=render_markdown(renderer, post.content),
    )
    assert "<h1>Suffix &lt;Trees&gt;</h1>" in html
    assert "By Ada" in html
    assert "1h 5m read" in html
    assert "March 15, 2024" in html
    assert '<span class="tag">strings</span>' in html
    assert 'target="_blank"' in html
    assert "Back to Articles" in html
    assert SITE_TITLE in html
    assert 'class="nav-link active" href="/blogs"' in html


def test_render_list_page(env):
    post = parse_blog_post(POST_DOC, "suffix-trees")
    html = render_page(
        env.get_template("blogs.html"),
        page_title="All Articles",
        nav_items=build_nav("/blogs"),
        posts=[post],
    )
    assert "All Articles" in html
    assert '<a href="/blogs/suffix-trees">Suffix &lt;Trees&gt;</a>' in html
    assert "Linear time." in html
    assert "Read more" in html


def test_render_empty_list_page(env):
    html = render_page(
        env.get_template("blogs.html"),
        page_title="All Articles",
        nav_items=build_nav("/blogs"),
        posts=[],
    )
    assert "No articles yet. Check back soon for algorithmic adventures!" in html


def test_invalid_reading_time_raises_while_rendering(env):
    post = replace(parse_blog_post("", "bad"), reading_time=-3)
    with pytest.raises(ValueError, match="non-negative"):
        render_page(
            env.get_template("blogs.html"),
            page_title="All Articles",
            nav_items=build_nav("/blogs"),
            posts=[post],
        )
