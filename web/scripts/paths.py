from __future__ import annotations

import os
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
CONTENT_DIR = Path(os.environ.get("BLOG_CONTENT_DIR", ROOT / "content"))
POSTS_DIR = CONTENT_DIR / "posts"
ABOUT_MD = CONTENT_DIR / "about.md"
BUILD_DIR = Path(os.environ.get("BLOG_BUILD_DIR", ROOT / "build"))
STATIC_DIR = ROOT / "static"
TEMPLATES_DIR = ROOT / "templates"
STATIC_ITEMS = [
    STATIC_DIR,
    ROOT / "_redirects",
]
