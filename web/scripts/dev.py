#!/usr/bin/env -S uv run
# /// script
# requires-python = ">=3.10"
# dependencies = ["livereload"]
# ///
"""Live reload dev server that rebuilds the blog on change."""

import json
import subprocess
import sys
from pathlib import Path

from livereload import Server

from paths import BUILD_DIR, CONTENT_DIR, ROOT, STATIC_ITEMS, TEMPLATES_DIR

BUILD_SCRIPT = Path(__file__).resolve().parent / "build_site.py"
PORT = 8000


def run_build(*args) -> list[str]:
    """Run build_site.py with args, return list of changed files."""
    cmd = ["uv", "run", str(BUILD_SCRIPT), "--json", *args]
    result = subprocess.run(cmd, capture_output=True, text=True, cwd=ROOT)

    if result.returncode != 0:
        print(f"Build error: {result.stderr}", file=sys.stderr)
        return []

    try:
        return json.loads(result.stdout)
    except json.JSONDecodeError:
        return []


def build_site():
    """Full rebuild of pages."""
    changed = run_build()
    print(f"Build: {len(changed)} files")
    return changed


def build_static():
    """Sync static items."""
    changed = run_build("--static")
    print(f"Static sync: {changed}")
    return changed


def make_server() -> Server:
    server = Server()

    # Posts, about page and templates -> rebuild
    server.watch(str(CONTENT_DIR / "**/*.md"), build_site)
    server.watch(str(TEMPLATES_DIR / "**/*.html"), build_site)

    # Static items -> sync only
    for item in STATIC_ITEMS:
        server.watch(str(item), build_static)

    return server


def main():
    print("Initial build...")
    run_build()

    server = make_server()
    print(f"Starting dev server at http://localhost:{PORT}")
    server.serve(root=str(BUILD_DIR), port=PORT, open_url_delay=0.5)


if __name__ == "__main__":
    main()
