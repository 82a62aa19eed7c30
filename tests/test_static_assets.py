import os

from static_assets import (
    cleanup_empty_dirs,
    copy_if_newer,
    sync_static_file,
    sync_static_items,
)


def test_copy_if_newer(tmp_path):
    src = tmp_path / "a.css"
    dst = tmp_path / "out" / "a.css"
    src.write_text("body {}")
    assert copy_if_newer(src, dst) is True
    assert dst.read_text() == "body {}"
    assert copy_if_newer(src, dst) is False

    stat = dst.stat()
    os.utime(src, (stat.st_atime, stat.st_mtime + 10))
    assert copy_if_newer(src, dst) is True


def test_sync_static_items(tmp_path):
    static = tmp_path / "static"
    (static / "img").mkdir(parents=True)
    (static / "style.css").write_text("css")
    (static / "img" / "logo.svg").write_text("<svg/>")
    redirects = tmp_path / "_redirects"
    redirects.write_text("/old /new")
    build = tmp_path / "build"

    changed = sync_static_items(build, [static, redirects])
    assert sorted(p.relative_to(build).as_posix() for p in changed) == [
        "_redirects",
        "static/img/logo.svg",
        "static/style.css",
    ]
    assert sync_static_items(build, [static, redirects]) == []


def test_sync_static_file_removes_orphan(tmp_path):
    dest = tmp_path / "build" / "_redirects"
    dest.parent.mkdir()
    dest.write_text("stale")
    assert sync_static_file(tmp_path / "_redirects", dest) == [dest]
    assert not dest.exists()
    assert sync_static_file(tmp_path / "_redirects", dest) == []


def test_cleanup_empty_dirs(tmp_path):
    leaf = tmp_path / "a" / "b" / "c"
    leaf.mkdir(parents=True)
    (tmp_path / "a" / "keep.txt").write_text("x")
    cleanup_empty_dirs(leaf, tmp_path)
    assert not (tmp_path / "a" / "b").exists()
    assert (tmp_path / "a").exists()
