# tests/test_loader.py
import os
import stat
import sys
from pathlib import Path

import pytest
from anytree import PreOrderIter

from resourcetree import build_and_draw_tree, build_resources


def _make_file(p: Path, content: str = "x"):
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content, encoding="utf-8")


def _request_paths(node):
    return {f.request_path for f in node}


def test_files_are_registered_under_relative_request_paths(tmp_path: Path):
    _make_file(tmp_path / "index.html")
    _make_file(tmp_path / "blog/posts/hello.html")
    _make_file(tmp_path / "blog/posts/hello.json")

    root = build_resources(tmp_path)

    assert _request_paths(root) == {
        "/index.html",
        "/blog/posts/hello.html",
        "/blog/posts/hello.json",
    }
    hello = root.get_resource("/blog/posts/hello.json")
    assert hello.asset == tmp_path.resolve() / "blog/posts/hello.json"
    assert root.get("/blog/posts/hello").formats.extensions == ["html", "json"]


def test_directory_and_page_share_a_node(tmp_path: Path):
    # blog.html is the index of the blog/ section
    _make_file(tmp_path / "blog.html")
    _make_file(tmp_path / "blog/first.html")

    root = build_resources(tmp_path)
    blog = root.get("/blog")

    assert blog.formats.extensions == ["html"]
    assert [c.name for c in blog.children] == ["first"]


def test_sorting_is_dirs_first_then_files_case_insensitive(tmp_path: Path):
    (tmp_path / "bDir").mkdir()
    (tmp_path / "ADir").mkdir()
    _make_file(tmp_path / "z.txt")
    _make_file(tmp_path / "A.txt")

    root = build_resources(tmp_path)

    assert [c.name for c in root.children] == ["ADir", "bDir", "A", "z"]


def test_exclude_patterns_gitignore_like(tmp_path: Path):
    for f in [
        ".git/config",
        "build/artifact.bin",
        "__pycache__/x.cpython-312.pyc",
        "pkg/data/keep.txt",
        "pkg/skipme.pyc",
        "top.log",
        "top.py",
    ]:
        _make_file(tmp_path / f)

    patterns = [".*/", "__pycache__/", "*.pyc", "build/", "*.log"]
    root = build_resources(tmp_path, exclude=patterns)

    assert _request_paths(root) == {"/pkg/data/keep.txt", "/top.py"}
    assert root.get("/.git") is None
    assert root.get("/build") is None


def test_exclude_root_relative_pattern(tmp_path: Path):
    _make_file(tmp_path / "drop.txt")
    _make_file(tmp_path / "sub/drop.txt")

    root = build_resources(tmp_path, exclude=["/drop.txt"])
    assert _request_paths(root) == {"/sub/drop.txt"}


def test_directory_exclusion_blocks_descent(tmp_path: Path):
    _make_file(tmp_path / "drafts/day1/post.md")
    _make_file(tmp_path / "published/post.md")

    root = build_resources(tmp_path, exclude=["drafts/"])
    assert _request_paths(root) == {"/published/post.md"}
    assert root.get("/drafts") is None


def test_include_extensions(tmp_path: Path):
    _make_file(tmp_path / "a.html")
    _make_file(tmp_path / "b.md")
    _make_file(tmp_path / "c.css")

    root = build_resources(tmp_path, include=[".html", ".MD"])
    assert _request_paths(root) == {"/a.html", "/b.md"}


def test_empty_directories_become_nodes_without_resources(tmp_path: Path):
    (tmp_path / "empty").mkdir()

    root = build_resources(tmp_path)
    assert root.get("/empty") is not None
    assert list(root) == []


def test_root_must_be_a_directory(tmp_path: Path):
    f = tmp_path / "single.txt"
    _make_file(f)
    with pytest.raises(ValueError):
        build_resources(f)


@pytest.mark.skipif(sys.platform.startswith("win"), reason="Symlink creation needs privileges on Windows")
def test_symlink_directory_traversal_flag(tmp_path: Path):
    real = tmp_path / "real"
    _make_file(real / "inside.txt")
    (tmp_path / "linkdir").symlink_to(real, target_is_directory=True)

    # Default: the link is neither a resource nor descended into
    root = build_resources(tmp_path)
    assert _request_paths(root) == {"/real/inside.txt"}

    root2 = build_resources(tmp_path, follow_symlinks=True)
    assert _request_paths(root2) == {"/real/inside.txt", "/linkdir/inside.txt"}


@pytest.mark.skipif(sys.platform.startswith("win"), reason="Symlink creation needs privileges on Windows")
def test_symlink_to_file_is_registered(tmp_path: Path):
    real = tmp_path / "data.txt"
    _make_file(real)
    (tmp_path / "data_link.json").symlink_to(real)

    root = build_resources(tmp_path)
    assert _request_paths(root) == {"/data.txt", "/data_link.json"}


@pytest.mark.skipif(not os.name == "posix", reason="Permission bits test is POSIX-only")
@pytest.mark.skipif(hasattr(os, "geteuid") and os.geteuid() == 0, reason="root ignores permission bits")
def test_unreadable_directory_is_skipped_safely(tmp_path: Path):
    secret = tmp_path / "secret"
    _make_file(secret / "hidden.txt")

    secret.chmod(0)
    try:
        root = build_resources(tmp_path)
        # directory exists as a node, but its files couldn't be listed
        assert root.get("/secret") is not None
        assert root.get("/secret/hidden") is None
    finally:
        secret.chmod(stat.S_IRWXU)


def test_build_and_draw_tree(tmp_path: Path):
    _make_file(tmp_path / "src/a.py")
    _make_file(tmp_path / "docs/readme.md")
    _make_file(tmp_path / "top.log")

    out = build_and_draw_tree(tmp_path, exclude=["*.log"])

    assert out.splitlines() == [
        "/",
        "├── docs",
        "│   └── readme [.md]",
        "└── src",
        "    └── a [.py]",
    ]


def test_preorder_request_paths(tmp_path: Path):
    _make_file(tmp_path / "a/b/c.txt")
    root = build_resources(tmp_path)
    assert [n.request_path for n in PreOrderIter(root)] == ["/", "/a", "/a/b", "/a/b/c"]
