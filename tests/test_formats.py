# tests/test_formats.py
from resourcetree import Format, ResourcesNode


def test_add_and_lookup_by_extension():
    node = ResourcesNode()
    fmt = node.formats.add("page", ".html")

    assert isinstance(fmt, Format)
    assert fmt.ext == "html"
    assert node.formats.ext(".html") is fmt
    # Keys are accepted with or without the dot
    assert node.formats.ext("html") is fmt
    assert ".html" in node.formats and "html" in node.formats


def test_missing_extension_returns_none():
    node = ResourcesNode()
    node.formats.add("page", ".html")
    assert node.formats.ext(".json") is None
    assert node.formats.ext("") is None


def test_add_replaces_same_extension():
    node = ResourcesNode()
    node.formats.add("first", ".html")
    node.formats.add("second", ".html")

    assert len(node.formats) == 1
    assert node.formats.ext(".html").asset == "second"


def test_extensionless_variant():
    node = ResourcesNode()
    node.formats.add("raw")
    assert node.formats.extensions == [""]
    assert node.formats.ext("").asset == "raw"


def test_iteration_is_restartable_and_ordered():
    node = ResourcesNode()
    node.formats.add("a", ".html")
    node.formats.add("b", ".json")

    assert [f.asset for f in node.formats] == ["a", "b"]
    assert [f.asset for f in node.formats] == ["a", "b"]
    assert node.formats.extensions == ["html", "json"]


def test_clear():
    node = ResourcesNode()
    node.formats.add("a", ".html")
    node.formats.add("b", ".json")
    node.formats.clear()

    assert len(node.formats) == 0
    assert list(node.formats) == []


def test_request_path_is_computed_from_the_node():
    root = ResourcesNode()
    root.add("/blog/posts/hello.html", "body")
    root.add("/blog/posts/hello", "plain")

    hello = root.get("/blog/posts/hello")
    assert hello.formats.ext(".html").request_path == "/blog/posts/hello.html"
    assert hello.formats.ext("").request_path == "/blog/posts/hello"
    assert repr(hello.formats) == "<Formats: ['/blog/posts/hello.html', '/blog/posts/hello']>"


def test_asset_is_stored_as_is():
    asset = object()
    node = ResourcesNode()
    node.formats.add(asset, ".bin")
    assert node.formats.ext(".bin").asset is asset


def test_trailing_dot_does_not_replace_extensionless_variant():
    root = ResourcesNode()
    root.add("/foo", "A")
    root.add("/foo.", "B")

    foo = root.get("/foo")
    assert foo.formats.extensions == ["", "."]
    assert root.get_resource("/foo").asset == "A"
    assert root.get_resource("/foo.").asset == "B"
    assert root.get_resource("/foo").request_path == "/foo"
    assert root.get_resource("/foo.").request_path == "/foo."
