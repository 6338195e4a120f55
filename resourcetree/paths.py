# resourcetree/paths.py

"""
Request path tokenization.

A request path such as ``/blog/posts/hello.html`` is split into the segments
that address a node in the resource tree (``blog``, ``posts``, ``hello``) and
the extension that selects one of the formats stored on that node
(``.html``). Every lookup and insertion goes through :func:`tokenize`, so the
rules here decide which node a stored path lands on.
"""


from __future__ import annotations

from typing import Iterable, NamedTuple

from .exceptions import InvalidPathError

DELIMITER = "/"


class TokenizedPath(NamedTuple):
    """
    A request path broken into node segments and a trailing extension.

    Attributes
    ----------
    segments : tuple[str, ...]
        Segment names from the root down to the addressed node. Empty for the
        root itself.
    ext : str
        Extension of the final component including its dot (``".html"``), or
        ``""`` when the component has none.
    """

    segments: tuple[str, ...]
    ext: str = ""

    @property
    def name(self) -> str | None:
        """Final segment name, or ``None`` when the path denotes the root."""
        return self.segments[-1] if self.segments else None

    @property
    def parent_segments(self) -> tuple[str, ...]:
        return self.segments[:-1]


def split_ext(filename: str) -> tuple[str, str]:
    """
    Split a path component into ``(stem, ext)``.

    The extension runs from the last ``"."`` to the end of the component.
    Leading dots are part of the stem, so ``.htaccess`` has no extension while
    ``archive.tar.gz`` has ``.gz``.
    """

    stripped = filename.lstrip(".")
    dot = stripped.rfind(".")
    if dot == -1:
        return filename, ""
    dot += len(filename) - len(stripped)
    return filename[:dot], filename[dot:]


def tokenize(path: str, *, delimiter: str = DELIMITER) -> TokenizedPath:
    """
    Tokenize a request path into node segments and an extension.

    A single leading delimiter is ignored. The path is split on its last
    delimiter; the extension is taken from the final component and the rest
    of that component becomes the last segment. Everything before it is split
    on the delimiter into the intermediate segments.

    Empty segments in the middle of a path are kept (``"a//b/c"`` addresses a
    child named ``""``), while those directly before the final component are
    dropped (``"a//b"`` is ``"a/b"``). A path that is empty or consists of
    the delimiter alone denotes the root and yields no segments.

    Parameters
    ----------
    path : str
        Slash-delimited request path, e.g. ``"/blog/posts/hello.html"``.
    delimiter : str, default="/"
        Segment delimiter.

    Returns
    -------
    TokenizedPath
        The segments and the extension (with its leading dot).

    Raises
    ------
    TypeError
        If ``path`` is not a string.
    InvalidPathError
        If ``delimiter`` is empty.

    Examples
    --------
    >>> tokenize("/blog/posts/hello.html")
    TokenizedPath(segments=('blog', 'posts', 'hello'), ext='.html')
    >>> tokenize("index.html")
    TokenizedPath(segments=('index',), ext='.html')
    >>> tokenize("/")
    TokenizedPath(segments=(), ext='')
    """

    if not isinstance(path, str):
        raise TypeError(f"path must be a str, not {type(path).__name__}")
    check_delimiter(delimiter)

    if path.startswith(delimiter):
        path = path[len(delimiter):]
    if not path:
        return TokenizedPath((), "")

    head, _, tail = path.rpartition(delimiter)
    name, ext = split_ext(tail)
    # Empty segments directly before the final component are dropped.
    head = head.rstrip(delimiter)
    segments = head.split(delimiter) if head else []
    segments.append(name)
    return TokenizedPath(tuple(segments), ext)


def join_path(
    segments: Iterable[str],
    ext: str = "",
    *,
    delimiter: str = DELIMITER,
) -> str:
    """
    Build a request path from segments and an extension.

    ``ext`` may be given with or without its leading dot. The result always
    starts with the delimiter; joining no segments gives the root path.

    >>> join_path(["blog", "hello"], "html")
    '/blog/hello.html'
    """

    return delimiter + delimiter.join(segments) + ext_suffix(ext)


def check_delimiter(delimiter: str) -> None:
    if not delimiter:
        raise InvalidPathError("delimiter must be a non-empty string", delimiter)


def check_segments(segments: Iterable[str], *, delimiter: str = DELIMITER) -> tuple[str, ...]:
    """
    Validate pre-tokenized segments and return them as a tuple.

    Raises
    ------
    InvalidPathError
        If a segment is not a string or contains the delimiter, since such a
        node could never be addressed by a tokenized path.
    """

    segments = tuple(segments)
    for segment in segments:
        if not isinstance(segment, str):
            raise InvalidPathError(f"segment must be a str: {segment!r}", segments)
        if delimiter in segment:
            raise InvalidPathError(
                f"segment {segment!r} contains the delimiter {delimiter!r}", segments
            )
    return segments


def normalize_ext(ext: str | None) -> str:
    """
    Return ``ext`` without its leading dot (``".html"`` -> ``"html"``).

    A lone dot, as in ``"foo."``, is kept as ``"."`` so it does not collide
    with the extensionless key ``""``.
    """

    if not ext:
        return ""
    if ext.startswith(".") and len(ext) > 1:
        return ext[1:]
    return ext


def ext_suffix(ext: str | None) -> str:
    """Return the text appended to a request path for ``ext``: ``".html"``, ``"."`` or ``""``."""
    ext = normalize_ext(ext)
    if not ext or ext == ".":
        return ext
    return f".{ext}"
