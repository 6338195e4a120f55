# resourcetree/loader.py

"""
Build resource trees from directories on disk.

A site generator typically discovers its content by walking a source
directory and registering every file under the request path it will be
served from. This module does exactly that: ``content/blog/hello.html``
becomes the resource ``/blog/hello.html`` whose asset is the file's
:class:`pathlib.Path`.

Features include:
- deterministic traversal order (case-insensitive sorting),
- gitignore-style exclusion patterns, with pruning of excluded directories,
- optional restriction to a set of file extensions,
- optional symbolic link following.
"""


from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import pathspec

from .node import ResourcesNode
from .paths import DELIMITER, split_ext
from .tree import draw_tree

logger = logging.getLogger(__name__)


def compile_exclude(patterns: Iterable[str] | None) -> pathspec.PathSpec | None:
    """
    Compile gitignore-style patterns into a matcher.

    Parameters
    ----------
    patterns : Iterable[str] | None
        Patterns such as ``"*.log"``, ``"build/"`` or ``"/drafts/"``. A
        leading slash anchors a pattern to the walked root; a trailing slash
        restricts it to directories.

    Returns
    -------
    pathspec.PathSpec | None
        The compiled matcher, or ``None`` when no patterns are given.
    """

    patterns = list(patterns or [])
    if not patterns:
        return None
    return pathspec.GitIgnoreSpec.from_lines(patterns)


def build_resources(
    root: Path,
    *,
    follow_symlinks: bool = False,
    exclude: Iterable[str] | None = None,
    include: Iterable[str] | None = None,
    delimiter: str = DELIMITER,
) -> ResourcesNode:
    """
    Walk a directory and register every file in a new resource tree.

    Each file is added under its path relative to ``root`` (POSIX style, with
    a leading delimiter) and the file's :class:`pathlib.Path` is stored as the
    asset. Directories that cannot be read are skipped.

    Parameters
    ----------
    root : pathlib.Path
        Directory holding the site's content.
    follow_symlinks : bool, default=False
        Whether to descend into symbolic links to directories.
    exclude : Iterable[str] | None, optional
        Gitignore-style patterns, matched against root-relative paths.
        Excluded directories are pruned and never descended into.
    include : Iterable[str] | None, optional
        File extensions to keep (e.g. ``[".html", ".md"]``). When ``None``,
        every file not excluded is registered.
    delimiter : str, default="/"
        Delimiter of the returned tree.

    Returns
    -------
    ResourcesNode
        Root node of the built tree.

    Raises
    ------
    ValueError
        If ``root`` is not a directory.
    OSError
        If ``root`` cannot be resolved.
    """

    root = root.resolve()
    if not root.is_dir():
        raise ValueError(f"Not a directory: {root}")

    spec = compile_exclude(exclude)
    suffixes = {s.casefold() for s in include} if include is not None else None
    tree = ResourcesNode(delimiter=delimiter)

    def excluded(rel: str) -> bool:
        return spec is not None and spec.match_file(rel)

    def on_error(exc: OSError) -> None:
        logger.debug("Skipping unreadable directory %s: %s", exc.filename, exc)

    for dirpath, dirnames, filenames in root.walk(follow_symlinks=follow_symlinks, on_error=on_error):
        rel_dir = dirpath.relative_to(root)

        # Prune dirs in-place + stable sort
        kept = [name for name in dirnames if not excluded((rel_dir / name).as_posix() + "/")]
        dirnames[:] = sorted(kept, key=str.casefold)

        # Directory nodes first, so they precede file resources in child order.
        node = tree.dig(*rel_dir.parts)
        for name in dirnames:
            node.get_or_create_child(name)

        for name in sorted(filenames, key=str.casefold):
            p = dirpath / name
            # Unfollowed symlinks to directories are reported as files.
            if excluded((rel_dir / name).as_posix()) or not p.is_file():
                continue
            stem, ext = split_ext(name)
            if suffixes is not None and ext.casefold() not in suffixes:
                continue
            node.add_tokenized(((stem,), ext), p)
            logger.debug("Registered %s", p)

    return tree


def build_and_draw_tree(root: Path, **kwargs) -> str:
    """
    Build a resource tree from ``root`` and render it with :func:`draw_tree`.

    Keyword arguments are passed to :func:`build_resources`.
    """

    return draw_tree(build_resources(root, **kwargs))
