"""
resourcetree — request-path trees for site generators.

This package organizes content resources into a tree keyed by the segments of
their request paths, so that a site generator can:
- resolve a request path to a resource and its available formats,
- navigate parent, sibling and child relationships between pages,
- render the tree for inspection, or build it from a content directory.

The tree is built on ``anytree`` and is a plain, synchronous, in-memory data
structure: callers sharing one tree between threads must serialize mutations.
"""

from __future__ import annotations

from .exceptions import DuplicateNodeError, InvalidPathError, ResourceTreeError
from .formats import Format, Formats
from .loader import build_and_draw_tree, build_resources
from .node import ResourcesNode
from .paths import DELIMITER, TokenizedPath, join_path, tokenize
from .tree import draw_tree

__all__ = [
    "DELIMITER",
    "DuplicateNodeError",
    "Format",
    "Formats",
    "InvalidPathError",
    "ResourceTreeError",
    "ResourcesNode",
    "TokenizedPath",
    "build_and_draw_tree",
    "build_resources",
    "draw_tree",
    "join_path",
    "tokenize",
]
