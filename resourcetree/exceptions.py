# resourcetree/exceptions.py

"""
Exceptions raised by the resource tree.

Lookups never raise: a missing node or format is reported as ``None``. The
classes below cover programming errors such as malformed pre-tokenized paths
or name clashes when nodes are attached by hand.
"""


from __future__ import annotations


class ResourceTreeError(Exception):
    """Base exception for all resource tree errors."""


class InvalidPathError(ResourceTreeError, ValueError):
    """
    Raised when a path or path segment cannot be represented in the tree.

    Parameters
    ----------
    message : str
        Human-readable description of the problem.
    path : object, optional
        The offending path, segment sequence or delimiter.
    """

    def __init__(self, message: str, path: object = None) -> None:
        self.path = path
        super().__init__(message)


class DuplicateNodeError(ResourceTreeError):
    """Raised when a parent already holds a child with the same name."""

    def __init__(self, name: str | None) -> None:
        self.name = name
        super().__init__(f"A child named {name!r} already exists")
