# resourcetree/node.py

"""
Resource nodes.

Resource nodes give resources their parent, sibling and child relationships.
The relationships come from the request path an asset is added under: adding
``/foo/bar/buz.html`` builds the nodes ``foo``, ``bar`` and ``buz`` below the
root and stores the asset on ``buz`` as its ``html`` format. Navigation
elements of a site (breadcrumbs, sibling links, section menus) can then be
derived from the tree instead of from string manipulation on paths.

The parent/child bookkeeping is delegated to :class:`anytree.NodeMixin`, so
every ``anytree`` iterator and renderer works on a resource tree as is.
"""


from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator

from anytree import NodeMixin, PreOrderIter

from .exceptions import DuplicateNodeError, InvalidPathError, ResourceTreeError
from .formats import Format, Formats
from .paths import DELIMITER, TokenizedPath, check_delimiter, check_segments, join_path, tokenize

logger = logging.getLogger(__name__)


class ResourcesNode(NodeMixin):
    """
    A node in a tree of resources addressed by request path.

    A node created without a parent is a root and represents the path ``/``.
    Child nodes are created on demand by :meth:`add`; lookups never create
    nodes.

    Parameters
    ----------
    name : str | None, optional
        Path segment this node stands for. ``None`` for a root.
    parent : ResourcesNode | None, optional
        Node to attach to.
    delimiter : str, default="/"
        Path delimiter used to tokenize paths. Children created by
        :meth:`add` inherit it.

    Examples
    --------
    >>> root = ResourcesNode()
    >>> root.add("/blog/posts/hello.html", "body")
    >>> root.get_resource("/blog/posts/hello.html").asset
    'body'
    >>> [n.name for n in root.get("/blog/posts/hello").parents]
    ['posts', 'blog', None]
    """

    def __init__(
        self,
        name: str | None = None,
        parent: ResourcesNode | None = None,
        *,
        delimiter: str = DELIMITER,
    ) -> None:
        check_delimiter(delimiter)
        self._name = name
        self.delimiter = delimiter
        self._children_by_name: dict[str | None, ResourcesNode] = {}
        self._origin: tuple[str, ...] = ()
        self.formats = Formats(node=self)
        self.parent = parent

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def parent(self) -> ResourcesNode | None:
        return NodeMixin.parent.fget(self)

    @parent.setter
    def parent(self, value: ResourcesNode | None) -> None:
        # anytree detaches from the old parent before its attach hooks run,
        # so a rejected move has to be caught before the setter is called.
        if value is not None and value is not self.parent:
            self._check_attach(value)
        NodeMixin.parent.fset(self, value)

    @property
    def parents(self) -> tuple[ResourcesNode, ...]:
        """All ancestors, nearest first, ending with the root."""
        return tuple(reversed(self.ancestors))

    @property
    def request_path(self) -> str:
        """
        Request path of this node without any extension (``/`` for a root).

        A node removed from its tree keeps reporting the path it was removed
        from, and so do its descendants.
        """
        return join_path(self._segments(), delimiter=self.delimiter)

    def _segments(self) -> tuple[str, ...]:
        top, *rest = self.path
        names = tuple(node.name for node in rest)
        if top._name is not None:
            names = (*top._origin, top._name, *names)
        return names

    def tokenize(self, path: str) -> TokenizedPath:
        return tokenize(path, delimiter=self.delimiter)

    # Insertion

    def get_or_create_child(self, name: str) -> ResourcesNode:
        """Return the child called ``name``, creating it if it does not exist."""
        child = self._children_by_name.get(name)
        if child is None:
            child = type(self)(name, parent=self, delimiter=self.delimiter)
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Created node %s", child.request_path)
        return child

    def add(self, path: str, asset: Any) -> None:
        """
        Store ``asset`` at ``path``, relative to this node.

        Missing intermediate nodes are created. The extension of ``path``
        selects the format; adding a path that already holds that format
        replaces its asset. ``node[path] = asset`` is equivalent.
        """
        self.add_tokenized(self.tokenize(path), asset)

    def add_tokenized(self, tokens: TokenizedPath | tuple[Iterable[str], str], asset: Any) -> None:
        """
        Store ``asset`` at an already tokenized path.

        ``tokens`` is a :class:`~resourcetree.paths.TokenizedPath` or any
        ``(segments, ext)`` pair.

        Raises
        ------
        InvalidPathError
            If a segment is not a string or contains the delimiter.
        """
        segments, ext = tokens
        node = self
        for segment in check_segments(segments, delimiter=self.delimiter):
            node = node.get_or_create_child(segment)
        node.formats.add(asset, ext)

    __setitem__ = add

    # Lookup

    def dig(self, *segments: str) -> ResourcesNode | None:
        """Walk existing children along ``segments``; ``None`` on the first miss."""
        node: ResourcesNode | None = self
        for segment in segments:
            node = node._children_by_name.get(segment)
            if node is None:
                return None
        return node

    def get(self, path: str) -> ResourcesNode | None:
        """
        Return the node at ``path`` or ``None``.

        The extension of ``path`` plays no part in the lookup: ``get("/a.html")``
        and ``get("/a.json")`` both return node ``a``, whichever formats it
        holds. ``node[path]`` is equivalent.
        """
        return self.dig(*self.tokenize(path).segments)

    __getitem__ = get

    def get_resource(self, path: str) -> Format | None:
        """Return the format variant at ``path`` (exact extension match) or ``None``."""
        return self.get_resource_tokenized(self.tokenize(path))

    def get_resource_tokenized(self, tokens: TokenizedPath | tuple[Iterable[str], str]) -> Format | None:
        segments, ext = tokens
        node = self.dig(*segments)
        if node is None:
            return None
        return node.formats.ext(ext)

    # Removal

    def remove(self) -> None:
        """
        Remove this node's content from the tree.

        A leaf is detached from its parent. A node with children, or a root,
        only has its formats cleared, so no subtree is ever orphaned.

        Ancestors left without formats or children by the removal are kept.
        """
        if self.is_leaf and not self.is_root:
            self.parent._remove_child(self._name)
        else:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Clearing formats of %s", self.request_path)
            self.formats.clear()

    def _remove_child(self, name: str | None) -> None:
        child = self._children_by_name.get(name)
        if child is not None:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Removing node %s", child.request_path)
            child.parent = None

    # Traversal

    def resources(self) -> Iterator[Format]:
        """
        Iterate over the formats of this node and of its whole subtree.

        The node's own formats come first, then each child's subtree in child
        order. The tree must not be modified during iteration.
        """
        for node in PreOrderIter(self):
            yield from node.formats

    __iter__ = resources

    def _check_attach(self, parent: object) -> None:
        if not isinstance(parent, ResourcesNode):
            raise ResourceTreeError(
                f"Cannot attach to {type(parent).__name__}, expected ResourcesNode"
            )
        if self._name is None or parent.delimiter in self._name:
            raise InvalidPathError(f"Invalid child node name: {self._name!r}", self._name)
        if self._name in parent._children_by_name:
            raise DuplicateNodeError(self._name)

    # anytree hooks keep the name index in sync with ``children``.

    def _post_attach(self, parent: ResourcesNode) -> None:
        parent._children_by_name[self._name] = self

    def _post_detach(self, parent: ResourcesNode) -> None:
        parent._children_by_name.pop(self._name, None)
        self._origin = parent._segments()

    def __repr__(self) -> str:
        resources = [f.request_path for f in self.formats]
        children = [c.name for c in self.children]
        return f"<{type(self).__name__}: resources={resources!r} children={children!r}>"
