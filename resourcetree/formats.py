# resourcetree/formats.py

"""
Format variants stored on a resource node.

A single logical resource can be rendered in several formats, e.g.
``/about.html`` and ``/about.json``. Both live on the ``about`` node and are
told apart by extension: :class:`Formats` maps each extension to a
:class:`Format` wrapping the caller's asset.
"""


from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterator

from .paths import ext_suffix, normalize_ext

if TYPE_CHECKING:
    from .node import ResourcesNode

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Format:
    """
    One format variant of a resource.

    The asset is opaque: it is stored and handed back, never inspected.
    """

    node: ResourcesNode = field(repr=False)
    ext: str
    asset: Any

    @property
    def request_path(self) -> str:
        """Request path of this variant, e.g. ``/blog/posts/hello.html``."""
        return self.node.request_path + ext_suffix(self.ext)


class Formats:
    """
    The format variants held by a single :class:`~resourcetree.node.ResourcesNode`.

    Extensions are unique: adding an extension that is already present
    replaces its variant. Iteration yields :class:`Format` objects in
    insertion order.
    """

    def __init__(self, node: ResourcesNode) -> None:
        self.node = node
        self._formats: dict[str, Format] = {}

    def add(self, asset: Any, ext: str = "") -> Format:
        """Store ``asset`` under ``ext``, replacing any existing variant."""
        ext = normalize_ext(ext)
        if ext in self._formats and logger.isEnabledFor(logging.DEBUG):
            logger.debug("Replacing format %r on %s", ext, self.node.request_path)
        fmt = Format(node=self.node, ext=ext, asset=asset)
        self._formats[ext] = fmt
        return fmt

    def ext(self, ext: str) -> Format | None:
        return self._formats.get(normalize_ext(ext))

    def clear(self) -> None:
        self._formats.clear()

    @property
    def extensions(self) -> list[str]:
        return list(self._formats)

    def __iter__(self) -> Iterator[Format]:
        return iter(self._formats.values())

    def __len__(self) -> int:
        return len(self._formats)

    def __contains__(self, ext: object) -> bool:
        return isinstance(ext, str) and normalize_ext(ext) in self._formats

    def __repr__(self) -> str:
        return f"<Formats: {[f.request_path for f in self]!r}>"
