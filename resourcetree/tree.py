# resourcetree/tree.py

"""
Resource tree rendering utilities.

This module renders a resource tree as a human-readable Unicode tree, similar
to the Unix ``tree`` command. Each line shows a node's segment name followed
by the extensions of the formats it holds, which makes it easy to see at a
glance which request paths a site will serve.

Rendering relies on :class:`anytree.RenderTree` with the ``ContStyle``
connectors (``├──``, ``│``, ``└──``). Children are drawn in insertion order.
"""


from __future__ import annotations

from anytree import ContStyle, RenderTree

from .node import ResourcesNode
from .paths import ext_suffix

NO_EXTENSION = "<none>"


def node_label(node: ResourcesNode) -> str:
    """
    Return the label drawn for a single node.

    The label is the node's name (the delimiter for a root) followed, when the
    node holds formats, by their extensions in brackets, e.g.
    ``hello [.html, .json]``. An extensionless format is shown as ``<none>``.

    Parameters
    ----------
    node : ResourcesNode
        Node to label.

    Returns
    -------
    str
        The label text.
    """

    name = node.delimiter if node.is_root else node.name
    if not len(node.formats):
        return name
    exts = ", ".join(ext_suffix(ext) or NO_EXTENSION for ext in node.formats.extensions)
    return f"{name} [{exts}]"


def draw_tree(node: ResourcesNode) -> str:
    """
    Render the subtree below ``node`` as a Unicode string.

    The first line is the label of ``node`` itself; every descendant follows
    on its own line, prefixed with tree connectors.

    Parameters
    ----------
    node : ResourcesNode
        Node to start from. Need not be a root.

    Returns
    -------
    str
        The rendered tree as a single string, without a trailing newline.
    """

    lines = [f"{pre}{node_label(n)}" for pre, _, n in RenderTree(node, style=ContStyle())]
    return "\n".join(lines)
