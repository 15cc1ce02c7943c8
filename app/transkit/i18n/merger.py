"""Deep merge of locale trees.

A locale may be split across several files (a base file plus overlays).
Trees are merged in discovery order: when both sides hold a Node for the same
key they are merged recursively, otherwise the later value replaces the
earlier one. Conflicting leaf/node types are not an error.
"""

from typing import Dict, Iterable

from transkit.i18n.models import Node, Value


def merge(base: Node, overlay: Node) -> Node:
    """Merge ``overlay`` on top of ``base`` without mutating either."""
    children: Dict[str, Value] = dict(base.children)
    for key, value in overlay.children.items():
        current = children.get(key)
        if isinstance(current, Node) and isinstance(value, Node):
            children[key] = merge(current, value)
        else:
            children[key] = value
    return Node(children)


def merge_trees(trees: Iterable[Node]) -> Node:
    """Merge an ordered sequence of trees into one; later trees win.

    Args:
        trees: Trees in discovery order.

    Returns:
        The merged tree (an empty Node when ``trees`` is empty).
    """
    merged = Node()
    for tree in trees:
        merged = merge(merged, tree)
    return merged
