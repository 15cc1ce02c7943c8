"""Flatten a merged locale tree into a flat table of dot-joined keys."""

from transkit.i18n.models import FlatTable, Leaf, Node

KEY_SEPARATOR = "."


def join_key(prefix: str, key: str) -> str:
    return f"{prefix}{KEY_SEPARATOR}{key}" if prefix else key


def flatten(node: Node, prefix: str = "") -> FlatTable:
    """Flatten ``node`` into ``{"a.b": "text"}`` entries.

    Empty nodes produce no entries.

    Args:
        node: Merged tree for one locale.
        prefix: Key path the node lives under.

    Returns:
        Flat table of dot-joined key -> text.
    """
    table: FlatTable = {}
    for key, value in node.children.items():
        full_key = join_key(prefix, key)
        if isinstance(value, Leaf):
            table[full_key] = value.text
        else:
            table.update(flatten(value, full_key))
    return table
