"""Helpers for working with caller-owned tree data."""

from __future__ import annotations

from typing import Any

from checktree.events import ConcatChildren
from checktree.protocols import NodeAccessor
from checktree.tree.equality import structural_equal

__all__ = ["create_concat_children_function", "find_node", "find_node_by_ref_key"]


def find_node(data: list[Any], accessor: NodeAccessor, value: Any) -> Any | None:
    """Return the first node (pre-order) whose value equals ``value``."""
    for node in data:
        if structural_equal(accessor.get_value(node), value):
            return node
        found = find_node(accessor.get_children(node), accessor, value)
        if found is not None:
            return found
    return None


def find_node_by_ref_key(
    data: list[Any], accessor: NodeAccessor, ref_key: str
) -> Any | None:
    """Return the caller node carrying ``ref_key``, following the key's path."""
    # "0-2-1" -> ordinals [2, 1]
    nodes = data
    node = None
    for part in ref_key.split("-")[1:]:
        try:
            node = nodes[int(part)]
        except (ValueError, IndexError, TypeError):
            return None
        nodes = accessor.get_children(node)
    if node is None or accessor.get_ref_key(node) != ref_key:
        return None
    return node


def create_concat_children_function(
    node: Any, accessor: NodeAccessor
) -> ConcatChildren:
    """Build the ``concat(data, children)`` helper for lazy-loaded subtrees.

    The returned callable finds the node with the same value as ``node``
    inside ``data`` (falling back to ``node`` itself), replaces its children
    and returns a new top-level list so the caller's change is seen as a
    structural change.
    """
    value = accessor.get_value(node)

    def concat(data: list[Any], children: list[Any]) -> list[Any]:
        target = find_node(data, accessor, value) if value is not None else None
        accessor.set_children(target if target is not None else node, children)
        return list(data)

    return concat
