"""IndexedNode dataclass and CheckState StrEnum for the flat tree index.

The index is an arena: a ``dict`` from ref_key to ``IndexedNode``.  Parent
and child links are stored as ref_keys rather than object references, so
discarding the mapping is all a rebuild needs.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum, auto
from typing import Any

__all__ = [
    "CheckState",
    "IndexedNode",
    "TreeIndex",
    "checkable_children",
    "clone_index",
    "nearest_checkable_ancestor",
]


class CheckState(StrEnum):
    """Display check-state of a node.

    - UNCHECKED     -> "unchecked"
    - CHECKED       -> "checked"
    - INDETERMINATE -> "indeterminate" : some but not all checkable
      descendants are checked (display only, never stored)
    """

    UNCHECKED = auto()
    CHECKED = auto()
    INDETERMINATE = auto()


@dataclass(slots=True)
class IndexedNode:
    """One entry of the flat tree index.

    Attributes:
        ref_key:     Structural position key, e.g. ``"0-2-1"``.
        label:       Copy of the caller node's label.
        value:       Copy of the caller node's value.
        layer:       Depth of the node; roots are layer 0.
        expand:      Whether the node is expanded.
        check:       Whether the node is checked.
        check_all:   Cached: this node and all its checkable descendants are
                     checked.
        uncheckable: The node's checkbox is inert.
        parent_key:  ref_key of the parent, ``None`` for roots.
        child_keys:  ref_keys of the direct children, in order.
    """

    ref_key: str
    label: Any = None
    value: Any = None
    layer: int = 0
    expand: bool = False
    check: bool = False
    check_all: bool = False
    uncheckable: bool = False
    parent_key: str | None = None
    child_keys: list[str] = field(default_factory=list)

    @property
    def has_children(self) -> bool:
        return bool(self.child_keys)


TreeIndex = dict[str, IndexedNode]


def clone_index(index: TreeIndex) -> TreeIndex:
    """Return a copy of ``index`` whose nodes can be mutated independently.

    Node values and labels are shared (they are never mutated); the flag
    fields and ``child_keys`` lists are copied.
    """
    return {
        ref_key: replace(node, child_keys=list(node.child_keys))
        for ref_key, node in index.items()
    }


def checkable_children(index: TreeIndex, node: IndexedNode) -> list[IndexedNode]:
    """Return the direct children that take part in "every child checked" tests.

    Uncheckable children are left out along with their whole subtree.
    """
    return [
        index[child_key]
        for child_key in node.child_keys
        if not index[child_key].uncheckable
    ]


def nearest_checkable_ancestor(
    index: TreeIndex, node: IndexedNode
) -> IndexedNode | None:
    """Walk up past uncheckable ancestors; ``None`` if the chain runs out."""
    parent_key = node.parent_key
    while parent_key is not None:
        parent = index[parent_key]
        if not parent.uncheckable:
            return parent
        parent_key = parent.parent_key
    return None

