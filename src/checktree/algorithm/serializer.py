"""CheckStateSerializer: converts between the index and external value lists.

The outside world only ever sees a flat list of selected values.  Three
conversions are provided:

- ``serialize_all``: every checked value, in index (pre-order) order.
- ``serialize_only_parent``: checked values with implied descendants
  dropped.  Under cascade, a checked child whose nearest checkable ancestor
  is itself checked and fully checked (``check_all``) is already implied by
  that ancestor and is not reported.  A chain broken by uncheckable groups
  all the way to the root has no such ancestor, so its checked members are
  reported.
- ``unserialize``: resets the index flags from a value list.  Under cascade
  each node first inherits its parent's flag, so listing a parent checks all
  its checkable descendants without naming them.

Values present in the uncheckable list are never reported and never marked
checked.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from checktree.tree.equality import contains_value
from checktree.tree.nodes import TreeIndex, nearest_checkable_ancestor

__all__ = ["CheckStateSerializer"]


class CheckStateSerializer:
    """Serializes and unserializes index check flags.

    Args:
        uncheckable_values: Values that can never be reported or checked.
        cascade:            Whether listing a parent implies its children.
    """

    def __init__(
        self,
        uncheckable_values: Sequence[Any] = (),
        cascade: bool = True,
    ) -> None:
        self._uncheckable_values: tuple[Any, ...] = tuple(uncheckable_values)
        self._cascade = cascade

    @property
    def cascade(self) -> bool:
        return self._cascade

    # ------------------------------------------------------------------
    # Index -> values
    # ------------------------------------------------------------------

    def serialize_all(self, index: TreeIndex) -> list[Any]:
        """Return the value of every checked node, in pre-order."""
        return self.filter_selected_values(
            node.value for node in index.values() if node.check
        )

    def serialize_only_parent(self, index: TreeIndex) -> list[Any]:
        """Return checked values, omitting those implied by a checked ancestor."""
        values: list[Any] = []
        for node in index.values():
            if not node.check:
                continue
            if node.parent_key is None:
                values.append(node.value)
                continue
            ancestor = nearest_checkable_ancestor(index, node)
            if ancestor is None or not (ancestor.check and ancestor.check_all):
                values.append(node.value)
        return self.filter_selected_values(values)

    def filter_selected_values(self, values: Iterable[Any]) -> list[Any]:
        """Drop every value that appears in the uncheckable list."""
        return [
            value
            for value in values
            if not contains_value(self._uncheckable_values, value)
        ]

    # ------------------------------------------------------------------
    # Values -> index
    # ------------------------------------------------------------------

    def unserialize(self, index: TreeIndex, values: Iterable[Any]) -> None:
        """Reset every node's ``check`` flag from ``values`` (in place).

        Nodes are visited in pre-order so a parent is always reset before
        its children read it.  Uncheckable nodes stay unchecked but still
        pass their inherited flag on to their children.
        """
        selected = self.filter_selected_values(values)
        inherited: dict[str, bool] = {}

        for ref_key, node in index.items():
            flag = False
            if self._cascade and node.parent_key is not None:
                flag = inherited[node.parent_key]
            if contains_value(selected, node.value):
                flag = True
            inherited[ref_key] = flag
            node.check = flag and not node.uncheckable
