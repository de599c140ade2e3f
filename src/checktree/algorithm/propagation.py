"""CheckStatePropagator: pushes a check toggle down and pulls it up.

``toggle()`` never mutates the index it is given.  It clones the index,
then runs two passes over the clone:

1. ``propagate_down``: the target and (under cascade) its whole subtree take
   the new value.  Uncheckable nodes are walked through but keep their flags.
2. ``propagate_up``: every ancestor is recomputed from its direct children.
   Unchecking always unchecks the ancestors; checking marks an ancestor
   checked only when every checkable child is checked.

The stored state is intentionally binary; INDETERMINATE is derived later by
``TriStateResolver`` for display.
"""

from __future__ import annotations

import logging

from checktree.errors import UnknownNodeError
from checktree.tree.nodes import (
    IndexedNode,
    TreeIndex,
    checkable_children,
    clone_index,
)

__all__ = ["CheckStatePropagator"]

logger = logging.getLogger(__name__)


class CheckStatePropagator:
    """Applies check toggles to copies of a ``TreeIndex``.

    Args:
        cascade: When False only the target node changes; neither pass
                 recurses.

    Example::

        propagator = CheckStatePropagator()
        new_index = propagator.toggle(index, "0-0", True)
        # index is untouched; new_index has "0-0" and its subtree checked
    """

    def __init__(self, cascade: bool = True) -> None:
        self._cascade = cascade

    @property
    def cascade(self) -> bool:
        return self._cascade

    def toggle(self, index: TreeIndex, ref_key: str, checked: bool) -> TreeIndex:
        """Return a new index with the node at ``ref_key`` set to ``checked``.

        Args:
            index:   The current index (not mutated).
            ref_key: Target node.
            checked: The new check value.

        Returns:
            A mutated clone of ``index``.

        Raises:
            UnknownNodeError: If ``ref_key`` is not in ``index``.
        """
        if ref_key not in index:
            raise UnknownNodeError(ref_key)

        nodes = clone_index(index)
        target = nodes[ref_key]
        self.propagate_down(nodes, target, checked)
        if target.parent_key is not None:
            self.propagate_up(nodes, nodes[target.parent_key], checked)

        logger.debug("Toggled %s to %s (cascade=%s)", ref_key, checked, self._cascade)
        return nodes

    def propagate_down(
        self, nodes: TreeIndex, node: IndexedNode, checked: bool
    ) -> None:
        """Set ``node`` and, under cascade, all its descendants to ``checked``."""
        cascading = self._cascade and node.has_children
        if not node.uncheckable:
            node.check = checked
            node.check_all = checked if cascading else False
        if cascading:
            for child_key in node.child_keys:
                self.propagate_down(nodes, nodes[child_key], checked)

    def propagate_up(self, nodes: TreeIndex, node: IndexedNode, checked: bool) -> None:
        """Recompute ``node`` and its ancestors after a child changed."""
        if not self._cascade:
            return

        if not node.uncheckable:
            complete = checked and self.every_child_checked(nodes, node)
            node.check = complete
            node.check_all = complete

        if node.parent_key is not None:
            self.propagate_up(nodes, nodes[node.parent_key], checked)

    @staticmethod
    def every_child_checked(nodes: TreeIndex, node: IndexedNode) -> bool:
        """True when every checkable direct child of ``node`` is checked."""
        return all(child.check for child in checkable_children(nodes, node))
