"""TriStateResolver: display check-state (checked/unchecked/indeterminate).

Resolution rules for a node N:

- N has no children, or cascade is off: CHECKED iff N.check.
- Every checkable child of N is fully checked (recursively): CHECKED.
- At least one descendant of N is checked: INDETERMINATE.
- Otherwise: UNCHECKED.

A node whose children are all uncheckable has no checkable child to test and
falls back to its own flag, so a group with no checkable members never shows
as permanently indeterminate.

Resolution refreshes the cached ``check_all`` flag of each resolved node and
memoises results per ref_key.  The memo must be cleared whenever the index
it was computed from changes.
"""

from __future__ import annotations

from cachetools import LRUCache

from checktree.errors import UnknownNodeError
from checktree.tree.nodes import (
    CheckState,
    IndexedNode,
    TreeIndex,
    checkable_children,
)

__all__ = ["TriStateResolver"]


class TriStateResolver:
    """Computes ``CheckState`` for nodes of a ``TreeIndex``.

    Each instance keeps its own LRU memo of resolved states; two resolvers
    never share cache state.

    Args:
        cascade:        Whether parent/child cascade semantics apply.
        max_cache_size: Maximum number of memoised states.  Defaults to 4096.
    """

    def __init__(self, cascade: bool = True, max_cache_size: int = 4096) -> None:
        self._cascade = cascade
        self._cache: LRUCache[str, CheckState] = LRUCache(maxsize=max_cache_size)

    @property
    def cascade(self) -> bool:
        return self._cascade

    def clear(self) -> None:
        """Forget every memoised state."""
        self._cache.clear()

    def resolve(self, index: TreeIndex, ref_key: str) -> CheckState:
        """Return the display state of the node at ``ref_key``.

        Raises:
            UnknownNodeError: If ``ref_key`` is not in ``index``.
        """
        cached = self._cache.get(ref_key)
        if cached is not None:
            return cached

        node = index.get(ref_key)
        if node is None:
            raise UnknownNodeError(ref_key)

        state = self._compute(index, node)
        self._cache[ref_key] = state
        return state

    def refresh(self, index: TreeIndex) -> None:
        """Recompute every node's state, refreshing all ``check_all`` flags."""
        self.clear()
        for ref_key in index:
            self.resolve(index, ref_key)

    def is_every_child_checked(self, index: TreeIndex, node: IndexedNode) -> bool:
        children = checkable_children(index, node)
        if not children:
            return node.check
        return all(
            self.resolve(index, child.ref_key) == CheckState.CHECKED
            if child.has_children
            else child.check
            for child in children
        )

    def is_some_child_checked(self, index: TreeIndex, node: IndexedNode) -> bool:
        for child_key in node.child_keys:
            child = index[child_key]
            if child.check:
                return True
            if child.has_children and (
                self.resolve(index, child_key) != CheckState.UNCHECKED
            ):
                return True
        return False

    def _compute(self, index: TreeIndex, node: IndexedNode) -> CheckState:
        if not node.has_children or not self._cascade:
            node.check_all = False
            return CheckState.CHECKED if node.check else CheckState.UNCHECKED

        if self.is_every_child_checked(index, node):
            node.check_all = True
            return CheckState.CHECKED

        node.check_all = False
        if self.is_some_child_checked(index, node):
            return CheckState.INDETERMINATE
        return CheckState.UNCHECKED
