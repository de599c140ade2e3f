"""NodeIndexer: flattens a caller tree into a ref_key-addressed index.

Walks the tree depth-first, assigning every node a ref_key derived from its
structural position:

- Roots are numbered under the sentinel ``"0"``: ``"0-0"``, ``"0-1"``, ...
- Each level appends ``"-{ordinal}"`` to the parent's ref_key.

Each caller node is augmented in place with its ref_key (the ``refKey``
field) so later interactions can be joined back to the index.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from checktree.protocols import NodeAccessor
from checktree.tree.equality import contains_value
from checktree.tree.nodes import IndexedNode, TreeIndex

__all__ = ["ROOT_REF", "NodeIndexer"]

logger = logging.getLogger(__name__)

ROOT_REF = "0"


@dataclass
class NodeIndexer:
    """Converts a caller tree into a flat ``TreeIndex``.

    Re-flattening the same tree with the same options produces a
    structurally equal index: ref_keys depend only on position.

    Attributes:
        accessor:           Reads label/value/children from caller nodes.
        uncheckable_values: Values whose node is flagged ``uncheckable``.
        expand_all:         Expand every node with children unless the node
                            carries its own ``expand`` hint.

    Example::

        indexer = NodeIndexer(KeyAccessor())
        index = indexer.flatten([{"label": "A", "value": "a", "children": []}])
        # index: {"0-0": IndexedNode(ref_key="0-0", label="A", value="a", ...)}
    """

    accessor: NodeAccessor
    uncheckable_values: Sequence[Any] = ()
    expand_all: bool = False

    def flatten(self, tree: Any) -> TreeIndex:
        """Build the index for ``tree``.

        Args:
            tree: The list of root nodes.  Anything that is not a list or
                  tuple is treated as an empty tree.

        Returns:
            A new ``TreeIndex`` in depth-first pre-order.
        """
        index: TreeIndex = {}
        if isinstance(tree, (list, tuple)):
            self._flatten_level(tree, ROOT_REF, None, 0, index)
        logger.debug("Indexed %d tree nodes", len(index))
        return index

    def _flatten_level(
        self,
        nodes: Sequence[Any],
        ref: str,
        parent: IndexedNode | None,
        layer: int,
        index: TreeIndex,
    ) -> None:
        for ordinal, node in enumerate(nodes):
            ref_key = f"{ref}-{ordinal}"
            self.accessor.set_ref_key(node, ref_key)
            children = self.accessor.get_children(node)
            value = self.accessor.get_value(node)

            indexed = IndexedNode(
                ref_key=ref_key,
                label=self.accessor.get_label(node),
                value=value,
                layer=layer,
                expand=self._expand_state(node, children),
                uncheckable=contains_value(self.uncheckable_values, value),
                parent_key=parent.ref_key if parent is not None else None,
            )
            index[ref_key] = indexed
            if parent is not None:
                parent.child_keys.append(ref_key)

            self._flatten_level(children, ref_key, indexed, layer + 1, index)

    def _expand_state(self, node: Any, children: list[Any]) -> bool:
        """Leaves never expand; a node's own hint beats ``expand_all``."""
        if not children:
            return False
        hint = self.accessor.get_expand_hint(node)
        if hint is not None:
            return hint
        return self.expand_all
