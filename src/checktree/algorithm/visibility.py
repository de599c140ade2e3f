"""VisibilityFilter: keyword search with upward OR-promotion.

A node is visible when its label contains the keyword (case-insensitive,
after flattening composite labels to text) or when any descendant is
visible.  Children are evaluated first and their results are OR-ed into the
parent, so a match deep in the tree keeps its whole ancestor chain visible.
"""

from __future__ import annotations

import logging
from typing import Any

from checktree.protocols import NodeAccessor
from checktree.tree.labels import label_to_text

__all__ = ["VisibilityFilter"]

logger = logging.getLogger(__name__)


class VisibilityFilter:
    """Annotates caller tree nodes with a ``visible`` flag.

    Args:
        accessor: Reads labels/children and writes the ``visible`` flag.
    """

    def __init__(self, accessor: NodeAccessor) -> None:
        self._accessor = accessor

    @staticmethod
    def should_display(label: Any, keyword: str | None) -> bool:
        """Return True if ``label`` matches ``keyword``.

        A missing or blank keyword matches everything.
        """
        if keyword is None or not keyword.strip():
            return True
        return keyword.casefold() in label_to_text(label).casefold()

    def filter(self, tree: Any, keyword: str | None = None) -> Any:
        """Annotate every node of ``tree`` with ``visible`` and return ``tree``.

        The tree is returned unchanged in shape; only the ``visible`` flags
        are written.
        """
        if isinstance(tree, (list, tuple)):
            self._set_visible(tree, keyword)
        logger.debug("Filtered tree with keyword %r", keyword)
        return tree

    def has_visible(self, tree: Any) -> bool:
        """True when at least one root (and hence any node) is visible."""
        if not isinstance(tree, (list, tuple)):
            return False
        return any(self._accessor.get_visible(node) for node in tree)

    def _set_visible(self, nodes: Any, keyword: str | None) -> None:
        for node in nodes:
            visible = self.should_display(self._accessor.get_label(node), keyword)
            children = self._accessor.get_children(node)
            if children:
                self._set_visible(children, keyword)
                if any(self._accessor.get_visible(child) for child in children):
                    visible = True
            self._accessor.set_visible(node, visible)
