"""CheckTree: orchestrator that wires the indexer, propagator, serializer,
tri-state resolver and visibility filter into one stateful engine.

This is the layer a check-tree control talks to.  It owns the index and the
lifecycle around it:

- Construction flattens the tree and seeds check flags from the initial
  value list.
- Structural change notifications (``set_data``, ``set_uncheckable_item_values``,
  ``set_disabled_item_values``, ``set_cascade``) rebuild the index wholesale
  and re-derive check flags from the current value list.
- User interactions (``select``, ``expand``, ``search``, ``clean``) mutate
  state and notify the caller through callbacks.

Controlled vs uncontrolled:
- Controlled (``value`` passed at construction): the caller owns the
  selected-value list.  ``select`` reports the new list but the engine keeps
  showing the old one until the caller pushes it back with ``set_value``.
- Uncontrolled: the engine owns the list, starting from ``default_value``.

The only writes to caller-owned nodes are the ``refKey`` and ``visible``
fields.  Callers must not mutate the tree while an engine call is running.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from checktree.algorithm.propagation import CheckStatePropagator
from checktree.algorithm.serializer import CheckStateSerializer
from checktree.algorithm.tristate import TriStateResolver
from checktree.algorithm.visibility import VisibilityFilter
from checktree.config import CheckTreeConfig
from checktree.errors import UnknownNodeError
from checktree.events import ExpandEvent, SearchEvent, SelectEvent
from checktree.result import RenderNode
from checktree.tree.equality import (
    contains_value,
    shallow_equal_sequence,
    structural_equal,
)
from checktree.tree.indexer import NodeIndexer
from checktree.tree.nodes import CheckState, IndexedNode, TreeIndex
from checktree.utils import create_concat_children_function, find_node_by_ref_key

__all__ = ["CheckTree"]

logger = logging.getLogger(__name__)


class CheckTree:
    """Stateful check-tree engine.

    Example::

        from checktree import CheckTree

        data = [{"label": "A", "value": "a", "children": [
            {"label": "B", "value": "b"},
            {"label": "C", "value": "c"},
        ]}]
        tree = CheckTree(data, default_value=["b"])
        tree.check_state("0-0")      # CheckState.INDETERMINATE
        tree.select("0-0-1")         # ["a"]
        tree.selected_values         # ["a"]
    """

    def __init__(
        self,
        data: Sequence[Any],
        value: Sequence[Any] | None = None,
        default_value: Sequence[Any] | None = None,
        config: CheckTreeConfig | None = None,
        *,
        on_change: Callable[[list[Any]], None] | None = None,
        on_select: Callable[[SelectEvent], None] | None = None,
        on_expand: Callable[[ExpandEvent], None] | None = None,
        on_search: Callable[[SearchEvent], None] | None = None,
    ) -> None:
        """Initialise the engine and build the first index.

        Args:
            data:          List of root nodes (caller-owned).
            value:         Selected values in controlled mode.  Passing any
                           list, even an empty one, makes the engine
                           controlled.
            default_value: Initial selected values in uncontrolled mode.
            config:        Engine options.  Defaults to ``CheckTreeConfig()``.
            on_change:     Called with the new value list after a toggle or
                           ``clean()``.
            on_select:     Called with a ``SelectEvent`` after a toggle.
            on_expand:     Called with an ``ExpandEvent`` after expand/collapse.
            on_search:     Called with a ``SearchEvent`` on keyword change.
        """
        self._config: CheckTreeConfig = (
            config if config is not None else CheckTreeConfig()
        )
        self._controlled = value is not None
        self._on_change = on_change
        self._on_select = on_select
        self._on_expand = on_expand
        self._on_search = on_search

        self._configure()

        self._data: list[Any] = list(data)
        self._data_changed = False
        self._index: TreeIndex = {}
        self._active_node: Any = None
        self._selected_values: list[Any] = self._initial_value(value, default_value)
        self._search_keyword: str = self._config.search_keyword or ""
        self._expand_all: bool = self._config.effective_expand_all

        self._reindex()
        self._unserialize(self._selected_values)
        self._filter_data = self._filter.filter(self._data, self._search_keyword)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> CheckTreeConfig:
        return self._config

    @property
    def index(self) -> TreeIndex:
        """The live index.  Treat it as read-only."""
        return self._index

    @property
    def data(self) -> list[Any]:
        return self._data

    @property
    def filter_data(self) -> list[Any]:
        """The tree annotated with ``visible`` flags for the current keyword."""
        return self._filter_data

    @property
    def is_controlled(self) -> bool:
        return self._controlled

    @property
    def selected_values(self) -> list[Any]:
        return list(self._selected_values)

    @property
    def has_value(self) -> bool:
        """True when at least one selected value exists in the tree."""
        return any(
            contains_value(self._selected_values, node.value)
            for node in self._index.values()
        )

    @property
    def search_keyword(self) -> str:
        if self._config.search_keyword is not None:
            return self._config.search_keyword
        return self._search_keyword

    @property
    def expand_all(self) -> bool:
        return self._expand_all

    @property
    def active_node(self) -> Any:
        """The caller node most recently toggled, or None."""
        return self._active_node

    @property
    def no_results(self) -> bool:
        """True when the current keyword hides every node."""
        return not self._filter.has_visible(self._filter_data)

    # ------------------------------------------------------------------
    # Node queries
    # ------------------------------------------------------------------

    def node(self, ref_key: str) -> IndexedNode:
        """Return the indexed node at ``ref_key``.

        Raises:
            UnknownNodeError: If the ref_key is stale or unknown.
        """
        try:
            return self._index[ref_key]
        except KeyError:
            raise UnknownNodeError(ref_key) from None

    def check_state(self, ref_key: str) -> CheckState:
        return self._resolver.resolve(self._index, ref_key)

    def is_disabled(self, ref_key: str) -> bool:
        return contains_value(
            self._config.disabled_item_values, self.node(ref_key).value
        )

    def is_uncheckable(self, ref_key: str) -> bool:
        return self.node(ref_key).uncheckable

    def is_expanded(self, ref_key: str) -> bool:
        """Expansion as a renderer should show it; leaves are never expanded."""
        node = self.node(ref_key)
        return node.has_children and node.expand

    def selected_items(self) -> list[IndexedNode]:
        """Indexed nodes whose value is in the selected-value list."""
        return [
            node
            for node in self._index.values()
            if contains_value(self._selected_values, node.value)
        ]

    def checked_values(self) -> list[Any]:
        """Every checked value, including those implied by a checked ancestor."""
        return self._serializer.serialize_all(self._index)

    def every_child_uncheckable(self, ref_key: str) -> bool:
        node = self.node(ref_key)
        return all(self._index[key].uncheckable for key in node.child_keys)

    def every_first_level_uncheckable(self) -> bool:
        return all(
            node.uncheckable
            for node in self._index.values()
            if node.parent_key is None
        )

    def some_node_has_children(self) -> bool:
        """True when any root node carries a children field."""
        return any(self._accessor.has_children_field(node) for node in self._data)

    def formatted_nodes(self) -> list[RenderNode]:
        """Return the visible part of the tree as ``RenderNode`` objects."""
        return self._format_level(self._filter_data)

    # ------------------------------------------------------------------
    # Interactions
    # ------------------------------------------------------------------

    def select(self, ref_key: str, checked: bool | None = None) -> list[Any] | None:
        """Toggle the node at ``ref_key``.

        Args:
            ref_key: Target node.
            checked: New check value.  Defaults to the opposite of the node's
                     current flag.

        Returns:
            The new selected-value list, or None when the node is disabled
            or uncheckable and the interaction was ignored.

        Raises:
            UnknownNodeError: If ``ref_key`` is not in the index.
        """
        node = self.node(ref_key)
        if node.uncheckable or self.is_disabled(ref_key):
            logger.debug("Ignoring toggle of inert node %s", ref_key)
            return None

        if checked is None:
            checked = not node.check

        next_index = self._propagator.toggle(self._index, ref_key, checked)
        values = self._serializer.serialize_only_parent(next_index)

        source = find_node_by_ref_key(self._data, self._accessor, ref_key)
        self._active_node = source
        if not self._controlled:
            self._selected_values = values
            self._unserialize(values)

        if self._on_change is not None:
            self._on_change(values)
        if self._on_select is not None:
            self._on_select(SelectEvent(node=source, layer=node.layer, values=values))
        return values

    def expand(self, ref_key: str, expanded: bool | None = None) -> bool:
        """Expand or collapse the node at ``ref_key``; returns the new state."""
        node = self.node(ref_key)
        node.expand = (not node.expand) if expanded is None else expanded

        if self._on_expand is not None:
            source = find_node_by_ref_key(self._data, self._accessor, ref_key)
            concat = create_concat_children_function(source, self._accessor)

            def concat_and_mark(data: list[Any], children: list[Any]) -> list[Any]:
                self._data_changed = True
                return concat(data, children)

            self._on_expand(
                ExpandEvent(
                    node=source,
                    layer=node.layer,
                    expanded=node.expand,
                    concat=concat_and_mark,
                )
            )
        return node.expand

    def search(self, keyword: str, event: Any = None) -> None:
        """Handle a keyword typed by the user.

        When the keyword is engine-owned the tree is refiltered; the
        callback fires either way.
        """
        if self._config.search_keyword is None:
            self._filter_data = self._filter.filter(self._filter_data, keyword)
            self._search_keyword = keyword
        if self._on_search is not None:
            self._on_search(SearchEvent(keyword=keyword, event=event))

    def close(self) -> None:
        """Reset an engine-owned search keyword when the menu closes."""
        if self._config.search_keyword is None:
            self._filter_data = self._filter.filter(self._filter_data, "")
            self._search_keyword = ""

    def clean(self) -> None:
        """Clear the selection."""
        self._selected_values = []
        self._active_node = None
        self._unserialize([])
        if self._on_change is not None:
            self._on_change([])

    # ------------------------------------------------------------------
    # Change notifications
    # ------------------------------------------------------------------

    def set_data(self, data: Sequence[Any]) -> None:
        """Replace the tree.  A shallow-equal list is ignored."""
        if not self._data_changed and shallow_equal_sequence(self._data, data):
            return
        self._data = list(data)
        self._data_changed = False
        self._reindex()
        self._unserialize(self._selected_values)
        self._filter_data = self._filter.filter(self._data, self.search_keyword)

    def set_value(self, values: Sequence[Any]) -> None:
        """Push a new selected-value list (the controlled-mode update path)."""
        if len(values) == len(self._selected_values) and all(
            structural_equal(a, b)
            for a, b in zip(values, self._selected_values, strict=True)
        ):
            return
        self._selected_values = self._serializer.filter_selected_values(values)
        if not self._selected_values:
            self._active_node = None
        self._unserialize(self._selected_values)

    def set_uncheckable_item_values(self, values: Sequence[Any]) -> None:
        self._config = self._config.evolve(uncheckable_item_values=values)
        self._configure()
        self._selected_values = self._serializer.filter_selected_values(
            self._selected_values
        )
        self._reindex()
        self._unserialize(self._selected_values)

    def set_disabled_item_values(self, values: Sequence[Any]) -> None:
        self._config = self._config.evolve(disabled_item_values=values)
        self._configure()
        self._reindex()
        self._unserialize(self._selected_values)

    def set_cascade(self, cascade: bool) -> None:
        """Switch cascade mode; turning it on rebuilds the index."""
        if cascade == self._config.cascade:
            return
        self._config = self._config.evolve(cascade=cascade)
        self._configure()
        if cascade:
            self._reindex()
            self._unserialize(self._selected_values)
        else:
            self._resolver.refresh(self._index)

    def set_expand_all(self, expand_all: bool | None) -> None:
        """Expand or collapse every parent at once.

        ``None`` hands expansion back to the individual nodes, which keep
        their current state.
        """
        self._config = self._config.evolve(expand_all=expand_all)
        self._configure()
        self._expand_all = self._config.effective_expand_all
        self._apply_expand_all()

    def set_search_keyword(self, keyword: str | None) -> None:
        """Change the caller-owned keyword (None hands ownership back)."""
        self._config = self._config.evolve(search_keyword=keyword)
        self._configure()
        self._search_keyword = keyword or ""
        self._filter_data = self._filter.filter(self._data, self._search_keyword)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _configure(self) -> None:
        config = self._config
        self._accessor = config.accessor
        self._indexer = NodeIndexer(
            self._accessor,
            uncheckable_values=config.uncheckable_item_values,
            expand_all=config.effective_expand_all,
        )
        self._propagator = CheckStatePropagator(cascade=config.cascade)
        self._serializer = CheckStateSerializer(
            uncheckable_values=config.uncheckable_item_values,
            cascade=config.cascade,
        )
        self._resolver = TriStateResolver(cascade=config.cascade)
        self._filter = VisibilityFilter(self._accessor)

    def _initial_value(
        self,
        value: Sequence[Any] | None,
        default_value: Sequence[Any] | None,
    ) -> list[Any]:
        if value:
            return self._serializer.filter_selected_values(value)
        if default_value:
            return self._serializer.filter_selected_values(default_value)
        return []

    def _reindex(self) -> None:
        self._index = self._indexer.flatten(self._data)
        self._resolver.clear()
        self._apply_expand_all()

    def _apply_expand_all(self) -> None:
        expand_all = self._config.expand_all
        if expand_all is None:
            return
        for node in self._index.values():
            if node.has_children:
                node.expand = expand_all

    def _unserialize(self, values: Sequence[Any]) -> None:
        self._serializer.unserialize(self._index, values)
        self._resolver.refresh(self._index)

    def _format_level(self, nodes: Sequence[Any]) -> list[RenderNode]:
        formatted: list[RenderNode] = []
        for source in nodes:
            if not self._accessor.get_visible(source):
                continue
            ref_key = self._accessor.get_ref_key(source)
            if ref_key is None or ref_key not in self._index:
                continue
            node = self._index[ref_key]
            formatted.append(
                RenderNode(
                    ref_key=ref_key,
                    label=node.label,
                    value=node.value,
                    layer=node.layer,
                    check_state=self.check_state(ref_key),
                    expand=self.is_expanded(ref_key),
                    uncheckable=node.uncheckable,
                    disabled=self.is_disabled(ref_key),
                    parent_key=node.parent_key,
                    has_children=self._accessor.has_children_field(source),
                    all_children_uncheckable=(
                        node.has_children and self.every_child_uncheckable(ref_key)
                    ),
                    source=source,
                    children=self._format_level(self._accessor.get_children(source)),
                )
            )
        return formatted
