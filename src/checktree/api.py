"""Public one-shot API functions for checktree.

This module provides helpers for callers that hold their own state and only
need a single computation.  Each call creates a fresh ``CheckTree`` to
guarantee zero global state between calls.  Note that, like the engine,
these helpers write ``refKey`` (and ``filter_tree`` writes ``visible``) onto
the caller's nodes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from checktree.config import CheckTreeConfig
from checktree.engine import CheckTree
from checktree.tree.nodes import CheckState, TreeIndex

__all__ = ["filter_tree", "flatten", "resolve_check_state", "toggle"]


def flatten(data: Sequence[Any], config: CheckTreeConfig | None = None) -> TreeIndex:
    """Return the flat index of ``data`` with no values selected.

    Args:
        data:   List of root nodes.
        config: Engine options.  Defaults to ``CheckTreeConfig()`` when None.

    Returns:
        A ``TreeIndex`` keyed by ref_key in depth-first pre-order.
    """
    return CheckTree(data, config=config).index


def resolve_check_state(
    data: Sequence[Any],
    values: Sequence[Any],
    ref_key: str,
    config: CheckTreeConfig | None = None,
) -> CheckState:
    """Return the display state of one node given a selected-value list.

    Raises:
        UnknownNodeError: If ``ref_key`` does not exist in ``data``.
    """
    return CheckTree(data, value=list(values), config=config).check_state(ref_key)


def toggle(
    data: Sequence[Any],
    values: Sequence[Any],
    ref_key: str,
    checked: bool,
    config: CheckTreeConfig | None = None,
    only_parent: bool = True,
) -> list[Any]:
    """Return the selected-value list after setting ``ref_key`` to ``checked``.

    Args:
        data:        List of root nodes.
        values:      The selected values before the toggle.
        ref_key:     Node to toggle.
        checked:     The new check value.
        config:      Engine options.  Defaults to ``CheckTreeConfig()``.
        only_parent: When True (the default), descendants implied by a fully
                     checked ancestor are omitted; when False every checked
                     value is listed.

    Returns:
        The new selected-value list.  Uncheckable and disabled targets are
        left unchanged.
    """
    tree = CheckTree(data, default_value=list(values), config=config)
    tree.select(ref_key, checked)
    if only_parent:
        return tree.selected_values
    return tree.checked_values()


def filter_tree(
    data: Sequence[Any],
    keyword: str | None,
    config: CheckTreeConfig | None = None,
) -> list[Any]:
    """Annotate ``data`` with ``visible`` flags for ``keyword`` and return it."""
    settings = config if config is not None else CheckTreeConfig()
    tree = CheckTree(data, config=settings.evolve(search_keyword=keyword or ""))
    return tree.filter_data
