"""Event payloads emitted by ``CheckTree`` to caller callbacks."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

__all__ = ["ConcatChildren", "ExpandEvent", "SearchEvent", "SelectEvent"]

ConcatChildren = Callable[[list[Any], list[Any]], list[Any]]


@dataclass(frozen=True, slots=True)
class SelectEvent:
    """A check toggle.

    Attributes:
        node:   The caller's tree node that was toggled.
        layer:  Depth of the node (roots are 0).
        values: The new selected-value list.
    """

    node: Any
    layer: int
    values: list[Any]


@dataclass(frozen=True, slots=True)
class ExpandEvent:
    """An expand/collapse.

    Attributes:
        node:     The caller's tree node.
        layer:    Depth of the node.
        expanded: The new expansion state.
        concat:   ``concat(data, children)`` splices lazily loaded children
                  into this node inside ``data`` and returns a new top-level
                  list suitable for ``CheckTree.set_data``.
    """

    node: Any
    layer: int
    expanded: bool
    concat: ConcatChildren


@dataclass(frozen=True, slots=True)
class SearchEvent:
    """A search keyword change.

    Attributes:
        keyword: The new keyword.
        event:   Whatever the presentation layer passed along (may be None).
    """

    keyword: str
    event: Any = None
