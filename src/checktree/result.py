"""RenderNode dataclass: the per-node view handed to the presentation layer.

This module provides the rich node type returned by
``CheckTree.formatted_nodes()``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from checktree.tree.nodes import CheckState

__all__ = ["RenderNode"]


@dataclass(frozen=True, slots=True)
class RenderNode:
    """Everything a renderer needs to draw one visible node.

    Attributes:
        ref_key:      Structural position key.
        label:        The node label, as supplied by the caller.
        value:        The node value.
        layer:        Depth of the node; roots are 0.
        check_state:  Tri-state display state.
        expand:       Whether the children should be shown.
        uncheckable:  The checkbox is inert and should be hidden.
        disabled:     The node is non-interactive.
        parent_key:   ref_key of the parent, None for roots.
        has_children: The caller node carries a children field.
        all_children_uncheckable: Every direct child is uncheckable.
        source:       The caller's own node object.
        children:     Visible child ``RenderNode`` objects.
    """

    ref_key: str
    label: Any
    value: Any
    layer: int
    check_state: CheckState
    expand: bool
    uncheckable: bool
    disabled: bool
    parent_key: str | None
    has_children: bool
    all_children_uncheckable: bool
    source: Any = None
    children: list[RenderNode] = field(default_factory=list)
