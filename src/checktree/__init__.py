"""checktree - state engine for hierarchical multi-select (check-tree) controls."""

from __future__ import annotations

import logging

from checktree.api import filter_tree, flatten, resolve_check_state, toggle
from checktree.config import CheckTreeConfig
from checktree.engine import CheckTree
from checktree.errors import CheckTreeError, UnknownNodeError
from checktree.events import ExpandEvent, SearchEvent, SelectEvent
from checktree.result import RenderNode
from checktree.tree.nodes import CheckState, IndexedNode

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "CheckState",
    "CheckTree",
    "CheckTreeConfig",
    "CheckTreeError",
    "ExpandEvent",
    "IndexedNode",
    "RenderNode",
    "SearchEvent",
    "SelectEvent",
    "UnknownNodeError",
    "filter_tree",
    "flatten",
    "resolve_check_state",
    "toggle",
]
