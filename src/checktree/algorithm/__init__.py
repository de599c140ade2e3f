"""Check-state algorithms over a flat tree index.

Exports:
    CheckStatePropagator: Downward/upward toggle propagation on index copies.
    CheckStateSerializer: Index <-> selected-value list conversion.
    TriStateResolver:     Checked/unchecked/indeterminate display state.
    VisibilityFilter:     Keyword visibility with upward OR-promotion.
"""

from checktree.algorithm.propagation import CheckStatePropagator
from checktree.algorithm.serializer import CheckStateSerializer
from checktree.algorithm.tristate import TriStateResolver
from checktree.algorithm.visibility import VisibilityFilter

__all__ = [
    "CheckStatePropagator",
    "CheckStateSerializer",
    "TriStateResolver",
    "VisibilityFilter",
]
