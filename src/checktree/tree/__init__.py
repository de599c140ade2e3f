"""Tree indexing primitives: node types, accessors, equality and the indexer."""

from checktree.tree.accessors import KeyAccessor
from checktree.tree.equality import contains_value, structural_equal
from checktree.tree.indexer import NodeIndexer
from checktree.tree.labels import label_to_text
from checktree.tree.nodes import CheckState, IndexedNode, TreeIndex, clone_index

__all__ = [
    "CheckState",
    "IndexedNode",
    "KeyAccessor",
    "NodeIndexer",
    "TreeIndex",
    "clone_index",
    "contains_value",
    "label_to_text",
    "structural_equal",
]
