"""Top level types for Treecodec.

Public API:
- Trees: Tree, Leaf, Branch
- Edge lists: TreeEdge, EdgeList, EdgeMap
- Batched trees: LabeledForest
- Errors: TreeCodecError, InvalidEdgeListError, InvalidCodeError, OrdinalRangeError
"""

from treecodec.tree.tree_types import Branch, Leaf, Tree
from treecodec.codec.edges import EdgeList, EdgeMap, TreeEdge
from treecodec.codec.forest_types import LabeledForest
from treecodec.errors import (
    InvalidCodeError,
    InvalidEdgeListError,
    OrdinalRangeError,
    TreeCodecError,
)

__all__ = [
    # Trees
    "Branch",
    "Leaf",
    "Tree",
    # Edge lists
    "EdgeList",
    "EdgeMap",
    "TreeEdge",
    # Batched trees
    "LabeledForest",
    # Errors
    "InvalidCodeError",
    "InvalidEdgeListError",
    "OrdinalRangeError",
    "TreeCodecError",
]
