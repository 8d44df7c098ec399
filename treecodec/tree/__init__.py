"""Rooted tree data type and the traversals the codecs rely on."""

from treecodec.tree.tree_types import (
    Branch,
    Leaf,
    Tree,
    branch,
    from_,
    get_branch_forest,
    get_forest,
    get_value,
    is_branch,
    is_leaf,
    leaf,
    of,
    tree,
)
from treecodec.tree.ops import (
    count_nodes,
    filter_leaves,
    filter_minimum_leaf,
    minimum_leaf_parent,
    values,
)

__all__ = [
    "Branch",
    "Leaf",
    "Tree",
    "branch",
    "from_",
    "get_branch_forest",
    "get_forest",
    "get_value",
    "is_branch",
    "is_leaf",
    "leaf",
    "of",
    "tree",
    "count_nodes",
    "filter_leaves",
    "filter_minimum_leaf",
    "minimum_leaf_parent",
    "values",
]
