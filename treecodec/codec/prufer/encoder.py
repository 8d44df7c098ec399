"""Prüfer encoding of rooted trees, generic over the order on node values."""

from __future__ import annotations
from typing import Any, Callable, Optional
from treecodec.tree.ops import filter_minimum_leaf
from treecodec.tree.tree_types import Branch, Leaf, Tree


def encode(self: Branch, key: Optional[Callable[[Any], Any]] = None) -> list[Any]:
    """Convert a tree to its Prüfer code under the order given by ``key``.

    Tree requirements (not checked):

    1. It is a ``Branch``, i.e. it has at least two nodes.
    2. The root value is the minimum of all node values under ``key``. A tree
       labeled with ``1..n`` should have ``1`` at the root.

    Each step removes the minimum leaf of the whole remaining tree and records
    its parent, until only the root is left. The last recorded parent is
    always the root and is dropped, leaving ``n - 2`` entries.

    Args:
        self: The tree to encode.
        key: Optional ``sorted``-style key; natural ordering when ``None``.

    Returns:
        The Prüfer code as a list of node values.

    Notes:
    - Every step rescans the whole tree for its minimum leaf, so encoding is
      O(n^2). This keeps the encoder usable with any total order instead of
      only dense integer labels.

    Example
    >>> from treecodec.tree import branch, of
    >>> encode(branch(1, [of(2), of(3), of(4)]))
    [1, 1]
    """
    forest = self.forest
    if len(forest) == 1 and isinstance(forest[0], Leaf):
        return []

    code: list[Any] = []
    remaining: Tree = self
    while True:
        remaining, _, parent = filter_minimum_leaf(remaining, key)
        if parent is None:
            break
        code.append(parent)
    return code[:-1]
