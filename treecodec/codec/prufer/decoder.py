"""Prüfer decoding for trees labeled ``1..n`` and rooted at ``1``."""

from __future__ import annotations
import heapq
from treecodec.codec.edges import EdgeList, from_edges, root_edge, sort_edges
from treecodec.errors import InvalidCodeError
from treecodec.tree.tree_types import Branch, Leaf


def to_edges(code: list[int]) -> EdgeList:
    """Convert a non-empty Prüfer code into a list of directed edges.

    Args:
        code: ``m`` integers in ``[1, n]`` where ``n = m + 2``.

    Returns:
        ``[(1, None), (last_leaf, 1), *edges]`` where ``edges`` holds one
        ``(leaf, parent)`` pair per code entry, in code order.

    Complexity:
        O(n log n). The leaf pool is a min-heap; node ``1`` is the fixed root
        and never enters it.
    """
    node_count = len(code) + 2
    remaining = [0] * (node_count + 1)
    for node in code:
        if not 1 <= node <= node_count:
            raise InvalidCodeError(node, node_count)
        remaining[node] += 1

    leaves = [node for node in range(2, node_count + 1) if remaining[node] == 0]
    heapq.heapify(leaves)

    edges: EdgeList = []
    for parent in code:
        child = heapq.heappop(leaves)
        edges.append((child, parent))
        remaining[parent] -= 1
        if parent != 1 and remaining[parent] == 0:
            heapq.heappush(leaves, parent)

    (last,) = leaves
    return [root_edge(1), (last, 1), *edges]


def decode(code: list[int]) -> Branch:
    """Convert a Prüfer code into a tree labeled ``1..n`` rooted at ``1``.

    Children appear in ascending label order. The empty code decodes to the
    single two-node tree ``1(2)``.

    Raises:
        InvalidCodeError: if a digit is outside ``[1, len(code) + 2]``.
    """
    if not code:
        return Branch(1, (Leaf(2),))
    decoded = from_edges(sort_edges(to_edges(code)))
    assert isinstance(decoded, Branch)
    return decoded
