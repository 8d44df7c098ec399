from __future__ import annotations
from typing import Iterable, NamedTuple
import jax.numpy as jnp
from treecodec.codec.edges import EdgeList, from_edges, numeric, sort_edges, to_edges
from treecodec.codec.prufer import decoder
from treecodec.codec.prufer.enumerate import iter_codes_at
from treecodec.tree.tree_types import Branch, Tree


class LabeledForest(NamedTuple):
    """A batch container for labeled rooted trees of one node count.

    Parameters
    - parent: 2D array of shape ``(num_trees, n)`` with dtype ``int32``.
      Row ``t`` encodes one tree labeled ``1..n``: ``parent[t, v - 1]`` is the
      label of the parent of node ``v``, and ``0`` marks the root.

    Notes
    - This container is compatible with JAX; the array can be a ``jax.Array``.
    - Row order follows the ordinal order of the Prüfer codes when built with
      ``forest_at``.

    Example
    >>> import jax.numpy as jnp
    >>> forest = LabeledForest(parent=jnp.array([[0, 1, 1]], dtype=jnp.int32))
    >>> forest.parent.shape
    (1, 3)
    """

    parent: jnp.ndarray

    @property
    def order(self) -> int:
        """Order of the forest.

        The order of a forest is the number of nodes in each tree of the forest.
        """
        return self.parent.shape[1]

    @property
    def size(self) -> int:
        """Size of the forest.

        The size of a forest is the number of trees in the forest.
        """
        return self.parent.shape[0]


def _edges_to_parent(edges: EdgeList) -> list[int]:
    parent_py: list[int] = [0] * len(edges)
    for child, parent in numeric(edges):
        parent_py[child - 1] = parent
    return parent_py


def to_parent_array(self: Tree) -> list[int]:
    """Parent label of every node of a tree labeled ``1..n``, ``0`` for the root."""
    return _edges_to_parent(to_edges(self))


def from_parent_array(parent: Iterable[int]) -> Tree:
    """Inverse of ``to_parent_array``; children come out in ascending label order."""
    edges: EdgeList = [
        (child, None if p == 0 else p) for child, p in enumerate(map(int, parent), start=1)
    ]
    return from_edges(sort_edges(edges))


def forest_at(n: int) -> LabeledForest:
    """Every labeled tree with ``n`` nodes as a ``LabeledForest``.

    Args:
        n: Number of nodes per tree. Must satisfy ``n >= 2``.

    Returns:
        A ``LabeledForest`` where ``parent`` has shape ``(n**(n-2), n)`` and
        dtype ``int32``, row ``k - 1`` holding the tree of ordinal ``k``.

    Notes:
    - Function is JAX-jittable with ``static_argnums=0``.
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    rows: list[list[int]] = []
    for code in iter_codes_at(n):
        edges = decoder.to_edges(code)
        rows.append(_edges_to_parent(edges))
    return LabeledForest(parent=jnp.asarray(rows, dtype=jnp.int32))


def to_forest(trees: Iterable[Branch]) -> LabeledForest:
    """Stack labeled trees sharing one node count into a ``LabeledForest``."""
    rows = [to_parent_array(t) for t in trees]
    if not rows:
        raise ValueError("to_forest needs at least one tree")
    widths = {len(row) for row in rows}
    if len(widths) != 1:
        raise ValueError(f"All trees must have the same node count. Got {sorted(widths)}.")
    return LabeledForest(parent=jnp.asarray(rows, dtype=jnp.int32))
