"""Encode/decode trees to/from a list of ``(child, parent)`` edges.

An edge list is the flat intermediate form between Prüfer codes and ``Tree``
values. Each node appears exactly once as a ``child``; the root is the single
edge whose parent is ``None``.

Conventions
- ``to_edges`` emits edges in preorder, root edge first.
- ``from_edges`` keeps children in the order their edges appear, so sorting
  the edge list first (``sort_edges``) yields children in ascending order.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, TypeAlias
from treecodec.errors import InvalidEdgeListError
from treecodec.tree.ops import iter_with_parents
from treecodec.tree.tree_types import Branch, Leaf, Tree

TreeEdge: TypeAlias = tuple[Any, Optional[Any]]
EdgeList: TypeAlias = list[TreeEdge]


@dataclass(frozen=True)
class EdgeMap:
    """Index of an edge list.

    - ``roots``: nodes with no parent, in order of appearance.
    - ``to_parent``: child node => parent node.
    - ``to_children``: parent node => child nodes, in order of appearance.
    """

    roots: dict[Any, None] = field(default_factory=dict)
    to_parent: dict[Any, Any] = field(default_factory=dict)
    to_children: dict[Any, list[Any]] = field(default_factory=dict)

    @property
    def root(self) -> Any:
        """The single root, raising ``InvalidEdgeListError`` unless there is exactly one."""
        if len(self.roots) != 1:
            raise InvalidEdgeListError(
                f"Edge list must have exactly one root edge. Got {len(self.roots)}."
            )
        return next(iter(self.roots))

    def children(self, node: Any) -> list[Any]:
        return self.to_children.get(node, [])


def root_edge(value: Any) -> TreeEdge:
    return (value, None)


def to_edges(self: Tree) -> EdgeList:
    """Encode a tree as its edge list, in preorder with the root edge first."""
    return [(node.value, parent) for node, parent in iter_with_parents(self)]


def index_edges(edges: EdgeList) -> EdgeMap:
    """Build an ``EdgeMap`` from a list of edges."""
    index = EdgeMap()
    for child, parent in edges:
        if parent is None:
            index.roots[child] = None
            continue
        index.roots.pop(child, None)
        index.to_parent[child] = parent
        index.to_children.setdefault(parent, []).append(child)
    return index


def decode_map(index: EdgeMap) -> Tree:
    """Build the tree described by an edge index, starting from its single root."""
    root = index.root
    seen: set[Any] = set()
    stack: list[tuple[Any, bool]] = [(root, False)]
    done: list[Tree] = []
    while stack:
        value, expanded = stack.pop()
        children = index.children(value)
        if not expanded:
            if value in seen:
                raise InvalidEdgeListError(f"Node {value!r} is reachable more than once.")
            seen.add(value)
        if not children:
            done.append(Leaf(value))
        elif not expanded:
            stack.append((value, True))
            for child in reversed(children):
                stack.append((child, False))
        else:
            width = len(children)
            forest = tuple(done[-width:])
            del done[-width:]
            done.append(Branch(value, forest))
    node_count = len(index.to_parent) + len(index.roots)
    if len(seen) != node_count:
        raise InvalidEdgeListError(
            f"Edge list has {node_count} nodes but only {len(seen)} are reachable from the root."
        )
    return done[0]


def from_edges(edges: EdgeList) -> Tree:
    """Decode an edge list into a tree.

    Raises:
        InvalidEdgeListError: if there is not exactly one root edge, or some
            node is unreachable from it or reachable more than once.
    """
    return decode_map(index_edges(edges))


def sort_edges(edges: EdgeList, key: Optional[Callable[[Any], Any]] = None) -> EdgeList:
    """Sort edges by child under ``key``; the root edge comes first."""
    order = key if key is not None else (lambda value: value)
    return sorted(edges, key=lambda edge: (edge[1] is not None, order(edge[0])))


def numeric(edges: EdgeList) -> list[tuple[int, int]]:
    """Convert an integer edge list to plain pairs, reporting the root's parent as ``0``."""
    return [(child, 0 if parent is None else parent) for child, parent in edges]
