"""Traversals and filters over ``Tree`` values.

Every walk here uses an explicit stack so that deep, chain-like trees do not
run into the interpreter recursion limit.
"""

from __future__ import annotations
from typing import Any, Callable, Iterator, Optional
from treecodec.tree.tree_types import Branch, Leaf, Tree, tree


def iter_with_parents(self: Tree) -> Iterator[tuple[Tree, Optional[Any]]]:
    """Yield ``(node, parent_value)`` pairs in preorder; the root's parent is ``None``."""
    stack: list[tuple[Tree, Optional[Any]]] = [(self, None)]
    while stack:
        node, parent = stack.pop()
        yield node, parent
        if isinstance(node, Branch):
            for child in reversed(node.forest):
                stack.append((child, node.value))


def values(self: Tree) -> list[Any]:
    """Node values in preorder."""
    return [node.value for node, _ in iter_with_parents(self)]


def count_nodes(self: Tree) -> int:
    return sum(1 for _ in iter_with_parents(self))


def filter_leaves(self: Tree, predicate: Callable[[Any], bool]) -> Tree:
    """Keep only the leaves whose value satisfies ``predicate``.

    Filtering runs bottom-up: a branch that loses all of its children becomes
    a leaf and is then tested against ``predicate`` itself. The root is never
    removed.
    """
    if isinstance(self, Leaf):
        return self

    stack: list[tuple[Tree, bool]] = [(self, False)]
    # One slot per visited subtree, ``None`` for a dropped one.
    done: list[Optional[Tree]] = []
    while stack:
        node, expanded = stack.pop()
        if isinstance(node, Leaf):
            done.append(node if predicate(node.value) else None)
        elif not expanded:
            stack.append((node, True))
            for child in reversed(node.forest):
                stack.append((child, False))
        else:
            width = len(node.forest)
            kept = [child for child in done[-width:] if child is not None]
            del done[-width:]
            if kept or node is self or predicate(node.value):
                done.append(tree(node.value, kept))
            else:
                done.append(None)
    result = done[0]
    assert result is not None
    return result


def minimum_leaf_parent(
    self: Tree, key: Optional[Callable[[Any], Any]] = None
) -> tuple[Any, Optional[Any]]:
    """Find the minimum leaf value and the value of its parent.

    Args:
        self: The tree to scan. Every leaf is considered, not only siblings.
        key: Optional ``sorted``-style key defining the order on values.

    Returns:
        ``(min_leaf, parent)`` where ``parent`` is ``None`` when ``self`` is a
        single leaf.
    """
    order = key if key is not None else _identity
    best: Optional[tuple[Any, Optional[Any]]] = None
    best_key: Any = None
    for node, parent in iter_with_parents(self):
        if isinstance(node, Branch):
            continue
        node_key = order(node.value)
        if best is None or node_key < best_key:
            best, best_key = (node.value, parent), node_key
    assert best is not None
    return best


def filter_minimum_leaf(
    self: Tree, key: Optional[Callable[[Any], Any]] = None
) -> tuple[Tree, Any, Optional[Any]]:
    """Remove the minimum leaf from a tree.

    Returns a triple of:

    1. The tree with its minimum leaf removed (unchanged if it is a single leaf).
    2. The value of the removed leaf.
    3. The value of its parent, or ``None`` if the tree is a single leaf.

    Example
    >>> from treecodec.tree.tree_types import branch, of
    >>> filter_minimum_leaf(branch(5, [branch(4, [of(2)]), of(3)]))
    (Branch(value=5, forest=(Leaf(value=4), Leaf(value=3))), 2, 4)
    """
    min_leaf, parent = minimum_leaf_parent(self, key)
    if parent is None:
        return self, min_leaf, None
    order = key if key is not None else _identity
    min_key = order(min_leaf)
    # Labels are unique, so equality under the order identifies the leaf.
    filtered = filter_leaves(self, lambda value: order(value) != min_key)
    return filtered, min_leaf, parent


def _identity(value: Any) -> Any:
    return value
