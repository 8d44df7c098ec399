"""Rooted tree data type.

A tree is either a ``Leaf`` holding a value, or a ``Branch`` holding a value
and a non-empty forest of child trees. Both are immutable ``NamedTuple``
values, so equality is structural and trees can be used as dictionary keys
when their values are hashable.

Conventions
- ``forest`` is always a ``tuple``; constructors convert any iterable.
- Child order is significant: ``branch(1, [of(2), of(3)])`` and
  ``branch(1, [of(3), of(2)])`` are different trees.

Example
>>> t = branch(1, [of(2), from_(3, of(4))])
>>> get_value(t), [get_value(c) for c in get_forest(t)]
(1, [2, 3])
"""

from __future__ import annotations
from typing import Any, Iterable, NamedTuple, Union


class Leaf(NamedTuple):
    """A tree node without children."""

    value: Any

    def __eq__(self, other: object) -> bool:
        return _tree_eq(self, other)

    def __ne__(self, other: object) -> bool:
        result = _tree_eq(self, other)
        return result if result is NotImplemented else not result

    def __hash__(self) -> int:
        return _tree_hash(self)


class Branch(NamedTuple):
    """A tree node with a non-empty forest of children."""

    value: Any
    forest: tuple[Tree, ...]

    def __eq__(self, other: object) -> bool:
        return _tree_eq(self, other)

    def __ne__(self, other: object) -> bool:
        result = _tree_eq(self, other)
        return result if result is NotImplemented else not result

    def __hash__(self) -> int:
        return _tree_hash(self)


Tree = Union[Leaf, Branch]


def _tree_eq(self: Tree, other: object):
    """Structural equality over a worklist of node pairs.

    The tuple comparison inherited from ``NamedTuple`` recurses once per level
    and overflows the interpreter stack on deep chains.
    """
    if not isinstance(other, (Leaf, Branch)):
        return NotImplemented
    pairs: list[tuple[Tree, Tree]] = [(self, other)]
    while pairs:
        a, b = pairs.pop()
        if a is b:
            continue
        if type(a) is not type(b) or a.value != b.value:
            return False
        if isinstance(a, Branch):
            if len(a.forest) != len(b.forest):
                return False
            pairs.extend(zip(a.forest, b.forest))
    return True


def _tree_hash(self: Tree) -> int:
    # Preorder values with arities determine the tree.
    shape: list[tuple[Any, int]] = []
    stack: list[Tree] = [self]
    while stack:
        node = stack.pop()
        forest = node.forest if isinstance(node, Branch) else ()
        shape.append((node.value, len(forest)))
        stack.extend(reversed(forest))
    return hash(tuple(shape))


def leaf(value: Any) -> Leaf:
    return Leaf(value)


of = leaf


def branch(value: Any, forest: Iterable[Tree]) -> Branch:
    """Build a branch, raising ``ValueError`` if ``forest`` is empty."""
    children = tuple(forest)
    if not children:
        raise ValueError(f"A branch needs at least one child. Got none for node {value!r}.")
    return Branch(value, children)


def tree(value: Any, forest: Iterable[Tree] = ()) -> Tree:
    """Build a leaf when ``forest`` is empty, else a branch."""
    children = tuple(forest)
    return Branch(value, children) if children else Leaf(value)


def from_(value: Any, *forest: Tree) -> Tree:
    """Variadic form of ``tree``: ``from_(1, of(2), of(3))``."""
    return tree(value, forest)


def get_value(self: Tree) -> Any:
    return self.value


def is_leaf(self: Tree) -> bool:
    return isinstance(self, Leaf)


def is_branch(self: Tree) -> bool:
    return isinstance(self, Branch)


def get_forest(self: Tree) -> tuple[Tree, ...]:
    """Children of any node; empty for a leaf."""
    return self.forest if isinstance(self, Branch) else ()


def get_branch_forest(self: Branch) -> tuple[Tree, ...]:
    return self.forest
