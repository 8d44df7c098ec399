"""Stepping through the ordered set of Prüfer codes and labeled trees.

Codes are ordered first by node count, then by ordinal. ``next_code`` and
``previous_code`` cross node counts at the first/last code; the ``*_wrap``
variants cycle within a single node count instead.
"""

from __future__ import annotations
from typing import Callable
from treecodec.codec.prufer.decoder import decode
from treecodec.codec.prufer.encoder import encode
from treecodec.codec.prufer.enumerate import (
    code_count,
    compute_node_count,
    from_ordinal,
    to_ordinal,
)
from treecodec.tree.tree_types import Branch


def first_code_for(node_count: int) -> list[int]:
    """The first Prüfer code for ``node_count`` nodes: all ones."""
    return [1] * code_count(node_count)


def last_code_for(node_count: int) -> list[int]:
    """The last Prüfer code for ``node_count`` nodes: every digit is ``node_count``."""
    return [node_count] * code_count(node_count)


def is_first_code(code: list[int]) -> bool:
    """Is this the first code for its node count? The empty code always is."""
    return all(digit == 1 for digit in code)


def is_last_code(code: list[int]) -> bool:
    """Is this the last code for its node count? The empty code always is."""
    node_count = compute_node_count(code)
    return all(digit == node_count for digit in code)


def with_ordinal(f: Callable[[int, int], tuple[int, int]]) -> Callable[[list[int]], list[int]]:
    """Lift a function over ``(ordinal, node_count)`` to a function over codes."""

    def run(code: list[int]) -> list[int]:
        return from_ordinal(*f(*to_ordinal(code)))

    return run


_increment = with_ordinal(lambda ordinal, node_count: (ordinal + 1, node_count))
_decrement = with_ordinal(lambda ordinal, node_count: (ordinal - 1, node_count))


def previous_code(code: list[int]) -> list[int]:
    """The code before ``code``.

    The first code of a node count steps back to the last code of the
    previous node count. The empty code (two nodes) is the floor and is
    returned unchanged.
    """
    if not code:
        return []
    if is_first_code(code):
        return last_code_for(compute_node_count(code) - 1)
    return _decrement(code)


def next_code(code: list[int]) -> list[int]:
    """The code after ``code``.

    The last code of a node count steps forward to the first code of the
    next node count, so ``next_code([4, 4]) == [1, 1, 1]``.
    """
    if is_last_code(code):
        return first_code_for(compute_node_count(code) + 1)
    return _increment(code)


def previous_code_wrap(code: list[int]) -> list[int]:
    """Like ``previous_code`` but the first code wraps to the last code of the same node count."""
    if is_first_code(code):
        return last_code_for(compute_node_count(code))
    return _decrement(code)


def next_code_wrap(code: list[int]) -> list[int]:
    """Like ``next_code`` but the last code wraps to the first code of the same node count."""
    if is_last_code(code):
        return first_code_for(compute_node_count(code))
    return _increment(code)


def previous_tree(self: Branch) -> Branch:
    """The labeled tree before ``self``, crossing to fewer nodes at the first tree.

    Stops at the two-node tree, which is returned as its own predecessor.
    """
    return decode(previous_code(encode(self)))


def next_tree(self: Branch) -> Branch:
    """The labeled tree after ``self``, crossing to one more node at the last tree."""
    return decode(next_code(encode(self)))


def previous_tree_wrap(self: Branch) -> Branch:
    return decode(previous_code_wrap(encode(self)))


def next_tree_wrap(self: Branch) -> Branch:
    return decode(next_code_wrap(encode(self)))


def tree_to_ordinal(self: Branch) -> tuple[int, int]:
    """``(ordinal, node_count)`` of a labeled tree."""
    return to_ordinal(encode(self))
