r"""Counting, ranking and unranking of Prüfer codes.

Prüfer code digits run over ``1..n`` with no zero, so the codes of a node
count form a *bijective* base-``n`` numeral system. Subtracting one from
every digit gives an ordinary base-``n`` number, and adding one to that
number gives the 1-based ordinal:

.. math::

    \mathrm{ord}(c) = 1 + \sum_{i=1}^{m} (c_i - 1)\, n^{m-i}, \qquad m = n - 2.

Ordinals are Python ``int`` values and stay exact for any node count.
"""

from __future__ import annotations
from itertools import product
from typing import Iterator
from treecodec.codec.numeral import from_digits, to_fixed_digits
from treecodec.codec.prufer.decoder import decode
from treecodec.errors import InvalidCodeError, OrdinalRangeError
from treecodec.tree.tree_types import Branch


def _check_node_count(node_count: int) -> None:
    if node_count < 2:
        raise ValueError(f"node_count must be >= 2. Got {node_count}.")


def code_count(node_count: int) -> int:
    """Length of a Prüfer code for ``node_count`` nodes."""
    return max(node_count - 2, 0)


def compute_node_count(code: list[int]) -> int:
    return len(code) + 2


def labeled_tree_count(node_count: int) -> int:
    """Cayley's formula: ``n**(n-2)`` labeled trees on ``n`` nodes."""
    _check_node_count(node_count)
    return node_count ** (node_count - 2)


def to_ordinal(code: list[int]) -> tuple[int, int]:
    """Rank a code among all codes of its node count.

    Returns:
        ``(ordinal, node_count)`` with ``1 <= ordinal <= node_count**(node_count-2)``.

    Raises:
        InvalidCodeError: if a digit is outside ``[1, node_count]``.
    """
    node_count = compute_node_count(code)
    for digit in code:
        if not 1 <= digit <= node_count:
            raise InvalidCodeError(digit, node_count)
    return 1 + from_digits([digit - 1 for digit in code], node_count), node_count


def from_ordinal(ordinal: int, node_count: int) -> list[int]:
    """Unrank: the code at ``ordinal`` among all codes of ``node_count`` nodes.

    Raises:
        OrdinalRangeError: if ``ordinal`` is outside ``[1, node_count**(node_count-2)]``.
    """
    tree_count = labeled_tree_count(node_count)
    if not 1 <= ordinal <= tree_count:
        raise OrdinalRangeError(ordinal, node_count, tree_count)
    digits = to_fixed_digits(ordinal - 1, code_count(node_count), node_count)
    return [digit + 1 for digit in digits]


def iter_codes_at(node_count: int) -> Iterator[list[int]]:
    """Lazily yield every code of ``node_count`` nodes in ordinal order."""
    if node_count <= 1:
        return
    digits = range(1, node_count + 1)
    for code in product(digits, repeat=code_count(node_count)):
        yield list(code)


def all_codes_at(node_count: int) -> list[list[int]]:
    """Every code of ``node_count`` nodes, last digit varying fastest.

    ``all_codes_at(n)`` is empty for ``n <= 1`` and ``[[]]`` for ``n == 2``.
    """
    return list(iter_codes_at(node_count))


def all_trees_at(node_count: int) -> list[Branch]:
    """Every labeled tree on ``node_count`` nodes, in ordinal order."""
    return [decode(code) for code in iter_codes_at(node_count)]


def get_nth_tree(ordinal: int, node_count: int) -> Branch:
    """Decode the tree at ``ordinal`` without enumerating its predecessors."""
    return decode(from_ordinal(ordinal, node_count))
