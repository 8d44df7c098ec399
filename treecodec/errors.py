"""Exceptions raised by the tree codecs.

All errors derive from ``ValueError`` so callers that already guard argument
checks with ``except ValueError`` keep working.
"""


class TreeCodecError(ValueError):
    """Base class for codec failures."""


class InvalidEdgeListError(TreeCodecError):
    """An edge list does not describe a single rooted tree.

    Raised when the root count is not exactly one, when a node is reached
    twice while attaching children, or when some node cannot be reached from
    the root at all.
    """


class InvalidCodeError(TreeCodecError):
    """A Prüfer code holds a digit outside ``[1, n]``."""

    def __init__(self, digit: int, node_count: int) -> None:
        self.digit = digit
        self.node_count = node_count
        super().__init__(
            f"Prüfer code digits must be in [1, {node_count}] for {node_count} nodes. Got {digit}."
        )


class OrdinalRangeError(TreeCodecError):
    """An ordinal falls outside ``[1, n^(n-2)]`` for its node count."""

    def __init__(self, ordinal: int, node_count: int, tree_count: int) -> None:
        self.ordinal = ordinal
        self.node_count = node_count
        self.tree_count = tree_count
        super().__init__(
            f"Ordinal must be in [1, {tree_count}] for {node_count} nodes. Got {ordinal}."
        )
