"""Encode/decode trees to/from Prüfer codes and enumerate labeled trees.

Exports
- ``encode`` / ``decode``: the codec itself; ``to_edges`` exposes the decoder's edge list.
- ``to_ordinal`` / ``from_ordinal``: exact 1-based ranks among the codes of a node count.
- ``next_code`` / ``previous_code`` and their ``*_wrap`` and ``*_tree`` variants: stepping.
- ``all_codes_at`` / ``all_trees_at`` / ``get_nth_tree``: enumeration.
"""

from treecodec.codec.prufer.decoder import decode, to_edges
from treecodec.codec.prufer.encoder import encode
from treecodec.codec.prufer.enumerate import (
    all_codes_at,
    all_trees_at,
    code_count,
    compute_node_count,
    from_ordinal,
    get_nth_tree,
    iter_codes_at,
    labeled_tree_count,
    to_ordinal,
)
from treecodec.codec.prufer.step import (
    first_code_for,
    is_first_code,
    is_last_code,
    last_code_for,
    next_code,
    next_code_wrap,
    next_tree,
    next_tree_wrap,
    previous_code,
    previous_code_wrap,
    previous_tree,
    previous_tree_wrap,
    tree_to_ordinal,
    with_ordinal,
)

__all__ = [
    "decode",
    "encode",
    "to_edges",
    "all_codes_at",
    "all_trees_at",
    "code_count",
    "compute_node_count",
    "from_ordinal",
    "get_nth_tree",
    "iter_codes_at",
    "labeled_tree_count",
    "to_ordinal",
    "first_code_for",
    "is_first_code",
    "is_last_code",
    "last_code_for",
    "next_code",
    "next_code_wrap",
    "next_tree",
    "next_tree_wrap",
    "previous_code",
    "previous_code_wrap",
    "previous_tree",
    "previous_tree_wrap",
    "tree_to_ordinal",
    "with_ordinal",
]
