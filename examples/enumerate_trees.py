import jax.numpy as jnp

from treecodec.codec import prufer
from treecodec.codec.forest_types import forest_at
from treecodec.draw import draw_tree, print_forest
from treecodec.tree import branch, of


def main() -> None:
    # Every labeled tree on 3 nodes, in ordinal order
    print(print_forest(prufer.all_trees_at(3)))

    # Encode a tree and find where it sits among the 5^3 trees on 5 nodes
    t = branch(1, [branch(5, [of(2), of(3), of(4)])])
    code = prufer.encode(t)
    ordinal, n = prufer.to_ordinal(code)
    print(f"\n{draw_tree(t)}\ncode={code} ordinal={ordinal}/{prufer.labeled_tree_count(n)}")

    # Jump straight to a tree far beyond 64-bit ordinals
    n = 30
    k = prufer.labeled_tree_count(n) // 7
    big = prufer.get_nth_tree(k, n)
    assert prufer.tree_to_ordinal(big) == (k, n)
    print(f"\nTree #{k} of {n} nodes:\n{draw_tree(big)}")

    # Walk forward, crossing into the next node count, then wrap in place
    code = prufer.last_code_for(4)
    print(f"\nnext_code({code}) = {prufer.next_code(code)}")
    print(f"next_code_wrap({code}) = {prufer.next_code_wrap(code)}")

    # Batched parent arrays: depth of node 4 across all trees on 4 nodes
    parents = forest_at(4).parent
    depth = jnp.zeros(parents.shape[0], dtype=jnp.int32)
    node = jnp.full(parents.shape[0], 4, dtype=jnp.int32)
    for _ in range(4):
        parent = jnp.take_along_axis(parents, (node - 1)[:, None], axis=1)[:, 0]
        depth = depth + (parent > 0)
        node = jnp.where(parent > 0, parent, node)
    print(f"\nMean depth of node 4 over {parents.shape[0]} trees: {float(depth.mean()):.4f}")


if __name__ == "__main__":
    main()
