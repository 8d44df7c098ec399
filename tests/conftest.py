import jax
import numpy as np
import pytest
from typing import Callable
from pytest_benchmark.fixture import BenchmarkFixture
from treecodec.tree import Branch, Tree, branch, leaf, of


def _block(x):
    return jax.tree_util.tree_map(
        lambda y: y.block_until_ready() if isinstance(y, jax.Array) else y, x
    )


def benchmark_wrapper(
    benchmark: BenchmarkFixture,
    func: Callable,
    *args,
    jit: bool = False,
    **kwargs,
):
    f = jax.jit(func) if jit else func

    # Warm-up: includes tracing/compile (if jit=True) and one execution
    warmed = _block(f(*args, **kwargs))

    def run():
        _block(f(*args, **kwargs))

    benchmark(run)
    return warmed


def numeric_tree() -> Branch:
    """Return the 11-node tree used across codec tests.

    ```
    ┬1
    ├┬2
    │├─3
    │├─4
    │└─5
    ├┬6
    │├─7
    │├─8
    │└┬11
    │ └─9
    └─10
    ```
    """
    return branch(
        1,
        [
            branch(2, [of(3), of(4), of(5)]),
            branch(6, [of(7), of(8), branch(11, [of(9)])]),
            of(10),
        ],
    )


def chain_tree(n_nodes: int) -> Tree:
    """Return the path ``1 -> 2 -> ... -> n_nodes`` rooted at 1."""
    if n_nodes < 1:
        raise ValueError("n_nodes must be >= 1")
    t: Tree = leaf(n_nodes)
    for value in range(n_nodes - 1, 0, -1):
        t = Branch(value, (t,))
    return t


def star_tree(n_nodes: int) -> Branch:
    """Return the tree with root 1 and leaves ``2..n_nodes``."""
    if n_nodes < 2:
        raise ValueError("n_nodes must be >= 2")
    return branch(1, [of(i) for i in range(2, n_nodes + 1)])


def random_code(rng: np.random.Generator, n_nodes: int) -> list[int]:
    """A uniformly random Prüfer code for ``n_nodes`` nodes."""
    return [int(d) for d in rng.integers(1, n_nodes + 1, size=max(n_nodes - 2, 0))]


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)
