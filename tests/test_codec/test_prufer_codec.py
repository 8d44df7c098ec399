import pytest
from treecodec.codec import prufer
from treecodec.codec.edges import sort_edges
from treecodec.errors import InvalidCodeError
from treecodec.tree import Branch, branch, of
from tests.conftest import chain_tree, numeric_tree, random_code, star_tree


# All 16 (4^(4-2)) labeled trees on 4 nodes, each with the sibling
# permutations that encode to the same code.
FOUR_NODE_TREES: dict[str, tuple[list[int], Branch, list[Branch]]] = {
    "1(2, 3, 4)": (
        [1, 1],
        branch(1, [of(2), of(3), of(4)]),
        [
            branch(1, [of(2), of(4), of(3)]),
            branch(1, [of(3), of(2), of(4)]),
            branch(1, [of(3), of(4), of(2)]),
            branch(1, [of(4), of(2), of(3)]),
            branch(1, [of(4), of(3), of(2)]),
        ],
    ),
    "1(2(4), 3)": ([1, 2], branch(1, [branch(2, [of(4)]), of(3)]), [branch(1, [of(3), branch(2, [of(4)])])]),
    "1(2, 3(4))": ([1, 3], branch(1, [of(2), branch(3, [of(4)])]), [branch(1, [branch(3, [of(4)]), of(2)])]),
    "1(2, 4(3))": ([1, 4], branch(1, [of(2), branch(4, [of(3)])]), [branch(1, [branch(4, [of(3)]), of(2)])]),
    "1(2(3), 4)": ([2, 1], branch(1, [branch(2, [of(3)]), of(4)]), [branch(1, [of(4), branch(2, [of(3)])])]),
    "1(2(3, 4))": ([2, 2], branch(1, [branch(2, [of(3), of(4)])]), [branch(1, [branch(2, [of(4), of(3)])])]),
    "1(3(2(4)))": ([2, 3], branch(1, [branch(3, [branch(2, [of(4)])])]), []),
    "1(4(2(3)))": ([2, 4], branch(1, [branch(4, [branch(2, [of(3)])])]), []),
    "1(3(2), 4)": ([3, 1], branch(1, [branch(3, [of(2)]), of(4)]), [branch(1, [of(4), branch(3, [of(2)])])]),
    "1(2(3(4)))": ([3, 2], branch(1, [branch(2, [branch(3, [of(4)])])]), []),
    "1(3(2, 4))": ([3, 3], branch(1, [branch(3, [of(2), of(4)])]), [branch(1, [branch(3, [of(4), of(2)])])]),
    "1(4(3(2)))": ([3, 4], branch(1, [branch(4, [branch(3, [of(2)])])]), []),
    "1(3, 4(2))": ([4, 1], branch(1, [of(3), branch(4, [of(2)])]), [branch(1, [branch(4, [of(2)]), of(3)])]),
    "1(2(4(3)))": ([4, 2], branch(1, [branch(2, [branch(4, [of(3)])])]), []),
    "1(3(4(2)))": ([4, 3], branch(1, [branch(3, [branch(4, [of(2)])])]), []),
    "1(4(2, 3))": ([4, 4], branch(1, [branch(4, [of(2), of(3)])]), [branch(1, [branch(4, [of(3), of(2)])])]),
}


@pytest.mark.parametrize("name", list(FOUR_NODE_TREES))
def test_four_node_encode(name: str) -> None:
    code, t, congruent = FOUR_NODE_TREES[name]
    assert prufer.encode(t) == code, f"encode {name}"
    for alt in congruent:
        assert prufer.encode(alt) == code, f"encode alt {alt} of {name}"


@pytest.mark.parametrize("name", list(FOUR_NODE_TREES))
def test_four_node_decode(name: str) -> None:
    code, t, _ = FOUR_NODE_TREES[name]
    assert prufer.decode(code) == t, f"decode {code} -> {name}"


def test_four_node_table_is_complete() -> None:
    codes = sorted(code for code, _, _ in FOUR_NODE_TREES.values())
    assert codes == prufer.all_codes_at(4)


@pytest.mark.parametrize(
    "t, code",
    [
        (branch(1, [of(2)]), []),
        (branch(1, [of(2), of(3)]), [1]),
        (branch(1, [branch(2, [of(3)])]), [2]),
        (branch(1, [branch(3, [of(2)])]), [3]),
        (branch(1, [of(2), of(3), of(4)]), [1, 1]),
    ],
)
def test_small_encode_decode(t: Branch, code: list[int]) -> None:
    assert prufer.encode(t) == code
    assert prufer.decode(code) == t


def test_ten_node_tree() -> None:
    t = branch(
        1,
        [
            branch(2, [of(3), of(4)]),
            of(5),
            branch(6, [of(7), of(8), branch(9, [of(10)])]),
        ],
    )
    code = [2, 2, 1, 1, 6, 6, 9, 6]
    assert prufer.encode(t) == code
    assert prufer.decode(code) == t


def test_to_edges() -> None:
    edges = prufer.to_edges([2, 2, 1, 1, 6, 6, 9, 6])
    assert edges[:2] == [(1, None), (6, 1)], "root edge, then the last remaining leaf"
    expected = [(1, None), (2, 1), (3, 2), (4, 2), (5, 1), (6, 1), (7, 6), (8, 6), (9, 6), (10, 9)]
    assert sort_edges(edges) == expected


def test_round_trip_numeric_tree() -> None:
    t = numeric_tree()
    assert prufer.decode(prufer.encode(t)) == t


@pytest.mark.parametrize("n", [2, 3, 5, 8, 13, 21])
def test_round_trip_random_codes(rng, n: int) -> None:
    for _ in range(20):
        code = random_code(rng, n)
        decoded = prufer.decode(code)
        assert prufer.encode(decoded) == code, f"round trip failed for {code}"


@pytest.mark.parametrize("n", [3, 4, 5])
def test_round_trip_all_codes(n: int) -> None:
    for code in prufer.all_codes_at(n):
        assert prufer.encode(prufer.decode(code)) == code


def test_encode_with_key() -> None:
    # Labels ordered by descending value: root 4 is the minimum.
    t = branch(4, [of(3), of(2), of(1)])
    assert prufer.encode(t, key=lambda v: -v) == [4, 4]
    letters = branch("a", [branch("c", [of("b")]), of("d")])
    assert prufer.encode(letters) == ["c", "a"]


def test_encode_star_is_all_ones() -> None:
    assert prufer.encode(star_tree(7)) == [1] * 5


@pytest.mark.parametrize("code", [[0], [4], [1, 5], [-1, 2]])
def test_decode_rejects_out_of_range_digits(code: list[int]) -> None:
    with pytest.raises(InvalidCodeError):
        prufer.decode(code)


def test_decode_empty_is_two_node_tree() -> None:
    assert prufer.decode([]) == branch(1, [of(2)])


def test_deep_chain_round_trip() -> None:
    n = 1_500
    chain = chain_tree(n)
    code = prufer.encode(chain)
    assert code == list(range(n - 1, 1, -1))
    assert prufer.decode(code) == chain


def test_deep_chain_decode() -> None:
    n = 20_000
    assert prufer.decode(list(range(n - 1, 1, -1))) == chain_tree(n)
