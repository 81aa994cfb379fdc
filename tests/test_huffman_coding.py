import io
import random

import pytest

from huffpress.huffman_coding import (
    ALPH_SIZE,
    PSEUDO_EOF,
    build_tree,
    count_frequencies,
    make_encodings,
    pack_encodings,
)
from huffpress.huffman_utils.bit_reader import EOF, BitReader


def _counts(data: bytes) -> list[int]:
    counts = [0] * ALPH_SIZE
    for b in data:
        counts[b] += 1
    return counts


def _leaves(node):
    if node.is_leaf():
        return [node]
    return _leaves(node.left) + _leaves(node.right)


def _assert_strict(node):
    if node.is_leaf():
        return
    assert node.left is not None and node.right is not None
    assert node.weight == node.left.weight + node.right.weight
    _assert_strict(node.left)
    _assert_strict(node.right)


def test_count_frequencies_consumes_reader():
    reader = BitReader(io.BytesIO(b"abracadabra"))
    counts = count_frequencies(reader)
    assert len(counts) == ALPH_SIZE
    assert counts[ord("a")] == 5
    assert counts[ord("b")] == 2
    assert counts[ord("r")] == 2
    assert counts[ord("c")] == 1
    assert counts[ord("d")] == 1
    assert sum(counts) == 11
    assert reader.read_bits(8) == EOF


def test_empty_histogram_gives_lone_eof_leaf():
    root = build_tree([0] * ALPH_SIZE)
    assert root.is_leaf()
    assert root.value == PSEUDO_EOF
    assert make_encodings(root) == {PSEUDO_EOF: ""}
    assert pack_encodings(make_encodings(root)) == {PSEUDO_EOF: (0, 0)}


def test_single_symbol_gives_two_leaves():
    root = build_tree(_counts(b"A" * 1000))
    assert not root.is_leaf()
    assert sorted(leaf.value for leaf in _leaves(root)) == [ord("A"), PSEUDO_EOF]
    assert root.weight == 1001
    codes = make_encodings(root)
    assert sorted(codes.values()) == ["0", "1"]


def test_code_lengths_follow_weights():
    counts = [0] * ALPH_SIZE
    counts[65], counts[66], counts[67] = 4, 2, 1
    codes = make_encodings(build_tree(counts))
    lengths = {sym: len(code) for sym, code in codes.items()}
    assert lengths == {65: 1, 66: 2, 67: 3, PSEUDO_EOF: 3}


@pytest.mark.parametrize("seed", range(5))
def test_tree_is_strict_and_codes_prefix_free(seed):
    rng = random.Random(seed)
    data = bytes(rng.choice(b"abcdefghij\x00\xff") for _ in range(rng.randint(1, 2000)))
    counts = _counts(data)
    root = build_tree(counts)
    _assert_strict(root)
    assert root.weight == len(data) + 1

    codes = make_encodings(root)
    expected = {sym for sym, c in enumerate(counts) if c} | {PSEUDO_EOF}
    assert set(codes) == expected
    values = list(codes.values())
    for i, a in enumerate(values):
        for j, b in enumerate(values):
            if i != j:
                assert not b.startswith(a)


def test_all_symbols_present():
    codes = make_encodings(build_tree([1] * ALPH_SIZE))
    assert len(codes) == ALPH_SIZE + 1
    assert all(codes.values())


def test_build_is_deterministic():
    counts = _counts(b"the quick brown fox jumps over the lazy dog")
    assert make_encodings(build_tree(counts)) == make_encodings(build_tree(counts))


def test_pack_encodings():
    packed = pack_encodings({1: "101", 2: "0", 3: "0011"})
    assert packed == {1: (0b101, 3), 2: (0, 1), 3: (0b0011, 4)}
