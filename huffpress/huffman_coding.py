"""
Huffman coding algorithm -
frequency analysis, tree construction and code tables
"""

import heapq
import itertools

from huffpress.huffman_utils.bit_reader import EOF, BitReader

BITS_PER_WORD = 8
BITS_PER_INT = 32
ALPH_SIZE = 1 << BITS_PER_WORD
PSEUDO_EOF = ALPH_SIZE
LEAF_VALUE_BITS = BITS_PER_WORD + 1
HUFF_NUMBER = 0xFACE8200
HUFF_TREE = HUFF_NUMBER | 1


class HuffNode:
    """
    Class object for Node in Huffman's Tree
    """

    _order = itertools.count()

    def __init__(self, value: int, weight: int, left=None, right=None):
        """
        Function initializes the structure of a node.

        :param value: symbol held by a leaf, unused for internal nodes
        :param weight: int, the frequency of the symbol or of the whole subtree
        :param left: left child, None for leaves
        :param right: right child, None for leaves
        """
        self.value = value
        self.weight = weight
        self.left = left
        self.right = right
        # equal weights come out of the heap in creation order
        self.order = next(HuffNode._order)

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __lt__(self, other):
        return (self.weight, self.order) < (other.weight, other.order)

    def __repr__(self):
        if self.is_leaf():
            return f"HuffNode({self.value}, {self.weight})"
        return f"HuffNode(*, {self.weight}, {self.left!r}, {self.right!r})"


def count_frequencies(reader: BitReader) -> list[int]:
    """
    Function builds the histogram of byte values of the whole input.
    The reader is consumed and must be reset before it is read again.

    :param reader: BitReader positioned at the start of the data
    :return: list of ALPH_SIZE counts indexed by byte value
    """
    counts = [0] * ALPH_SIZE
    while True:
        val = reader.read_bits(BITS_PER_WORD)
        if val == EOF:
            break
        counts[val] += 1
    return counts


def build_tree(counts: list[int]) -> HuffNode:
    """
    Function builds Huffman Tree over every byte with a non-zero count
    plus the PSEUDO_EOF symbol with weight 1.

    :param counts: histogram over byte values
    :return: root of the tree
    """
    nodes = [HuffNode(val, freq) for val, freq in enumerate(counts) if freq > 0]
    nodes.append(HuffNode(PSEUDO_EOF, 1))
    heapq.heapify(nodes)

    while len(nodes) > 1:
        # left smallest node
        l = heapq.heappop(nodes)
        # right smallest node
        r = heapq.heappop(nodes)
        heapq.heappush(nodes, HuffNode(0, l.weight + r.weight, l, r))

    return nodes[0]


def make_encodings(root: HuffNode) -> dict[int, str]:
    """
    Function generates the code of each leaf symbol,
    "0" for every step to the left and "1" to the right.
    A tree made of a single leaf gives that symbol the empty code.

    :param root: root of Huffman's tree
    :return: dict, symbol -> code string
    """
    encodings = {}
    stack = [(root, "")]
    while stack:
        node, code = stack.pop()
        if node.is_leaf():
            encodings[node.value] = code
            continue
        stack.append((node.right, code + "1"))
        stack.append((node.left, code + "0"))
    return encodings


def pack_encodings(encodings: dict[int, str]) -> dict[int, tuple[int, int]]:
    """
    Converts code strings into (code, length) pairs ready for BitWriter.

    :param encodings: dict, symbol -> code string
    :return: dict, symbol -> (code, code_length)
    """
    return {
        sym: (int(code, 2) if code else 0, len(code))
        for sym, code in encodings.items()
    }
