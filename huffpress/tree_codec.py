"""
Preorder serialization of the Huffman tree stored in the stream header
"""

from huffpress.exceptions import CorruptHeaderError
from huffpress.huffman_coding import ALPH_SIZE, LEAF_VALUE_BITS, PSEUDO_EOF, HuffNode
from huffpress.huffman_utils.bit_reader import EOF, BitReader
from huffpress.huffman_utils.bit_writer import BitWriter


def write_tree(writer: BitWriter, node: HuffNode) -> None:
    """
    Writes the tree in preorder: an internal node is a single 0 bit followed
    by its left and right subtrees, a leaf is a 1 bit followed by its value
    in LEAF_VALUE_BITS bits.

    :param writer: BitWriter to write the header to
    :param node: root of the (sub)tree
    """
    if node.is_leaf():
        writer.write_bits(1, 1)
        writer.write_bits(LEAF_VALUE_BITS, node.value)
        return
    writer.write_bits(1, 0)
    write_tree(writer, node.left)
    write_tree(writer, node.right)


def read_tree(reader: BitReader, depth: int = 0) -> HuffNode:
    """
    Rebuilds a tree written by write_tree. Weights are not stored in the
    header, so every rebuilt node has weight 0.

    :param reader: BitReader positioned at the start of the tree
    :param depth: depth of the node being read
    :return: root of the rebuilt (sub)tree
    :raises CorruptHeaderError: if the header ends early or is not a valid tree
    """
    # 257 leaves cannot produce a tree deeper than ALPH_SIZE
    if depth > ALPH_SIZE:
        raise CorruptHeaderError(f"Tree deeper than {ALPH_SIZE} levels")

    bit = reader.read_bits(1)
    if bit == EOF:
        raise CorruptHeaderError("Header ended before the tree was complete")

    if bit == 0:
        left = read_tree(reader, depth + 1)
        right = read_tree(reader, depth + 1)
        return HuffNode(0, 0, left, right)

    value = reader.read_bits(LEAF_VALUE_BITS)
    if value == EOF:
        raise CorruptHeaderError("Header ended inside a leaf value")
    if value > PSEUDO_EOF:
        raise CorruptHeaderError(f"Leaf value {value} is outside the alphabet")
    return HuffNode(value, 0)
