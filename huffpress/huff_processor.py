"""
Static Huffman compressor with the encoding tree stored in the header
"""

from huffpress.compressor_ABC import Compressor
from huffpress.exceptions import CorruptHeaderError, TruncatedStreamError, UnrecognizedFormatError
from huffpress.huffman_coding import (
    BITS_PER_INT,
    BITS_PER_WORD,
    HUFF_TREE,
    PSEUDO_EOF,
    build_tree,
    count_frequencies,
    make_encodings,
    pack_encodings,
)
from huffpress.huffman_utils.bit_reader import EOF, BitReader
from huffpress.huffman_utils.bit_writer import BitWriter
from huffpress.tree_codec import read_tree, write_tree


class HuffProcessor(Compressor):
    """
    Compresses byte streams with a static Huffman code.

    Stream layout: HUFF_TREE magic (32 bits), the tree in preorder,
    the code of every input byte, the code of PSEUDO_EOF, zero padding
    up to a whole byte.
    """

    def __init__(self, debug: bool = False):
        self.debug = debug
        self.log = []

    def _info(self, message: str, detail: bool = False):
        """Adds a line to the log; detail lines are kept only in debug mode."""
        if detail and not self.debug:
            return
        self.log.append(message)
        if self.debug:
            print(message)

    def compress(self, reader: BitReader, writer: BitWriter) -> str:
        """
        Compresses a stream. Process must be reversible and loss-less.
        The reader is read twice: once to count the bytes, once to encode them.

        Args:
            reader: Rewindable bit stream of the data to compress
            writer: Bit stream for the compressed data

        Returns:
            Compression log information
        """
        self.log.clear()
        try:
            counts = count_frequencies(reader)
            input_size = sum(counts)
            self._info(f"Compressing {input_size} bytes")

            root = build_tree(counts)
            codes = pack_encodings(make_encodings(root))
            self._info(f"Tree has {len(codes)} leaves", detail=True)
            reader.reset()

            writer.write_bits(BITS_PER_INT, HUFF_TREE)
            write_tree(writer, root)
            self._info(f"Header written: {writer.bits_written} bits", detail=True)

            while True:
                val = reader.read_bits(BITS_PER_WORD)
                if val == EOF:
                    break
                code, length = codes[val]
                writer.write_bits(length, code)
            code, length = codes[PSEUDO_EOF]
            writer.write_bits(length, code)
            self._info(f"Bits read: {reader.bits_read}, bits written: {writer.bits_written}", detail=True)
        finally:
            writer.close()

        final_size = (writer.bits_written + 7) // 8
        diff = input_size - final_size
        if diff > 0:
            ratio = diff / input_size * 100
            self._info(f"Size reduced by {diff} bytes ({ratio:.1f}% total saving)")
        else:
            self._info(f"Size increased by {-diff} bytes")
        return "\n".join(self.log)

    def decompress(self, reader: BitReader, writer: BitWriter) -> str:
        """
        Decompresses a stream. Output must be identical bit-by-bit to the
        original. If an error is raised the output written so far is unusable.

        Args:
            reader: Bit stream of the compressed data
            writer: Bit stream for the restored data

        Returns:
            Decompression log information

        Raises:
            UnrecognizedFormatError: the stream does not start with HUFF_TREE
            CorruptHeaderError: the tree in the header is truncated or invalid
            TruncatedStreamError: the data ends before the PSEUDO_EOF code
        """
        self.log.clear()
        try:
            magic = reader.read_bits(BITS_PER_INT)
            if magic != HUFF_TREE:
                raise UnrecognizedFormatError(magic)

            root = read_tree(reader)
            self._info(f"Header read: {reader.bits_read} bits", detail=True)

            if root.is_leaf():
                # a lone leaf has the empty code, only PSEUDO_EOF can stand alone
                if root.value != PSEUDO_EOF:
                    raise CorruptHeaderError("Tree without PSEUDO_EOF")
            else:
                self._decode_body(reader, writer, root)
        finally:
            writer.close()

        self._info(f"Decompressed {writer.bits_written // BITS_PER_WORD} bytes")
        self._info(f"Bits read: {reader.bits_read}, bits written: {writer.bits_written}", detail=True)
        return "\n".join(self.log)

    @staticmethod
    def _decode_body(reader: BitReader, writer: BitWriter, root) -> None:
        """Walks the tree bit by bit until the PSEUDO_EOF leaf is reached."""
        current = root
        while True:
            bit = reader.read_bits(1)
            if bit == EOF:
                raise TruncatedStreamError("Bad input, no PSEUDO_EOF")
            current = current.left if bit == 0 else current.right

            if current.is_leaf():
                if current.value == PSEUDO_EOF:
                    return
                writer.write_bits(BITS_PER_WORD, current.value)
                current = root
