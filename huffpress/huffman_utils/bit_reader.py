from typing import BinaryIO

from bitarray import bitarray
from bitarray.util import ba2int

EOF = -1


class BitReader:
    """
    A class for reading bits from a binary stream, most significant bit first.
    The whole stream is buffered on construction so the reader can be
    rewound with reset() for a second pass.
    """

    def __init__(self, in_stream: BinaryIO) -> None:
        """
        Initialize BitReader by reading the entire stream into a bitarray.

        Args:
            in_stream: Binary stream containing the bit stream
        """
        self.bits = bitarray(endian="big")
        self.bits.frombytes(in_stream.read())
        self.pos = 0

    @property
    def bits_read(self) -> int:
        """Number of bits consumed since construction or the last reset."""
        return self.pos

    def read_bits(self, n: int) -> int:
        """
        Read n bits in MSB-first order and return them as an unsigned integer.

        Args:
            n: Number of bits to read

        Returns:
            The value as an integer, or EOF if fewer than n bits remain.
            The position does not move when EOF is returned.

        Raises:
            ValueError: If n is not positive
        """
        if n <= 0:
            raise ValueError("Number of bits must be positive")
        if self.pos + n > len(self.bits):
            return EOF
        val = ba2int(self.bits[self.pos:self.pos + n], signed=False)
        self.pos += n
        return val

    def reset(self) -> None:
        """Move the position back to the first bit of the stream."""
        self.pos = 0
