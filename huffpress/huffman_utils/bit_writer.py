from typing import BinaryIO

from bitarray import bitarray
from bitarray.util import int2ba


class BitWriter:
    """
    A class for writing bits to a binary stream, most significant bit first.
    Whole bytes are passed to the stream once the buffer fills up; the
    trailing partial byte is padded with zeros on close().
    """

    def __init__(self, out_stream: BinaryIO, buffer_bytes: int = 4096) -> None:
        """
        Initialize a new BitWriter instance with an empty bitarray.

        Args:
            out_stream: Binary stream to write the bytes to
            buffer_bytes: Number of whole bytes kept before writing through
        """
        self.out_stream = out_stream
        self.buffer_bits = buffer_bytes * 8
        self.bits = bitarray(endian="big")
        self.closed = False
        self._written = 0

    @property
    def bits_written(self) -> int:
        """Number of bits accepted so far, padding excluded."""
        return self._written

    def write_bits(self, n: int, value: int) -> None:
        """
        Write the low n bits of value in MSB-first order.

        Args:
            n: Number of bits to write
            value: Integer value to write

        Raises:
            ValueError: If n is negative or the writer is closed
        """
        if self.closed:
            raise ValueError("Write to a closed BitWriter")
        if n < 0:
            raise ValueError("Length cannot be negative")
        if n == 0:
            return
        self.bits.extend(int2ba(value & ((1 << n) - 1), length=n, endian="big"))
        self._written += n
        if len(self.bits) >= self.buffer_bits:
            self._drain()

    def _drain(self) -> None:
        """Write every complete byte of the buffer to the stream."""
        whole = len(self.bits) - len(self.bits) % 8
        if whole:
            self.out_stream.write(self.bits[:whole].tobytes())
            del self.bits[:whole]

    def close(self) -> None:
        """
        Pad the last byte with zero bits and flush everything to the stream.
        The stream itself stays open, it belongs to the caller.
        """
        if self.closed:
            return
        self.bits.fill()
        self._drain()
        self.out_stream.flush()
        self.closed = True

    def __enter__(self) -> "BitWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
