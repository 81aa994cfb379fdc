from abc import ABC, abstractmethod
import io
from typing import BinaryIO, Tuple

from huffpress.huffman_utils.bit_reader import BitReader
from huffpress.huffman_utils.bit_writer import BitWriter


class Compressor(ABC):
    """
    Interface describing compression and decompression of bit streams
    with a particular algorithm.
    """

    @abstractmethod
    def compress(self, reader: BitReader, writer: BitWriter) -> str:
        """
        Reads the data from the bit reader, compresses it and writes the
        result to the bit writer. The writer is closed when this returns.

        Args:
            reader: Rewindable bit stream with the data
            writer: Bit stream for the compressed data

        Returns:
            A string with log information
        """

    @abstractmethod
    def decompress(self, reader: BitReader, writer: BitWriter) -> str:
        """
        Reads compressed data from the bit reader and writes the restored
        data to the bit writer. The writer is closed when this returns.

        Args:
            reader: Bit stream with the compressed data
            writer: Bit stream for the decompressed data

        Returns:
            A string with log information
        """

    def compress_stream(self, in_stream: BinaryIO, out_stream: BinaryIO) -> str:
        """
        Helper that compresses one open binary stream into another.

        Args:
            in_stream: Binary stream with the data
            out_stream: Binary stream for the compressed data

        Returns:
            Compression log information
        """
        return self.compress(BitReader(in_stream), BitWriter(out_stream))

    def decompress_stream(self, in_stream: BinaryIO, out_stream: BinaryIO) -> str:
        """
        Helper that decompresses one open binary stream into another.

        Args:
            in_stream: Binary stream with the compressed data
            out_stream: Binary stream for the decompressed data

        Returns:
            Decompression log information
        """
        return self.decompress(BitReader(in_stream), BitWriter(out_stream))

    @classmethod
    def compress_bytes(cls, data: bytes) -> Tuple[bytes, str]:
        """
        Helper for compressing bytes.

        Args:
            data: Input data to compress

        Returns:
            Tuple (compressed data, compression log information)
        """
        compressor = cls()
        out_buffer = io.BytesIO()
        log_info = compressor.compress_stream(io.BytesIO(data), out_buffer)
        return out_buffer.getvalue(), log_info

    @classmethod
    def decompress_bytes(cls, data: bytes) -> Tuple[bytes, str]:
        """
        Helper for decompressing bytes.

        Args:
            data: Compressed data

        Returns:
            Tuple (decompressed data, decompression log information)
        """
        compressor = cls()
        out_buffer = io.BytesIO()
        log_info = compressor.decompress_stream(io.BytesIO(data), out_buffer)
        return out_buffer.getvalue(), log_info
