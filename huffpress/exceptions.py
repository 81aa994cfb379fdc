"""
Errors raised while decompressing a Huffman stream
"""


class HuffException(ValueError):
    """Base class for malformed compressed input."""


class UnrecognizedFormatError(HuffException):
    """The stream does not start with the expected magic number."""

    def __init__(self, magic: int):
        self.magic = magic
        super().__init__(f"Invalid magic number 0x{magic & 0xffffffff:08X}")


class CorruptHeaderError(HuffException):
    """The encoding tree in the header is truncated or malformed."""


class TruncatedStreamError(HuffException):
    """The body ended before the PSEUDO_EOF code was read."""
