"""Zero-byte padding applied around block processing.

pad_zero appends 0x00 bytes up to the next block boundary and
strip_zero removes every trailing 0x00 byte.  The pair is not a sound
padding scheme: plaintext that really ends in 0x00 loses those bytes
on the way back.
"""

from aes_block import BLOCK_SIZE


def pad_zero(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """Append zero bytes so len(data) is a multiple of block_size."""
    remainder = len(data) % block_size
    if remainder == 0:
        return data
    return data + bytes(block_size - remainder)


def strip_zero(data: bytes) -> bytes:
    """Remove all trailing zero bytes."""
    return data.rstrip(b"\x00")
