"""
AES-128 Block Cipher

From-scratch FIPS-197 AES-128 engine:
1. GF(2^8) field arithmetic
2. Key schedule expansion (11 round keys)
3. Round transformations and the 10-round encrypt/decrypt driver
"""

__version__ = "1.0.0"

BLOCK_SIZE = 16  # Bytes in a key or a block
BLOCK_ROWS = 4
BLOCK_COLS = 4
WORD_SIZE = 4
ROUNDS = 10

# Default AES-128 test values from FIPS-197 Appendix B
DEFAULT_KEY_HEX = "2b7e151628aed2a6abf7158809cf4f3c"
DEFAULT_PT_HEX = "3243f6a8885a308d313198a2e0370734"
DEFAULT_CT_HEX = "3925841d02dc09fbdc118597196a0b32"

from .cipher import BlockCipher, encrypt_block, decrypt_block  # noqa: E402
from .key_schedule import generate_subkeys  # noqa: E402

__all__ = [
    "BlockCipher",
    "encrypt_block",
    "decrypt_block",
    "generate_subkeys",
]
