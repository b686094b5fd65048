"""
AES-128 key expansion.

The 16-byte key is read as four words W0..W3.  For i = 4..43:

    W[i] = W[i-4] ^ g(W[i-1], i/4)    if i % 4 == 0
    W[i] = W[i-4] ^ W[i-1]            otherwise

Words 4k..4k+3 form round key k (k = 0..10).
"""

from . import BLOCK_SIZE, ROUNDS, WORD_SIZE
from .field import field_add, field_pow
from .sbox import SBOX

# The polynomial x
_X = 0x02

TOTAL_WORDS = WORD_SIZE * (ROUNDS + 1)


def round_constant(r: int) -> int:
    """
    Round constant for key-schedule round r (1..10): x^(r-1) in GF(2^8).
    """
    if not 1 <= r <= ROUNDS:
        raise ValueError(f"Round must be 1..{ROUNDS}, got {r}")
    return field_pow(_X, r - 1)


def rot_word(word: list[int]) -> list[int]:
    """Rotate a 4-byte word left by one byte."""
    return word[1:] + word[:1]


def sub_word(word: list[int]) -> list[int]:
    """Apply the S-box to each byte of a word."""
    return [SBOX[b] for b in word]


def g_function(word: list[int], r: int) -> list[int]:
    """
    Key-schedule round function.

    Args:
        word: 4-byte input word
        r: round number 1..10

    Returns:
        New 4-byte word: RotWord, SubWord, then round constant on byte 0
    """
    result = sub_word(rot_word(list(word)))
    result[0] = field_add(result[0], round_constant(r))
    return result


def generate_subkeys(key: bytes) -> tuple[bytes, ...]:
    """
    Expand a 16-byte key into the 11 round keys.

    Args:
        key: 16-byte AES-128 key

    Returns:
        Tuple of 11 16-byte round keys; element 0 is the key itself
    """
    if len(key) != BLOCK_SIZE:
        raise ValueError(f"Key must be {BLOCK_SIZE} bytes, got {len(key)}")

    words = [list(key[i:i + WORD_SIZE]) for i in range(0, BLOCK_SIZE, WORD_SIZE)]

    for i in range(WORD_SIZE, TOTAL_WORDS):
        temp = words[i - 1]
        if i % WORD_SIZE == 0:
            temp = g_function(temp, i // WORD_SIZE)
        words.append([field_add(a, b) for a, b in zip(words[i - WORD_SIZE], temp)])

    return tuple(
        bytes(b for word in words[k:k + WORD_SIZE] for b in word)
        for k in range(0, TOTAL_WORDS, WORD_SIZE)
    )
