"""
AES round transformations.

Every function takes a 4x4 column-major state and returns a new one;
inputs are never modified.

Forward:  SubBytes, ShiftRows, MixColumns, AddRoundKey
Inverse:  InvSubBytes, InvShiftRows, InvMixColumns (AddRoundKey is its own inverse)
"""

from . import BLOCK_ROWS, BLOCK_COLS, BLOCK_SIZE
from .field import field_add, field_mul
from .sbox import SBOX, INV_SBOX


MIX_MATRIX = (
    (0x02, 0x03, 0x01, 0x01),
    (0x01, 0x02, 0x03, 0x01),
    (0x01, 0x01, 0x02, 0x03),
    (0x03, 0x01, 0x01, 0x02),
)

INV_MIX_MATRIX = (
    (0x0e, 0x0b, 0x0d, 0x09),
    (0x09, 0x0e, 0x0b, 0x0d),
    (0x0d, 0x09, 0x0e, 0x0b),
    (0x0b, 0x0d, 0x09, 0x0e),
)


def _substitute(state: list[list[int]], table: bytes) -> list[list[int]]:
    return [[table[value] for value in row] for row in state]


def sub_bytes(state: list[list[int]]) -> list[list[int]]:
    """Replace every byte with its S-box image."""
    return _substitute(state, SBOX)


def inv_sub_bytes(state: list[list[int]]) -> list[list[int]]:
    """Replace every byte with its inverse S-box image."""
    return _substitute(state, INV_SBOX)


def shift_rows(state: list[list[int]]) -> list[list[int]]:
    """Rotate row r left by r positions."""
    return [row[r:] + row[:r] for r, row in enumerate(state)]


def inv_shift_rows(state: list[list[int]]) -> list[list[int]]:
    """Rotate row r right by r positions."""
    return [row[BLOCK_COLS - r:] + row[:BLOCK_COLS - r] for r, row in enumerate(state)]


def _multiply_column(matrix: tuple, column: list[int]) -> list[int]:
    """Multiply one state column by a 4x4 matrix over GF(2^8)."""
    result = []
    for coeffs in matrix:
        acc = 0
        for coeff, value in zip(coeffs, column):
            acc = field_add(acc, field_mul(coeff, value))
        result.append(acc)
    return result


def _mix(state: list[list[int]], matrix: tuple) -> list[list[int]]:
    out = [[0] * BLOCK_COLS for _ in range(BLOCK_ROWS)]
    for col in range(BLOCK_COLS):
        column = [state[row][col] for row in range(BLOCK_ROWS)]
        for row, value in enumerate(_multiply_column(matrix, column)):
            out[row][col] = value
    return out


def mix_columns(state: list[list[int]]) -> list[list[int]]:
    """Multiply each column by MIX_MATRIX."""
    return _mix(state, MIX_MATRIX)


def inv_mix_columns(state: list[list[int]]) -> list[list[int]]:
    """Multiply each column by INV_MIX_MATRIX, undoing mix_columns."""
    return _mix(state, INV_MIX_MATRIX)


def add_round_key(state: list[list[int]], round_key: bytes) -> list[list[int]]:
    """
    XOR a 16-byte round key into the state.

    The round key is taken in block order, so round_key[i] meets the
    state byte at row i % 4, column i // 4.

    Args:
        state: 4x4 state
        round_key: 16-byte round key

    Returns:
        New 4x4 state
    """
    if len(round_key) != BLOCK_SIZE:
        raise ValueError(f"Round key must be {BLOCK_SIZE} bytes, got {len(round_key)}")

    out = [row[:] for row in state]
    for i, k in enumerate(round_key):
        row, col = i % BLOCK_ROWS, i // BLOCK_ROWS
        out[row][col] = field_add(out[row][col], k)
    return out
