"""
Block <-> state layout and hex rendering.

The cipher works on a 4x4 grid filled column by column: block byte i
lands in row i % 4, column i // 4, so block[0..3] is the first column
and block[12..15] the last.
"""

from . import BLOCK_SIZE, BLOCK_ROWS, BLOCK_COLS


def block_to_state(block: bytes) -> list[list[int]]:
    """
    Lay a 16-byte block out as a 4x4 state.

    Args:
        block: 16 bytes (bytes or bytearray)

    Returns:
        Fresh 4x4 grid, state[row][col]
    """
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"Expected {BLOCK_SIZE} bytes, got {len(block)}")

    state = [[0] * BLOCK_COLS for _ in range(BLOCK_ROWS)]
    for i, value in enumerate(block):
        state[i % BLOCK_ROWS][i // BLOCK_ROWS] = value
    return state


def state_to_block(state: list[list[int]]) -> bytes:
    """Read a 4x4 state back out column by column."""
    return bytes(
        state[row][col]
        for col in range(BLOCK_COLS)
        for row in range(BLOCK_ROWS)
    )


def hex_to_bytes(hex_str: str) -> bytes:
    """Parse a key or block given on the command line; ValueError on bad hex."""
    return bytes.fromhex(hex_str)


def bytes_to_hex(data: bytes) -> str:
    return data.hex()


def state_to_hex(state: list[list[int]]) -> str:
    """Hex of the state in block order, as printed in trace lines."""
    return bytes_to_hex(state_to_block(state))


def format_state_grid(state: list[list[int]], indent: str = "  ") -> str:
    """
    Render the state as four rows of hex, matching the FIPS-197 figures.

    The Appendix B starting state 193de3be a0f4e22b ... renders as:
      19 a0 9a e9
      3d f4 c6 f8
      e3 e2 8d 48
      be 2b 2a 08
    """
    return "\n".join(
        indent + " ".join(f"{value:02x}" for value in row)
        for row in state
    )


def copy_state(state: list[list[int]]) -> list[list[int]]:
    """Snapshot a state so later steps cannot alter a recorded copy."""
    return [row[:] for row in state]
