"""
AES-128 block cipher driver.

Encryption schedule:
- Step 0:    AddRoundKey (round key 0)
- Steps 1-9: SubBytes, ShiftRows, MixColumns, AddRoundKey (round key 1..9)
- Step 10:   SubBytes, ShiftRows, AddRoundKey (round key 10, no MixColumns)

Decryption runs the mirror image from round key 10 down to round key 0,
with InvMixColumns after every AddRoundKey except the last one.

A BlockCipher expands its key once; the schedule is an immutable tuple
of bytes and may be shared by threads processing different blocks.
"""

from . import BLOCK_SIZE, ROUNDS
from .key_schedule import generate_subkeys
from .rounds import (
    sub_bytes,
    inv_sub_bytes,
    shift_rows,
    inv_shift_rows,
    mix_columns,
    inv_mix_columns,
    add_round_key,
)
from .trace import TraceRecorder
from .utils import block_to_state, state_to_block, copy_state


_FULL_ROUND = ("SubBytes", "ShiftRows", "MixColumns", "AddRoundKey")
_INV_FULL_ROUND = ("InvShiftRows", "InvSubBytes", "AddRoundKey", "InvMixColumns")

# (round key index, operations)
ENCRYPT_SCHEDULE = (
    ((0, ("AddRoundKey",)),)
    + tuple((r, _FULL_ROUND) for r in range(1, ROUNDS))
    + ((ROUNDS, ("SubBytes", "ShiftRows", "AddRoundKey")),)  # Final round: no MixColumns
)

DECRYPT_SCHEDULE = (
    ((ROUNDS, ("AddRoundKey",)),)
    + tuple((r, _INV_FULL_ROUND) for r in range(ROUNDS - 1, 0, -1))
    + ((0, ("InvShiftRows", "InvSubBytes", "AddRoundKey")),)
)

_STATE_OPERATIONS = {
    "SubBytes": sub_bytes,
    "InvSubBytes": inv_sub_bytes,
    "ShiftRows": shift_rows,
    "InvShiftRows": inv_shift_rows,
    "MixColumns": mix_columns,
    "InvMixColumns": inv_mix_columns,
}


class BlockCipher:
    """
    AES-128 cipher bound to one key.

    Holds the expanded round-key schedule and runs single 16-byte blocks
    through the encrypt or decrypt schedule.
    """

    def __init__(self, key: bytes, tracer: TraceRecorder | None = None):
        """
        Expand the key.

        Args:
            key: 16-byte AES key
            tracer: Optional trace recorder for verbose output
        """
        if len(key) != BLOCK_SIZE:
            raise ValueError(f"Key must be {BLOCK_SIZE} bytes, got {len(key)}")

        self.tracer = tracer
        self._round_keys = generate_subkeys(bytes(key))

    @property
    def round_keys(self) -> tuple[bytes, ...]:
        """The 11 round keys, round 0 first."""
        return self._round_keys

    def encrypt_block(self, block: bytes) -> bytes:
        """
        Encrypt a single 16-byte block.

        Args:
            block: 16-byte plaintext

        Returns:
            16-byte ciphertext
        """
        return self._run(block, ENCRYPT_SCHEDULE, "encrypt")

    def decrypt_block(self, block: bytes) -> bytes:
        """
        Decrypt a single 16-byte block.

        Args:
            block: 16-byte ciphertext

        Returns:
            16-byte plaintext
        """
        return self._run(block, DECRYPT_SCHEDULE, "decrypt")

    def _run(self, block: bytes, schedule, direction: str) -> bytes:
        if len(block) != BLOCK_SIZE:
            raise ValueError(f"Block must be {BLOCK_SIZE} bytes, got {len(block)}")

        state = block_to_state(block)
        for step, (round_num, operations) in enumerate(schedule):
            state = self._execute_step(state, step, round_num, operations, direction)
        return state_to_block(state)

    def _execute_step(
        self,
        state: list[list[int]],
        step: int,
        round_num: int,
        operations: tuple[str, ...],
        direction: str,
    ) -> list[list[int]]:
        """
        Execute one step of the schedule.

        Args:
            state: state entering the step
            step: position in the schedule
            round_num: index of the round key used by this step
            operations: operations to perform, in order
            direction: "encrypt" or "decrypt", for tracing

        Returns:
            State leaving the step
        """
        round_key = self._round_keys[round_num]

        if self.tracer:
            self.tracer.record(
                direction=direction,
                step=step,
                round=round_num,
                operation="step_start: " + " -> ".join(operations),
                state=copy_state(state),
                round_key=round_key,
            )

        for op in operations:
            if op == "AddRoundKey":
                state = add_round_key(state, round_key)
            elif op in _STATE_OPERATIONS:
                state = _STATE_OPERATIONS[op](state)
            else:
                raise ValueError(f"Unknown operation: {op}")

            if self.tracer:
                self.tracer.record(
                    direction=direction,
                    step=step,
                    round=round_num,
                    operation=op,
                    state=copy_state(state),
                )

        return state


def encrypt_block(block: bytes, key: bytes) -> bytes:
    """
    Encrypt one 16-byte block under a 16-byte key.

    Expands the key on every call; use BlockCipher to reuse a schedule.
    """
    return BlockCipher(key).encrypt_block(block)


def decrypt_block(block: bytes, key: bytes) -> bytes:
    """
    Decrypt one 16-byte block under a 16-byte key.

    Expands the key on every call; use BlockCipher to reuse a schedule.
    """
    return BlockCipher(key).decrypt_block(block)
