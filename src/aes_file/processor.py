"""Segment data into 16-byte blocks and run each through the cipher.

Blocks are processed independently (no chaining), so with workers > 1
they are spread over a thread pool that shares one read-only key
schedule.  Output order always matches input order.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable

from aes_block import BLOCK_SIZE, BlockCipher
from aes_block.trace import TraceRecorder

from .config import FileCipherConfig
from .errors import BadKeyFileError, BadInputLengthError
from .io import read_binary_file, write_binary_file
from .padding import pad_zero, strip_zero


def check_key(key: bytes, source: str = "<key>") -> None:
    """Raise BadKeyFileError unless key is exactly one block long."""
    if len(key) != BLOCK_SIZE:
        raise BadKeyFileError(f"Bad key file: {source}")


def split_blocks(data: bytes) -> list[bytes]:
    """Split block-aligned data into consecutive 16-byte blocks."""
    return [data[i:i + BLOCK_SIZE] for i in range(0, len(data), BLOCK_SIZE)]


def _process_blocks(
    transform: Callable[[bytes], bytes],
    data: bytes,
    workers: int,
) -> bytes:
    blocks = split_blocks(data)
    if workers > 1 and len(blocks) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(transform, blocks))
    else:
        results = [transform(block) for block in blocks]
    return b"".join(results)


def _make_cipher(key: bytes, config: FileCipherConfig) -> tuple[BlockCipher, int]:
    """Build the cipher and the effective worker count for a run."""
    if config.verbose:
        # Traced runs stay sequential so the printed steps stay in block order
        tracer = TraceRecorder(verbose=True, keep_records=False)
        return BlockCipher(key, tracer=tracer), 1
    return BlockCipher(key), config.workers


def encrypt_data(
    key: bytes,
    data: bytes,
    config: FileCipherConfig | None = None,
    key_source: str = "<key>",
    data_source: str = "<data>",
) -> bytes:
    """Encrypt arbitrary-length data block by block.

    Args:
        key: 16-byte key
        data: plaintext
        config: padding / worker settings (defaults to FileCipherConfig())
        key_source: name used in error messages for the key
        data_source: name used in error messages for the data

    Returns:
        Ciphertext, a multiple of 16 bytes long

    Raises:
        BadKeyFileError: If the key is not 16 bytes
        BadInputLengthError: If padding is "none" and data is not block aligned
    """
    config = config or FileCipherConfig()
    check_key(key, key_source)

    if config.padding == "zero":
        data = pad_zero(data)
    elif len(data) % BLOCK_SIZE != 0:
        raise BadInputLengthError(f"Bad plaintext file length: {data_source}")

    cipher, workers = _make_cipher(key, config)
    return _process_blocks(cipher.encrypt_block, data, workers)


def decrypt_data(
    key: bytes,
    data: bytes,
    config: FileCipherConfig | None = None,
    key_source: str = "<key>",
    data_source: str = "<data>",
) -> bytes:
    """Decrypt block-aligned ciphertext block by block.

    Trailing zero bytes are removed from the result when the padding
    policy is "zero".

    Raises:
        BadKeyFileError: If the key is not 16 bytes
        BadInputLengthError: If data is not a multiple of 16 bytes
    """
    config = config or FileCipherConfig()
    check_key(key, key_source)

    if len(data) % BLOCK_SIZE != 0:
        raise BadInputLengthError(f"Bad ciphertext file length: {data_source}")

    cipher, workers = _make_cipher(key, config)
    plaintext = _process_blocks(cipher.decrypt_block, data, workers)

    if config.padding == "zero":
        plaintext = strip_zero(plaintext)
    return plaintext


def encrypt_file(
    key_path: str | Path,
    input_path: str | Path,
    output_path: str | Path,
    config: FileCipherConfig | None = None,
) -> int:
    """Encrypt input_path into output_path using the key in key_path.

    Returns:
        Number of bytes written
    """
    key = read_binary_file(key_path)
    data = read_binary_file(input_path)
    ciphertext = encrypt_data(key, data, config, str(key_path), str(input_path))
    write_binary_file(output_path, ciphertext)
    return len(ciphertext)


def decrypt_file(
    key_path: str | Path,
    input_path: str | Path,
    output_path: str | Path,
    config: FileCipherConfig | None = None,
) -> int:
    """Decrypt input_path into output_path using the key in key_path.

    Returns:
        Number of bytes written
    """
    key = read_binary_file(key_path)
    data = read_binary_file(input_path)
    plaintext = decrypt_data(key, data, config, str(key_path), str(input_path))
    write_binary_file(output_path, plaintext)
    return len(plaintext)
