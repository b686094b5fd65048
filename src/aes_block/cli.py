"""
Command-line interface for single-block AES-128.

Usage:
    python -m aes_block.cli run --mode encrypt --key <hex32> --data <hex32> --verbose
    python -m aes_block.cli run --mode decrypt --key <hex32> --data <hex32> --trace out.jsonl
    python -m aes_block.cli schedule --key <hex32>
"""

import argparse
import sys
from typing import TextIO

from . import DEFAULT_KEY_HEX, DEFAULT_PT_HEX, DEFAULT_CT_HEX
from .cipher import BlockCipher
from .reference import verify_ciphertext, verify_plaintext, aes128_encrypt, aes128_decrypt
from .trace import TraceRecorder, print_result, print_header
from .utils import hex_to_bytes, bytes_to_hex, block_to_state, format_state_grid


def _parse_block_hex(value: str, label: str) -> bytes | None:
    """Parse a 32-char hex value, printing an error and returning None on failure."""
    try:
        data = hex_to_bytes(value)
    except ValueError as e:
        print(f"Error: Invalid {label} hex: {e}")
        return None
    if len(data) != 16:
        print(f"Error: {label.capitalize()} must be 32 hex chars (16 bytes), got {len(value)} chars")
        return None
    return data


def run_command(args: argparse.Namespace) -> int:
    """Execute the 'run' command."""

    # Handle key
    if args.key:
        key_hex = args.key
        key_source = "provided"
    else:
        key_hex = DEFAULT_KEY_HEX
        key_source = "default (FIPS-197)"

    # Handle data block
    if args.data:
        data_hex = args.data
        data_source = "provided"
    else:
        data_hex = DEFAULT_PT_HEX if args.mode == "encrypt" else DEFAULT_CT_HEX
        data_source = "default (FIPS-197)"

    key = _parse_block_hex(key_hex, "key")
    if key is None:
        return 1
    data = _parse_block_hex(data_hex, "data")
    if data is None:
        return 1

    print_header(f"AES-128 {args.mode}")
    print(f"Key:   {key_hex} ({key_source})")
    print(f"Input: {data_hex} ({data_source})")

    trace_file: TextIO | None = None
    if args.trace:
        try:
            trace_file = open(args.trace, 'w')
        except OSError as e:
            print(f"Error: Cannot open trace file: {e}")
            return 1

    tracer = TraceRecorder(verbose=args.verbose, trace_file=trace_file)

    try:
        cipher = BlockCipher(key, tracer=tracer)

        if args.mode == "encrypt":
            output = cipher.encrypt_block(data)
            passed = verify_ciphertext(output, key, data)
            expected = aes128_encrypt(key, data)
            label = "Ciphertext"
        else:
            output = cipher.decrypt_block(data)
            passed = verify_plaintext(output, key, data)
            expected = aes128_decrypt(key, data)
            label = "Plaintext"

        if args.verbose:
            print("\nInput state:")
            print(format_state_grid(block_to_state(data)))
            print("Output state:")
            print(format_state_grid(block_to_state(output)))

        output_hex = bytes_to_hex(output)
        print_result(label, output_hex, passed)

        if not passed:
            print(f"Expected: {bytes_to_hex(expected)}")
            print(f"Got:      {output_hex}")
            return 1

        return 0

    finally:
        if trace_file:
            trace_file.close()


def schedule_command(args: argparse.Namespace) -> int:
    """Execute the 'schedule' command: print all 11 round keys."""
    key = _parse_block_hex(args.key or DEFAULT_KEY_HEX, "key")
    if key is None:
        return 1

    print_header("AES-128 key schedule")
    for i, round_key in enumerate(BlockCipher(key).round_keys):
        print(f"Round {i:2d}: {bytes_to_hex(round_key)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        prog="aes-block",
        description="Single-block AES-128 encryption and decryption",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'run' command
    run_parser = subparsers.add_parser("run", help="Encrypt or decrypt one block")
    run_parser.add_argument(
        "--mode",
        choices=["encrypt", "decrypt"],
        default="encrypt",
        help="Direction (default: encrypt)",
    )
    run_parser.add_argument(
        "--key",
        help="AES-128 key as 32 hex chars (default: FIPS-197 test key)",
    )
    run_parser.add_argument(
        "--data",
        help="Input block as 32 hex chars (default: FIPS-197 plaintext or ciphertext)",
    )
    run_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print the state after every operation",
    )
    run_parser.add_argument(
        "--trace",
        metavar="FILE",
        help="Output JSON Lines trace to file",
    )

    # 'schedule' command
    schedule_parser = subparsers.add_parser("schedule", help="Print the 11 round keys")
    schedule_parser.add_argument(
        "--key",
        help="AES-128 key as 32 hex chars (default: FIPS-197 test key)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "run":
        return run_command(args)
    elif args.command == "schedule":
        return schedule_command(args)

    return 0


if __name__ == "__main__":
    sys.exit(main())
