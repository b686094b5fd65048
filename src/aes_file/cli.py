"""Command-line interface for AES-128 file encryption."""

from __future__ import annotations

import random
import secrets
import sys

import click

from aes_block import BlockCipher
from aes_block.reference import FIPS_197_TEST_VECTORS, compare_with_reference

from . import __version__
from .config import FileCipherConfig, PADDING_POLICIES
from .errors import FileCipherError
from .processor import encrypt_file, decrypt_file


def _file_options(func):
    """Options shared by 'encrypt' and 'decrypt'."""
    func = click.option(
        "--verbose", "-v",
        is_flag=True,
        help="Print the state after every round operation",
    )(func)
    func = click.option(
        "--workers",
        type=click.IntRange(min=1),
        default=1,
        help="Threads used to process blocks (default: 1)",
    )(func)
    func = click.option(
        "--padding",
        type=click.Choice(PADDING_POLICIES),
        default="zero",
        help="Padding policy: zero-pad/strip or none (default: zero)",
    )(func)
    func = click.argument("output_file", type=click.Path(dir_okay=False))(func)
    func = click.argument("input_file", type=click.Path(dir_okay=False))(func)
    func = click.argument("key_file", type=click.Path(dir_okay=False))(func)
    return func


def _run_file_command(operation, key_file, input_file, output_file,
                      padding, workers, verbose) -> None:
    config = FileCipherConfig(padding=padding, workers=workers, verbose=verbose)

    try:
        written = operation(key_file, input_file, output_file, config)
    except FileCipherError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if verbose:
        click.echo(f"Wrote {written} bytes to {output_file}")


def _check_both_directions(key: bytes, block: bytes) -> list[str]:
    """Encrypt and decrypt block with our cipher; return mismatch details."""
    cipher = BlockCipher(key)
    failures = []
    for direction, run in (("encrypt", cipher.encrypt_block),
                           ("decrypt", cipher.decrypt_block)):
        ok, detail = compare_with_reference(direction, key, block, run(block))
        if not ok:
            failures.append(detail)
    return failures


@click.group()
@click.version_option(version=__version__, prog_name="aes-file")
def main() -> None:
    """AES-128 file encryption and decryption.

    Files are processed as independent 16-byte blocks under a 16-byte
    binary key file.
    """
    pass


@main.command()
@_file_options
def encrypt(key_file: str, input_file: str, output_file: str,
            padding: str, workers: int, verbose: bool) -> None:
    """Encrypt INPUT_FILE into OUTPUT_FILE with the key in KEY_FILE."""
    _run_file_command(encrypt_file, key_file, input_file, output_file,
                      padding, workers, verbose)


@main.command()
@_file_options
def decrypt(key_file: str, input_file: str, output_file: str,
            padding: str, workers: int, verbose: bool) -> None:
    """Decrypt INPUT_FILE into OUTPUT_FILE with the key in KEY_FILE."""
    _run_file_command(decrypt_file, key_file, input_file, output_file,
                      padding, workers, verbose)


@main.command()
@click.option(
    "--n",
    "num_tests",
    type=click.IntRange(min=0),
    default=100,
    help="Number of random test vectors (default: 100)",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Random seed for reproducibility",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Show detailed output",
)
def selftest(num_tests: int, seed: int | None, verbose: bool) -> None:
    """Check the cipher against FIPS-197 vectors and PyCryptodome."""
    click.echo("Running FIPS-197 KAT tests...")
    fips_passed = 0

    for i, vec in enumerate(FIPS_197_TEST_VECTORS):
        failures = _check_both_directions(vec["key"], vec["plaintext"])
        ct = BlockCipher(vec["key"]).encrypt_block(vec["plaintext"])
        if ct != vec["ciphertext"]:
            failures.append(
                f"Published ciphertext {vec['ciphertext'].hex()}, got {ct.hex()}"
            )

        if not failures:
            fips_passed += 1
            if verbose:
                click.echo(f"  FIPS test {i+1}: PASS")
        else:
            for detail in failures:
                click.echo(f"  FIPS test {i+1}: FAIL - {detail}")

    click.echo(f"FIPS-197 tests: {fips_passed}/{len(FIPS_197_TEST_VECTORS)} passed")

    click.echo(f"\nRunning {num_tests} random tests...")

    if seed is not None:
        rng = random.Random(seed)
        random_bytes = lambda n: bytes(rng.randint(0, 255) for _ in range(n))
    else:
        random_bytes = secrets.token_bytes

    random_passed = 0
    for i in range(num_tests):
        key = random_bytes(16)
        failures = _check_both_directions(key, random_bytes(16))

        if not failures:
            random_passed += 1
        elif verbose:
            for detail in failures:
                click.echo(f"  Random test {i+1}: FAIL - key={key.hex()} {detail}")

    click.echo(f"Random tests: {random_passed}/{num_tests} passed")

    total_passed = fips_passed + random_passed
    total_tests = len(FIPS_197_TEST_VECTORS) + num_tests

    click.echo("")
    if total_passed == total_tests:
        click.echo(f"SELFTEST PASSED: All {total_tests} tests passed")
        sys.exit(0)
    else:
        click.echo(f"SELFTEST FAILED: {total_tests - total_passed} failures")
        sys.exit(1)


if __name__ == "__main__":
    main()
