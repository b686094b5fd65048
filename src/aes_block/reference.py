"""
Reference AES implementation using PyCryptodome for verification.
"""

from Crypto.Cipher import AES


def _check_sizes(key: bytes, block: bytes, label: str) -> None:
    if len(key) != 16:
        raise ValueError(f"Key must be 16 bytes, got {len(key)}")
    if len(block) != 16:
        raise ValueError(f"{label} must be 16 bytes, got {len(block)}")


def aes128_encrypt(key: bytes, plaintext: bytes) -> bytes:
    """
    Encrypt a single 16-byte block using AES-128 ECB.

    Args:
        key: 16-byte AES key
        plaintext: 16-byte plaintext block

    Returns:
        16-byte ciphertext
    """
    _check_sizes(key, plaintext, "Plaintext")
    cipher = AES.new(key, AES.MODE_ECB)
    return cipher.encrypt(plaintext)


def aes128_decrypt(key: bytes, ciphertext: bytes) -> bytes:
    """
    Decrypt a single 16-byte block using AES-128 ECB.

    Args:
        key: 16-byte AES key
        ciphertext: 16-byte ciphertext block

    Returns:
        16-byte plaintext
    """
    _check_sizes(key, ciphertext, "Ciphertext")
    cipher = AES.new(key, AES.MODE_ECB)
    return cipher.decrypt(ciphertext)


def verify_ciphertext(computed: bytes, key: bytes, plaintext: bytes) -> bool:
    """
    Verify computed ciphertext against PyCryptodome reference.
    """
    return computed == aes128_encrypt(key, plaintext)


def verify_plaintext(computed: bytes, key: bytes, ciphertext: bytes) -> bool:
    """
    Verify computed plaintext against PyCryptodome reference.
    """
    return computed == aes128_decrypt(key, ciphertext)


def compare_with_reference(
    direction: str, key: bytes, block: bytes, computed: bytes
) -> tuple[bool, str]:
    """Check one block produced by our cipher against PyCryptodome.

    Args:
        direction: "encrypt" or "decrypt"
        key: 16-byte key the block was processed under
        block: the input block
        computed: what our cipher returned for it

    Returns:
        (matches, detail) where detail names the expected and actual
        hex when they differ, and is "" otherwise
    """
    if direction == "encrypt":
        expected, label = aes128_encrypt(key, block), "Ciphertext"
    elif direction == "decrypt":
        expected, label = aes128_decrypt(key, block), "Plaintext"
    else:
        raise ValueError(f"Unknown direction: {direction}")

    if computed == expected:
        return True, ""
    return False, (
        f"{label} mismatch for {block.hex()}: expected {expected.hex()}, "
        f"got {computed.hex()}"
    )


# FIPS-197 Appendix B / C.1 test vectors for AES-128
FIPS_197_TEST_VECTORS = [
    # Appendix B - Cipher Example
    {
        "key": bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c"),
        "plaintext": bytes.fromhex("3243f6a8885a308d313198a2e0370734"),
        "ciphertext": bytes.fromhex("3925841d02dc09fbdc118597196a0b32"),
    },
    # Appendix C.1 - AES-128
    {
        "key": bytes.fromhex("000102030405060708090a0b0c0d0e0f"),
        "plaintext": bytes.fromhex("00112233445566778899aabbccddeeff"),
        "ciphertext": bytes.fromhex("69c4e0d86a7b0430d8cdb78070b4c55a"),
    },
    # Additional test vectors from NIST
    {
        "key": bytes.fromhex("00000000000000000000000000000000"),
        "plaintext": bytes.fromhex("00000000000000000000000000000000"),
        "ciphertext": bytes.fromhex("66e94bd4ef8a2c3b884cfa59ca342b2e"),
    },
    {
        "key": bytes.fromhex("00000000000000000000000000000000"),
        "plaintext": bytes.fromhex("f34481ec3cc627bacd5dc3fb08f273e6"),
        "ciphertext": bytes.fromhex("0336763e966d92595a567cc9ce537f5e"),
    },
    {
        "key": bytes.fromhex("ffffffffffffffffffffffffffffffff"),
        "plaintext": bytes.fromhex("ffffffffffffffffffffffffffffffff"),
        "ciphertext": bytes.fromhex("bcbf217cb280cf30b2517052193ab979"),
    },
]
