"""Tests for the PyCryptodome reference wrapper."""

import pytest
from Crypto.Cipher import AES

from aes_block.reference import (
    aes128_encrypt,
    aes128_decrypt,
    verify_ciphertext,
    verify_plaintext,
    compare_with_reference,
    FIPS_197_TEST_VECTORS,
)


class TestReferenceVectors:

    @pytest.mark.parametrize("vec", FIPS_197_TEST_VECTORS)
    def test_encrypt_vectors(self, vec: dict) -> None:
        assert aes128_encrypt(vec["key"], vec["plaintext"]) == vec["ciphertext"]

    @pytest.mark.parametrize("vec", FIPS_197_TEST_VECTORS)
    def test_decrypt_vectors(self, vec: dict) -> None:
        assert aes128_decrypt(vec["key"], vec["ciphertext"]) == vec["plaintext"]

    def test_matches_pycryptodome_directly(self) -> None:
        key = bytes(range(16))
        plaintext = bytes(range(16, 32))
        cipher = AES.new(key, AES.MODE_ECB)
        assert aes128_encrypt(key, plaintext) == cipher.encrypt(plaintext)

    def test_invalid_key_length(self) -> None:
        with pytest.raises(ValueError, match="Key must be 16 bytes"):
            aes128_encrypt(bytes(15), bytes(16))

    def test_invalid_block_length(self) -> None:
        with pytest.raises(ValueError, match="Plaintext must be 16 bytes"):
            aes128_encrypt(bytes(16), bytes(17))
        with pytest.raises(ValueError, match="Ciphertext must be 16 bytes"):
            aes128_decrypt(bytes(16), bytes(15))


class TestValidation:

    KEY = bytes.fromhex("000102030405060708090a0b0c0d0e0f")
    PT = bytes.fromhex("00112233445566778899aabbccddeeff")
    CT = bytes.fromhex("69c4e0d86a7b0430d8cdb78070b4c55a")

    def test_verify_helpers(self) -> None:
        assert verify_ciphertext(self.CT, self.KEY, self.PT)
        assert verify_plaintext(self.PT, self.KEY, self.CT)
        assert not verify_ciphertext(bytes(16), self.KEY, self.PT)

    def test_matching_ciphertext(self) -> None:
        matches, detail = compare_with_reference("encrypt", self.KEY, self.PT, self.CT)
        assert matches is True
        assert detail == ""

    def test_matching_plaintext(self) -> None:
        matches, detail = compare_with_reference("decrypt", self.KEY, self.CT, self.PT)
        assert matches is True
        assert detail == ""

    def test_single_bit_difference_fails(self) -> None:
        wrong = bytearray(self.CT)
        wrong[0] ^= 0x01

        matches, detail = compare_with_reference("encrypt", self.KEY, self.PT, bytes(wrong))

        assert matches is False
        assert "mismatch" in detail.lower()
        assert self.CT.hex() in detail

    def test_unknown_direction(self) -> None:
        with pytest.raises(ValueError, match="Unknown direction"):
            compare_with_reference("sideways", self.KEY, self.PT, self.CT)
