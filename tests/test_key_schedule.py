"""Tests for AES-128 key expansion."""

import random

import pytest

from aes_block.key_schedule import (
    round_constant,
    rot_word,
    sub_word,
    g_function,
    generate_subkeys,
)
from aes_block.utils import hex_to_bytes


FIPS_KEY = hex_to_bytes("2b7e151628aed2a6abf7158809cf4f3c")


class TestRoundConstants:

    def test_values(self) -> None:
        expected = [0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80, 0x1b, 0x36]
        assert [round_constant(r) for r in range(1, 11)] == expected

    @pytest.mark.parametrize("r", [0, 11, -1])
    def test_out_of_range(self, r: int) -> None:
        with pytest.raises(ValueError, match="Round must be"):
            round_constant(r)


class TestGFunction:
    """g_function on FIPS-197 Appendix A.1, i = 4."""

    def test_rot_word(self) -> None:
        assert rot_word([0x09, 0xcf, 0x4f, 0x3c]) == [0xcf, 0x4f, 0x3c, 0x09]

    def test_sub_word(self) -> None:
        assert sub_word([0xcf, 0x4f, 0x3c, 0x09]) == [0x8a, 0x84, 0xeb, 0x01]

    def test_g_function(self) -> None:
        assert g_function([0x09, 0xcf, 0x4f, 0x3c], 1) == [0x8b, 0x84, 0xeb, 0x01]

    def test_input_not_modified(self) -> None:
        word = [0x09, 0xcf, 0x4f, 0x3c]
        g_function(word, 1)
        assert word == [0x09, 0xcf, 0x4f, 0x3c]


class TestGenerateSubkeys:
    """Tests for generate_subkeys."""

    def test_fips_197_appendix_a1(self) -> None:
        keys = generate_subkeys(FIPS_KEY)
        assert keys[1] == hex_to_bytes("a0fafe1788542cb123a339392a6c7605")
        assert keys[2] == hex_to_bytes("f2c295f27a96b9435935807a7359f67f")
        assert keys[10] == hex_to_bytes("d014f9a8c9ee2589e13f0cc8b6630ca6")

    def test_fips_197_appendix_c1_last_key(self) -> None:
        keys = generate_subkeys(hex_to_bytes("000102030405060708090a0b0c0d0e0f"))
        assert keys[10] == hex_to_bytes("13111d7fe3944a17f307a78b4d2b30c5")

    def test_shape(self) -> None:
        keys = generate_subkeys(FIPS_KEY)
        assert isinstance(keys, tuple)
        assert len(keys) == 11
        assert all(isinstance(k, bytes) and len(k) == 16 for k in keys)

    @pytest.mark.parametrize("seed", range(10))
    def test_first_round_key_is_key(self, seed: int) -> None:
        rng = random.Random(seed)
        key = bytes(rng.randint(0, 255) for _ in range(16))
        assert generate_subkeys(key)[0] == key

    def test_deterministic(self) -> None:
        assert generate_subkeys(FIPS_KEY) == generate_subkeys(FIPS_KEY)

    def test_invalid_key_length(self) -> None:
        with pytest.raises(ValueError, match="Key must be 16 bytes"):
            generate_subkeys(bytes(24))
