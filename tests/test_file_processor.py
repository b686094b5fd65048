"""Tests for the file layer: config, padding, I/O and block processing."""

import random

import pytest

from aes_block import encrypt_block
from aes_file import (
    FileCipherConfig,
    BadKeyFileError,
    BadInputLengthError,
    FileAccessError,
    encrypt_data,
    decrypt_data,
    encrypt_file,
    decrypt_file,
)
from aes_file.io import read_binary_file, write_binary_file
from aes_file.padding import pad_zero, strip_zero
from aes_file.processor import split_blocks, _make_cipher


KEY = bytes.fromhex("000102030405060708090a0b0c0d0e0f")
FIPS_PT = bytes.fromhex("00112233445566778899aabbccddeeff")
FIPS_CT = bytes.fromhex("69c4e0d86a7b0430d8cdb78070b4c55a")


class TestConfig:

    def test_defaults(self) -> None:
        config = FileCipherConfig()
        assert config.padding == "zero"
        assert config.workers == 1
        assert config.verbose is False

    def test_invalid_padding(self) -> None:
        with pytest.raises(ValueError, match="padding must be one of"):
            FileCipherConfig(padding="pkcs7")

    def test_invalid_workers(self) -> None:
        with pytest.raises(ValueError, match="workers must be >= 1"):
            FileCipherConfig(workers=0)


class TestPadding:

    @pytest.mark.parametrize("length,expected", [(0, 0), (1, 16), (15, 16), (16, 16), (17, 32)])
    def test_pad_zero_length(self, length: int, expected: int) -> None:
        assert len(pad_zero(b"\x01" * length)) == expected

    def test_pad_zero_appends_zeros(self) -> None:
        assert pad_zero(b"abc") == b"abc" + bytes(13)

    def test_strip_zero(self) -> None:
        assert strip_zero(b"abc" + bytes(13)) == b"abc"
        assert strip_zero(bytes(16)) == b""

    def test_strip_zero_is_ambiguous(self) -> None:
        """Genuine trailing zero bytes cannot be told apart from padding."""
        assert strip_zero(pad_zero(b"abc\x00\x00")) == b"abc"


class TestBinaryIO:

    def test_round_trip(self, tmp_path) -> None:
        path = tmp_path / "data.bin"
        write_binary_file(path, b"\x00\x01\xff")
        assert read_binary_file(path) == b"\x00\x01\xff"

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileAccessError, match="Can't open file"):
            read_binary_file(tmp_path / "missing.bin")

    def test_unwritable_file(self, tmp_path) -> None:
        with pytest.raises(FileAccessError, match="Can't open file"):
            write_binary_file(tmp_path / "no" / "such" / "dir.bin", b"x")


class TestEncryptData:

    def test_single_block_known_answer(self) -> None:
        assert encrypt_data(KEY, FIPS_PT) == FIPS_CT

    def test_blocks_are_independent(self) -> None:
        """Identical plaintext blocks give identical ciphertext blocks."""
        ct = encrypt_data(KEY, FIPS_PT * 3)
        assert split_blocks(ct) == [FIPS_CT] * 3

    def test_partial_block_is_zero_padded(self) -> None:
        ct = encrypt_data(KEY, b"hello")
        assert len(ct) == 16
        assert ct == encrypt_block(b"hello" + bytes(11), KEY)

    def test_empty_input(self) -> None:
        assert encrypt_data(KEY, b"") == b""

    def test_no_padding_requires_alignment(self) -> None:
        config = FileCipherConfig(padding="none")
        with pytest.raises(BadInputLengthError, match="Bad plaintext file length: in.txt"):
            encrypt_data(KEY, b"hello", config, data_source="in.txt")

    @pytest.mark.parametrize("key_len", [0, 15, 17, 32])
    def test_bad_key(self, key_len: int) -> None:
        with pytest.raises(BadKeyFileError, match="Bad key file: key.bin"):
            encrypt_data(bytes(key_len), FIPS_PT, key_source="key.bin")


class TestDecryptData:

    def test_single_block_known_answer(self) -> None:
        config = FileCipherConfig(padding="none")
        assert decrypt_data(KEY, FIPS_CT, config) == FIPS_PT

    def test_strips_padding(self) -> None:
        assert decrypt_data(KEY, encrypt_data(KEY, b"hello")) == b"hello"

    def test_keeps_zeros_without_padding(self) -> None:
        config = FileCipherConfig(padding="none")
        plaintext = b"fourteen bytes" + b"\x00\x00"
        assert decrypt_data(KEY, encrypt_data(KEY, plaintext, config), config) == plaintext

    def test_unaligned_ciphertext(self) -> None:
        with pytest.raises(BadInputLengthError, match="Bad ciphertext file length: ct.bin"):
            decrypt_data(KEY, bytes(20), data_source="ct.bin")

    def test_bad_key(self) -> None:
        with pytest.raises(BadKeyFileError):
            decrypt_data(bytes(8), FIPS_CT)


class TestMultiBlock:

    def test_two_block_round_trip(self) -> None:
        plaintext = bytes(range(1, 33))
        ct = encrypt_data(KEY, plaintext)
        assert len(ct) == 32
        assert decrypt_data(KEY, ct) == plaintext

    @pytest.mark.parametrize("seed", range(5))
    def test_threaded_matches_sequential(self, seed: int) -> None:
        rng = random.Random(seed)
        key = bytes(rng.randint(0, 255) for _ in range(16))
        data = bytes(rng.randint(0, 255) for _ in range(16 * 20 + 7))

        sequential = encrypt_data(key, data)
        threaded = encrypt_data(key, data, FileCipherConfig(workers=4))
        assert threaded == sequential

        config = FileCipherConfig(padding="none", workers=4)
        assert decrypt_data(key, threaded, config) == decrypt_data(
            key, sequential, FileCipherConfig(padding="none")
        )

    def test_verbose_prints_trace(self, capsys) -> None:
        encrypt_data(KEY, FIPS_PT * 2, FileCipherConfig(verbose=True, workers=4))
        output = capsys.readouterr().out
        assert output.count("step_start") == 22

    def test_verbose_run_keeps_no_records(self, capsys) -> None:
        cipher, workers = _make_cipher(KEY, FileCipherConfig(verbose=True, workers=4))
        assert workers == 1
        assert cipher.tracer.keep_records is False
        cipher.encrypt_block(FIPS_PT)
        assert cipher.tracer.get_records() == []
        assert "step_start" in capsys.readouterr().out


class TestFiles:

    def test_file_round_trip(self, tmp_path) -> None:
        key_path = tmp_path / "key.bin"
        in_path = tmp_path / "plain.txt"
        ct_path = tmp_path / "cipher.bin"
        out_path = tmp_path / "recovered.txt"

        key_path.write_bytes(KEY)
        in_path.write_bytes(b"The quick brown fox jumps over the lazy dog")

        written = encrypt_file(key_path, in_path, ct_path)
        assert written == 48
        assert ct_path.stat().st_size == 48

        written = decrypt_file(key_path, ct_path, out_path)
        assert written == 43
        assert out_path.read_bytes() == in_path.read_bytes()

    def test_bad_key_file(self, tmp_path) -> None:
        key_path = tmp_path / "key.bin"
        in_path = tmp_path / "plain.txt"
        key_path.write_bytes(b"short")
        in_path.write_bytes(b"data")

        with pytest.raises(BadKeyFileError, match="key.bin"):
            encrypt_file(key_path, in_path, tmp_path / "out.bin")

    def test_missing_input(self, tmp_path) -> None:
        key_path = tmp_path / "key.bin"
        key_path.write_bytes(KEY)

        with pytest.raises(FileAccessError):
            decrypt_file(key_path, tmp_path / "missing.bin", tmp_path / "out.bin")
