"""AES-128 file encryption tool built on the aes_block cipher core."""

__version__ = "1.0.0"

from .config import FileCipherConfig
from .errors import FileCipherError, BadKeyFileError, BadInputLengthError, FileAccessError
from .processor import encrypt_data, decrypt_data, encrypt_file, decrypt_file

__all__ = [
    "FileCipherConfig",
    "FileCipherError",
    "BadKeyFileError",
    "BadInputLengthError",
    "FileAccessError",
    "encrypt_data",
    "decrypt_data",
    "encrypt_file",
    "decrypt_file",
]
