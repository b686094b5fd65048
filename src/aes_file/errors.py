"""Exceptions raised by the file layer.

The cipher core never fails on correctly sized input; every error a user
can trigger (bad key file, bad data length, unreadable or unwritable
files) is raised here and reported by the CLI.
"""


class FileCipherError(Exception):
    """Base class for file-level encryption errors."""


class BadKeyFileError(FileCipherError):
    """Key file is not exactly 16 bytes."""


class BadInputLengthError(FileCipherError):
    """Input data length is not a multiple of the block size."""


class FileAccessError(FileCipherError):
    """A file could not be opened, read or written."""
