"""Configuration for file-level encryption and decryption."""

from __future__ import annotations

from dataclasses import dataclass

PADDING_POLICIES = ("zero", "none")


@dataclass
class FileCipherConfig:
    """Configuration object for the file processor.

    The CLI builds one of these from its options and passes it to
    encrypt_data / decrypt_data.
    """

    # "zero": pad plaintext with 0x00 to a block multiple, strip trailing
    # 0x00 after decryption.  "none": data must already be block aligned.
    padding: str = "zero"

    # Threads used to process blocks (1 = sequential)
    workers: int = 1

    # Print per-operation state traces while processing
    verbose: bool = False

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.padding not in PADDING_POLICIES:
            raise ValueError(
                f"padding must be one of {', '.join(PADDING_POLICIES)}, got {self.padding!r}"
            )
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
