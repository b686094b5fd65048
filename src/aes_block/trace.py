"""
Trace recording and pretty printing for AES block operations.

Contains:
- TraceRecorder: JSON Lines trace file + compact verbose stdout
- print_header / print_result: shared formatting helpers for the CLIs
"""

import json
from typing import Any, TextIO

from .utils import state_to_hex


class TraceRecorder:
    """
    Records and outputs traces of block cipher execution.

    Supports:
    - In-memory record list     (unless keep_records is False)
    - JSON Lines file output    (when trace_file is set)
    - Verbose stdout            (when verbose is set)

    File runs pass keep_records=False so memory stays flat however many
    blocks are traced.
    """

    def __init__(
        self,
        verbose: bool = False,
        trace_file: TextIO | None = None,
        keep_records: bool = True,
    ):
        self.verbose = verbose
        self.trace_file = trace_file
        self.keep_records = keep_records
        self._records: list[dict[str, Any]] = []

    def record(self, **kwargs) -> None:
        """
        Record a trace entry.

        Typical fields: direction, step, round, operation, state, round_key.
        """
        if self.keep_records:
            self._records.append(kwargs)

        if self.trace_file:
            self._write_jsonl(kwargs)

        if self.verbose:
            self._print_verbose(kwargs)

    def _write_jsonl(self, record: dict[str, Any]) -> None:
        serializable = self._make_serializable(record)
        self.trace_file.write(json.dumps(serializable) + "\n")
        self.trace_file.flush()

    def _make_serializable(self, obj: Any) -> Any:
        if isinstance(obj, dict):
            return {k: self._make_serializable(v) for k, v in obj.items()}
        elif isinstance(obj, (list, tuple)):
            return [self._make_serializable(item) for item in obj]
        elif isinstance(obj, bytes):
            return obj.hex()
        else:
            return obj

    def _print_verbose(self, record: dict[str, Any]) -> None:
        """Compact verbose line: step, round key index, operation, state."""
        step = record.get("step", 0)
        round_num = record.get("round", "?")
        operation = record.get("operation", "unknown")

        if "state" in record:
            state_hex = state_to_hex(record["state"])
            line = f"S{step:02d} R{round_num:<2}  {operation:20s} STATE:{state_hex}"
            if "round_key" in record:
                line += f"  KEY:{record['round_key'].hex()}"
            print(line)

    def get_records(self) -> list[dict[str, Any]]:
        return list(self._records)

    def clear(self) -> None:
        self._records.clear()


# ------------------------------------------------------------------
# Shared formatting functions
# ------------------------------------------------------------------

def print_header(title: str) -> None:
    """Print a section header."""
    print(f"\n{'#'*70}")
    print(f"# {title}")
    print(f"{'#'*70}")


def print_result(label: str, output_hex: str, passed: bool = True) -> None:
    """Print final block result and its verification status."""
    print(f"\n{'='*70}")
    print("RESULT")
    print(f"{'='*70}")
    print(f"{label}: {output_hex}")

    status = "PASS" if passed else "FAIL"
    marker = "[OK]" if passed else "[ERROR]"
    print(f"Verification: {marker} {status}")
    print(f"{'='*70}")
