"""Reading input data and counting printable bytes."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

ALPHABET = 256


def _is_printable(byte: int) -> bool:
    return 32 <= byte <= 126


def histogram_of(text: bytes) -> list[int]:
    """Count each printable ASCII byte of ``text``; other bytes count zero."""
    histogram = [0] * ALPHABET
    for byte in text:
        if _is_printable(byte):
            histogram[byte] += 1
    return histogram


def read_data(path: str | PathLike[str]) -> tuple[list[int], bytes]:
    """Read a file and return its histogram and its full contents."""
    text = Path(path).read_bytes()
    return histogram_of(text), text