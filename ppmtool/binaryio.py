"""Low-level helpers for reading raw files and PPM headers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

MAX_8 = 255
MAX_16 = 65535

_INT_RE = re.compile(rb"[ \n]*([0-9]*)")


@dataclass
class PPMMetadata:
    """Dimensions and maximum colour level of a PPM image."""

    width: int
    height: int
    max_value: int


def read_binary_file(filename: str | Path) -> bytes:
    """Return the whole contents of a file as bytes."""
    with open(filename, "rb") as handle:
        return handle.read()


def read_line(data: bytes, index: int) -> tuple[str, int]:
    """Read up to the next newline starting at ``index``.

    Returns the line (without the newline) and the index just past it.
    """
    data = bytes(data)
    end = data.find(b"\n", index)
    if end == -1:
        end = len(data)
    return data[index:end].decode("latin-1"), end + 1


def read_next_int(data: bytes, index: int, error_msg: str) -> tuple[int, int]:
    """Skip spaces and newlines, then read a decimal integer.

    Returns the value and the index just past its last digit.
    Raises ValueError with ``error_msg`` when no digits are found.
    """
    match = _INT_RE.match(bytes(data), index)
    digits = match.group(1)
    if not digits:
        raise ValueError(error_msg)
    return int(digits), match.end()


def read_ppm_metadata(filename: str | Path) -> PPMMetadata:
    """Read and validate the header of a binary (P6) PPM file."""
    data = read_binary_file(filename)
    magic, index = read_line(data, 0)
    if magic != "P6":
        raise ValueError("Unsupported PPM format.")
    width, index = read_next_int(data, index, "Invalid image width.")
    height, index = read_next_int(data, index, "Invalid image height.")
    max_value, index = read_next_int(data, index, "Invalid maximum colour value.")
    if not 1 <= max_value <= MAX_16:
        raise ValueError(
            "Maximum colour value out of range. It must be between 1 and 65535."
        )
    return PPMMetadata(width=width, height=height, max_value=max_value)