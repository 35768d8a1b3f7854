"""Write channel-based images in the indexed CPPM format."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path

from ppmtool.aos_compress import cppm_header
from ppmtool.binaryio import MAX_8, MAX_16, PPMMetadata
from ppmtool.imagesoa import ImageSOA

Color = tuple[int, int, int]

_MAX_COLOR = 256
_MASK8 = 0xFF


def determine_pixel_size(color_count: int) -> int:
    """Return the number of bytes used to store one colour index."""
    if color_count <= _MAX_COLOR:
        return 1
    if color_count <= MAX_16:
        return 2
    return 4


def _pixels(image: ImageSOA) -> Iterable[Color]:
    """Yield pixels with every channel reduced to its low byte."""
    for r, g, b in zip(image.red, image.green, image.blue):
        yield (r & _MASK8, g & _MASK8, b & _MASK8)


def build_color_table(image: ImageSOA) -> dict[Color, int]:
    """Assign each distinct colour an index in order of first appearance."""
    table: dict[Color, int] = {}
    for color in _pixels(image):
        table.setdefault(color, len(table))
    return table


def encode_color_table(colors: Iterable[Color], color_bytes: int) -> bytes:
    """Encode colours as 3 bytes each, or 6 little-endian bytes each."""
    out = bytearray()
    for color in colors:
        if color_bytes == 3:
            out.extend(channel & _MASK8 for channel in color)
        else:
            for channel in color:
                out.append(channel & _MASK8)
                out.append((channel >> 8) & _MASK8)
    return bytes(out)


def encode_pixel_data(
    image: ImageSOA, color_table: Mapping[Color, int], pixel_size: int
) -> bytes:
    """Encode each pixel as its table index in ``pixel_size`` little-endian bytes."""
    width = pixel_size if pixel_size in (1, 2) else 4
    mask = (1 << (8 * width)) - 1
    out = bytearray()
    for color in _pixels(image):
        out += (color_table[color] & mask).to_bytes(width, "little")
    return bytes(out)


def encode_cppm_soa(image: ImageSOA, metadata: PPMMetadata) -> bytes:
    """Encode an image as CPPM: header, sorted colour table, pixel indices."""
    table = build_color_table(image)
    colors = sorted(table)
    pixel_size = determine_pixel_size(len(colors))
    color_bytes = 3 if metadata.max_value <= MAX_8 else 6
    return (
        cppm_header(metadata, len(colors))
        + encode_color_table(colors, color_bytes)
        + encode_pixel_data(image, table, pixel_size)
    )


def write_cppm_soa(
    image: ImageSOA, filename: str | Path, metadata: PPMMetadata
) -> None:
    """Write an image to ``filename`` in CPPM format."""
    data = encode_cppm_soa(image, metadata)
    with open(filename, "wb") as out:
        out.write(data)