"""Images stored as a list of RGB pixels."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO

from ppmtool.binaryio import MAX_8, PPMMetadata

Pixel = tuple[int, int, int]

_WHITESPACE = b" \t\n\r\v\f"


@dataclass
class ImageAOS:
    """An image held as one (r, g, b) tuple per pixel."""

    pixels: list[Pixel] = field(default_factory=list)
    sixteen_bit: bool = False


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    chunk = stream.read(size)
    if len(chunk) != size:
        raise ValueError("Failed to read pixel data.")
    return chunk


def load_pixels8(stream: BinaryIO, num_pixels: int) -> ImageAOS:
    """Read ``num_pixels`` pixels of one byte per channel."""
    pixels = [tuple(_read_exact(stream, 3)) for _ in range(num_pixels)]
    return ImageAOS(pixels=pixels, sixteen_bit=False)


def load_pixels16(stream: BinaryIO, num_pixels: int) -> ImageAOS:
    """Read ``num_pixels`` pixels of two little-endian bytes per channel."""
    pixels = []
    for _ in range(num_pixels):
        raw = _read_exact(stream, 6)
        pixels.append(
            (
                int.from_bytes(raw[0:2], "little"),
                int.from_bytes(raw[2:4], "little"),
                int.from_bytes(raw[4:6], "little"),
            )
        )
    return ImageAOS(pixels=pixels, sixteen_bit=True)


def _read_token(stream: BinaryIO) -> str:
    """Skip whitespace, then read bytes up to and including one delimiter."""
    byte = stream.read(1)
    while byte and byte in _WHITESPACE:
        byte = stream.read(1)
    token = bytearray()
    while byte and byte not in _WHITESPACE:
        token += byte
        byte = stream.read(1)
    return token.decode("latin-1")


def load_ppm_aos(filename: str | Path) -> tuple[ImageAOS, PPMMetadata]:
    """Load a P6 PPM file, returning the image and its header."""
    with open(filename, "rb") as stream:
        if _read_token(stream) != "P6":
            raise ValueError("Unsupported format.")
        width = int(_read_token(stream))
        height = int(_read_token(stream))
        max_value = int(_read_token(stream))
        metadata = PPMMetadata(width=width, height=height, max_value=max_value)
        num_pixels = width * height
        if max_value <= MAX_8:
            image = load_pixels8(stream, num_pixels)
        else:
            image = load_pixels16(stream, num_pixels)
    return image, metadata


def save_aos_to_ppm(
    image: ImageAOS, metadata: PPMMetadata, max_level: int, output_path: str | Path
) -> None:
    """Write an image as P6 PPM, one byte per channel (the low byte)."""
    header = f"P6\n{metadata.width} {metadata.height}\n{max_level}\n".encode("ascii")
    body = bytes(channel & 0xFF for pixel in image.pixels for channel in pixel)
    with open(output_path, "wb") as out:
        out.write(header)
        out.write(body)
    print(f"Image with the new maximum intensity level saved to {output_path}")