"""Images stored as three separate colour channels."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO

from ppmtool.binaryio import MAX_8, MAX_16, PPMMetadata

_WHITESPACE = b" \t\n\r\v\f"


@dataclass
class ImageSOA:
    """An image held as separate red, green and blue channel lists."""

    red: list[int] = field(default_factory=list)
    green: list[int] = field(default_factory=list)
    blue: list[int] = field(default_factory=list)
    sixteen_bit: bool = False


def _read_token(stream: BinaryIO) -> str:
    byte = stream.read(1)
    while byte and byte in _WHITESPACE:
        byte = stream.read(1)
    token = bytearray()
    while byte and byte not in _WHITESPACE:
        token += byte
        byte = stream.read(1)
    return token.decode("latin-1")


def _read_int(stream: BinaryIO) -> int:
    token = _read_token(stream)
    try:
        return int(token)
    except ValueError:
        raise ValueError("Incorrect image dimensions") from None


def _read_channels(
    stream: BinaryIO, num_pixels: int, max_value: int, sixteen_bit: bool
) -> ImageSOA:
    width = 2 if sixteen_bit else 1
    image = ImageSOA(sixteen_bit=sixteen_bit)
    for _ in range(num_pixels):
        raw = stream.read(3 * width)
        if len(raw) != 3 * width:
            raise ValueError("Incorrect number of pixels")
        values = [
            int.from_bytes(raw[offset:offset + width], "little")
            for offset in range(0, 3 * width, width)
        ]
        if any(value > max_value for value in values):
            raise ValueError("Invalid pixel value")
        image.red.append(values[0])
        image.green.append(values[1])
        image.blue.append(values[2])
    if stream.read(1):
        raise ValueError("File contains more data than expected")
    return image


def load_ppm_soa(
    filename: str | Path, metadata: PPMMetadata
) -> tuple[ImageSOA, PPMMetadata]:
    """Load a P6 PPM file into channels, returning the image and its header.

    ``metadata`` must describe a non-empty image; the returned metadata is
    the one read from the file.
    """
    if metadata.width == 0 or metadata.height == 0:
        raise ValueError("Could not open file")
    name = str(filename)
    with open(name, "rb") as stream:
        if _read_token(stream) != "P6" or not name.endswith(".ppm"):
            raise ValueError("Unsupported file format")
        width = _read_int(stream)
        height = _read_int(stream)
        max_value = _read_int(stream)
        if width < 0 or height < 0 or max_value < 0:
            raise ValueError("Incorrect image dimensions")
        header = PPMMetadata(width=width, height=height, max_value=max_value)
        image = _read_channels(
            stream, width * height, max_value, sixteen_bit=max_value > MAX_8
        )
    return image, header


def save_soa_to_ppm(
    image: ImageSOA, metadata: PPMMetadata, max_level: int, output_path: str | Path
) -> None:
    """Write channels as a P6 PPM file, one byte (the low byte) per channel."""
    if not str(output_path).endswith(".ppm"):
        raise ValueError("Could not open file")
    if max_level < 0 or max_level > MAX_16:
        raise ValueError("Unsupported maximum intensity level")
    sizes = {len(image.red), len(image.green), len(image.blue)}
    if len(sizes) != 1 or metadata.width * metadata.height != len(image.red):
        raise ValueError("Channel sizes do not match")

    body = bytearray()
    for pixel in zip(image.red, image.green, image.blue):
        if any(value > max_level for value in pixel):
            raise ValueError("Invalid pixel value")
        body.extend(value & 0xFF for value in pixel)

    header = f"P6\n{metadata.width} {metadata.height}\n{max_level}\n".encode("ascii")
    with open(output_path, "wb") as out:
        out.write(header)
        out.write(body)
    print(f"Image with the new maximum intensity level saved to {output_path}")


def format_image_soa(image: ImageSOA, metadata: PPMMetadata) -> str:
    """Render the first width*height values of each channel as text."""
    count = metadata.width * metadata.height
    parts = []
    for name, channel in (("Red", image.red), ("Green", image.green), ("Blue", image.blue)):
        values = "".join(f"{value} " for value in channel[:count])
        parts.append(f"{name} Channel:\n{values}\n")
    return "".join(parts)


def print_image_soa(image: ImageSOA, metadata: PPMMetadata) -> None:
    """Print the channel values of an image."""
    print(format_image_soa(image, metadata), end="")