"""Write pixel-list images in the indexed CPPM format."""

from __future__ import annotations

from pathlib import Path

from ppmtool.binaryio import PPMMetadata
from ppmtool.imageaos import ImageAOS


def cppm_header(metadata: PPMMetadata, color_count: int) -> bytes:
    """Return the text header line of a CPPM file."""
    return (
        f"C6 {metadata.width} {metadata.height} "
        f"{metadata.max_value} {color_count}\n"
    ).encode("ascii")


def encode_cppm_aos(image: ImageAOS, metadata: PPMMetadata) -> bytes:
    """Encode an image as CPPM: header, sorted colour table, pixel indices.

    8-bit images store each table colour in three bytes and each index in
    one byte. 16-bit images store each channel and each index as two
    big-endian bytes.
    """
    colors = sorted(set(image.pixels))
    index_of = {color: index for index, color in enumerate(colors)}

    body = bytearray(cppm_header(metadata, len(colors)))
    if image.sixteen_bit:
        for color in colors:
            for channel in color:
                body += (channel & 0xFFFF).to_bytes(2, "big")
        for pixel in image.pixels:
            body += (index_of[pixel] & 0xFFFF).to_bytes(2, "big")
    else:
        for color in colors:
            body.extend(channel & 0xFF for channel in color)
        body.extend(index_of[pixel] & 0xFF for pixel in image.pixels)
    return bytes(body)


def write_cppm_aos(
    image: ImageAOS, filename: str | Path, metadata: PPMMetadata
) -> None:
    """Write an image to ``filename`` in CPPM format."""
    data = encode_cppm_aos(image, metadata)
    with open(filename, "wb") as out:
        out.write(data)
    print(f"File {filename} written in CPPM format.")