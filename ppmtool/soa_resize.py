"""Bilinear resizing of channel-based images."""

from __future__ import annotations

import math
from collections.abc import Sequence
from pathlib import Path

from ppmtool.aos_resize import interpolate
from ppmtool.binaryio import PPMMetadata
from ppmtool.imagesoa import ImageSOA, save_soa_to_ppm


def interpolate_soa(v00: int, v01: int, t: float) -> int:
    """Linearly blend two channel values in single precision, truncating."""
    return interpolate(v00, v01, t)


def resize_channel(
    channel: Sequence[int],
    metadata: PPMMetadata,
    new_width: int,
    new_height: int,
) -> list[int]:
    """Resample one row-major channel to ``new_width`` x ``new_height``."""
    width, height = metadata.width, metadata.height

    def at(col: int, row: int) -> int:
        return channel[row * width + col]

    result: list[int] = []
    for y_new in range(new_height):
        y_orig = y_new * height / new_height
        y_low = min(math.floor(y_orig), height - 1)
        y_high = min(math.ceil(y_orig), height - 1)
        y_weight = y_orig - y_low
        for x_new in range(new_width):
            x_orig = x_new * width / new_width
            x_low = min(math.floor(x_orig), width - 1)
            x_high = min(math.ceil(x_orig), width - 1)
            x_weight = x_orig - x_low
            top = interpolate_soa(at(x_low, y_low), at(x_high, y_low), x_weight)
            bottom = interpolate_soa(at(x_low, y_high), at(x_high, y_high), x_weight)
            result.append(interpolate_soa(top, bottom, y_weight))
    return result


def resize_soa(
    image: ImageSOA,
    metadata: PPMMetadata,
    new_size: Sequence[int],
    output_path: str | Path,
) -> ImageSOA:
    """Resize an image to ``new_size`` (width, height), save it and return it."""
    new_width, new_height = new_size[0], new_size[1]
    resized = ImageSOA(
        red=resize_channel(image.red, metadata, new_width, new_height),
        green=resize_channel(image.green, metadata, new_width, new_height),
        blue=resize_channel(image.blue, metadata, new_width, new_height),
        sixteen_bit=image.sixteen_bit,
    )
    new_metadata = PPMMetadata(
        width=new_width, height=new_height, max_value=metadata.max_value
    )
    save_soa_to_ppm(resized, new_metadata, new_metadata.max_value, output_path)
    print(f"Resized image saved to {output_path}")
    return resized