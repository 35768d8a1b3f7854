"""Bilinear resizing of pixel-list images."""

from __future__ import annotations

import math
import struct
from collections.abc import Sequence
from pathlib import Path

from ppmtool.binaryio import PPMMetadata
from ppmtool.imageaos import ImageAOS, Pixel, save_aos_to_ppm

_FLOAT32 = struct.Struct("f")


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return _FLOAT32.unpack(_FLOAT32.pack(value))[0]


def interpolate(v00: int, v01: int, t: float) -> int:
    """Linearly blend two channel values in single precision, truncating."""
    weight = _f32(t)
    left = _f32(_f32(float(v00)) * _f32(1.0 - weight))
    right = _f32(_f32(float(v01)) * weight)
    return int(_f32(left + right))


def interpolate_pixel(p00: Pixel, p01: Pixel, t: float) -> Pixel:
    """Blend two pixels channel by channel."""
    return (
        interpolate(p00[0], p01[0], t),
        interpolate(p00[1], p01[1], t),
        interpolate(p00[2], p01[2], t),
    )


def resize_pixels(
    pixels: Sequence[Pixel],
    metadata: PPMMetadata,
    new_width: int,
    new_height: int,
) -> list[Pixel]:
    """Resample row-major pixels to ``new_width`` x ``new_height``."""
    width, height = metadata.width, metadata.height

    def at(col: int, row: int) -> Pixel:
        return pixels[row * width + col]

    result: list[Pixel] = []
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
            top = interpolate_pixel(at(x_low, y_low), at(x_high, y_low), x_weight)
            bottom = interpolate_pixel(
                at(x_low, y_high), at(x_high, y_high), x_weight
            )
            result.append(interpolate_pixel(top, bottom, y_weight))
    return result


def resize_aos(
    image: ImageAOS,
    metadata: PPMMetadata,
    new_size: Sequence[int],
    output_path: str | Path,
) -> ImageAOS:
    """Resize an image to ``new_size`` (width, height), save it and return it."""
    new_width, new_height = new_size[0], new_size[1]
    resized = ImageAOS(
        pixels=resize_pixels(image.pixels, metadata, new_width, new_height),
        sixteen_bit=image.sixteen_bit,
    )
    new_metadata = PPMMetadata(width=new_width, height=new_height, max_value=0)
    save_aos_to_ppm(resized, new_metadata, metadata.max_value, output_path)
    print(f"Resized image saved to {output_path}")
    return resized