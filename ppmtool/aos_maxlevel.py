"""Change the maximum intensity level of a pixel-list image."""

from __future__ import annotations

from pathlib import Path

from ppmtool.binaryio import MAX_16, PPMMetadata
from ppmtool.imageaos import ImageAOS, Pixel, save_aos_to_ppm

_MAX_COLOR_VALUE = 0xFF


def _scale(
    pixels: list[Pixel], old_max: int, new_max: int, mask: int
) -> list[Pixel]:
    return [
        (
            (r * new_max // old_max) & mask,
            (g * new_max // old_max) & mask,
            (b * new_max // old_max) & mask,
        )
        for r, g, b in pixels
    ]


def maxlevel_aos(
    image: ImageAOS,
    metadata: PPMMetadata,
    new_max_level: int,
    output_path: str | Path,
) -> ImageAOS:
    """Rescale every channel to ``new_max_level``, save as PPM and return it.

    The result holds 16-bit pixels when the new level exceeds 255 and
    8-bit pixels otherwise.
    """
    if new_max_level <= 0 or new_max_level > MAX_16:
        raise ValueError("Invalid max level")

    wide_output = new_max_level > _MAX_COLOR_VALUE
    if not image.sixteen_bit and not wide_output:
        if metadata.width * metadata.height != len(image.pixels):
            raise ValueError("Invalid number of pixels")

    mask = 0xFFFF if wide_output else 0xFF
    result = ImageAOS(
        pixels=_scale(image.pixels, metadata.max_value, new_max_level, mask),
        sixteen_bit=wide_output,
    )
    save_aos_to_ppm(result, metadata, new_max_level, output_path)
    return result