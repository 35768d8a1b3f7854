"""Change the maximum intensity level of a channel-based image."""

from __future__ import annotations

from pathlib import Path

from ppmtool.binaryio import MAX_16, PPMMetadata
from ppmtool.imagesoa import ImageSOA, save_soa_to_ppm

_MAX_COLOR_VALUE = 0xFF
_MASK8 = 0xFF
_MASK16 = 0xFFFF


def _verify_channels(image: ImageSOA) -> None:
    size = len(image.red)
    if size != len(image.green) or size != len(image.blue) or size == 0:
        raise ValueError("Colour channels do not have the same size")


def _verify_max_level(new_max_level: int, metadata: PPMMetadata) -> None:
    if new_max_level <= 0 or new_max_level > MAX_16:
        raise ValueError(f"Invalid maximum intensity level: {new_max_level}")
    if metadata.max_value <= 0 or metadata.max_value > MAX_16:
        raise ValueError(f"Invalid maximum intensity level: {metadata.max_value}")


def _rescale(
    image: ImageSOA,
    metadata: PPMMetadata,
    new_max_level: int,
    output_path: str | Path,
    sixteen_bit: bool,
) -> ImageSOA:
    """Scale every channel, save the result and return it."""
    _verify_channels(image)
    _verify_max_level(new_max_level, metadata)
    if metadata.width * metadata.height != len(image.red):
        raise ValueError("Invalid number of pixels")

    print(f"Changing the maximum intensity level of the image to {new_max_level}")
    mask = _MASK16 if sixteen_bit else _MASK8
    old_max = metadata.max_value

    def scale(channel: list[int]) -> list[int]:
        return [(value * new_max_level // old_max) & mask for value in channel]

    result = ImageSOA(
        red=scale(image.red),
        green=scale(image.green),
        blue=scale(image.blue),
        sixteen_bit=sixteen_bit,
    )
    new_metadata = PPMMetadata(
        width=metadata.width, height=metadata.height, max_value=new_max_level
    )
    save_soa_to_ppm(result, new_metadata, new_max_level, output_path)
    return result


def maxlevel_soa(
    image: ImageSOA,
    metadata: PPMMetadata,
    new_max_level: int,
    output_path: str | Path,
) -> ImageSOA:
    """Rescale every channel to ``new_max_level``, save as PPM and return it.

    The result holds 16-bit channels when the new level exceeds 255 and
    8-bit channels otherwise.
    """
    wide_output = new_max_level > _MAX_COLOR_VALUE
    if not image.sixteen_bit and wide_output:
        widened = ImageSOA(
            red=[value & _MASK16 for value in image.red],
            green=[value & _MASK16 for value in image.green],
            blue=[value & _MASK16 for value in image.blue],
            sixteen_bit=True,
        )
        return _rescale(widened, metadata, new_max_level, output_path, True)
    if image.sixteen_bit and not wide_output:
        scaled = _rescale(image, metadata, new_max_level, output_path, True)
        return ImageSOA(
            red=[value & _MASK8 for value in scaled.red],
            green=[value & _MASK8 for value in scaled.green],
            blue=[value & _MASK8 for value in scaled.blue],
            sixteen_bit=False,
        )
    return _rescale(image, metadata, new_max_level, output_path, image.sixteen_bit)