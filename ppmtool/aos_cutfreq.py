"""Remove the least frequent colours from a pixel-list image."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

from ppmtool.binaryio import MAX_8, PPMMetadata
from ppmtool.imageaos import ImageAOS, Pixel, save_aos_to_ppm

ColorEntry = tuple[int, Pixel]

_MASK8 = 0xFF
_MASK16 = 0xFFFF


@dataclass
class ColorSplit:
    """Colours to be replaced and colours that stay."""

    colors_to_remove: list[ColorEntry] = field(default_factory=list)
    colors_to_keep: list[ColorEntry] = field(default_factory=list)


def combine_rgb(color: Pixel) -> int:
    """Pack an 8-bit colour into a 24-bit key."""
    r, g, b = color
    return (r << 16) | (g << 8) | b


def combine_rgb48(color: Pixel) -> int:
    """Pack a 16-bit colour into a 48-bit key."""
    r, g, b = color
    return ((r & _MASK16) << 32) | ((g & _MASK16) << 16) | (b & _MASK16)


def extract_rgb8(rgb: int) -> Pixel:
    """Unpack a 24-bit key into an 8-bit colour."""
    return ((rgb >> 16) & _MASK8, (rgb >> 8) & _MASK8, rgb & _MASK8)


def extract_rgb48(rgb: int) -> Pixel:
    """Unpack a 48-bit key into a 16-bit colour."""
    return ((rgb >> 32) & _MASK16, (rgb >> 16) & _MASK16, rgb & _MASK16)


def count_color_frequency(image: ImageAOS) -> Counter[int]:
    """Count how often each colour key appears in the image."""
    combine = combine_rgb48 if image.sixteen_bit else combine_rgb
    return Counter(combine(pixel) for pixel in image.pixels)


def sort_colors_by_frequency(
    frequency: dict[int, int], max_level: int
) -> list[ColorEntry]:
    """List (frequency, colour) pairs, rarest first.

    Ties are broken by blue, then green, then red, each descending.
    """
    extract = extract_rgb8 if max_level <= MAX_8 else extract_rgb48
    data = [(count, extract(key)) for key, count in frequency.items()]
    data.sort(key=lambda entry: (entry[0], -entry[1][2], -entry[1][1], -entry[1][0]))
    return data


def split_colors(color_data: list[ColorEntry], n_colors: int) -> ColorSplit:
    """Split off the first ``n_colors`` entries for removal."""
    return ColorSplit(
        colors_to_remove=list(color_data[:n_colors]),
        colors_to_keep=list(color_data[n_colors:]),
    )


def find_closest_color(color: Pixel, colors_to_keep: list[ColorEntry]) -> Pixel:
    """Return the kept colour nearest in RGB space; (0, 0, 0) if none."""
    closest: Pixel = (0, 0, 0)
    best = math.inf
    for _, candidate in colors_to_keep:
        distance = math.dist(color, candidate)
        if distance < best:
            best = distance
            closest = candidate
    return closest


def create_replacement_map(split: ColorSplit) -> dict[int, Pixel]:
    """Map the key of each removed colour to its nearest kept colour."""
    replacements: dict[int, Pixel] = {}
    for _, color in split.colors_to_remove:
        if all(channel <= MAX_8 for channel in color):
            key = combine_rgb(color)
        else:
            key = combine_rgb48(color)
        replacements[key] = find_closest_color(color, split.colors_to_keep)
    return replacements


def apply_color_replacement(image: ImageAOS, replacement_map: dict[int, Pixel]) -> None:
    """Replace pixels in place whose colour key appears in the map."""
    if image.sixteen_bit:
        combine, mask = combine_rgb48, _MASK16
    else:
        combine, mask = combine_rgb, _MASK8
    new_pixels = []
    for pixel in image.pixels:
        replacement = replacement_map.get(combine(pixel))
        if replacement is not None:
            pixel = tuple(channel & mask for channel in replacement)
        new_pixels.append(pixel)
    image.pixels[:] = new_pixels


def cutfreq_aos(
    image: ImageAOS,
    metadata: PPMMetadata,
    n_colors: int,
    output_path: str | Path,
) -> ImageAOS:
    """Replace the ``n_colors`` rarest colours, save the image and return it."""
    frequency = count_color_frequency(image)
    color_data = sort_colors_by_frequency(frequency, metadata.max_value)
    split = split_colors(color_data, n_colors)
    apply_color_replacement(image, create_replacement_map(split))
    save_aos_to_ppm(image, metadata, metadata.max_value, output_path)
    return image