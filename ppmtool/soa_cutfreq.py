"""Remove the least frequent colours from a channel-based image."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Mapping, Sequence
from pathlib import Path

from ppmtool.binaryio import PPMMetadata
from ppmtool.imagesoa import ImageSOA, save_soa_to_ppm

Color = tuple[int, int, int]
ColorEntry = tuple[int, int, int, int]

_MASK8 = 0xFF
_MASK16 = 0xFFFF


def combine_rgb(red: int, green: int, blue: int) -> int:
    """Pack three channel values into a single integer key."""
    return (red << 16) | (green << 8) | blue


def _pixels(image: ImageSOA):
    return zip(image.red, image.green, image.blue)


def count_color_frequency(image: ImageSOA) -> Counter[int]:
    """Count how often each colour key appears in the image."""
    return Counter(combine_rgb(r, g, b) for r, g, b in _pixels(image))


def get_color_data(frequency: Mapping[int, int]) -> list[ColorEntry]:
    """List (frequency, r, g, b) entries, rarest first.

    Each key is decoded as an 8-bit colour.
    """
    data = [
        (count, (key >> 16) & _MASK8, (key >> 8) & _MASK8, key & _MASK8)
        for key, count in frequency.items()
    ]
    data.sort(key=lambda entry: entry[0])
    return data


def find_closest_replacement(
    target: Color, color_data: Sequence[ColorEntry], start: int
) -> Color:
    """Return the colour from ``color_data[start:]`` nearest to ``target``.

    Returns (0, 0, 0) when there is no candidate.
    """
    closest: Color = (0, 0, 0)
    best = math.inf
    for _, r, g, b in color_data[start:]:
        candidate = (r, g, b)
        distance = math.dist(target, candidate)
        if distance < best:
            best = distance
            closest = candidate
    return closest


def create_replacement_map(
    color_data: Sequence[ColorEntry], n_colors: int
) -> dict[int, Color]:
    """Map each of the ``n_colors`` rarest colours to its nearest survivor."""
    limit = n_colors if n_colors >= 0 else len(color_data)
    replacements: dict[int, Color] = {}
    for _, r, g, b in color_data[:limit]:
        replacements[combine_rgb(r, g, b)] = find_closest_replacement(
            (r, g, b), color_data, limit
        )
    return replacements


def apply_color_replacement(
    image: ImageSOA, replacement_map: Mapping[int, Color]
) -> None:
    """Replace, in place, every pixel whose colour key appears in the map."""
    mask = _MASK16 if image.sixteen_bit else _MASK8
    for i, (r, g, b) in enumerate(_pixels(image)):
        replacement = replacement_map.get(combine_rgb(r, g, b))
        if replacement is None:
            continue
        new_r, new_g, new_b = replacement
        image.red[i] = new_r & mask
        image.green[i] = new_g & mask
        image.blue[i] = new_b & mask


def cutfreq_soa(
    image: ImageSOA,
    metadata: PPMMetadata,
    n_colors: int,
    output_path: str | Path,
) -> ImageSOA:
    """Replace the ``n_colors`` rarest colours, save the image and return it."""
    color_data = get_color_data(count_color_frequency(image))
    apply_color_replacement(image, create_replacement_map(color_data, n_colors))
    save_soa_to_ppm(image, metadata, metadata.max_value, output_path)
    return image