"""Command-line front end: argument checking and dispatch of operations."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from pathlib import Path

from ppmtool.aos_compress import write_cppm_aos
from ppmtool.aos_cutfreq import cutfreq_aos
from ppmtool.aos_maxlevel import maxlevel_aos
from ppmtool.aos_resize import resize_aos
from ppmtool.binaryio import MAX_16, PPMMetadata, read_ppm_metadata
from ppmtool.imageaos import load_ppm_aos
from ppmtool.imagesoa import load_ppm_soa
from ppmtool.soa_compress import write_cppm_soa
from ppmtool.soa_cutfreq import cutfreq_soa
from ppmtool.soa_maxlevel import maxlevel_soa
from ppmtool.soa_resize import resize_soa

ARG_RESIZE = 5
MAX_NEW_LEVEL = MAX_16
OPERATIONS = ("info", "maxlevel", "resize", "cutfreq", "compress")
METHODS = ("aos", "soa")

_INTEGER_RE = re.compile(r"-?[0-9]+")
_LEADING_INT_RE = re.compile(r"\s*([+-]?[0-9]+)")


class ArgumentError(ValueError):
    """Raised when the command-line arguments are not acceptable."""


def is_integer(text: str) -> bool:
    """Return True when ``text`` is an optionally negative decimal integer."""
    return _INTEGER_RE.fullmatch(text) is not None


def _leading_int(text: str, message: str) -> int:
    """Parse the integer at the start of ``text``, ignoring what follows."""
    match = _LEADING_INT_RE.match(text)
    if match is None:
        raise ArgumentError(message)
    return int(match.group(1))


def _load(path: str, metadata: PPMMetadata, method: str):
    """Load ``path`` with the chosen storage layout, returning image and header."""
    if method == "aos":
        return load_ppm_aos(path)
    if method == "soa":
        return load_ppm_soa(path, metadata)
    raise ArgumentError(f"Invalid method: {method}")


def execute_info(arguments: Sequence[str], metadata: PPMMetadata) -> None:
    """Print the header information of the input image."""
    if len(arguments) != 3:
        extra = "".join(f"{arg} " for arg in arguments[3:])
        raise ArgumentError(f"Invalid extra arguments for info: {extra}")
    input_path, output_path, operation = arguments
    print(f"Executing 'info' operation on: {input_path}")
    print(f"Input: {input_path}")
    print(f"Out: {output_path}")
    print(f"Operation: {operation}")
    print(f"Image size: {metadata.height}x{metadata.width}")
    print(f"Max level: {metadata.max_value}")


def execute_maxlevel(
    arguments: Sequence[str], metadata: PPMMetadata, method: str
) -> None:
    """Rescale the input image to a new maximum level and save it."""
    if len(arguments) != 4:
        raise ArgumentError(
            f"Invalid number of extra arguments for maxlevel: {len(arguments) - 3}"
        )
    input_path, output_path = arguments[0], arguments[1]
    message = f"Invalid maxlevel: {arguments[3]}"
    new_max_level = _leading_int(arguments[3], message)
    if not 0 <= new_max_level <= MAX_NEW_LEVEL:
        raise ArgumentError(message)
    print(f"Executing 'maxlevel' operation with level on: {input_path}")
    image, loaded = _load(input_path, metadata, method)
    if method == "aos":
        maxlevel_aos(image, loaded, new_max_level, output_path)
    else:
        maxlevel_soa(image, loaded, new_max_level, output_path)


def check_resize_arguments(arguments: Sequence[str]) -> tuple[int, int]:
    """Validate the resize arguments and return (width, height)."""
    if len(arguments) != ARG_RESIZE:
        raise ArgumentError(
            f"Invalid number of extra arguments for resize: {len(arguments) - 3}"
        )
    sizes = []
    for text, name in ((arguments[3], "width"), (arguments[4], "height")):
        if not is_integer(text) or int(text) < 0:
            raise ArgumentError(f"Invalid resize {name}: {text}")
        sizes.append(int(text))
    return sizes[0], sizes[1]


def execute_resize(
    arguments: Sequence[str], metadata: PPMMetadata, method: str
) -> None:
    """Resize the input image and save it."""
    new_size = check_resize_arguments(arguments)
    input_path, output_path = arguments[0], arguments[1]
    print(f"Executing 'resize' operation on: {input_path}")
    image, loaded = _load(input_path, metadata, method)
    if method == "aos":
        resize_aos(image, loaded, new_size, output_path)
    else:
        resize_soa(image, loaded, new_size, output_path)


def execute_cutfreq(
    arguments: Sequence[str], metadata: PPMMetadata, method: str
) -> None:
    """Replace the least frequent colours of the input image and save it."""
    if len(arguments) != 4:
        raise ArgumentError(
            f"Invalid number of extra arguments for cutfreq: {len(arguments) - 3}"
        )
    text = arguments[3]
    if not is_integer(text) or int(text) <= 0:
        raise ArgumentError(f"Invalid cutfreq: {text}")
    n_colors = int(text)
    input_path, output_path = arguments[0], arguments[1]
    print(
        f"Executing 'cutfreq' operation with number of colors: {n_colors} "
        f"on: {input_path}"
    )
    image, loaded = _load(input_path, metadata, method)
    if method == "aos":
        cutfreq_aos(image, loaded, n_colors, output_path)
    else:
        cutfreq_soa(image, loaded, n_colors, output_path)


def execute_compress(
    arguments: Sequence[str], metadata: PPMMetadata, method: str
) -> None:
    """Write the input image in CPPM format."""
    if len(arguments) != 3:
        raise ArgumentError(
            f"Invalid extra arguments for compress: {len(arguments) - 3}"
        )
    input_path, output_path = arguments[0], arguments[1]
    print(f"Executing 'compress' operation on: {input_path}")
    image, loaded = _load(input_path, metadata, method)
    if method == "aos":
        write_cppm_aos(image, output_path, loaded)
    else:
        write_cppm_soa(image, output_path, loaded)


_DISPATCH = {
    "maxlevel": execute_maxlevel,
    "resize": execute_resize,
    "cutfreq": execute_cutfreq,
    "compress": execute_compress,
}


def execute_operation(arguments: Sequence[str], method: str) -> None:
    """Check the operation name, read the input header and run the operation."""
    if len(arguments) < 3:
        raise ArgumentError(f"Invalid number of arguments: {len(arguments)}")
    operation = arguments[2]
    if operation not in OPERATIONS:
        raise ArgumentError(f"Invalid operation: {operation}")
    metadata = read_ppm_metadata(Path(arguments[0]))
    if operation == "info":
        execute_info(arguments, metadata)
    else:
        _DISPATCH[operation](arguments, metadata, method)


def _run(argv: Sequence[str] | None, method: str) -> int:
    arguments = list(sys.argv[1:] if argv is None else argv)
    try:
        execute_operation(arguments, method)
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def main_aos(argv: Sequence[str] | None = None) -> int:
    """Entry point working on images stored as pixel lists."""
    return _run(argv, "aos")


def main_soa(argv: Sequence[str] | None = None) -> int:
    """Entry point working on images stored as separate channels."""
    return _run(argv, "soa")