# ppmtool

`ppmtool` reads binary PPM images (the `P6` format) and performs a small set
of operations on them: printing header information, changing the maximum
intensity level, bilinear resizing, removing the least frequent colours, and
writing a palette-compressed `C6` ("CPPM") file.

Images can be held in memory in two layouts, and each layout has its own
command:

- `imtool-aos` keeps the image as a list of `(r, g, b)` pixels (`ImageAOS`);
- `imtool-soa` keeps the image as three separate colour channels (`ImageSOA`).

Both commands accept the same arguments.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Command-line usage

```
imtool-aos INPUT OUTPUT OPERATION [ARGS...]
imtool-soa INPUT OUTPUT OPERATION [ARGS...]
```

`INPUT` must be a binary PPM file whose first line is `P6`, followed by the
width, the height and a maximum colour value between 1 and 65535. Images with
a maximum value up to 255 are read with one byte per sample; larger values are
read with two bytes per sample, least significant byte first.

`imtool-soa` additionally requires the input file name to end in `.ppm`, a
non-empty image, no sample above the maximum value, and no bytes after the
last pixel; PPM outputs it writes must also be named `*.ppm`.

### Operations

| Operation  | Extra arguments | Effect |
|------------|-----------------|--------|
| `info`     | none            | Prints the input and output paths, the operation, the image size (as height x width) and the maximum level. Nothing is written. |
| `maxlevel` | `LEVEL`         | Rescales every sample to a new maximum level (1 to 65535) and writes a PPM file. |
| `resize`   | `WIDTH HEIGHT`  | Resizes the image with bilinear interpolation and writes a PPM file. Both sizes must be non-negative integers. |
| `cutfreq`  | `N`             | Replaces the `N` least frequent colours with the nearest remaining colour and writes a PPM file. `N` must be a positive integer. |
| `compress` | none            | Writes a `C6` file: a text header `C6 WIDTH HEIGHT MAXVALUE COLORS`, a sorted colour table, and one palette index per pixel. |

Examples:

```
imtool-aos photo.ppm photo.ppm info
imtool-aos photo.ppm dim.ppm maxlevel 128
imtool-soa photo.ppm small.ppm resize 400 300
imtool-aos photo.ppm fewer.ppm cutfreq 5
imtool-soa photo.ppm photo.cppm compress
```

Invalid arguments (a wrong number of extra arguments, a non-integer or
negative size, an out-of-range level, an unknown operation) and unreadable or
malformed input files are reported as `Error: ...` on standard error, and the
command exits with status 1. On success it exits with status 0.

## Library usage

The same operations are available from Python. Errors are raised as
`ValueError` (the command-line checks raise `ppmtool.cli.ArgumentError`, a
subclass of it).

```python
from ppmtool.binaryio import read_ppm_metadata
from ppmtool.imageaos import load_ppm_aos
from ppmtool.aos_resize import resize_aos
from ppmtool.aos_compress import encode_cppm_aos, write_cppm_aos

metadata = read_ppm_metadata("photo.ppm")       # PPMMetadata(width, height, max_value)
image, metadata = load_ppm_aos("photo.ppm")     # ImageAOS and the header read from the file
small = resize_aos(image, metadata, (400, 300), "small.ppm")
write_cppm_aos(image, "photo.cppm", metadata)
data = encode_cppm_aos(image, metadata)         # the same CPPM bytes, in memory
```

Modules:

- `ppmtool.binaryio`: `PPMMetadata`, `read_binary_file`, `read_line`,
  `read_next_int`, `read_ppm_metadata`.
- `ppmtool.imageaos`: `ImageAOS`, `load_pixels8`, `load_pixels16`,
  `load_ppm_aos`, `save_aos_to_ppm`; operations in `ppmtool.aos_maxlevel`
  (`maxlevel_aos`), `ppmtool.aos_resize` (`resize_aos`), `ppmtool.aos_cutfreq`
  (`cutfreq_aos`) and `ppmtool.aos_compress` (`write_cppm_aos`).
- `ppmtool.imagesoa`: `ImageSOA`, `load_ppm_soa`, `save_soa_to_ppm`,
  `format_image_soa`, `print_image_soa`; operations in `ppmtool.soa_maxlevel`
  (`maxlevel_soa`), `ppmtool.soa_resize` (`resize_soa`), `ppmtool.soa_cutfreq`
  (`cutfreq_soa`) and `ppmtool.soa_compress` (`write_cppm_soa`).
- `ppmtool.cli`: `execute_operation`, `main_aos`, `main_soa` and the
  per-operation helpers.

Every operation function writes its output file and returns the resulting
image; `cutfreq_aos` and `cutfreq_soa` modify the given image in place.

## What it does not do

- PPM files are always written with one byte per sample (the low byte of
  each value), even when the maximum level is above 255.
- `C6` files can be written but not read back or expanded into PPM.
- The two layouts do not produce byte-identical `C6` files: `imtool-aos`
  stores 16-bit table entries and indices most significant byte first, while
  `imtool-soa` stores them least significant byte first and reduces every
  sample to its low byte before building the colour table.
- Only `P6` input is accepted; header comments are not supported.