import pytest

from ppmtool.binaryio import PPMMetadata
from ppmtool.imagesoa import ImageSOA
from ppmtool.soa_compress import (
    build_color_table,
    determine_pixel_size,
    encode_color_table,
    encode_cppm_soa,
    encode_pixel_data,
    write_cppm_soa,
)


def _image(pixels, sixteen_bit=False):
    return ImageSOA(
        red=[p[0] for p in pixels],
        green=[p[1] for p in pixels],
        blue=[p[2] for p in pixels],
        sixteen_bit=sixteen_bit,
    )


@pytest.mark.parametrize(
    "count, size",
    [(1, 1), (256, 1), (257, 2), (65535, 2), (65536, 4)],
)
def test_determine_pixel_size(count, size):
    assert determine_pixel_size(count) == size


def test_build_color_table_first_seen_order():
    image = _image([(5, 5, 5), (1, 1, 1), (5, 5, 5)])
    assert build_color_table(image) == {(5, 5, 5): 0, (1, 1, 1): 1}


def test_build_color_table_truncates_wide_channels():
    image = _image([(256 + 7, 0, 0), (7, 0, 0)], sixteen_bit=True)
    table = build_color_table(image)
    assert len(table) == 1
    assert (7, 0, 0) in table


def test_encode_color_table_three_bytes():
    assert encode_color_table([(1, 2, 3), (4, 5, 6)], 3) == bytes([1, 2, 3, 4, 5, 6])


def test_encode_color_table_six_bytes_little_endian():
    assert encode_color_table([(1, 2, 3)], 6) == bytes([1, 0, 2, 0, 3, 0])


@pytest.mark.parametrize("pixel_size", [1, 2, 4])
def test_encode_pixel_data_length(pixel_size):
    image = _image([(1, 1, 1), (2, 2, 2), (1, 1, 1)])
    table = build_color_table(image)
    data = encode_pixel_data(image, table, pixel_size)
    assert len(data) == 3 * pixel_size
    assert data[pixel_size:2 * pixel_size] == (1).to_bytes(pixel_size, "little")


def test_encode_pixel_data_unknown_colour():
    image = _image([(9, 9, 9)])
    with pytest.raises(KeyError):
        encode_pixel_data(image, {(1, 1, 1): 0}, 1)


def test_encode_cppm_soa_layout():
    image = _image([(9, 9, 9), (1, 2, 3)])
    metadata = PPMMetadata(width=2, height=1, max_value=255)
    data = encode_cppm_soa(image, metadata)
    header = b"C6 2 1 255 2\n"
    assert data.startswith(header)
    body = data[len(header):]
    assert body[:6] == bytes([1, 2, 3, 9, 9, 9])
    # Indices follow first appearance, not table order.
    assert body[6:] == bytes([0, 1])


def test_encode_cppm_soa_wide_table():
    image = _image([(1, 2, 3)], sixteen_bit=True)
    metadata = PPMMetadata(width=1, height=1, max_value=65535)
    data = encode_cppm_soa(image, metadata)
    header = b"C6 1 1 65535 1\n"
    assert data == header + bytes([1, 0, 2, 0, 3, 0]) + bytes([0])


def test_write_cppm_soa_matches_encoding(tmp_path):
    image = _image([(4, 4, 4), (4, 4, 4), (8, 8, 8), (0, 0, 0)])
    metadata = PPMMetadata(width=2, height=2, max_value=255)
    out = tmp_path / "out.cppm"
    write_cppm_soa(image, out, metadata)
    assert out.read_bytes() == encode_cppm_soa(image, metadata)