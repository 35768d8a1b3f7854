import pytest

from ppmtool.binaryio import PPMMetadata
from ppmtool.imagesoa import ImageSOA, load_ppm_soa
from ppmtool.soa_resize import interpolate_soa, resize_channel, resize_soa


def test_interpolate_endpoints():
    assert interpolate_soa(10, 20, 0.0) == 10
    assert interpolate_soa(10, 20, 1.0) == 20


def test_interpolate_truncates():
    assert interpolate_soa(0, 255, 0.5) == 127


def test_interpolate_stays_between_inputs():
    for t in (0.1, 0.25, 0.5, 0.75, 0.9):
        value = interpolate_soa(40, 200, t)
        assert 40 <= value <= 200


def test_same_size_is_identity():
    channel = [1, 2, 3, 4, 5, 6]
    assert resize_channel(channel, PPMMetadata(3, 2, 255), 3, 2) == channel


def test_single_pixel_upscale():
    result = resize_channel([77], PPMMetadata(1, 1, 255), 3, 2)
    assert result == [77] * 6


def test_downscale_picks_exact_samples():
    result = resize_channel([10, 20, 30, 40], PPMMetadata(4, 1, 255), 2, 1)
    assert result == [10, 30]


def test_resize_soa_writes_file(tmp_path):
    image = ImageSOA(red=[5], green=[6], blue=[7])
    out = tmp_path / "out.ppm"
    result = resize_soa(image, PPMMetadata(1, 1, 255), [3, 2], out)
    assert result.red == [5] * 6
    assert result.green == [6] * 6
    assert result.blue == [7] * 6
    assert out.read_bytes() == b"P6\n3 2\n255\n" + bytes([5, 6, 7]) * 6


def test_resize_soa_round_trip(tmp_path):
    image = ImageSOA(red=[0, 100, 200, 250], green=[10, 20, 30, 40], blue=[4, 3, 2, 1])
    out = tmp_path / "out.ppm"
    result = resize_soa(image, PPMMetadata(2, 2, 255), (3, 3), out)
    loaded, header = load_ppm_soa(out, PPMMetadata(3, 3, 255))
    assert header == PPMMetadata(3, 3, 255)
    assert loaded.red == result.red
    assert loaded.green == result.green
    assert loaded.blue == result.blue
    assert len(result.red) == 9


def test_resize_keeps_bit_depth(tmp_path):
    image = ImageSOA(red=[300], green=[400], blue=[500], sixteen_bit=True)
    out = tmp_path / "out.ppm"
    result = resize_soa(image, PPMMetadata(1, 1, 1000), (2, 1), out)
    assert result.sixteen_bit is True
    assert result.red == [300, 300]
    assert out.read_bytes().startswith(b"P6\n2 1\n1000\n")


def test_resize_soa_rejects_non_ppm_name(tmp_path):
    image = ImageSOA(red=[5], green=[6], blue=[7])
    with pytest.raises(ValueError):
        resize_soa(image, PPMMetadata(1, 1, 255), (2, 2), tmp_path / "out.bin")