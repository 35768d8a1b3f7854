import pytest

from ppmtool.aos_maxlevel import maxlevel_aos
from ppmtool.binaryio import PPMMetadata, read_ppm_metadata
from ppmtool.imageaos import ImageAOS, load_ppm_aos


@pytest.mark.parametrize("level", [0, -5, 70000])
def test_invalid_level(tmp_path, level):
    image = ImageAOS(pixels=[(1, 2, 3)])
    with pytest.raises(ValueError):
        maxlevel_aos(image, PPMMetadata(1, 1, 255), level, tmp_path / "o.ppm")


def test_pixel_count_mismatch(tmp_path):
    image = ImageAOS(pixels=[(1, 2, 3)])
    with pytest.raises(ValueError, match="Invalid number of pixels"):
        maxlevel_aos(image, PPMMetadata(2, 2, 255), 128, tmp_path / "o.ppm")


def test_same_level_is_identity(tmp_path):
    pixels = [(0, 50, 255), (12, 34, 56)]
    out = tmp_path / "same.ppm"
    result = maxlevel_aos(ImageAOS(pixels=pixels), PPMMetadata(2, 1, 255), 255, out)
    assert result.pixels == pixels
    loaded, metadata = load_ppm_aos(out)
    assert loaded.pixels == pixels
    assert metadata.max_value == 255


def test_8bit_to_lower_level_bounds(tmp_path):
    pixels = [(v, v, v) for v in range(256)]
    out = tmp_path / "low.ppm"
    result = maxlevel_aos(ImageAOS(pixels=pixels), PPMMetadata(256, 1, 255), 128, out)
    assert not result.sixteen_bit
    assert result.pixels[0] == (0, 0, 0)
    assert result.pixels[-1] == (128, 128, 128)
    assert all(0 <= c <= 128 for p in result.pixels for c in p)
    flat = [p[0] for p in result.pixels]
    assert flat == sorted(flat)
    assert read_ppm_metadata(out).max_value == 128


def test_8bit_to_16bit(tmp_path):
    image = ImageAOS(pixels=[(255, 0, 255)])
    out = tmp_path / "wide.ppm"
    result = maxlevel_aos(image, PPMMetadata(1, 1, 255), 65535, out)
    assert result.sixteen_bit
    assert result.pixels == [(65535, 0, 65535)]
    assert read_ppm_metadata(out).max_value == 65535


def test_16bit_to_16bit(tmp_path):
    image = ImageAOS(pixels=[(1000, 0, 1000)], sixteen_bit=True)
    out = tmp_path / "w16.ppm"
    result = maxlevel_aos(image, PPMMetadata(1, 1, 1000), 2000, out)
    assert result.sixteen_bit
    assert result.pixels == [(2000, 0, 2000)]


def test_16bit_to_8bit(tmp_path):
    image = ImageAOS(pixels=[(1000, 0, 1000)], sixteen_bit=True)
    out = tmp_path / "n8.ppm"
    result = maxlevel_aos(image, PPMMetadata(1, 1, 1000), 100, out)
    assert not result.sixteen_bit
    assert result.pixels == [(100, 0, 100)]
    loaded, metadata = load_ppm_aos(out)
    assert loaded.pixels == result.pixels
    assert metadata.max_value == 100