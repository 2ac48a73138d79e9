import pytest

from chromaspace.colors import Rgb, Hsl, Lch
from chromaspace.conversions import (
    convert, convert_color, find_path, rgb_to_lab, lab_to_lch,
    ColorSpace, FormatType, CONVERSIONS,
)
from ..samples import sample_rgb, sample_cross_space
from ..utils import assert_almost_equals_color

S = ColorSpace


def test_convert_returns_tuple():
    result = convert((255, 128, 64), "rgb", "hsv", output_type=FormatType.FLOAT)
    assert isinstance(result, tuple)
    assert len(result) == 3


def test_convert_float_matches_direct_function():
    assert_almost_equals_color(convert(sample_rgb, "rgb", "hsl"), sample_cross_space["hsl"], 0.01)
    assert_almost_equals_color(convert(sample_rgb, "rgb", "cmyk"), sample_cross_space["cmyk"], 0.01)


def test_convert_int_output():
    assert convert(sample_rgb, "rgb", "cmyk", output_type=FormatType.INT) == (0, 38, 68, 34)
    assert convert((0, 100, 50), "hsl", "rgb", output_type="int") == (255, 0, 0)
    assert all(isinstance(v, int) for v in convert((10, 20, 30), "rgb", "hsv", FormatType.INT))


def test_convert_multi_step():
    expected = lab_to_lch(rgb_to_lab(Rgb(*sample_rgb)))
    assert convert(sample_rgb, "rgb", "lch") == expected.value
    assert_almost_equals_color(convert((0, 0, 0), "hwb", "hsv"), (0, 100, 100))
    assert_almost_equals_color(convert((0, 100, 0), "hwb", "hsv"), (0, 0, 100))
    assert_almost_equals_color(convert((65535, 65535, 0), "apple", "hsl"), (60, 100, 50))


def test_convert_same_space_is_identity():
    assert convert((1.5, 2.5, 3.5), "rgb", "rgb") == (1.5, 2.5, 3.5)


def test_convert_accepts_color_objects_and_enums():
    assert convert(Rgb(255, 0, 0), S.RGB, S.HSL) == (0.0, 100.0, 50.0)
    with pytest.raises(ValueError):
        convert(Hsl(0, 100, 50), "rgb", "hsl")


def test_convert_is_case_insensitive():
    assert convert((255, 0, 0), "RGB", "Hsl") == (0.0, 100.0, 50.0)


def test_convert_errors():
    with pytest.raises(ValueError):
        convert((1, 2, 3), "rgb", "nope")
    with pytest.raises(ValueError):
        convert((1, 2), "rgb", "hsl")
    with pytest.raises(ValueError):
        convert((1, 2, 3), "lyz", "rgb")


def test_convert_color():
    lch = convert_color(Rgb(*sample_rgb), "lch")
    assert isinstance(lch, Lch)
    assert Rgb(*sample_rgb).convert("lch") == lch
    rgb = Rgb(1, 2, 3)
    assert convert_color(rgb, "rgb") is rgb


def test_find_path_prefers_hue_shortcuts():
    assert find_path(S.RGB, S.RGB) == (S.RGB,)
    assert find_path(S.HWB, S.HSV) == (S.HWB, S.HCG, S.HSV)
    assert find_path(S.HSL, S.HWB) == (S.HSL, S.HCG, S.HWB)
    assert find_path(S.CMYK, S.HSL) == (S.CMYK, S.RGB, S.HSL)
    assert find_path(S.LAB, S.RGB) == (S.LAB, S.XYZ, S.RGB)
    assert find_path("apple", "lch") == (S.APPLE, S.RGB, S.LAB, S.LCH)


def test_find_path_unreachable():
    with pytest.raises(ValueError, match="No conversion path"):
        find_path(S.LYZ, S.RGB)
    with pytest.raises(ValueError):
        find_path(S.RGB, S.APPLE)


def test_every_edge_targets_its_space():
    for (src, dst), function in CONVERSIONS.items():
        assert src != dst
        assert function.__name__.endswith(dst.value)
