import math

import pytest

from chromaspace.colors import Rgb, Hsl, Hwb
from chromaspace.conversions import (
    rgb_to_hex, gray_to_hex, hex_to_rgb,
    rgb_to_css, rgb_to_str, rgba_to_css,
    hsl_to_css, hwb_to_css, rgb_to_hsl,
)
from ..samples import sample_rgb, sample_cross_space


def test_rgb_to_hex():
    assert rgb_to_hex(Rgb(*sample_rgb)) == sample_cross_space["hex"]
    assert rgb_to_hex(Rgb(0, 0, 0)) == "000000"
    assert rgb_to_hex(Rgb(255, 255, 255)) == "ffffff"
    assert rgb_to_hex(Rgb(1, 2, 3)) == "010203"


def test_rgb_to_hex_rounds_half_up():
    assert rgb_to_hex(Rgb(127.5, 0.49, 254.5)) == "8000ff"


def test_rgb_to_hex_rejects_nan():
    with pytest.raises(ValueError):
        rgb_to_hex(Rgb(math.nan, 0, 0))


def test_gray_to_hex():
    assert gray_to_hex(0) == "000000"
    assert gray_to_hex(50) == "808080"
    assert gray_to_hex(100) == "ffffff"


@pytest.mark.parametrize("text, expected", [
    ("a96836", (169, 104, 54)),
    ("A96836", (169, 104, 54)),
    ("0xa96836", (169, 104, 54)),
    ("  a96836", (169, 104, 54)),
    ("a96836zz", (169, 104, 54)),
    ("ff", (0, 0, 255)),
    ("1000000", (0, 0, 0)),
    ("-1", (255, 255, 255)),
])
def test_hex_to_rgb(text, expected):
    assert hex_to_rgb(text) == Rgb(*expected)


@pytest.mark.parametrize("text", ["", "#a96836", "zz", "0x", "   "])
def test_hex_to_rgb_without_digits_is_black(text):
    assert hex_to_rgb(text) == Rgb(0, 0, 0)


def test_hex_round_trip():
    for value in ("000000", "ffffff", "a96836", "0a0b0c", "7f8081"):
        assert rgb_to_hex(hex_to_rgb(value)) == value


def test_rgb_to_css_and_str():
    assert rgb_to_css(Rgb(0, 127.4, 255)) == "rgb(0,127,255)"
    assert rgb_to_str(Rgb(0, 127.4, 255)) == "0,127,255"
    assert rgb_to_css(Rgb(0.5, 0, 0)) == "rgb(1,0,0)"


def test_rgba_to_css():
    assert rgba_to_css(Rgb(255, 127.5, 0.4), 0.505) == "rgba(255,128,0,0.51)"
    assert rgba_to_css(Rgb(0, 0, 0), 1) == "rgba(0,0,0,1)"
    assert rgba_to_css(Rgb(0, 0, 0), 0.5) == "rgba(0,0,0,0.5)"


def test_hsl_to_css():
    assert hsl_to_css(rgb_to_hsl(Rgb(*sample_rgb))) == "hsl(26.09deg,51.57%,43.73%)"
    assert hsl_to_css(Hsl(0, 0, 100)) == "hsl(0deg,0%,100%)"


def test_hwb_to_css():
    assert hwb_to_css(Hwb(120, 12.5, 0)) == "hwb(120deg,12.5%,0%)"
    assert hwb_to_css(Hwb(33.333, 0.004, 99.999)) == "hwb(33.33deg,0%,100%)"
