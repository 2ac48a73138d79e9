import pickle

import numpy as np
import pytest

from chromaspace.colors import (
    ColorBase, Rgb, Apple, Hsl, Hsv, Hcg, Hwb, Cmyk, Lab, Lch, Xyz, Lyz,
    get_color_class,
)
from chromaspace.conversions import ColorSpace, rgb_to_hsl
from ..samples import samples_rgb_hsl
from ..utils import assert_almost_equals_color


def test_channels_and_properties():
    rgb = Rgb(1, 2, 3)
    assert (rgb.r, rgb.g, rgb.b) == (1.0, 2.0, 3.0)
    assert isinstance(rgb.r, float)
    assert rgb.value == (1.0, 2.0, 3.0)
    assert Cmyk(1, 2, 3, 4).k == 4
    assert Apple(1, 2, 3).g16 == 2
    assert Lch(50, 10, 90).h == 90


def test_construction_forms_agree():
    expected = Rgb(1, 2, 3)
    assert Rgb(r=1, g=2, b=3) == expected
    assert Rgb(1, b=3, g=2) == expected
    assert Rgb((1, 2, 3)) == expected
    assert Rgb([1, 2, 3]) == expected
    assert Rgb(np.array([1, 2, 3])) == expected


def test_construction_errors():
    with pytest.raises(ValueError):
        Rgb(1, 2)
    with pytest.raises(ValueError):
        Cmyk(1, 2, 3)
    with pytest.raises(ValueError):
        Rgb(r=1, g=2)
    with pytest.raises(TypeError):
        Rgb(r=1, g=2, b=3, a=4)
    with pytest.raises(TypeError):
        Rgb(1, 2, 3, r=1)


def test_construction_from_other_space_converts():
    for r, g, b in samples_rgb_hsl:
        assert Hsl(Rgb(r, g, b)) == rgb_to_hsl(Rgb(r, g, b))
    assert_almost_equals_color(Rgb(Hsl(0, 100, 50)), Rgb(255, 0, 0))
    same = Rgb(4, 5, 6)
    assert Rgb(same) == same


def test_immutability():
    rgb = Rgb(1, 2, 3)
    with pytest.raises(AttributeError):
        rgb.r = 5
    with pytest.raises(AttributeError):
        rgb._value = (0, 0, 0)
    with pytest.raises(AttributeError):
        rgb.extra = 1
    with pytest.raises(AttributeError):
        del rgb.r
    assert rgb == Rgb(1, 2, 3)


def test_value_semantics():
    assert Rgb(1, 2, 3) == Rgb(1.0, 2.0, 3.0)
    assert Rgb(1, 2, 3) != Rgb(1, 2, 4)
    assert Rgb(1, 2, 3) != Hsv(1, 2, 3)
    assert Rgb(1, 2, 3) != (1, 2, 3)
    assert len({Rgb(1, 2, 3), Rgb(1, 2, 3), Hsv(1, 2, 3)}) == 2


def test_sequence_protocol():
    hsl = Hsl(10, 20, 30)
    h, s, l = hsl
    assert (h, s, l) == (10, 20, 30)
    assert len(hsl) == 3
    assert len(Cmyk(0, 0, 0, 0)) == 4
    assert hsl[1] == 20
    assert hsl[-1] == 30


def test_repr():
    assert repr(Rgb(169, 104, 54)) == "Rgb(r=169.0, g=104.0, b=54.0)"
    assert repr(Hwb(0, 12.5, 0)) == "Hwb(h=0.0, w=12.5, b=0.0)"


def test_replace():
    hsl = Hsl(10, 20, 30)
    assert hsl.replace(l=60) == Hsl(10, 20, 60)
    assert hsl == Hsl(10, 20, 30)
    with pytest.raises(TypeError):
        hsl.replace(v=1)


def test_pickle():
    lab = Lab(50.5, -3, 12)
    assert pickle.loads(pickle.dumps(lab)) == lab


def test_to_array():
    arr = Cmyk(1, 2, 3, 4).to_array()
    assert isinstance(arr, np.ndarray)
    assert arr.dtype == float
    assert np.allclose(arr, [1, 2, 3, 4])


def test_has_hue():
    assert Hsl(0, 0, 0).has_hue
    assert Hwb(0, 0, 0).has_hue
    assert Hcg(0, 0, 0).has_hue
    assert not Rgb(0, 0, 0).has_hue
    assert Lch(0, 0, 0).has_hue
    assert not Lab(0, 0, 0).has_hue


def test_convert_method():
    rgb = Rgb(169, 104, 54)
    assert rgb.convert("hsl") == rgb_to_hsl(rgb)
    assert rgb.convert() is rgb
    assert_almost_equals_color(rgb.convert("lab").convert("rgb"), rgb, 0.5)


def test_get_color_class():
    assert get_color_class("rgb") is Rgb
    assert get_color_class(ColorSpace.LYZ) is Lyz
    assert get_color_class("XYZ") is Xyz
    with pytest.raises(ValueError):
        get_color_class("rgba")


def test_every_space_has_a_class():
    for space in ColorSpace:
        cls = get_color_class(space)
        assert issubclass(cls, ColorBase)
        assert cls.mode == space
        assert cls.num_channels == len(cls.channels)
