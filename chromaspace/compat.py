"""
Compact legacy names (``rgb2hsl``, ``roundTo``, ...).

Deprecated: every name here warns and forwards to its snake_case
counterpart in ``chromaspace.conversions`` / ``chromaspace.colors``.
"""

import functools
import warnings
from typing import Callable, TypeVar

from . import conversions
from .colors.arithmetic import multiply_color

F = TypeVar("F", bound=Callable)


def _deprecated(function: F, old_name: str) -> F:
    @functools.wraps(function)
    def wrapper(*args, **kwargs):
        warnings.warn(
            f"{old_name} is deprecated. Use {function.__module__}.{function.__name__} instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return function(*args, **kwargs)
    wrapper.__name__ = old_name
    wrapper.__qualname__ = old_name
    return wrapper  # type: ignore[return-value]


roundTo = _deprecated(conversions.round_to, "roundTo")
rgb2css = _deprecated(conversions.rgb_to_css, "rgb2css")
rgb2str = _deprecated(conversions.rgb_to_str, "rgb2str")
rgba2css = _deprecated(conversions.rgba_to_css, "rgba2css")
hsl2css = _deprecated(conversions.hsl_to_css, "hsl2css")
hwb2css = _deprecated(conversions.hwb_to_css, "hwb2css")
rgb2hex = _deprecated(conversions.rgb_to_hex, "rgb2hex")
gray2hex = _deprecated(conversions.gray_to_hex, "gray2hex")
hex2rgb = _deprecated(conversions.hex_to_rgb, "hex2rgb")
hsl2rgb = _deprecated(conversions.hsl_to_rgb, "hsl2rgb")
hsl2hsv = _deprecated(conversions.hsl_to_hsv, "hsl2hsv")
hsl2hcg = _deprecated(conversions.hsl_to_hcg, "hsl2hcg")
hsv2rgb = _deprecated(conversions.hsv_to_rgb, "hsv2rgb")
hsv2hsl = _deprecated(conversions.hsv_to_hsl, "hsv2hsl")
hsv2hcg = _deprecated(conversions.hsv_to_hcg, "hsv2hcg")
apple2rgb = _deprecated(conversions.apple_to_rgb, "apple2rgb")
cmyk2rgb = _deprecated(conversions.cmyk_to_rgb, "cmyk2rgb")
rgb2cmyk = _deprecated(conversions.rgb_to_cmyk, "rgb2cmyk")
rgb2hsl = _deprecated(conversions.rgb_to_hsl, "rgb2hsl")
rgb2hwb = _deprecated(conversions.rgb_to_hwb, "rgb2hwb")
hwb2rgb = _deprecated(conversions.hwb_to_rgb, "hwb2rgb")
hwb2hcg = _deprecated(conversions.hwb_to_hcg, "hwb2hcg")
hcg2rgb = _deprecated(conversions.hcg_to_rgb, "hcg2rgb")
hcg2hsv = _deprecated(conversions.hcg_to_hsv, "hcg2hsv")
hcg2hsl = _deprecated(conversions.hcg_to_hsl, "hcg2hsl")
hcg2hwb = _deprecated(conversions.hcg_to_hwb, "hcg2hwb")
gray2rgb = _deprecated(conversions.gray_to_rgb, "gray2rgb")
gray2hsl = _deprecated(conversions.gray_to_hsl, "gray2hsl")
gray2hsv = _deprecated(conversions.gray_to_hsv, "gray2hsv")
gray2hwb = _deprecated(conversions.gray_to_hwb, "gray2hwb")
gray2cmyk = _deprecated(conversions.gray_to_cmyk, "gray2cmyk")
gray2lab = _deprecated(conversions.gray_to_lab, "gray2lab")
rgb2lab = _deprecated(conversions.rgb_to_lab, "rgb2lab")
lab2lyz = _deprecated(conversions.lab_to_lyz, "lab2lyz")
lab2lch = _deprecated(conversions.lab_to_lch, "lab2lch")
lch2lab = _deprecated(conversions.lch_to_lab, "lch2lab")
xyz2rgb = _deprecated(conversions.xyz_to_rgb, "xyz2rgb")
xyz2lab = _deprecated(conversions.xyz_to_lab, "xyz2lab")
rgb2xyz = _deprecated(conversions.rgb_to_xyz, "rgb2xyz")
multiplyColor = _deprecated(multiply_color, "multiplyColor")

__all__ = [
    "roundTo",
    "rgb2css",
    "rgb2str",
    "rgba2css",
    "hsl2css",
    "hwb2css",
    "rgb2hex",
    "gray2hex",
    "hex2rgb",
    "hsl2rgb",
    "hsl2hsv",
    "hsl2hcg",
    "hsv2rgb",
    "hsv2hsl",
    "hsv2hcg",
    "apple2rgb",
    "cmyk2rgb",
    "rgb2cmyk",
    "rgb2hsl",
    "rgb2hwb",
    "hwb2rgb",
    "hwb2hcg",
    "hcg2rgb",
    "hcg2hsv",
    "hcg2hsl",
    "hcg2hwb",
    "gray2rgb",
    "gray2hsl",
    "gray2hsv",
    "gray2hwb",
    "gray2cmyk",
    "gray2lab",
    "rgb2lab",
    "lab2lyz",
    "lab2lch",
    "lch2lab",
    "xyz2rgb",
    "xyz2lab",
    "rgb2xyz",
    "multiplyColor",
]
