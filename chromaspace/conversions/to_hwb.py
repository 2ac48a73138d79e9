from ..colors.rgb import Rgb
from ..colors.hcg import Hcg
from ..colors.hwb import Hwb
from ..types.format_type import RGB_MAX, PERCENT_MAX
from .to_hsl import rgb_to_hsl


def rgb_to_hwb(rgb: Rgb) -> Hwb:
    """Whiteness is the smallest channel, blackness the complement of the largest."""
    h = rgb_to_hsl(rgb).h
    w = 1.0 / RGB_MAX * min(rgb.r, min(rgb.g, rgb.b))
    b = 1.0 - 1.0 / RGB_MAX * max(rgb.r, max(rgb.g, rgb.b))
    return Hwb(h, w * PERCENT_MAX, b * PERCENT_MAX)


def hcg_to_hwb(hcg: Hcg) -> Hwb:
    c = hcg.c / PERCENT_MAX
    g = hcg.g / PERCENT_MAX
    v = c + g * (1.0 - c)
    return Hwb(hcg.h, (v - c) * PERCENT_MAX, (1 - v) * PERCENT_MAX)


def gray_to_hwb(gray: float) -> Hwb:
    return Hwb(0, gray, PERCENT_MAX - gray)
