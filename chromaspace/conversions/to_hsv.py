from ..colors.rgb import Rgb
from ..colors.hsl import Hsl
from ..colors.hsv import Hsv
from ..colors.hcg import Hcg
from ..types.format_type import RGB_MAX, PERCENT_MAX
from .constants import HSx_MIN_LIGHTNESS
from .to_hsl import rgb_hue


## RGB to HSV conversions

def rgb_to_hsv(rgb: Rgb) -> Hsv:
    """
    Convert RGB to HSV.

    Args:
        rgb: channels in [0, 255]

    Returns:
        Hsv: hue in [0, 360), saturation and value in [0, 100]
    """
    r = rgb.r / RGB_MAX
    g = rgb.g / RGB_MAX
    b = rgb.b / RGB_MAX
    max_c = max(r, g, b)
    delta = max_c - min(r, g, b)
    s = delta / max_c if max_c > 0 else 0
    return Hsv(rgb_hue(r, g, b), s * PERCENT_MAX, max_c * PERCENT_MAX)


## HSL to HSV conversions

def hsl_to_hsv(hsl: Hsl) -> Hsv:
    """
    Convert HSL to HSV, keeping the hue.

    Zero lightness takes the branch based on the guarded minimum
    ``max(l, 0.01)`` so that black does not divide 0 by 0.
    """
    s = hsl.s / PERCENT_MAX
    lightness = hsl.l / PERCENT_MAX
    smin = s
    lmin = max(lightness, HSx_MIN_LIGHTNESS)
    lightness *= 2
    if lightness <= 1:
        s *= lightness
    else:
        s *= 2 - lightness
    if lmin <= 1:
        smin *= lmin
    else:
        smin *= 2 - lmin
    v = (lightness + s) / 2
    if lightness == 0:
        sv = (2 * smin) / (lmin + smin)
    else:
        sv = (2 * s) / (lightness + s)
    return Hsv(hsl.h, sv * PERCENT_MAX, v * PERCENT_MAX)


## HCG to HSV conversions

def hcg_to_hsv(hcg: Hcg) -> Hsv:
    c = hcg.c / PERCENT_MAX
    g = hcg.g / PERCENT_MAX
    v = c + g * (1.0 - c)
    s = 0
    if v > 0.0:
        s = c / v
    return Hsv(hcg.h, s * PERCENT_MAX, v * PERCENT_MAX)


## Grayscale

def gray_to_hsv(gray: float) -> Hsv:
    return Hsv(0, 0, gray)
