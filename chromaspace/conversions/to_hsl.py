import math

from ..colors.rgb import Rgb
from ..colors.hsl import Hsl
from ..colors.hsv import Hsv
from ..colors.hcg import Hcg
from ..types.format_type import RGB_MAX, PERCENT_MAX, HUE_360
from .constants import HSx_MIN_LIGHTNESS


def rgb_hue(r: float, g: float, b: float) -> float:
    """
    Hue in degrees [0, 360) of unit RGB channels; 0 for achromatic input.
    """
    min_c = min(min(r, g), b)
    max_c = max(max(r, g), b)
    delta = max_c - min_c

    h = 0
    if max_c == min_c:
        h = 0
    elif r == max_c:
        h = (g - b) / delta
    elif g == max_c:
        h = 2 + (b - r) / delta
    elif b == max_c:
        h = 4 + (r - g) / delta

    h = min(h * 60, HUE_360)
    if h < 0:
        h += HUE_360
    # a tiny negative hue rounds up to exactly 360
    if h >= HUE_360:
        h -= HUE_360
    return h


## RGB to HSL conversions

def rgb_to_hsl(rgb: Rgb) -> Hsl:
    """
    Convert RGB to HSL.

    Args:
        rgb: channels in [0, 255]

    Returns:
        Hsl: hue in [0, 360), saturation and lightness in [0, 100]
    """
    r = rgb.r / RGB_MAX
    g = rgb.g / RGB_MAX
    b = rgb.b / RGB_MAX

    min_c = min(min(r, g), b)
    max_c = max(max(r, g), b)
    delta = max_c - min_c

    h = rgb_hue(r, g, b)
    lightness = (min_c + max_c) / 2

    if max_c == min_c:
        s = 0
    elif lightness <= 0.5:
        s = delta / (max_c + min_c)
    else:
        s = delta / (2 - max_c - min_c)

    return Hsl(h, s * PERCENT_MAX, lightness * PERCENT_MAX)


## HSV to HSL conversions

def hsv_to_hsl(hsv: Hsv) -> Hsl:
    """
    Convert HSV to HSL, keeping the hue.

    Black (v == 0) goes through a guarded minimum value so that the
    saturation stays defined; a saturation that still comes out as NaN
    (white, where 0/0 occurs) is reported as 0.
    """
    s = hsv.s / PERCENT_MAX
    v = hsv.v / PERCENT_MAX
    vmin = max(v, HSx_MIN_LIGHTNESS)

    lightness = (2 - s) * v
    lmin = (2 - s) * vmin
    sl = s * vmin
    denominator = lmin if lmin <= 1 else 2 - lmin
    sl = sl / denominator if denominator else 0.0
    if math.isnan(sl):
        sl = 0.0
    lightness /= 2

    return Hsl(hsv.h, sl * PERCENT_MAX, lightness * PERCENT_MAX)


## HCG to HSL conversions

def hcg_to_hsl(hcg: Hcg) -> Hsl:
    c = hcg.c / PERCENT_MAX
    g = hcg.g / PERCENT_MAX
    lightness = g * (1.0 - c) + 0.5 * c
    s = 0
    if 0.0 < lightness < 0.5:
        s = c / (2 * lightness)
    elif 0.5 <= lightness < 1.0:
        s = c / (2 * (1 - lightness))
    return Hsl(hcg.h, s * PERCENT_MAX, lightness * PERCENT_MAX)


## Grayscale

def gray_to_hsl(gray: float) -> Hsl:
    return Hsl(0, 0, gray)
