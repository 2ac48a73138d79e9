"""
Conversions into HCG (hue, chroma, gray).

Gray is only meaningful while chroma is below 1; a fully chromatic color
has gray 0.
"""
from ..colors.hsl import Hsl
from ..colors.hsv import Hsv
from ..colors.hcg import Hcg
from ..colors.hwb import Hwb
from ..types.format_type import PERCENT_MAX


def hsl_to_hcg(hsl: Hsl) -> Hcg:
    s = hsl.s / PERCENT_MAX
    lightness = hsl.l / PERCENT_MAX
    if lightness < 0.5:
        c = 2.0 * s * lightness
    else:
        c = 2.0 * s * (1.0 - lightness)
    g = 0
    if c < 1.0:
        g = (lightness - 0.5 * c) / (1.0 - c)
    return Hcg(hsl.h, c * PERCENT_MAX, g * PERCENT_MAX)


def hsv_to_hcg(hsv: Hsv) -> Hcg:
    s = hsv.s / PERCENT_MAX
    v = hsv.v / PERCENT_MAX
    c = s * v
    g = 0
    if c < 1.0:
        g = (v - c) / (1 - c)
    return Hcg(hsv.h, c * PERCENT_MAX, g * PERCENT_MAX)


def hwb_to_hcg(hwb: Hwb) -> Hcg:
    w = hwb.w / PERCENT_MAX
    b = hwb.b / PERCENT_MAX
    v = 1 - b
    c = v - w
    g = 0
    if c < 1:
        g = (v - c) / (1 - c)
    return Hcg(hwb.h, c * PERCENT_MAX, g * PERCENT_MAX)
