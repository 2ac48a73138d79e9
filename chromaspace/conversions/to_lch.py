import math

from ..colors.lab import Lab, Lch
from ..types.format_type import HUE_360


def lab_to_lch(lab: Lab) -> Lch:
    """Polar form of Lab: chroma is the (a, b) radius, hue its angle in [0, 360)."""
    h = math.atan2(lab.b, lab.a) * HUE_360 / 2.0 / math.pi
    if h < 0:
        h += HUE_360
    if h >= HUE_360:
        h -= HUE_360
    c = math.sqrt(lab.a * lab.a + lab.b * lab.b)
    return Lch(lab.l, c, h)
