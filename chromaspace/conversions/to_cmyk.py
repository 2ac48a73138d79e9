import math

from ..colors.rgb import Rgb
from ..colors.cmyk import Cmyk
from ..types.format_type import RGB_MAX, PERCENT_MAX


def _ratio_or_zero(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return 0.0
    ratio = numerator / denominator
    return 0.0 if math.isnan(ratio) else ratio


def rgb_to_cmyk(rgb: Rgb) -> Cmyk:
    """
    Convert RGB to CMYK.

    Pure black (k == 100) has no defined ink ratios; c, m and y are 0 then.
    """
    r = rgb.r / RGB_MAX
    g = rgb.g / RGB_MAX
    b = rgb.b / RGB_MAX
    k = 1 - max(r, g, b)
    return Cmyk(
        _ratio_or_zero(1 - r - k, 1 - k) * PERCENT_MAX,
        _ratio_or_zero(1 - g - k, 1 - k) * PERCENT_MAX,
        _ratio_or_zero(1 - b - k, 1 - k) * PERCENT_MAX,
        k * PERCENT_MAX,
    )


def gray_to_cmyk(gray: float) -> Cmyk:
    return Cmyk(0, 0, 0, PERCENT_MAX - gray)
