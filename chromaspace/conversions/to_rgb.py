"""Conversions whose result is an Rgb in [0, 255]. Results are never rounded."""
from ..colors.rgb import Rgb, Apple
from ..colors.hsl import Hsl
from ..colors.hsv import Hsv
from ..colors.hcg import Hcg
from ..colors.hwb import Hwb
from ..colors.cmyk import Cmyk
from ..colors.lab import Xyz
from ..types.format_type import RGB_MAX, APPLE_MAX, PERCENT_MAX, HUE_360
from .constants import M_XYZ_SRGB
from .gamma import linear_to_srgb
from .numbers import modulo, float_floor


## HSL to RGB conversions

def hsl_to_rgb(hsl: Hsl) -> Rgb:
    """
    Convert HSL to RGB with the classic hue-to-channel helper.

    Args:
        hsl: h in [0, 360], s and l in [0, 100]

    Returns:
        Rgb: channels in [0, 255]
    """
    h = hsl.h / HUE_360
    s = hsl.s / PERCENT_MAX
    l = hsl.l / PERCENT_MAX
    if s == 0:
        val = l * RGB_MAX
        return Rgb(val, val, val)
    if l < 0.5:
        t2 = l * (1 + s)
    else:
        t2 = l + s - l * s
    t1 = 2 * l - t2

    rgb = [0.0, 0.0, 0.0]
    for i in range(3):
        # phase offsets +1/3, 0, -1/3 for r, g, b
        t3 = h + 1.0 / 3.0 * (-(i - 1))
        if t3 < 0:
            t3 += 1
        if t3 > 1:
            t3 -= 1

        if 6 * t3 < 1:
            val = t1 + (t2 - t1) * 6 * t3
        elif 2 * t3 < 1:
            val = t2
        elif 3 * t3 < 2:
            val = t1 + (t2 - t1) * (2.0 / 3.0 - t3) * 6
        else:
            val = t1
        rgb[i] = val * RGB_MAX
    return Rgb(*rgb)


## HSV to RGB conversions

def hsv_to_rgb(hsv: Hsv) -> Rgb:
    """
    Convert HSV to RGB using the six-sector algorithm.

    Args:
        hsv: h in degrees (any real, wrapped), s and v in [0, 100]

    Returns:
        Rgb: channels in [0, 255]
    """
    h = hsv.h / 60
    s = hsv.s / PERCENT_MAX
    v = hsv.v / PERCENT_MAX
    hue_section = modulo(float_floor(h), 6)
    f = h - float_floor(h)
    p = RGB_MAX * v * (1 - s)
    q = RGB_MAX * v * (1 - (s * f))
    t = RGB_MAX * v * (1 - (s * (1 - f)))
    v *= RGB_MAX

    if hue_section == 0:
        return Rgb(v, t, p)
    elif hue_section == 1:
        return Rgb(q, v, p)
    elif hue_section == 2:
        return Rgb(p, v, t)
    elif hue_section == 3:
        return Rgb(p, q, v)
    elif hue_section == 4:
        return Rgb(t, p, v)
    elif hue_section == 5:
        return Rgb(v, p, q)
    # only reachable with a NaN hue
    return Rgb(0, 0, 0)


## HCG to RGB conversions

def hcg_to_rgb(hcg: Hcg) -> Rgb:
    h = hcg.h / HUE_360
    c = hcg.c / PERCENT_MAX
    g = hcg.g / PERCENT_MAX
    if c == 0:
        return Rgb(g * RGB_MAX, g * RGB_MAX, g * RGB_MAX)

    hi = modulo(h, 1) * 6
    v = modulo(hi, 1)
    w = 1 - v
    hue_section = float_floor(hi)
    if hue_section == 0:
        pure = (1, v, 0)
    elif hue_section == 1:
        pure = (w, 1, 0)
    elif hue_section == 2:
        pure = (0, 1, v)
    elif hue_section == 3:
        pure = (0, w, 1)
    elif hue_section == 4:
        pure = (v, 0, 1)
    else:
        pure = (1, 0, w)

    mg = (1.0 - c) * g
    return Rgb(*((c * channel + mg) * RGB_MAX for channel in pure))


## HWB to RGB conversions

def hwb_to_rgb(hwb: Hwb) -> Rgb:
    """
    Convert HWB to RGB.

    Whiteness and blackness summing to more than 100 are scaled down
    proportionally so that they sum to exactly 100.
    """
    h = hwb.h / HUE_360
    w = hwb.w / PERCENT_MAX
    b = hwb.b / PERCENT_MAX
    ratio = w + b
    if ratio > 1:
        w /= ratio
        b /= ratio

    i = float_floor(6 * h)
    v = 1 - b
    f = 6 * h - i
    if i % 2 != 0:
        f = 1 - f
    n = w + f * (v - w)  # linear interpolation

    if i == 1:
        r, g, b = n, v, w
    elif i == 2:
        r, g, b = w, v, n
    elif i == 3:
        r, g, b = w, n, v
    elif i == 4:
        r, g, b = n, w, v
    elif i == 5:
        r, g, b = v, w, n
    else:
        # sectors 0 and 6 (hue == 360), and anything outside the table
        r, g, b = v, n, w
    return Rgb(r * RGB_MAX, g * RGB_MAX, b * RGB_MAX)


## CMYK, Apple and XYZ to RGB conversions

def cmyk_to_rgb(cmyk: Cmyk) -> Rgb:
    c = cmyk.c / PERCENT_MAX
    m = cmyk.m / PERCENT_MAX
    y = cmyk.y / PERCENT_MAX
    k = cmyk.k / PERCENT_MAX

    r = 1 - min(1, c * (1 - k) + k)
    g = 1 - min(1, m * (1 - k) + k)
    b = 1 - min(1, y * (1 - k) + k)

    return Rgb(r * RGB_MAX, g * RGB_MAX, b * RGB_MAX)


def apple_to_rgb(rgb16: Apple) -> Rgb:
    """Rescale 16-bit channels [0, 65535] to [0, 255]."""
    return Rgb(
        (rgb16.r16 / APPLE_MAX) * RGB_MAX,
        (rgb16.g16 / APPLE_MAX) * RGB_MAX,
        (rgb16.b16 / APPLE_MAX) * RGB_MAX,
    )


def xyz_to_rgb(xyz: Xyz) -> Rgb:
    """
    Convert CIE XYZ ([0, 100] scale, D65) to sRGB.

    Applies the XYZ -> linear sRGB matrix, then the sRGB gamma curve.
    Out-of-gamut values are not clamped.
    """
    linear = M_XYZ_SRGB @ (xyz.to_array() / 100)
    return Rgb(*(linear_to_srgb(channel) * RGB_MAX for channel in linear))


## Grayscale

def gray_to_rgb(gray: float) -> Rgb:
    """gray in [0, 100] -> the neutral Rgb of that intensity."""
    val = (gray / PERCENT_MAX) * RGB_MAX
    return Rgb(val, val, val)
