import math

import numpy as np

from ..colors.rgb import Rgb
from ..colors.lab import Lab, Lch, Xyz
from ..types.format_type import RGB_MAX, HUE_360
from .constants import (
    M_SRGB_XYZ_LAB,
    D65_WHITE,
    D65_WHITE_100,
    LAB_E,
    LAB_K,
    LAB_OFFSET,
    LAB_L_MULT,
    LAB_L_SUB,
    LAB_A_MULT,
    LAB_B_MULT,
)
from .gamma import srgb_to_linear


def _lab_f(t: float) -> float:
    if t > LAB_E:
        return t ** (1.0 / 3.0)
    return LAB_K * t + LAB_OFFSET


def _lab_from_normalized(x: float, y: float, z: float) -> Lab:
    fx, fy, fz = _lab_f(x), _lab_f(y), _lab_f(z)
    return Lab(
        LAB_L_MULT * fy - LAB_L_SUB,
        LAB_A_MULT * (fx - fy),
        LAB_B_MULT * (fy - fz),
    )


def rgb_to_lab(rgb: Rgb) -> Lab:
    """
    Convert sRGB ([0, 255]) directly to CIELAB (D65).

    Uses the four-digit sRGB -> XYZ matrix normalized by the reference
    white, so results differ slightly from ``xyz_to_lab(rgb_to_xyz(rgb))``.
    """
    linear = np.array([srgb_to_linear(channel / RGB_MAX) for channel in rgb])
    return _lab_from_normalized(*((M_SRGB_XYZ_LAB @ linear) / D65_WHITE))


def xyz_to_lab(xyz: Xyz) -> Lab:
    return _lab_from_normalized(*(xyz.to_array() / D65_WHITE_100))


def lch_to_lab(lch: Lch) -> Lab:
    hr = lch.h / HUE_360 * 2 * math.pi
    return Lab(lch.l, lch.c * math.cos(hr), lch.c * math.sin(hr))


def gray_to_lab(gray: float) -> Lab:
    return Lab(gray, 0, 0)
