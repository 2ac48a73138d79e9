import numpy as np

from ..colors.rgb import Rgb
from ..colors.lab import Lab, Lyz, Xyz
from ..types.format_type import RGB_MAX
from .constants import (
    M_SRGB_XYZ,
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


def rgb_to_xyz(rgb: Rgb) -> Xyz:
    """
    Convert sRGB ([0, 255]) to CIE XYZ on the [0, 100] scale (D65).
    """
    linear = np.array([srgb_to_linear(channel / RGB_MAX) for channel in rgb]) * 100
    return Xyz(*(M_SRGB_XYZ @ linear))


def _lab_f_inv(t: float) -> float:
    cube = t ** 3
    if cube > LAB_E:
        return cube
    return (t - LAB_OFFSET) / LAB_K


def lab_to_lyz(lab: Lab) -> Lyz:
    """
    Undo the Lab companding and scale by the D65 white point.

    The result holds X, Y and Z on the [0, 100] scale; it is returned as
    ``Lyz`` because its first field is named after Lab's lightness slot.
    Use ``lab_to_xyz`` for the same numbers as an ``Xyz``.
    """
    y = (lab.l + LAB_L_SUB) / LAB_L_MULT
    x = lab.a / LAB_A_MULT + y
    z = y - lab.b / LAB_B_MULT
    scaled = np.array([_lab_f_inv(x), _lab_f_inv(y), _lab_f_inv(z)]) * D65_WHITE_100
    return Lyz(*scaled)


def lab_to_xyz(lab: Lab) -> Xyz:
    return Xyz(*lab_to_lyz(lab))
