from __future__ import annotations
from enum import Enum
from typing import Sequence, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ColorElement = Union[ScalarVector, Sequence[Scalar]]
ColorValue = Union[ColorElement, ndarray]


class ColorSpace(str, Enum):
    RGB = "rgb"
    HSL = "hsl"
    HSV = "hsv"
    HCG = "hcg"
    HWB = "hwb"
    CMYK = "cmyk"
    LAB = "lab"
    XYZ = "xyz"
    LYZ = "lyz"
    LCH = "lch"
    APPLE = "apple"


HUE_SPACES = {ColorSpace.HSL, ColorSpace.HSV, ColorSpace.HCG, ColorSpace.HWB, ColorSpace.LCH}


def parse_space(space: Union[str, ColorSpace]) -> ColorSpace:
    """
    Resolve a color space name (case-insensitive) to a ColorSpace.

    Raises:
        ValueError: if the name is not a known space
    """
    try:
        return ColorSpace(str(getattr(space, "value", space)).lower())
    except ValueError:
        raise ValueError(f"Unknown space: {space}") from None


def element_to_array(element: ColorValue) -> np.ndarray:
    """
    Convert a color element to a float numpy array.

    Args:
        element: Scalar, tuple, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(float, copy=False)
    if isinstance(element, (int, float)):
        return np.array([element], dtype=float)
    return np.array(element, dtype=float)


def is_hue_space(color_space: Union[str, ColorSpace]) -> bool:
    """
    Check if the given color space has a hue channel.

    Args:
        color_space: Color space string
    Returns:
        True if hue-based, False otherwise
    """
    return parse_space(color_space) in HUE_SPACES
