from __future__ import annotations
from typing import Union
from .color_base import ColorBase
from .rgb import rgb_space_to_class
from .hsl import hsl_space_to_class
from .hsv import hsv_space_to_class
from .hcg import hcg_space_to_class
from .hwb import hwb_space_to_class
from .cmyk import cmyk_space_to_class
from .lab import lab_space_to_class
from ..types.color_types import ColorSpace, parse_space

unified_space_to_class: dict[ColorSpace, type[ColorBase]] = {
    **rgb_space_to_class,
    **hsl_space_to_class,
    **hsv_space_to_class,
    **hcg_space_to_class,
    **hwb_space_to_class,
    **cmyk_space_to_class,
    **lab_space_to_class,
}


def color_convert(self: ColorBase, to_space: Union[str, ColorSpace, None] = None) -> ColorBase:
    """
    Convert this color to a different color space.

    Direct conversions are used when they exist; otherwise the color walks
    the shortest chain of direct conversions (usually through RGB).

    Args:
        to_space: Target color space (e.g., "rgb", "hsv", "lab"). Defaults to the current space.

    Returns:
        New ColorBase instance in the target space
    """
    from ..conversions.wrapper import convert_color  # local import to avoid cycles

    return convert_color(self, to_space or self.mode)


ColorBase.convert = color_convert


def get_color_class(color_space: Union[str, ColorSpace]) -> type[ColorBase]:
    color_class = unified_space_to_class.get(parse_space(color_space))
    if color_class is None:
        raise ValueError(f"Unsupported color space: {color_space}")
    return color_class
