from collections import deque
from functools import lru_cache
from typing import Callable, Dict, Sequence, Tuple, Union

from ..colors.color_base import ColorBase
from ..colors.color import get_color_class
from ..types.color_types import ColorSpace, ColorValue, element_to_array, parse_space
from ..types.format_type import FormatType
from ..utils import round_half_up

from .to_rgb import hsl_to_rgb, hsv_to_rgb, hcg_to_rgb, hwb_to_rgb, cmyk_to_rgb, apple_to_rgb, xyz_to_rgb
from .to_hsl import rgb_to_hsl, hsv_to_hsl, hcg_to_hsl
from .to_hsv import rgb_to_hsv, hsl_to_hsv, hcg_to_hsv
from .to_hcg import hsl_to_hcg, hsv_to_hcg, hwb_to_hcg
from .to_hwb import rgb_to_hwb, hcg_to_hwb
from .to_cmyk import rgb_to_cmyk
from .to_xyz import rgb_to_xyz, lab_to_xyz, lab_to_lyz
from .to_lab import rgb_to_lab, xyz_to_lab, lch_to_lab
from .to_lch import lab_to_lch

S = ColorSpace

# Direct conversions; everything else is routed through them.
# Within a source space, earlier entries win ties in find_path, so the
# hue-family shortcuts are listed before the RGB hub.
CONVERSIONS: Dict[Tuple[ColorSpace, ColorSpace], Callable[[ColorBase], ColorBase]] = {
    (S.RGB, S.HSL): rgb_to_hsl,
    (S.RGB, S.HSV): rgb_to_hsv,
    (S.RGB, S.HWB): rgb_to_hwb,
    (S.RGB, S.CMYK): rgb_to_cmyk,
    (S.RGB, S.XYZ): rgb_to_xyz,
    (S.RGB, S.LAB): rgb_to_lab,
    (S.HSL, S.HSV): hsl_to_hsv,
    (S.HSL, S.HCG): hsl_to_hcg,
    (S.HSL, S.RGB): hsl_to_rgb,
    (S.HSV, S.HSL): hsv_to_hsl,
    (S.HSV, S.HCG): hsv_to_hcg,
    (S.HSV, S.RGB): hsv_to_rgb,
    (S.HCG, S.HSL): hcg_to_hsl,
    (S.HCG, S.HSV): hcg_to_hsv,
    (S.HCG, S.HWB): hcg_to_hwb,
    (S.HCG, S.RGB): hcg_to_rgb,
    (S.HWB, S.HCG): hwb_to_hcg,
    (S.HWB, S.RGB): hwb_to_rgb,
    (S.CMYK, S.RGB): cmyk_to_rgb,
    (S.APPLE, S.RGB): apple_to_rgb,
    (S.XYZ, S.RGB): xyz_to_rgb,
    (S.XYZ, S.LAB): xyz_to_lab,
    (S.LAB, S.XYZ): lab_to_xyz,
    (S.LAB, S.LYZ): lab_to_lyz,
    (S.LAB, S.LCH): lab_to_lch,
    (S.LCH, S.LAB): lch_to_lab,
}


@lru_cache(maxsize=None)
def find_path(from_space: ColorSpace, to_space: ColorSpace) -> Tuple[ColorSpace, ...]:
    """
    Shortest chain of spaces leading from ``from_space`` to ``to_space``
    over the direct conversions, both ends included.

    Raises:
        ValueError: if ``to_space`` cannot be reached
    """
    from_space, to_space = parse_space(from_space), parse_space(to_space)
    previous: Dict[ColorSpace, ColorSpace] = {}
    queue = deque([from_space])
    seen = {from_space}
    while queue:
        space = queue.popleft()
        if space == to_space:
            path = [space]
            while path[-1] != from_space:
                path.append(previous[path[-1]])
            return tuple(reversed(path))
        for (src, dst) in CONVERSIONS:
            if src == space and dst not in seen:
                seen.add(dst)
                previous[dst] = space
                queue.append(dst)
    raise ValueError(f"No conversion path from {from_space.value} to {to_space.value}")


def convert_color(color: ColorBase, to_space: Union[str, ColorSpace]) -> ColorBase:
    """Convert a color value object to ``to_space``, walking the shortest path."""
    path = find_path(color.mode, parse_space(to_space))
    for src, dst in zip(path, path[1:]):
        color = CONVERSIONS[(src, dst)](color)
    return color


def convert(
    color: Union[ColorBase, ColorValue],
    from_space: Union[str, ColorSpace],
    to_space:   Union[str, ColorSpace],
    output_type: FormatType = FormatType.FLOAT,
) -> Tuple[Union[float, int], ...]:
    """
    Universal converter working on plain tuples.

    Args:
        color: channel values in ``from_space`` order, or a color object
        from_space: source space name, e.g. ``"rgb"``
        to_space: target space name
        output_type: ``FLOAT`` keeps raw values, ``INT`` rounds each channel half up

    Returns:
        tuple of channel values in ``to_space``

    Raises:
        ValueError: for unknown spaces, a wrong channel count or an unreachable target
    """
    from_space = parse_space(from_space)
    if isinstance(color, ColorBase):
        if color.mode != from_space:
            raise ValueError(f"Expected a {from_space.value} color, got {color.mode.value}")
        source = color
    else:
        values: Sequence[float] = element_to_array(color).ravel()
        source = get_color_class(from_space)(*values)

    result = convert_color(source, to_space).value
    if FormatType(output_type) == FormatType.INT:
        return tuple(round_half_up(v) for v in result)
    return result
