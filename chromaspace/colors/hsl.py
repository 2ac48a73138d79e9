from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorBase, build_registry


class Hsl(ColorBase):
    """Hue in degrees [0, 360), saturation and lightness in [0, 100]."""
    __slots__ = ()
    mode:     ClassVar[ColorSpace] = ColorSpace.HSL
    channels: ClassVar[Tuple[str, ...]] = ("h", "s", "l")


hsl_space_to_class = build_registry(Hsl)
