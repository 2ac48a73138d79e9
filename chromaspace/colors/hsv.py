from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorBase, build_registry


class Hsv(ColorBase):
    """Hue in degrees [0, 360), saturation and value in [0, 100]."""
    __slots__ = ()
    mode:     ClassVar[ColorSpace] = ColorSpace.HSV
    channels: ClassVar[Tuple[str, ...]] = ("h", "s", "v")


hsv_space_to_class = build_registry(Hsv)
