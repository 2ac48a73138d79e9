from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorBase, build_registry


class Hwb(ColorBase):
    """Hue in degrees [0, 360), whiteness and blackness in [0, 100]."""
    __slots__ = ()
    mode:     ClassVar[ColorSpace] = ColorSpace.HWB
    channels: ClassVar[Tuple[str, ...]] = ("h", "w", "b")


hwb_space_to_class = build_registry(Hwb)
