from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorBase, build_registry


class Cmyk(ColorBase):
    """Cyan, magenta, yellow and key (black), each in [0, 100]."""
    __slots__ = ()
    mode:     ClassVar[ColorSpace] = ColorSpace.CMYK
    channels: ClassVar[Tuple[str, ...]] = ("c", "m", "y", "k")


cmyk_space_to_class = build_registry(Cmyk)
