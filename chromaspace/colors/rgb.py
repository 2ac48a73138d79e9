from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorBase, build_registry


class Rgb(ColorBase):
    """sRGB, each channel in [0, 255], not necessarily integral."""
    __slots__ = ()
    mode:     ClassVar[ColorSpace] = ColorSpace.RGB
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b")


class Apple(ColorBase):
    """16-bit RGB as used by Apple color pickers, each channel in [0, 65535]."""
    __slots__ = ()
    mode:     ClassVar[ColorSpace] = ColorSpace.APPLE
    channels: ClassVar[Tuple[str, ...]] = ("r16", "g16", "b16")


rgb_space_to_class = build_registry(Rgb, Apple)
