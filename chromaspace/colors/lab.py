from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorBase, build_registry


class Lab(ColorBase):
    """CIELAB (D65): lightness in [0, 100], a and b unbounded."""
    __slots__ = ()
    mode:     ClassVar[ColorSpace] = ColorSpace.LAB
    channels: ClassVar[Tuple[str, ...]] = ("l", "a", "b")


class Lch(ColorBase):
    """Cylindrical CIELAB: lightness, chroma and hue in degrees [0, 360)."""
    __slots__ = ()
    mode:     ClassVar[ColorSpace] = ColorSpace.LCH
    channels: ClassVar[Tuple[str, ...]] = ("l", "c", "h")


class Xyz(ColorBase):
    """CIE XYZ tristimulus values on the [0, 100] scale."""
    __slots__ = ()
    mode:     ClassVar[ColorSpace] = ColorSpace.XYZ
    channels: ClassVar[Tuple[str, ...]] = ("x", "y", "z")


class Lyz(ColorBase):
    """Un-normalized XYZ-like triple produced when reversing Lab."""
    __slots__ = ()
    mode:     ClassVar[ColorSpace] = ColorSpace.LYZ
    channels: ClassVar[Tuple[str, ...]] = ("l", "y", "z")


lab_space_to_class = build_registry(Lab, Lch, Xyz, Lyz)
