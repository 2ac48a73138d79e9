from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorBase, build_registry


class Hcg(ColorBase):
    """Hue in degrees [0, 360), chroma and gray in [0, 100]."""
    __slots__ = ()
    mode:     ClassVar[ColorSpace] = ColorSpace.HCG
    channels: ClassVar[Tuple[str, ...]] = ("h", "c", "g")


hcg_space_to_class = build_registry(Hcg)
