"""
Chromaspace Color Classes
=========================

Immutable value objects, one class per color space.

Usage
-----
>>> from chromaspace.colors import Rgb
>>> color = Rgb(169, 104, 54)
>>> color.r
169.0
>>> r, g, b = color
>>> color.convert("hsl")
Hsl(h=26.0869..., s=51.5695..., l=43.7254...)
>>> color * 0.5
Rgb(r=84.5, g=52.0, b=27.0)

Color Classes
-------------
    - Rgb: r, g, b in [0, 255]
    - Apple: r16, g16, b16 in [0, 65535]
    - Hsl, Hsv, Hcg, Hwb: hue in degrees, the rest in [0, 100]
    - Cmyk: c, m, y, k in [0, 100]
    - Lab, Lch, Xyz, Lyz: CIE spaces (D65)

Notes
-----
- Channels are stored as floats and never clamped
- Assigning to an attribute raises AttributeError
- Passing a color of another space to a constructor converts it
"""

from .color_base import ColorBase
from .rgb import Rgb, Apple
from .hsl import Hsl
from .hsv import Hsv
from .hcg import Hcg
from .hwb import Hwb
from .cmyk import Cmyk
from .lab import Lab, Lch, Xyz, Lyz
from .color import color_convert, get_color_class, unified_space_to_class
from .arithmetic import multiply_color, divide_color

__all__ = [
    'ColorBase',
    'Rgb', 'Apple',
    'Hsl', 'Hsv', 'Hcg', 'Hwb',
    'Cmyk',
    'Lab', 'Lch', 'Xyz', 'Lyz',
    'color_convert', 'get_color_class', 'unified_space_to_class',
    'multiply_color', 'divide_color',
]
