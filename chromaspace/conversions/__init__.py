"""
Chromaspace Color Space Conversions
===================================

Pure conversion functions between RGB, HSL, HSV, HCG, HWB, CMYK, CIE XYZ,
CIELAB, LCh and Apple 16-bit RGB, plus grayscale constructors, string
formatters and decimal rounding.

Every function takes one color object (or a scalar) and returns a new one;
nothing is rounded or clamped unless the function says so.

Conversion Functions
--------------------

To RGB:
    hsl_to_rgb, hsv_to_rgb, hcg_to_rgb, hwb_to_rgb, cmyk_to_rgb,
    apple_to_rgb, xyz_to_rgb, gray_to_rgb

Hue family:
    rgb_to_hsl, rgb_to_hsv, rgb_to_hwb
    hsl_to_hsv, hsv_to_hsl
    hsl_to_hcg, hsv_to_hcg, hwb_to_hcg
    hcg_to_hsl, hcg_to_hsv, hcg_to_hwb

CMYK:
    rgb_to_cmyk

CIE:
    rgb_to_xyz, rgb_to_lab, xyz_to_lab, lab_to_lyz, lab_to_xyz,
    lab_to_lch, lch_to_lab

Grayscale (gray in [0, 100]):
    gray_to_rgb, gray_to_hsl, gray_to_hsv, gray_to_hwb, gray_to_cmyk,
    gray_to_lab, gray_to_hex

Formatting:
    rgb_to_hex, hex_to_rgb, rgb_to_css, rgba_to_css, rgb_to_str,
    hsl_to_css, hwb_to_css

Numbers:
    round_to(num, places)
        Decimal-correct rounding (round_to(1.005, 2) == 1.01)
    modulo(x, n)
        Floored modulo used for hue wraparound

High-Level API
--------------
    convert(color, from_space, to_space, output_type=FormatType.FLOAT)
        Tuple-in, tuple-out converter over any reachable pair of spaces
    convert_color(color, to_space)
        Same, on color objects
    find_path(from_space, to_space)
        The chain of spaces a conversion walks

Examples
--------
>>> from chromaspace.colors import Rgb
>>> from chromaspace.conversions import rgb_to_hsl, hsl_to_rgb, rgb_to_hex
>>> hsl = rgb_to_hsl(Rgb(169, 104, 54))
>>> rgb_to_hex(hsl_to_rgb(hsl))
'a96836'
>>> convert((169, 104, 54), "rgb", "cmyk", output_type=FormatType.INT)
(0, 38, 68, 34)
"""

# Numbers
from .numbers import round_to, modulo

# → RGB conversions
from .to_rgb import (
    hsl_to_rgb,
    hsv_to_rgb,
    hcg_to_rgb,
    hwb_to_rgb,
    cmyk_to_rgb,
    apple_to_rgb,
    xyz_to_rgb,
    gray_to_rgb,
)

# Hue family
from .to_hsl import rgb_to_hsl, hsv_to_hsl, hcg_to_hsl, gray_to_hsl
from .to_hsv import rgb_to_hsv, hsl_to_hsv, hcg_to_hsv, gray_to_hsv
from .to_hcg import hsl_to_hcg, hsv_to_hcg, hwb_to_hcg
from .to_hwb import rgb_to_hwb, hcg_to_hwb, gray_to_hwb

# CMYK
from .to_cmyk import rgb_to_cmyk, gray_to_cmyk

# CIE
from .to_xyz import rgb_to_xyz, lab_to_lyz, lab_to_xyz
from .to_lab import rgb_to_lab, xyz_to_lab, lch_to_lab, gray_to_lab
from .to_lch import lab_to_lch

# Formatting
from .formatting import (
    rgb_to_hex,
    gray_to_hex,
    hex_to_rgb,
    rgb_to_css,
    rgba_to_css,
    rgb_to_str,
    hsl_to_css,
    hwb_to_css,
)

# High-level API
from .wrapper import convert, convert_color, find_path, CONVERSIONS

# Types and enums
from ..types.color_types import ColorSpace
from ..types.format_type import FormatType

__all__ = [
    # Numbers
    'round_to', 'modulo',

    # → RGB
    'hsl_to_rgb', 'hsv_to_rgb', 'hcg_to_rgb', 'hwb_to_rgb',
    'cmyk_to_rgb', 'apple_to_rgb', 'xyz_to_rgb', 'gray_to_rgb',

    # Hue family
    'rgb_to_hsl', 'hsv_to_hsl', 'hcg_to_hsl', 'gray_to_hsl',
    'rgb_to_hsv', 'hsl_to_hsv', 'hcg_to_hsv', 'gray_to_hsv',
    'hsl_to_hcg', 'hsv_to_hcg', 'hwb_to_hcg',
    'rgb_to_hwb', 'hcg_to_hwb', 'gray_to_hwb',

    # CMYK
    'rgb_to_cmyk', 'gray_to_cmyk',

    # CIE
    'rgb_to_xyz', 'lab_to_lyz', 'lab_to_xyz',
    'rgb_to_lab', 'xyz_to_lab', 'lch_to_lab', 'gray_to_lab',
    'lab_to_lch',

    # Formatting
    'rgb_to_hex', 'gray_to_hex', 'hex_to_rgb',
    'rgb_to_css', 'rgba_to_css', 'rgb_to_str',
    'hsl_to_css', 'hwb_to_css',

    # High-level API
    'convert', 'convert_color', 'find_path', 'CONVERSIONS',

    # Types
    'ColorSpace', 'FormatType',
]
