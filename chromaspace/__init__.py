"""
Chromaspace - Color Space Conversions
=====================================

Pure, exact conversions between the common color spaces, with immutable
color value objects and small formatting helpers.

Key Features
------------
- RGB, HSL, HSV, HCG, HWB, CMYK, CIE XYZ, CIELAB, LCh and Apple 16-bit RGB
- Direct shortcuts inside the hue family (HSL ↔ HSV ↔ HCG ↔ HWB)
- Round trips through RGB exact to floating-point precision
- Hex and CSS string output
- Decimal-correct rounding (round_to(1.005, 2) == 1.01)
- Immutable color instances for safe sharing

Quick Start
-----------
>>> from chromaspace import Rgb, rgb_to_hsl, rgb_to_hex
>>>
>>> accent = Rgb(169, 104, 54)
>>> rgb_to_hsl(accent)
Hsl(h=26.0869..., s=51.5695..., l=43.7254...)
>>> rgb_to_hex(accent)
'a96836'
>>>
>>> # Any reachable pair of spaces
>>> accent.convert("lch")

Modules
-------
- colors: value classes (Rgb, Hsl, ...) and scalar arithmetic
- conversions: conversion functions, formatting, rounding, convert()
- compat: deprecated compact names (rgb2hsl, roundTo, ...)
"""

from .colors import (
    ColorBase,
    Rgb, Apple,
    Hsl, Hsv, Hcg, Hwb,
    Cmyk,
    Lab, Lch, Xyz, Lyz,
    color_convert,
    get_color_class,
    multiply_color,
    divide_color,
)
from .conversions import *  # noqa: F401,F403
from .conversions import __all__ as _conversions_all

__version__ = "1.0.0"

__all__ = [
    # Color classes
    "ColorBase",
    "Rgb", "Apple",
    "Hsl", "Hsv", "Hcg", "Hwb",
    "Cmyk",
    "Lab", "Lch", "Xyz", "Lyz",

    # Color utilities
    "color_convert",
    "get_color_class",
    "multiply_color",
    "divide_color",

    # Conversions
    *_conversions_all,

    # Version
    "__version__",
]
