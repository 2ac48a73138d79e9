"""
String forms of colors: hex triplets and CSS functional notation.

Channels are rounded half up to integers before RGB strings are built;
hue, percentage and alpha fields are rounded to two decimals with
``round_to``. None of these functions accept NaN or infinite channels.
"""
import re

from ..colors.rgb import Rgb
from ..colors.hsl import Hsl
from ..colors.hwb import Hwb
from ..types.format_type import RGB_MAX, PERCENT_MAX
from ..utils import format_number, round_half_up
from .numbers import round_to

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


def _hex_byte(value: float) -> str:
    return format(round_half_up(value), "x").rjust(2, "0")


def _rounded_channels(rgb: Rgb) -> str:
    return ",".join(str(round_half_up(channel)) for channel in rgb)


def rgb_to_css(rgb: Rgb) -> str:
    """``Rgb(0, 127.4, 255)`` -> ``"rgb(0,127,255)"``"""
    return f"rgb({_rounded_channels(rgb)})"


def rgb_to_str(rgb: Rgb) -> str:
    """``Rgb(0, 127.4, 255)`` -> ``"0,127,255"``"""
    return _rounded_channels(rgb)


def rgba_to_css(rgb: Rgb, alpha: float) -> str:
    """
    Args:
        rgb: channels in [0, 255], rounded to integers
        alpha: opacity in [0, 1], rounded to two decimals

    Returns:
        str: ``"rgba(r,g,b,a)"``
    """
    return f"rgba({_rounded_channels(rgb)},{format_number(round_to(alpha, 2))})"


def hsl_to_css(hsl: Hsl) -> str:
    h, s, l = (format_number(round_to(v, 2)) for v in hsl)
    return f"hsl({h}deg,{s}%,{l}%)"


def hwb_to_css(hwb: Hwb) -> str:
    h, w, b = (format_number(round_to(v, 2)) for v in hwb)
    return f"hwb({h}deg,{w}%,{b}%)"


def rgb_to_hex(rgb: Rgb) -> str:
    """Lowercase ``rrggbb`` without a leading ``#``."""
    return "".join(_hex_byte(channel) for channel in rgb)


def gray_to_hex(gray: float) -> str:
    """gray in [0, 100] -> ``rrggbb`` with three equal components."""
    return _hex_byte((gray / PERCENT_MAX) * RGB_MAX) * 3


def hex_to_rgb(value: str) -> Rgb:
    """
    Parse the leading hexadecimal integer of ``value`` into an Rgb.

    Leading whitespace, a sign and a ``0x`` prefix are accepted; anything
    after the hex digits is ignored. The number is split into its three low
    bytes. Input with no hex digits in front (including ``"#a96836"``)
    gives black.
    """
    text = value.lstrip()
    sign = 1
    if text.startswith(("+", "-")):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    if text[:2].lower() == "0x":
        text = text[2:]
    match = _HEX_DIGITS.match(text)
    if match is None:
        return Rgb(0, 0, 0)
    number = sign * int(match.group(), 16)
    return Rgb((number >> 16) & 0xFF, (number >> 8) & 0xFF, number & 0xFF)
