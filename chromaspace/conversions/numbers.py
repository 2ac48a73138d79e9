import math
import operator
import numpy as np
from decimal import Decimal, ROUND_FLOOR

_HALF = Decimal("0.5")


def round_to(num: float, places: int) -> float:
    """
    Round ``num`` to ``places`` digits after the decimal point.

    Rounding happens on the shortest decimal representation of ``num``, not on
    its binary value, so ``round_to(1.005, 2)`` is ``1.01`` rather than ``1.0``.
    Halves round toward positive infinity (``round_to(-2.5, 0) == -2``).

    Args:
        num: Value to round. NaN and infinities are returned unchanged.
        places: Number of decimal places, a non-negative integer.

    Returns:
        float: the rounded value

    Raises:
        TypeError: if places is not an integer
        ValueError: if places is negative
    """
    places = operator.index(places)
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")
    num = float(num)
    if not math.isfinite(num):
        return num
    shifted = Decimal(repr(num)).scaleb(places)
    rounded = (shifted + _HALF).to_integral_value(rounding=ROUND_FLOOR)
    return float(rounded.scaleb(-places))


def modulo(x: float, n: float) -> float:
    """Floored modulo: the result is in ``[0, n)`` for positive ``n``, even for negative ``x``."""
    return (x % n + n) % n


def float_floor(x: float) -> float:
    """Floor that keeps NaN and infinities as floats instead of raising."""
    return float(np.floor(x))
