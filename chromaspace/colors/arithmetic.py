import numpy as np
from numbers import Real
from typing import Callable, TypeVar
from .color_base import ColorBase

C = TypeVar("C", bound=ColorBase)


def _scale(color: C, by: Real, op: Callable[[np.ndarray, Real], np.ndarray]) -> C:
    if not isinstance(by, Real):
        raise TypeError(f"Colors can only be scaled by a real number, got {type(by).__name__}")
    return color.__class__(*op(color.to_array(), by))


def multiply_color(color: C, by: Real) -> C:
    """
    Multiply every channel of ``color`` by ``by``.

    Channels are scaled independently, hue included, and never clamped:

    >>> multiply_color(Cmyk(0, 1, 0.5, 0.2), 100)
    Cmyk(c=0.0, m=100.0, y=50.0, k=20.0)
    """
    return _scale(color, by, np.multiply)


def divide_color(color: C, by: Real) -> C:
    """Divide every channel of ``color`` by ``by``."""
    if by == 0:
        raise ZeroDivisionError("Cannot divide a color by zero")
    return _scale(color, by, np.divide)


def _scalar_operation(function):
    def operation(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        return function(self, other)
    return operation


# Inject scalar operators into ColorBase
ColorBase.__mul__ = _scalar_operation(multiply_color)
ColorBase.__rmul__ = _scalar_operation(multiply_color)
ColorBase.__truediv__ = _scalar_operation(divide_color)
