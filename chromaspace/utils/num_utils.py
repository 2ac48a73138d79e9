import math


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves toward positive infinity.

    Raises:
        ValueError: if value is NaN or infinite
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot round non-finite value {value!r}")
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def format_number(value: float) -> str:
    """Shortest decimal text for a number; integral values print without '.0'."""
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite value {value!r}")
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
