from .dimension import get_dimension
from .num_utils import format_number, round_half_up

__all__ = ["get_dimension", "format_number", "round_half_up"]
