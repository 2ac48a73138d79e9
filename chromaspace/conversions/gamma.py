"""sRGB transfer function (companding) for a single channel in [0, 1]."""
from .constants import (
    SRGB_TO_LINEAR_TH,
    LINEAR_TO_SRGB_TH,
    SRGB_OFFSET,
    SRGB_DIVISOR,
    SRGB_SLOPE,
    SRGB_GAMMA,
)


def srgb_to_linear(channel: float) -> float:
    if channel > SRGB_TO_LINEAR_TH:
        return ((channel + SRGB_OFFSET) / SRGB_DIVISOR) ** SRGB_GAMMA
    return channel / SRGB_SLOPE


def linear_to_srgb(channel: float) -> float:
    if channel > LINEAR_TO_SRGB_TH:
        return SRGB_DIVISOR * channel ** (1.0 / SRGB_GAMMA) - SRGB_OFFSET
    return channel * SRGB_SLOPE
