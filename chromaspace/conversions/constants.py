"""Numeric constants shared by the conversion modules."""
import numpy as np

# sRGB transfer function
SRGB_TO_LINEAR_TH = 0.04045
LINEAR_TO_SRGB_TH = 0.0031308
SRGB_OFFSET = 0.055
SRGB_DIVISOR = 1.055
SRGB_SLOPE = 12.92
SRGB_GAMMA = 2.4

# sRGB (D65) -> XYZ scaled to [0, 100]
M_SRGB_XYZ = np.array([
    [0.412453, 0.357580, 0.180423],
    [0.212671, 0.715160, 0.072169],
    [0.019334, 0.119193, 0.950227],
])

# Four-digit variant used on the direct RGB -> Lab path
M_SRGB_XYZ_LAB = np.array([
    [0.4124, 0.3576, 0.1805],
    [0.2126, 0.7152, 0.0722],
    [0.0193, 0.1192, 0.9505],
])

# XYZ in [0, 1] -> linear sRGB
M_XYZ_SRGB = np.array([
    [3.2404542, -1.5371385, -0.4985314],
    [-0.969266, 1.8760108, 0.041556],
    [0.0556434, -0.2040259, 1.0572252],
])

# D65 reference white, Y normalized to 1
D65_WHITE = np.array([0.95047, 1.00000, 1.08883])
# Same white point on the [0, 100] XYZ scale
D65_WHITE_100 = np.array([95.047, 100.0, 108.883])

# CIELAB companding
LAB_E = 0.008856
LAB_K = 7.787
LAB_OFFSET = 16.0 / 116.0
LAB_L_MULT = 116
LAB_L_SUB = 16
LAB_A_MULT = 500
LAB_B_MULT = 200

# Guarded minimum for the black branch of HSL <-> HSV
HSx_MIN_LIGHTNESS = 0.01
