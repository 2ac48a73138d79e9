"""Basic Chromaspace usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromaspace import (
    Rgb,
    Hsl,
    Cmyk,
    convert,
    find_path,
    rgb_to_hsl,
    rgb_to_hex,
    hex_to_rgb,
    hsl_to_css,
    rgba_to_css,
    round_to,
    multiply_color,
)
from chromaspace.conversions import FormatType


def demonstrate_colors() -> None:
    # Construct colors and convert between spaces.
    accent = hex_to_rgb("a96836")
    print("Parsed hex:", accent)

    hsl = rgb_to_hsl(accent)
    print("RGB -> HSL:", hsl)
    print("As CSS:", hsl_to_css(hsl))
    print("Back to hex:", rgb_to_hex(Rgb(hsl)))

    print("RGB -> LCh:", accent.convert("lch"))
    print("Route HWB -> HSV:", " -> ".join(space.value for space in find_path("hwb", "hsv")))


def demonstrate_tuples() -> None:
    # Plain tuples in, plain tuples out.
    print("CMYK (int):", convert((169, 104, 54), "rgb", "cmyk", output_type=FormatType.INT))
    print("Lab (float):", convert((169, 104, 54), "rgb", "lab"))


def demonstrate_helpers() -> None:
    print("round_to(1.005, 2):", round_to(1.005, 2))
    print("Half transparent:", rgba_to_css(Rgb(255, 127.5, 0), 0.5))
    print("Unit CMYK scaled:", multiply_color(Cmyk(0, 1, 0.5, 0.2), 100))
    print("Lighter:", Hsl(26, 52, 44).replace(l=70))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_tuples()
    demonstrate_helpers()
