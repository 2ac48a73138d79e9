import itertools

from chromaspace.colors import ColorBase

# 0..255 in steps of 5 plus the values next to the channel edges and the midpoint;
# conftest.py swaps in range(256) under --exhaustive
RGB_LEVELS = sorted(set(range(0, 256, 5)) | {1, 2, 127, 128, 253, 254})
COARSE_RGB_LEVELS = list(range(0, 256, 15))


def rgb_triples(levels=RGB_LEVELS):
    return itertools.product(levels, repeat=3)


def assert_almost_equals(actual, expected, tolerance=1e-7, msg=None):
    """Absolute-difference check; exact matches (including equal infinities) always pass."""
    if actual == expected:
        return
    delta = abs(expected - actual)
    suffix = f": {msg}" if msg else "."
    assert delta <= tolerance, (
        f"Expected {actual!r} to be close to {expected!r}: "
        f"delta {delta:.3e} is greater than {tolerance:.3e}{suffix}"
    )


def assert_almost_equals_color(actual, expected, tolerance=1e-7, msg=None):
    """Channel-wise ``assert_almost_equals`` for colors or plain sequences."""
    if isinstance(actual, ColorBase) and isinstance(expected, ColorBase):
        assert actual.mode == expected.mode, f"{actual.mode} != {expected.mode}"
    assert len(actual) == len(expected)
    for index, (a, e) in enumerate(zip(actual, expected)):
        label = f"channel {index} of {actual!r}"
        assert_almost_equals(a, e, tolerance, f"{label} ({msg})" if msg else label)
