"""
Root conftest.py - Sets up Python path and shared options for tests.

This conftest is loaded by pytest before any test collection begins.
"""
import sys
import os

import pytest

# Get the project root (where this conftest.py lives)
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

# Add project root at the start if not already there
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


def pytest_addoption(parser):
    parser.addoption(
        "--exhaustive",
        action="store_true",
        default=False,
        help="run the RGB round-trip tests over all 256**3 colors instead of a sampled grid",
    )


@pytest.fixture(scope="session")
def rgb_levels(request):
    """Channel values the RGB round-trip tests iterate over."""
    from tests.utils import RGB_LEVELS

    if request.config.getoption("--exhaustive"):
        return list(range(256))
    return RGB_LEVELS
