import math

import pytest
from build123d import Box, Location

from build123_dovetail import JointParameters


@pytest.fixture
def params():
    return JointParameters()


@pytest.fixture
def example_params():
    """3/4" x 3 1/2" stock, five tails, 1/8" pins, 8:1 slope (in mm)."""
    return JointParameters(
        stock_thickness=19.05,
        stock_width=88.9,
        tooth_count=5,
        narrow_pin_width=3.175,
        cut_angle=math.degrees(math.atan(8)),
    )


def _material_at(shape, x: float, y: float, z: float, size: float = 0.05) -> bool:
    """True if a tiny cube centred on (x, y, z) overlaps the shape."""
    sample = Box(size, size, size).moved(Location((x, y, z)))
    return (shape & sample).volume > 0


@pytest.fixture
def material_at():
    return _material_at

