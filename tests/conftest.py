import pytest

from gravity.BlackHole import BlackHole
from gravity.Vec2 import Vec2


@pytest.fixture
def black_hole():
    # mass 5, capture radius 50 / 600
    return BlackHole(Vec2(0, 0), 50)


@pytest.fixture
def heavy_black_hole():
    # size 10 with unit ratio: mass 10, capture radius 10 / 600
    return BlackHole(Vec2(0, 0), 10, mass_ratio=1)
