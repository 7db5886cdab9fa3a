import random

import pytest

from async_ricochet.core.types import Position, RobotColor, Robots
from async_ricochet.puzzle.walls import WallTable


def make_robots(**positions) -> Robots:
    """Robots in the four corners unless overridden, e.g. make_robots(red=(2, 5))."""
    defaults = {
        RobotColor.RED: (0, 0),
        RobotColor.YELLOW: (15, 0),
        RobotColor.GREEN: (0, 15),
        RobotColor.BLUE: (15, 15),
    }
    for name, pos in positions.items():
        defaults[RobotColor(name)] = pos
    return Robots({color: Position(*pos) for color, pos in defaults.items()})


@pytest.fixture
def robots_factory():
    return make_robots


@pytest.fixture
def empty_walls():
    return WallTable()


@pytest.fixture
def rng():
    return random.Random(1234)
