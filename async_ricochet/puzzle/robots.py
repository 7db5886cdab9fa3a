from __future__ import annotations

import random
from typing import Dict, Iterable, Tuple

from ..core.errors import PlacementExhausted, PlacementFailure
from ..core.types import BOARD_SIZE, ROBOT_COLORS, Position, RobotColor, Robots, center_cells


def place_robots(
    rng: random.Random,
    goals: Iterable[Tuple[int, int]],
    size: int = BOARD_SIZE,
    max_attempts: int = 1000,
) -> Robots:
    """Scatter the four robots on distinct cells that hold no goal and are outside the center block.

    Raises PlacementExhausted if ``max_attempts`` random draws are not enough.
    """
    blocked = set(center_cells(size))
    blocked.update((int(x), int(y)) for x, y in goals)
    positions: Dict[RobotColor, Position] = {}
    attempts = 0
    for color in ROBOT_COLORS:
        while True:
            if attempts >= max_attempts:
                raise PlacementExhausted(PlacementFailure(step="robots", attempts=attempts))
            attempts += 1
            pos = Position(rng.randrange(size), rng.randrange(size))
            if pos in blocked or pos in positions.values():
                continue
            positions[color] = pos
            break
    return Robots(positions)
