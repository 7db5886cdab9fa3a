"""
Board generation.

The pipeline runs in stages, each driven only by the supplied rng:

1) Static walls: the 2x2 center block and two outer-edge spurs per quadrant.
2) Four single-colour goals per quadrant, each in the corner of an L-shape.
3) One multi-colour goal in a random quadrant.
4) Robot placement.

A stage that runs out of attempts ends the whole attempt; ``generate``
reports it in its result and never hands back a partial board.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..core.config import GeneratorConfig
from ..core.errors import PlacementExhausted, PlacementFailure
from ..core.types import ROBOT_COLORS, Goal, GoalColor, Position, center_cells
from .board import Board
from .lshapes import ORIENTATIONS, LShape, add_lshape, can_place_lshape
from .robots import place_robots
from .walls import WallSegment, WallTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Quadrant:
    name: str
    x_min: int
    x_max: int
    y_min: int
    y_max: int

    def contains(self, x: int, y: int) -> bool:
        return self.x_min <= x <= self.x_max and self.y_min <= y <= self.y_max

    def random_position(self, rng: random.Random) -> Position:
        return Position(rng.randint(self.x_min, self.x_max), rng.randint(self.y_min, self.y_max))


def quadrants_from_config(config: GeneratorConfig) -> List[Quadrant]:
    return [Quadrant(*bounds) for bounds in config.quadrants]


QUADRANTS: List[Quadrant] = quadrants_from_config(GeneratorConfig())


@dataclass(frozen=True)
class GenerationResult:
    """Either a finished board or the placement step that failed."""

    board: Optional[Board] = None
    failure: Optional[PlacementFailure] = None

    @property
    def ok(self) -> bool:
        return self.board is not None

    def unwrap(self) -> Board:
        if self.board is None:
            assert self.failure is not None
            raise PlacementExhausted(self.failure)
        return self.board


# ---------------------------------------------------------------------
# Static walls
# ---------------------------------------------------------------------
def add_center_block(walls: WallTable) -> None:
    """Wall in the 2x2 center block from the outside (8 segments)."""
    mid1 = walls.size // 2 - 1
    mid2 = walls.size // 2
    for i in (mid1, mid2):
        walls.add(WallSegment.horizontal(mid1 - 1, i))  # above
        walls.add(WallSegment.horizontal(mid2, i))  # below
        walls.add(WallSegment.vertical(mid1 - 1, i))  # left
        walls.add(WallSegment.vertical(mid2, i))  # right


def add_outer_edge_walls(walls: WallTable, rng: random.Random, config: GeneratorConfig | None = None) -> List[WallSegment]:
    """Add one spur on each of the two board edges of every quadrant.

    Spurs stand perpendicular to their edge, 2-7 cells from the quadrant's
    corner by default.
    """
    config = config or GeneratorConfig()
    size = walls.size

    def near(offset: int) -> int:
        return offset - 1

    def far(offset: int) -> int:
        return size - 1 - offset

    def offset() -> int:
        return rng.randint(config.edge_offset_min, config.edge_offset_max)

    top, bottom = 0, size - 1
    left, right = 0, size - 1
    spurs = [
        # NW: top edge, left edge
        WallSegment.vertical(near(offset()), top),
        WallSegment.horizontal(near(offset()), left),
        # NE: top edge, right edge
        WallSegment.vertical(far(offset()), top),
        WallSegment.horizontal(near(offset()), right),
        # SW: bottom edge, left edge
        WallSegment.vertical(near(offset()), bottom),
        WallSegment.horizontal(far(offset()), left),
        # SE: bottom edge, right edge
        WallSegment.vertical(far(offset()), bottom),
        WallSegment.horizontal(far(offset()), right),
    ]
    for spur in spurs:
        walls.add(spur)
    return spurs


# ---------------------------------------------------------------------
# Goal placement
# ---------------------------------------------------------------------
def place_goal_in_quadrant(
    quadrant: Quadrant,
    existing: Sequence[LShape],
    walls: WallTable,
    rng: random.Random,
    max_attempts: int = 100,
) -> Optional[LShape]:
    """Try up to ``max_attempts`` random (cell, orientation) pairs; None if none fits."""
    center = center_cells(walls.size)
    for _ in range(max_attempts):
        position = quadrant.random_position(rng)
        orientation = rng.choice(ORIENTATIONS)
        if position in center:
            continue
        if can_place_lshape(position, orientation, existing, walls):
            return LShape(position, orientation)
    return None


def generate(rng: random.Random, config: GeneratorConfig | None = None) -> GenerationResult:
    """Run one generation attempt.

    All state lives in locals threaded through the stages, so a failed
    attempt leaves nothing behind.
    """
    config = config or GeneratorConfig()
    quadrants = quadrants_from_config(config)

    walls = WallTable(config.board_size)
    add_center_block(walls)
    add_outer_edge_walls(walls, rng, config)

    lshapes: List[LShape] = []
    goals: List[Goal] = []

    def commit(lshape: LShape, color: GoalColor) -> None:
        add_lshape(walls, lshape)
        lshapes.append(lshape)
        goals.append(Goal(lshape.position, color))

    for quadrant in quadrants:
        for robot_color in ROBOT_COLORS:
            color = GoalColor(robot_color.value)
            lshape = place_goal_in_quadrant(quadrant, lshapes, walls, rng, config.goal_attempts)
            if lshape is None:
                failure = PlacementFailure("goals", config.goal_attempts, quadrant.name, color.value)
                logger.debug(failure.message)
                return GenerationResult(failure=failure)
            commit(lshape, color)

    quadrant = rng.choice(quadrants)
    lshape = place_goal_in_quadrant(quadrant, lshapes, walls, rng, config.multi_goal_attempts)
    if lshape is None:
        failure = PlacementFailure("multi_goal", config.multi_goal_attempts, quadrant.name, GoalColor.MULTI.value)
        logger.debug(failure.message)
        return GenerationResult(failure=failure)
    commit(lshape, GoalColor.MULTI)

    try:
        robots = place_robots(
            rng,
            (goal.position for goal in goals),
            size=config.board_size,
            max_attempts=config.robot_attempts,
        )
    except PlacementExhausted as exc:
        logger.debug(exc.failure.message)
        return GenerationResult(failure=exc.failure)

    board = Board(walls=walls, goals=tuple(goals), robots=robots, lshapes=tuple(lshapes))
    return GenerationResult(board=board)


def generate_board(
    rng: random.Random | None = None,
    config: GeneratorConfig | None = None,
    max_restarts: int | None = None,
) -> Board:
    """Generate a board, restarting from scratch whenever an attempt fails.

    Restarts keep drawing from the same rng, so each one sees fresh
    randomness. Raises PlacementExhausted once the restart budget is spent.
    """
    rng = rng or random.Random()
    config = config or GeneratorConfig()
    restarts = max_restarts if max_restarts is not None else config.max_restarts
    failure: PlacementFailure | None = None
    for attempt in range(restarts):
        result = generate(rng, config)
        if result.ok:
            if attempt:
                logger.debug("Board generated after %d restarts", attempt)
            return result.unwrap()
        failure = result.failure
        logger.info("Generation attempt %d/%d failed: %s", attempt + 1, restarts, failure.message)
    assert failure is not None
    logger.warning("Giving up after %d generation attempts: %s", restarts, failure.message)
    raise PlacementExhausted(failure, restarts=restarts)
