"""
Value types, errors and configuration shared across the puzzle core.
"""
from .types import (
    BOARD_SIZE,
    MAX_SOLUTION_MOVES,
    Direction,
    Goal,
    GoalColor,
    Move,
    Position,
    RobotColor,
    Robots,
)
from .errors import (
    BoardInvariantError,
    FailureKind,
    MalformedMoveError,
    PlacementExhausted,
    PlacementFailure,
    RicochetError,
    ValidationFailure,
)
from .config import GeneratorConfig

__all__ = [
    "BOARD_SIZE",
    "MAX_SOLUTION_MOVES",
    "Direction",
    "Goal",
    "GoalColor",
    "Move",
    "Position",
    "RobotColor",
    "Robots",
    "BoardInvariantError",
    "FailureKind",
    "MalformedMoveError",
    "PlacementExhausted",
    "PlacementFailure",
    "RicochetError",
    "ValidationFailure",
    "GeneratorConfig",
]
