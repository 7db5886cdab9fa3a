"""
Puzzle simulation core for asynchronous Ricochet Robots.
"""
from .core import (
    Direction,
    Goal,
    GoalColor,
    Move,
    Position,
    RobotColor,
    Robots,
    GeneratorConfig,
    PlacementExhausted,
)
from .puzzle import Board, WallTable, generate, generate_board, place_robots, slide, validate

__version__ = "0.1.0"

__all__ = [
    "Direction",
    "Goal",
    "GoalColor",
    "Move",
    "Position",
    "RobotColor",
    "Robots",
    "GeneratorConfig",
    "PlacementExhausted",
    "Board",
    "WallTable",
    "generate",
    "generate_board",
    "place_robots",
    "slide",
    "validate",
]
