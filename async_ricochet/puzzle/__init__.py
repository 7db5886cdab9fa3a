"""Ricochet Robots puzzle core: walls, movement, validation and generation."""
from .walls import WallSegment, WallTable
from .engine import slide, apply_move, apply_moves, legal_moves
from .validator import ValidationResult, validate, move_count_if_valid, find_robot_at_goal
from .lshapes import LShape, Orientation, can_place_lshape
from .board import Board, validate_goals
from .robots import place_robots
from .generator import GenerationResult, Quadrant, QUADRANTS, generate, generate_board

__all__ = [
    "WallSegment",
    "WallTable",
    "slide",
    "apply_move",
    "apply_moves",
    "legal_moves",
    "ValidationResult",
    "validate",
    "move_count_if_valid",
    "find_robot_at_goal",
    "LShape",
    "Orientation",
    "can_place_lshape",
    "Board",
    "validate_goals",
    "place_robots",
    "GenerationResult",
    "Quadrant",
    "QUADRANTS",
    "generate",
    "generate_board",
]
