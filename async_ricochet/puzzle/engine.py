from __future__ import annotations

from typing import Iterable, List

from ..core.types import DIRECTIONS, Direction, Move, Position, RobotColor, Robots
from .walls import WallTable


def slide(walls: WallTable, robots: Robots, robot: RobotColor, direction: Direction) -> Position:
    """Return the position where ``robot`` stops when moved in ``direction``.

    The robot keeps going until the next cell is off the board, behind a wall,
    or occupied by another robot. Staying put is a legal result.
    """
    size = walls.size
    robot = RobotColor(robot)
    direction = Direction(direction)
    dx, dy = direction.delta
    others = robots.occupied(exclude=robot)
    cx, cy = robots[robot]
    while True:
        nx, ny = cx + dx, cy + dy
        if not (0 <= nx < size and 0 <= ny < size):
            break
        if walls.is_blocking(cx, cy, direction):
            break
        if (nx, ny) in others:
            break
        cx, cy = nx, ny
    return Position(cx, cy)


def apply_move(robots: Robots, walls: WallTable, move: Move) -> Robots:
    """Return new robot positions after a single move."""
    return robots.with_position(move.robot, slide(walls, robots, move.robot, move.direction))


def apply_moves(robots: Robots, walls: WallTable, moves: Iterable[Move]) -> Robots:
    for move in moves:
        robots = apply_move(robots, walls, move)
    return robots


def legal_moves(robots: Robots, walls: WallTable) -> List[Move]:
    """Moves that actually change a robot's position."""
    moves: List[Move] = []
    for color, pos in robots.items():
        for direction in DIRECTIONS:
            if slide(walls, robots, color, direction) != pos:
                moves.append(Move(color, direction))
    return moves
