"""
Solution replay and validation.

A solution is replayed move by move on a private copy of the starting
robots. Single-colour goals must be reached by the robot of that colour;
the multi-colour goal accepts whichever robot ends on it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from ..core.errors import FailureKind, MalformedMoveError, ValidationFailure
from ..core.types import MAX_SOLUTION_MOVES, Goal, Move, Position, RobotColor, Robots
from .engine import apply_move
from .walls import WallTable


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    move_count: int
    winning_robot: Optional[RobotColor] = None
    failure: Optional[ValidationFailure] = None
    final_positions: Optional[Robots] = None

    @property
    def reason(self) -> Optional[str]:
        return self.failure.reason if self.failure else None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"valid": self.valid, "moveCount": self.move_count}
        if self.winning_robot is not None:
            data["winningRobot"] = self.winning_robot.value
        if self.failure is not None:
            data["failure"] = self.failure.to_dict()
        if self.final_positions is not None:
            data["finalPositions"] = self.final_positions.to_dict()
        return data


def _reject(moves: Sequence[Any], failure: ValidationFailure) -> ValidationResult:
    return ValidationResult(valid=False, move_count=len(moves), failure=failure)


def parse_moves(moves: Sequence[Any]) -> List[Move]:
    """Coerce every entry to a Move, raising MalformedMoveError at the first bad one."""
    return [Move.coerce(move, index) for index, move in enumerate(moves)]


def find_robot_at_goal(robots: Robots, position: Position) -> Optional[RobotColor]:
    return robots.robot_at(position)


def validate(
    initial_robots: Robots,
    walls: WallTable,
    moves: Sequence[Any],
    goal: Goal,
) -> ValidationResult:
    """Replay ``moves`` from ``initial_robots`` and check ``goal``.

    Never raises for bad input moves; the result carries a typed failure
    instead. ``move_count`` is always ``len(moves)``.
    """
    if len(moves) == 0:
        return _reject(moves, ValidationFailure(FailureKind.EMPTY_SOLUTION, "Solution must contain at least one move"))
    if len(moves) > MAX_SOLUTION_MOVES:
        return _reject(
            moves,
            ValidationFailure(
                FailureKind.SOLUTION_TOO_LONG,
                f"Solution cannot exceed {MAX_SOLUTION_MOVES} moves",
            ),
        )

    try:
        parsed = parse_moves(moves)
    except MalformedMoveError as exc:
        return _reject(moves, ValidationFailure(FailureKind.MALFORMED_MOVE, str(exc), index=exc.index))

    robots = initial_robots
    for move in parsed:
        robots = apply_move(robots, walls, move)

    target = goal.position
    if goal.is_multi:
        winner = find_robot_at_goal(robots, target)
        if winner is not None:
            return ValidationResult(True, len(moves), winning_robot=winner, final_positions=robots)
        return ValidationResult(
            False,
            len(moves),
            failure=ValidationFailure(
                FailureKind.GOAL_NOT_REACHED,
                f"No robot reached multi-color goal position ({target.x}, {target.y})",
                expected=target,
            ),
            final_positions=robots,
        )

    required = goal.color.robot
    actual = robots[required]
    if actual == target:
        return ValidationResult(True, len(moves), winning_robot=required, final_positions=robots)
    return ValidationResult(
        False,
        len(moves),
        failure=ValidationFailure(
            FailureKind.GOAL_NOT_REACHED,
            f"Robot {required.value} ended at ({actual.x}, {actual.y}), "
            f"not goal position ({target.x}, {target.y})",
            robot=required,
            expected=target,
            actual=actual,
        ),
        final_positions=robots,
    )


def move_count_if_valid(initial_robots: Robots, walls: WallTable, moves: Sequence[Any], goal: Goal) -> int:
    """Return ``len(moves)`` for a valid solution, -1 otherwise."""
    return len(moves) if validate(initial_robots, walls, moves, goal).valid else -1
