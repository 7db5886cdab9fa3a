"""
Value types shared by the engine, validator and generator.

Enum values double as the wire format used by the surrounding API
("red", "up", "multi", ...).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, Mapping, NamedTuple, Tuple

from .errors import MalformedMoveError

BOARD_SIZE = 16
MAX_SOLUTION_MOVES = 1000


def center_cells(size: int = BOARD_SIZE) -> frozenset[Tuple[int, int]]:
    """The 2x2 block of (x, y) cells in the middle of the board."""
    mid1, mid2 = size // 2 - 1, size // 2
    return frozenset({(mid1, mid1), (mid2, mid1), (mid1, mid2), (mid2, mid2)})


def is_outer_ring(x: int, y: int, size: int = BOARD_SIZE) -> bool:
    return x in (0, size - 1) or y in (0, size - 1)


class RobotColor(str, Enum):
    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"


class GoalColor(str, Enum):
    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    MULTI = "multi"

    @property
    def robot(self) -> RobotColor | None:
        """Robot that must reach a goal of this colour; None for MULTI."""
        if self is GoalColor.MULTI:
            return None
        return RobotColor(self.value)


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

ROBOT_COLORS: Tuple[RobotColor, ...] = tuple(RobotColor)
DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)
GOAL_COLORS: Tuple[GoalColor, ...] = tuple(GoalColor)


class Position(NamedTuple):
    x: int
    y: int

    def step(self, direction: Direction) -> "Position":
        dx, dy = direction.delta
        return Position(self.x + dx, self.y + dy)

    def in_bounds(self, size: int = BOARD_SIZE) -> bool:
        return 0 <= self.x < size and 0 <= self.y < size

    def to_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Position":
        if not is_valid_position(data):
            raise ValueError(f"invalid position: {data!r}")
        return cls(int(data["x"]), int(data["y"]))


# ---------------------------------------------------------------------
# Wire-level predicates
# ---------------------------------------------------------------------
def _is_member(enum_cls, value: Any) -> bool:
    if isinstance(value, enum_cls):
        return True
    try:
        enum_cls(value)
    except ValueError:
        return False
    return True


def is_valid_robot_color(value: Any) -> bool:
    return _is_member(RobotColor, value)


def is_valid_goal_color(value: Any) -> bool:
    return _is_member(GoalColor, value)


def is_valid_direction(value: Any) -> bool:
    return _is_member(Direction, value)


def is_valid_position(value: Any, size: int = BOARD_SIZE) -> bool:
    if isinstance(value, Position):
        return value.in_bounds(size)
    if not isinstance(value, Mapping):
        return False
    x, y = value.get("x"), value.get("y")
    # bool is an int subclass; reject it explicitly
    if not isinstance(x, int) or not isinstance(y, int) or isinstance(x, bool) or isinstance(y, bool):
        return False
    return 0 <= x < size and 0 <= y < size


def is_valid_move(value: Any) -> bool:
    if isinstance(value, Move):
        return True
    if not isinstance(value, Mapping):
        return False
    return is_valid_robot_color(value.get("robot")) and is_valid_direction(value.get("direction"))


# ---------------------------------------------------------------------
# Moves and goals
# ---------------------------------------------------------------------
@dataclass(frozen=True)
class Move:
    robot: RobotColor
    direction: Direction

    @classmethod
    def coerce(cls, value: Any, index: int | None = None) -> "Move":
        """Accept a Move or its wire dict, raising MalformedMoveError otherwise."""
        if isinstance(value, Move):
            if isinstance(value.robot, RobotColor) and isinstance(value.direction, Direction):
                return value
            robot, direction = value.robot, value.direction
        elif isinstance(value, Mapping):
            robot, direction = value.get("robot"), value.get("direction")
        else:
            raise MalformedMoveError(f"Move at index {index} must be an object", index, value)
        if not is_valid_robot_color(robot):
            raise MalformedMoveError(f"Move at index {index} has invalid robot: {robot!r}", index, value)
        if not is_valid_direction(direction):
            raise MalformedMoveError(f"Move at index {index} has invalid direction: {direction!r}", index, value)
        return cls(RobotColor(robot), Direction(direction))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Move":
        return cls.coerce(data)

    def to_dict(self) -> Dict[str, str]:
        return {"robot": self.robot.value, "direction": self.direction.value}


@dataclass(frozen=True)
class Goal:
    position: Position
    color: GoalColor

    def __post_init__(self):
        object.__setattr__(self, "position", Position(*self.position))
        object.__setattr__(self, "color", GoalColor(self.color))

    @property
    def is_multi(self) -> bool:
        return self.color is GoalColor.MULTI

    def to_dict(self) -> Dict[str, Any]:
        return {"position": self.position.to_dict(), "color": self.color.value}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Goal":
        color = data.get("color")
        if not is_valid_goal_color(color):
            raise ValueError(f"invalid goal color: {color!r}")
        return cls(Position.from_dict(data["position"]), GoalColor(color))


# ---------------------------------------------------------------------
# Robot positions
# ---------------------------------------------------------------------
class Robots(Mapping[RobotColor, Position]):
    """Immutable map of the four robots to their positions.

    Updating returns a new instance, so a replay never touches the map it
    started from.
    """

    __slots__ = ("_positions",)

    def __init__(self, positions: Mapping[Any, Any]) -> None:
        parsed: Dict[RobotColor, Position] = {}
        for color, pos in positions.items():
            parsed[RobotColor(color)] = Position(*pos) if not isinstance(pos, Position) else pos
        missing = [c.value for c in ROBOT_COLORS if c not in parsed]
        if missing:
            raise ValueError(f"missing robots: {missing}")
        cells = list(parsed.values())
        if len(set(cells)) != len(cells):
            raise ValueError(f"robots overlap: {cells}")
        # Keep the canonical colour order for iteration
        self._positions = {c: parsed[c] for c in ROBOT_COLORS}

    def __getitem__(self, color: RobotColor) -> Position:
        try:
            return self._positions[RobotColor(color)]
        except ValueError:
            raise KeyError(color) from None

    def __iter__(self) -> Iterator[RobotColor]:
        return iter(self._positions)

    def __len__(self) -> int:
        return len(self._positions)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Robots):
            return self._positions == other._positions
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._positions.items()))

    def __repr__(self) -> str:
        inner = ", ".join(f"{c.value}=({p.x},{p.y})" for c, p in self._positions.items())
        return f"Robots({inner})"

    def with_position(self, color: RobotColor, position: Position) -> "Robots":
        updated = dict(self._positions)
        updated[RobotColor(color)] = Position(*position)
        return Robots(updated)

    def robot_at(self, position: Tuple[int, int]) -> RobotColor | None:
        for color, pos in self._positions.items():
            if pos == position:
                return color
        return None

    def occupied(self, exclude: RobotColor | None = None) -> set[Position]:
        return {pos for color, pos in self._positions.items() if color is not exclude}

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        return {color.value: pos.to_dict() for color, pos in self._positions.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Robots":
        return cls({color: Position.from_dict(pos) for color, pos in data.items()})
