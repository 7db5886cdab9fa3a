from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from ..core.errors import BoardInvariantError
from ..core.types import (
    BOARD_SIZE,
    ROBOT_COLORS,
    Goal,
    GoalColor,
    Position,
    Robots,
    center_cells,
    is_outer_ring,
)
from .lshapes import LShape, Orientation
from .walls import WallTable

GOALS_PER_BOARD = 17


def validate_goals(goals: Iterable[Goal], size: int = BOARD_SIZE) -> None:
    """Raise BoardInvariantError unless ``goals`` form a complete goal set.

    A complete set is 17 goals: four of each robot colour plus one MULTI,
    on distinct cells, none on the outer ring or in the center block.
    """
    goals = list(goals)
    if len(goals) != GOALS_PER_BOARD:
        raise BoardInvariantError(f"Expected {GOALS_PER_BOARD} goals, got {len(goals)}")
    counts = Counter(goal.color for goal in goals)
    if counts[GoalColor.MULTI] != 1:
        raise BoardInvariantError(f"Expected 1 multi-color goal, got {counts[GoalColor.MULTI]}")
    for color in ROBOT_COLORS:
        goal_color = GoalColor(color.value)
        if counts[goal_color] != 4:
            raise BoardInvariantError(f"Expected 4 {color.value} goals, got {counts[goal_color]}")
    seen = set()
    center = center_cells(size)
    for goal in goals:
        x, y = goal.position
        if goal.position in seen:
            raise BoardInvariantError(f"Duplicate goal position at ({x}, {y})")
        seen.add(goal.position)
        if is_outer_ring(x, y, size):
            raise BoardInvariantError(f"Goal at ({x}, {y}) lies on the outer ring")
        if (x, y) in center:
            raise BoardInvariantError(f"Goal at ({x}, {y}) lies inside the center block")


@dataclass(frozen=True)
class Board:
    """A generated puzzle: walls, the 17 goals with their L-shapes, and starting robots.

    The wall table is frozen on construction; replay code works on ``Robots``
    snapshots and never touches the board.
    """

    walls: WallTable = field(compare=False)
    goals: Tuple[Goal, ...]
    robots: Robots
    lshapes: Tuple[LShape, ...] = ()
    wall_sig: int = 0

    def __post_init__(self):
        object.__setattr__(self, "goals", tuple(self.goals))
        object.__setattr__(self, "lshapes", tuple(self.lshapes))
        self.walls.freeze()
        if self.wall_sig == 0:
            object.__setattr__(self, "wall_sig", self.walls.signature())

    @property
    def size(self) -> int:
        return self.walls.size

    def goal_at(self, position: Tuple[int, int]) -> Optional[Goal]:
        for goal in self.goals:
            if goal.position == position:
                return goal
        return None

    def goals_of(self, color: GoalColor) -> List[Goal]:
        return [goal for goal in self.goals if goal.color is GoalColor(color)]

    def with_robots(self, robots: Robots) -> "Board":
        """Same walls and goals, different starting robots."""
        return Board(walls=self.walls, goals=self.goals, robots=robots, lshapes=self.lshapes, wall_sig=self.wall_sig)

    # ------------------------------------------------------------------
    # Invariants
    # ------------------------------------------------------------------
    def check_invariants(self) -> None:
        validate_goals(self.goals, self.size)
        if self.lshapes:
            if len(self.lshapes) != len(self.goals):
                raise BoardInvariantError("every goal must own exactly one L-shape")
            owned = {lshape.position for lshape in self.lshapes}
            if owned != {goal.position for goal in self.goals}:
                raise BoardInvariantError("L-shape anchors do not match goal positions")
            segments = [s for lshape in self.lshapes for s in lshape.segments()]
            if len(set(segments)) != len(segments):
                raise BoardInvariantError("two L-shapes share a wall segment")
            missing = [s for s in segments if not self.walls.has(s)]
            if missing:
                raise BoardInvariantError(f"L-shape segments missing from wall table: {missing}")
        goal_cells = {goal.position for goal in self.goals}
        center = center_cells(self.size)
        for color, pos in self.robots.items():
            if pos in goal_cells:
                raise BoardInvariantError(f"Robot {color.value} starts on a goal at ({pos.x}, {pos.y})")
            if pos in center:
                raise BoardInvariantError(f"Robot {color.value} starts inside the center block")

    # ------------------------------------------------------------------
    # Wire format
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "walls": self.walls.to_dict(),
            "robots": self.robots.to_dict(),
            "allGoals": [goal.to_dict() for goal in self.goals],
        }
        if self.lshapes:
            data["lShapes"] = [
                {"position": lshape.position.to_dict(), "orientation": lshape.orientation.value}
                for lshape in self.lshapes
            ]
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], size: int = BOARD_SIZE) -> "Board":
        walls = WallTable.from_dict(data["walls"], size=size)
        goals = tuple(Goal.from_dict(g) for g in data["allGoals"])
        lshapes = tuple(
            LShape(Position.from_dict(item["position"]), Orientation(item["orientation"]))
            for item in data.get("lShapes") or []
        )
        return cls(walls=walls, goals=goals, robots=Robots.from_dict(data["robots"]), lshapes=lshapes)

    # ------------------------------------------------------------------
    # Text renderer for quick debugging
    # ------------------------------------------------------------------
    def render_text(self, robots: Robots | None = None) -> str:
        """ASCII view: robots as R/Y/G/B, goals as r/y/g/b/*, center as #."""
        robots = robots or self.robots
        size = self.size
        horiz = "─"
        vert = "│"
        corner = "┼"
        center = center_cells(size)

        def cell_char(x: int, y: int) -> str:
            color = robots.robot_at((x, y))
            if color is not None:
                return color.value[0].upper()
            goal = self.goal_at((x, y))
            if goal is not None:
                return "*" if goal.is_multi else goal.color.value[0]
            if (x, y) in center:
                return "#"
            return " "

        rows = []
        for y in range(size):
            top_line = []
            cell_line = []
            for x in range(size):
                top_line.append(corner)
                blocked_up = y == 0 or self.walls.has_horizontal(y - 1, x)
                top_line.append(horiz if blocked_up else " ")
                blocked_left = x == 0 or self.walls.has_vertical(x - 1, y)
                cell_line.append(vert if blocked_left else " ")
                cell_line.append(cell_char(x, y))
            top_line.append(corner)
            cell_line.append(vert)
            rows.append("".join(top_line))
            rows.append("".join(cell_line))
        bottom = [corner]
        for _ in range(size):
            bottom.append(horiz)
            bottom.append(corner)
        rows.append("".join(bottom))
        return "\n".join(rows)
