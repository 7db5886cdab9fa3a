"""
Typed failures shared by the validator and the generator.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .types import Position, RobotColor


class RicochetError(Exception):
    """Base class for every error raised by the puzzle core."""


class MalformedMoveError(RicochetError):
    """A move names a robot or direction outside its enum."""

    def __init__(self, message: str, index: int | None = None, value: Any = None) -> None:
        super().__init__(message)
        self.index = index
        self.value = value


class BoardInvariantError(RicochetError):
    """A generated or deserialized board breaks one of its invariants."""


@dataclass(frozen=True)
class PlacementFailure:
    """Which generation step ran out of attempts."""

    step: str  # "goals", "multi_goal" or "robots"
    attempts: int
    quadrant: Optional[str] = None
    color: Optional[str] = None

    @property
    def message(self) -> str:
        if self.step == "robots":
            return f"Failed to place robots after {self.attempts} attempts"
        where = f" in {self.quadrant} quadrant" if self.quadrant else ""
        return f"Failed to place {self.color} goal{where} after {self.attempts} attempts"


class PlacementExhausted(RicochetError):
    """Raised when a caller asks for a board and generation keeps failing."""

    def __init__(self, failure: PlacementFailure, restarts: int = 1) -> None:
        super().__init__(failure.message)
        self.failure = failure
        self.restarts = restarts


class FailureKind(str, Enum):
    MALFORMED_MOVE = "MALFORMED_MOVE"
    EMPTY_SOLUTION = "EMPTY_SOLUTION"
    SOLUTION_TOO_LONG = "SOLUTION_TOO_LONG"
    GOAL_NOT_REACHED = "GOAL_NOT_REACHED"


@dataclass(frozen=True)
class ValidationFailure:
    """Structured reason a solution was rejected.

    ``index`` is set for malformed moves; ``robot``, ``expected`` and
    ``actual`` are set when replay finished away from the goal.
    """

    kind: FailureKind
    reason: str
    index: Optional[int] = None
    robot: Optional["RobotColor"] = None
    expected: Optional["Position"] = None
    actual: Optional["Position"] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"kind": self.kind.value, "reason": self.reason}
        if self.index is not None:
            data["index"] = self.index
        if self.robot is not None:
            data["robot"] = self.robot.value
        if self.expected is not None:
            data["expected"] = self.expected.to_dict()
        if self.actual is not None:
            data["actual"] = self.actual.to_dict()
        return data
