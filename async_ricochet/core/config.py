"""
Generator configuration, loadable from YAML.
"""
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from .types import BOARD_SIZE

# (name, x_min, x_max, y_min, y_max), inclusive
QuadrantBounds = Tuple[str, int, int, int, int]

DEFAULT_QUADRANTS: List[QuadrantBounds] = [
    ("NW", 1, 7, 1, 7),
    ("NE", 8, 14, 1, 7),
    ("SW", 1, 7, 8, 14),
    ("SE", 8, 14, 8, 14),
]


@dataclass
class GeneratorConfig:
    """Knobs for the board generator.

    Quadrant bounds are inclusive cell ranges. The defaults are 7x7 interior
    regions; center-block cells are excluded at sampling time.
    """

    board_size: int = BOARD_SIZE
    quadrants: List[QuadrantBounds] = field(default_factory=lambda: list(DEFAULT_QUADRANTS))
    goal_attempts: int = 100
    multi_goal_attempts: int = 100
    robot_attempts: int = 1000
    max_restarts: int = 10
    edge_offset_min: int = 2
    edge_offset_max: int = 7

    def __post_init__(self) -> None:
        self.quadrants = [tuple(q) for q in self.quadrants]  # type: ignore[misc]
        if len(self.quadrants) != 4:
            raise ValueError("exactly four quadrants are required")
        for name, x_min, x_max, y_min, y_max in self.quadrants:
            if not (0 < x_min <= x_max < self.board_size - 1 and 0 < y_min <= y_max < self.board_size - 1):
                raise ValueError(f"quadrant {name} must lie inside the outer ring")
        if min(self.goal_attempts, self.multi_goal_attempts, self.robot_attempts, self.max_restarts) < 1:
            raise ValueError("attempt budgets must be positive")
        half = self.board_size // 2
        if not (1 <= self.edge_offset_min <= self.edge_offset_max <= half - 1):
            raise ValueError(f"edge offsets must satisfy 1 <= min <= max <= {half - 1}")

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> "GeneratorConfig":
        data = dict(data or {})
        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ValueError(f"Unknown generator config keys: {sorted(unknown)}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "GeneratorConfig":
        path = Path(path)
        with path.open() as f:
            config = yaml.safe_load(f) or {}
        # Allow either a bare mapping or one nested under "generator"
        if "generator" in config:
            config = config["generator"]
        return cls.from_dict(config)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["quadrants"] = [list(q) for q in self.quadrants]
        return data
