"""
L-shaped wall corners.

Every goal sits in the corner of an L: one horizontal and one vertical
segment meeting at a corner of the goal cell.

    NW  ┏   wall above + wall left
    NE  ┓   wall above + wall right
    SW  ┗   wall below + wall left
    SE  ┛   wall below + wall right
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from ..core.types import BOARD_SIZE, Position
from .walls import WallSegment, WallTable


class Orientation(str, Enum):
    NW = "NW"
    NE = "NE"
    SW = "SW"
    SE = "SE"

    @property
    def is_north(self) -> bool:
        return self in (Orientation.NW, Orientation.NE)

    @property
    def is_west(self) -> bool:
        return self in (Orientation.NW, Orientation.SW)


ORIENTATIONS: Tuple[Orientation, ...] = tuple(Orientation)


def _segments_at(x: int, y: int, north: bool, west: bool) -> Tuple[WallSegment, WallSegment]:
    horizontal = WallSegment.horizontal(y - 1 if north else y, x)
    vertical = WallSegment.vertical(x - 1 if west else x, y)
    return horizontal, vertical


def segments_touching(point: Tuple[int, int], size: int = BOARD_SIZE) -> List[WallSegment]:
    """Internal segments that end at the lattice point ``(px, py)``."""
    px, py = point
    candidates = (
        WallSegment.horizontal(py - 1, px - 1),
        WallSegment.horizontal(py - 1, px),
        WallSegment.vertical(px - 1, py - 1),
        WallSegment.vertical(px - 1, py),
    )
    return [s for s in candidates if s.is_internal(size)]


@dataclass(frozen=True)
class LShape:
    position: Position
    orientation: Orientation

    def segments(self) -> Tuple[WallSegment, WallSegment]:
        x, y = self.position
        return _segments_at(x, y, self.orientation.is_north, self.orientation.is_west)

    def closing_segments(self) -> Tuple[WallSegment, WallSegment]:
        """The two segments that would box the goal cell in together with this L."""
        x, y = self.position
        return _segments_at(x, y, not self.orientation.is_north, not self.orientation.is_west)

    def is_internal(self, size: int = BOARD_SIZE) -> bool:
        return all(s.is_internal(size) for s in self.segments())

    def adjacent_segments(self, size: int = BOARD_SIZE) -> List[WallSegment]:
        """Segments that would touch this L end-on or at its corner."""
        own = set(self.segments())
        seen: Set[WallSegment] = set()
        adjacent: List[WallSegment] = []
        for segment in self.segments():
            for point in segment.endpoints():
                for other in segments_touching(point, size):
                    if other in own or other in seen:
                        continue
                    seen.add(other)
                    adjacent.append(other)
        return adjacent


def segments_overlap(first: Iterable[WallSegment], second: Iterable[WallSegment]) -> bool:
    return not set(first).isdisjoint(second)


def anchors_too_close(a: Position, b: Position) -> bool:
    """True when ``b`` falls inside the 3x3 box centred on ``a``."""
    return abs(a.x - b.x) <= 1 and abs(a.y - b.y) <= 1


def would_enclose(lshape: LShape, walls: WallTable) -> bool:
    return all(walls.has(s) for s in lshape.closing_segments())


def can_place_lshape(
    position: Position,
    orientation: Orientation,
    existing: Sequence[LShape],
    walls: Optional[WallTable] = None,
) -> bool:
    """Check whether a new L can go at ``position`` with ``orientation``.

    Rejects on shared segments with an existing L, an anchor inside the 3x3
    box of an existing anchor, and (given ``walls``) any segment touching a
    wall already on the table or a placement that closes the goal cell.
    """
    candidate = LShape(Position(*position), Orientation(orientation))
    size = walls.size if walls is not None else BOARD_SIZE
    if not candidate.is_internal(size):
        return False

    new_segments = candidate.segments()
    for other in existing:
        if segments_overlap(new_segments, other.segments()):
            return False
    for other in existing:
        if anchors_too_close(candidate.position, other.position):
            return False

    if walls is not None:
        if any(walls.has(s) for s in new_segments):
            return False
        if any(walls.has(s) for s in candidate.adjacent_segments(size)):
            return False
        if would_enclose(candidate, walls):
            return False
    return True


def add_lshape(walls: WallTable, lshape: LShape) -> None:
    for segment in lshape.segments():
        walls.add(segment)
