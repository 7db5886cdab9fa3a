from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Mapping

import numpy as np

from ..core.types import BOARD_SIZE, Direction

HORIZONTAL = "horizontal"
VERTICAL = "vertical"


@dataclass(frozen=True)
class WallSegment:
    """One wall segment.

    horizontal: blocks movement between ``row`` and ``row + 1`` at column ``col``.
    vertical:   blocks movement between ``col`` and ``col + 1`` at row ``row``.
    """

    kind: str
    row: int
    col: int

    @classmethod
    def horizontal(cls, row: int, col: int) -> "WallSegment":
        return cls(HORIZONTAL, row, col)

    @classmethod
    def vertical(cls, col: int, row: int) -> "WallSegment":
        return cls(VERTICAL, row, col)

    def endpoints(self) -> tuple[tuple[int, int], tuple[int, int]]:
        """Grid-line corners the segment runs between, as (x, y) lattice points."""
        if self.kind == HORIZONTAL:
            return (self.col, self.row + 1), (self.col + 1, self.row + 1)
        return (self.col + 1, self.row), (self.col + 1, self.row + 1)

    def is_internal(self, size: int = BOARD_SIZE) -> bool:
        """True if the segment separates two on-board cells (never a board edge)."""
        if self.kind == HORIZONTAL:
            return 0 <= self.row < size - 1 and 0 <= self.col < size
        return 0 <= self.col < size - 1 and 0 <= self.row < size


class WallTable:
    """Internal walls of a board; outer edges are implicit and never stored.

    Two boolean matrices back the table: ``horizontal[row, col]`` and
    ``vertical[col, row]``, matching the ``horizontal[row]`` /
    ``vertical[col]`` index lists of the wire format.
    """

    def __init__(self, size: int = BOARD_SIZE) -> None:
        self.size = int(size)
        self.horizontal = np.zeros((self.size, self.size), dtype=bool)
        self.vertical = np.zeros((self.size, self.size), dtype=bool)

    # ---------------------------------------------------------------------
    # Segment helpers
    # ---------------------------------------------------------------------
    def _cell(self, segment: WallSegment) -> tuple[np.ndarray, int, int]:
        if segment.kind == HORIZONTAL:
            return self.horizontal, segment.row, segment.col
        if segment.kind == VERTICAL:
            return self.vertical, segment.col, segment.row
        raise ValueError(f"Unknown wall kind {segment.kind!r}")

    def add(self, segment: WallSegment) -> None:
        """Add a segment; adding one that is already present is a no-op."""
        if not segment.is_internal(self.size):
            raise ValueError(f"wall segment out of range: {segment}")
        if self.frozen:
            raise ValueError("wall table is frozen")
        grid, i, j = self._cell(segment)
        grid[i, j] = True

    def has(self, segment: WallSegment) -> bool:
        if not segment.is_internal(self.size):
            return False
        grid, i, j = self._cell(segment)
        return bool(grid[i, j])

    def has_horizontal(self, row: int, col: int) -> bool:
        return self.has(WallSegment.horizontal(row, col))

    def has_vertical(self, col: int, row: int) -> bool:
        return self.has(WallSegment.vertical(col, row))

    def freeze(self) -> None:
        """Make the table read-only; later ``add`` calls raise ValueError."""
        self.horizontal.setflags(write=False)
        self.vertical.setflags(write=False)

    @property
    def frozen(self) -> bool:
        return not (self.horizontal.flags.writeable or self.vertical.flags.writeable)

    def segments(self) -> Iterator[WallSegment]:
        for row, col in zip(*np.nonzero(self.horizontal)):
            yield WallSegment.horizontal(int(row), int(col))
        for col, row in zip(*np.nonzero(self.vertical)):
            yield WallSegment.vertical(int(col), int(row))

    def count(self) -> int:
        return int(self.horizontal.sum() + self.vertical.sum())

    def copy(self) -> "WallTable":
        clone = WallTable(self.size)
        clone.horizontal = self.horizontal.copy()
        clone.vertical = self.vertical.copy()
        return clone

    # ---------------------------------------------------------------------
    # Movement helpers
    # ---------------------------------------------------------------------
    def is_blocking(self, x: int, y: int, direction: Direction) -> bool:
        """Return True if a stored wall blocks leaving (x, y) in ``direction``.

        Board edges are not walls here; callers check bounds themselves.
        """
        size = self.size
        if not (0 <= x < size and 0 <= y < size):
            return False
        if direction is Direction.UP:
            return y > 0 and bool(self.horizontal[y - 1, x])
        if direction is Direction.DOWN:
            return y < size - 1 and bool(self.horizontal[y, x])
        if direction is Direction.LEFT:
            return x > 0 and bool(self.vertical[x - 1, y])
        if direction is Direction.RIGHT:
            return x < size - 1 and bool(self.vertical[x, y])
        return False

    def walls_around(self, x: int, y: int) -> int:
        """Number of sides of (x, y) closed by a stored wall or the board edge."""
        closed = 0
        for direction in Direction:
            nx, ny = x + direction.delta[0], y + direction.delta[1]
            if not (0 <= nx < self.size and 0 <= ny < self.size) or self.is_blocking(x, y, direction):
                closed += 1
        return closed

    def signature(self) -> int:
        """Return a stable, compact integer signature for walls and size."""
        hasher = hashlib.blake2b(digest_size=8)
        hasher.update(self.size.to_bytes(2, byteorder="little", signed=False))
        hasher.update(np.packbits(self.horizontal).tobytes())
        hasher.update(np.packbits(self.vertical).tobytes())
        return int.from_bytes(hasher.digest(), byteorder="little", signed=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WallTable):
            return NotImplemented
        return (
            self.size == other.size
            and np.array_equal(self.horizontal, other.horizontal)
            and np.array_equal(self.vertical, other.vertical)
        )

    __hash__ = None  # mutable

    # ---------------------------------------------------------------------
    # Wire format
    # ---------------------------------------------------------------------
    def to_dict(self) -> Dict[str, List[List[int]]]:
        return {
            HORIZONTAL: [np.flatnonzero(self.horizontal[row]).tolist() for row in range(self.size)],
            VERTICAL: [np.flatnonzero(self.vertical[col]).tolist() for col in range(self.size)],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], size: int = BOARD_SIZE) -> "WallTable":
        table = cls(size)
        for row, cols in enumerate(data.get(HORIZONTAL) or []):
            for col in cols or []:
                table.add(WallSegment.horizontal(int(row), int(col)))
        for col, rows in enumerate(data.get(VERTICAL) or []):
            for row in rows or []:
                table.add(WallSegment.vertical(int(col), int(row)))
        return table
