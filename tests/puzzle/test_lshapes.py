import pytest

from async_ricochet.core.types import Direction, Position
from async_ricochet.puzzle.generator import add_center_block
from async_ricochet.puzzle.lshapes import (
    ORIENTATIONS,
    LShape,
    Orientation,
    add_lshape,
    can_place_lshape,
    would_enclose,
)
from async_ricochet.puzzle.walls import WallSegment, WallTable


@pytest.mark.parametrize(
    "orientation, expected",
    [
        (Orientation.NW, {WallSegment.horizontal(4, 5), WallSegment.vertical(4, 5)}),
        (Orientation.NE, {WallSegment.horizontal(4, 5), WallSegment.vertical(5, 5)}),
        (Orientation.SW, {WallSegment.horizontal(5, 5), WallSegment.vertical(4, 5)}),
        (Orientation.SE, {WallSegment.horizontal(5, 5), WallSegment.vertical(5, 5)}),
    ],
)
def test_segments_per_orientation(orientation, expected):
    assert set(LShape(Position(5, 5), orientation).segments()) == expected


def test_nw_corner_blocks_up_and_left():
    walls = WallTable()
    add_lshape(walls, LShape(Position(5, 5), Orientation.NW))
    assert walls.is_blocking(5, 5, Direction.UP)
    assert walls.is_blocking(5, 5, Direction.LEFT)
    assert not walls.is_blocking(5, 5, Direction.DOWN)
    assert not walls.is_blocking(5, 5, Direction.RIGHT)


def test_adjacent_segments_touch_the_corner_and_ends():
    lshape = LShape(Position(5, 5), Orientation.NW)
    adjacent = set(lshape.adjacent_segments())
    # extends the horizontal left/right
    assert WallSegment.horizontal(4, 4) in adjacent
    assert WallSegment.horizontal(4, 6) in adjacent
    # extends the vertical up/down
    assert WallSegment.vertical(4, 4) in adjacent
    assert WallSegment.vertical(4, 6) in adjacent
    # perpendicular at the far ends / corner
    assert WallSegment.vertical(5, 4) in adjacent
    assert WallSegment.horizontal(5, 4) in adjacent
    # the closing walls meet the L at its open ends
    assert WallSegment.vertical(5, 5) in adjacent
    assert WallSegment.horizontal(5, 5) in adjacent
    assert len(adjacent) == 8
    assert not adjacent.intersection(lshape.segments())


def test_rejects_anchor_in_3x3_box_regardless_of_orientation():
    existing = [LShape(Position(5, 5), Orientation.SE)]
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            for orientation in ORIENTATIONS:
                assert not can_place_lshape(Position(5 + dx, 5 + dy), orientation, existing)


def test_accepts_anchor_outside_3x3_box():
    existing = [LShape(Position(5, 5), Orientation.SE)]
    assert can_place_lshape(Position(8, 2), Orientation.NW, existing)
    assert can_place_lshape(Position(3, 5), Orientation.NW, existing)


def test_rejects_shared_segment():
    existing = [LShape(Position(5, 5), Orientation.SE)]
    # (5,6) NW shares the horizontal segment below (5,5) with the existing L
    shared = LShape(Position(5, 6), Orientation.NW)
    assert set(shared.segments()) & set(existing[0].segments())
    assert not can_place_lshape(shared.position, shared.orientation, existing)


def test_rejects_touching_center_block():
    walls = WallTable()
    add_center_block(walls)
    # SE corner of (6,6) meets the center block's top-left corner
    assert not can_place_lshape(Position(6, 6), Orientation.SE, [], walls)
    # Same cell, walls facing away from the center
    assert can_place_lshape(Position(6, 6), Orientation.NW, [], walls)


def test_rejects_touching_outer_edge_spur():
    walls = WallTable()
    spur = WallSegment.vertical(3, 0)  # top edge, between columns 3 and 4
    walls.add(spur)
    assert not can_place_lshape(Position(3, 1), Orientation.NE, [], walls)
    assert can_place_lshape(Position(3, 2), Orientation.SW, [], walls)


def test_rejects_full_enclosure():
    walls = WallTable()
    walls.add(WallSegment.horizontal(10, 10))  # below (10,10)
    walls.add(WallSegment.vertical(10, 10))  # right of (10,10)
    candidate = LShape(Position(10, 10), Orientation.NW)
    assert would_enclose(candidate, walls)
    assert not can_place_lshape(candidate.position, candidate.orientation, [], walls)


def test_rejects_segments_on_board_edge():
    assert not can_place_lshape(Position(0, 5), Orientation.NW, [])
    assert not can_place_lshape(Position(15, 5), Orientation.SE, [])
    assert can_place_lshape(Position(1, 1), Orientation.NW, [])
