import json
import random

import pytest

from async_ricochet.core.errors import BoardInvariantError
from async_ricochet.core.types import Goal, GoalColor, Position, RobotColor
from async_ricochet.puzzle.board import Board, validate_goals
from async_ricochet.puzzle.generator import generate_board
from async_ricochet.puzzle.robots import place_robots
from async_ricochet.puzzle.validator import validate


@pytest.fixture(scope="module")
def board():
    return generate_board(random.Random(42))


def test_wire_document_round_trip(board):
    data = json.loads(json.dumps(board.to_dict()))
    assert set(data) == {"walls", "robots", "allGoals", "lShapes"}
    assert len(data["walls"]["horizontal"]) == 16
    assert sum(1 for g in data["allGoals"] if g["color"] == "multi") == 1
    restored = Board.from_dict(data)
    assert restored == board
    assert restored.walls == board.walls
    restored.check_invariants()


def test_restored_board_replays_identically(board):
    restored = Board.from_dict(board.to_dict())
    moves = [{"robot": c.value, "direction": d} for c in RobotColor for d in ("up", "left", "down", "right")]
    for goal in board.goals[:3]:
        assert validate(board.robots, board.walls, moves, goal) == validate(
            restored.robots, restored.walls, moves, goal
        )


def test_goal_lookup(board):
    multi = board.goals_of(GoalColor.MULTI)
    assert len(multi) == 1
    assert board.goal_at(multi[0].position) == multi[0]
    assert board.goal_at(Position(0, 0)) is None
    assert len(board.goals_of("red")) == 4


def test_with_robots_keeps_walls_and_goals(board):
    robots = place_robots(random.Random(9), (g.position for g in board.goals))
    moved = board.with_robots(robots)
    assert moved.walls is board.walls
    assert moved.goals == board.goals
    assert moved.robots == robots
    moved.check_invariants()


def test_check_invariants_flags_robot_on_goal(board):
    robots = board.robots.with_position(RobotColor.RED, board.goals[0].position)
    bad = board.with_robots(robots)
    with pytest.raises(BoardInvariantError):
        bad.check_invariants()


def test_validate_goals_rejects_incomplete_sets(board):
    with pytest.raises(BoardInvariantError):
        validate_goals(board.goals[:16])
    ring = list(board.goals)
    ring[0] = Goal(Position(0, 4), ring[0].color)
    with pytest.raises(BoardInvariantError):
        validate_goals(ring)
    doubled = list(board.goals)
    doubled[1] = Goal(doubled[0].position, doubled[1].color)
    with pytest.raises(BoardInvariantError):
        validate_goals(doubled)
    no_multi = [g if not g.is_multi else Goal(g.position, GoalColor.RED) for g in board.goals]
    with pytest.raises(BoardInvariantError):
        validate_goals(no_multi)


def test_render_text(board):
    text = board.render_text()
    lines = text.splitlines()
    assert len(lines) == 33
    assert "*" in text
    for letter in "RYGB":
        assert letter in text
    assert text.count("#") == 4
