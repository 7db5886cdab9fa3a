import pytest

from async_ricochet.core.errors import MalformedMoveError
from async_ricochet.core.types import (
    Direction,
    Goal,
    GoalColor,
    Move,
    Position,
    RobotColor,
    Robots,
    center_cells,
    is_outer_ring,
    is_valid_direction,
    is_valid_goal_color,
    is_valid_move,
    is_valid_position,
    is_valid_robot_color,
)


def test_enum_wire_values():
    assert RobotColor("red") is RobotColor.RED
    assert Direction("left") is Direction.LEFT
    assert GoalColor("multi") is GoalColor.MULTI
    assert GoalColor.MULTI.robot is None
    assert GoalColor.BLUE.robot is RobotColor.BLUE


def test_wire_predicates():
    assert is_valid_robot_color("yellow")
    assert not is_valid_robot_color("purple")
    assert not is_valid_robot_color("multi")
    assert is_valid_goal_color("multi")
    assert is_valid_direction("down")
    assert not is_valid_direction("north")
    assert not is_valid_direction(None)
    assert is_valid_position({"x": 0, "y": 15})
    assert not is_valid_position({"x": 16, "y": 0})
    assert not is_valid_position({"x": True, "y": 0})
    assert not is_valid_position([1, 2])
    assert is_valid_move({"robot": "red", "direction": "up"})
    assert not is_valid_move({"robot": "red", "direction": "sideways"})
    assert not is_valid_move("red up")


def test_position_step_and_bounds():
    pos = Position(0, 5)
    assert pos.step(Direction.UP) == (0, 4)
    assert pos.step(Direction.RIGHT) == (1, 5)
    assert not pos.step(Direction.LEFT).in_bounds()
    assert Position.from_dict({"x": 3, "y": 4}) == Position(3, 4)
    with pytest.raises(ValueError):
        Position.from_dict({"x": -1, "y": 4})


def test_center_and_ring():
    assert center_cells() == {(7, 7), (8, 7), (7, 8), (8, 8)}
    assert is_outer_ring(0, 5)
    assert is_outer_ring(9, 15)
    assert not is_outer_ring(1, 14)


class TestMove:
    def test_coerce_from_dict(self):
        move = Move.coerce({"robot": "green", "direction": "right"})
        assert move == Move(RobotColor.GREEN, Direction.RIGHT)
        assert move.to_dict() == {"robot": "green", "direction": "right"}

    def test_coerce_rejects_bad_robot(self):
        with pytest.raises(MalformedMoveError) as excinfo:
            Move.coerce({"robot": "purple", "direction": "up"}, index=4)
        assert excinfo.value.index == 4

    def test_coerce_rejects_bad_direction(self):
        with pytest.raises(MalformedMoveError):
            Move.from_dict({"robot": "red", "direction": "diagonal"})

    def test_coerce_rejects_non_mapping(self):
        with pytest.raises(MalformedMoveError):
            Move.coerce(["red", "up"], index=0)

    def test_coerce_revalidates_loose_move(self):
        move = Move.coerce(Move("blue", "down"))
        assert move.robot is RobotColor.BLUE
        assert move.direction is Direction.DOWN


class TestRobots:
    def test_requires_all_four(self):
        with pytest.raises(ValueError):
            Robots({RobotColor.RED: Position(0, 0)})

    def test_rejects_overlap(self, robots_factory):
        with pytest.raises(ValueError):
            robots_factory(red=(3, 3), blue=(3, 3))

    def test_with_position_returns_new_map(self, robots_factory):
        robots = robots_factory()
        moved = robots.with_position(RobotColor.RED, Position(4, 4))
        assert robots[RobotColor.RED] == (0, 0)
        assert moved[RobotColor.RED] == (4, 4)
        assert moved != robots

    def test_robot_at_and_occupied(self, robots_factory):
        robots = robots_factory()
        assert robots.robot_at((15, 15)) is RobotColor.BLUE
        assert robots.robot_at((5, 5)) is None
        assert Position(0, 0) not in robots.occupied(exclude=RobotColor.RED)
        assert len(robots.occupied()) == 4

    def test_wire_format(self, robots_factory):
        robots = robots_factory(green=(2, 9))
        data = robots.to_dict()
        assert data["green"] == {"x": 2, "y": 9}
        assert Robots.from_dict(data) == robots
        assert hash(Robots.from_dict(data)) == hash(robots)


def test_goal_wire_format():
    goal = Goal.from_dict({"position": {"x": 7, "y": 9}, "color": "multi"})
    assert goal.is_multi
    assert goal.to_dict() == {"position": {"x": 7, "y": 9}, "color": "multi"}
    with pytest.raises(ValueError):
        Goal.from_dict({"position": {"x": 7, "y": 9}, "color": "purple"})
