#!/usr/bin/env python3
"""
Replay a solution against a stored board.

Usage:
    python scripts/check_solution.py board.json solution.json --goal-index 3

solution.json holds a list of moves: [{"robot": "red", "direction": "up"}, ...]
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from async_ricochet.puzzle.board import Board
from async_ricochet.puzzle.validator import validate


def main():
    parser = argparse.ArgumentParser(description="Validate a Ricochet Robots solution")
    parser.add_argument("board", type=str, help="Path to board JSON written by generate_board.py")
    parser.add_argument("solution", type=str, help="Path to solution JSON (list of moves)")
    parser.add_argument("--goal-index", type=int, required=True, help="Index into the board's goals")
    parser.add_argument("--render", action="store_true", help="Print the final position")
    args = parser.parse_args()

    with Path(args.board).open() as fh:
        board = Board.from_dict(json.load(fh))
    with Path(args.solution).open() as fh:
        moves = json.load(fh)

    if not isinstance(moves, list):
        print("Solution file must contain a list of moves")
        sys.exit(1)
    if not (0 <= args.goal_index < len(board.goals)):
        print(f"Goal index must be between 0 and {len(board.goals) - 1}")
        sys.exit(1)

    goal = board.goals[args.goal_index]
    print(f"Goal: {goal.color.value} at ({goal.position.x}, {goal.position.y})")

    result = validate(board.robots, board.walls, moves, goal)
    print(json.dumps(result.to_dict(), indent=2))

    if args.render and result.final_positions is not None:
        print(board.render_text(result.final_positions))

    sys.exit(0 if result.valid else 2)


if __name__ == "__main__":
    main()
