#!/usr/bin/env python3
"""
Generate a Ricochet Robots board.

Usage:
    python scripts/generate_board.py --seed 42 --render
    python scripts/generate_board.py --config configs/generator.yaml --json board.json
"""

import argparse
import json
import logging
import random
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from async_ricochet.core.config import GeneratorConfig
from async_ricochet.core.errors import PlacementExhausted
from async_ricochet.puzzle.generator import generate_board


def main():
    parser = argparse.ArgumentParser(description="Generate a Ricochet Robots board")
    parser.add_argument("--config", type=str, help="Path to YAML generator configuration")
    parser.add_argument("--seed", type=int, help="Random seed for a reproducible board")
    parser.add_argument("--json", type=str, help="Write the board's wire JSON to this path")
    parser.add_argument("--render", action="store_true", help="Print an ASCII view of the board")
    parser.add_argument("--verbose", action="store_true", help="Log generation retries")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Configuration file not found: {config_path}")
            sys.exit(1)
        config = GeneratorConfig.from_yaml(config_path)
        print(f"Loaded configuration from {config_path}")
    else:
        config = GeneratorConfig()

    rng = random.Random(args.seed)
    try:
        board = generate_board(rng, config)
    except PlacementExhausted as exc:
        print(f"Generation failed after {exc.restarts} attempts: {exc}")
        sys.exit(1)

    board.check_invariants()
    print(f"Board signature: {board.wall_sig:016x}")
    print(f"Wall segments: {board.walls.count()}")
    for goal in board.goals:
        print(f"  {goal.color.value:>6} goal at ({goal.position.x}, {goal.position.y})")
    for color, pos in board.robots.items():
        print(f"  {color.value:>6} robot at ({pos.x}, {pos.y})")

    if args.render:
        print(board.render_text())

    if args.json:
        out = Path(args.json)
        with out.open("w") as fh:
            json.dump(board.to_dict(), fh, indent=2)
        print(f"Board written to {out}")


if __name__ == "__main__":
    main()
