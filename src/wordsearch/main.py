"""
Command line entry point for building word search puzzles.

Usage:
    python -m wordsearch.main puzzle.yaml
    python -m wordsearch.main puzzle.yaml --size 12 --seed 7 --solution
    python -m wordsearch.main puzzle.yaml --solve --verbose
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from .engine import render_grid, solve
from .environment import Puzzle, PuzzleConfig


def load_config(config_path: str) -> PuzzleConfig:
    """Load puzzle configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return PuzzleConfig(**data)


def play_solution(puzzle: Puzzle) -> None:
    """Locate every target and replay it through the selection gestures."""
    answers = solve(puzzle.grid, puzzle.findable_words)
    for word, path in answers.items():
        matched = puzzle.select(path)
        print(f"  {word}: {'found' if matched else 'not matched'} at {[tuple(p) for p in path]}")


def main():
    parser = argparse.ArgumentParser(
        description="Build a word search puzzle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example puzzle.yaml:
  words:
    - TRUST
    - FAITHFUL
    - PRECIOUS
  grid: 10
  seed: 42
        """
    )
    parser.add_argument(
        "config",
        help="Path to YAML puzzle configuration"
    )
    parser.add_argument(
        "--size",
        type=int,
        help="Override the grid size from the config"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Override the random seed from the config"
    )
    parser.add_argument(
        "--solution",
        action="store_true",
        help="Print the answer key (filler letters hidden)"
    )
    parser.add_argument(
        "--solve",
        action="store_true",
        help="Find every word and play it through the selection matcher"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log placement details"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        config = load_config(args.config)
        overrides = {}
        if args.size is not None:
            overrides["size"] = args.size
        if args.seed is not None:
            overrides["seed"] = args.seed
        if overrides:
            config = PuzzleConfig(**{**config.model_dump(), **overrides})
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    puzzle = Puzzle.create(config=config)

    if not puzzle.available:
        print("No words available for this word search.")
        return 0

    print(render_grid(puzzle.grid))
    print()
    print("Words to find:")
    for word in puzzle.findable_words:
        print(f"  {word}")

    if puzzle.result.skipped_words:
        print()
        print(f"Could not fit: {', '.join(puzzle.result.skipped_words)}")

    if args.solution:
        print()
        print("=== Solution ===")
        print(render_grid(puzzle.grid, mask_filler=True))

    if args.solve:
        print()
        print("=== Solving ===")
        play_solution(puzzle)

    print()
    print(f"Found: {puzzle.found_count} / {puzzle.total_findable}")
    if puzzle.is_solved:
        print("All words found!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
