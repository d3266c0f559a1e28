"""Word search puzzle generation and solving."""

from .engine import build, SelectionMatcher, render_grid
from .environment import Puzzle, PuzzleConfig

__all__ = [
    "build",
    "SelectionMatcher",
    "render_grid",
    "Puzzle",
    "PuzzleConfig",
]
