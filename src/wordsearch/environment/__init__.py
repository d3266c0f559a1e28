"""Puzzle lifecycle for word search games."""

from .models import PuzzleConfig, DEFAULT_GRID_SIZE
from .puzzle import Puzzle

__all__ = [
    "PuzzleConfig",
    "DEFAULT_GRID_SIZE",
    "Puzzle",
]
