"""Word search grid building, matching and solving."""

from .models import (
    BuildResult,
    Cell,
    Direction,
    DIRECTION_VECTORS,
    Grid,
    MIN_WORD_LENGTH,
    PlacedWord,
    Position,
)
from .words import normalize_word, normalize_words, add_word
from .builder import GridBuilder, build, ALPHABET, MAX_ATTEMPTS
from .matcher import SelectionMatcher, SelectionState, match_word, read_letters
from .solver import find_word, solve
from .grid import render_grid

__all__ = [
    # Models
    "BuildResult",
    "Cell",
    "Direction",
    "DIRECTION_VECTORS",
    "Grid",
    "MIN_WORD_LENGTH",
    "PlacedWord",
    "Position",
    # Word lists
    "normalize_word",
    "normalize_words",
    "add_word",
    # Building
    "GridBuilder",
    "build",
    "ALPHABET",
    "MAX_ATTEMPTS",
    # Matching
    "SelectionMatcher",
    "SelectionState",
    "match_word",
    "read_letters",
    # Solving
    "find_word",
    "solve",
    # Rendering
    "render_grid",
]
