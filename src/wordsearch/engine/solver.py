"""Locate words in a finished grid."""

from typing import Dict, Iterable, List, Optional, Tuple

from .models import Grid, Position


# All eight straight lines, so reversed placements are found too
SEARCH_VECTORS: Tuple[Tuple[int, int], ...] = (
    (0, 1), (1, 0), (1, 1), (-1, 1),
    (0, -1), (-1, 0), (-1, -1), (1, -1),
)


def find_word(grid: Grid, word: str) -> Optional[List[Position]]:
    """
    Find a word along any straight line of the grid.

    Returns:
        The positions spelling the word from its first letter, or None
    """
    word = word.upper()
    if not word or len(word) > grid.size:
        return None

    for row in range(grid.size):
        for col in range(grid.size):
            if grid.cells[row][col].letter != word[0]:
                continue
            for dr, dc in SEARCH_VECTORS:
                path = [Position(row + dr * i, col + dc * i) for i in range(len(word))]
                if not grid.contains(path[-1]):
                    continue
                if grid.letters_along(path) == word:
                    return path
    return None


def solve(grid: Grid, words: Iterable[str]) -> Dict[str, List[Position]]:
    """Map every locatable word (uppercase) to its positions. Missing words are left out."""
    found: Dict[str, List[Position]] = {}
    for word in words:
        key = word.upper()
        if key in found:
            continue
        path = find_word(grid, key)
        if path is not None:
            found[key] = path
    return found
