"""Plain-text grid rendering."""

from typing import Iterable, Optional, Sequence, Set

from .models import Grid, Position


def render_grid(
    grid: Grid,
    highlight: Optional[Iterable[Sequence[int]]] = None,
    mask_filler: bool = False,
) -> str:
    """
    Render the grid to a string, one row per line.

    Highlighted cells are shown in lowercase. With mask_filler, cells that
    are not part of any placed word are shown as '.', which gives an
    answer key.
    """
    marked: Set[Position] = {Position(*p) for p in highlight} if highlight else set()

    lines = []
    for r, row in enumerate(grid.cells):
        letters = []
        for c, cell in enumerate(row):
            if mask_filler and not cell.is_part_of_word:
                letters.append('.')
            elif (r, c) in marked:
                letters.append(cell.letter.lower())
            else:
                letters.append(cell.letter)
        lines.append(' '.join(letters))

    return '\n'.join(lines)
