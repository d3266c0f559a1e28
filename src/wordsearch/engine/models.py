"""Data models for grid building and selection matching."""

from typing import Dict, List, Optional, Literal, NamedTuple, Sequence, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


Direction = Literal["RIGHT", "DOWN", "DOWN_RIGHT", "UP_RIGHT"]

# (row delta, col delta) for each placement direction
DIRECTION_VECTORS: Dict[str, Tuple[int, int]] = {
    "RIGHT": (0, 1),
    "DOWN": (1, 0),
    "DOWN_RIGHT": (1, 1),
    "UP_RIGHT": (-1, 1),
}

# Shortest word a selection can spell
MIN_WORD_LENGTH = 2


class Position(NamedTuple):
    """A cell coordinate on the grid."""
    row: int
    col: int


class Cell(BaseModel):
    """A single lettered cell of a finished grid."""
    model_config = ConfigDict(frozen=True)

    letter: str = Field(..., pattern=r'^[A-Z]$')
    is_part_of_word: bool = False
    word_index: Optional[int] = Field(None, ge=0)


class Grid(BaseModel):
    """
    Immutable square matrix of cells.

    Every cell holds exactly one uppercase letter; the builder only hands
    out a Grid once all filler letters are assigned.
    """
    model_config = ConfigDict(frozen=True)

    size: int = Field(..., ge=1)
    cells: Tuple[Tuple[Cell, ...], ...]

    @model_validator(mode='after')
    def _check_square(self) -> "Grid":
        if len(self.cells) != self.size:
            raise ValueError(f"Grid has {len(self.cells)} rows, expected {self.size}")
        for i, row in enumerate(self.cells):
            if len(row) != self.size:
                raise ValueError(f"Row {i} has {len(row)} cells, expected {self.size}")
        return self

    def contains(self, position: Sequence[int]) -> bool:
        """Check whether a (row, col) pair lies inside the grid."""
        row, col = position
        return 0 <= row < self.size and 0 <= col < self.size

    def cell_at(self, position: Sequence[int]) -> Cell:
        row, col = position
        if not self.contains(position):
            raise IndexError(f"Position ({row}, {col}) outside {self.size}x{self.size} grid")
        return self.cells[row][col]

    def letter_at(self, position: Sequence[int]) -> str:
        return self.cell_at(position).letter

    def letters_along(self, path: Sequence[Sequence[int]]) -> str:
        """Concatenate the letters at each position of a path, in path order."""
        return ''.join(self.letter_at(p) for p in path)

    def rows(self) -> List[str]:
        """Grid letters as one string per row."""
        return [''.join(cell.letter for cell in row) for row in self.cells]


class PlacedWord(BaseModel):
    """A word committed to the grid and the cells it occupies."""
    word: str = Field(..., min_length=1, pattern=r'^[A-Z]+$')
    word_index: int = Field(..., ge=0)
    direction: Direction
    positions: List[Position]

    @model_validator(mode='after')
    def _check_length(self) -> "PlacedWord":
        if len(self.positions) != len(self.word):
            raise ValueError(
                f"'{self.word}' has {len(self.word)} letters but {len(self.positions)} positions"
            )
        dr, dc = DIRECTION_VECTORS[self.direction]
        row, col = self.positions[0]
        for i, position in enumerate(self.positions):
            if position != (row + dr * i, col + dc * i):
                raise ValueError(
                    f"Position {tuple(position)} of '{self.word}' is off the {self.direction} line"
                )
        return self

    @property
    def start(self) -> Position:
        return self.positions[0]


class BuildResult(BaseModel):
    """Result of building a grid."""
    model_config = ConfigDict(frozen=True)

    grid: Grid
    words: List[str] = Field(default_factory=list)  # Normalized input, duplicates kept
    placed_words: List[PlacedWord] = Field(default_factory=list)
    skipped_words: List[str] = Field(default_factory=list)

    @field_validator('words', 'skipped_words')
    @classmethod
    def _uppercase(cls, value: List[str]) -> List[str]:
        return [w.upper() for w in value]

    @property
    def is_empty(self) -> bool:
        """True when nothing was placed, i.e. there is no puzzle to play."""
        return not self.placed_words

    @property
    def findable_words(self) -> List[str]:
        """Distinct placed words in placement order."""
        seen: Dict[str, None] = {}
        for placed in self.placed_words:
            seen.setdefault(placed.word, None)
        return list(seen)
