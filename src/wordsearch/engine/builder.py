"""
Grid construction for word search puzzles.

Words are placed best-effort: each one gets a fixed number of random
(direction, start) attempts and is skipped when none of them fits. A word
may cross another only where both need the same letter. Whatever is left
empty afterwards is filled with random letters.
"""

import logging
import random
import string
from typing import Iterable, List, Optional, Sequence

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
from .words import normalize_word, normalize_words


_log = logging.getLogger(__name__)

ALPHABET = string.ascii_uppercase
MAX_ATTEMPTS = 100


class GridBuilder:
    """
    Mutable scratch grid used while placing words.

    Call freeze() once placement and filling are done to get an immutable Grid.
    """

    def __init__(self, size: int, rng: Optional[random.Random] = None):
        if size < 1:
            raise ValueError(f"Grid size must be at least 1, got {size}")
        self.size = size
        self.rng = rng or random.Random()
        self._letters: List[List[str]] = [[''] * size for _ in range(size)]
        self._owners: List[List[Optional[int]]] = [[None] * size for _ in range(size)]
        self.placed_words: List[PlacedWord] = []

    def positions_for(self, word: str, start: Sequence[int], direction: Direction) -> List[Position]:
        dr, dc = DIRECTION_VECTORS[direction]
        row, col = start
        return [Position(row + dr * i, col + dc * i) for i in range(len(word))]

    def can_place(self, word: str, start: Sequence[int], direction: Direction) -> bool:
        """Check that every cell is in bounds and either empty or already holds the needed letter."""
        for letter, (row, col) in zip(word, self.positions_for(word, start, direction)):
            if not (0 <= row < self.size and 0 <= col < self.size):
                return False
            existing = self._letters[row][col]
            if existing and existing != letter:
                return False
        return True

    def place(
        self,
        word: str,
        start: Sequence[int],
        direction: Direction,
        word_index: Optional[int] = None,
    ) -> PlacedWord:
        """
        Commit a word at a given start and direction.

        Args:
            word: Word to write (uppercased here)
            start: (row, col) of the first letter
            direction: One of the four placement directions
            word_index: Index of the word in the input list (defaults to placement order)

        Returns:
            The PlacedWord record

        Raises:
            ValueError: If the word does not fit there
        """
        word = word.upper()
        if not word:
            raise ValueError("Cannot place an empty word")
        if not self.can_place(word, start, direction):
            raise ValueError(f"'{word}' does not fit at {tuple(start)} going {direction}")

        if word_index is None:
            word_index = len(self.placed_words)

        positions = self.positions_for(word, start, direction)
        for letter, (row, col) in zip(word, positions):
            self._letters[row][col] = letter
            self._owners[row][col] = word_index

        placed = PlacedWord(word=word, word_index=word_index, direction=direction, positions=positions)
        self.placed_words.append(placed)
        return placed

    def try_place(self, word: str, word_index: int, max_attempts: int = MAX_ATTEMPTS) -> Optional[PlacedWord]:
        """Try random directions and starts up to max_attempts times. Returns None if nothing fit."""
        word = word.upper()
        directions = list(DIRECTION_VECTORS)
        for _ in range(max_attempts):
            direction = self.rng.choice(directions)
            start = (self.rng.randrange(self.size), self.rng.randrange(self.size))
            if self.can_place(word, start, direction):
                return self.place(word, start, direction, word_index)
        return None

    def fill(self) -> None:
        """Fill every still-empty cell with a random letter."""
        for row in self._letters:
            for col, letter in enumerate(row):
                if not letter:
                    row[col] = self.rng.choice(ALPHABET)

    def freeze(self) -> Grid:
        """
        Produce the immutable Grid.

        Raises:
            ValueError: If any cell is still empty (call fill() first)
        """
        rows = []
        for r in range(self.size):
            row = []
            for c in range(self.size):
                letter = self._letters[r][c]
                if not letter:
                    raise ValueError(f"Cell ({r}, {c}) is empty; fill the grid before freezing")
                owner = self._owners[r][c]
                row.append(Cell(letter=letter, is_part_of_word=owner is not None, word_index=owner))
            rows.append(tuple(row))
        return Grid(size=self.size, cells=tuple(rows))


def build(
    words: Iterable[str],
    size: int,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_ATTEMPTS,
) -> BuildResult:
    """
    Build a fully populated word search grid.

    Words that cannot be placed (single letters, longer than the grid,
    or no free geometry within max_attempts) are left out of placed_words
    and listed in skipped_words. An empty word list gives a filler-only grid and no
    placed words.

    Args:
        words: Target words, any case
        size: Grid dimension
        seed: Seed for a private random generator (ignored if rng is given)
        rng: Random generator to draw from
        max_attempts: Placement attempts per word

    Returns:
        BuildResult with the grid, placed words and skipped words

    Raises:
        ValueError: If size < 1
    """
    if rng is None:
        rng = random.Random(seed)

    raw = list(words)
    targets = normalize_words(raw)
    builder = GridBuilder(size, rng)
    skipped: List[str] = []

    # Indexes refer to the caller's list, blanks included
    for index, text in enumerate(raw):
        word = normalize_word(text)
        if not word:
            continue
        if len(word) < MIN_WORD_LENGTH:
            # A single letter can never be matched by a selection
            _log.debug("Skipping '%s': shorter than %d letters", word, MIN_WORD_LENGTH)
            skipped.append(word)
            continue
        if len(word) > size:
            # Can never fit; burn no attempts on it
            _log.debug("Skipping '%s': longer than grid size %d", word, size)
            skipped.append(word)
            continue
        if builder.try_place(word, index, max_attempts) is None:
            _log.debug("Skipping '%s': no placement after %d attempts", word, max_attempts)
            skipped.append(word)

    builder.fill()
    _log.debug("Built %dx%d grid: %d placed, %d skipped", size, size, len(builder.placed_words), len(skipped))

    return BuildResult(
        grid=builder.freeze(),
        words=targets,
        placed_words=builder.placed_words,
        skipped_words=skipped,
    )
