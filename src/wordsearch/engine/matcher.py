"""
Selection matching for word search puzzles.

A pointer gesture drives a small state machine:

    IDLE --begin--> SELECTING --end--> EVALUATED --begin--> SELECTING ...

While SELECTING, each extension must step to a neighbouring cell (row and
column delta at most 1) that is not already on the path. On release, the
letters along the path are compared to the targets, forwards or reversed.
Bad input never raises; it just leaves the selection unchanged.
"""

import logging
from typing import Iterable, List, Literal, Optional, Sequence

from pydantic import BaseModel, Field

from .models import Grid, MIN_WORD_LENGTH, Position


_log = logging.getLogger(__name__)

SelectionState = Literal["IDLE", "SELECTING", "EVALUATED"]


def read_letters(grid: Grid, path: Sequence[Sequence[int]]) -> str:
    """Letters under the path, in path order."""
    return grid.letters_along(path)


def match_word(candidate: str, targets: Iterable[str]) -> Optional[str]:
    """
    Return the first target spelled by candidate forwards or backwards.

    Candidates shorter than two letters never match.
    """
    if len(candidate) < MIN_WORD_LENGTH:
        return None
    for target in targets:
        word = target.upper()
        if candidate == word or candidate == word[::-1]:
            return word
    return None


def is_adjacent(a: Sequence[int], b: Sequence[int]) -> bool:
    return abs(a[0] - b[0]) <= 1 and abs(a[1] - b[1]) <= 1


class SelectionMatcher(BaseModel):
    """
    Tracks the live selection path and the words found so far.

    Attributes:
        grid: The puzzle grid being searched
        targets: Words that count as a match (uppercase)
        path: Cells selected in the current gesture
        state: Gesture state
        found_words: Confirmed words, each at most once, in the order found
    """

    grid: Grid
    targets: List[str] = Field(default_factory=list)
    path: List[Position] = Field(default_factory=list)
    state: SelectionState = "IDLE"
    found_words: List[str] = Field(default_factory=list)

    def model_post_init(self, __context) -> None:
        self.targets = [t.upper() for t in self.targets]

    @property
    def is_selecting(self) -> bool:
        return self.state == "SELECTING"

    @property
    def candidate(self) -> str:
        """Letters spelled by the current path."""
        return read_letters(self.grid, self.path)

    def is_selected(self, cell: Sequence[int]) -> bool:
        return Position(*cell) in self.path

    def is_found(self, word: str) -> bool:
        return word.upper() in self.found_words

    def begin_selection(self, cell: Sequence[int]) -> None:
        """Start a new gesture at cell. Cells outside the grid are ignored."""
        if not self.grid.contains(cell):
            return
        self.path = [Position(*cell)]
        self.state = "SELECTING"

    def extend_selection(self, cell: Sequence[int]) -> bool:
        """
        Append cell to the path if the move is legal.

        Returns:
            True if the cell was appended, False if the call was a no-op
        """
        if not self.is_selecting or not self.path:
            return False
        if not self.grid.contains(cell):
            return False

        position = Position(*cell)
        # Adjacency applies from the first step on, including the second cell
        if not is_adjacent(self.path[-1], position):
            return False
        if position in self.path:
            return False

        self.path.append(position)
        return True

    def end_selection(self) -> Optional[str]:
        """
        Finish the gesture and evaluate the path.

        Returns:
            The matched word (uppercase), or None. A word that was already
            found is returned again but not re-added.
        """
        if not self.is_selecting:
            return None

        word = match_word(self.candidate, self.targets)
        if word is not None and word not in self.found_words:
            self.found_words.append(word)
            _log.debug("Found '%s' (%d found)", word, len(self.found_words))

        self.path = []
        self.state = "EVALUATED"
        return word

    def reset(self) -> None:
        """Forget the current gesture and all found words."""
        self.path = []
        self.state = "IDLE"
        self.found_words = []
