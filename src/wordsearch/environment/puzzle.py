import logging
import random
from typing import Any, Dict, List, Optional, Sequence
from pydantic import BaseModel, ConfigDict, Field

from .models import PuzzleConfig
from ..engine.builder import build
from ..engine.matcher import SelectionMatcher
from ..engine.models import BuildResult, Grid, PlacedWord, Position


_log = logging.getLogger(__name__)


class Puzzle(BaseModel):
    """
    One playable word search instance.

    Owns the grid, the placed words and the found words. A new puzzle
    discards all three and rebuilds them; nothing carries over.

    Attributes:
        config: Words, size and seed used to build the grid
        result: Output of the grid builder
        matcher: Selection state and found words for the current grid
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: PuzzleConfig = Field(default_factory=PuzzleConfig)
    result: Optional[BuildResult] = None
    matcher: Optional[SelectionMatcher] = None
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.config.seed)

    @classmethod
    def create(cls, config: Optional[PuzzleConfig] = None, **config_kwargs: Any) -> "Puzzle":
        """
        Factory method to create a puzzle with a freshly built grid.

        Args:
            config: Optional PuzzleConfig instance
            **config_kwargs: Config parameters if config not provided

        Returns:
            A Puzzle ready for selection input
        """
        if config is None:
            config = PuzzleConfig(**config_kwargs)

        puzzle = cls(config=config)
        puzzle.new_puzzle()
        return puzzle

    def new_puzzle(self) -> None:
        """Discard the current grid and found words and build a new layout."""
        self.result = build(
            self.config.words,
            self.config.size,
            rng=self._rng,
            max_attempts=self.config.max_attempts,
        )
        # Only placed words count, so found never exceeds total_findable
        self.matcher = SelectionMatcher(
            grid=self.result.grid,
            targets=self.result.findable_words,
        )
        if self.result.is_empty:
            _log.debug("No words placed; puzzle unavailable")

    def _require_built(self) -> None:
        if self.result is None or self.matcher is None:
            raise ValueError("Puzzle not built; call new_puzzle() first")

    @property
    def grid(self) -> Grid:
        self._require_built()
        return self.result.grid

    @property
    def placed_words(self) -> List[PlacedWord]:
        self._require_built()
        return self.result.placed_words

    @property
    def available(self) -> bool:
        """False when there is nothing to find (empty word list or nothing placed)."""
        return self.result is not None and not self.result.is_empty

    @property
    def findable_words(self) -> List[str]:
        self._require_built()
        return self.result.findable_words

    @property
    def total_findable(self) -> int:
        """Number of distinct words actually placed; the denominator for "X of Y found"."""
        return len(self.findable_words)

    @property
    def found_words(self) -> List[str]:
        self._require_built()
        return list(self.matcher.found_words)

    @property
    def found_count(self) -> int:
        return len(self.found_words)

    @property
    def is_solved(self) -> bool:
        if not self.available:
            return False
        found = set(self.matcher.found_words)
        return all(word in found for word in self.findable_words)

    @property
    def is_selecting(self) -> bool:
        return self.matcher is not None and self.matcher.is_selecting

    def begin_selection(self, cell: Sequence[int]) -> None:
        self._require_built()
        self.matcher.begin_selection(cell)

    def extend_selection(self, cell: Sequence[int]) -> bool:
        self._require_built()
        return self.matcher.extend_selection(cell)

    def end_selection(self) -> Optional[str]:
        self._require_built()
        return self.matcher.end_selection()

    def select(self, path: Sequence[Sequence[int]]) -> Optional[str]:
        """Run a whole gesture over path: press, drag through each cell, release."""
        if not path:
            return None
        self.begin_selection(path[0])
        for cell in path[1:]:
            self.extend_selection(cell)
        return self.end_selection()

    def is_selected(self, cell: Sequence[int]) -> bool:
        return self.matcher is not None and self.matcher.is_selected(cell)

    def is_found(self, cell: Sequence[int]) -> bool:
        """Check whether cell belongs to any placed word that has been found."""
        self._require_built()
        position = Position(*cell)
        found = set(self.matcher.found_words)
        return any(
            placed.word in found and position in placed.positions
            for placed in self.result.placed_words
        )

    def get_state(self) -> Dict:
        """
        Get the current puzzle state as a dictionary.

        Useful for handing to a rendering layer.

        Returns:
            Dictionary containing puzzle state
        """
        self._require_built()
        return {
            "size": self.grid.size,
            "rows": self.grid.rows(),
            "available": self.available,
            "words": list(dict.fromkeys(self.result.words)),
            "placed_words": self.findable_words,
            "skipped_words": list(self.result.skipped_words),
            "found_words": self.found_words,
            "found_count": self.found_count,
            "total_findable": self.total_findable,
            "is_solved": self.is_solved,
            "is_selecting": self.is_selecting,
            "selection": [tuple(p) for p in self.matcher.path],
        }
