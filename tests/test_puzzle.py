"""
Test suite for the puzzle lifecycle and its configuration.
"""

import itertools

import pytest
from pydantic import ValidationError

from wordsearch.environment import Puzzle, PuzzleConfig, DEFAULT_GRID_SIZE
from wordsearch.engine import find_word


class TestPuzzleConfig:
    """Configuration loading and validation."""

    def test_defaults(self):
        config = PuzzleConfig()
        assert config.words == []
        assert config.size == DEFAULT_GRID_SIZE
        assert config.seed is None
        assert config.max_attempts == 100

    def test_grid_alias(self):
        """The lesson document stores the size under 'grid'."""
        config = PuzzleConfig(words=["TRUST"], grid=12)
        assert config.size == 12

    def test_words_normalized(self):
        config = PuzzleConfig(words=[" trust ", "holy spirit", ""])
        assert config.words == ["TRUST", "HOLYSPIRIT"]

    @pytest.mark.parametrize("size", [0, -1])
    def test_invalid_size(self, size):
        with pytest.raises(ValidationError):
            PuzzleConfig(words=["CAT"], size=size)

    def test_invalid_max_attempts(self):
        with pytest.raises(ValidationError):
            PuzzleConfig(max_attempts=0)


class TestPuzzleLifecycle:
    """Building, playing and regenerating a puzzle."""

    def test_create(self):
        puzzle = Puzzle.create(words=["TRUST", "GOD", "GRACE"], size=10, seed=1)
        assert puzzle.available is True
        assert puzzle.grid.size == 10
        assert puzzle.found_count == 0
        assert puzzle.total_findable == len(puzzle.findable_words)
        assert puzzle.is_solved is False

    def test_empty_words_unavailable(self):
        """No words means no puzzle, but still a full grid."""
        puzzle = Puzzle.create(words=[], size=4, seed=0)
        assert puzzle.available is False
        assert puzzle.total_findable == 0
        assert puzzle.is_solved is False
        assert all(len(row) == 4 for row in puzzle.grid.rows())

    def test_total_findable_uses_placed_words(self):
        """Skipped words do not count toward completion."""
        puzzle = Puzzle.create(words=["ELEPHANT", "OX"], size=3, seed=2)
        assert puzzle.total_findable == 1
        assert puzzle.result.skipped_words == ["ELEPHANT"]

    def test_duplicates_count_once(self):
        puzzle = Puzzle.create(words=["SUN", "sun"], size=6, seed=3)
        assert puzzle.total_findable == 1

    def test_solving_every_word(self):
        """Selecting each placed word solves the puzzle."""
        puzzle = Puzzle.create(words=["TRUST", "NEEDS", "GOD"], size=8, seed=5)
        for placed in puzzle.placed_words:
            assert puzzle.select(placed.positions) == placed.word
        assert puzzle.found_count == puzzle.total_findable
        assert puzzle.is_solved is True

    def test_reversed_selection(self):
        puzzle = Puzzle.create(words=["FAITH"], size=6, seed=8)
        placed = puzzle.placed_words[0]
        assert puzzle.select(list(reversed(placed.positions))) == "FAITH"

    def test_is_found_highlights_cells(self):
        puzzle = Puzzle.create(words=["GRACE"], size=6, seed=4)
        placed = puzzle.placed_words[0]
        assert not puzzle.is_found(placed.positions[0])
        puzzle.select(placed.positions)
        assert all(puzzle.is_found(p) for p in placed.positions)

    def test_is_selected_during_gesture(self):
        puzzle = Puzzle.create(words=["GRACE"], size=6, seed=4)
        puzzle.begin_selection((0, 0))
        assert puzzle.is_selecting is True
        assert puzzle.is_selected((0, 0)) is True
        puzzle.end_selection()
        assert puzzle.is_selected((0, 0)) is False

    def test_new_puzzle_resets_found_words(self):
        puzzle = Puzzle.create(words=["TRUST"], size=6, seed=6)
        puzzle.select(puzzle.placed_words[0].positions)
        assert puzzle.found_count == 1
        puzzle.new_puzzle()
        assert puzzle.found_count == 0
        assert puzzle.is_solved is False
        assert find_word(puzzle.grid, "TRUST") is not None

    def test_get_state(self):
        puzzle = Puzzle.create(words=["TRUST", "ELEPHANTS"], size=6, seed=7)
        state = puzzle.get_state()
        assert state["size"] == 6
        assert len(state["rows"]) == 6
        assert state["available"] is True
        assert state["words"] == ["TRUST", "ELEPHANTS"]
        assert state["placed_words"] == ["TRUST"]
        assert state["skipped_words"] == ["ELEPHANTS"]
        assert state["found_count"] == 0
        assert state["total_findable"] == 1
        assert state["is_selecting"] is False
        assert state["selection"] == []

    def test_unbuilt_puzzle_raises(self):
        puzzle = Puzzle(config=PuzzleConfig(words=["CAT"]))
        with pytest.raises(ValueError):
            puzzle.grid


class TestFoundCount:
    """Found words stay within the placed words."""

    def test_skipped_word_in_filler_not_counted(self):
        """Spelling every pair word, placed or not, never exceeds the findable total."""
        words = ["".join(pair) for pair in itertools.combinations("ABCDE", 2)]
        puzzle = Puzzle.create(words=words, size=3, seed=1)
        for word in words:
            path = find_word(puzzle.grid, word)
            if path is not None:
                puzzle.select(path)
        assert puzzle.found_count <= puzzle.total_findable
        assert set(puzzle.found_words) <= set(puzzle.findable_words)
        assert puzzle.get_state()["found_count"] <= puzzle.get_state()["total_findable"]

    def test_only_placed_words_are_targets(self):
        """Skipped words are never offered to the matcher."""
        puzzle = Puzzle.create(words=["OX", "ELEPHANT", "ox"], size=3, seed=2)
        assert puzzle.matcher.targets == ["OX"]

    def test_single_letter_word_is_not_findable(self):
        """A one-letter word can never be selected, so it leaves the puzzle unavailable."""
        puzzle = Puzzle.create(words=["A"], size=3, seed=0)
        assert puzzle.available is False
        assert puzzle.total_findable == 0
        assert puzzle.result.skipped_words == ["A"]
