"""Word list normalization utilities."""

import re
from typing import Iterable, List


_NON_LETTERS = re.compile(r'[^A-Z]')


def normalize_word(text: str) -> str:
    """
    Normalize a word for the grid.

    Uppercases and strips anything outside A-Z, so " holy spirit " becomes
    "HOLYSPIRIT". Returns an empty string when nothing is left.
    """
    if not text:
        return ""
    return _NON_LETTERS.sub('', text.upper())


def normalize_words(words: Iterable[str]) -> List[str]:
    """Normalize each word in order, dropping those that end up empty. Duplicates are kept."""
    normalized = (normalize_word(w) for w in words)
    return [w for w in normalized if w]


def add_word(words: List[str], text: str) -> List[str]:
    """
    Add a word to a word list the way the lesson editor does.

    Args:
        words: Existing (normalized) word list
        text: Raw word as typed

    Returns:
        A new list with the normalized word appended

    Raises:
        ValueError: If the word is empty after normalization or already present
    """
    word = normalize_word(text)
    if not word:
        raise ValueError("Please enter a word")
    if word in words:
        raise ValueError(f"Word '{word}' already exists")
    return [*words, word]
