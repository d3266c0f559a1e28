"""
Pydantic models for the puzzle layer.

PuzzleConfig mirrors the lesson's word search settings ({words, grid}),
so the same YAML/JSON document can be loaded directly.
"""

from typing import List, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from ..engine.builder import MAX_ATTEMPTS
from ..engine.words import normalize_words


DEFAULT_GRID_SIZE = 10


class PuzzleConfig(BaseModel):
    """Configuration for one word search puzzle."""
    model_config = ConfigDict(populate_by_name=True)

    words: List[str] = Field(default_factory=list)
    size: int = Field(
        default=DEFAULT_GRID_SIZE,
        ge=1,
        validation_alias=AliasChoices('size', 'grid'),
    )
    seed: Optional[int] = None
    max_attempts: int = Field(default=MAX_ATTEMPTS, ge=1)

    @field_validator('words')
    @classmethod
    def _normalize(cls, value: List[str]) -> List[str]:
        return normalize_words(value)
