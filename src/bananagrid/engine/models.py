"""
Pydantic models for the engine layer.

Configuration (solver settings and heuristic weights) and results of a
search or a full build.
"""

from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..board.grid import DEFAULT_SIDE_LENGTH
from ..board.models import Move


class HeuristicWeights(BaseModel):
    """Tunable weights of the board evaluation."""

    model_config = ConfigDict(frozen=True)

    tile_penalty: int = 20
    rare_letters: str = "ZQX"
    rare_penalty: int = 70

    # A single letter crowding the hand
    share_threshold: float = 0.4
    high_share_threshold: float = 0.5
    small_hand: int = 6
    cluster_count: int = 3
    cluster_others: int = 2

    vowel_share_penalty: int = 60
    vowel_high_share_penalty: int = 85
    vowel_cluster_penalty: int = 200
    consonant_share_penalty: int = 100
    consonant_high_share_penalty: int = 140
    consonant_cluster_penalty: int = 400

    @field_validator("rare_letters")
    @classmethod
    def _uppercase_rare_letters(cls, v: str) -> str:
        # Inventory keys are uppercase
        return v.upper()

    @model_validator(mode="after")
    def _vowels_cheaper_than_consonants(self) -> "HeuristicWeights":
        pairs = [
            ("share", self.vowel_share_penalty, self.consonant_share_penalty),
            ("high_share", self.vowel_high_share_penalty, self.consonant_high_share_penalty),
            ("cluster", self.vowel_cluster_penalty, self.consonant_cluster_penalty),
        ]
        for name, vowel, consonant in pairs:
            if vowel > consonant:
                raise ValueError(
                    f"vowel_{name}_penalty ({vowel}) must not exceed "
                    f"consonant_{name}_penalty ({consonant})"
                )
        return self


class SolverConfig(BaseModel):
    """Configuration for building a crossword."""
    side_length: int = Field(default=DEFAULT_SIDE_LENGTH, ge=1)
    search_depth: int = Field(default=1, ge=1)
    words_path: Optional[Path] = None
    weights: HeuristicWeights = Field(default_factory=HeuristicWeights)


class SearchResult(BaseModel):
    """Best move found at the root of a search, with its score."""
    move: Optional[Move] = None
    score: int
    moves_considered: int = 0


class BuildResult(BaseModel):
    """Outcome of building a crossword."""
    success: bool
    end_reason: str = ""
    board: str = ""
    words: List[str] = Field(default_factory=list)
    placements: List[str] = Field(default_factory=list)
    remaining: Dict[str, int] = Field(default_factory=dict)
    moves_committed: int = 0
    duration_seconds: float = 0.0


def load_config(config_path: Union[str, Path]) -> SolverConfig:
    """Load solver configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return SolverConfig(**data)
