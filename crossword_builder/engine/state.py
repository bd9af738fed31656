"""Mutable state owned by a single generation run."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, List

from ..core.models import PlacedWord
from .board import Board
from .hints import HintNumberer


@dataclass
class GenerationState:
    """Everything one ``generate()`` call mutates.

    ``unplaced`` holds words that failed to connect in the current round,
    ``dropped`` the words that ended permanently unplaced.
    """

    board: Board
    clues: Dict[str, str]
    rng: random.Random
    numberer: HintNumberer = field(default_factory=HintNumberer)
    placed: List[PlacedWord] = field(default_factory=list)
    unplaced: List[str] = field(default_factory=list)
    dropped: List[str] = field(default_factory=list)
    seed_unfittable: bool = False

    @classmethod
    def create(
        cls, rows: int, cols: int, clues: Dict[str, str], rng: random.Random
    ) -> "GenerationState":
        return cls(board=Board(rows, cols), clues=dict(clues), rng=rng)

    def clue_for(self, word: str) -> str:
        return self.clues[word]
