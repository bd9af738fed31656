"""Data models supporting the crossword builder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .constants import Direction


@dataclass(frozen=True)
class WordEntry:
    """A word as supplied by the caller, with its opaque clue text."""

    word: str
    clue: str


@dataclass
class HintMark:
    """Hint numbers carried by one letter cell, one per direction."""

    across: Optional[int] = None
    down: Optional[int] = None

    def get(self, direction: Direction) -> Optional[int]:
        return self.across if direction is Direction.ACROSS else self.down

    def set(self, direction: Direction, number: int) -> None:
        if direction is Direction.ACROSS:
            self.across = number
        else:
            self.down = number

    def as_pair(self) -> Tuple[Optional[int], Optional[int]]:
        return (self.across, self.down)


@dataclass
class HintClues:
    """Clue texts stored under one hint number."""

    across: Optional[str] = None
    down: Optional[str] = None

    def get(self, direction: Direction) -> Optional[str]:
        return self.across if direction is Direction.ACROSS else self.down

    def set(self, direction: Direction, clue: str) -> None:
        if direction is Direction.ACROSS:
            self.across = clue
        else:
            self.down = clue

    def as_pair(self) -> Tuple[Optional[str], Optional[str]]:
        return (self.across, self.down)


@dataclass(frozen=True)
class PlacedWord:
    """A word committed to the board, anchored at its first letter."""

    word: str
    row: int
    col: int
    direction: Direction
    number: int

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        dr, dc = self.direction.step
        return [(self.row + dr * i, self.col + dc * i) for i in range(self.length)]
