"""Sequential hint numbering and the clue dictionary."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from ..core.constants import Direction
from ..core.models import HintClues


class HintNumberer:
    """Allocates hint numbers in placement order and stores clue text."""

    def __init__(self) -> None:
        self.counter = 1
        self.entries: Dict[int, HintClues] = {}

    def allocate(self, direction: Direction, clue: str) -> int:
        number = self.counter
        entry = HintClues()
        entry.set(direction, clue)
        self.entries[number] = entry
        self.counter += 1
        return number

    def merge(self, number: int, direction: Direction, clue: str) -> None:
        """Attach ``clue`` to an existing number; the other direction is untouched."""

        self.entries[number].set(direction, clue)

    def clue(self, number: int, direction: Direction) -> Optional[str]:
        entry = self.entries.get(number)
        return entry.get(direction) if entry else None

    def snapshot(self) -> Dict[int, Tuple[Optional[str], Optional[str]]]:
        return {number: entry.as_pair() for number, entry in self.entries.items()}
