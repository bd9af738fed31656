"""Shared constants and enumerations for the crossword builder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Direction(str, Enum):
    """Word directions supported by the board."""

    ACROSS = "ACROSS"
    DOWN = "DOWN"

    @property
    def index(self) -> int:
        """Slot of this direction in ``(across, down)`` pairs."""
        return 0 if self is Direction.ACROSS else 1

    @property
    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Direction.ACROSS else (1, 0)

    @property
    def perpendicular(self) -> "Direction":
        return Direction.DOWN if self is Direction.ACROSS else Direction.ACROSS


# Horizontal placements are always tried before vertical ones.
PLACEMENT_ORDER: Tuple[Direction, ...] = (Direction.ACROSS, Direction.DOWN)

ORTHOGONAL_STEPS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    @property
    def center(self) -> Tuple[int, int]:
        return self.rows // 2, self.cols // 2
