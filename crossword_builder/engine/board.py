"""Board representation: letters, hint marks and the placed-letter index."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..core.constants import ORTHOGONAL_STEPS, Bounds, Direction
from ..core.models import HintMark


LetterMatrix = List[List[Optional[str]]]
Position = Tuple[int, int]


class Board:
    """Mutable letter matrix plus the parallel hint-number matrix.

    Out-of-bounds lookups behave like empty cells so boundary checks at the
    board edges need no special casing by the placement rules.
    """

    def __init__(self, rows: int, cols: int) -> None:
        self.bounds = Bounds(rows=rows, cols=cols)
        self.letters: LetterMatrix = [[None] * cols for _ in range(rows)]
        self.hints: List[List[Optional[HintMark]]] = [[None] * cols for _ in range(rows)]
        self.placed_letters: Dict[str, List[Position]] = defaultdict(list)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def letter(self, row: int, col: int) -> Optional[str]:
        if not self.bounds.contains(row, col):
            return None
        return self.letters[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.letter(row, col) is None

    def hint(self, row: int, col: int) -> Optional[HintMark]:
        if not self.bounds.contains(row, col):
            return None
        return self.hints[row][col]

    def occurrences(self, letter: str) -> List[Position]:
        """Recorded positions of ``letter`` in write order (a copy)."""
        return list(self.placed_letters.get(letter, ()))

    def neighbors(self, row: int, col: int) -> Iterable[Position]:
        for dr, dc in ORTHOGONAL_STEPS:
            nr, nc = row + dr, col + dc
            if self.bounds.contains(nr, nc):
                yield nr, nc

    def isolated_empty_cells(self) -> List[Position]:
        """Empty cells with no letter in any of their four neighbours."""

        spots: List[Position] = []
        for r in range(self.bounds.rows):
            for c in range(self.bounds.cols):
                if self.letters[r][c] is not None:
                    continue
                if all(self.letters[nr][nc] is None for nr, nc in self.neighbors(r, c)):
                    spots.append((r, c))
        return spots

    def read(self, row: int, col: int, direction: Direction, length: int) -> str:
        """Read ``length`` cells starting at ``(row, col)``; empty cells read as ``.``."""

        dr, dc = direction.step
        return "".join(self.letter(row + dr * i, col + dc * i) or "." for i in range(length))

    @property
    def filled_count(self) -> int:
        return sum(1 for row in self.letters for letter in row if letter is not None)

    @property
    def is_blank(self) -> bool:
        return self.filled_count == 0

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------
    def copy_letters(self) -> LetterMatrix:
        """Full working copy of the letter matrix for a trial placement."""
        return [list(row) for row in self.letters]

    def commit(self, letters: LetterMatrix, written: Sequence[Tuple[str, int, int]]) -> None:
        """Replace the live matrix with a validated copy.

        ``written`` lists the cells that were empty before the trial; they are
        appended to the placed-letter index in write order.
        """

        self.letters = letters
        for char, row, col in written:
            self.placed_letters[char].append((row, col))

    # ------------------------------------------------------------------
    # Hint marks
    # ------------------------------------------------------------------
    def mark(self, row: int, col: int, direction: Direction, number: int) -> None:
        mark = self.hints[row][col]
        if mark is None:
            mark = HintMark()
            self.hints[row][col] = mark
        mark.set(direction, number)

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def letter_rows(self) -> Tuple[Tuple[Optional[str], ...], ...]:
        return tuple(tuple(row) for row in self.letters)

    def hint_rows(self) -> Tuple[Tuple[Optional[Tuple[Optional[int], Optional[int]]], ...], ...]:
        return tuple(
            tuple(mark.as_pair() if mark is not None else None for mark in row)
            for row in self.hints
        )
