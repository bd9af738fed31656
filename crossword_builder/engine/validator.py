"""Deterministic invariant checks for generated boards."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Set, Tuple

from ..core.exceptions import ValidationError
from ..core.models import PlacedWord
from ..utils.logger import get_logger

if TYPE_CHECKING:
    from .generator import GenerationResult


LOGGER = get_logger(__name__)

CellPair = Tuple[Tuple[int, int], Tuple[int, int]]


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Runs deterministic validation over a finished generation result."""

    def validate(self, result: GenerationResult) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_connectivity(result)
            self._check_no_orphan_letters(result)
            self._check_adjacency(result)
            self._check_hint_grid(result)
            self._check_hint_numbers(result)
            self._check_clue_round_trip(result)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    @staticmethod
    def _letter_cells(result: GenerationResult) -> List[Tuple[int, int]]:
        return [
            (r, c)
            for r, row in enumerate(result.board)
            for c, letter in enumerate(row)
            if letter is not None
        ]

    def _check_connectivity(self, result: GenerationResult) -> None:
        for placed in result.placed_words:
            for index, (r, c) in enumerate(placed.cells):
                if not (0 <= r < result.rows and 0 <= c < result.cols):
                    raise ValidationError(f"Word {placed.word} leaves the board at ({r},{c})")
                if result.board[r][c] != placed.word[index]:
                    raise ValidationError(
                        f"Word {placed.word} does not read back at ({placed.row},{placed.col})"
                    )

    def _check_no_orphan_letters(self, result: GenerationResult) -> None:
        covered: Set[Tuple[int, int]] = set()
        for placed in result.placed_words:
            covered.update(placed.cells)
        for r, c in self._letter_cells(result):
            if (r, c) not in covered:
                raise ValidationError(f"Letter at ({r},{c}) belongs to no placed word")

    def _check_adjacency(self, result: GenerationResult) -> None:
        linked: Set[CellPair] = set()
        for placed in result.placed_words:
            cells = placed.cells
            linked.update(zip(cells, cells[1:]))

        for r, c in self._letter_cells(result):
            for nr, nc in ((r, c + 1), (r + 1, c)):
                if nr >= result.rows or nc >= result.cols:
                    continue
                if result.board[nr][nc] is None:
                    continue
                if ((r, c), (nr, nc)) not in linked:
                    raise ValidationError(
                        f"Unrelated letters touch at ({r},{c}) and ({nr},{nc})"
                    )

    def _check_hint_grid(self, result: GenerationResult) -> None:
        for r, row in enumerate(result.board):
            for c, letter in enumerate(row):
                mark = result.hint_grid[r][c]
                if (letter is None) != (mark is None):
                    raise ValidationError(f"Hint mark mismatch at ({r},{c})")
        for placed in result.placed_words:
            for r, c in placed.cells:
                mark = result.hint_grid[r][c]
                if mark is None or mark[placed.direction.index] is None:
                    raise ValidationError(
                        f"Cell ({r},{c}) of {placed.word} lacks a {placed.direction.value.lower()} number"
                    )

    def _check_hint_numbers(self, result: GenerationResult) -> None:
        numbers = sorted(result.hint_dictionary)
        if numbers != list(range(1, len(numbers) + 1)):
            raise ValidationError(f"Hint numbers are not dense from 1: {numbers}")

        by_number: Dict[int, List[PlacedWord]] = defaultdict(list)
        for placed in result.placed_words:
            by_number[placed.number].append(placed)
        if set(by_number) != set(numbers):
            raise ValidationError("Hint dictionary does not match the placed words")

        for number, words in by_number.items():
            if len(words) == 1:
                continue
            if len(words) > 2:
                raise ValidationError(f"Hint {number} is shared by {len(words)} words")
            first, second = words
            shares_start = (first.row, first.col) == (second.row, second.col)
            if first.direction == second.direction or not shares_start:
                raise ValidationError(
                    f"Hint {number} reused by {first.word} and {second.word} without a shared start"
                )

    def _check_clue_round_trip(self, result: GenerationResult) -> None:
        for placed in result.placed_words:
            clues = result.hint_dictionary.get(placed.number)
            expected = result.words[placed.word]
            if clues is None or clues[placed.direction.index] != expected:
                raise ValidationError(
                    f"Clue for {placed.word} missing under hint {placed.number} "
                    f"{placed.direction.value.lower()}"
                )
