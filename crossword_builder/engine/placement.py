"""Seed placement, connection attempts and the word selection strategy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..core.constants import PLACEMENT_ORDER, Direction
from ..core.models import PlacedWord
from ..utils.logger import get_logger
from .board import Board, LetterMatrix, Position
from .state import GenerationState


LOGGER = get_logger(__name__)


@dataclass
class TrialPlacement:
    """A validated but uncommitted placement on a copy of the letters."""

    letters: LetterMatrix
    start: Position
    direction: Direction
    written: List[Tuple[str, int, int]]


class PlacementEngine:
    """Places words on a :class:`Board` without ever producing partial writes.

    Every attempt runs on a full copy of the letter matrix and is committed
    only when each of its letters passed the collision rules.
    """

    # ------------------------------------------------------------------
    # Seed word
    # ------------------------------------------------------------------
    def place_seed(self, state: GenerationState, word: str) -> bool:
        """Place ``word`` through the board center, horizontally when it fits."""

        board = state.board
        center_row, center_col = board.bounds.center
        if len(word) <= board.bounds.cols:
            direction = Direction.ACROSS
            start = (center_row, center_col - len(word) // 2)
        elif len(word) <= board.bounds.rows:
            direction = Direction.DOWN
            start = (center_row - len(word) // 2, center_col)
        else:
            LOGGER.warning(
                "Seed word %s (%d letters) does not fit a %dx%d board",
                word,
                len(word),
                board.bounds.rows,
                board.bounds.cols,
            )
            return False

        trial = self._trial(board, start, "", word[0], word[1:], direction)
        if trial is None:  # pragma: no cover - the board is blank at this point
            return False
        self._commit(state, word, trial, reuse_number=None)
        LOGGER.info("Seeded %s %s at %s", word, direction.value.lower(), start)
        return True

    # ------------------------------------------------------------------
    # Selection strategy
    # ------------------------------------------------------------------
    def place_remaining(self, state: GenerationState, words: Sequence[str]) -> int:
        """Try to connect each word in order; failures go to ``state.unplaced``.

        Returns the number of words placed.
        """

        placed = 0
        for word in words:
            if self.place_word(state, word):
                placed += 1
            else:
                LOGGER.debug("No connection for %s this round", word)
                state.unplaced.append(word)
        return placed

    def place_word(self, state: GenerationState, word: str) -> bool:
        """Connect ``word`` to the first letter occurrence that accepts it."""

        for index, char in enumerate(word):
            first_half = word[:index]
            second_half = word[index + 1:]
            for location in state.board.occurrences(char):
                direction = self.attempt_word_placement(
                    state, location, first_half, second_half, word
                )
                if direction is not None:
                    return True
        return False

    # ------------------------------------------------------------------
    # Connection attempt
    # ------------------------------------------------------------------
    def attempt_word_placement(
        self,
        state: GenerationState,
        location: Position,
        first_half: str,
        second_half: str,
        word: str,
    ) -> Optional[Direction]:
        """Place ``word`` so that its letter after ``first_half`` sits at ``location``.

        Horizontal placement is tried first, then vertical. Returns the
        direction that succeeded, or ``None`` with the board untouched.
        """

        anchor_letter = word[len(first_half)]
        board = state.board
        for direction in PLACEMENT_ORDER:
            trial = self._trial(board, location, first_half, anchor_letter, second_half, direction)
            if trial is None:
                continue
            reuse_number = self._reusable_number(state, location, first_half, direction)
            self._commit(state, word, trial, reuse_number)
            return direction
        return None

    def _trial(
        self,
        board: Board,
        location: Position,
        first_half: str,
        anchor_letter: str,
        second_half: str,
        direction: Direction,
    ) -> Optional[TrialPlacement]:
        row, col = location
        dr, dc = direction.step
        pr, pc = direction.perpendicular.step
        start = (row - dr * len(first_half), col - dc * len(first_half))
        end = (row + dr * len(second_half), col + dc * len(second_half))

        if not board.bounds.contains(*start) or not board.bounds.contains(*end):
            return None
        # The word may not run on into letters before or after it.
        if not board.is_empty(start[0] - dr, start[1] - dc):
            return None
        if not board.is_empty(end[0] + dr, end[1] + dc):
            return None

        letters = board.copy_letters()
        written: List[Tuple[str, int, int]] = []
        for offset, char in enumerate(first_half + anchor_letter + second_half):
            r, c = start[0] + dr * offset, start[1] + dc * offset
            existing = letters[r][c]
            if existing == char:
                # Shared cells must cross; a word may not absorb a collinear one.
                mark = board.hint(r, c)
                if mark is not None and mark.get(direction) is not None:
                    return None
                continue
            if existing is not None:
                return None
            if not board.is_empty(r - pr, c - pc) or not board.is_empty(r + pr, c + pc):
                return None
            letters[r][c] = char
            written.append((char, r, c))
        return TrialPlacement(letters=letters, start=start, direction=direction, written=written)

    @staticmethod
    def _reusable_number(
        state: GenerationState, location: Position, first_half: str, direction: Direction
    ) -> Optional[int]:
        """Number of a perpendicular word that starts exactly at ``location``.

        A number whose clue slot for ``direction`` is already taken is never
        reused, so merging cannot overwrite an existing clue.
        """

        board = state.board
        if first_half:
            return None
        mark = board.hint(*location)
        if mark is None:
            return None
        crossing = direction.perpendicular
        number = mark.get(crossing)
        if number is None:
            return None
        dr, dc = crossing.step
        if board.hint(location[0] - dr, location[1] - dc) is not None:
            return None
        if state.numberer.clue(number, direction) is not None:
            return None
        return number

    # ------------------------------------------------------------------
    # Commit
    # ------------------------------------------------------------------
    def _commit(
        self,
        state: GenerationState,
        word: str,
        trial: TrialPlacement,
        reuse_number: Optional[int],
    ) -> PlacedWord:
        board = state.board
        clue = state.clue_for(word)
        board.commit(trial.letters, trial.written)

        if reuse_number is not None:
            number = reuse_number
            state.numberer.merge(number, trial.direction, clue)
        else:
            number = state.numberer.allocate(trial.direction, clue)

        placed = PlacedWord(
            word=word,
            row=trial.start[0],
            col=trial.start[1],
            direction=trial.direction,
            number=number,
        )
        for row, col in placed.cells:
            board.mark(row, col, trial.direction, number)
        state.placed.append(placed)
        LOGGER.debug(
            "Placed %s %s at (%d,%d) as hint %d",
            word,
            trial.direction.value.lower(),
            placed.row,
            placed.col,
            number,
        )
        return placed
