"""Retry loop for words that could not be connected on the first pass."""

from __future__ import annotations

from typing import List

from ..utils.logger import get_logger
from .placement import PlacementEngine
from .state import GenerationState


LOGGER = get_logger(__name__)


class RetryScheduler:
    """Re-attempts unplaced words until a round makes no progress.

    Words that still cannot connect are forced into isolated empty regions;
    each forced placement adds letters, so the connection loop runs again
    afterwards for whatever is still queued.
    """

    def __init__(self, engine: PlacementEngine, place_isolated: bool = True) -> None:
        self.engine = engine
        self.place_isolated = place_isolated

    def run(self, state: GenerationState) -> None:
        self.retry_until_fixpoint(state)

        if not self.place_isolated:
            self._drop(state, list(state.unplaced))
            state.unplaced.clear()
            return

        while state.unplaced:
            word = state.unplaced.pop(0)
            if not self.place_isolated_word(state, word):
                self._drop(state, [word])
            self.retry_until_fixpoint(state)

    def retry_until_fixpoint(self, state: GenerationState) -> int:
        """Run connection rounds while at least one word gets placed.

        Returns the number of rounds executed.
        """

        rounds = 0
        while state.unplaced:
            rounds += 1
            pending = list(state.unplaced)
            state.unplaced.clear()
            placed = self.engine.place_remaining(state, pending)
            LOGGER.debug(
                "Retry round %d placed %d of %d pending words", rounds, placed, len(pending)
            )
            if not placed:
                break
        return rounds

    def place_isolated_word(self, state: GenerationState, word: str) -> bool:
        """Start ``word`` on a shuffled empty cell that has no lettered neighbour."""

        candidates = state.board.isolated_empty_cells()
        state.rng.shuffle(candidates)
        for location in candidates:
            direction = self.engine.attempt_word_placement(state, location, "", word[1:], word)
            if direction is not None:
                LOGGER.info(
                    "Placed %s in an isolated region at %s (%s)",
                    word,
                    location,
                    direction.value.lower(),
                )
                return True
        return False

    @staticmethod
    def _drop(state: GenerationState, words: List[str]) -> None:
        for word in words:
            LOGGER.warning("Unable to place %s; leaving it off the board", word)
            state.dropped.append(word)
