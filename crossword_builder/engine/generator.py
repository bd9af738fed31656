"""Main crossword generation orchestration.

Three phases:
  1. Seed: the longest word goes through the center of the board.
  2. Connect: every other word, longest first, is attached to a letter it
     shares with the board.
  3. Retry: unconnected words are retried until a round makes no progress,
     then forced into isolated empty regions.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from ..core.constants import Direction
from ..core.exceptions import GenerationStateError, InputValidationError, ValidationError
from ..core.models import PlacedWord
from ..data.normalization import normalize_words, sort_by_length
from ..utils.logger import get_logger
from .placement import PlacementEngine
from .scheduler import RetryScheduler
from .state import GenerationState
from .validator import GridValidator


LOGGER = get_logger(__name__)

BoardRows = Tuple[Tuple[Optional[str], ...], ...]
HintRows = Tuple[Tuple[Optional[Tuple[Optional[int], Optional[int]]], ...], ...]
HintDictionary = Mapping[int, Tuple[Optional[str], Optional[str]]]


@dataclass
class GeneratorConfig:
    rows: int
    cols: int
    seed: Optional[int] = None
    place_isolated: bool = True
    check_invariants: bool = True

    def validate(self) -> None:
        for name in ("rows", "cols"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InputValidationError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise InputValidationError(f"{name} must be positive, got {value}")

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)


@dataclass(frozen=True, eq=False)
class GenerationResult:
    """Read-only snapshot of a finished generation run.

    Mappings are exposed through read-only proxies. Results compare and hash
    by identity.
    """

    rows: int
    cols: int
    board: BoardRows
    hint_grid: HintRows
    hint_dictionary: HintDictionary
    placed_words: Tuple[PlacedWord, ...]
    unplaced_words: Tuple[str, ...]
    words: Mapping[str, str] = field(repr=False)
    seed_unfittable: bool = False
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "hint_dictionary", MappingProxyType(dict(self.hint_dictionary)))
        object.__setattr__(self, "words", MappingProxyType(dict(self.words)))

    @property
    def is_complete(self) -> bool:
        return not self.unplaced_words and not self.seed_unfittable

    def placed(self, word: str) -> Optional[PlacedWord]:
        for placed in self.placed_words:
            if placed.word == word:
                return placed
        return None

    def clues(self, direction: Direction) -> Dict[int, str]:
        """Clue texts for one direction, keyed by hint number."""

        index = direction.index
        return {
            number: pair[index]
            for number, pair in sorted(self.hint_dictionary.items())
            if pair[index] is not None
        }

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "rows": self.rows,
            "cols": self.cols,
            "board": [list(row) for row in self.board],
            "hint_grid": [
                [list(mark) if mark is not None else None for mark in row]
                for row in self.hint_grid
            ],
            "hint_dictionary": {
                str(number): list(pair) for number, pair in sorted(self.hint_dictionary.items())
            },
            "placed_words": [
                {
                    "word": placed.word,
                    "number": placed.number,
                    "start": [placed.row, placed.col],
                    "direction": placed.direction.value,
                    "clue": self.words[placed.word],
                }
                for placed in self.placed_words
            ],
            "unplaced_words": list(self.unplaced_words),
            "seed_unfittable": self.seed_unfittable,
            "seed": self.seed,
        }


class CrosswordGenerator:
    """Builds one crossword from a word -> clue mapping.

    An instance runs exactly once; build a new generator to regenerate.
    """

    def __init__(
        self,
        words: Mapping[str, str],
        config: GeneratorConfig,
        engine: Optional[PlacementEngine] = None,
    ) -> None:
        config.validate()
        self.config = config
        self.words = normalize_words(words)
        self.rng = config.make_rng()
        self.engine = engine or PlacementEngine()
        self.scheduler = RetryScheduler(self.engine, place_isolated=config.place_isolated)
        self.validator = GridValidator()
        self._generated = False

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self) -> GenerationResult:
        if self._generated:
            raise GenerationStateError("CrosswordGenerator instances generate only once")
        self._generated = True

        state = GenerationState.create(self.config.rows, self.config.cols, self.words, self.rng)
        ordered = sort_by_length(self.words)
        LOGGER.info(
            "Generating %dx%d crossword from %d words",
            self.config.rows,
            self.config.cols,
            len(ordered),
        )
        if not ordered:
            LOGGER.info("Empty word list; nothing to place")
            return self._build_result(state)

        seed_word, remaining = ordered[0], ordered[1:]
        if not self.engine.place_seed(state, seed_word):
            state.seed_unfittable = True
            state.dropped.extend(ordered)
            return self._build_result(state)

        self.engine.place_remaining(state, remaining)
        LOGGER.info(
            "First pass placed %d words, %d left to retry",
            len(state.placed),
            len(state.unplaced),
        )
        self.scheduler.run(state)

        result = self._build_result(state)
        if self.config.check_invariants:
            validation = self.validator.validate(result)
            if not validation.ok:
                raise ValidationError(f"Board validation failed: {validation.messages}")
        LOGGER.info(
            "Crossword generation completed with %d/%d words placed",
            len(result.placed_words),
            len(ordered),
        )
        return result

    def _build_result(self, state: GenerationState) -> GenerationResult:
        return GenerationResult(
            rows=self.config.rows,
            cols=self.config.cols,
            board=state.board.letter_rows(),
            hint_grid=state.board.hint_rows(),
            hint_dictionary=state.numberer.snapshot(),
            placed_words=tuple(state.placed),
            unplaced_words=tuple(state.dropped),
            words=dict(self.words),
            seed_unfittable=state.seed_unfittable,
            seed=self.config.seed,
        )


def generate_crossword(
    words: Mapping[str, str],
    rows: int,
    cols: int,
    seed: Optional[int] = None,
    place_isolated: bool = True,
) -> GenerationResult:
    """Convenience wrapper: one generator, one run."""

    config = GeneratorConfig(rows=rows, cols=cols, seed=seed, place_isolated=place_isolated)
    return CrosswordGenerator(words, config).generate()
