import random
import unittest

from crossword_builder.core.constants import Direction
from crossword_builder.engine.placement import PlacementEngine
from crossword_builder.engine.state import GenerationState


def make_state(rows: int, cols: int, clues: dict) -> GenerationState:
    return GenerationState.create(rows, cols, clues, random.Random(0))


class SeedPlacementTests(unittest.TestCase):
    def test_seed_goes_through_center_horizontally(self) -> None:
        state = make_state(5, 5, {"CAT": "feline"})
        self.assertTrue(PlacementEngine().place_seed(state, "CAT"))
        self.assertEqual(state.board.letters[2], [None, "C", "A", "T", None])
        self.assertEqual(state.numberer.snapshot(), {1: ("feline", None)})
        for col in (1, 2, 3):
            self.assertEqual(state.board.hint(2, col).as_pair(), (1, None))

    def test_seed_falls_back_to_vertical(self) -> None:
        state = make_state(7, 3, {"HOUSE": "dwelling"})
        self.assertTrue(PlacementEngine().place_seed(state, "HOUSE"))
        placed = state.placed[0]
        self.assertEqual((placed.row, placed.col, placed.direction), (1, 1, Direction.DOWN))
        self.assertEqual(state.board.read(1, 1, Direction.DOWN, 5), "HOUSE")

    def test_seed_that_fits_nowhere_leaves_board_blank(self) -> None:
        state = make_state(3, 3, {"ELEPHANT": "large"})
        self.assertFalse(PlacementEngine().place_seed(state, "ELEPHANT"))
        self.assertTrue(state.board.is_blank)
        self.assertEqual(state.numberer.snapshot(), {})


class ConnectionAttemptTests(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = PlacementEngine()
        self.state = make_state(
            5,
            5,
            {
                "CAT": "feline",
                "BAT": "flying mammal",
                "TO": "toward",
                "AX": "chopper",
                "AT": "located in",
            },
        )
        self.engine.place_seed(self.state, "CAT")

    def test_crossing_word_goes_vertical_when_horizontal_collides(self) -> None:
        self.assertTrue(self.engine.place_word(self.state, "BAT"))
        board = self.state.board
        self.assertEqual(board.letters[1][2], "B")
        self.assertEqual(board.letters[2][2], "A")
        self.assertEqual(board.letters[3][2], "T")
        placed = self.state.placed[-1]
        self.assertEqual((placed.row, placed.col, placed.direction, placed.number), (1, 2, Direction.DOWN, 2))
        self.assertEqual(board.hint(2, 2).as_pair(), (1, 2))
        self.assertEqual(
            self.state.numberer.snapshot(), {1: ("feline", None), 2: (None, "flying mammal")}
        )

    def test_index_records_only_new_cells(self) -> None:
        self.engine.place_word(self.state, "BAT")
        board = self.state.board
        self.assertEqual(board.occurrences("A"), [(2, 2)])
        self.assertEqual(board.occurrences("T"), [(2, 3), (3, 2)])
        self.assertEqual(board.occurrences("B"), [(1, 2)])

    def test_rejects_word_touching_unrelated_letters(self) -> None:
        self.engine.place_word(self.state, "BAT")
        before = self.state.board.copy_letters()
        self.assertFalse(self.engine.place_word(self.state, "TO"))
        self.assertEqual(self.state.board.letters, before)
        self.assertEqual(len(self.state.placed), 2)

    def test_failed_attempt_leaves_board_untouched(self) -> None:
        self.engine.place_word(self.state, "BAT")
        letters_before = self.state.board.copy_letters()
        index_before = {k: list(v) for k, v in self.state.board.placed_letters.items()}
        result = self.engine.attempt_word_placement(self.state, (2, 2), "", "X", "AX")
        self.assertIsNone(result)
        self.assertEqual(self.state.board.letters, letters_before)
        self.assertEqual(dict(self.state.board.placed_letters), index_before)
        self.assertEqual(self.state.numberer.counter, 3)

    def test_word_cannot_run_on_from_existing_word(self) -> None:
        # Across, AT would run on from the C of CAT.
        direction = self.engine.attempt_word_placement(self.state, (2, 2), "", "T", "AT")
        self.assertEqual(direction, Direction.DOWN)
        placed = self.state.placed[-1]
        self.assertEqual((placed.row, placed.col), (2, 2))
        self.assertEqual(placed.number, 2)
        self.assertEqual(self.state.board.read(2, 2, Direction.DOWN, 2), "AT")

    def test_end_cap_rejects_run_on_in_both_directions(self) -> None:
        # Across, C precedes the A; down, B of BAT precedes it.
        self.engine.place_word(self.state, "BAT")
        self.assertIsNone(self.engine.attempt_word_placement(self.state, (2, 2), "", "T", "AT"))
        self.assertEqual(len(self.state.placed), 2)


class CollinearOverlapTests(unittest.TestCase):
    def test_word_cannot_swallow_an_existing_word(self) -> None:
        engine = PlacementEngine()
        state = make_state(1, 9, {"CAT": "feline", "SCATTER": "spread"})
        engine.place_seed(state, "CAT")
        self.assertEqual(state.board.letters[0][3:6], ["C", "A", "T"])

        result = engine.attempt_word_placement(state, (0, 3), "S", "ATTER", "SCATTER")
        self.assertIsNone(result)
        self.assertFalse(engine.place_word(state, "SCATTER"))
        self.assertEqual(len(state.placed), 1)


class HintReuseTests(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = PlacementEngine()
        self.state = make_state(7, 3, {"HOUSE": "dwelling", "HI": "greeting", "US": "we"})
        self.engine.place_seed(self.state, "HOUSE")

    def test_word_starting_at_perpendicular_start_reuses_number(self) -> None:
        direction = self.engine.attempt_word_placement(self.state, (1, 1), "", "I", "HI")
        self.assertEqual(direction, Direction.ACROSS)
        self.assertEqual(self.state.placed[-1].number, 1)
        self.assertEqual(self.state.numberer.snapshot(), {1: ("greeting", "dwelling")})
        self.assertEqual(self.state.board.hint(1, 1).as_pair(), (1, 1))
        self.assertEqual(self.state.board.hint(1, 2).as_pair(), (1, None))
        self.assertEqual(self.state.numberer.counter, 2)

    def test_word_starting_mid_word_gets_new_number(self) -> None:
        self.assertTrue(self.engine.place_word(self.state, "US"))
        placed = self.state.placed[-1]
        self.assertEqual((placed.row, placed.col, placed.direction), (3, 1, Direction.ACROSS))
        self.assertEqual(placed.number, 2)
        self.assertEqual(self.state.numberer.snapshot(), {1: (None, "dwelling"), 2: ("we", None)})


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
