import unittest

from crossword_builder.core.constants import Direction
from crossword_builder.engine.board import Board
from crossword_builder.engine.hints import HintNumberer


class BoardQueryTests(unittest.TestCase):
    def test_new_board_is_blank(self) -> None:
        board = Board(3, 4)
        self.assertTrue(board.is_blank)
        self.assertEqual(len(board.letters), 3)
        self.assertEqual(len(board.letters[0]), 4)
        self.assertEqual(board.letter_rows(), ((None,) * 4,) * 3)

    def test_out_of_bounds_reads_as_empty(self) -> None:
        board = Board(2, 2)
        self.assertTrue(board.is_empty(-1, 0))
        self.assertTrue(board.is_empty(0, 2))
        self.assertIsNone(board.hint(5, 5))

    def test_isolated_cells_skip_letter_neighbours(self) -> None:
        board = Board(3, 3)
        letters = board.copy_letters()
        letters[1][1] = "X"
        board.commit(letters, [("X", 1, 1)])
        self.assertEqual(board.isolated_empty_cells(), [(0, 0), (0, 2), (2, 0), (2, 2)])

    def test_read_along_direction(self) -> None:
        board = Board(3, 3)
        letters = board.copy_letters()
        letters[0][0], letters[1][0] = "O", "X"
        board.commit(letters, [("O", 0, 0), ("X", 1, 0)])
        self.assertEqual(board.read(0, 0, Direction.DOWN, 3), "OX.")
        self.assertEqual(board.read(0, 0, Direction.ACROSS, 2), "O.")


class BoardTransactionTests(unittest.TestCase):
    def test_copy_is_independent(self) -> None:
        board = Board(2, 2)
        letters = board.copy_letters()
        letters[0][0] = "Q"
        self.assertIsNone(board.letter(0, 0))

    def test_commit_records_written_cells_in_order(self) -> None:
        board = Board(1, 3)
        letters = board.copy_letters()
        letters[0] = ["A", "B", "A"]
        board.commit(letters, [("A", 0, 0), ("B", 0, 1), ("A", 0, 2)])
        self.assertEqual(board.occurrences("A"), [(0, 0), (0, 2)])
        self.assertEqual(board.occurrences("Z"), [])
        self.assertEqual(board.filled_count, 3)

    def test_marks_hold_both_directions(self) -> None:
        board = Board(2, 2)
        board.mark(0, 0, Direction.ACROSS, 1)
        board.mark(0, 0, Direction.DOWN, 2)
        self.assertEqual(board.hint_rows()[0][0], (1, 2))
        self.assertIsNone(board.hint_rows()[1][1])


class HintNumbererTests(unittest.TestCase):
    def test_allocates_sequential_numbers(self) -> None:
        numberer = HintNumberer()
        self.assertEqual(numberer.allocate(Direction.ACROSS, "feline"), 1)
        self.assertEqual(numberer.allocate(Direction.DOWN, "flying mammal"), 2)
        self.assertEqual(
            numberer.snapshot(), {1: ("feline", None), 2: (None, "flying mammal")}
        )

    def test_merge_keeps_other_direction(self) -> None:
        numberer = HintNumberer()
        number = numberer.allocate(Direction.DOWN, "dwelling")
        numberer.merge(number, Direction.ACROSS, "greeting")
        self.assertEqual(numberer.snapshot(), {1: ("greeting", "dwelling")})
        self.assertEqual(numberer.counter, 2)

    def test_clue_lookup(self) -> None:
        numberer = HintNumberer()
        numberer.allocate(Direction.ACROSS, "feline")
        self.assertEqual(numberer.clue(1, Direction.ACROSS), "feline")
        self.assertIsNone(numberer.clue(1, Direction.DOWN))
        self.assertIsNone(numberer.clue(9, Direction.ACROSS))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
