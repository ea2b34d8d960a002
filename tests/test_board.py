import unittest

import numpy as np

from connectfour.exceptions import EngineConfigError, EngineInvariantError
from connectfour.game.board import Board
from connectfour.utils import Player

SYMBOLS = {'.': Player.EMPTY, 'X': Player.ONE, 'O': Player.TWO}


def make_board(rows):
    board = Board(len(rows), len(rows[0]))
    for r, line in enumerate(rows):
        assert len(line) == board.columns
        for c, symbol in enumerate(line):
            board.grid[r, c] = SYMBOLS[symbol].value
    return board


class TestBoard(unittest.TestCase):
    def test_given_new_board_when_inspected_then_every_cell_empty(self):
        board = Board()
        self.assertEqual(board.grid.shape, (6, 7))
        self.assertEqual(board.occupied_count(), 0)
        self.assertFalse(board.is_full())
        self.assertTrue(all(cell == Player.EMPTY for row in board.snapshot() for cell in row))

    def test_given_bad_dimensions_when_constructing_then_config_error(self):
        for rows, columns in [(0, 7), (6, 0), (-1, 3), (True, 7), (6, 2.5)]:
            with self.assertRaises(EngineConfigError):
                Board(rows, columns)

    def test_given_partial_column_when_finding_landing_row_then_lowest_empty_row(self):
        board = make_board([
            "...",
            "...",
            "X..",
            "O.X",
        ])
        self.assertEqual(board.landing_row(0), 1)
        self.assertEqual(board.landing_row(1), 3)
        self.assertEqual(board.landing_row(2), 2)
        self.assertEqual(board.column_height(0), 2)
        self.assertEqual(board.column_height(1), 0)

    def test_given_full_column_when_queried_then_no_landing_row(self):
        board = make_board([
            "X.",
            "O.",
            "X.",
        ])
        self.assertTrue(board.is_column_full(0))
        self.assertIsNone(board.landing_row(0))
        self.assertEqual(board.column_height(0), 3)
        self.assertFalse(board.is_column_full(1))

    def test_given_off_board_position_when_reading_cell_then_invariant_error(self):
        board = Board(2, 2)
        self.assertFalse(board.in_bounds(2, 0))
        self.assertFalse(board.in_bounds(0, -1))
        with self.assertRaises(EngineInvariantError):
            board.cell(2, 0)
        with self.assertRaises(EngineInvariantError):
            board.cell(0, -1)

    def test_given_occupied_cell_when_placing_then_invariant_error(self):
        board = make_board(["X"])
        with self.assertRaises(EngineInvariantError):
            board.place(0, 0, Player.TWO)
        with self.assertRaises(EngineInvariantError):
            Board(1, 1).place(0, 0, Player.EMPTY)

    def test_given_run_when_scanning_then_stops_at_other_mark_and_edge(self):
        board = make_board([
            ".....",
            "OXXXO",
        ])
        self.assertEqual(board.scan(1, 1, 0, 1), [(1, 2), (1, 3)])
        self.assertEqual(board.scan(1, 1, 0, -1), [])
        self.assertEqual(board.scan(1, 0, 0, -1), [])
        self.assertEqual(board.scan(1, 3, 0, -1), [(1, 2), (1, 1)])

    def test_given_diagonal_when_taking_line_through_then_ordered_back_to_front(self):
        board = make_board([
            "...X",
            "..X.",
            ".X..",
            "X...",
        ])
        self.assertEqual(board.line_through(1, 2, 1, -1), [(0, 3), (1, 2), (2, 1), (3, 0)])
        self.assertEqual(board.line_through(1, 2, 1, 1), [(1, 2)])

    def test_given_board_when_copying_state_then_copy_is_independent(self):
        board = make_board(["X."])
        state = board.get_state()
        state[0, 1] = Player.TWO.value
        self.assertEqual(board.cell(0, 1), Player.EMPTY)
        self.assertEqual(state.dtype, np.int8)

    def test_given_full_board_when_checked_then_full(self):
        board = make_board(["XO", "OX"])
        self.assertTrue(board.is_full())
        self.assertEqual(board.occupied_count(), 4)
        board.clear()
        self.assertEqual(board.occupied_count(), 0)

    def test_given_tokens_when_rendering_then_symbols_and_labels_shown(self):
        text = make_board(["...", "XO."]).render()
        lines = text.splitlines()
        self.assertEqual(lines[2], "| X O . |")
        self.assertIn("0 1 2", lines[-1])


if __name__ == "__main__":
    unittest.main()
