import itertools
import random
import unittest

from helpers import ScriptedRandom

from ttt_solo.board import Board, Mark
from ttt_solo.errors import NoMoveAvailable
from ttt_solo.strategies import (
    Difficulty, choose_move, easy_move, hard_move, medium_move,
)

O = Mark.SYSTEM


def sample_boards():
    """Non-terminal and terminal-but-not-full boards built from short games."""
    rng = random.Random(7)
    boards = []
    for _ in range(60):
        board = Board()
        mark = Mark.PLAYER
        for _ in range(rng.randint(0, 8)):
            board.apply_move(rng.choice(board.empty_cells()), mark)
            mark = mark.opponent()
        boards.append(board)
    return boards


class TestHardStrategy(unittest.TestCase):
    def test_takes_center_after_corner_opening(self) -> None:
        board = Board.from_cells(["X", "", "", "", "", "", "", "", ""])
        self.assertEqual(hard_move(board, O, ScriptedRandom()), 4)

    def test_wins_now_on_top_row(self) -> None:
        board = Board.from_cells(["O", "O", "", "X", "X", "", "", "", ""])
        self.assertEqual(hard_move(board, O, ScriptedRandom()), 2)

    def test_blocks_player_on_top_row(self) -> None:
        board = Board.from_cells(["X", "X", "", "O", "", "", "", "", ""])
        self.assertEqual(hard_move(board, O, ScriptedRandom()), 2)

    def test_win_beats_block(self) -> None:
        board = Board.from_cells(["X", "X", "", "O", "O", "", "", "", ""])
        self.assertEqual(hard_move(board, O, ScriptedRandom()), 5)

    def test_first_line_in_scan_order_wins_ties(self) -> None:
        # top row and left column can both be completed; rows are scanned first
        board = Board.from_cells(["O", "O", "", "O", "X", "X", "", "", "X"])
        for _ in range(5):
            self.assertEqual(hard_move(board, O, ScriptedRandom()), 2)

    def test_gap_in_middle_of_line(self) -> None:
        board = Board.from_cells(["O", "X", "X", "", "", "", "O", "", "X"])
        self.assertEqual(hard_move(board, O, ScriptedRandom()), 3)

    def test_random_corner_when_center_taken(self) -> None:
        board = Board.from_cells(["", "", "", "", "X", "", "", "", ""])
        rng = ScriptedRandom(picks=[2])
        self.assertEqual(hard_move(board, O, rng), 6)
        self.assertEqual(rng.choices_seen, [[0, 2, 6, 8]])

    def test_random_side_when_center_and_corners_taken(self) -> None:
        board = Board.from_cells(["X", "", "O", "", "X", "", "O", "", "X"])
        rng = ScriptedRandom(picks=[2])
        self.assertEqual(hard_move(board, O, rng), 5)
        self.assertEqual(rng.choices_seen, [[1, 3, 5, 7]])

    def test_raises_on_full_board(self) -> None:
        board = Board.from_cells(["X", "O", "X", "X", "O", "O", "O", "X", "X"])
        for strategy in (easy_move, medium_move, hard_move):
            with self.assertRaises(NoMoveAvailable):
                strategy(board, O, ScriptedRandom())


class TestEasyAndMedium(unittest.TestCase):
    def test_easy_chooses_from_empty_cells(self) -> None:
        board = Board.from_cells(["X", "", "O", "", "X", "", "", "", ""])
        rng = ScriptedRandom(picks=[3])
        self.assertEqual(easy_move(board, O, rng), 6)
        self.assertEqual(rng.choices_seen, [[1, 3, 5, 6, 7, 8]])

    def test_medium_low_roll_plays_random(self) -> None:
        board = Board.from_cells(["O", "O", "", "X", "X", "", "", "", ""])
        rng = ScriptedRandom(rolls=[0.49], picks=[0])
        self.assertEqual(medium_move(board, O, rng), 2)
        self.assertEqual(rng.choices_seen, [[2, 5, 6, 7, 8]])

    def test_medium_high_roll_plays_hard(self) -> None:
        board = Board.from_cells(["X", "X", "", "O", "", "", "", "", ""])
        rng = ScriptedRandom(rolls=[0.5], picks=[3])
        self.assertEqual(medium_move(board, O, rng), 2)
        self.assertEqual(rng.choices_seen, [])


class TestStrategyContract(unittest.TestCase):
    def test_every_strategy_returns_an_empty_cell(self) -> None:
        rng = random.Random(11)
        for board, difficulty in itertools.product(sample_boards(), Difficulty):
            if board.is_full():
                continue
            move = choose_move(difficulty, board, O, rng)
            self.assertIn(move, board.empty_cells())

    def test_dispatch_accepts_names(self) -> None:
        board = Board.from_cells(["O", "O", "", "X", "X", "", "", "", ""])
        self.assertEqual(choose_move("HARD", board, O, ScriptedRandom()), 2)
        with self.assertRaises(ValueError):
            choose_move("impossible", board, O, ScriptedRandom())


if __name__ == "__main__":
    unittest.main()
