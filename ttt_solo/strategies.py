"""
move selection for the system player

every strategy takes (board, mark, rng) and returns an index from
board.empty_cells(). rng needs random() and choice(); a random.Random works.
"""

import logging
import random
from enum import Enum

from .board import CENTER, CORNERS, SIDES, WINNING_LINES, Mark
from .errors import NoMoveAvailable

log = logging.getLogger(__name__)


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value):
        """
        accept a Difficulty or its name in any case
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(d.value for d in cls)
            raise ValueError(f"unknown difficulty {value!r} (expected one of: {choices})") from None


def _require_moves(board):
    empty = board.empty_cells()
    if not empty:
        raise NoMoveAvailable()
    return empty


def easy_move(board, mark, rng=random):
    """
    any empty cell, uniformly
    """
    return rng.choice(_require_moves(board))


def medium_move(board, mark, rng=random):
    """
    coin flip between easy and hard
    """
    _require_moves(board)
    if rng.random() < 0.5:
        return easy_move(board, mark, rng)
    return hard_move(board, mark, rng)


def _completing_cell(board, mark):
    # first line (declaration order) holding two of mark and one empty
    for line in WINNING_LINES:
        owned = [i for i in line if board[i] is mark]
        empty = [i for i in line if board[i] is Mark.EMPTY]
        if len(owned) == 2 and len(empty) == 1:
            return empty[0]
    return None


def hard_move(board, mark, rng=random):
    """
    fixed heuristic: win, block, center, corner, side, then random
    """
    empty = _require_moves(board)

    index = _completing_cell(board, mark)
    if index is not None:
        log.debug("hard: win-now at %d", index)
        return index

    index = _completing_cell(board, mark.opponent())
    if index is not None:
        log.debug("hard: block at %d", index)
        return index

    if board[CENTER] is Mark.EMPTY:
        log.debug("hard: center")
        return CENTER

    corners = [i for i in CORNERS if i in empty]
    if corners:
        return rng.choice(corners)

    sides = [i for i in SIDES if i in empty]
    if sides:
        return rng.choice(sides)

    # unreachable on a non-full board
    return easy_move(board, mark, rng)


STRATEGIES = {
    Difficulty.EASY: easy_move,
    Difficulty.MEDIUM: medium_move,
    Difficulty.HARD: hard_move,
}


def choose_move(difficulty, board, mark, rng=random):
    """
    dispatch to the strategy for difficulty
    """
    strategy = STRATEGIES[Difficulty.parse(difficulty)]
    return strategy(board, mark, rng)
