from enum import Enum

from .errors import InvalidMove


class Mark(Enum):
    """
    cell contents; value is the display text
    """
    EMPTY = ''
    PLAYER = 'X'
    SYSTEM = 'O'

    def opponent(self):
        if self is Mark.PLAYER:
            return Mark.SYSTEM
        if self is Mark.SYSTEM:
            return Mark.PLAYER
        raise ValueError("empty cell has no opponent")


# rows, then columns, then diagonals; scan order matters for the hard ai
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

CENTER = 4
CORNERS = (0, 2, 6, 8)
SIDES = (1, 3, 5, 7)


class Board:
    """
    3x3 grid addressed 0-8 row-major
    """
    size = 9

    def __init__(self):
        """
        start empty and unlocked
        """
        self._cells = [Mark.EMPTY] * self.size
        self.locked = False              # true once the round is over

    @classmethod
    def from_cells(cls, cells):
        """
        build from nine display strings like ["X", "", "O", ...]
        """
        cells = list(cells)
        if len(cells) != cls.size:
            raise ValueError(f"expected {cls.size} cells, got {len(cells)}")
        board = cls()
        board._cells = [Mark(c.strip()) for c in cells]
        return board

    @property
    def cells(self):
        return tuple(self._cells)

    def __getitem__(self, index):
        return self._cells[index]

    def apply_move(self, index, mark):
        """
        place mark; raises InvalidMove if the move is not allowed
        """
        if self.locked:
            raise InvalidMove(index, "round is not active")
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < self.size:
            raise InvalidMove(index, "index out of range")
        if mark is Mark.EMPTY:
            raise InvalidMove(index, "cannot place an empty mark")
        if self._cells[index] is not Mark.EMPTY:
            raise InvalidMove(index, f"cell taken by {self._cells[index].value}")
        self._cells[index] = mark

    def empty_cells(self):
        return [i for i, cell in enumerate(self._cells) if cell is Mark.EMPTY]

    def winning_line(self, mark):
        """
        first line fully owned by mark, or None
        """
        for line in WINNING_LINES:
            if all(self._cells[i] is mark for i in line):
                return line
        return None

    def has_winner(self, mark):
        return self.winning_line(mark) is not None

    def is_full(self):
        return not self.empty_cells()

    def reset(self):
        """
        clear every cell and unlock
        """
        self._cells = [Mark.EMPTY] * self.size
        self.locked = False
