class TicTacToeError(Exception):
    """
    base for game errors
    """


class InvalidMove(TicTacToeError):
    """
    move rejected by the board (range, occupied, or locked)
    """
    def __init__(self, index, reason):
        super().__init__(f"invalid move at {index}: {reason}")
        self.index = index
        self.reason = reason


class NoMoveAvailable(TicTacToeError):
    """
    strategy asked to move on a full board
    """
    def __init__(self):
        super().__init__("no empty cell left to play")
