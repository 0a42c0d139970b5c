"""
round and turn controller for player (X) vs system (O)

owns the board, scores and difficulty; the window only forwards clicks
in and renders what the signals report.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from .board import Board, Mark
from .errors import InvalidMove
from .strategies import Difficulty, choose_move

log = logging.getLogger(__name__)

PLAYER_WINS_TEXT = "Player X wins! Restart The Game."
SYSTEM_WINS_TEXT = "System (O) wins! Restart The Game."
PLAYER_DRAW_TEXT = "It's a draw! Restart The Game."
SYSTEM_DRAW_TEXT = "It's a draw! Restart The Game"    # front end shows it without the period


class Turn(Enum):
    PLAYER = "player"
    SYSTEM = "system"

    def other(self):
        return Turn.SYSTEM if self is Turn.PLAYER else Turn.PLAYER


class RoundState(Enum):
    AWAITING_PLAYER = "awaiting_player"
    AWAITING_SYSTEM = "awaiting_system"
    ROUND_OVER = "round_over"


class RoundResult(Enum):
    PLAYER_WIN = "player_win"
    SYSTEM_WIN = "system_win"
    DRAW = "draw"


@dataclass
class Scoreboard:
    player_wins: int = 0
    system_wins: int = 0
    rounds_played: int = 0

    def clear(self):
        self.player_wins = self.system_wins = self.rounds_played = 0


class GameController(QObject):
    """
    state machine: awaiting player -> awaiting system -> player | round over
    """
    cell_updated = Signal(int, str)        # index, display mark ('' on reset)
    response_message = Signal(str)         # result text or '' to clear
    score_updated = Signal(int, int)       # player, system
    rounds_updated = Signal(int)
    turn_changed = Signal(str)             # Turn value
    round_over = Signal(str)               # RoundResult value

    player_mark = Mark.PLAYER
    system_mark = Mark.SYSTEM

    def __init__(self, difficulty=Difficulty.MEDIUM, delay_ms=0,
                 rng=None, scheduler=None, parent=None):
        """
        delay_ms is the pause before the system moves; 0 keeps it synchronous.
        scheduler(delay_ms, callback) replaces the qt timer when given.
        """
        super().__init__(parent)
        if delay_ms < 0:
            raise ValueError("delay must be >= 0")
        self.board = Board()
        self.scores = Scoreboard()
        self.difficulty = Difficulty.parse(difficulty)
        self.delay_ms = delay_ms
        self.rng = rng if rng is not None else random.Random()
        self._schedule = scheduler if scheduler is not None else self._qt_schedule
        self.active = True
        self.current_turn = Turn.PLAYER
        self.difficulty_changed = False    # set when difficulty changes mid-round
        self.response = ""
        self.result = None
        self.moves = []                    # (Turn, index) for the current round
        self._round_id = 0                 # bumped on every reset

    # -------------------------------------------------------------------------
    # state
    # -------------------------------------------------------------------------

    @property
    def state(self):
        if not self.active:
            return RoundState.ROUND_OVER
        if self.current_turn is Turn.PLAYER:
            return RoundState.AWAITING_PLAYER
        return RoundState.AWAITING_SYSTEM

    # -------------------------------------------------------------------------
    # incoming events
    # -------------------------------------------------------------------------

    @Slot(int)
    def player_click(self, index):
        """
        stale or duplicate clicks are dropped without any signal
        """
        if self.state is not RoundState.AWAITING_PLAYER:
            log.debug("ignoring click on %s while %s", index, self.state.value)
            return
        try:
            self.board.apply_move(index, self.player_mark)
        except InvalidMove as exc:
            log.debug("ignoring click: %s", exc)
            return
        self._record(Turn.PLAYER, index, self.player_mark)

        if self.board.has_winner(self.player_mark):
            self._finish(RoundResult.PLAYER_WIN, PLAYER_WINS_TEXT)
        elif self.board.is_full():
            self._finish(RoundResult.DRAW, PLAYER_DRAW_TEXT)
        else:
            self._set_turn(Turn.SYSTEM)
            round_id = self._round_id
            self._schedule(self.delay_ms, lambda: self._on_system_timer(round_id))

    @Slot(str)
    def change_difficulty(self, value):
        """
        a change mid-round restarts the board and that round is not counted
        """
        difficulty = Difficulty.parse(value)
        self._play_pending_system_move()
        if self.active:
            self.difficulty_changed = True
            self._reset_round()
        self.difficulty = difficulty
        log.info("difficulty set to %s", difficulty.value)

    @Slot()
    def restart(self):
        self._play_pending_system_move()
        self._reset_round()

    @Slot()
    def clear_scores(self):
        self._play_pending_system_move()
        self.scores.clear()
        self.score_updated.emit(0, 0)
        self.rounds_updated.emit(0)
        self._reset_round()

    # -------------------------------------------------------------------------
    # internals
    # -------------------------------------------------------------------------

    def _qt_schedule(self, delay_ms, callback):
        # delay 0 runs now; the controller is the timer context so a dead
        # controller never gets the callback
        if delay_ms <= 0:
            callback()
        else:
            QTimer.singleShot(delay_ms, self, callback)

    def _on_system_timer(self, round_id):
        # the move may already have been played early by a later event
        if round_id != self._round_id or self.state is not RoundState.AWAITING_SYSTEM:
            log.debug("system move for round %d already played", round_id)
            return
        self._play_system_move()

    def _play_pending_system_move(self):
        """
        events queued behind the system move see its result first
        """
        if self.state is RoundState.AWAITING_SYSTEM:
            self._play_system_move()

    def _play_system_move(self):
        index = choose_move(self.difficulty, self.board, self.system_mark, self.rng)
        self.board.apply_move(index, self.system_mark)
        self._record(Turn.SYSTEM, index, self.system_mark)

        if self.board.has_winner(self.system_mark):
            self._finish(RoundResult.SYSTEM_WIN, SYSTEM_WINS_TEXT)
        elif self.board.is_full():
            self._finish(RoundResult.DRAW, SYSTEM_DRAW_TEXT)
        else:
            self._set_turn(Turn.PLAYER)

    def _record(self, turn, index, mark):
        self.moves.append((turn, index))
        self.cell_updated.emit(index, mark.value)

    def _set_turn(self, turn):
        self.current_turn = turn
        self.turn_changed.emit(turn.value)

    def _set_response(self, text):
        self.response = text
        self.response_message.emit(text)

    def _finish(self, result, text):
        self.active = False
        self.board.locked = True
        self.result = result
        self._set_response(text)

        if result is RoundResult.PLAYER_WIN:
            self.scores.player_wins += 1
        elif result is RoundResult.SYSTEM_WIN:
            self.scores.system_wins += 1
        if result is not RoundResult.DRAW:
            self.score_updated.emit(self.scores.player_wins, self.scores.system_wins)

        if self.difficulty_changed:
            log.info("round not counted: difficulty changed mid-round")
        else:
            self.scores.rounds_played += 1
            self.rounds_updated.emit(self.scores.rounds_played)
        self.difficulty_changed = False

        log.info("round over: %s (player %d, system %d, rounds %d)",
                 result.value, self.scores.player_wins,
                 self.scores.system_wins, self.scores.rounds_played)
        self.round_over.emit(result.value)

    def _reset_round(self):
        self._round_id += 1
        self.board.reset()
        self.active = True
        self.result = None
        self.moves = []
        for index in range(Board.size):
            self.cell_updated.emit(index, Mark.EMPTY.value)
        self._set_turn(Turn.PLAYER)
        self._set_response("")
