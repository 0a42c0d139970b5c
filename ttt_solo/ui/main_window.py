from ..controller import GameController, Turn
from ..strategies import Difficulty
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QComboBox, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot


class TicTacToeWindow(QMainWindow):
    """
    main window: renders controller signals, forwards user input
    """
    def __init__(self, controller=None):
        """
        build widgets and wire them to the controller
        """
        super().__init__()
        self.controller = controller if controller is not None else GameController()
        self.board_widget = BoardWidget(self.controller.board, parent=self)
        self._setup_ui()
        self._connect_controller()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe vs System")
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()
        self._create_score_bar()
        self.main_layout.addWidget(self.score_widget)
        self.main_layout.addWidget(self.board_widget, 1)
        self._create_bottom_controls()
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        game_menu = self.menuBar().addMenu("Game")
        restart_action = QAction("Restart", self)
        restart_action.triggered.connect(self.controller.restart)
        clear_action = QAction("Clear Scores", self)
        clear_action.triggered.connect(self.controller.clear_scores)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (restart_action, clear_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)

    def _create_score_bar(self):
        # scores, rounds, difficulty picker
        self.score_widget = QWidget()
        hl = QHBoxLayout(self.score_widget)
        scores = self.controller.scores
        self.player_score_label = QLabel(str(scores.player_wins))
        self.system_score_label = QLabel(str(scores.system_wins))
        self.rounds_label = QLabel(str(scores.rounds_played))
        for caption, label in (("Player (X):", self.player_score_label),
                               ("System (O):", self.system_score_label),
                               ("Rounds:", self.rounds_label)):
            hl.addWidget(QLabel(caption)); hl.addWidget(label)
        hl.addStretch(1)
        self.difficulty_combo = QComboBox()
        for d in Difficulty:
            self.difficulty_combo.addItem(d.value.capitalize(), d.value)
        self.difficulty_combo.setCurrentIndex(
            self.difficulty_combo.findData(self.controller.difficulty.value))
        self.difficulty_combo.currentIndexChanged.connect(self._on_difficulty_selected)
        hl.addWidget(QLabel("Difficulty:")); hl.addWidget(self.difficulty_combo)

    def _create_bottom_controls(self):
        # response text + restart/clear buttons
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.restart_button = QPushButton("Restart Game")
        self.restart_button.clicked.connect(self.controller.restart)
        self.clear_button = QPushButton("Clear Scores")
        self.clear_button.clicked.connect(self.controller.clear_scores)
        for w in (self.message_label, None, self.restart_button, self.clear_button):
            if w: hl.addWidget(w)
            else: hl.addStretch(1)

    def _connect_controller(self):
        c = self.controller
        self.board_widget.cell_clicked.connect(c.player_click)
        c.cell_updated.connect(self._on_cell_updated)
        c.response_message.connect(self._on_response)
        c.score_updated.connect(self._on_score_updated)
        c.rounds_updated.connect(self.rounds_label.setNum)
        c.turn_changed.connect(self._on_turn_changed)
        c.round_over.connect(self._on_round_over)

    @Slot(int)
    def _on_difficulty_selected(self, combo_index):
        self.controller.change_difficulty(self.difficulty_combo.itemData(combo_index))

    @Slot(int, str)
    def _on_cell_updated(self, index, mark):
        if not mark:
            self.board_widget.set_highlight(None)
        self.board_widget.update()

    @Slot(str)
    def _on_response(self, text):
        self.message_label.setText(text)

    @Slot(int, int)
    def _on_score_updated(self, player, system):
        self.player_score_label.setNum(player)
        self.system_score_label.setNum(system)

    @Slot(str)
    def _on_turn_changed(self, turn):
        # lock the board while the system is thinking
        self.board_widget.set_accept_clicks(turn == Turn.PLAYER.value)

    @Slot(str)
    def _on_round_over(self, result):
        board = self.controller.board
        line = (board.winning_line(self.controller.player_mark)
                or board.winning_line(self.controller.system_mark))
        self.board_widget.set_highlight(line)
        self.board_widget.set_accept_clicks(False)
