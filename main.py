import argparse
import logging
import random
import sys
from dataclasses import replace

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor

from ttt_solo.config import LOG_LEVELS, GameConfig, configure_logging
from ttt_solo.controller import GameController
from ttt_solo.strategies import Difficulty
from ttt_solo.ui.main_window import TicTacToeWindow

log = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(53, 53, 53)
WINDOW_TEXT_COLOR = Qt.white
BASE_COLOR = QColor(35, 35, 35)
ALT_BASE_COLOR = QColor(53, 53, 53)
TEXT_COLOR = Qt.white
BUTTON_COLOR = QColor(66, 66, 66)
BUTTON_TEXT_COLOR = Qt.white
HIGHLIGHT_COLOR = QColor(42, 130, 218)
HIGHLIGHTED_TEXT_COLOR = Qt.white

DISABLED_TEXT_COLOR = QColor(127, 127, 127)

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    dark Fusion palette
    """
    palette = QPalette()
    palette.setColor(QPalette.Window, WINDOW_COLOR)
    palette.setColor(QPalette.WindowText, WINDOW_TEXT_COLOR)
    palette.setColor(QPalette.Base, BASE_COLOR)
    palette.setColor(QPalette.AlternateBase, ALT_BASE_COLOR)
    palette.setColor(QPalette.Text, TEXT_COLOR)
    palette.setColor(QPalette.Button, BUTTON_COLOR)
    palette.setColor(QPalette.ButtonText, BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.Highlight, HIGHLIGHT_COLOR)
    palette.setColor(QPalette.HighlightedText, HIGHLIGHTED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.Text, DISABLED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, DISABLED_TEXT_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# COMMAND LINE
# -----------------------------------------------------------------------------

def build_parser():
    parser = argparse.ArgumentParser(description="Tic-tac-toe against the system.")
    parser.add_argument("--difficulty", choices=[d.value for d in Difficulty],
                        help="starting difficulty")
    parser.add_argument("--delay", type=int, metavar="MS",
                        help="pause before the system moves, in milliseconds")
    parser.add_argument("--seed", type=int, help="seed for reproducible system moves")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS,
                        help="logging level")
    return parser


def resolve_config(args, environ=None):
    """
    environment first, command line wins
    """
    config = GameConfig.from_env(environ)
    if args.delay is not None:
        config = config.with_delay(args.delay)
    if args.difficulty:
        config = replace(config, default_difficulty=Difficulty.parse(args.difficulty))
    if args.seed is not None:
        config = replace(config, seed=args.seed)
    if args.log_level:
        config = replace(config, log_level=args.log_level)
    return config

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None):
    args, qt_args = build_parser().parse_known_args(argv)
    try:
        config = resolve_config(args)
    except ValueError as exc:
        build_parser().error(str(exc))
    configure_logging(config.log_level)
    log.info("starting: %s", config)

    app = QApplication([sys.argv[0]] + qt_args)
    app.setStyle('Fusion')
    apply_default_palette(app)

    controller = GameController(difficulty=config.default_difficulty,
                                delay_ms=config.system_delay_ms,
                                rng=random.Random(config.seed))
    window = TicTacToeWindow(controller)
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
