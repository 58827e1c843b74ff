import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from tictactoe.config import (
    WINDOW_TITLE, BACKGROUND_COLOR, ACCENT_COLOR, OPPONENT_DELAY_MS,
)
from tictactoe.game_logic import RandomMoveSelector
from tictactoe.ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(BACKGROUND_COLOR)
WINDOW_TEXT_COLOR = QColor(34, 34, 34)
BASE_COLOR = Qt.white
BUTTON_COLOR = QColor(ACCENT_COLOR)
BUTTON_TEXT_COLOR = Qt.white
HIGHLIGHT_COLOR = QColor(ACCENT_COLOR)
HIGHLIGHTED_TEXT_COLOR = Qt.white
DISABLED_TEXT_COLOR = QColor(127, 127, 127)

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Apply the warm light palette using predefined constants.
    """
    palette = QPalette()
    palette.setColor(QPalette.Window, WINDOW_COLOR)
    palette.setColor(QPalette.WindowText, WINDOW_TEXT_COLOR)
    palette.setColor(QPalette.Base, BASE_COLOR)
    palette.setColor(QPalette.Text, WINDOW_TEXT_COLOR)
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

def parse_args(argv=None):
    p = argparse.ArgumentParser(description=WINDOW_TITLE)
    p.add_argument("--delay", type=int, default=OPPONENT_DELAY_MS,
                   help="ms before the opponent replies")
    p.add_argument("--seed", type=int, default=None, help="seed the random opponent")
    p.add_argument("--mute", action="store_true", help="no sound cues")
    p.add_argument("--verbose", action="store_true", help="debug logging")
    args = p.parse_args(argv)
    if args.delay < 0:
        p.error("--delay must be >= 0")
    return args

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s: %(message)s")

    # Qt parses its own options from sys.argv
    app = QApplication(sys.argv[:1])
    app.setApplicationName(WINDOW_TITLE)
    app.setStyle('Fusion')
    apply_default_palette(app)

    window = TicTacToeWindow(selector=RandomMoveSelector(args.seed),
                             opponent_delay_ms=args.delay, muted=args.mute)
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
