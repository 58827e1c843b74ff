import os
import unittest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QCoreApplication, QEventLoop, QTimer

from tictactoe.game_logic import EMPTY, X, O
from tictactoe.session import GameSession
from tictactoe.ui.scheduler import QtScheduler


def spin(ms):
    # run the event loop for ms milliseconds
    loop = QEventLoop()
    QTimer.singleShot(ms, loop.quit)
    loop.exec()


class TestQtScheduler(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = QCoreApplication.instance() or QCoreApplication([])

    def setUp(self):
        self.scheduler = QtScheduler()
        self.calls = []

    def tearDown(self):
        self.scheduler.deleteLater()

    def test_callback_fires_once(self):
        handle = self.scheduler.schedule(10, lambda: self.calls.append("fired"))
        self.assertTrue(handle.active)
        spin(100)
        self.assertEqual(self.calls, ["fired"])
        self.assertFalse(handle.active)
        spin(50)
        self.assertEqual(self.calls, ["fired"])

    def test_cancelled_callback_never_fires(self):
        handle = self.scheduler.schedule(10, lambda: self.calls.append("fired"))
        handle.cancel()
        self.assertFalse(handle.active)
        spin(100)
        self.assertEqual(self.calls, [])
        # second cancel is harmless
        handle.cancel()

    def test_session_reply_lands(self):
        session = GameSession(scheduler=self.scheduler, opponent_delay_ms=10)
        session.play(0)
        self.assertTrue(session.pending)
        spin(100)
        self.assertFalse(session.pending)
        self.assertEqual(session.state.board.count(O), 1)
        self.assertEqual(session.state.current_mark, X)

    def test_reset_before_reply_leaves_board_empty(self):
        session = GameSession(scheduler=self.scheduler, opponent_delay_ms=10)
        session.play(0)
        session.reset()
        spin(100)
        self.assertEqual(session.state.board, (EMPTY,) * 9)
        self.assertEqual(session.state.current_mark, X)
        self.assertFalse(session.pending)


if __name__ == "__main__":
    unittest.main()
