import unittest

from tictactoe.game_logic import EMPTY, X, O, NoLegalMove
from tictactoe.session import GameSession


class ManualScheduler:
    """
    collects scheduled callbacks; tests fire them by hand
    """
    class Handle:
        def __init__(self, callback):
            self.callback = callback
            self.cancelled = False

        def cancel(self):
            self.cancelled = True

    def __init__(self):
        self.handles = []
        self.delays = []

    def schedule(self, delay_ms, callback):
        handle = self.Handle(callback)
        self.handles.append(handle)
        self.delays.append(delay_ms)
        return handle

    def run_all(self):
        # fires even cancelled callbacks, like a timer that raced its cancel
        handles, self.handles = self.handles, []
        for handle in handles:
            handle.callback()


class ScriptedSelector:
    def __init__(self, *moves):
        self.moves = list(moves)

    def select(self, board):
        return self.moves.pop(0)


class AlwaysZeroSelector:
    def select(self, board):
        return 0


class BrokenSelector:
    def select(self, board):
        raise RuntimeError("selector crashed")


class FirstEmptySelector:
    def select(self, board):
        for i, cell in enumerate(board):
            if cell == EMPTY:
                return i
        raise NoLegalMove("full")


class TestGameSession(unittest.TestCase):
    def setUp(self):
        self.scheduler = ManualScheduler()
        self.events = []

    def make(self, *moves, selector=None):
        session = GameSession(selector=selector or ScriptedSelector(*moves),
                              scheduler=self.scheduler, opponent_delay_ms=600)
        session.add_listener(self.events.append)
        return session

    def test_human_move_schedules_delayed_reply(self):
        session = self.make(4)
        self.assertTrue(session.play(0))
        self.assertEqual(session.state.board[0], X)
        self.assertEqual(session.state.current_mark, O)
        self.assertTrue(session.pending)
        self.assertEqual(self.scheduler.delays, [600])
        self.scheduler.run_all()
        self.assertEqual(session.state.board[4], O)
        self.assertEqual(session.state.current_mark, X)
        self.assertFalse(session.pending)
        self.assertEqual([(e.index, e.mark) for e in self.events], [(0, X), (4, O)])

    def test_taps_ignored_while_reply_pending(self):
        session = self.make(4)
        session.play(0)
        self.assertFalse(session.play(1))
        self.assertEqual(session.state.board[1], EMPTY)
        self.assertEqual(len(self.events), 1)

    def test_invalid_tap_ignored_without_event(self):
        session = self.make(4)
        session.play(0)
        self.scheduler.run_all()
        self.events.clear()
        for index in (0, 4, 9, -1):
            self.assertFalse(session.play(index))
        self.assertEqual(self.events, [])
        self.assertEqual(self.scheduler.handles, [])

    def test_human_win_scores_once(self):
        session = self.make(3, 4)
        for index in (0, 1):
            session.play(index)
            self.scheduler.run_all()
        session.play(2)
        state = session.state
        self.assertEqual(state.outcome.winner, X)
        self.assertEqual(state.outcome.line, (0, 1, 2))
        self.assertTrue(self.events[-1].outcome_changed)
        self.assertFalse(session.pending)
        self.assertEqual((session.score[X], session.score[O]), (1, 0))
        # terminal: further taps change nothing
        self.assertFalse(session.play(5))
        self.assertEqual((session.score[X], session.score[O]), (1, 0))

    def test_opponent_win_scores(self):
        session = self.make(0, 1, 2)
        for index in (3, 4, 8):
            session.play(index)
            self.scheduler.run_all()
        self.assertEqual(session.state.outcome.winner, O)
        self.assertEqual((session.score[X], session.score[O]), (0, 1))

    def test_draw_does_not_score(self):
        # X: 0 2 3 7 8, O: 1 4 5 6 -> X O X / X O O / O X X
        session = self.make(1, 4, 5, 6)
        for index in (0, 2, 3, 7):
            session.play(index)
            self.scheduler.run_all()
        session.play(8)
        self.assertTrue(session.state.outcome.is_draw)
        self.assertEqual((session.score[X], session.score[O]), (0, 0))

    def test_reset_keeps_score(self):
        session = self.make(3, 4)
        for index in (0, 1):
            session.play(index)
            self.scheduler.run_all()
        session.play(2)
        session.reset()
        self.assertEqual(session.state.board, (EMPTY,) * 9)
        self.assertIsNone(session.state.outcome)
        self.assertEqual(session.state.current_mark, X)
        self.assertEqual(session.score[X], 1)
        self.assertTrue(self.events[-1].reset)

    def test_reset_discards_pending_reply(self):
        session = self.make(4)
        session.play(0)
        handle = self.scheduler.handles[0]
        session.reset()
        self.assertTrue(handle.cancelled)
        self.assertFalse(session.pending)
        # a timer that fires anyway must not touch the new game
        self.scheduler.handles.append(handle)
        self.scheduler.run_all()
        self.assertEqual(session.state.board, (EMPTY,) * 9)
        self.assertEqual(session.state.current_mark, X)
        self.assertTrue(session.play(0))

    def test_close_discards_pending_reply(self):
        session = self.make(4)
        session.play(0)
        session.close()
        self.scheduler.handles[0].callback()
        self.assertEqual(session.state.board[4], EMPTY)
        self.assertFalse(session.play(1))

    def test_opponent_failure_is_ignored(self):
        session = self.make(0)     # occupied cell
        session.play(0)
        with self.assertLogs("tictactoe.session", level="WARNING"):
            self.scheduler.run_all()
        self.assertEqual(session.state.board.count(O), 0)
        # turn comes back, the game stays playable
        self.assertEqual(session.state.current_mark, X)
        self.assertFalse(session.pending)
        self.assertIsNone(self.events[-1].index)
        self.assertTrue(session.play(1))
        self.assertEqual(session.state.board[1], X)

    def test_every_tap_still_possible_after_bad_opponent(self):
        session = self.make(selector=AlwaysZeroSelector())
        session.play(0)
        with self.assertLogs("tictactoe.session", level="WARNING"):
            self.scheduler.run_all()
        accepted = []
        for index in range(1, 9):
            if session.state.is_over:
                break
            accepted.append(session.play(index))
            if session.pending:
                with self.assertLogs("tictactoe.session", level="WARNING"):
                    self.scheduler.run_all()
        # X takes 0, 1, 2 unopposed
        self.assertEqual(accepted, [True, True])
        self.assertEqual(session.state.outcome.winner, X)

    def test_unexpected_selector_error_returns_turn(self):
        session = self.make(selector=BrokenSelector())
        session.play(4)
        with self.assertRaises(RuntimeError):
            self.scheduler.run_all()
        self.assertEqual(session.state.current_mark, X)
        self.assertTrue(session.play(0))

    def test_human_can_play_o(self):
        session = GameSession(selector=FirstEmptySelector(), human_mark=O)
        self.assertEqual(session.ai_mark, X)
        self.assertEqual(session.state.current_mark, O)
        session.play(4)
        self.assertEqual(session.state.board[:1] + session.state.board[4:5], (X, O))

    def test_without_scheduler_reply_is_immediate(self):
        session = GameSession(selector=FirstEmptySelector())
        session.play(4)
        self.assertEqual(session.state.board[0], O)
        self.assertEqual(session.state.current_mark, X)

    def test_random_opponent_full_game(self):
        session = GameSession()
        while not session.state.is_over:
            empty = [i for i, c in enumerate(session.state.board) if c == EMPTY]
            self.assertTrue(session.play(empty[0]))
        self.assertEqual(sum(session.score.wins.values()),
                         0 if session.state.outcome.is_draw else 1)


if __name__ == "__main__":
    unittest.main()
