import logging
from dataclasses import dataclass
from typing import Optional

from .config import HUMAN_MARK, OPPONENT_DELAY_MS
from .game_logic import (
    GameError, GameState, RandomMoveSelector, Score,
    apply_move, other_mark, reset_game,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transition:
    """
    what just happened, handed to every listener.
    mark/index: the cell just filled (None on reset).
    outcome_changed: this move ended the game
    """
    state: GameState
    index: Optional[int] = None
    mark: Optional[str] = None
    outcome_changed: bool = False
    reset: bool = False


class GameSession:
    """
    owns the running game, the score and the pending opponent reply
    """
    def __init__(self, selector=None, scheduler=None,
                 opponent_delay_ms=OPPONENT_DELAY_MS, human_mark=HUMAN_MARK):
        """
        scheduler: schedule(delay_ms, callback) -> handle with cancel().
        without one the opponent replies immediately
        """
        self.selector = selector or RandomMoveSelector()
        self.scheduler = scheduler
        self.opponent_delay_ms = opponent_delay_ms
        self.human_mark = human_mark
        self.ai_mark = other_mark(human_mark)
        self._score = Score()
        self._state = reset_game(human_mark)
        self._generation = 0       # bumped on every reset / close
        self._pending = None       # scheduler handle for the reply
        self._closed = False
        self._listeners = []

    @property
    def state(self):
        return self._state

    @property
    def score(self):
        return self._score

    @property
    def pending(self):
        return self._pending is not None

    def add_listener(self, callback):
        # callback(Transition)
        self._listeners.append(callback)

    def _notify(self, transition):
        for callback in list(self._listeners):
            callback(transition)

    def _accept(self, index, mark):
        """
        apply a move, book a win or pass the turn, tell listeners.
        GameError propagates
        """
        state = apply_move(self._state, index, mark)
        if state.is_over:
            self._score.record(state.outcome)
            logger.info("game over: %s", state.outcome.describe())
        else:
            state = state.with_turn(other_mark(mark))
        self._state = state
        self._notify(Transition(state, index=index, mark=mark,
                                outcome_changed=state.is_over))
        return state

    def play(self, index):
        """
        human tap. returns False when the tap is ignored
        """
        if self._closed or self._pending is not None \
           or self._state.current_mark != self.human_mark:
            logger.debug("tap on %r ignored: not the human's turn", index)
            return False
        try:
            state = self._accept(index, self.human_mark)
        except GameError as e:
            logger.debug("tap on %r ignored: %s", index, e)
            return False
        if not state.is_over:
            self._schedule_reply()
        return True

    def _schedule_reply(self):
        generation = self._generation
        if self.scheduler is None:
            self._opponent_turn(generation)
            return
        self._pending = self.scheduler.schedule(
            self.opponent_delay_ms, lambda: self._opponent_turn(generation))

    def _opponent_turn(self, generation):
        """
        delayed reply. stale generations are dropped
        """
        if generation != self._generation or self._closed:
            logger.debug("discarding stale opponent move (gen %d)", generation)
            return
        self._pending = None
        if self._state.is_over:
            return
        moved = False
        try:
            index = self.selector.select(self._state.board)
            self._accept(index, self.ai_mark)
            moved = True
            logger.debug("opponent played %d", index)
        except GameError as e:
            logger.warning("opponent move skipped: %s", e)
        finally:
            # a failed reply must never leave the human locked out
            if not moved and not self._state.is_over \
               and self._state.current_mark == self.ai_mark:
                self._state = self._state.with_turn(self.human_mark)
                self._notify(Transition(self._state))

    def _cancel_pending(self):
        self._generation += 1
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def reset(self):
        """
        new game; score survives, pending reply is cancelled
        """
        self._cancel_pending()
        self._state = reset_game(self.human_mark)
        logger.info("new game, score %s", self._score.describe())
        self._notify(Transition(self._state, reset=True))

    def close(self):
        # teardown: nothing scheduled may land afterwards
        self._cancel_pending()
        self._closed = True
        self._listeners.clear()
