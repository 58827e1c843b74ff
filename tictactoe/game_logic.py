import random
from dataclasses import dataclass, field, replace
from typing import Dict, Optional, Tuple

EMPTY = ''
X = 'X'                      # human mark, moves first
O = 'O'                      # opponent mark
MARKS = (X, O)
BOARD_CELLS = 9              # fixed 3x3 grid, row-major

# rows top-to-bottom, cols left-to-right, then both diagonals.
# first complete line in this order decides the winner.
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class GameError(Exception):
    """
    base for recoverable game errors
    """


class InvalidMove(GameError):
    """
    cell taken, index out of range, bad mark, or game already over
    """


class NoLegalMove(GameError):
    """
    opponent asked to move on a full board
    """


def other_mark(mark):
    # X <-> O
    return O if mark == X else X


@dataclass(frozen=True)
class Outcome:
    """
    terminal result of a board: a win (winner + line) or a draw
    """
    winner: Optional[str] = None
    line: Optional[Tuple[int, int, int]] = None

    @property
    def is_draw(self):
        return self.winner is None

    def describe(self):
        return "It's a Draw!" if self.is_draw else f"Winner: {self.winner}"


DRAW = Outcome()


@dataclass(frozen=True)
class GameState:
    """
    one game: board, whose turn it is, result, last placed cell
    """
    board: Tuple[str, ...] = (EMPTY,) * BOARD_CELLS
    current_mark: str = X
    outcome: Optional[Outcome] = None
    last_move: Optional[int] = None

    @property
    def is_over(self):
        return self.outcome is not None

    def with_turn(self, mark):
        """
        copy with the turn handed to mark
        """
        if mark not in MARKS:
            raise ValueError(f"unknown mark {mark!r}")
        return replace(self, current_mark=mark)


def empty_cells(board):
    """
    indexes of blank cells, ascending
    """
    return [i for i, cell in enumerate(board) if cell == EMPTY]


def check_termination(board):
    """
    scan the 8 lines for 3 in a row, then check for a full board.
    returns Outcome for win/draw, None while the game goes on
    """
    if len(board) != BOARD_CELLS:
        raise ValueError(f"board must have {BOARD_CELLS} cells, got {len(board)}")
    for a, b, c in WINNING_LINES:
        if board[a] != EMPTY and board[a] == board[b] == board[c]:
            return Outcome(winner=board[a], line=(a, b, c))
    if EMPTY not in board:
        return DRAW
    return None


def apply_move(state, index, mark):
    """
    place mark at index and evaluate the result.
    never mutates state and never changes whose turn it is
    """
    if state.is_over:
        raise InvalidMove("game is already over")
    # bool is an int subclass, reject it explicitly
    if isinstance(index, bool) or not isinstance(index, int) \
       or not 0 <= index < BOARD_CELLS:
        raise InvalidMove(f"cell index {index!r} out of range 0-{BOARD_CELLS - 1}")
    if mark not in MARKS:
        raise InvalidMove(f"unknown mark {mark!r}")
    if state.board[index] != EMPTY:
        raise InvalidMove(f"cell {index} already taken by {state.board[index]}")
    board = state.board[:index] + (mark,) + state.board[index + 1:]
    return replace(state, board=board, outcome=check_termination(board),
                   last_move=index)


def select_opponent_move(board, rng=None):
    """
    uniform random pick among empty cells.
    no lookahead, no blocking, no win-seeking
    """
    choices = empty_cells(board)
    if not choices:
        raise NoLegalMove("no empty cell left")
    return (rng or random).choice(choices)


def reset_game(starting_mark=X):
    """
    fresh game, starting_mark moves first. score lives elsewhere
    """
    return GameState().with_turn(starting_mark)


class RandomMoveSelector:
    """
    default opponent policy. any object with select(board) -> index
    can replace it without touching the engine
    """
    def __init__(self, seed=None):
        self.rng = random.Random(seed)

    def select(self, board):
        return select_opponent_move(board, self.rng)


@dataclass
class Score:
    """
    win counts per mark, kept for the whole session
    """
    wins: Dict[str, int] = field(default_factory=lambda: {X: 0, O: 0})

    def __getitem__(self, mark):
        return self.wins[mark]

    def record(self, outcome):
        """
        count a win once; draws and unfinished games are ignored
        """
        if outcome is None or outcome.is_draw:
            return False
        self.wins[outcome.winner] += 1
        return True

    def describe(self):
        return f"{X}: {self.wins[X]}   {O}: {self.wins[O]}"
