"""
GameEngine: turn order, move validation, outcome detection, and undo.

The engine owns one Board, whose turn it is, the history of accepted moves,
and the current outcome. It exposes three mutating operations (new_game,
play, undo) and an immutable snapshot accessor (state).

Validation always happens before mutation. A rejected operation raises a
GameError subclass and leaves every field exactly as it was, so callers that
catch and ignore the error observe no change and can retry safely.

The outcome is never tracked incrementally. compute_outcome() rescans the
8 winning lines after every play and every undo; with 8 fixed triples this is
constant time, and it makes undo correct by construction: popping the
winning move and recomputing naturally yields ONGOING again.

Threading model:
    One engine instance is shared by every request the web app serves, and
    FastAPI runs sync handlers in a thread pool. Each operation therefore runs
    under ``self.lock`` (a reentrant lock). Transports that need a snapshot
    consistent with the operation they just ran hold the lock around both:

        with engine.lock:
            engine.play(x, y)
            state = engine.state()
"""

import threading
from dataclasses import dataclass
from enum import Enum

from engine.board import Board, Player
from engine.constants import WIN_LINES
from engine.errors import CellOccupied, GameAlreadyOver, NothingToUndo, OutOfRange


class OutcomeStatus(Enum):
    ONGOING = "ongoing"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of the game so far.

    Attributes:
        status: ONGOING, WON, or DRAW.
        winner: The winning player when status is WON, otherwise None.
    """

    status: OutcomeStatus
    winner: Player | None = None

    @classmethod
    def ongoing(cls) -> "Outcome":
        return cls(OutcomeStatus.ONGOING)

    @classmethod
    def won(cls, player: Player) -> "Outcome":
        return cls(OutcomeStatus.WON, player)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(OutcomeStatus.DRAW)

    @property
    def is_over(self) -> bool:
        return self.status is not OutcomeStatus.ONGOING


@dataclass(frozen=True)
class Move:
    """One accepted placement. Created only by GameEngine.play()."""

    x: int
    y: int
    player: Player


@dataclass(frozen=True)
class EngineState:
    """
    Immutable snapshot of a GameEngine.

    Two snapshots compare equal iff board, turn, history, and outcome are all
    equal, which is how "state unchanged" and "undo restores the prior state"
    are checked.

    Attributes:
        cells:        9 occupancies in row-major order (index 3*y + x).
        current_turn: The player who makes the next move. After a winning
                      move this stays on the winner, since no move follows.
        history:      Accepted moves since the last new game, oldest first.
        outcome:      Current result.
    """

    cells: tuple[Player | None, ...]
    current_turn: Player
    history: tuple[Move, ...]
    outcome: Outcome


def compute_outcome(board: Board) -> Outcome:
    """
    Derive the outcome of a board from scratch.

    Scans WIN_LINES in their fixed order and returns WON for the first line
    whose three cells hold the same player. With no completed line, a full
    board is a DRAW and anything else is ONGOING.

    Args:
        board: The board to inspect. Not modified.

    Returns:
        The Outcome for this board.
    """
    for a, b, c in WIN_LINES:
        holder = board.get(*a)
        if holder is not None and holder == board.get(*b) == board.get(*c):
            return Outcome.won(holder)
    if board.is_full():
        return Outcome.draw()
    return Outcome.ongoing()


class GameEngine:
    """
    Stateful engine for a single game of tic-tac-toe.

    Created once per process and mutated in place. new_game() can be called
    at any time to start over.

    Attributes:
        lock: Reentrant lock serializing new_game, play, and undo.
    """

    def __init__(self) -> None:
        self.lock: threading.RLock = threading.RLock()
        self._board = Board()
        self._current_turn = Player.FIRST
        self._history: list[Move] = []
        self._outcome = Outcome.ongoing()

    # -----------------------------------------------------------------------
    # Accessors
    # -----------------------------------------------------------------------

    def cell(self, x: int, y: int) -> Player | None:
        """Occupancy of (x, y). Raises OutOfRange."""
        with self.lock:
            return self._board.get(x, y)

    @property
    def current_turn(self) -> Player:
        return self._current_turn

    @property
    def history(self) -> tuple[Move, ...]:
        return tuple(self._history)

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    def state(self) -> EngineState:
        """Take an immutable snapshot of the whole engine."""
        with self.lock:
            return EngineState(
                cells=self._board.cells(),
                current_turn=self._current_turn,
                history=tuple(self._history),
                outcome=self._outcome,
            )

    # -----------------------------------------------------------------------
    # Operations
    # -----------------------------------------------------------------------

    def new_game(self) -> None:
        """Clear the board and history; FIRST to move. Always succeeds."""
        with self.lock:
            self._board.reset()
            self._history.clear()
            self._current_turn = Player.FIRST
            self._outcome = Outcome.ongoing()

    def play(self, x: int, y: int) -> Move:
        """
        Place the current player's mark at (x, y).

        Checks run in this order and the first failure wins: coordinates in
        range, game still ongoing, cell empty. On success the move is recorded,
        the outcome recomputed, and the turn passes to the other player only
        if the game is still ongoing.

        Args:
            x: Column, 0..2.
            y: Row, 0..2.

        Returns:
            The recorded Move.

        Raises:
            OutOfRange:      x or y not an int in {0, 1, 2}.
            GameAlreadyOver: the game has already been won or drawn.
            CellOccupied:    (x, y) already holds a mark.
        """
        with self.lock:
            if not Board.in_range(x, y):
                raise OutOfRange(f"coordinates out of range: ({x!r}, {y!r})")
            if self._outcome.is_over:
                raise GameAlreadyOver(f"game is over: {self._outcome.status.value}")
            if self._board.get(x, y) is not None:
                raise CellOccupied(f"cell ({x}, {y}) is already occupied")

            move = Move(x, y, self._current_turn)
            self._board.set(x, y, move.player)
            self._history.append(move)
            self._outcome = compute_outcome(self._board)
            if not self._outcome.is_over:
                self._current_turn = move.player.other()
            return move

    def undo(self) -> Move:
        """
        Take back the most recent move.

        The cell is emptied, the turn returns to the player who made the move,
        and the outcome is recomputed from the smaller board.

        Returns:
            The Move that was undone.

        Raises:
            NothingToUndo: the history is empty.
        """
        with self.lock:
            if not self._history:
                raise NothingToUndo("no moves to undo")

            move = self._history.pop()
            self._board.clear(move.x, move.y)
            self._current_turn = move.player
            self._outcome = compute_outcome(self._board)
            return move
