"""
View projection: engine state to a presentation snapshot.

project() is a pure function of an EngineState. Transports call it after
every operation and serialize the result; they never read the board directly.
The cell ordering (row-major, index 3*y + x) and the labels are part of the
external contract and must not change.
"""

from dataclasses import dataclass

from engine.board import Player
from engine.constants import (
    BOARD_SIZE,
    DRAW_LABEL,
    EMPTY_LABEL,
    FIRST_LABEL,
    NO_WINNER_LABEL,
    SECOND_LABEL,
)
from engine.game import EngineState, OutcomeStatus

_PLAYER_LABELS: dict[Player, str] = {
    Player.FIRST: FIRST_LABEL,
    Player.SECOND: SECOND_LABEL,
}


@dataclass(frozen=True)
class CellView:
    """
    One cell as clients see it.

    Attributes:
        text:     "X", "O", or "" for an empty cell.
        playable: True iff the cell is empty and the game is still ongoing.
        x:        Column, 0..2.
        y:        Row, 0..2.
    """

    text: str
    playable: bool
    x: int
    y: int


@dataclass(frozen=True)
class GameView:
    cells: tuple[CellView, ...]
    winner: str


def player_label(player: Player | None) -> str:
    """Cell text for an occupancy."""
    if player is None:
        return EMPTY_LABEL
    return _PLAYER_LABELS[player]


def winner_label(state: EngineState) -> str:
    """
    Winner label for the current outcome.

    "X" or "O" for a decided game, NO_WINNER_LABEL while the game is in
    progress, DRAW_LABEL for a full board with no line.
    """
    outcome = state.outcome
    if outcome.status is OutcomeStatus.WON:
        return _PLAYER_LABELS[outcome.winner]
    if outcome.status is OutcomeStatus.DRAW:
        return DRAW_LABEL
    return NO_WINNER_LABEL


def project(state: EngineState) -> GameView:
    """
    Build the presentation snapshot for ``state``.

    Args:
        state: Snapshot from GameEngine.state(). Not modified.

    Returns:
        GameView with 9 cells in row-major order and the winner label.
    """
    ongoing = state.outcome.status is OutcomeStatus.ONGOING
    cells = []
    # y outer, x inner: matches the flat index 3*y + x.
    for y in range(BOARD_SIZE):
        for x in range(BOARD_SIZE):
            occupant = state.cells[BOARD_SIZE * y + x]
            cells.append(
                CellView(
                    text=player_label(occupant),
                    playable=occupant is None and ongoing,
                    x=x,
                    y=y,
                )
            )
    return GameView(cells=tuple(cells), winner=winner_label(state))


def render_text(view: GameView) -> str:
    """Three-line ASCII board, empty cells shown as '.'."""
    rows = []
    for y in range(BOARD_SIZE):
        row = view.cells[BOARD_SIZE * y:BOARD_SIZE * (y + 1)]
        rows.append(" ".join(cell.text or "." for cell in row))
    return "\n".join(rows)
