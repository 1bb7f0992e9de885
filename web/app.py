"""
FastAPI web application for the tic-tac-toe engine.

Exposes the engine's three operations as GET endpoints (/newgame, /play,
/undo) plus a read-only /state and a /health probe. Every game endpoint
returns the same JSON shape: the 9 cells in row-major order, the winner
label, and an error code when the engine rejected the request.

Architecture notes:
- Sync endpoints (not async): FastAPI runs sync handlers in a thread pool,
  so concurrent requests reach the shared engine from different threads.
  Each handler holds the engine lock around the operation and the snapshot
  it returns, which keeps the response consistent with the operation.
- One engine per app, stored on app.state. Handlers look it up through the
  request rather than a module global, so tests can swap in a fresh engine.
- Rejections are not HTTP errors: the engine's contract is "no-op and report
  why", so a rejected play answers 200 with the unchanged state and the
  failure code in "error".
"""

import logging
from typing import Callable

from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel

from engine.board import parse_coordinate
from engine.errors import GameError
from engine.game import GameEngine
from engine.view import GameView, project

# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------

logging.basicConfig(level=logging.INFO)
_log = logging.getLogger(__name__)

app = FastAPI(title="Tic-Tac-Toe", version="1.0.0")
app.state.engine = GameEngine()


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class CellModel(BaseModel):
    """
    One board cell.

    Fields:
        text: "X", "O", or "" when empty.
        playable: True iff the cell is empty and the game is still ongoing.
        x: Column, 0..2.
        y: Row, 0..2.
    """

    text: str
    playable: bool
    x: int
    y: int


class GameResponse(BaseModel):
    """
    Game state after an operation.

    Fields:
        cells: The 9 cells, ordered by index 3*y + x.
        winner: "X", "O", "no winner yet", or "draw".
        error: Failure code if the operation was rejected ("OutOfRange",
               "CellOccupied", "GameAlreadyOver", "NothingToUndo"),
               otherwise null. The state is unchanged when this is set.
    """

    cells: list[CellModel]
    winner: str
    error: str | None = None

    @classmethod
    def from_view(cls, view: GameView, error: str | None = None) -> "GameResponse":
        cells = [
            CellModel(text=c.text, playable=c.playable, x=c.x, y=c.y)
            for c in view.cells
        ]
        return cls(cells=cells, winner=view.winner, error=error)


class HealthResponse(BaseModel):
    status: str


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _run(
    request: Request,
    name: str,
    operation: Callable[[GameEngine], object] | None = None,
) -> GameResponse:
    """
    Apply ``operation`` to the app's engine and project the result.

    The operation and the snapshot run under the engine lock. A GameError
    leaves the engine untouched and is reported in the response's error field.
    """
    engine: GameEngine = request.app.state.engine
    error: str | None = None

    with engine.lock:
        if operation is not None:
            try:
                result = operation(engine)
            except GameError as exc:
                error = exc.code
                _log.info("%s rejected: %s (%s)", name, exc.code, exc)
            except Exception as exc:
                _log.exception("%s failed", name)
                raise HTTPException(status_code=500, detail=f"Engine error: {exc}") from exc
            else:
                if result is None:
                    _log.info("%s ok", name)
                else:
                    _log.info("%s ok: %s", name, result)
        state = engine.state()

    return GameResponse.from_view(project(state), error)


# ---------------------------------------------------------------------------
# API routes
# ---------------------------------------------------------------------------


@app.get("/newgame", response_model=GameResponse)
def api_new_game(request: Request) -> GameResponse:
    """Start a new game: empty board, X to move."""
    return _run(request, "newgame", lambda engine: engine.new_game())


@app.get("/play", response_model=GameResponse)
def api_play(request: Request, x: str | None = None, y: str | None = None) -> GameResponse:
    """
    Place the current player's mark at (x, y).

    Args:
        x: Column, must parse as an integer in {0, 1, 2}.
        y: Row, must parse as an integer in {0, 1, 2}.

    Returns:
        GameResponse reflecting the post-move state, or the unchanged state
        with ``error`` set when the move was rejected.
    """

    def play(engine: GameEngine) -> object:
        return engine.play(parse_coordinate(x), parse_coordinate(y))

    return _run(request, "play", play)


@app.get("/undo", response_model=GameResponse)
def api_undo(request: Request) -> GameResponse:
    """Take back the most recent move."""
    return _run(request, "undo", lambda engine: engine.undo())


@app.get("/state", response_model=GameResponse)
def api_state(request: Request) -> GameResponse:
    """Current state without changing anything."""
    return _run(request, "state")


@app.get("/health", response_model=HealthResponse)
def api_health() -> HealthResponse:
    return HealthResponse(status="ok")
