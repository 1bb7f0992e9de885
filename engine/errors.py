"""
Exceptions raised when the engine rejects an operation.

Every rejection is expected and recoverable. The engine validates before it
mutates, so when one of these is raised the game state is exactly what it was
before the call. Transports catch GameError and report ``exc.code`` alongside
the unchanged state.
"""


class GameError(Exception):
    """Base class for rejected engine operations."""

    code: str = "GameError"


class OutOfRange(GameError):
    """A coordinate is outside {0, 1, 2} (or could not be parsed as one)."""

    code = "OutOfRange"


class CellOccupied(GameError):
    """The target cell of a play already holds a mark."""

    code = "CellOccupied"


class GameAlreadyOver(GameError):
    """A play was attempted after the game was won or drawn."""

    code = "GameAlreadyOver"


class NothingToUndo(GameError):
    """Undo was requested with an empty move history."""

    code = "NothingToUndo"


class AlreadyOccupied(GameError):
    """
    Board.set() was asked to overwrite a marked cell.

    GameEngine checks occupancy first and raises CellOccupied, so this only
    surfaces if the board is driven directly.
    """

    code = "AlreadyOccupied"
