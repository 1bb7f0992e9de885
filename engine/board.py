"""
Board: the 3x3 occupancy grid and the Player enum.

The board only knows which player, if any, holds each cell. It has no notion
of turns, history, or winning; those belong to GameEngine. Cells are stored
in a flat list using the row-major index ``3 * y + x``, the same order the
view projection exposes to clients.

Occupancy only goes from empty to a player through set(). The reverse
transition exists solely as clear(), which GameEngine uses to roll back the
most recent move during undo.
"""

import re
from enum import Enum

from engine.constants import BOARD_SIZE, CELL_COUNT
from engine.errors import AlreadyOccupied, OutOfRange

# Plain ASCII decimal: no whitespace, sign prefix, digit separators, leading
# zeros, or non-ASCII digits, all of which int() would otherwise accept.
_COORDINATE_RE = re.compile(r"-?(0|[1-9][0-9]*)")


def parse_coordinate(raw: str | None) -> int:
    """
    Parse a coordinate received as text by a transport.

    Anything that is not a plain integer literal (missing, blank, " 1 ",
    "+1", "01", "0_1", fullwidth digits) raises OutOfRange, the same failure
    an integer outside {0, 1, 2} produces inside the engine.
    """
    if raw is None:
        raise OutOfRange("missing coordinate")
    if not _COORDINATE_RE.fullmatch(raw):
        raise OutOfRange(f"not an integer: {raw!r}")
    return int(raw)


class Player(Enum):
    """The two players. FIRST always opens a new game."""

    FIRST = "first"
    SECOND = "second"

    def other(self) -> "Player":
        """Return the opponent of this player."""
        return Player.SECOND if self is Player.FIRST else Player.FIRST


class Board:
    """
    Nine cells addressable by (x, y), each empty (None) or held by a Player.

    Every method that takes coordinates raises OutOfRange when x or y is not
    in {0, 1, 2}. Coordinates must be real ints; bools are rejected.
    """

    def __init__(self) -> None:
        self._cells: list[Player | None] = [None] * CELL_COUNT

    # -----------------------------------------------------------------------
    # Coordinate helpers
    # -----------------------------------------------------------------------

    @staticmethod
    def in_range(x: object, y: object) -> bool:
        """True iff both coordinates are ints in [0, BOARD_SIZE)."""
        for value in (x, y):
            if not isinstance(value, int) or isinstance(value, bool):
                return False
            if not 0 <= value < BOARD_SIZE:
                return False
        return True

    @staticmethod
    def index(x: int, y: int) -> int:
        """Row-major flat index of (x, y). Raises OutOfRange."""
        if not Board.in_range(x, y):
            raise OutOfRange(f"coordinates out of range: ({x!r}, {y!r})")
        return BOARD_SIZE * y + x

    # -----------------------------------------------------------------------
    # Cell access
    # -----------------------------------------------------------------------

    def get(self, x: int, y: int) -> Player | None:
        return self._cells[self.index(x, y)]

    def set(self, x: int, y: int, player: Player) -> None:
        """
        Mark (x, y) as held by ``player``.

        Raises:
            OutOfRange: x or y not in {0, 1, 2}.
            AlreadyOccupied: the cell already holds a mark. The board never
                             overwrites a cell.
        """
        idx = self.index(x, y)
        if self._cells[idx] is not None:
            raise AlreadyOccupied(f"cell ({x}, {y}) is already occupied")
        self._cells[idx] = player

    def clear(self, x: int, y: int) -> None:
        """Empty (x, y). Only used when undoing a move."""
        self._cells[self.index(x, y)] = None

    def reset(self) -> None:
        self._cells = [None] * CELL_COUNT

    # -----------------------------------------------------------------------
    # Whole-board queries
    # -----------------------------------------------------------------------

    def cells(self) -> tuple[Player | None, ...]:
        """All 9 occupancies in row-major order (index 3*y + x)."""
        return tuple(self._cells)

    def occupied_count(self) -> int:
        return sum(1 for cell in self._cells if cell is not None)

    def is_full(self) -> bool:
        return self.occupied_count() == CELL_COUNT

    def __repr__(self) -> str:
        return f"Board({self._cells!r})"
