"""
Engine constants: board geometry, winning lines, and presentation labels.

Every fixed number or string the engine and its transports rely on is
defined here, so the rules and the wire format live in one place.
"""

# ---------------------------------------------------------------------------
# Board geometry
# ---------------------------------------------------------------------------

BOARD_SIZE: int = 3
CELL_COUNT: int = BOARD_SIZE * BOARD_SIZE  # 9

# ---------------------------------------------------------------------------
# Winning lines
# ---------------------------------------------------------------------------
# The 8 triples of (x, y) coordinates that win the game. Outcome detection
# scans them in this exact order and takes the first match, so the order is
# part of the engine's deterministic behaviour:
#   rows y=0..2, then columns x=0..2, then the main diagonal, then the
#   anti-diagonal.

Coord = tuple[int, int]

WIN_LINES: tuple[tuple[Coord, Coord, Coord], ...] = (
    # rows
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    # columns
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    # diagonals
    ((0, 0), (1, 1), (2, 2)),
    ((2, 0), (1, 1), (0, 2)),
)

# ---------------------------------------------------------------------------
# Presentation labels
# ---------------------------------------------------------------------------
# Cell text and winner labels used by the view projection. An ongoing game
# and a drawn game get different labels so clients can tell them apart.

FIRST_LABEL: str = "X"
SECOND_LABEL: str = "O"
EMPTY_LABEL: str = ""
NO_WINNER_LABEL: str = "no winner yet"
DRAW_LABEL: str = "draw"
