"""
Console protocol handler: play the engine over stdin/stdout.

A minimal line-oriented protocol, one command per line. It is handy for
playing in a terminal and for scripting the engine from other programs
without running the web server.

Protocol overview:
    Client -> Engine: newgame, play <x> <y>, undo, show, quit
    Engine -> Client: optional "error <Code>" line, then the board
                      (3 lines, '.' for empty) and "winner <label>"

Critical rule: stdout carries protocol replies only. Diagnostics (unknown
commands, malformed arguments) go to stderr.
"""

import sys
import os
from typing import Iterable

# ---------------------------------------------------------------------------
# Path setup: make 'engine' importable when this script is run directly
# as `python interface/console.py` from the repo root.
# ---------------------------------------------------------------------------
_REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

from engine.board import parse_coordinate
from engine.errors import GameError, OutOfRange
from engine.game import GameEngine
from engine.view import project, render_text


def _send(line: str) -> None:
    """Write a protocol line to stdout and flush immediately."""
    print(line, flush=True)


def _log(message: str) -> None:
    """Write a diagnostic line to stderr, keeping stdout clean."""
    print(message, file=sys.stderr, flush=True)


class ConsoleHandler:
    """
    Stateful handler for the console protocol.

    Owns one GameEngine and translates each command into one engine operation
    followed by a board reply.

    Attributes:
        engine: The game being played.
    """

    def __init__(self, engine: GameEngine | None = None) -> None:
        self.engine: GameEngine = engine if engine is not None else GameEngine()

    # -----------------------------------------------------------------------
    # Command handlers
    # -----------------------------------------------------------------------

    def handle_newgame(self) -> None:
        self.engine.new_game()
        self._reply()

    def handle_play(self, tokens: list[str]) -> None:
        """
        Parse and apply "play <x> <y>".

        Missing or non-integer coordinates are reported as OutOfRange, the
        same as integers outside the board.
        """
        try:
            if len(tokens) != 2:
                raise OutOfRange(f"expected 'play <x> <y>', got {tokens!r}")
            x, y = parse_coordinate(tokens[0]), parse_coordinate(tokens[1])
            self.engine.play(x, y)
        except GameError as exc:
            self._reply(exc)
            return
        self._reply()

    def handle_undo(self) -> None:
        try:
            self.engine.undo()
        except GameError as exc:
            self._reply(exc)
            return
        self._reply()

    def handle_show(self) -> None:
        self._reply()

    def handle_quit(self) -> None:
        """Exit the process. No reply is sent."""
        sys.exit(0)

    # -----------------------------------------------------------------------
    # Internal helpers
    # -----------------------------------------------------------------------

    def _reply(self, error: GameError | None = None) -> None:
        """Send the optional error line, the board, and the winner label."""
        if error is not None:
            _log(f"console: {error.code}: {error}")
            _send(f"error {error.code}")
        view = project(self.engine.state())
        _send(render_text(view))
        _send(f"winner {view.winner}")


def run_console_loop(lines: Iterable[str] | None = None) -> None:
    """
    Main console loop.

    Reads commands until "quit" or end of input and dispatches each one to a
    ConsoleHandler. A bug in one command is logged to stderr and the loop
    keeps going.

    Args:
        lines: Command source. Defaults to sys.stdin.
    """
    handler = ConsoleHandler()

    for raw_line in (sys.stdin if lines is None else lines):
        line = raw_line.strip()
        if not line:
            continue

        tokens = line.split()
        command = tokens[0].lower()
        args = tokens[1:]

        try:
            if command == "newgame":
                handler.handle_newgame()
            elif command == "play":
                handler.handle_play(args)
            elif command == "undo":
                handler.handle_undo()
            elif command == "show":
                handler.handle_show()
            elif command == "quit":
                handler.handle_quit()
            else:
                _log(f"console: ignoring unknown command: {command!r}")

        except Exception as e:
            _log(f"console: unhandled error for command {command!r}: {e}")


if __name__ == "__main__":
    run_console_loop()
