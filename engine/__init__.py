"""
Tic-tac-toe engine package.

This package implements the rules of 3x3 tic-tac-toe: the board, turn order,
move validation, win/draw detection, and undo backed by a move history.
It has no knowledge of HTTP or any other transport.

Modules:
    constants — Board size, the 8 winning lines, and presentation labels
    errors    — GameError taxonomy raised by rejected operations
    board     — Player enum and the 9-cell occupancy grid
    game      — GameEngine: turn, history, outcome, and the engine lock
    view      — Pure projection of engine state into a presentation snapshot
"""
