"""Rules helpers for 3x3 tic-tac-toe."""

from __future__ import annotations

from typing import Sequence, Tuple

PlayerID = int
Coordinate = int
Board = Tuple[PlayerID, ...]
WinningLine = Tuple[Coordinate, Coordinate, Coordinate]
Position = Tuple[int, int]

BOARD_ROWS = 3
BOARD_COLS = 3
BOARD_SIZE = BOARD_ROWS * BOARD_COLS
PLAYERS_COUNT = 2

NO_PLAYER: PlayerID = 0
NO_MOVE: Coordinate = BOARD_SIZE + 1

WINNING_COORDINATES: Tuple[WinningLine, ...] = (
    # rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # diagonals
    (0, 4, 8),
    (2, 4, 6),
)

EMPTY_BOARD: Board = (NO_PLAYER,) * BOARD_SIZE


def in_bounds(coordinate: Coordinate) -> bool:
    """Return whether a coordinate addresses a board cell."""
    return 0 <= coordinate < BOARD_SIZE


def coordinate_to_pos(coordinate: Coordinate) -> Position:
    """Convert a flat coordinate to (row, col)."""
    return (coordinate // BOARD_COLS, coordinate % BOARD_COLS)


def pos_to_coordinate(pos: Position) -> Coordinate:
    """Convert (row, col) to a flat coordinate."""
    return pos[0] * BOARD_COLS + pos[1]


def line_cells(board: Sequence[PlayerID], line: WinningLine) -> Tuple[PlayerID, PlayerID, PlayerID]:
    """Return the three cell values of a winning line."""
    return (board[line[0]], board[line[1]], board[line[2]])
