"""Tic-tac-toe game state, move validation, win/draw detection and encoding."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Tuple

import numpy as np

from engine.rules import (
    BOARD_COLS,
    BOARD_ROWS,
    BOARD_SIZE,
    EMPTY_BOARD,
    NO_PLAYER,
    WINNING_COORDINATES,
    Board,
    Coordinate,
    PlayerID,
    coordinate_to_pos,
    in_bounds,
    line_cells,
    pos_to_coordinate,
)

PLAYER_SYMBOLS = ("X", "O")


class MoveError(ValueError):
    """A move rejected by the game rules."""


class UnknownPlayerError(MoveError):
    def __init__(self, player_id: PlayerID) -> None:
        super().__init__(f"player {player_id} is not registered in this game")
        self.player_id = player_id


class GameFinishedError(MoveError):
    def __init__(self, winner: PlayerID) -> None:
        if winner == NO_PLAYER:
            message = "game has finished with a draw"
        else:
            message = f"player {winner} has already won the game"
        super().__init__(message)
        self.winner = winner


class OutOfBoundsError(MoveError):
    def __init__(self, player_id: PlayerID, coordinate: Coordinate) -> None:
        super().__init__(f"player {player_id} made a move outside of board: {coordinate}")
        self.player_id = player_id
        self.coordinate = coordinate


class CellTakenError(MoveError):
    def __init__(self, player_id: PlayerID, coordinate: Coordinate, owner: PlayerID) -> None:
        super().__init__(
            f"player {player_id} cannot mark field {coordinate} "
            f"since it's already taken by player {owner}"
        )
        self.player_id = player_id
        self.coordinate = coordinate
        self.owner = owner


@dataclass(frozen=True)
class State:
    """Immutable game state: two registered players and the board cells.

    Every accepted move produces a new State; an existing State is never
    changed, so it can be handed to players and kept as history safely.
    """

    players: Tuple[PlayerID, PlayerID]
    cells: Board = EMPTY_BOARD

    def __post_init__(self) -> None:
        if len(self.cells) != BOARD_SIZE:
            raise ValueError(f"Board must have {BOARD_SIZE} cells, got {len(self.cells)}")
        object.__setattr__(self, "players", tuple(self.players))
        object.__setattr__(self, "cells", tuple(self.cells))

    @classmethod
    def new(cls, player_a: PlayerID, player_b: PlayerID) -> "State":
        """Create the initial empty state for two participants."""
        return cls(players=(player_a, player_b), cells=EMPTY_BOARD)

    def board(self) -> Board:
        """Return a read-only snapshot of the cells."""
        return self.cells

    def is_registered(self, player_id: PlayerID) -> bool:
        return player_id != NO_PLAYER and player_id in self.players

    def is_finished(self) -> Tuple[PlayerID, bool]:
        """Return (winner, finished).

        The first fully owned line in WINNING_COORDINATES order decides the
        winner. Without a winner the game is finished only once no line has
        an empty cell left, which is a draw.
        """
        finished = True
        for line in WINNING_COORDINATES:
            x, y, z = line_cells(self.cells, line)
            if x == NO_PLAYER or y == NO_PLAYER or z == NO_PLAYER:
                finished = False
            elif x == y == z:
                return x, True
        return NO_PLAYER, finished

    def make_move(self, player_id: PlayerID, coordinate: Coordinate) -> "State":
        """Validate a move and return the successor state.

        Raises a MoveError subclass, checked in this order: unknown player,
        finished game, coordinate outside the board, occupied cell.
        """
        if not self.is_registered(player_id):
            raise UnknownPlayerError(player_id)

        winner, finished = self.is_finished()
        if finished:
            raise GameFinishedError(winner)

        if not in_bounds(coordinate):
            raise OutOfBoundsError(player_id, coordinate)

        owner = self.cells[coordinate]
        if owner != NO_PLAYER:
            raise CellTakenError(player_id, coordinate, owner)

        cells = list(self.cells)
        cells[coordinate] = player_id
        return replace(self, cells=tuple(cells))

    def empty_coordinates(self) -> List[Coordinate]:
        """Return empty cells in index order."""
        return [idx for idx, cell in enumerate(self.cells) if cell == NO_PLAYER]

    def current_player(self) -> PlayerID:
        """Return whose turn it is by piece parity.

        Informational only; make_move does not enforce turn order.
        """
        first, second = self.players
        first_count = sum(1 for cell in self.cells if cell == first)
        second_count = sum(1 for cell in self.cells if cell == second)
        return first if first_count <= second_count else second

    def opponent_of(self, player_id: PlayerID) -> PlayerID:
        if not self.is_registered(player_id):
            raise UnknownPlayerError(player_id)
        first, second = self.players
        return second if player_id == first else first

    def encode_state(self, perspective: PlayerID) -> np.ndarray:
        """Encode the board as (own, opponent, empty) planes from one player's view."""
        opponent = self.opponent_of(perspective)
        encoded = np.zeros((3, BOARD_ROWS, BOARD_COLS), dtype=np.float32)
        for idx, cell in enumerate(self.cells):
            row, col = coordinate_to_pos(idx)
            if cell == perspective:
                encoded[0, row, col] = 1.0
            elif cell == opponent:
                encoded[1, row, col] = 1.0
            else:
                encoded[2, row, col] = 1.0
        return encoded

    def symbol_for(self, cell: PlayerID) -> str:
        if cell == self.players[0]:
            return PLAYER_SYMBOLS[0]
        if cell == self.players[1]:
            return PLAYER_SYMBOLS[1]
        return "?"

    def render_ascii(self) -> str:
        """Return the board as text; empty cells show their coordinate."""
        lines: List[str] = []
        for row in range(BOARD_ROWS):
            row_cells: List[str] = []
            for col in range(BOARD_COLS):
                idx = pos_to_coordinate((row, col))
                cell = self.cells[idx]
                row_cells.append(str(idx) if cell == NO_PLAYER else self.symbol_for(cell))
            lines.append(" " + " | ".join(row_cells))
            if row < BOARD_ROWS - 1:
                lines.append("---+---+---")
        return "\n".join(lines)

