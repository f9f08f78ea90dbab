"""Base player interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from engine.rules import Board, Coordinate, PlayerID


class PlayerError(RuntimeError):
    """A player failed to produce a move."""

    def __init__(self, player_id: PlayerID, reason: str) -> None:
        super().__init__(f"player {player_id} couldn't make next move: {reason}")
        self.player_id = player_id
        self.reason = reason


class BasePlayer(ABC):
    """Move source contract shared by computer and interactive players."""

    def __init__(self, player_id: PlayerID) -> None:
        self._player_id = player_id

    @property
    def player_id(self) -> PlayerID:
        return self._player_id

    @abstractmethod
    def next_move(self, board: Board) -> Coordinate:
        """Choose a coordinate for the given board snapshot.

        Raises PlayerError when the move source itself fails.
        """
        raise NotImplementedError
