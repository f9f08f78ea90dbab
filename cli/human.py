"""Interactive player reading moves from a text stream."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from ai.base_player import BasePlayer, PlayerError
from engine.rules import NO_MOVE, Board, Coordinate, PlayerID, in_bounds

LOGGER = logging.getLogger(__name__)


def parse_coordinate(raw: str) -> Coordinate:
    """Map one input line to a coordinate; anything unusable becomes NO_MOVE."""
    try:
        coordinate = int(raw.strip())
    except ValueError:
        return NO_MOVE
    if not in_bounds(coordinate):
        return NO_MOVE
    return coordinate


class HumanPlayer(BasePlayer):
    """Blocks the turn until one line is read from the input stream."""

    def __init__(
        self,
        player_id: PlayerID,
        stream: Optional[TextIO] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        super().__init__(player_id)
        self.stream = stream if stream is not None else sys.stdin
        self.out = out if out is not None else sys.stdout

    def next_move(self, board: Board) -> Coordinate:
        print(f"Waiting for player {self.player_id} move....", file=self.out, flush=True)
        try:
            line = self.stream.readline()
        except OSError as exc:
            raise PlayerError(self.player_id, f"user input error: {exc}") from exc
        if line == "":
            LOGGER.warning("Input stream for player %d is closed; its turns will keep failing", self.player_id)
            raise PlayerError(self.player_id, "user input error: end of input")

        coordinate = parse_coordinate(line)
        if coordinate == NO_MOVE:
            LOGGER.debug("Player %d entered unusable input %r", self.player_id, line.rstrip("\n"))
        return coordinate
