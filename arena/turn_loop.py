"""Turn loop alternating registered players over an immutable game state."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from ai.base_player import BasePlayer, PlayerError
from engine.board import MoveError, State
from engine.rules import NO_PLAYER, PLAYERS_COUNT, Coordinate, PlayerID

LOGGER = logging.getLogger(__name__)

Emit = Callable[[str], None]


@dataclass
class GameOutcome:
    """Summary of one played game."""

    winner: PlayerID
    is_draw: bool
    finished: bool
    turns: int
    final_state: State
    moves: List[Coordinate] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)


def finish_message(winner: PlayerID) -> str:
    if winner == NO_PLAYER:
        return "Game finished - it's a draw!"
    return f"Game finished - player {winner} won!"


def play_game(
    players: Sequence[BasePlayer],
    state: Optional[State] = None,
    emit: Emit = print,
    max_turns: Optional[int] = None,
) -> GameOutcome:
    """Alternate players until the state is finished.

    A rejected or failed move is reported and the turn passes to the next
    player; the same player is never retried. ``max_turns`` bounds the
    number of turns for unattended play.
    """
    if len(players) != PLAYERS_COUNT:
        raise ValueError(f"Expected {PLAYERS_COUNT} players, got {len(players)}")
    if state is None:
        state = State.new(players[0].player_id, players[1].player_id)

    moves: List[Coordinate] = []
    errors: List[str] = []
    turns = 0

    while True:
        for player in players:
            emit(state.render_ascii())
            winner, finished = state.is_finished()
            if finished:
                message = finish_message(winner)
                emit(message)
                LOGGER.info("%s turns=%d moves=%s", message, turns, moves)
                return GameOutcome(
                    winner=winner,
                    is_draw=winner == NO_PLAYER,
                    finished=True,
                    turns=turns,
                    final_state=state,
                    moves=moves,
                    errors=errors,
                )

            if max_turns is not None and turns >= max_turns:
                LOGGER.warning("Stopping unfinished game after %d turns", turns)
                return GameOutcome(
                    winner=NO_PLAYER,
                    is_draw=False,
                    finished=False,
                    turns=turns,
                    final_state=state,
                    moves=moves,
                    errors=errors,
                )

            turns += 1
            try:
                coordinate = player.next_move(state.board())
                state = state.make_move(player.player_id, coordinate)
            except PlayerError as exc:
                report = f"Next move error: {exc}"
            except MoveError as exc:
                report = f"Player {player.player_id} error: {exc}"
            else:
                moves.append(coordinate)
                LOGGER.debug("Player %d marked %d", player.player_id, coordinate)
                continue

            emit(report)
            errors.append(report)
            LOGGER.warning(report)
