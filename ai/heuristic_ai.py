"""Line-scoring heuristic AI for tic-tac-toe."""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple, Union

from ai.base_player import BasePlayer
from ai.strategies import TieBreakStrategy, build_strategy
from engine.rules import (
    NO_MOVE,
    NO_PLAYER,
    WINNING_COORDINATES,
    Board,
    Coordinate,
    PlayerID,
    WinningLine,
)

LOGGER = logging.getLogger(__name__)

Score = int

SCORE_LOST: Score = -10
SCORE_DRAW: Score = 0
SCORE_WIN: Score = 10
SCORE_DISTURB: Score = 10


class HeuristicAI(BasePlayer):
    """Computer player that scores every winning line from its own view.

    Each line yields one candidate (its first empty cell) and a score. The
    best-scoring candidates are collected in scan order and handed to the
    tie-break strategy, which never sees the scores themselves.
    """

    def __init__(
        self,
        player_id: PlayerID,
        tie_break: Union[str, TieBreakStrategy] = "first",
        seed: Optional[int] = None,
        debug_top_k: int = 3,
    ) -> None:
        super().__init__(player_id)
        self._rng = random.Random(seed)
        if isinstance(tie_break, str):
            self.tie_break_name = tie_break
            self._strategy = build_strategy(tie_break, self._rng)
        else:
            self.tie_break_name = getattr(tie_break, "__name__", "custom")
            self._strategy = tie_break
        self.debug_top_k = max(1, debug_top_k)

    def evaluate_line(self, board: Board, line: WinningLine) -> Tuple[Coordinate, Score]:
        """Score one line and return (first empty cell or NO_MOVE, score)."""
        empty = 0
        opponent = 0
        score = SCORE_DRAW
        candidate = NO_MOVE
        for coordinate in line:
            cell = board[coordinate]
            if cell == NO_PLAYER:
                if candidate == NO_MOVE:
                    candidate = coordinate
                empty += 1
            elif cell != self.player_id:
                score = SCORE_LOST
                opponent += 1

        if opponent == 0 and empty == 1:
            # certain win
            score = SCORE_WIN
        elif opponent > 0 and candidate != NO_MOVE:
            # line is lost for us; block it when the opponent is one move away
            if opponent == 2:
                score = SCORE_DISTURB
        elif empty > 0:
            score = SCORE_WIN // empty
        return candidate, score

    def next_move(self, board: Board) -> Coordinate:
        """Pick the best candidate over all lines, breaking ties by strategy."""
        best_score: Optional[Score] = None
        best_moves: List[Coordinate] = []
        diagnostics: List[Tuple[WinningLine, Coordinate, Score]] = []

        for line in WINNING_COORDINATES:
            candidate, score = self.evaluate_line(board, line)
            diagnostics.append((line, candidate, score))
            if candidate == NO_MOVE:
                continue
            if best_score is None or score > best_score:
                best_score = score
                best_moves = [candidate]
            elif score == best_score:
                best_moves.append(candidate)

        if not best_moves:
            LOGGER.debug("Player %d found no playable line", self.player_id)
            return NO_MOVE

        chosen = self._strategy(best_moves)
        self._log_diagnostics(diagnostics, best_moves, chosen)
        return chosen

    def _log_diagnostics(
        self,
        diagnostics: List[Tuple[WinningLine, Coordinate, Score]],
        best_moves: List[Coordinate],
        chosen: Coordinate,
    ) -> None:
        """Emit top-k line breakdown when DEBUG is enabled."""
        if not LOGGER.isEnabledFor(logging.DEBUG):
            return
        ranked = sorted(diagnostics, key=lambda item: item[2], reverse=True)
        for idx, (line, candidate, score) in enumerate(ranked[: self.debug_top_k], start=1):
            LOGGER.debug(
                "Line #%d %s candidate=%s score=%d",
                idx,
                line,
                candidate,
                score,
            )
        LOGGER.debug(
            "Player %d tied=%s strategy=%s chosen=%d",
            self.player_id,
            best_moves,
            self.tie_break_name,
            chosen,
        )
