"""AI-vs-AI match runner for comparing heuristic configurations."""

from __future__ import annotations

import logging
import multiprocessing as mp
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from ai.base_player import BasePlayer
from ai.heuristic_ai import HeuristicAI
from arena.turn_loop import GameOutcome, play_game
from engine.rules import BOARD_SIZE, NO_PLAYER, PlayerID

LOGGER = logging.getLogger(__name__)

FIRST_PLAYER_ID: PlayerID = 1
SECOND_PLAYER_ID: PlayerID = 2
SECOND_SEED_OFFSET = 9973


@dataclass
class PlayerSpec:
    """Serializable player descriptor for workers."""

    kind: str = "heuristic"
    tie_break: str = "first"


@dataclass
class MatchConfig:
    """Match series config."""

    games: int = 100
    base_seed: Optional[int] = None
    parallel_workers: int = 1
    log_every: int = 10
    max_turns: int = 2 * BOARD_SIZE


@dataclass
class GameRecord:
    """Result of one arena game, from the first player's seat."""

    winner: PlayerID
    is_draw: bool
    finished: bool
    turns: int
    first_occupancy: np.ndarray


@dataclass
class MatchReport:
    """Aggregate of a match series."""

    games: int
    first_wins: int
    second_wins: int
    draws: int
    unfinished: int
    mean_turns: float
    first_occupancy: np.ndarray

    @property
    def first_win_rate(self) -> float:
        return self.first_wins / max(1, self.games)


def _build_player_from_spec(spec: PlayerSpec, player_id: PlayerID, seed: Optional[int]) -> BasePlayer:
    if spec.kind == "heuristic":
        return HeuristicAI(player_id, tie_break=spec.tie_break, seed=seed)
    raise ValueError(f"Unsupported PlayerSpec kind: {spec.kind}")


def _silent(_: str) -> None:
    return None


def _record_from_outcome(outcome: GameOutcome) -> GameRecord:
    planes = outcome.final_state.encode_state(FIRST_PLAYER_ID)
    return GameRecord(
        winner=outcome.winner,
        is_draw=outcome.is_draw,
        finished=outcome.finished,
        turns=outcome.turns,
        first_occupancy=planes[0],
    )


def _simulate_single_game(
    first_spec: PlayerSpec,
    second_spec: PlayerSpec,
    seed: Optional[int],
    max_turns: int,
) -> GameRecord:
    first = _build_player_from_spec(first_spec, FIRST_PLAYER_ID, seed)
    second = _build_player_from_spec(
        second_spec,
        SECOND_PLAYER_ID,
        None if seed is None else seed + SECOND_SEED_OFFSET,
    )
    outcome = play_game([first, second], emit=_silent, max_turns=max_turns)
    return _record_from_outcome(outcome)


def _parallel_worker(
    game_index: int,
    first_spec: PlayerSpec,
    second_spec: PlayerSpec,
    base_seed: Optional[int],
    max_turns: int,
) -> GameRecord:
    seed = None if base_seed is None else base_seed + game_index
    return _simulate_single_game(first_spec, second_spec, seed=seed, max_turns=max_turns)


class MatchRunner:
    """Runs seeded AI-vs-AI games and summarizes them."""

    def __init__(self, config: MatchConfig) -> None:
        self.config = config

    def run_games(self, first_spec: PlayerSpec, second_spec: PlayerSpec) -> List[GameRecord]:
        if self.config.parallel_workers > 1:
            return self._run_games_parallel(first_spec, second_spec)

        records: List[GameRecord] = []
        for game_index in range(self.config.games):
            seed = None if self.config.base_seed is None else self.config.base_seed + game_index
            record = _simulate_single_game(
                first_spec,
                second_spec,
                seed=seed,
                max_turns=self.config.max_turns,
            )
            records.append(record)
            self._log_progress(game_index, record)
        return records

    def _run_games_parallel(self, first_spec: PlayerSpec, second_spec: PlayerSpec) -> List[GameRecord]:
        args = [
            (idx, first_spec, second_spec, self.config.base_seed, self.config.max_turns)
            for idx in range(self.config.games)
        ]
        with mp.Pool(processes=self.config.parallel_workers) as pool:
            records = pool.starmap(_parallel_worker, args)

        for idx, record in enumerate(records):
            self._log_progress(idx, record)
        return records

    def _log_progress(self, game_index: int, record: GameRecord) -> None:
        if (game_index + 1) % max(1, self.config.log_every) == 0:
            LOGGER.info(
                "Arena game %d/%d | winner=%s draw=%s turns=%d",
                game_index + 1,
                self.config.games,
                record.winner,
                record.is_draw,
                record.turns,
            )

    @staticmethod
    def summarize(records: Sequence[GameRecord]) -> MatchReport:
        if not records:
            return MatchReport(
                games=0,
                first_wins=0,
                second_wins=0,
                draws=0,
                unfinished=0,
                mean_turns=0.0,
                first_occupancy=np.zeros((3, 3), dtype=np.float32),
            )

        winners = np.array([record.winner for record in records])
        finished = np.array([record.finished for record in records], dtype=bool)
        turns = np.array([record.turns for record in records], dtype=np.float64)
        occupancy = np.stack([record.first_occupancy for record in records])

        return MatchReport(
            games=len(records),
            first_wins=int(np.sum(winners == FIRST_PLAYER_ID)),
            second_wins=int(np.sum(winners == SECOND_PLAYER_ID)),
            draws=int(np.sum(finished & (winners == NO_PLAYER))),
            unfinished=int(np.sum(~finished)),
            mean_turns=float(turns.mean()),
            first_occupancy=occupancy.mean(axis=0),
        )
