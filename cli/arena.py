"""CLI command to pit two heuristic configurations against each other."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

import numpy as np

from ai.strategies import STRATEGY_NAMES
from arena.runner import MatchConfig, MatchReport, MatchRunner, PlayerSpec
from cli.config import GameConfig


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run heuristic-vs-heuristic tic-tac-toe matches.")
    parser.add_argument("--config", type=str, default=None, help="Path to game config JSON")
    parser.add_argument("--games", type=int, default=None, help="Number of games to play")
    parser.add_argument("--first-tie-break", type=str, default=None, choices=STRATEGY_NAMES)
    parser.add_argument("--second-tie-break", type=str, default=None, choices=STRATEGY_NAMES)
    parser.add_argument("--seed", type=int, default=None, help="Base seed for the series")
    parser.add_argument("--workers", type=int, default=None, help="Parallel worker processes")
    parser.add_argument("--log-level", type=str, default="INFO", help="Python logging level")
    return parser.parse_args(argv)


def format_report(report: MatchReport) -> str:
    occupancy = np.array2string(report.first_occupancy, precision=2, suppress_small=True)
    return "\n".join(
        [
            f"Games: {report.games}",
            f"First wins: {report.first_wins} ({report.first_win_rate:.1%})",
            f"Second wins: {report.second_wins}",
            f"Draws: {report.draws}",
            f"Unfinished: {report.unfinished}",
            f"Mean turns: {report.mean_turns:.2f}",
            "First player final occupancy:",
            occupancy,
        ]
    )


def run_arena(argv: Optional[Sequence[str]] = None) -> MatchReport:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    config = GameConfig.load(args.config)
    if args.games is not None:
        config.arena_games = args.games
    if args.first_tie_break is not None:
        config.arena_first_tie_break = args.first_tie_break
    if args.second_tie_break is not None:
        config.arena_second_tie_break = args.second_tie_break
    if args.seed is not None:
        config.arena_base_seed = args.seed
    if args.workers is not None:
        config.arena_parallel_workers = args.workers
    config.validate()

    runner = MatchRunner(
        MatchConfig(
            games=config.arena_games,
            base_seed=config.arena_base_seed,
            parallel_workers=config.arena_parallel_workers,
            log_every=config.arena_log_every,
            max_turns=config.arena_max_turns,
        )
    )
    records = runner.run_games(
        PlayerSpec(tie_break=config.arena_first_tie_break),
        PlayerSpec(tie_break=config.arena_second_tie_break),
    )
    report = runner.summarize(records)
    print(format_report(report))
    return report


def main() -> None:
    run_arena()


if __name__ == "__main__":
    main()
