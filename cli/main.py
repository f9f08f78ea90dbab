"""CLI entrypoint for playing tic-tac-toe in the terminal."""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from ai.base_player import BasePlayer
from ai.heuristic_ai import HeuristicAI
from ai.strategies import STRATEGY_NAMES
from arena.turn_loop import GameOutcome, play_game
from cli.config import MODES, GameConfig
from cli.human import HumanPlayer


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play tic-tac-toe in terminal.",
        epilog="A failed or rejected move passes the turn. If standard input closes, every "
        "human turn fails until the computer finishes the game; with two humans the game "
        "never ends, so interrupt it with Ctrl-C.",
    )
    parser.add_argument("--config", type=str, default=None, help="Path to game config JSON")
    parser.add_argument("--mode", type=str, default=None, choices=MODES, help="Who plays whom")
    parser.add_argument(
        "--tie-break",
        type=str,
        default=None,
        choices=STRATEGY_NAMES,
        help="How the computer picks among equally scored moves",
    )
    parser.add_argument("--seed", type=int, default=None, help="Deterministic computer player seed")
    parser.add_argument("--log-level", type=str, default="WARNING", help="Python logging level")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config)
    if args.mode is not None:
        config.mode = args.mode
    if args.tie_break is not None:
        config.tie_break = args.tie_break
    if args.seed is not None:
        config.seed = args.seed
    config.validate()
    return config


def build_players(config: GameConfig) -> List[BasePlayer]:
    """Create the two participants in turn order for the configured mode."""

    def computer(player_id: int, seed: Optional[int]) -> BasePlayer:
        return HeuristicAI(player_id, tie_break=config.tie_break, seed=seed)

    if config.mode == "human-vs-ai":
        return [HumanPlayer(config.human_id), computer(config.ai_id, config.seed)]
    if config.mode == "ai-vs-human":
        return [computer(config.ai_id, config.seed), HumanPlayer(config.human_id)]
    if config.mode == "ai-vs-ai":
        second_seed = None if config.seed is None else config.seed + 1
        return [computer(config.ai_id, config.seed), computer(config.human_id, second_seed)]
    if config.mode == "human-vs-human":
        return [HumanPlayer(config.human_id), HumanPlayer(config.ai_id)]
    raise ValueError(f"Unsupported mode: {config.mode}")


def run_cli(argv: Optional[Sequence[str]] = None) -> GameOutcome:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    logger = logging.getLogger("tictactoe.cli")

    config = build_config(args)
    players = build_players(config)
    logger.info(
        "Starting game mode=%s players=%s tie_break=%s",
        config.mode,
        [player.player_id for player in players],
        config.tie_break,
    )
    print("Enter the number of a free field (0-8) to mark it.")
    return play_game(players, emit=print)


def main() -> None:
    run_cli()


if __name__ == "__main__":
    main()
