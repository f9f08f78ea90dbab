"""Game and arena settings loaded from a JSON config file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Optional

from ai.strategies import STRATEGY_NAMES
from engine.rules import NO_PLAYER

DEFAULT_CONFIG_PATH = "configs/game_config.json"

MODES = ("human-vs-ai", "ai-vs-human", "ai-vs-ai", "human-vs-human")


class GameConfig:
    """Container for game settings loaded from config file."""

    def __init__(self, payload: Optional[Dict[str, object]] = None) -> None:
        payload = payload or {}
        self.mode = str(payload.get("mode", "human-vs-ai"))
        self.human_id = int(payload.get("human_id", 1))
        self.ai_id = int(payload.get("ai_id", 2))
        self.tie_break = str(payload.get("tie_break", "random"))
        seed = payload.get("seed")
        self.seed = None if seed is None else int(seed)

        arena = payload.get("arena") or {}
        self.arena_games = int(arena.get("games", 200))
        base_seed = arena.get("base_seed", 0)
        self.arena_base_seed = None if base_seed is None else int(base_seed)
        self.arena_parallel_workers = int(arena.get("parallel_workers", 1))
        self.arena_log_every = int(arena.get("log_every", 50))
        self.arena_max_turns = int(arena.get("max_turns", 18))
        self.arena_first_tie_break = str(arena.get("first_tie_break", "first"))
        self.arena_second_tie_break = str(arena.get("second_tie_break", "random"))

    @classmethod
    def from_json(cls, path: str | Path) -> "GameConfig":
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls(payload)

    @classmethod
    def load(cls, path: Optional[str | Path]) -> "GameConfig":
        """Load ``path``; without one, use the default file if present."""
        if path is not None:
            return cls.from_json(path)
        if Path(DEFAULT_CONFIG_PATH).is_file():
            return cls.from_json(DEFAULT_CONFIG_PATH)
        return cls()

    def validate(self) -> None:
        if self.mode not in MODES:
            raise ValueError(f"Unsupported mode: {self.mode}")
        if NO_PLAYER in (self.human_id, self.ai_id):
            raise ValueError(f"Player ids must differ from {NO_PLAYER}")
        if self.human_id == self.ai_id:
            raise ValueError(f"Player ids must be distinct, got {self.human_id} twice")
        for name in (self.tie_break, self.arena_first_tie_break, self.arena_second_tie_break):
            if name not in STRATEGY_NAMES:
                raise ValueError(f"Unsupported tie-break strategy: {name}")
