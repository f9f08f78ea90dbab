import json

import pytest

from ai.heuristic_ai import HeuristicAI
from cli import arena as arena_cli
from cli import main as main_cli
from cli.config import GameConfig
from cli.human import HumanPlayer


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "game.json"
    path.write_text(
        json.dumps({"human_id": 1, "ai_id": 2, "arena": {"games": 3, "log_every": 1}}),
        encoding="utf-8",
    )
    return str(path)


@pytest.mark.parametrize(
    "mode, kinds",
    [
        ("human-vs-ai", (HumanPlayer, HeuristicAI)),
        ("ai-vs-human", (HeuristicAI, HumanPlayer)),
        ("ai-vs-ai", (HeuristicAI, HeuristicAI)),
        ("human-vs-human", (HumanPlayer, HumanPlayer)),
    ],
)
def test_build_players_for_each_mode(mode, kinds):
    players = main_cli.build_players(GameConfig({"mode": mode}))
    assert tuple(type(player) for player in players) == kinds
    assert {player.player_id for player in players} == {1, 2}


def test_cli_flags_override_config(config_path):
    args = main_cli.parse_args(["--config", config_path, "--mode", "ai-vs-ai", "--tie-break", "first", "--seed", "4"])
    config = main_cli.build_config(args)
    assert config.mode == "ai-vs-ai"
    assert config.tie_break == "first"
    assert config.seed == 4


def test_run_cli_plays_computer_game(config_path, capsys):
    outcome = main_cli.run_cli(["--config", config_path, "--mode", "ai-vs-ai", "--tie-break", "first"])

    assert outcome.winner == 2
    assert outcome.moves == [0, 3, 1, 2, 4, 7, 8]
    assert "Game finished - player 2 won!" in capsys.readouterr().out


def test_run_arena_prints_report(config_path, capsys):
    report = arena_cli.run_arena(["--config", config_path, "--seed", "1", "--log-level", "WARNING"])

    assert report.games == 3
    out = capsys.readouterr().out
    assert "Games: 3" in out
    assert "First player final occupancy:" in out


def test_run_arena_rejects_duplicate_player_ids(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"human_id": 1, "ai_id": 1}), encoding="utf-8")
    with pytest.raises(ValueError):
        arena_cli.run_arena(["--config", str(path)])


def test_help_explains_closed_input(capsys):
    with pytest.raises(SystemExit):
        main_cli.parse_args(["--help"])
    assert "standard input closes" in capsys.readouterr().out
