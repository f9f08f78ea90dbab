import numpy as np
import pytest

from arena.runner import MatchConfig, MatchRunner, PlayerSpec


def test_first_strategy_series_is_deterministic():
    runner = MatchRunner(MatchConfig(games=4, base_seed=0, log_every=2))
    records = runner.run_games(PlayerSpec(tie_break="first"), PlayerSpec(tie_break="first"))
    report = runner.summarize(records)

    assert report.games == 4
    assert report.first_wins == 4
    assert report.second_wins == 0
    assert report.draws == 0
    assert report.unfinished == 0
    assert report.mean_turns == pytest.approx(7.0)
    assert report.first_win_rate == pytest.approx(1.0)

    expected = np.zeros((3, 3), dtype=np.float32)
    for row, col in [(0, 0), (0, 1), (1, 1), (2, 2)]:
        expected[row, col] = 1.0
    assert np.array_equal(report.first_occupancy, expected)


def test_seeded_random_series_is_reproducible():
    config = MatchConfig(games=12, base_seed=5, log_every=100)
    first_run = MatchRunner(config).run_games(PlayerSpec(tie_break="random"), PlayerSpec(tie_break="random"))
    second_run = MatchRunner(config).run_games(PlayerSpec(tie_break="random"), PlayerSpec(tie_break="random"))

    assert [r.winner for r in first_run] == [r.winner for r in second_run]
    assert [r.turns for r in first_run] == [r.turns for r in second_run]

    report = MatchRunner.summarize(first_run)
    assert report.unfinished == 0
    assert report.first_wins + report.second_wins + report.draws == 12


def test_summarize_empty_series():
    report = MatchRunner.summarize([])
    assert report.games == 0
    assert report.first_occupancy.shape == (3, 3)


def test_unsupported_player_kind():
    runner = MatchRunner(MatchConfig(games=1))
    with pytest.raises(ValueError, match="Unsupported PlayerSpec kind: minimax"):
        runner.run_games(PlayerSpec(kind="minimax"), PlayerSpec())


def test_parallel_series_matches_serial_series():
    first, second = PlayerSpec(tie_break="random"), PlayerSpec(tie_break="random")
    serial = MatchRunner(MatchConfig(games=6, base_seed=3, log_every=100)).run_games(first, second)
    parallel = MatchRunner(
        MatchConfig(games=6, base_seed=3, parallel_workers=2, log_every=100)
    ).run_games(first, second)

    assert [(r.winner, r.turns) for r in parallel] == [(r.winner, r.turns) for r in serial]
    for left, right in zip(parallel, serial):
        assert np.array_equal(left.first_occupancy, right.first_occupancy)
