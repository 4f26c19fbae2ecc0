import io
import random as rnd

import pytest

from rich.console import Console

from mastermind_solver.candidate_scorers import MostOccurrenceScorer
from mastermind_solver.codes import Code
from mastermind_solver.simulate import all_secrets, calculate_performance, generate_stats_table, play_single_game, run_simulation


def test_all_secrets():
    secrets = all_secrets()
    assert len(secrets) == 360
    assert len(set(secrets)) == 360


def test_play_single_game_turn_limit():
    _, turns = play_single_game(Code.parse("RBYG"), max_turns=1, rng=rnd.Random(0))
    assert turns == 1

    success, turns = play_single_game(Code.parse("RBYG"), max_turns=10, rng=rnd.Random(0))
    assert success
    assert 1 <= turns <= 6


def test_run_simulation_statistics():
    result = run_simulation(max_turns=10, seed=3)
    assert result.games == 360
    assert result.wins == 360
    assert not result.failures
    assert sum(result.distribution.values()) == 360
    assert result.total_turns == sum(turns * count for turns, count in result.distribution.items())
    assert result.worst <= 6
    assert result.win_rate == pytest.approx(100.0)
    assert 1 < result.average_turns <= 6


def test_run_simulation_is_reproducible():
    secrets = all_secrets()[:40]
    first = run_simulation(secrets, seed=9)
    second = run_simulation(secrets, seed=9)
    assert first.distribution == second.distribution


def test_run_simulation_records_failures():
    secrets = all_secrets()[:20]
    result = run_simulation(secrets, max_turns=1, seed=0, scorer=MostOccurrenceScorer)
    assert result.games == 20
    assert result.wins + len(result.failures) == 20
    assert result.distribution == {1: 20}


def test_calculate_performance():
    assert calculate_performance(0, 0, 0) == 0.0
    assert calculate_performance(10, 10, 10, max_turns=10) == pytest.approx(60 + 40 * 10 / 11)
    assert calculate_performance(0, 10, 100, max_turns=10) == pytest.approx(0.0)


def test_generate_stats_table_renders():
    result = run_simulation(all_secrets()[:10], seed=1)
    console = Console(file=io.StringIO(), width=100)
    console.print(generate_stats_table(result))
    output = console.file.getvalue()
    assert "Games played:" in output
    assert "Turn Distribution" in output


def test_calculate_performance_averages_over_every_game():
    # Five wins in 3 turns and five losses at the 10 turn limit
    expected_turn_score = (11 - 65 / 10) / 11
    assert calculate_performance(5, 10, 65, max_turns=10) == pytest.approx(60 * 0.5 + 40 * expected_turn_score)
