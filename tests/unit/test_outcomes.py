"""Tests for outcome classification and batch simulation."""

from wardeck.analysis.outcomes import (
    GameOutcome,
    classify_outcome,
    count_kings,
    simulate_game,
    simulate_games,
)
from wardeck.simulation.config import SimulationConfig
from wardeck.simulation.state import Card, Suit
from wardeck.simulation.stacks import PlayerStacks


def test_empty_right_player_loses() -> None:
    left = PlayerStacks([Card(Suit.HEARTS, 4)])
    assert classify_outcome(left, PlayerStacks()) is GameOutcome.LEFT_WINS


def test_empty_left_player_loses() -> None:
    right = PlayerStacks([Card(Suit.HEARTS, 4)])
    assert classify_outcome(PlayerStacks(), right) is GameOutcome.RIGHT_WINS


def test_capped_game_is_a_draw() -> None:
    """Test both players holding cards is never a win."""
    left = PlayerStacks([Card(Suit.HEARTS, 4)])
    right = PlayerStacks([Card(Suit.HEARTS, 5)] * 30)
    assert classify_outcome(left, right) is GameOutcome.DRAW


def test_both_exhausted_is_a_draw() -> None:
    assert classify_outcome(PlayerStacks(), PlayerStacks()) is GameOutcome.DRAW


def test_count_kings_includes_won_stack() -> None:
    player = PlayerStacks([Card(Suit.HEARTS, 13), Card(Suit.HEARTS, 2)])
    player.append([Card(Suit.SPADES, 13)])
    assert count_kings(player) == 2


def test_simulate_game_is_reproducible() -> None:
    config = SimulationConfig(seed=21)
    assert simulate_game(config, 4) == simulate_game(config, 4)


def test_simulate_game_record() -> None:
    record = simulate_game(SimulationConfig(seed=3), 0)

    assert record.seed == 3
    assert record.left_kings + record.right_kings == 4
    assert 0 < record.rounds <= 100_000
    assert record.left_cards + record.right_cards <= 52
    if record.capped:
        assert record.outcome is GameOutcome.DRAW
        assert record.left_cards + record.right_cards == 52


def test_simulate_game_respects_round_cap() -> None:
    record = simulate_game(SimulationConfig(seed=3, max_rounds=1), 0)

    assert record.rounds == 1
    assert record.capped
    assert record.outcome is GameOutcome.DRAW


def test_simulate_games_count() -> None:
    records = simulate_games(SimulationConfig(num_games=5, seed=100))

    assert [r.game_index for r in records] == list(range(5))
    assert [r.seed for r in records] == [100, 101, 102, 103, 104]
