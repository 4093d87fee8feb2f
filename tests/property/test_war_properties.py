"""Property-based tests for the War engine."""

import random

from hypothesis import given, settings, strategies as st
from wardeck.analysis.outcomes import GameOutcome, classify_outcome
from wardeck.simulation.deck import create_default_stacks
from wardeck.simulation.state import Card, Suit
from wardeck.simulation.stacks import PlayerStacks
from wardeck.simulation.war import DEFAULT_MAX_ROUNDS, Side, play_game, resolve_round

cards = st.builds(Card, suit=st.sampled_from(list(Suit)), rank=st.integers(min_value=1, max_value=13))


@given(
    left_cards=st.lists(cards, min_size=1, max_size=12),
    right_cards=st.lists(cards, min_size=1, max_size=12),
    seed=st.integers(min_value=0, max_value=10000),
)
def test_card_conservation_property(left_cards: list, right_cards: list, seed: int) -> None:
    """Property: cards are only lost when a tie chain runs a player dry."""
    rng = random.Random(seed)
    left = PlayerStacks(left_cards, rng=rng)
    right = PlayerStacks(right_cards, rng=rng)
    initial = len(left_cards) + len(right_cards)

    for _ in range(500):
        resolution = resolve_round(left, right)
        if resolution.winner is Side.LEFT:
            left.append(resolution.contested)
        elif resolution.winner is Side.RIGHT:
            right.append(resolution.contested)
        else:
            remaining = left.total_cards() + right.total_cards()
            assert remaining + len(resolution.contested) == initial
            assert left.is_empty() or right.is_empty()
            return

        assert left.total_cards() + right.total_cards() == initial


@given(seed=st.integers(min_value=0, max_value=10000))
@settings(max_examples=20, deadline=None)
def test_game_terminates_property(seed: int) -> None:
    """Property: every default game ends in a valid terminal state within the cap."""
    left, right = create_default_stacks(random.Random(seed))

    rounds = play_game(left, right)

    assert rounds <= DEFAULT_MAX_ROUNDS
    outcome = classify_outcome(left, right)
    if outcome is GameOutcome.LEFT_WINS:
        assert right.total_cards() == 0
    elif outcome is GameOutcome.RIGHT_WINS:
        assert left.total_cards() == 0
    else:
        both_empty = left.is_empty() and right.is_empty()
        assert both_empty or rounds == DEFAULT_MAX_ROUNDS


@given(seed=st.integers(min_value=0, max_value=10000), max_rounds=st.integers(min_value=1, max_value=50))
@settings(deadline=None)
def test_round_cap_property(seed: int, max_rounds: int) -> None:
    """Property: the loop never exceeds its cap."""
    left, right = create_default_stacks(random.Random(seed))
    assert play_game(left, right, max_rounds=max_rounds) <= max_rounds
