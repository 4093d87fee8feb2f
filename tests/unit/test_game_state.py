"""Tests for immutable cards."""

import pytest
from wardeck.simulation.state import SUITE_SIZE, Card, Suit


def test_card_immutability() -> None:
    """Test Card is immutable."""
    card = Card(Suit.HEARTS, 1)
    assert card.rank == 1

    with pytest.raises(AttributeError):
        card.rank = 13  # type: ignore


def test_exactly_four_suits() -> None:
    assert len(list(Suit)) == 4


@pytest.mark.parametrize("rank", [1, 7, SUITE_SIZE])
def test_create_valid_card(rank: int) -> None:
    """Test create() accepts every rank in range."""
    card = Card.create(Suit.SPADES, rank)
    assert card is not None
    assert card.rank == rank
    assert card.suit is Suit.SPADES


@pytest.mark.parametrize("rank", [0, -1, 14, 100])
def test_create_rejects_out_of_range_rank(rank: int) -> None:
    """Test create() yields no card for invalid ranks."""
    assert Card.create(Suit.SPADES, rank) is None


def test_constructor_rejects_out_of_range_rank() -> None:
    with pytest.raises(ValueError):
        Card(Suit.CLUBS, 14)


def test_card_str() -> None:
    assert str(Card(Suit.HEARTS, 1)) == "AH"
    assert str(Card(Suit.SPADES, 10)) == "10S"
    assert str(Card(Suit.DIAMONDS, 12)) == "QD"
    assert str(Card(Suit.CLUBS, 13)) == "KC"
