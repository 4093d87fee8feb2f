"""Deck construction and dealing."""

from __future__ import annotations

import random
from typing import List, Optional, Sequence, Tuple

from wardeck.simulation.state import SUITE_SIZE, Card, Suit
from wardeck.simulation.stacks import PlayerStacks


def build_deck(suite_size: int = SUITE_SIZE) -> List[Card]:
    """Create an ordered deck: every suit in turn, ranks 1..suite_size."""
    if not 1 <= suite_size <= SUITE_SIZE:
        raise ValueError(f"suite_size must be in [1, {SUITE_SIZE}], got {suite_size}")
    return [Card(suit=suit, rank=rank) for suit in Suit for rank in range(1, suite_size + 1)]


def shuffle_deck(deck: List[Card], rng: random.Random) -> None:
    rng.shuffle(deck)


def create_stacks(
    suite_size: int = SUITE_SIZE,
    rng: Optional[random.Random] = None,
) -> Tuple[PlayerStacks, PlayerStacks]:
    """Shuffle a fresh deck and deal half to each player.

    Both players recycle their won stacks with the same rng, so a seeded
    rng makes the whole game reproducible.
    """
    rng = rng if rng is not None else random.Random()
    deck = build_deck(suite_size)
    deck_size = len(deck)
    if deck_size % 2 != 0:
        raise ValueError(f"Deck of {deck_size} cards cannot be split evenly")

    shuffle_deck(deck, rng)

    half = deck_size // 2
    return (
        PlayerStacks(deck[:half], rng=rng),
        PlayerStacks(deck[half:], rng=rng),
    )


def create_default_stacks(rng: Optional[random.Random] = None) -> Tuple[PlayerStacks, PlayerStacks]:
    return create_stacks(SUITE_SIZE, rng)


def is_ordered_deck(cards: Sequence[Card]) -> bool:
    """Check whether cards run suit by suit in ascending rank, starting each suit at 1."""
    if not cards:
        return True
    if cards[0].rank != 1:
        return False

    for previous, card in zip(cards, cards[1:]):
        if card.suit != previous.suit:
            if card.rank != 1:
                return False
        elif card.rank != previous.rank + 1:
            return False
    return True
