"""Immutable card representation."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Optional

SUITE_SIZE = 13

_RANK_LABELS = {1: "A", 11: "J", 12: "Q", 13: "K"}


class Suit(Enum):
    """Playing card suits (unordered)."""

    HEARTS = "H"
    CLUBS = "C"
    DIAMONDS = "D"
    SPADES = "S"


@dataclass(frozen=True)
class Card:
    """Immutable playing card. Only the rank matters in play."""

    suit: Suit
    rank: int

    def __post_init__(self) -> None:
        if not 1 <= self.rank <= SUITE_SIZE:
            raise ValueError(f"Card rank must be in [1, {SUITE_SIZE}], got {self.rank}")

    @classmethod
    def create(cls, suit: Suit, rank: int) -> Optional["Card"]:
        """Build a card, or return None if the rank is out of range."""
        if rank < 1 or rank > SUITE_SIZE:
            return None
        return cls(suit=suit, rank=rank)

    def __str__(self) -> str:
        return f"{_RANK_LABELS.get(self.rank, str(self.rank))}{self.suit.value}"


# Front (index 0) is the next card to play, won cards go on the back.
Stack = Deque[Card]


def new_stack() -> Stack:
    return deque()
