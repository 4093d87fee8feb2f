"""War game engine.

A higher-wins game: the front cards of both stacks are compared and the
higher one takes every card in play. A tie draws one more card from each
side, and so on until a strict winner appears. If a side runs out of cards
in the middle of a tie, the game is over and the cards in play are lost.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from wardeck.simulation.state import Card
from wardeck.simulation.stacks import PlayerStacks

logger = logging.getLogger(__name__)

DEFAULT_MAX_ROUNDS = 100_000


class RoundResult(Enum):
    """What the game loop should do after a round."""

    CONTINUE = "continue"
    GAME_OVER = "game_over"


class Side(Enum):
    """Which player took a round."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class RoundResolution:
    """Outcome of a single round before the cards are awarded."""

    winner: Optional[Side]  # None means game over
    contested: tuple[Card, ...]  # Every card popped, in pop order

    @property
    def is_game_over(self) -> bool:
        return self.winner is None


def compare_cards(left_card: Card, right_card: Card) -> Optional[Side]:
    """Return the side holding the higher rank, or None on a tie."""
    if left_card.rank == right_card.rank:
        return None
    if left_card.rank > right_card.rank:
        return Side.LEFT
    return Side.RIGHT


def resolve_round(left: PlayerStacks, right: PlayerStacks) -> RoundResolution:
    """Draw cards until one side wins or a side runs out.

    Each tied pair stays in the contested pile and another pair is drawn.
    Stacks are only popped here; awarding the cards is up to the caller.
    """
    contested: List[Card] = []

    while True:
        if left.is_empty() or right.is_empty():
            if contested:
                logger.debug(f"Player exhausted mid-tie, {len(contested)} cards discarded")
            return RoundResolution(winner=None, contested=tuple(contested))

        left_card = left.pop_front()
        right_card = right.pop_front()
        assert left_card is not None and right_card is not None

        contested.append(left_card)
        contested.append(right_card)

        winner = compare_cards(left_card, right_card)
        if winner is not None:
            if len(contested) > 2:
                logger.debug(f"Tie chain of {len(contested) // 2} pairs won by {winner.value}")
            return RoundResolution(winner=winner, contested=tuple(contested))


def play_round(left: PlayerStacks, right: PlayerStacks) -> RoundResult:
    """Play one round and place the contested cards in the winner's won stack."""
    resolution = resolve_round(left, right)

    if resolution.winner is Side.LEFT:
        left.append(resolution.contested)
        return RoundResult.CONTINUE
    if resolution.winner is Side.RIGHT:
        right.append(resolution.contested)
        return RoundResult.CONTINUE
    return RoundResult.GAME_OVER


def play_game(
    left: PlayerStacks,
    right: PlayerStacks,
    max_rounds: int = DEFAULT_MAX_ROUNDS,
) -> int:
    """Play rounds until a player is exhausted or max_rounds is reached.

    Returns the number of rounds played, counting the round that detected
    game over. Both players are left in their final state. Reaching the cap
    is not a win for either side.
    """
    if left.is_empty() or right.is_empty():
        return 0

    round_counter = 0
    while round_counter < max_rounds:
        round_counter += 1
        if play_round(left, right) is RoundResult.GAME_OVER:
            return round_counter

    logger.warning(
        f"Round cap of {max_rounds} reached with {left.total_cards()} vs "
        f"{right.total_cards()} cards"
    )
    return round_counter
