"""Per-player draw and won stacks."""

from __future__ import annotations

import logging
import random
from collections import deque
from typing import Iterable, Optional

from wardeck.simulation.state import Card, Stack, new_stack

logger = logging.getLogger(__name__)


class PlayerStacks:
    """A player's draw stack and won stack.

    Cards only leave through pop_front() and only arrive through append().
    When the draw stack runs dry, the won stack is shuffled and becomes the
    new draw stack, so a player's cards keep circulating.
    """

    def __init__(
        self,
        draw_stack: Iterable[Card] = (),
        rng: Optional[random.Random] = None,
    ) -> None:
        self._draw_stack: Stack = deque(draw_stack)
        self._won_stack: Stack = new_stack()
        self.rng = rng if rng is not None else random.Random()

    @property
    def draw_stack(self) -> tuple[Card, ...]:
        return tuple(self._draw_stack)

    @property
    def won_stack(self) -> tuple[Card, ...]:
        return tuple(self._won_stack)

    def is_empty(self) -> bool:
        return not self._draw_stack and not self._won_stack

    def total_cards(self) -> int:
        return len(self._draw_stack) + len(self._won_stack)

    def pop_front(self) -> Optional[Card]:
        """Take the next card to play, recycling won cards if needed.

        Returns None when the player has no cards left at all.
        """
        if not self._draw_stack and self._won_stack:
            self._recycle_won_stack()
        if not self._draw_stack:
            return None
        return self._draw_stack.popleft()

    def append(self, cards: Iterable[Card]) -> None:
        """Add captured cards to the back of the won stack, keeping their order."""
        self._won_stack.extend(cards)

    def _recycle_won_stack(self) -> None:
        won = list(self._won_stack)
        self.rng.shuffle(won)
        self._draw_stack = deque(won)
        self._won_stack = new_stack()
        logger.debug(f"Recycled {len(won)} won cards into draw stack")

    def __len__(self) -> int:
        return self.total_cards()

    def __repr__(self) -> str:
        draw = " ".join(str(card) for card in self._draw_stack)
        won = " ".join(str(card) for card in self._won_stack)
        return f"PlayerStacks(draw=[{draw}], won=[{won}])"
