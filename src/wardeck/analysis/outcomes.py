"""Game outcome classification and batch simulation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List

from wardeck.simulation.config import SimulationConfig
from wardeck.simulation.deck import create_stacks
from wardeck.simulation.stacks import PlayerStacks
from wardeck.simulation.war import play_game

logger = logging.getLogger(__name__)

KING_RANK = 13


class GameOutcome(Enum):
    """Final result of a game."""

    LEFT_WINS = "left_wins"
    RIGHT_WINS = "right_wins"
    DRAW = "draw"


def classify_outcome(left: PlayerStacks, right: PlayerStacks) -> GameOutcome:
    """Decide who won from the final stacks.

    A player with no cards left has lost. When both still hold cards the
    game stopped at the round cap, which counts as a draw. When both ran
    dry in the same tie chain nobody won either.
    """
    left_empty = left.is_empty()
    right_empty = right.is_empty()
    if right_empty and not left_empty:
        return GameOutcome.LEFT_WINS
    if left_empty and not right_empty:
        return GameOutcome.RIGHT_WINS
    return GameOutcome.DRAW


def count_kings(player: PlayerStacks) -> int:
    return sum(1 for card in player.draw_stack + player.won_stack if card.rank == KING_RANK)


@dataclass
class GameRecord:
    """Summary of one simulated game."""

    game_index: int
    seed: int
    rounds: int
    outcome: GameOutcome
    left_kings: int
    right_kings: int
    left_cards: int
    right_cards: int
    capped: bool

    def to_dict(self) -> dict:
        return {
            "game_index": self.game_index,
            "seed": self.seed,
            "rounds": self.rounds,
            "outcome": self.outcome.value,
            "left_kings": self.left_kings,
            "right_kings": self.right_kings,
            "left_cards": self.left_cards,
            "right_cards": self.right_cards,
            "capped": self.capped,
        }


def simulate_game(config: SimulationConfig, game_index: int = 0) -> GameRecord:
    """Deal and play one game of a batch."""
    assert config.seed is not None
    left, right = create_stacks(config.suite_size, config.game_rng(game_index))
    left_kings = count_kings(left)
    right_kings = count_kings(right)

    rounds = play_game(left, right, max_rounds=config.max_rounds)
    outcome = classify_outcome(left, right)
    capped = not left.is_empty() and not right.is_empty()

    return GameRecord(
        game_index=game_index,
        seed=config.seed + game_index,
        rounds=rounds,
        outcome=outcome,
        left_kings=left_kings,
        right_kings=right_kings,
        left_cards=left.total_cards(),
        right_cards=right.total_cards(),
        capped=capped,
    )


def simulate_games(config: SimulationConfig) -> List[GameRecord]:
    """Play config.num_games independent games."""
    records = []
    for game_index in range(config.num_games):
        record = simulate_game(config, game_index)
        records.append(record)
        if (game_index + 1) % 100 == 0:
            logger.debug(f"Simulated {game_index + 1}/{config.num_games} games")

    logger.info(f"Simulated {len(records)} games (seed={config.seed})")
    return records
