"""Simulation configuration."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from wardeck.simulation.state import SUITE_SIZE
from wardeck.simulation.war import DEFAULT_MAX_ROUNDS


@dataclass
class SimulationConfig:
    """Configuration for one or many simulated games."""

    max_rounds: int = DEFAULT_MAX_ROUNDS
    suite_size: int = SUITE_SIZE
    num_games: int = 1000
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate fields and generate a seed if not provided."""
        if self.max_rounds < 1:
            raise ValueError(f"max_rounds must be positive, got {self.max_rounds}")
        if self.num_games < 1:
            raise ValueError(f"num_games must be positive, got {self.num_games}")
        if not 1 <= self.suite_size <= SUITE_SIZE:
            raise ValueError(f"suite_size must be in [1, {SUITE_SIZE}], got {self.suite_size}")
        if self.seed is None:
            self.seed = random.randint(0, 2**32 - 1)

    def game_rng(self, game_index: int) -> random.Random:
        """Rng for one game of a batch; replaying a game only needs its index."""
        assert self.seed is not None
        return random.Random(self.seed + game_index)
