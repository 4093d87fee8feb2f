"""Aggregate statistics over many simulated games."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import List, Sequence

import numpy as np
from scipy import stats

from wardeck.analysis.outcomes import GameOutcome, GameRecord

MAX_KINGS = 4


@dataclass
class BatchStatistics:
    """Win/loss/draw tallies, round counts and king decisiveness."""

    games: int
    left_wins: int
    right_wins: int
    draws: int
    capped_games: int

    rounds_mean: float
    rounds_std: float
    rounds_median: float
    rounds_min: int
    rounds_max: int

    # Decisive games where the players started with different king counts
    king_decided_games: int
    more_kings_wins: int
    king_decisiveness: float        # Share of those won by the player with more kings
    king_decisiveness_pvalue: float  # Two-sided binomial test against 0.5

    # Left player's win rate by its initial king count (index 0..4)
    games_by_kings: List[int] = field(default_factory=list)
    win_rate_by_kings: List[float] = field(default_factory=list)

    @property
    def kings_are_decisive(self) -> bool:
        """True if holding more kings significantly improves the odds."""
        return self.king_decisiveness_pvalue < 0.05 and self.king_decisiveness > 0.5

    def to_dict(self) -> dict:
        return asdict(self)


def compute_statistics(records: Sequence[GameRecord]) -> BatchStatistics:
    """Summarize a batch of game records."""
    if not records:
        raise ValueError("Cannot compute statistics for an empty batch")

    outcomes = [r.outcome for r in records]
    rounds = np.array([r.rounds for r in records], dtype=np.int64)
    left_kings = np.array([r.left_kings for r in records], dtype=np.int64)
    right_kings = np.array([r.right_kings for r in records], dtype=np.int64)
    left_won = np.array([o is GameOutcome.LEFT_WINS for o in outcomes])
    right_won = np.array([o is GameOutcome.RIGHT_WINS for o in outcomes])

    decisive = (left_won | right_won) & (left_kings != right_kings)
    left_has_more = left_kings > right_kings
    more_kings_won = decisive & ((left_has_more & left_won) | (~left_has_more & right_won))

    king_decided_games = int(decisive.sum())
    more_kings_wins = int(more_kings_won.sum())
    if king_decided_games:
        king_decisiveness = more_kings_wins / king_decided_games
        pvalue = float(stats.binomtest(more_kings_wins, king_decided_games, p=0.5).pvalue)
    else:
        king_decisiveness = 0.0
        pvalue = 1.0

    games_by_kings = np.bincount(left_kings, minlength=MAX_KINGS + 1)
    wins_by_kings = np.bincount(left_kings, weights=left_won.astype(float), minlength=MAX_KINGS + 1)
    win_rate_by_kings = [
        float(wins / games) if games else 0.0
        for wins, games in zip(wins_by_kings, games_by_kings)
    ]

    return BatchStatistics(
        games=len(records),
        left_wins=int(left_won.sum()),
        right_wins=int(right_won.sum()),
        draws=sum(1 for o in outcomes if o is GameOutcome.DRAW),
        capped_games=sum(1 for r in records if r.capped),
        rounds_mean=float(np.mean(rounds)),
        rounds_std=float(np.std(rounds)),
        rounds_median=float(np.median(rounds)),
        rounds_min=int(np.min(rounds)),
        rounds_max=int(np.max(rounds)),
        king_decided_games=king_decided_games,
        more_kings_wins=more_kings_wins,
        king_decisiveness=king_decisiveness,
        king_decisiveness_pvalue=pvalue,
        games_by_kings=[int(g) for g in games_by_kings],
        win_rate_by_kings=win_rate_by_kings,
    )
