"""Output generation for game results (terminal and JSON)."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from wardeck.analysis.outcomes import GameOutcome, GameRecord
from wardeck.analysis.statistics import BatchStatistics
from wardeck.simulation.stacks import PlayerStacks

_OUTCOME_LABELS = {
    GameOutcome.LEFT_WINS: "Left player wins",
    GameOutcome.RIGHT_WINS: "Right player wins",
    GameOutcome.DRAW: "Draw",
}


def format_game(rounds: int, left: PlayerStacks, right: PlayerStacks) -> str:
    """Round count followed by both players' final stacks."""
    return "\n".join([
        f"Number of rounds = {rounds}",
        f"Left:  {left!r}",
        f"Right: {right!r}",
    ])


def format_outcome(outcome: GameOutcome, capped: bool = False) -> str:
    label = _OUTCOME_LABELS[outcome]
    if capped:
        label += " (round cap reached)"
    return label


def print_summary(stats: BatchStatistics, seed: Optional[int] = None) -> None:
    """Print human-readable batch statistics."""
    print("\n" + "=" * 50)
    print("War Simulation Report")
    print("=" * 50)

    if seed is not None:
        print(f"Seed: {seed}")
    print(f"Games: {stats.games}")

    print("\n--- Outcomes ---")
    print(f"  Left wins:  {stats.left_wins} ({stats.left_wins / stats.games:.1%})")
    print(f"  Right wins: {stats.right_wins} ({stats.right_wins / stats.games:.1%})")
    print(f"  Draws:      {stats.draws} ({stats.draws / stats.games:.1%})")
    if stats.capped_games:
        print(f"  Hit round cap: {stats.capped_games}")

    print("\n--- Rounds ---")
    print(f"  Mean: {stats.rounds_mean:.1f} +/- {stats.rounds_std:.1f}")
    print(f"  Median: {stats.rounds_median:.0f} (min {stats.rounds_min}, max {stats.rounds_max})")

    print("\n--- King Decisiveness ---")
    if stats.king_decided_games:
        print(
            f"  More kings won {stats.more_kings_wins}/{stats.king_decided_games} "
            f"games ({stats.king_decisiveness:.1%}), p = {stats.king_decisiveness_pvalue:.3g}"
        )
        if stats.kings_are_decisive:
            print("  Conclusion: starting with more kings IS an advantage")
        else:
            print("  Conclusion: no significant advantage from kings")
    else:
        print("  No decisive games with unequal king counts")

    print("  Left win rate by starting kings:")
    for kings, (games, rate) in enumerate(zip(stats.games_by_kings, stats.win_rate_by_kings)):
        if games:
            print(f"    {kings} kings: {rate:.1%} of {games} games")
    print()


def save_json(
    stats: BatchStatistics,
    records: Sequence[GameRecord],
    output_path: Path,
    seed: Optional[int] = None,
) -> None:
    """Save statistics and per-game records to a JSON file."""
    output = {
        "timestamp": datetime.now().isoformat(),
        "seed": seed,
        "statistics": stats.to_dict(),
        "games": [record.to_dict() for record in records],
    }

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(output, f, indent=2)
