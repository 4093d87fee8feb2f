"""Outcome classification, statistics and reporting for simulated games."""

from wardeck.analysis.outcomes import (
    GameOutcome,
    GameRecord,
    classify_outcome,
    count_kings,
    simulate_game,
    simulate_games,
)
from wardeck.analysis.statistics import (
    BatchStatistics,
    compute_statistics,
)
from wardeck.analysis.report import (
    format_game,
    format_outcome,
    print_summary,
    save_json,
)

__all__ = [
    # Outcomes
    "GameOutcome",
    "GameRecord",
    "classify_outcome",
    "count_kings",
    "simulate_game",
    "simulate_games",
    # Statistics
    "BatchStatistics",
    "compute_statistics",
    # Reporting
    "format_game",
    "format_outcome",
    "print_summary",
    "save_json",
]
