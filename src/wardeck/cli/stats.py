# src/wardeck/cli/stats.py
"""CLI command for simulating many games and summarizing the results."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from wardeck.analysis.outcomes import simulate_games
from wardeck.analysis.report import print_summary, save_json
from wardeck.analysis.statistics import compute_statistics
from wardeck.simulation.config import SimulationConfig
from wardeck.simulation.war import DEFAULT_MAX_ROUNDS


@click.command()
@click.option("-n", "--games", type=click.IntRange(min=1), default=1000,
              show_default=True, help="Number of games to simulate")
@click.option("--seed", type=int, default=None, help="Random seed (generated if omitted)")
@click.option("--max-rounds", type=click.IntRange(min=1), default=DEFAULT_MAX_ROUNDS,
              show_default=True, help="Safety cap on rounds per game")
@click.option("-o", "--output", type=click.Path(dir_okay=False), default=None,
              help="Save statistics and per-game records as JSON")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
def main(games: int, seed: int | None, max_rounds: int, output: str | None, verbose: bool):
    """Simulate many games of War and report win rates and king decisiveness."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)

    config = SimulationConfig(max_rounds=max_rounds, num_games=games, seed=seed)
    click.echo(f"Simulating {config.num_games} games (seed={config.seed})...")

    records = simulate_games(config)
    stats = compute_statistics(records)
    print_summary(stats, seed=config.seed)

    if output:
        out_path = Path(output)
        save_json(stats, records, out_path, seed=config.seed)
        click.echo(f"Saved to {out_path}")


if __name__ == "__main__":
    main()
