# src/wardeck/cli/play.py
"""CLI command for playing a single game of War."""

from __future__ import annotations

import logging

import click

from wardeck.analysis.outcomes import classify_outcome
from wardeck.analysis.report import format_game, format_outcome
from wardeck.simulation.config import SimulationConfig
from wardeck.simulation.deck import create_stacks
from wardeck.simulation.state import SUITE_SIZE
from wardeck.simulation.war import DEFAULT_MAX_ROUNDS, play_game

logger = logging.getLogger(__name__)


@click.command()
@click.option("--seed", type=int, default=None, help="Random seed (generated if omitted)")
@click.option("--max-rounds", type=click.IntRange(min=1), default=DEFAULT_MAX_ROUNDS,
              show_default=True, help="Safety cap on rounds")
@click.option("--suite-size", type=click.IntRange(1, SUITE_SIZE), default=SUITE_SIZE,
              show_default=True, help="Cards per suit")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
def main(seed: int | None, max_rounds: int, suite_size: int, verbose: bool):
    """Play one game of War and print the final stacks."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)

    config = SimulationConfig(max_rounds=max_rounds, suite_size=suite_size, num_games=1, seed=seed)
    logger.debug(f"Playing with seed {config.seed}")

    left, right = create_stacks(config.suite_size, config.game_rng(0))
    rounds = play_game(left, right, max_rounds=config.max_rounds)
    capped = not left.is_empty() and not right.is_empty()

    click.echo(format_game(rounds, left, right))
    click.echo(f"Result: {format_outcome(classify_outcome(left, right), capped)}")
    click.echo(f"Seed: {config.seed}")


if __name__ == "__main__":
    main()
