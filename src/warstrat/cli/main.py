"""Command line interface for War strategy competitions."""

from __future__ import annotations

import json
import logging
import random
import sys

import click

from warstrat.analysis.summary import format_summary, summarize
from warstrat.simulation.errors import StepLimitExceeded
from warstrat.simulation.game import Game
from warstrat.simulation.strategies import Strategy, parse_strategy
from warstrat.simulation.war import DEFAULT_MAX_STEPS, deal
from warstrat.tournament.competition import CompetitionConfig, compete
from warstrat.tournament.matchups import run_matchups

logger = logging.getLogger(__name__)


class StrategyType(click.ParamType):
    """Click parameter parsed with parse_strategy."""

    name = "strategy"

    def convert(self, value, param, ctx) -> Strategy:
        if not isinstance(value, str):
            return value
        try:
            return parse_strategy(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


STRATEGY = StrategyType()


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration.

    Args:
        verbose: Enable verbose (DEBUG) logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)


def _common_options(func):
    func = click.option("-v", "--verbose", is_flag=True, help="Verbose logging")(func)
    func = click.option(
        "--face-down",
        type=click.IntRange(min=0),
        default=0,
        show_default=True,
        help="Extra cards each tied player lays before the next comparison",
    )(func)
    func = click.option(
        "--max-steps",
        type=click.IntRange(min=1),
        default=DEFAULT_MAX_STEPS,
        show_default=True,
        help="Rounds per game before it is treated as runaway",
    )(func)
    func = click.option("--seed", type=int, default=None, help="Random seed for reproducibility")(func)
    return func


@click.group()
def main():
    """Pit card-ordering strategies against each other at War."""


@main.command("compete")
@click.argument("player", type=STRATEGY)
@click.argument("against", type=STRATEGY)
@click.option("-n", "--games", type=click.IntRange(min=0), default=1000, show_default=True)
@click.option("-w", "--workers", type=click.IntRange(min=1), default=None, help="Worker processes")
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON")
@_common_options
def compete_cmd(
    player: Strategy,
    against: Strategy,
    games: int,
    workers: int | None,
    as_json: bool,
    seed: int | None,
    max_steps: int,
    face_down: int,
    verbose: bool,
):
    """Play PLAYER against AGAINST and tally wins, ties and losses.

    Strategies: highest, lowest, random, intersperse(A,B).
    """
    setup_logging(verbose)
    config = CompetitionConfig(games=games, seed=seed, max_steps=max_steps, face_down=face_down)
    if workers is not None:
        config.workers = workers

    try:
        result = compete(player, against, config)
    except StepLimitExceeded as e:
        click.echo(f"Aborted: {e}", err=True)
        sys.exit(1)

    summary = summarize(result)
    if as_json:
        payload = {"seed": config.seed, "counts": result.counts.to_dict(), **summary.to_dict()}
        click.echo(json.dumps(payload, indent=2))
    else:
        counts = result.counts
        click.echo(f"wins={counts.wins} ties={counts.ties} losses={counts.losses}")
        click.echo(format_summary(summary))


@main.command("matchups")
@click.option("-n", "--games", type=click.IntRange(min=0), default=100_000, show_default=True,
              help="Games for each matchup involving a random ordering")
@click.option("-w", "--workers", type=click.IntRange(min=1), default=None, help="Worker processes")
@_common_options
def matchups_cmd(
    games: int,
    workers: int | None,
    seed: int | None,
    max_steps: int,
    face_down: int,
    verbose: bool,
):
    """Run the standard list of matchups."""
    setup_logging(verbose)
    config = CompetitionConfig(games=games, seed=seed, max_steps=max_steps, face_down=face_down)
    if workers is not None:
        config.workers = workers

    try:
        results = run_matchups(config)
    except StepLimitExceeded as e:
        click.echo(f"Aborted: {e}", err=True)
        sys.exit(1)

    for result in results:
        counts = result.counts
        click.echo(
            f"{result.player} vs {result.against}: "
            f"wins={counts.wins} ties={counts.ties} losses={counts.losses}"
        )


@main.command("trace")
@click.argument("player", type=STRATEGY)
@click.argument("against", type=STRATEGY)
@click.option("--rounds", "max_rounds", type=click.IntRange(min=1), default=None,
              help="Only print the first N rounds")
@_common_options
def trace_cmd(
    player: Strategy,
    against: Strategy,
    max_rounds: int | None,
    seed: int | None,
    max_steps: int,
    face_down: int,
    verbose: bool,
):
    """Play one game and print it round by round."""
    setup_logging(verbose)
    if seed is None:
        seed = random.randint(0, 2**32 - 1)

    game = Game(deal(player, against, random.Random(seed)), face_down=face_down)
    click.echo(f"{player.name} (seat 0) vs {against.name} (seat 1), seed {seed}")
    click.echo(f"seat 0: {' '.join(map(str, game.hands[0]))}")
    click.echo(f"seat 1: {' '.join(map(str, game.hands[1]))}")

    while not game.finished:
        game.step()
        if max_rounds is None or game.rounds <= max_rounds:
            click.echo(str(game.records[-1]))
        if not game.finished and game.rounds > max_steps:
            click.echo(f"Aborted: {StepLimitExceeded(game.rounds, max_steps)}", err=True)
            sys.exit(1)

    click.echo(f"result: {game.outcome} after {game.rounds} rounds")


if __name__ == "__main__":
    main()
