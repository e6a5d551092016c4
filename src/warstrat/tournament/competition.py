"""Run many War games between two strategies and tally the results.

Trials are independent: trial ``i`` deals with ``random.Random(seed + i)``
and owns its own Game, so a competition gives the same counts whether it
runs in one process or spread over a process pool.

Usage:
    config = CompetitionConfig(games=1000, seed=7, workers=4)
    result = compete(HighestFirst(), Shuffle(), config)
    result.counts  # GameCounts(wins=..., ties=..., losses=...)
"""

from __future__ import annotations

import logging
import os
import random
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from typing import List, Optional

from warstrat.simulation.state import Finish, Tie
from warstrat.simulation.strategies import Strategy
from warstrat.simulation.war import DEFAULT_MAX_STEPS, play_war_game

logger = logging.getLogger(__name__)


def _default_workers() -> int:
    return int(os.environ.get("WARSTRAT_WORKERS", 1))


@dataclass
class CompetitionConfig:
    """Configuration for a competition between two strategies."""

    games: int = 1
    seed: Optional[int] = None
    max_steps: int = DEFAULT_MAX_STEPS  # Rounds before a game counts as runaway
    face_down: int = 0  # Extra cards per tied player in a war
    workers: int = field(default_factory=_default_workers)
    batch_size: int = 1000  # Games per worker task

    def __post_init__(self):
        """Generate seed if not provided, and validate counts."""
        if self.seed is None:
            self.seed = random.randint(0, 2**32 - 1)
        if self.games < 0:
            raise ValueError(f"games must be non-negative, got {self.games}")
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
        if self.batch_size < 1:
            raise ValueError(f"batch_size must be at least 1, got {self.batch_size}")


@dataclass
class GameCounts:
    """Outcome tally from the first strategy's point of view."""

    wins: int = 0
    ties: int = 0
    losses: int = 0

    @property
    def total(self) -> int:
        return self.wins + self.ties + self.losses

    def __add__(self, other: "GameCounts") -> "GameCounts":
        return GameCounts(
            wins=self.wins + other.wins,
            ties=self.ties + other.ties,
            losses=self.losses + other.losses,
        )

    def to_dict(self) -> dict:
        return {"wins": self.wins, "ties": self.ties, "losses": self.losses}


@dataclass
class CompetitionResult:
    """Tally plus per-game lengths (in rounds), in trial order."""

    player: str
    against: str
    counts: GameCounts = field(default_factory=GameCounts)
    lengths: List[int] = field(default_factory=list)

    def merge(self, other: "CompetitionResult") -> None:
        self.counts = self.counts + other.counts
        self.lengths.extend(other.lengths)


# Top-level so it can be pickled for the process pool.
def _run_batch(
    player: Strategy,
    against: Strategy,
    seeds: range,
    max_steps: int,
    face_down: int,
) -> CompetitionResult:
    """Play one game per seed and tally them."""
    result = CompetitionResult(player=player.name, against=against.name)
    for seed in seeds:
        game = play_war_game(
            player,
            against,
            random.Random(seed),
            max_steps=max_steps,
            face_down=face_down,
        )
        if isinstance(game.outcome, Tie):
            result.counts.ties += 1
        elif isinstance(game.outcome, Finish) and game.outcome.player == 0:
            result.counts.wins += 1
        else:
            result.counts.losses += 1
        result.lengths.append(game.steps)
    return result


def compete(
    player: Strategy,
    against: Strategy,
    config: Optional[CompetitionConfig] = None,
) -> CompetitionResult:
    """Play ``config.games`` games of ``player`` (seat 0) against ``against``.

    Raises:
        StepLimitExceeded: If any game runs past config.max_steps. The whole
            competition is aborted; a runaway game is never counted.
    """
    config = config or CompetitionConfig()
    assert config.seed is not None

    first, last = config.seed, config.seed + config.games
    seed_batches = [
        range(start, min(start + config.batch_size, last))
        for start in range(first, last, config.batch_size)
    ]
    result = CompetitionResult(player=player.name, against=against.name)

    logger.info(
        f"{player.name} vs {against.name}: {config.games} games, "
        f"seed {config.seed}, {config.workers} worker(s)"
    )

    if config.workers == 1 or len(seed_batches) <= 1:
        for seeds in seed_batches:
            result.merge(_run_batch(player, against, seeds, config.max_steps, config.face_down))
            logger.debug(f"  {result.counts.total}/{config.games} games done")
        return result

    with ProcessPoolExecutor(max_workers=config.workers) as executor:
        futures = [
            executor.submit(_run_batch, player, against, seeds, config.max_steps, config.face_down)
            for seeds in seed_batches
        ]
        # Merge in submission order so lengths stay in trial order.
        for future in futures:
            result.merge(future.result())
            logger.debug(f"  {result.counts.total}/{config.games} games done")

    return result
