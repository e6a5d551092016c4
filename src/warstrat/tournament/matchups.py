"""Standard matchup list and batch runner."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, List, Optional, Tuple

from warstrat.simulation.strategies import parse_strategy
from warstrat.tournament.competition import CompetitionConfig, CompetitionResult, compete

logger = logging.getLogger(__name__)

# (player, against, games). None means "use the configured game count".
DEFAULT_MATCHUPS: List[Tuple[str, str, Optional[int]]] = [
    # Deterministic orderings: one game says it all.
    ("highest", "highest", 1),
    ("highest", "lowest", 1),
    ("intersperse(highest,lowest)", "highest", 1),
    ("intersperse(highest,lowest)", "lowest", 1),
    ("intersperse(lowest,highest)", "highest", 1),
    ("intersperse(lowest,highest)", "lowest", 1),
    ("intersperse(lowest,highest)", "intersperse(highest,lowest)", 1),
    # Against a shuffled deck.
    ("intersperse(highest,lowest)", "random", None),
    ("intersperse(lowest,highest)", "random", None),
    ("highest", "random", None),
    ("lowest", "random", None),
    ("random", "random", None),
]


def run_matchups(
    config: CompetitionConfig,
    matchups: Iterable[Tuple[str, str, Optional[int]]] = DEFAULT_MATCHUPS,
) -> List[CompetitionResult]:
    """Run each matchup in order.

    Args:
        config: Base configuration; a matchup's own game count overrides
                config.games
        matchups: (player, against, games) triples of strategy names

    Returns:
        One CompetitionResult per matchup, in the same order
    """
    results = []
    for player_name, against_name, games in matchups:
        player = parse_strategy(player_name)
        against = parse_strategy(against_name)
        matchup_config = config if games is None else replace(config, games=games)
        results.append(compete(player, against, matchup_config))
    logger.info(f"Ran {len(results)} matchups")
    return results
