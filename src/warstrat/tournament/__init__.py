"""Strategy-versus-strategy competitions."""

from warstrat.tournament.competition import (
    CompetitionConfig,
    CompetitionResult,
    GameCounts,
    compete,
)
from warstrat.tournament.matchups import DEFAULT_MATCHUPS, run_matchups

__all__ = [
    "CompetitionConfig",
    "CompetitionResult",
    "GameCounts",
    "compete",
    "DEFAULT_MATCHUPS",
    "run_matchups",
]
