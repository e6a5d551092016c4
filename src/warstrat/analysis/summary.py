"""Summary statistics for a competition result."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
from scipy import stats

from warstrat.tournament.competition import CompetitionResult


@dataclass(frozen=True)
class MatchupSummary:
    """Rates, game-length statistics and significance for one matchup."""

    player: str
    against: str
    games: int
    win_rate: float
    tie_rate: float
    loss_rate: float

    mean_length: float
    median_length: float
    max_length: int

    # Two-sided binomial test of wins vs losses (ties excluded).
    # None when no game was decisive.
    pvalue: Optional[float]

    @property
    def significant(self) -> bool:
        """True if one strategy beats the other at the 5% level."""
        return self.pvalue is not None and self.pvalue < 0.05

    def to_dict(self) -> dict:
        return {
            "player": self.player,
            "against": self.against,
            "games": self.games,
            "win_rate": self.win_rate,
            "tie_rate": self.tie_rate,
            "loss_rate": self.loss_rate,
            "mean_length": self.mean_length,
            "median_length": self.median_length,
            "max_length": self.max_length,
            "pvalue": self.pvalue,
        }


def summarize(result: CompetitionResult) -> MatchupSummary:
    counts = result.counts
    total = counts.total

    if result.lengths:
        lengths = np.asarray(result.lengths)
        mean_length = float(np.mean(lengths))
        median_length = float(np.median(lengths))
        max_length = int(np.max(lengths))
    else:
        mean_length = median_length = 0.0
        max_length = 0

    decisive = counts.wins + counts.losses
    pvalue = None
    if decisive:
        pvalue = float(stats.binomtest(counts.wins, decisive, p=0.5).pvalue)

    return MatchupSummary(
        player=result.player,
        against=result.against,
        games=total,
        win_rate=counts.wins / total if total else 0.0,
        tie_rate=counts.ties / total if total else 0.0,
        loss_rate=counts.losses / total if total else 0.0,
        mean_length=mean_length,
        median_length=median_length,
        max_length=max_length,
        pvalue=pvalue,
    )


def format_summary(summary: MatchupSummary) -> str:
    """One-line human readable summary."""
    line = (
        f"{summary.player} vs {summary.against}: "
        f"{summary.win_rate:.1%} win / {summary.tie_rate:.1%} tie / {summary.loss_rate:.1%} loss "
        f"over {summary.games} games, mean length {summary.mean_length:.1f} rounds"
    )
    if summary.pvalue is not None and summary.games > 1:
        line += f" (p={summary.pvalue:.4f})"
    return line
