"""Statistics over competition results."""

from warstrat.analysis.summary import MatchupSummary, format_summary, summarize

__all__ = [
    "MatchupSummary",
    "format_summary",
    "summarize",
]
