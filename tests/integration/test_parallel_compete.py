"""Integration tests for running competitions over a process pool."""

from warstrat.simulation.strategies import HighestFirst, Intersperse, LowestFirst, Shuffle
from warstrat.tournament.competition import CompetitionConfig, compete
from warstrat.tournament.matchups import DEFAULT_MATCHUPS, run_matchups


def test_parallel_matches_serial() -> None:
    """Worker count never changes the result: each trial owns its seed."""
    player = Intersperse(HighestFirst(), LowestFirst())

    serial = compete(player, Shuffle(), CompetitionConfig(games=40, seed=123, workers=1, batch_size=10))
    parallel = compete(player, Shuffle(), CompetitionConfig(games=40, seed=123, workers=2, batch_size=10))

    assert parallel.counts == serial.counts
    assert parallel.lengths == serial.lengths


def test_run_matchups_uses_own_game_counts() -> None:
    config = CompetitionConfig(games=3, seed=0)
    results = run_matchups(config, [("highest", "highest", None), ("lowest", "lowest", 2)])

    assert [r.counts.ties for r in results] == [3, 2]
    assert results[1].player == "lowest"


def test_default_matchups_parse() -> None:
    """Every standard matchup names valid strategies."""
    from warstrat.simulation.strategies import parse_strategy

    for player, against, games in DEFAULT_MATCHUPS:
        assert parse_strategy(player).name == player
        assert parse_strategy(against).name == against
        assert games is None or games == 1
