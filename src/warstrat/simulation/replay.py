"""Read a game's per-round ledger back into cards."""

from __future__ import annotations

from warstrat.simulation.game import Game
from warstrat.simulation.state import Card, Tie


def held_at(game: Game, player: int, round_number: int) -> tuple[Card, ...]:
    """Cards ``player`` held after ``round_number`` rounds (0 is the deal)."""
    window = game.ledgers[player][round_number]
    history = game.hands[player].history
    return tuple(history[i] for i in window)


def won_cards(game: Game, player: int, round_number: int) -> tuple[Card, ...]:
    """Cards appended to ``player``'s hand by round ``round_number`` (1-based)."""
    if round_number < 1:
        raise IndexError("rounds are numbered from 1")
    ledger = game.ledgers[player]
    before, after = ledger[round_number - 1], ledger[round_number]
    history = game.hands[player].history
    return tuple(history[before.stop:after.stop])


def verify_ledger(game: Game) -> list[str]:
    """Check every ledger entry is a held window of its hand's history.

    Returns:
        List of problems found (empty if the ledger is consistent)
    """
    problems = []
    for player, (hand, ledger) in enumerate(zip(game.hands, game.ledgers)):
        size = len(hand.history)
        for n, window in enumerate(ledger):
            if window.step != 1 or not 0 <= window.start <= window.stop <= size:
                problems.append(f"seat {player} round {n}: {window} outside history of {size}")
        for n, (before, after) in enumerate(zip(ledger, ledger[1:]), start=1):
            if after.start < before.start or after.stop < before.stop:
                problems.append(f"seat {player} round {n}: window moved backwards")
        # A tie round pops cards without adding a ledger entry.
        if not isinstance(game.outcome, Tie) and ledger[-1] != hand.current_range():
            problems.append(f"seat {player}: last entry {ledger[-1]} is not the held window")
    return problems
