"""Cards, outcomes and round records for War simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

# Rank only matters for War, so a card is just its rank.
Card = int

MIN_RANK = 1
MAX_RANK = 13
COPIES_PER_RANK = 2
NUM_PLAYERS = 2
HAND_SIZE = (MAX_RANK - MIN_RANK + 1) * COPIES_PER_RANK
TOTAL_CARDS = HAND_SIZE * NUM_PLAYERS


def starting_deck() -> list[Card]:
    """Return a fresh, unordered starting hand: two of each rank, ascending."""
    return [rank for rank in range(MIN_RANK, MAX_RANK + 1) for _ in range(COPIES_PER_RANK)]


@dataclass(frozen=True)
class Continue:
    """Round resolved, game goes on."""

    @property
    def terminal(self) -> bool:
        return False


@dataclass(frozen=True)
class Tie:
    """Every contesting hand ran out at once."""

    @property
    def terminal(self) -> bool:
        return True


@dataclass(frozen=True)
class Finish:
    """Exactly one player still holds cards."""

    player: int

    @property
    def terminal(self) -> bool:
        return True


Outcome = Union[Continue, Tie, Finish]


@dataclass(frozen=True)
class RoundRecord:
    """Immutable audit record of one resolved round.

    piles[i] holds the cards seat i laid face up this round, oldest first.
    winner is None for the round that ended the game in a Tie.
    """

    number: int
    piles: tuple[tuple[Card, ...], ...]
    winner: Optional[int]
    wars: int = 0

    @property
    def cards_laid(self) -> int:
        return sum(len(pile) for pile in self.piles)

    def __str__(self) -> str:
        laid = " | ".join(" ".join(str(c) for c in pile) or "-" for pile in self.piles)
        result = "tie" if self.winner is None else f"seat {self.winner}"
        war = f" ({self.wars} war{'s' if self.wars != 1 else ''})" if self.wars else ""
        return f"round {self.number}: {laid} -> {result}{war}"
