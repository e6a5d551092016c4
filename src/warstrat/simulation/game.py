"""War round resolution."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from warstrat.simulation.errors import GameOverError
from warstrat.simulation.hand import OrderedHand
from warstrat.simulation.state import (
    NUM_PLAYERS,
    Card,
    Continue,
    Finish,
    Outcome,
    RoundRecord,
    Tie,
)

logger = logging.getLogger(__name__)


@dataclass
class RoundTable:
    """Cards laid face up during one round, and who is still contesting it."""

    in_play: List[bool]
    piles: List[List[Card]]

    @classmethod
    def fresh(cls, seats: int) -> "RoundTable":
        return cls(in_play=[True] * seats, piles=[[] for _ in range(seats)])

    def contenders(self) -> list[tuple[int, Card]]:
        """(seat, top card) for every seat still in, in seat order."""
        return [
            (seat, pile[-1])
            for seat, (still_in, pile) in enumerate(zip(self.in_play, self.piles))
            if still_in
        ]

    def restrict_to(self, seats: Iterable[int]) -> None:
        keep = set(seats)
        self.in_play = [still_in and seat in keep for seat, still_in in enumerate(self.in_play)]

    def cards_laid(self) -> int:
        return sum(len(pile) for pile in self.piles)


class Game:
    """A single game of War between NUM_PLAYERS pre-ordered hands.

    The game is the only thing that mutates its hands. Each ``step`` plays
    one full round, including any chain of wars, and reports whether the
    game goes on.

    Usage:
        game = Game([[13, 2], [1, 5]])
        while not game.step().terminal:
            pass
        game.outcome  # Finish(player=0)
    """

    def __init__(
        self,
        starting_hands: Sequence[Iterable[Card]],
        face_down: int = 0,
        record_rounds: bool = True,
    ) -> None:
        """Initialize game from hands already ordered by their strategies.

        Args:
            starting_hands: One card sequence per seat, front card first
            face_down: Extra cards each tied player lays before the next
                       comparison card of a war (0 compares the next card)
            record_rounds: Keep a RoundRecord for every round played
        """
        if len(starting_hands) != NUM_PLAYERS:
            raise ValueError(
                f"War is played with {NUM_PLAYERS} hands, got {len(starting_hands)}"
            )
        if face_down < 0:
            raise ValueError(f"face_down must be non-negative, got {face_down}")

        self.face_down = face_down
        self.record_rounds = record_rounds
        self.hands: List[OrderedHand] = [OrderedHand(cards) for cards in starting_hands]
        # ledgers[i][n] is the window hand i held after round n (entry 0: at deal)
        self.ledgers: List[List[range]] = [[hand.current_range()] for hand in self.hands]
        self.records: List[RoundRecord] = []
        self.rounds = 0
        self.outcome: Optional[Outcome] = None
        self.cards_on_table = 0

    @property
    def finished(self) -> bool:
        return self.outcome is not None

    def cards_held(self) -> int:
        return sum(len(hand) for hand in self.hands)

    def step(self) -> Outcome:
        """Play one round and return Continue, Tie or Finish(player).

        Raises:
            GameOverError: If the game already reached Tie or Finish.
        """
        if self.outcome is not None:
            raise GameOverError(f"Game already ended with {self.outcome}")

        table = RoundTable.fresh(len(self.hands))
        wars = 0
        while True:
            self._lay_cards(table)

            contenders = table.contenders()
            if not contenders:
                return self._end_in_tie(table, wars)

            best = max(card for _, card in contenders)
            tied = [seat for seat, card in contenders if card == best]
            if len(tied) == 1:
                winner = tied[0]
                break

            wars += 1
            logger.debug(f"War on {best} between seats {tied}")
            table.restrict_to(tied)
            for _ in range(self.face_down):
                self._lay_cards(table)

        self._distribute(table, winner)
        for hand, ledger in zip(self.hands, self.ledgers):
            ledger.append(hand.current_range())
        self._record(table, winner, wars)

        holding = [seat for seat, hand in enumerate(self.hands) if len(hand) > 0]
        if len(holding) > 1:
            return Continue()

        self.outcome = Finish(holding[0])
        logger.debug(f"Seat {holding[0]} wins after {self.rounds} rounds")
        return self.outcome

    def _lay_cards(self, table: RoundTable) -> None:
        """Every seat still in lays one card; an empty hand drops out of the round."""
        for seat, hand in enumerate(self.hands):
            if not table.in_play[seat]:
                continue
            card = hand.pop()
            if card is None:
                table.in_play[seat] = False
            else:
                table.piles[seat].append(card)

    def _distribute(self, table: RoundTable, winner: int) -> None:
        """Winner takes every pile, starting with the seat after it and ending with its own."""
        hand = self.hands[winner]
        seats = len(self.hands)
        for offset in range(1, seats + 1):
            for card in table.piles[(winner + offset) % seats]:
                hand.push(card)

    def _end_in_tie(self, table: RoundTable, wars: int) -> Outcome:
        self.cards_on_table = table.cards_laid()
        self._record(table, None, wars)
        self.outcome = Tie()
        logger.debug(f"Tie after {self.rounds} rounds, {self.cards_on_table} cards on the table")
        return self.outcome

    def _record(self, table: RoundTable, winner: Optional[int], wars: int) -> None:
        self.rounds += 1
        if self.record_rounds:
            self.records.append(RoundRecord(
                number=self.rounds,
                piles=tuple(tuple(pile) for pile in table.piles),
                winner=winner,
                wars=wars,
            ))
