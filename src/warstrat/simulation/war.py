"""Play single War games between two strategies."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional

from warstrat.simulation.errors import StepLimitExceeded
from warstrat.simulation.game import Game
from warstrat.simulation.state import Card, Finish, Outcome, starting_deck
from warstrat.simulation.strategies import Strategy

logger = logging.getLogger(__name__)

DEFAULT_MAX_STEPS = 100_000


@dataclass(frozen=True)
class GameResult:
    """Result of one simulated game."""

    outcome: Outcome
    steps: int

    @property
    def winner(self) -> Optional[int]:
        """Winning seat, or None for a tie."""
        return self.outcome.player if isinstance(self.outcome, Finish) else None


def deal(
    player: Strategy,
    against: Strategy,
    rng: random.Random,
) -> tuple[list[Card], list[Card]]:
    """Order a fresh starting hand for each strategy, player first."""
    player_hand = starting_deck()
    against_hand = starting_deck()
    player.order_cards(player_hand, rng)
    against.order_cards(against_hand, rng)
    return player_hand, against_hand


def play_war_game(
    player: Strategy,
    against: Strategy,
    rng: random.Random,
    max_steps: int = DEFAULT_MAX_STEPS,
    face_down: int = 0,
    record_rounds: bool = False,
) -> GameResult:
    """Play a complete War game, ``player`` in seat 0.

    Args:
        player: Strategy ordering seat 0's hand
        against: Strategy ordering seat 1's hand
        rng: Randomness handed to both strategies
        max_steps: Rounds allowed before the game counts as runaway
        face_down: Extra cards laid by each tied player in a war
        record_rounds: Keep per-round records on the game

    Raises:
        StepLimitExceeded: If the game is still going after max_steps rounds
    """
    game = Game(deal(player, against, rng), face_down=face_down, record_rounds=record_rounds)

    while True:
        outcome = game.step()
        if outcome.terminal:
            return GameResult(outcome=outcome, steps=game.rounds)
        if game.rounds > max_steps:
            logger.error(f"{player.name} vs {against.name} did not finish in {max_steps} steps")
            raise StepLimitExceeded(game.rounds, max_steps)
