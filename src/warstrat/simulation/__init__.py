"""War game engine: hands, rounds, strategies."""

from warstrat.simulation.errors import GameOverError, SimulationError, StepLimitExceeded
from warstrat.simulation.game import Game, RoundTable
from warstrat.simulation.hand import OrderedHand
from warstrat.simulation.state import (
    NUM_PLAYERS,
    TOTAL_CARDS,
    Card,
    Continue,
    Finish,
    Outcome,
    RoundRecord,
    Tie,
    starting_deck,
)
from warstrat.simulation.strategies import (
    HighestFirst,
    Intersperse,
    LowestFirst,
    Shuffle,
    Strategy,
    parse_strategy,
)
from warstrat.simulation.war import GameResult, deal, play_war_game

__all__ = [
    "GameOverError",
    "SimulationError",
    "StepLimitExceeded",
    "Game",
    "RoundTable",
    "OrderedHand",
    "NUM_PLAYERS",
    "TOTAL_CARDS",
    "Card",
    "Continue",
    "Finish",
    "Outcome",
    "RoundRecord",
    "Tie",
    "starting_deck",
    "HighestFirst",
    "Intersperse",
    "LowestFirst",
    "Shuffle",
    "Strategy",
    "parse_strategy",
    "GameResult",
    "deal",
    "play_war_game",
]
