"""Card-ordering strategies.

A strategy decides the order a hand is dealt in before the game starts.
Anything with an ``order_cards(cards, rng)`` method that reorders ``cards``
in place is a strategy; the game engine calls it once per hand and never
again.
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from typing import ClassVar, List, Protocol, runtime_checkable

from warstrat.simulation.state import Card


@runtime_checkable
class Strategy(Protocol):
    """Reorders a hand in place. ``rng`` may be ignored."""

    name: str

    def order_cards(self, cards: List[Card], rng: random.Random) -> None:
        ...


@dataclass(frozen=True)
class LowestFirst:
    """Play the lowest cards first."""

    name: ClassVar[str] = "lowest"

    def order_cards(self, cards: List[Card], rng: random.Random) -> None:
        cards.sort()


@dataclass(frozen=True)
class HighestFirst:
    """Play the highest cards first."""

    name: ClassVar[str] = "highest"

    def order_cards(self, cards: List[Card], rng: random.Random) -> None:
        cards.sort(reverse=True)


@dataclass(frozen=True)
class Shuffle:
    """Uniformly random order."""

    name: ClassVar[str] = "random"

    def order_cards(self, cards: List[Card], rng: random.Random) -> None:
        rng.shuffle(cards)


@dataclass(frozen=True)
class Intersperse:
    """Order even and odd positions independently, then interleave them.

    The cards at even indices are ordered by ``evens`` and the cards at odd
    indices by ``odds``; each group is written back into its own slots, so a
    hand played from the front alternates between the two orderings. The
    two inner strategies share ``rng``, evens first.
    """

    evens: Strategy
    odds: Strategy

    @property
    def name(self) -> str:
        return f"intersperse({self.evens.name},{self.odds.name})"

    def order_cards(self, cards: List[Card], rng: random.Random) -> None:
        evens = cards[0::2]
        odds = cards[1::2]
        self.evens.order_cards(evens, rng)
        self.odds.order_cards(odds, rng)
        cards[0::2] = evens
        cards[1::2] = odds


STRATEGIES = {
    "lowest": LowestFirst,
    "highest": HighestFirst,
    "random": Shuffle,
    "shuffle": Shuffle,
}

_TOKEN = re.compile(r"\s*([A-Za-z_-]+|\(|\)|,)")


def parse_strategy(text: str) -> Strategy:
    """Build a strategy from its textual name.

    Examples: ``highest``, ``random``, ``intersperse(highest,lowest)``,
    ``intersperse(lowest, intersperse(random, highest))``.

    Raises:
        ValueError: If the text is not a known strategy expression
    """
    tokens = _tokenize(text)
    strategy, pos = _parse(tokens, 0, text)
    if pos != len(tokens):
        raise ValueError(f"Unexpected '{tokens[pos]}' in strategy '{text}'")
    return strategy


def _tokenize(text: str) -> list[str]:
    tokens = []
    pos = 0
    stripped = text.rstrip()
    while pos < len(stripped):
        match = _TOKEN.match(stripped, pos)
        if match is None:
            raise ValueError(f"Invalid strategy '{text}' at position {pos}")
        tokens.append(match.group(1).lower())
        pos = match.end()
    if not tokens:
        raise ValueError("Empty strategy name")
    return tokens


def _parse(tokens: list[str], pos: int, text: str) -> tuple[Strategy, int]:
    if pos >= len(tokens):
        raise ValueError(f"Strategy '{text}' ends unexpectedly")
    token = tokens[pos]
    if token == "intersperse":
        _expect(tokens, pos + 1, "(", text)
        evens, pos = _parse(tokens, pos + 2, text)
        _expect(tokens, pos, ",", text)
        odds, pos = _parse(tokens, pos + 1, text)
        _expect(tokens, pos, ")", text)
        return Intersperse(evens, odds), pos + 1
    if token in STRATEGIES:
        return STRATEGIES[token](), pos + 1
    known = ", ".join(sorted(STRATEGIES) + ["intersperse(a,b)"])
    raise ValueError(f"Unknown strategy '{token}' (known: {known})")


def _expect(tokens: list[str], pos: int, expected: str, text: str) -> None:
    if pos >= len(tokens) or tokens[pos] != expected:
        raise ValueError(f"Expected '{expected}' in strategy '{text}'")
