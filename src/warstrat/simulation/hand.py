"""Append-only hand with a trailing held window."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from warstrat.simulation.state import Card


class OrderedHand:
    """A queue of cards that never forgets what it held.

    Cards are kept in an append-only history list. The cards currently held
    are the last ``len(self)`` entries of that history: playing a card
    shrinks the window from its oldest end, receiving a card appends to the
    history and grows the window at its newest end.

    Usage:
        hand = OrderedHand([13, 7])
        hand.pop()       # 13
        hand.push(2)
        hand.held()      # (7, 2)
        hand.history     # (13, 7, 2)
    """

    __slots__ = ("_history", "_held")

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._history: list[Card] = list(cards)
        self._held = len(self._history)

    @property
    def history(self) -> tuple[Card, ...]:
        """Every card this hand has ever held, in arrival order."""
        return tuple(self._history)

    def push(self, card: Card) -> None:
        self._history.append(card)
        self._held += 1

    def pop(self) -> Optional[Card]:
        """Play the oldest held card, or return None if the hand is empty."""
        if self._held == 0:
            return None
        card = self._history[self._start()]
        self._held -= 1
        return card

    def current_range(self) -> range:
        """History positions currently held."""
        return range(self._start(), len(self._history))

    def held(self) -> tuple[Card, ...]:
        return tuple(self._history[self._start():])

    def _start(self) -> int:
        return len(self._history) - self._held

    def __len__(self) -> int:
        return self._held

    def __getitem__(self, idx: int) -> Card:
        if not 0 <= idx < self._held:
            raise IndexError(f"hand index {idx} outside held window of {self._held}")
        return self._history[self._start() + idx]

    def __iter__(self) -> Iterator[Card]:
        return iter(self.held())

    def __repr__(self) -> str:
        return f"OrderedHand(held={list(self.held())}, history={len(self._history)})"
