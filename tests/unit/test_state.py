"""Tests for outcomes and round records."""

import pytest
from warstrat.simulation.state import Continue, Finish, RoundRecord, Tie


def test_terminal_flags() -> None:
    assert not Continue().terminal
    assert Tie().terminal
    assert Finish(1).terminal


def test_outcomes_are_immutable() -> None:
    finish = Finish(0)
    with pytest.raises(AttributeError):
        finish.player = 1  # type: ignore


def test_round_record_str() -> None:
    record = RoundRecord(number=3, piles=((7, 9), (7, 3)), winner=0, wars=1)
    assert record.cards_laid == 4
    assert str(record) == "round 3: 7 9 | 7 3 -> seat 0 (1 war)"

    tie = RoundRecord(number=1, piles=((5,), ()), winner=None)
    assert str(tie) == "round 1: 5 | - -> tie"
