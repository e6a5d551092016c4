"""Tests for War round resolution."""

import pytest
from warstrat.simulation.errors import GameOverError
from warstrat.simulation.game import Game, RoundTable
from warstrat.simulation.state import Continue, Finish, Tie, starting_deck


def descending_vs_ascending() -> Game:
    """Seat 0 sorted high-to-low, seat 1 low-to-high."""
    return Game([sorted(starting_deck(), reverse=True), starting_deck()])


class TestConstruction:
    """Tests for Game setup."""

    def test_requires_two_hands(self) -> None:
        """Only two-player games are supported."""
        with pytest.raises(ValueError):
            Game([[1, 2]])
        with pytest.raises(ValueError):
            Game([[1], [2], [3]])

    def test_rejects_negative_face_down(self) -> None:
        """face_down counts cards, so it cannot be negative."""
        with pytest.raises(ValueError):
            Game([[1], [2]], face_down=-1)

    def test_ledger_starts_with_dealt_window(self) -> None:
        """Each ledger opens with the window held at the deal."""
        game = descending_vs_ascending()
        assert game.ledgers == [[range(0, 26)], [range(0, 26)]]
        assert game.rounds == 0
        assert game.outcome is None


class TestSimpleRounds:
    """Tests for rounds without a war."""

    def test_first_round_descending_beats_ascending(self) -> None:
        """13 beats 1 and the winner collects both cards."""
        game = descending_vs_ascending()

        outcome = game.step()

        assert outcome == Continue()
        assert len(game.hands[0]) == 27
        assert len(game.hands[1]) == 25
        assert game.records[0].piles == ((13,), (1,))
        assert game.records[0].winner == 0

    def test_winner_collects_from_next_seat_first(self) -> None:
        """Distribution starts at the seat after the winner and ends with the winner's pile."""
        game = descending_vs_ascending()
        game.step()
        assert game.hands[0].history[-2:] == (1, 13)

        game = Game([[2, 5], [9, 5]])
        game.step()
        # Seat 1 wins: seat 0's pile (after wrapping) comes first.
        assert game.hands[1].held() == (5, 2, 9)

    def test_ledger_gains_one_entry_per_round(self) -> None:
        """Every resolved round snapshots each hand's held window."""
        game = descending_vs_ascending()
        game.step()
        assert game.ledgers[0] == [range(0, 26), range(1, 28)]
        assert game.ledgers[1] == [range(0, 26), range(1, 26)]

    def test_finish_when_one_hand_left(self) -> None:
        """Finish names the only player still holding cards."""
        game = Game([[13], [1]])
        assert game.step() == Finish(0)
        assert game.finished
        assert game.hands[0].held() == (1, 13)
        assert len(game.hands[1]) == 0

    def test_empty_starting_hand_loses_immediately(self) -> None:
        """A seat with no cards sits the round out and the other takes it."""
        game = Game([[], [3]])
        assert game.step() == Finish(1)
        assert game.hands[1].held() == (3,)

    def test_step_after_finish_raises(self) -> None:
        """No further steps are valid after a terminal result."""
        game = Game([[13], [1]])
        game.step()
        with pytest.raises(GameOverError):
            game.step()


class TestWar:
    """Tests for the sacrifice chain on tied cards."""

    def test_tie_lays_one_more_card_each(self) -> None:
        """Tied 7s: the next card from each hand decides, winner takes all 4."""
        game = Game([[7, 9, 1], [7, 3, 2]])

        outcome = game.step()

        assert outcome == Continue()
        record = game.records[0]
        assert record.piles == ((7, 9), (7, 3))
        assert record.winner == 0
        assert record.wars == 1
        assert game.hands[0].held() == (1, 7, 3, 7, 9)
        assert game.hands[1].held() == (2,)

    def test_face_down_cards_join_the_pot(self) -> None:
        """With face_down=1 each tied player buries a card before comparing again."""
        game = Game([[7, 5, 9, 1], [7, 6, 3, 2]], face_down=1)

        game.step()

        assert game.records[0].piles == ((7, 5, 9), (7, 6, 3))
        assert game.hands[0].held() == (1, 7, 6, 3, 7, 5, 9)
        assert game.hands[1].held() == (2,)

    def test_chained_wars(self) -> None:
        """Repeated ties keep laying cards until one card is highest."""
        game = Game([[4, 4, 10, 1], [4, 4, 8, 2]])
        game.step()
        record = game.records[0]
        assert record.wars == 2
        assert record.piles == ((4, 4, 10), (4, 4, 8))
        assert len(game.hands[0]) == 7
        assert len(game.hands[1]) == 1

    def test_running_out_mid_war_forfeits_the_pot(self) -> None:
        """A player who cannot lay another card drops out; their cards still go to the winner."""
        game = Game([[5], [5, 2]])

        assert game.step() == Finish(1)
        assert game.hands[1].held() == (5, 5, 2)
        assert len(game.hands[0]) == 0

    def test_tie_when_everyone_runs_out(self) -> None:
        """Tie only when no contesting player has a card left to lay."""
        game = Game([[5], [5]])

        assert game.step() == Tie()
        assert game.cards_held() == 0
        assert game.cards_on_table == 2
        assert game.records[-1].winner is None

    def test_identical_hands_tie_in_one_round(self) -> None:
        """Two identically ordered decks war all the way down."""
        deck = sorted(starting_deck(), reverse=True)
        game = Game([deck, list(deck)])

        assert game.step() == Tie()
        assert game.rounds == 1
        assert game.cards_on_table == 52
        # The tie round adds no ledger entry.
        assert len(game.ledgers[0]) == 1


class TestRoundTable:
    """Tests for the per-round table."""

    def test_contenders_skip_seats_out(self) -> None:
        table = RoundTable.fresh(2)
        table.piles[0].append(9)
        table.in_play[1] = False
        assert table.contenders() == [(0, 9)]

    def test_restrict_to_keeps_only_tied_seats(self) -> None:
        table = RoundTable.fresh(3)
        table.restrict_to([0, 2])
        assert table.in_play == [True, False, True]
