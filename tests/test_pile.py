"""Tests for pile models."""

import pytest

from esp_solitaire.models.card import create_full_deck, parse_card
from esp_solitaire.models.game_state import GameState
from esp_solitaire.models.pile import PileKind, PileSet


def card(text):
    color = {"R": "RED", "B": "BLACK"}[text[0]]
    return parse_card(color, text[1:])


def cards(*texts):
    return [card(t) for t in texts]


@pytest.fixture
def piles():
    return PileSet([
        cards("R3", "B9", "RK"),
        cards("BK", "RQ", "BJ"),
        [],
        cards("B8"),
        cards("R7", "B6"),
        cards("RA"),
        [],
    ])


class TestPile:
    """Tests for a single pile."""

    def test_kinds(self, piles):
        assert [p.kind for p in piles] == [PileKind.TABLEAU] * 5 + [PileKind.DEPOSIT] * 2
        assert piles[0].is_concealed
        assert not piles[1].is_concealed
        assert piles[5].is_deposit

    def test_top_and_bottom(self, piles):
        assert piles.top(1) == card("BK")
        assert piles.bottom(1) == card("BJ")
        assert piles.top(2) is None
        assert piles.bottom(2) is None

    def test_single_card_is_top_and_bottom(self, piles):
        assert piles.top(3) == piles.bottom(3) == card("B8")

    def test_is_exposed(self, piles):
        assert piles[1].is_exposed(card("BJ"))
        assert not piles[1].is_exposed(card("RQ"))

    def test_face_down_only_in_concealed_pile(self, piles):
        assert piles[0].is_face_down(0)
        assert piles[0].is_face_down(1)
        assert not piles[0].is_face_down(2)
        assert not piles[1].is_face_down(0)


class TestPileSet:
    """Tests for the seven-pile table."""

    def test_always_seven_piles(self):
        assert len(list(PileSet())) == 7

    def test_too_many_piles(self):
        with pytest.raises(ValueError):
            PileSet([[]] * 8)

    def test_locate(self, piles):
        assert piles.locate(card("RK")) == 0
        assert piles.locate(card("RQ")) == 1
        assert piles.locate(card("RA")) == 5

    def test_locate_missing(self, piles):
        with pytest.raises(ValueError):
            piles.locate(card("B2"))

    def test_run_below(self, piles):
        assert piles.run_below(card("RQ")) == cards("RQ", "BJ")
        assert piles.run_below(card("BK")) == cards("BK", "RQ", "BJ")
        assert piles.run_below(card("BJ")) == cards("BJ")

    def test_detach_from_middle(self, piles):
        run = piles.detach_run(card("RQ"))
        assert run == cards("RQ", "BJ")
        assert list(piles[1]) == cards("BK")

    def test_detach_whole_pile(self, piles):
        run = piles.detach_run(card("BK"))
        assert len(run) == 3
        assert piles[1].is_empty()

    def test_append_to_empty(self, piles):
        piles.append_run(2, cards("RK", "BQ"))
        assert piles.top(2) == card("RK")
        assert piles.bottom(2) == card("BQ")

    def test_append_below_bottom(self, piles):
        piles.append_run(3, piles.detach_run(card("R7")))
        assert list(piles[3]) == cards("B8", "R7", "B6")
        assert piles[4].is_empty()

    def test_detach_append_keeps_partition(self):
        deck = create_full_deck().to_list()
        piles = PileSet([deck[:10], deck[10:20], deck[20:]])
        piles.append_run(4, piles.detach_run(deck[5]))
        assert piles.is_partition_of(create_full_deck())

    def test_partition_detects_duplicates(self):
        deck = create_full_deck().to_list()
        piles = PileSet([deck, [deck[0]]])
        assert not piles.is_partition_of(create_full_deck())

    def test_view_is_snapshot(self, piles):
        view = piles.view()
        piles.detach_run(card("R7"))
        assert view[4] == tuple(cards("R7", "B6"))
        assert piles.view()[4] == ()

    def test_tableau_empty_ignores_deposits(self):
        piles = PileSet([[], [], [], [], [], cards("RA"), cards("BA")])
        assert piles.tableau_empty()
        assert GameState(piles=piles).is_won()

    def test_max_depth(self, piles):
        assert piles.max_depth() == 3
