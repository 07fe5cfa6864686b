"""Tests for card models."""

import pytest

from esp_solitaire.errors import CardError, DuplicateCard, InvalidColor, InvalidRank
from esp_solitaire.models.card import (
    Card,
    CardSet,
    Color,
    Rank,
    assert_unique,
    create_full_deck,
    parse_card,
    parse_color,
    parse_rank,
)


class TestCard:
    """Tests for Card class."""

    def test_create_card(self):
        """Test creating a card."""
        card = Card(color=Color.RED, rank=Rank.ACE)
        assert card.color == Color.RED
        assert card.rank == Rank.ACE

    def test_card_string(self):
        """Test card string representation."""
        assert str(Card(color=Color.RED, rank=Rank.ACE)) == "RA"
        assert str(Card(color=Color.BLACK, rank=Rank.TEN)) == "B10"
        assert str(Card(color=Color.BLACK, rank=Rank.KING)) == "BK"

    def test_card_equality(self):
        """Test card equality (frozen model)."""
        card1 = Card(color=Color.RED, rank=Rank.SEVEN)
        card2 = Card(color=Color.RED, rank=Rank.SEVEN)
        card3 = Card(color=Color.BLACK, rank=Rank.SEVEN)

        assert card1 == card2
        assert card1 != card3

    def test_card_hashable(self):
        """Test that cards can be used in sets."""
        card1 = Card(color=Color.RED, rank=Rank.ACE)
        card2 = Card(color=Color.RED, rank=Rank.ACE)
        assert len({card1, card2}) == 1

    def test_opposite_color(self):
        """Test color comparison between cards."""
        red = Card(color=Color.RED, rank=Rank.FIVE)
        black = Card(color=Color.BLACK, rank=Rank.SIX)
        assert red.is_opposite_color(black)
        assert not red.is_opposite_color(Card(color=Color.RED, rank=Rank.NINE))


class TestParsing:
    """Tests for token parsing."""

    def test_parse_color(self):
        assert parse_color("RED") == Color.RED
        assert parse_color("BLACK") == Color.BLACK

    @pytest.mark.parametrize("token", ["red", "GREEN", "", "REDS", "B"])
    def test_parse_color_invalid(self, token):
        with pytest.raises(InvalidColor):
            parse_color(token)

    @pytest.mark.parametrize(
        "token,rank",
        [("A", Rank.ACE), ("2", Rank.TWO), ("9", Rank.NINE), ("10", Rank.TEN),
         ("J", Rank.JACK), ("Q", Rank.QUEEN), ("K", Rank.KING)],
    )
    def test_parse_rank(self, token, rank):
        assert parse_rank(token) == rank

    @pytest.mark.parametrize("token", ["1", "11", "01", "0", "a", "KING", "", "10X"])
    def test_parse_rank_invalid(self, token):
        with pytest.raises(InvalidRank):
            parse_rank(token)

    def test_parse_card(self):
        assert parse_card("BLACK", "Q") == Card(color=Color.BLACK, rank=Rank.QUEEN)

    def test_catalog_errors_share_base(self):
        with pytest.raises(CardError):
            parse_card("BLUE", "A")


class TestAssertUnique:
    """Tests for duplicate detection."""

    def test_new_card_passes(self):
        cards = [Card(color=Color.RED, rank=Rank.ACE)]
        assert_unique(cards, Card(color=Color.BLACK, rank=Rank.ACE))

    def test_duplicate_fails(self):
        cards = [Card(color=Color.RED, rank=Rank.ACE), Card(color=Color.RED, rank=Rank.TWO)]
        with pytest.raises(DuplicateCard):
            assert_unique(cards, Card(color=Color.RED, rank=Rank.TWO))


class TestCardSet:
    """Tests for CardSet class."""

    def test_empty_set(self):
        cs = CardSet()
        assert len(cs) == 0
        assert str(cs) == "[]"

    def test_add(self):
        cs = CardSet()
        card = Card(color=Color.RED, rank=Rank.ACE)
        cs.add(card)
        cs.add(card)
        assert len(cs) == 1
        assert card in cs

    def test_to_list_sorted(self):
        cs = CardSet([
            Card(color=Color.BLACK, rank=Rank.ACE),
            Card(color=Color.RED, rank=Rank.KING),
            Card(color=Color.RED, rank=Rank.TWO),
        ])
        assert [str(c) for c in cs.to_list()] == ["R2", "RK", "BA"]

    def test_equality(self):
        cards = [Card(color=Color.RED, rank=Rank.ACE), Card(color=Color.BLACK, rank=Rank.TWO)]
        assert CardSet(cards) == CardSet(reversed(cards))
        assert CardSet(cards) != CardSet(cards[:1])


class TestCreateFullDeck:
    """Tests for create_full_deck function."""

    def test_deck_size(self):
        assert len(create_full_deck()) == 26

    def test_deck_has_both_colors(self):
        deck = create_full_deck()
        for color in Color:
            assert sum(1 for c in deck if c.color == color) == 13
