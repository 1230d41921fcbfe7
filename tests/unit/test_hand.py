"""Tests for the five-card hand value."""
import pytest
from hilo_poker.core.card import Card, Rank, Suit
from hilo_poker.core.hand import FiveCardHand, parse_cards
from hilo_poker.evaluation.errors import InvalidHandError


def test_parse_cards():
    cards = parse_cards("AsKh Td2c")
    assert cards == [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.KING, Suit.HEARTS),
        Card(Rank.TEN, Suit.DIAMONDS),
        Card(Rank.TWO, Suit.CLUBS),
    ]


@pytest.mark.parametrize("bad", ["AsK", "AsXx", "Ks1h"])
def test_parse_cards_invalid(bad):
    with pytest.raises(ValueError):
        parse_cards(bad)


def test_hand_requires_five_cards():
    with pytest.raises(InvalidHandError):
        FiveCardHand(parse_cards("AsKsQsJs"))
    with pytest.raises(InvalidHandError):
        FiveCardHand(parse_cards("AsKsQsJsTs9s"))


def test_hand_rejects_duplicates():
    with pytest.raises(InvalidHandError):
        FiveCardHand(parse_cards("AsAsQsJsTs"))


def test_invalid_hand_error_is_value_error():
    with pytest.raises(ValueError):
        FiveCardHand([])


def test_hand_equality_ignores_order():
    hand1 = FiveCardHand.from_string("AsKsQsJsTs")
    hand2 = FiveCardHand.from_string("TsJsQsKsAs")
    assert hand1 == hand2
    assert hash(hand1) == hash(hand2)
    assert hand1.cards[0] == Card(Rank.ACE, Suit.SPADES)
    assert hand2.cards[0] == Card(Rank.TEN, Suit.SPADES)


def test_hand_is_immutable():
    hand = FiveCardHand.from_string("AsKsQsJsTs")
    with pytest.raises(AttributeError):
        hand.foo = 1


def test_hand_values():
    hand = FiveCardHand.from_string("As5d5hKc2s")
    assert hand.high_values() == [14, 13, 5, 5, 2]
    assert hand.low_values() == [13, 5, 5, 2, 1]


def test_rank_counts_indexed_by_value():
    hand = FiveCardHand.from_string("KsKdKh2c2s")
    counts = hand.rank_counts()
    assert len(counts) == 15
    assert counts[13] == 3
    assert counts[2] == 2
    assert sum(counts) == 5


@pytest.mark.parametrize("hand_str,shape", [
    ("AsAdAhAcKs", (4, 1)),
    ("KsKdKh2c2s", (3, 2)),
    ("7s7d7h2c3s", (3, 1, 1)),
    ("7s7d2h2c3s", (2, 2, 1)),
    ("7s7d2h4c3s", (2, 1, 1, 1)),
    ("As7d2h4c3s", (1, 1, 1, 1, 1)),
])
def test_count_shape(hand_str, shape):
    assert FiveCardHand.from_string(hand_str).count_shape() == shape


def test_values_with_count():
    hand = FiveCardHand.from_string("9s9dKhKc3s")
    assert hand.values_with_count(2) == [13, 9]
    assert hand.values_with_count(1) == [3]
    assert hand.values_with_count(3) == []
