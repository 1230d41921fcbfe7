"""Tests for eight-or-better low evaluation."""
import pytest

from hilo_poker.core.hand import FiveCardHand, parse_cards
from hilo_poker.evaluation.errors import InvalidHandError
from hilo_poker.evaluation.eval_types.low import EightOrBetterLowEvaluator


@pytest.fixture
def evaluator():
    """Create a low hand evaluator instance."""
    return EightOrBetterLowEvaluator()


@pytest.mark.parametrize("hand_str,qualifies", [
    ("As2d3c4h5s", True),    # wheel, straight doesn't count against it
    ("As2s3s4s5s", True),    # so doesn't a flush
    ("8h7d6c5s4h", True),
    ("8h6d4c3s2h", True),
    ("As2d3c4h9s", False),   # nine is too high
    ("KhQdJcTs9h", False),
    ("As2d3c3h5s", False),   # paired
    ("AsAd3c4h5s", False),
])
def test_qualifies(evaluator, hand_str, qualifies):
    assert evaluator.qualifies(FiveCardHand.from_string(hand_str)) is qualifies


def test_qualifies_rejects_malformed_hands(evaluator):
    with pytest.raises(InvalidHandError):
        evaluator.qualifies(parse_cards("As2d3c4h"))


@pytest.mark.parametrize("better,worse", [
    ("As2d3c4h5s", "As2d3c4h6s"),
    ("8h7d6c5s3h", "8h7d6c5s4h"),   # tie on highest cards, then next card
    ("7h6d5c4s3h", "8h5d4c3s2h"),   # highest card decides first
    ("6h4d3c2sAh", "6h5d3c2sAh"),
    ("8h6d4c3sAh", "8h6d4c3s2h"),   # Ace is low
])
def test_compare(evaluator, better, worse):
    better_hand = FiveCardHand.from_string(better)
    worse_hand = FiveCardHand.from_string(worse)
    assert evaluator.compare(better_hand, worse_hand) == -1
    assert evaluator.compare(worse_hand, better_hand) == 1


def test_compare_ignores_suits(evaluator):
    hand1 = FiveCardHand.from_string("8h7d6c5s4h")
    hand2 = FiveCardHand.from_string("8s7s6s5s4s")
    assert evaluator.compare(hand1, hand2) == 0


def test_compare_eight_seven_lows(evaluator):
    """87654 loses to 87653."""
    hand1 = FiveCardHand.from_string("8h7d6c5s4h")
    hand2 = FiveCardHand.from_string("8d7c6s5h3d")
    assert evaluator.compare(hand1, hand2) == 1
