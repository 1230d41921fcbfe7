"""Standard high-hand poker evaluation."""
import logging
from collections.abc import Iterable
from typing import Union

from hilo_poker.core.card import Card
from hilo_poker.core.hand import FiveCardHand
from hilo_poker.evaluation.constants import (
    ROYAL_VALUES, SHAPE_FOUR_OF_A_KIND, SHAPE_FULL_HOUSE, SHAPE_ONE_PAIR,
    SHAPE_THREE_OF_A_KIND, SHAPE_TWO_PAIR, WHEEL_HIGH_VALUE, WHEEL_VALUES
)
from hilo_poker.evaluation.errors import InvalidHandError
from hilo_poker.evaluation.eval_types.base import BaseEvaluator, compare_values
from hilo_poker.evaluation.types import HandCategory

logger = logging.getLogger(__name__)

HandLike = Union[FiveCardHand, Iterable[Card]]


def is_flush(hand: FiveCardHand) -> bool:
    return len({card.suit for card in hand}) == 1


def is_straight(hand: FiveCardHand) -> bool:
    """Five consecutive values. The wheel (A-2-3-4-5) is the only Ace-low straight."""
    values = sorted(card.high_value for card in hand)
    if _is_consecutive(values):
        return True
    if tuple(values) == WHEEL_VALUES:
        return _is_consecutive(sorted(1 if v == 14 else v for v in values))
    return False


def _is_consecutive(values: list[int]) -> bool:
    return all(b - a == 1 for a, b in zip(values, values[1:]))


def is_wheel(hand: FiveCardHand) -> bool:
    return tuple(sorted(card.high_value for card in hand)) == WHEEL_VALUES


def straight_high_value(hand: FiveCardHand) -> int:
    """Value of a straight's top card. The wheel's top card is the five."""
    if is_wheel(hand):
        return WHEEL_HIGH_VALUE
    return max(card.high_value for card in hand)


def straight_high_card(hand: FiveCardHand) -> Card:
    """The card shown as a straight's high card."""
    target = straight_high_value(hand)
    return next(card for card in hand if card.high_value == target)


def high_card(hand: FiveCardHand) -> Card:
    """Highest card by Ace-high value; the first one given wins value ties."""
    best = None
    for card in hand:
        if best is None or card.high_value > best.high_value:
            best = card
    return best


def kicker_values(hand: FiveCardHand, *excluded: int) -> list[int]:
    """High values of cards not in the excluded ranks, highest first."""
    return sorted(
        (card.high_value for card in hand if card.high_value not in excluded),
        reverse=True
    )


class HighHandEvaluator(BaseEvaluator):
    """Classifier and comparator for standard high-hand poker."""

    eval_type = 'high'

    def classify(self, hand: HandLike) -> HandCategory:
        """
        Classify a five-card hand.

        Args:
            hand: Exactly five distinct cards

        Returns:
            The hand's category

        Raises:
            InvalidHandError: If the hand is not five distinct cards
        """
        hand = self._validate_hand(hand)

        flush = is_flush(hand)
        straight = is_straight(hand)
        shape = hand.count_shape()

        if flush and straight and tuple(sorted(hand.high_values())) == ROYAL_VALUES:
            return HandCategory.ROYAL_FLUSH
        if flush and straight:
            return HandCategory.STRAIGHT_FLUSH
        if shape == SHAPE_FOUR_OF_A_KIND:
            return HandCategory.FOUR_OF_A_KIND
        if shape == SHAPE_FULL_HOUSE:
            return HandCategory.FULL_HOUSE
        if flush:
            return HandCategory.FLUSH
        if straight:
            return HandCategory.STRAIGHT
        if shape == SHAPE_THREE_OF_A_KIND:
            return HandCategory.THREE_OF_A_KIND
        if shape == SHAPE_TWO_PAIR:
            return HandCategory.TWO_PAIR
        if shape == SHAPE_ONE_PAIR:
            return HandCategory.ONE_PAIR
        return HandCategory.HIGH_CARD

    def compare(self, hand1: HandLike, hand2: HandLike, category: HandCategory) -> int:
        """
        Compare two hands of the same category.

        Args:
            hand1: First hand
            hand2: Second hand
            category: Category both hands belong to

        Returns:
            -1 if hand1 wins, 1 if hand2 wins, 0 if tied

        Raises:
            InvalidHandError: If either hand is malformed or not of `category`
        """
        hand1 = self._validate_hand(hand1)
        hand2 = self._validate_hand(hand2)
        for hand in (hand1, hand2):
            actual = self.classify(hand)
            if actual != category:
                raise InvalidHandError(
                    f"Hand {hand} is a {actual.display_name}, not a {category.display_name}"
                )
        return compare_values(self.tiebreak_values(hand1, category),
                              self.tiebreak_values(hand2, category))

    def tiebreak_values(self, hand: FiveCardHand, category: HandCategory) -> list[int]:
        """
        Values compared, in order, between hands of the same category.

        Royal flushes all tie, so they yield no values.
        """
        if category == HandCategory.ROYAL_FLUSH:
            return []

        if category in (HandCategory.STRAIGHT_FLUSH, HandCategory.STRAIGHT):
            return [straight_high_value(hand)]

        if category == HandCategory.FOUR_OF_A_KIND:
            quads = hand.values_with_count(4)[0]
            return [quads] + kicker_values(hand, quads)

        if category == HandCategory.FULL_HOUSE:
            return [hand.values_with_count(3)[0], hand.values_with_count(2)[0]]

        if category in (HandCategory.FLUSH, HandCategory.HIGH_CARD):
            return hand.high_values()

        if category == HandCategory.THREE_OF_A_KIND:
            trips = hand.values_with_count(3)[0]
            return [trips] + kicker_values(hand, trips)

        if category == HandCategory.TWO_PAIR:
            high_pair, low_pair = hand.values_with_count(2)
            return [high_pair, low_pair] + kicker_values(hand, high_pair, low_pair)

        if category == HandCategory.ONE_PAIR:
            pair = hand.values_with_count(2)[0]
            return [pair] + kicker_values(hand, pair)

        raise InvalidHandError(f"Unknown hand category: {category}")
