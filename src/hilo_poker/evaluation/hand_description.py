"""Human-readable labels for evaluated hands."""
from collections.abc import Iterable
from typing import Union

from hilo_poker.core.card import Card, Rank
from hilo_poker.core.hand import FiveCardHand
from hilo_poker.evaluation.eval_types.high import (
    high_card, kicker_values, straight_high_card
)
from hilo_poker.evaluation.evaluator import HandEvaluator, evaluator
from hilo_poker.evaluation.types import Evaluation, HandCategory

NO_LOW = 'No low'


class HandDescriber:
    """
    Generates human-readable descriptions for poker hands.

    Short labels ("Full House-K/Q") are what the table view shows next to a
    player's cards; detailed descriptions ("Full House, Kings over Queens")
    are for logs and hand histories.
    """

    def __init__(self, hand_evaluator: HandEvaluator = evaluator):
        self.evaluator = hand_evaluator

    def describe_high(self, evaluation: Evaluation) -> str:
        """Short label for the high side of an evaluation."""
        hand = evaluation.high_hand
        category = evaluation.category

        if category == HandCategory.ROYAL_FLUSH:
            return 'Royal Flush'
        if category == HandCategory.STRAIGHT_FLUSH:
            return f"Straight Flush-{straight_high_card(hand).rank.display}"
        if category == HandCategory.FOUR_OF_A_KIND:
            return f"Four of a Kind-{self._rank_with_count(hand, 4).display}"
        if category == HandCategory.FULL_HOUSE:
            trips = self._rank_with_count(hand, 3)
            pair = self._rank_with_count(hand, 2)
            return f"Full House-{trips.display}/{pair.display}"
        if category == HandCategory.FLUSH:
            top = high_card(hand)
            return f"Flush-{top.rank.display}{top.suit.symbol}"
        if category == HandCategory.STRAIGHT:
            return f"Straight-{straight_high_card(hand).rank.display}"
        if category == HandCategory.THREE_OF_A_KIND:
            trips = self._rank_with_count(hand, 3)
            kicker = Rank.from_high_value(kicker_values(hand, trips.high_value)[0])
            return f"Three of a Kind-{trips.display}/{kicker.display}"
        if category == HandCategory.TWO_PAIR:
            high_pair, low_pair = (Rank.from_high_value(v) for v in hand.values_with_count(2))
            kicker = Rank.from_high_value(
                kicker_values(hand, high_pair.high_value, low_pair.high_value)[0]
            )
            return f"Two Pair-{high_pair.display}/{low_pair.display}-{kicker.display}"
        if category == HandCategory.ONE_PAIR:
            return f"Pair-{self._rank_with_count(hand, 2).display}"
        return f"High Card-{high_card(hand).rank.display}"

    def describe_low(self, evaluation: Evaluation) -> str:
        """Low side as a digit string, highest card first (e.g. "76542")."""
        if evaluation.low_hand is None:
            return NO_LOW
        return ''.join(str(v) for v in evaluation.low_hand.low_values())

    def describe_hand(self, cards: Union[FiveCardHand, Iterable[Card]]) -> str:
        """Get a basic description of the hand."""
        return self.evaluator.classify(cards).display_name

    def describe_hand_detailed(self, cards: Union[FiveCardHand, Iterable[Card]]) -> str:
        """Get a detailed description of the hand."""
        hand = cards if isinstance(cards, FiveCardHand) else FiveCardHand(cards)
        category = self.evaluator.classify(hand)

        if category == HandCategory.ROYAL_FLUSH:
            return 'Royal Flush'
        if category == HandCategory.STRAIGHT_FLUSH:
            return f"{straight_high_card(hand).rank.full_name}-high Straight Flush"
        if category == HandCategory.FOUR_OF_A_KIND:
            return f"Four {self._rank_with_count(hand, 4).plural_name}"
        if category == HandCategory.FULL_HOUSE:
            trips = self._rank_with_count(hand, 3)
            pair = self._rank_with_count(hand, 2)
            return f"Full House, {trips.plural_name} over {pair.plural_name}"
        if category == HandCategory.FLUSH:
            return f"{high_card(hand).rank.full_name}-high Flush"
        if category == HandCategory.STRAIGHT:
            return f"{straight_high_card(hand).rank.full_name}-high Straight"
        if category == HandCategory.THREE_OF_A_KIND:
            return f"Three {self._rank_with_count(hand, 3).plural_name}"
        if category == HandCategory.TWO_PAIR:
            high_pair, low_pair = (Rank.from_high_value(v) for v in hand.values_with_count(2))
            return f"Two Pair, {high_pair.plural_name} and {low_pair.plural_name}"
        if category == HandCategory.ONE_PAIR:
            return f"Pair of {self._rank_with_count(hand, 2).plural_name}"
        return f"{high_card(hand).rank.full_name} High"

    def _rank_with_count(self, hand: FiveCardHand, count: int) -> Rank:
        """Highest rank held exactly `count` times."""
        return Rank.from_high_value(hand.values_with_count(count)[0])


# Default instance used by the module-level helpers
describer = HandDescriber()
