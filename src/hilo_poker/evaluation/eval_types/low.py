"""Eight-or-better A-5 low hand evaluation."""
from collections.abc import Iterable
from typing import Union

from hilo_poker.core.card import Card
from hilo_poker.core.hand import FiveCardHand
from hilo_poker.evaluation.constants import HAND_SIZE, LOW_QUALIFIER
from hilo_poker.evaluation.eval_types.base import BaseEvaluator


class EightOrBetterLowEvaluator(BaseEvaluator):
    """
    Evaluator for eight-or-better lows in hi-lo split games.

    In A-5 low:
    - Aces count as 1, so A-2-3-4-5 is the best possible low (wheel)
    - Straights and flushes don't count against a low
    - A low qualifies only with five different ranks, all eight or under
    """

    eval_type = 'a5_low_8'

    def qualifies(self, hand: Union[FiveCardHand, Iterable[Card]]) -> bool:
        """True if the hand is a qualifying eight-or-better low."""
        hand = self._validate_hand(hand)
        if any(card.low_value > LOW_QUALIFIER for card in hand):
            return False
        return len({card.rank for card in hand}) == HAND_SIZE

    def compare(
        self,
        hand1: Union[FiveCardHand, Iterable[Card]],
        hand2: Union[FiveCardHand, Iterable[Card]]
    ) -> int:
        """
        Compare two low hands, highest card first.

        Returns:
            -1 if hand1 is the better (lower) hand, 1 if hand2 is, 0 if tied
        """
        values1 = self._validate_hand(hand1).low_values()
        values2 = self._validate_hand(hand2).low_values()

        for v1, v2 in zip(values1, values2):
            if v1 < v2:
                return -1
            if v1 > v2:
                return 1
        return 0
