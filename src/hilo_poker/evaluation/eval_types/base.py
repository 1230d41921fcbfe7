"""Base class for poker hand evaluators."""
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Union

from hilo_poker.core.card import Card
from hilo_poker.core.hand import FiveCardHand


def compare_values(values1: list[int], values2: list[int]) -> int:
    """
    Compare two value lists position by position, higher value winning.

    Returns:
        -1 if values1 is higher at the first differing position,
        1 if values2 is, 0 if the lists are equal
    """
    for v1, v2 in zip(values1, values2):
        if v1 > v2:
            return -1
        if v1 < v2:
            return 1
    return 0


class BaseEvaluator(ABC):
    """Base class for hand evaluators."""

    eval_type: str = ''

    def _validate_hand(self, hand: Union[FiveCardHand, Iterable[Card]]) -> FiveCardHand:
        """
        Ensure the hand is an exact five-card hand.

        Plain card sequences are converted, which runs the size and
        duplicate checks.

        Raises:
            InvalidHandError: If the cards do not form a five-card hand
        """
        if isinstance(hand, FiveCardHand):
            return hand
        return FiveCardHand(hand)

    @abstractmethod
    def compare(self, *args, **kwargs) -> int:
        """Compare two hands. -1 means the first hand wins, 1 the second, 0 a tie."""
        pass
