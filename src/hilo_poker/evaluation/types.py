"""Common types for poker evaluation."""
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

from hilo_poker.core.hand import FiveCardHand


class HandCategory(IntEnum):
    """High-hand categories, weakest first. Numeric order is strength order."""
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def display_name(self) -> str:
        return _CATEGORY_NAMES[self]


_CATEGORY_NAMES = {
    HandCategory.HIGH_CARD: 'High Card',
    HandCategory.ONE_PAIR: 'One Pair',
    HandCategory.TWO_PAIR: 'Two Pair',
    HandCategory.THREE_OF_A_KIND: 'Three of a Kind',
    HandCategory.STRAIGHT: 'Straight',
    HandCategory.FLUSH: 'Flush',
    HandCategory.FULL_HOUSE: 'Full House',
    HandCategory.FOUR_OF_A_KIND: 'Four of a Kind',
    HandCategory.STRAIGHT_FLUSH: 'Straight Flush',
    HandCategory.ROYAL_FLUSH: 'Royal Flush',
}


class CardCountRule(str, Enum):
    """How private cards may combine with community cards."""
    TWO_FLEXIBLE = 'two_flexible'                   # 1 private + 4 board, or 2 private + 3 board
    FIXED_TWO_PLUS_THREE = 'fixed_two_plus_three'   # exactly 2 private + 3 board (Omaha)


@dataclass(frozen=True)
class Evaluation:
    """
    Result of a best-hand search for one player.

    Attributes:
        high_hand: Best five-card high hand
        category: Category of the high hand
        low_hand: Best qualifying eight-or-better low, or None if nothing qualifies
    """
    high_hand: FiveCardHand
    category: HandCategory
    low_hand: Optional[FiveCardHand] = None

    @property
    def has_low(self) -> bool:
        return self.low_hand is not None
