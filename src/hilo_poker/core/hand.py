"""Five-card hand value and card string parsing."""

import logging
from collections.abc import Iterable

from hilo_poker.core.card import Card
from hilo_poker.evaluation.constants import HAND_SIZE, RANK_COUNT_SLOTS
from hilo_poker.evaluation.errors import InvalidHandError

logger = logging.getLogger(__name__)


class FiveCardHand:
    """
    An exact five-card poker hand.

    Immutable. Cards keep the order they were given in; equality ignores that
    order and compares the set of (rank, suit) pairs.

    Raises:
        InvalidHandError: If the hand does not hold exactly five distinct cards
    """

    __slots__ = ('_cards',)

    def __init__(self, cards: Iterable[Card]):
        cards = tuple(cards)
        if len(cards) != HAND_SIZE:
            raise InvalidHandError(
                f"A hand requires exactly {HAND_SIZE} cards, got {len(cards)}: "
                f"{' '.join(str(c) for c in cards)}"
            )
        if len(set(cards)) != HAND_SIZE:
            raise InvalidHandError(
                f"A hand cannot hold duplicate cards: {' '.join(str(c) for c in cards)}"
            )
        object.__setattr__(self, '_cards', cards)

    def __setattr__(self, name, value):
        raise AttributeError("FiveCardHand is immutable")

    @property
    def cards(self) -> tuple[Card, ...]:
        return self._cards

    def __iter__(self):
        return iter(self._cards)

    def __len__(self) -> int:
        return HAND_SIZE

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FiveCardHand):
            return NotImplemented
        return frozenset(self._cards) == frozenset(other._cards)

    def __hash__(self) -> int:
        return hash(frozenset(self._cards))

    def __str__(self) -> str:
        return ' '.join(str(card) for card in self._cards)

    def __repr__(self) -> str:
        return f"FiveCardHand({str(self)!r})"

    def high_values(self) -> list[int]:
        """Ace-high values of all cards, highest first."""
        return sorted((card.high_value for card in self._cards), reverse=True)

    def low_values(self) -> list[int]:
        """Ace-low values of all cards, highest first."""
        return sorted((card.low_value for card in self._cards), reverse=True)

    def rank_counts(self) -> list[int]:
        """Number of cards per rank, indexed by high value (index 14 is Aces)."""
        counts = [0] * RANK_COUNT_SLOTS
        for card in self._cards:
            counts[card.high_value] += 1
        return counts

    def count_shape(self) -> tuple[int, ...]:
        """Rank multiplicities sorted descending, e.g. (3, 2) for a full house."""
        return tuple(sorted((c for c in self.rank_counts() if c), reverse=True))

    def values_with_count(self, count: int) -> list[int]:
        """High values of the ranks held exactly `count` times, highest first."""
        counts = self.rank_counts()
        return [value for value in range(RANK_COUNT_SLOTS - 1, 1, -1) if counts[value] == count]

    @classmethod
    def from_string(cls, hand_str: str) -> 'FiveCardHand':
        """Build a hand from a string such as "AsKsQsJsTs"."""
        return cls(parse_cards(hand_str))


def parse_cards(hand_str: str) -> list[Card]:
    """
    Parse a run of card strings.

    Args:
        hand_str: Concatenated card representations (e.g., "AsAhJs9s5s").
                  Whitespace between cards is allowed. Each card is 2
                  characters: rank (A, K, Q, J, T, 9-2) followed by suit
                  (s, h, d, c).

    Returns:
        List of parsed cards, in the given order

    Raises:
        ValueError: If the string format is invalid
    """
    hand_str = ''.join(hand_str.split())
    if len(hand_str) % 2 != 0:
        raise ValueError(f"Invalid hand string length: {hand_str} (must be multiple of 2)")

    card_strings = [hand_str[i : i + 2] for i in range(0, len(hand_str), 2)]

    cards = []
    for i, card_str in enumerate(card_strings):
        try:
            card = Card.from_string(card_str)
        except ValueError as e:
            raise ValueError(f"Invalid card at position {i + 1} in hand string '{hand_str}': {e}")
        cards.append(card)

    logger.debug(f"Parsed cards from string '{hand_str}': {[str(c) for c in cards]}")
    return cards
