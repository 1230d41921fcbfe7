"""Card related classes and utilities."""
import uuid
from dataclasses import dataclass, field
from enum import Enum


class Suit(Enum):
    """Card suits."""
    CLUBS = 'c'
    DIAMONDS = 'd'
    HEARTS = 'h'
    SPADES = 's'

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        """Display symbol for the suit."""
        return _SUIT_SYMBOLS[self]


_SUIT_SYMBOLS = {
    Suit.CLUBS: '♣',
    Suit.DIAMONDS: '♦',
    Suit.HEARTS: '♥',
    Suit.SPADES: '♠',
}


class Rank(Enum):
    """Card ranks."""
    TWO = '2'
    THREE = '3'
    FOUR = '4'
    FIVE = '5'
    SIX = '6'
    SEVEN = '7'
    EIGHT = '8'
    NINE = '9'
    TEN = 'T'
    JACK = 'J'
    QUEEN = 'Q'
    KING = 'K'
    ACE = 'A'

    def __str__(self) -> str:
        return self.value

    @property
    def high_value(self) -> int:
        """Numeric value with Ace high (2..14)."""
        return _HIGH_VALUES[self]

    @property
    def low_value(self) -> int:
        """Numeric value with Ace low (1..13), used for eight-or-better lows."""
        if self is Rank.ACE:
            return 1
        return _HIGH_VALUES[self]

    @property
    def display(self) -> str:
        """Short label shown in hand descriptions."""
        if self is Rank.TEN:
            return '10'
        return self.value

    @property
    def full_name(self) -> str:
        return _RANK_NAMES[self][0]

    @property
    def plural_name(self) -> str:
        return _RANK_NAMES[self][1]

    @classmethod
    def from_high_value(cls, value: int) -> 'Rank':
        """Look up a rank by its Ace-high numeric value."""
        for rank, high in _HIGH_VALUES.items():
            if high == value:
                return rank
        raise ValueError(f"No rank with value {value}")


_HIGH_VALUES = {rank: index + 2 for index, rank in enumerate(Rank)}

_RANK_NAMES = {
    Rank.TWO: ('Two', 'Twos'),
    Rank.THREE: ('Three', 'Threes'),
    Rank.FOUR: ('Four', 'Fours'),
    Rank.FIVE: ('Five', 'Fives'),
    Rank.SIX: ('Six', 'Sixes'),
    Rank.SEVEN: ('Seven', 'Sevens'),
    Rank.EIGHT: ('Eight', 'Eights'),
    Rank.NINE: ('Nine', 'Nines'),
    Rank.TEN: ('Ten', 'Tens'),
    Rank.JACK: ('Jack', 'Jacks'),
    Rank.QUEEN: ('Queen', 'Queens'),
    Rank.KING: ('King', 'Kings'),
    Rank.ACE: ('Ace', 'Aces'),
}


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    Attributes:
        rank: Card rank (2-A)
        suit: Card suit (clubs, diamonds, hearts, spades)
        uid: Opaque per-instance id for callers that key lists of cards.
             Ignored by equality and hashing.
    """
    rank: Rank
    suit: Suit
    uid: str = field(
        default_factory=lambda: uuid.uuid4().hex,
        compare=False,
        repr=False,
    )

    def __str__(self) -> str:
        """String representation in format 'As' for Ace of spades."""
        return f"{self.rank}{self.suit}"

    @property
    def high_value(self) -> int:
        return self.rank.high_value

    @property
    def low_value(self) -> int:
        return self.rank.low_value

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: String in format 'As' for Ace of spades. Tens may be
                      written 'Th' or '10h'.

        Returns:
            Card instance

        Raises:
            ValueError: If string format is invalid
        """
        if len(card_str) == 3 and card_str[:2] == '10':
            card_str = 'T' + card_str[2]
        if len(card_str) != 2:
            raise ValueError(f"Invalid card string: {card_str}")

        rank_str, suit_str = card_str[0], card_str[1]

        try:
            rank = next(r for r in Rank if r.value == rank_str.upper())
            suit = next(s for s in Suit if s.value == suit_str.lower())
        except StopIteration:
            raise ValueError(f"Invalid rank or suit in: {card_str}")

        return cls(rank=rank, suit=suit)
