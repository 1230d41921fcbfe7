"""Deck implementation."""
import random
from typing import Optional

from .card import Card, Rank, Suit

# The dealer treats a deck with fewer cards than this as exhausted
MIN_DEALABLE = 3


class Deck:
    """
    A standard 52-card deck.

    Attributes:
        cards: List of cards in the deck; the top of the deck is index 0
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize a new, unshuffled deck.

        Args:
            rng: Random source for shuffling. Defaults to an unseeded
                 random.Random; pass a seeded one for repeatable deals.
        """
        self._rng = rng or random.Random()
        self.cards: list[Card] = []
        self.reset()

    def reset(self) -> None:
        """Restore all 52 cards in suit-major order."""
        self.cards = [Card(rank=rank, suit=suit) for suit in Suit for rank in Rank]

    def shuffle(self, times: int = 1) -> None:
        """
        Shuffle the deck.

        Args:
            times: Number of times to shuffle
        """
        for _ in range(times):
            self._rng.shuffle(self.cards)

    def deal_cards(self, count: int) -> list[Card]:
        """
        Deal cards from the top of the deck.

        Args:
            count: Number of cards to deal

        Returns:
            The dealt cards, or an empty list if fewer than `count` remain
        """
        if count > len(self.cards):
            return []
        dealt = self.cards[:count]
        del self.cards[:count]
        return dealt

    def remove_card(self, card: Card) -> Card:
        """
        Remove a specific card from the deck.
        Matches only on rank and suit.

        Args:
            card: Card to remove

        Returns:
            The removed card

        Raises:
            ValueError: If card not in deck
        """
        for deck_card in self.cards:
            if deck_card == card:
                self.cards.remove(deck_card)
                return deck_card
        raise ValueError(f"Card {card} not in deck")

    def remove_cards(self, cards: list[Card]) -> list[Card]:
        """Remove specific cards from the deck."""
        return [self.remove_card(card) for card in cards]

    @property
    def size(self) -> int:
        """Number of cards in the deck."""
        return len(self.cards)

    @property
    def is_empty(self) -> bool:
        return len(self.cards) < MIN_DEALABLE
