"""Main poker hand evaluation interface."""
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional, Union

from hilo_poker.core.card import Card
from hilo_poker.core.hand import FiveCardHand
from hilo_poker.evaluation.combinations import combinations
from hilo_poker.evaluation.errors import InsufficientCardsError, InvalidHandError
from hilo_poker.evaluation.eval_types.high import HighHandEvaluator
from hilo_poker.evaluation.eval_types.low import EightOrBetterLowEvaluator
from hilo_poker.evaluation.types import CardCountRule, Evaluation, HandCategory

logger = logging.getLogger(__name__)

HandLike = Union[FiveCardHand, Iterable[Card]]

# Legal (private, community) splits for each card count rule, in search order
CARD_SPLITS = {
    CardCountRule.TWO_FLEXIBLE: ((1, 4), (2, 3)),
    CardCountRule.FIXED_TWO_PLUS_THREE: ((2, 3),),
}


@dataclass(frozen=True)
class _Candidate:
    """A classified candidate hand with its high-hand ordering key."""
    hand: FiveCardHand
    category: HandCategory
    tiebreak: tuple[int, ...]

    @property
    def high_key(self) -> tuple:
        return (self.category, self.tiebreak)


class HandEvaluator:
    """
    Main interface for poker hand evaluation.

    Holds only stateless sub-evaluators, so one instance can serve any number
    of concurrent callers.
    """

    def __init__(self):
        """Initialize evaluator."""
        self.high = HighHandEvaluator()
        self.low = EightOrBetterLowEvaluator()

    def classify(self, hand: HandLike) -> HandCategory:
        """Category of an exact five-card hand."""
        return self.high.classify(hand)

    def compare_high(self, hand1: HandLike, hand2: HandLike, category: HandCategory) -> int:
        """
        Compare two high hands of the same category.

        Returns:
            -1 if hand1 wins, 1 if hand2 wins, 0 if tie
        """
        return self.high.compare(hand1, hand2, category)

    def compare_hands(self, hand1: HandLike, hand2: HandLike) -> int:
        """
        Compare two high hands of any category.

        Returns:
            -1 if hand1 wins, 1 if hand2 wins, 0 if tie
        """
        category1 = self.classify(hand1)
        category2 = self.classify(hand2)
        if category1 != category2:
            return -1 if category1 > category2 else 1
        return self.compare_high(hand1, hand2, category1)

    def is_qualifying_low(self, hand: HandLike) -> bool:
        """True if the hand is a qualifying eight-or-better low."""
        return self.low.qualifies(hand)

    def compare_low(self, hand1: HandLike, hand2: HandLike) -> int:
        """
        Compare two low hands.

        Returns:
            -1 if hand1 is the better (lower) hand, 1 if hand2 is, 0 if tie
        """
        return self.low.compare(hand1, hand2)

    def find_best(
        self,
        private_cards: Sequence[Card],
        community_cards: Sequence[Card],
        rule: CardCountRule
    ) -> Evaluation:
        """
        Find a player's best high hand and best qualifying low.

        Every legal five-card combination for `rule` is classified. The high
        side keeps the maximum under (category, tie-break values); the low
        side keeps the minimum qualifying low. On ties the candidate found
        first wins, and enumeration order is fixed, so results are
        reproducible.

        Args:
            private_cards: The player's own cards
            community_cards: Shared board cards
            rule: How private and community cards may be combined

        Returns:
            Evaluation with the best high hand and the best low (or None)

        Raises:
            InsufficientCardsError: If no legal five-card hand can be built yet
            InvalidHandError: If the same card appears more than once
        """
        rule = CardCountRule(rule)
        private_cards = tuple(private_cards)
        community_cards = tuple(community_cards)
        self._validate_inputs(private_cards, community_cards, rule)

        best_high: Optional[_Candidate] = None
        best_low: Optional[FiveCardHand] = None
        best_low_values: Optional[list[int]] = None
        candidate_count = 0

        for hand in self._candidate_hands(private_cards, community_cards, rule):
            candidate_count += 1
            category = self.high.classify(hand)
            candidate = _Candidate(hand, category, tuple(self.high.tiebreak_values(hand, category)))

            # Strictly better replaces; ties keep the earlier hand
            if best_high is None or candidate.high_key > best_high.high_key:
                best_high = candidate

            if self.low.qualifies(hand):
                low_values = hand.low_values()
                if best_low is None or low_values < best_low_values:
                    best_low = hand
                    best_low_values = low_values

        logger.debug(
            f"Searched {candidate_count} hands for {rule.value}: "
            f"high {best_high.hand} ({best_high.category.display_name}), "
            f"low {best_low if best_low else 'none'}"
        )
        return Evaluation(
            high_hand=best_high.hand,
            category=best_high.category,
            low_hand=best_low
        )

    def _candidate_hands(
        self,
        private_cards: tuple[Card, ...],
        community_cards: tuple[Card, ...],
        rule: CardCountRule
    ) -> Iterable[FiveCardHand]:
        """Yield every legal five-card hand, private subsets outermost."""
        for required_private, required_community in CARD_SPLITS[rule]:
            if len(private_cards) < required_private or len(community_cards) < required_community:
                logger.debug(
                    f"Skipping {required_private}+{required_community} split: "
                    f"{len(private_cards)} private, {len(community_cards)} community cards"
                )
                continue
            board_combos = combinations(community_cards, required_community)
            for private_combo in combinations(private_cards, required_private):
                for board_combo in board_combos:
                    yield FiveCardHand(private_combo + board_combo)

    def _validate_inputs(
        self,
        private_cards: tuple[Card, ...],
        community_cards: tuple[Card, ...],
        rule: CardCountRule
    ) -> None:
        """Reject duplicate cards and card counts no split of `rule` can use."""
        all_cards = private_cards + community_cards
        if len(set(all_cards)) != len(all_cards):
            logger.warning(f"Duplicate cards passed to evaluation: {[str(c) for c in all_cards]}")
            raise InvalidHandError(
                f"Duplicate cards in private {[str(c) for c in private_cards]} "
                f"and community {[str(c) for c in community_cards]}"
            )

        feasible = any(
            len(private_cards) >= required_private and len(community_cards) >= required_community
            for required_private, required_community in CARD_SPLITS[rule]
        )
        if not feasible:
            needed = ' or '.join(
                f"{p} private + {c} community" for p, c in CARD_SPLITS[rule]
            )
            raise InsufficientCardsError(
                f"Cannot evaluate {rule.value} hand yet: need {needed} cards, "
                f"have {len(private_cards)} private and {len(community_cards)} community",
                rule=rule.value,
                private_count=len(private_cards),
                community_count=len(community_cards)
            )


# Global instance
evaluator = HandEvaluator()
