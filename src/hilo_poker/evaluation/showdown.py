"""Hi-lo showdown across several players sharing one board."""
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Optional

from hilo_poker.core.card import Card
from hilo_poker.evaluation.errors import InvalidHandError
from hilo_poker.evaluation.evaluator import HandEvaluator, evaluator
from hilo_poker.evaluation.hand_description import HandDescriber
from hilo_poker.evaluation.types import CardCountRule, Evaluation

logger = logging.getLogger(__name__)


@dataclass
class PlayerResult:
    """Information about a player's best hands."""

    player_id: str
    evaluation: Evaluation
    used_hole_cards: list[Card] = field(default_factory=list)  # Hole cards in the best high hand
    used_community_cards: list[Card] = field(default_factory=list)  # Board cards in the best high hand
    high_description: str = ''  # e.g., "Full House-K/Q"
    low_description: str = ''  # e.g., "76542" or "No low"; empty in high-only games

    def __str__(self) -> str:
        cards_str = ", ".join(str(card) for card in self.evaluation.high_hand)
        if not self.low_description:
            return f"Player {self.player_id}: {self.high_description} ({cards_str})"
        return f"Player {self.player_id}: {self.high_description} / {self.low_description} ({cards_str})"

    def to_json(self) -> dict:
        """Convert to JSON-compatible dictionary."""
        low_hand = self.evaluation.low_hand
        return {
            "player_id": self.player_id,
            "high_hand": [str(card) for card in self.evaluation.high_hand],
            "category": self.evaluation.category.display_name,
            "low_hand": [str(card) for card in low_hand] if low_hand else None,
            "used_hole_cards": [str(card) for card in self.used_hole_cards],
            "used_community_cards": [str(card) for card in self.used_community_cards],
            "high_description": self.high_description,
            "low_description": self.low_description,
        }


@dataclass
class ShowdownResult:
    """Winners of the high and low halves of a hi-lo showdown."""

    players: dict[str, PlayerResult]
    high_winners: list[str]
    low_winners: list[str] = field(default_factory=list)  # Empty when no one has a low
    hi_lo: bool = True  # False for high-only games

    @property
    def has_low(self) -> bool:
        return bool(self.low_winners)

    @property
    def scoopers(self) -> list[str]:
        """Players who win every half that is awarded."""
        if not self.has_low:
            return list(self.high_winners)
        return [pid for pid in self.high_winners if pid in self.low_winners]

    def to_json(self) -> dict:
        """Convert to JSON-compatible dictionary."""
        return {
            "players": [result.to_json() for result in self.players.values()],
            "high_winners": self.high_winners,
            "low_winners": self.low_winners,
            "hi_lo": self.hi_lo,
            "scoopers": self.scoopers,
        }


def split_used_cards(
    evaluation: Evaluation,
    hole_cards: Sequence[Card]
) -> tuple[list[Card], list[Card]]:
    """Split the best high hand into the cards that came from the hole and from the board."""
    hole = set(hole_cards)
    used_hole = [card for card in evaluation.high_hand if card in hole]
    used_community = [card for card in evaluation.high_hand if card not in hole]
    return used_hole, used_community


def evaluate_showdown(
    hands: Mapping[str, Sequence[Card]],
    community_cards: Sequence[Card],
    rule: CardCountRule,
    hi_lo: bool = True,
    hand_evaluator: HandEvaluator = evaluator
) -> ShowdownResult:
    """
    Evaluate every player's hand and find the high and low winners.

    Args:
        hands: Private cards per player id, in seat order
        community_cards: Shared board cards
        rule: How private and community cards may be combined
        hi_lo: False for high-only games, where no low half is awarded
        hand_evaluator: Evaluator to use

    Returns:
        ShowdownResult with per-player results and the tied winners of each half

    Raises:
        ValueError: If no hands are given
        InvalidHandError: If a card is held twice across all hands and the board
        InsufficientCardsError: If any player cannot make a legal hand yet
    """
    if not hands:
        raise ValueError("Showdown requires at least one player")
    _check_unique_cards(hands, community_cards)

    describer = HandDescriber(hand_evaluator)
    players: dict[str, PlayerResult] = {}
    for player_id, hole_cards in hands.items():
        evaluation = hand_evaluator.find_best(hole_cards, community_cards, rule)
        used_hole, used_community = split_used_cards(evaluation, hole_cards)
        players[player_id] = PlayerResult(
            player_id=player_id,
            evaluation=evaluation,
            used_hole_cards=used_hole,
            used_community_cards=used_community,
            high_description=describer.describe_high(evaluation),
            low_description=describer.describe_low(evaluation) if hi_lo else '',
        )

    high_winners = _find_high_winners(players, hand_evaluator)
    # High-only games still compute each player's low, but never award it
    low_winners = _find_low_winners(players, hand_evaluator) if hi_lo else []

    logger.info(
        f"Showdown: high to {high_winners}, "
        f"low to {low_winners if low_winners else 'no one'}"
    )
    return ShowdownResult(
        players=players,
        high_winners=high_winners,
        low_winners=low_winners,
        hi_lo=hi_lo
    )


def _check_unique_cards(hands: Mapping[str, Sequence[Card]], community_cards: Sequence[Card]) -> None:
    """Every card may appear only once across all hole cards and the board."""
    seen: set[Card] = set(community_cards)
    if len(seen) != len(community_cards):
        raise InvalidHandError(f"Duplicate cards on the board: {[str(c) for c in community_cards]}")
    for player_id, hole_cards in hands.items():
        for card in hole_cards:
            if card in seen:
                logger.warning(f"Card {card} held by player {player_id} is already in play")
                raise InvalidHandError(f"Card {card} appears more than once in the showdown")
            seen.add(card)


def _find_high_winners(players: dict[str, PlayerResult], hand_evaluator: HandEvaluator) -> list[str]:
    """Find best high hand(s) among players."""
    best_ids: list[str] = []
    best: Optional[Evaluation] = None
    for player_id, result in players.items():
        current = result.evaluation
        if best is None or current.category > best.category:
            best_ids = [player_id]
            best = current
        elif current.category == best.category:
            comparison = hand_evaluator.compare_high(current.high_hand, best.high_hand, current.category)
            if comparison < 0:  # Current hand better
                best_ids = [player_id]
                best = current
            elif comparison == 0:  # Tie
                best_ids.append(player_id)
    return best_ids


def _find_low_winners(players: dict[str, PlayerResult], hand_evaluator: HandEvaluator) -> list[str]:
    """Find best qualifying low(s) among players."""
    best_ids: list[str] = []
    best_low = None
    for player_id, result in players.items():
        low_hand = result.evaluation.low_hand
        if low_hand is None:
            continue
        if best_low is None:
            best_ids = [player_id]
            best_low = low_hand
            continue
        comparison = hand_evaluator.compare_low(low_hand, best_low)
        if comparison < 0:
            best_ids = [player_id]
            best_low = low_hand
        elif comparison == 0:
            best_ids.append(player_id)
    return best_ids
