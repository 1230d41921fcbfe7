"""Hi-lo community card poker hand evaluation package."""

from hilo_poker.core.card import Card, Rank, Suit
from hilo_poker.core.deck import Deck
from hilo_poker.core.hand import FiveCardHand, parse_cards
from hilo_poker.evaluation.errors import EvaluationError, InsufficientCardsError, InvalidHandError
from hilo_poker.evaluation.evaluator import HandEvaluator, evaluator
from hilo_poker.evaluation.hand_description import HandDescriber, describer
from hilo_poker.evaluation.showdown import ShowdownResult, evaluate_showdown
from hilo_poker.evaluation.types import CardCountRule, Evaluation, HandCategory
from hilo_poker.config.variants import GameVariant, load_variant

classify = evaluator.classify
compare_high = evaluator.compare_high
is_qualifying_low = evaluator.is_qualifying_low
compare_low = evaluator.compare_low
find_best = evaluator.find_best
describe_high = describer.describe_high
describe_low = describer.describe_low

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Deck",
    "FiveCardHand",
    "parse_cards",
    "EvaluationError",
    "InsufficientCardsError",
    "InvalidHandError",
    "HandEvaluator",
    "HandDescriber",
    "ShowdownResult",
    "evaluate_showdown",
    "CardCountRule",
    "Evaluation",
    "HandCategory",
    "GameVariant",
    "load_variant",
    "classify",
    "compare_high",
    "is_qualifying_low",
    "compare_low",
    "find_best",
    "describe_high",
    "describe_low",
]
