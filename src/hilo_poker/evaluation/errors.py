"""Exceptions raised by hand evaluation."""
from typing import Optional


class EvaluationError(ValueError):
    """Base class for evaluation failures."""


class InvalidHandError(EvaluationError):
    """A hand does not hold exactly five distinct cards, or breaks a comparator precondition."""


class InsufficientCardsError(EvaluationError):
    """
    Not enough private or community cards to build a legal hand.

    Recoverable: callers show this as "cannot evaluate yet" and retry once
    more cards are dealt.

    Attributes:
        rule: Card count rule that could not be satisfied
        private_count: Number of private cards supplied
        community_count: Number of community cards supplied
    """

    def __init__(
        self,
        message: str,
        rule: Optional[str] = None,
        private_count: int = 0,
        community_count: int = 0
    ):
        super().__init__(message)
        self.rule = rule
        self.private_count = private_count
        self.community_count = community_count
