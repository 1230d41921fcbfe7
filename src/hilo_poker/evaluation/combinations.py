"""Subset enumeration used by the best-hand search."""
import itertools
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar('T')


def combinations(items: Sequence[T], k: int) -> list[tuple[T, ...]]:
    """
    All k-element subsets of `items`.

    Subsets keep the relative order of `items` and are produced in
    lexicographic order of positions, so the output is stable for identical
    input. Subsets are distinguished by position, not value.

    Args:
        items: Ordered input
        k: Subset size

    Returns:
        [()] if k <= 0, [] if k > len(items), otherwise every subset
    """
    if k <= 0:
        return [()]
    return list(itertools.combinations(tuple(items), k))
