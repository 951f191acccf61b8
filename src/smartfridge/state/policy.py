"""Fill factor aggregation policy."""

from __future__ import annotations

from collections.abc import Iterable

from smartfridge.config import EMPTY_FILL_THRESHOLD


def is_empty(fill_factor: float, threshold: float = EMPTY_FILL_THRESHOLD) -> bool:
    return fill_factor <= threshold


def average_fill(fill_factors: Iterable[float], threshold: float = EMPTY_FILL_THRESHOLD) -> float:
    """Average the non-empty fill factors.

    Empty containers are left out so one drained carton does not drag down
    the type's fullness. When every container is empty (or there are none)
    the result is exactly ``0.0``.
    """
    non_empty = [value for value in fill_factors if not is_empty(value, threshold)]
    if not non_empty:
        return 0.0
    return sum(non_empty) / len(non_empty)
