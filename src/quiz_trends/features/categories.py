from __future__ import annotations

from collections.abc import Iterable

from quiz_trends.models import Attempt


def extract_categories(attempts: Iterable[Attempt]) -> frozenset[str]:
    return frozenset(attempt.category for attempt in attempts)


def category_options(categories: Iterable[str]) -> list[str]:
    """Sorted labels for a category selection menu."""
    return sorted(set(categories))
