from __future__ import annotations

from datetime import date

from quiz_trends.features.categories import category_options, extract_categories
from quiz_trends.models import Attempt


def test_extract_categories_deduplicates_case_sensitively() -> None:
    attempts = [
        Attempt(date=date(2024, 1, 2), category="math", correct=True),
        Attempt(date=date(2024, 1, 3), category="math", correct=False),
        Attempt(date=date(2024, 1, 3), category="Math", correct=False),
        Attempt(date=date(2024, 1, 4), category="science", correct=True),
    ]
    assert extract_categories(attempts) == frozenset({"math", "Math", "science"})


def test_extract_categories_empty_input() -> None:
    assert extract_categories([]) == frozenset()


def test_category_options_are_sorted() -> None:
    assert category_options({"science", "history", "math"}) == ["history", "math", "science"]
