from __future__ import annotations

from quiz_trends.features.aggregates import AggregationTable
from quiz_trends.features.series import build_series
from quiz_trends.models import AccuracySeries


def compare(
    table: AggregationTable,
    category_a: str,
    category_b: str,
) -> tuple[AccuracySeries, AccuracySeries]:
    """Series for two categories, built independently and left unaligned."""
    return build_series(table, category_a), build_series(table, category_b)
