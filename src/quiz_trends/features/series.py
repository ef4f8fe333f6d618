from __future__ import annotations

from collections.abc import Mapping

from quiz_trends.features.aggregates import OVERALL, AggregationTable
from quiz_trends.models import AccuracySeries, AggregationBucket, BucketKey
from quiz_trends.preprocess.buckets import bucket_label


def series_from_buckets(buckets: Mapping[BucketKey, AggregationBucket]) -> AccuracySeries:
    # Keys are dates or week numbers, so native ordering is chronological.
    keys = sorted(buckets)
    return AccuracySeries(
        labels=tuple(bucket_label(key) for key in keys),
        values=tuple(buckets[key].ratio for key in keys),
    )


def build_series(table: AggregationTable, category: str | None = None) -> AccuracySeries:
    """Build the accuracy series for one category, or for all attempts when ``category`` is None.

    A category the table does not contain (including the empty "none selected"
    value) produces an empty series. Periods without attempts are left out.
    """
    if category is None:
        if table.grouped:
            return series_from_buckets(table.overall_buckets())
        return series_from_buckets(table.buckets_for(OVERALL))
    if not table.grouped or category not in table:
        return AccuracySeries()
    return series_from_buckets(table.buckets_for(category))
