from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

import pandas as pd

from quiz_trends.models import AggregationBucket, Attempt, BucketKey
from quiz_trends.preprocess.buckets import BucketFn, bucket_label

# Group key of a table aggregated without categories.
OVERALL = None

TABLE_COLUMNS = ["category", "bucket", "n_correct", "n_total", "accuracy"]


@dataclass(frozen=True)
class AggregationTable:
    """Read-only snapshot of correct/total counts per category and bucket.

    Flat tables hold a single group under :data:`OVERALL`.
    """

    groups: Mapping[str | None, Mapping[BucketKey, AggregationBucket]]
    grouped: bool

    def __iter__(self) -> Iterator[str | None]:
        return iter(self.groups)

    def __contains__(self, category: object) -> bool:
        return category in self.groups

    def __len__(self) -> int:
        return len(self.groups)

    @property
    def is_empty(self) -> bool:
        return not self.groups

    @property
    def categories(self) -> frozenset[str]:
        if not self.grouped:
            return frozenset()
        return frozenset(key for key in self.groups if key is not None)

    def buckets_for(self, category: str | None) -> Mapping[BucketKey, AggregationBucket]:
        return self.groups.get(category, MappingProxyType({}))

    def overall_buckets(self) -> dict[BucketKey, AggregationBucket]:
        """Per-bucket sums across every group."""
        merged: dict[BucketKey, AggregationBucket] = {}
        for buckets in self.groups.values():
            for key, bucket in buckets.items():
                merged[key] = merged[key] + bucket if key in merged else bucket
        return merged

    def total_attempts(self) -> int:
        return sum(
            bucket.total_count for buckets in self.groups.values() for bucket in buckets.values()
        )

    def to_frame(self) -> pd.DataFrame:
        """Rows ordered by category, then chronologically by bucket."""
        records = [
            {
                "category": category,
                "bucket": bucket_label(key),
                "n_correct": bucket.correct_count,
                "n_total": bucket.total_count,
                "accuracy": bucket.ratio,
            }
            for category, buckets in sorted(self.groups.items(), key=lambda item: item[0] or "")
            for key, bucket in sorted(buckets.items())
        ]
        return pd.DataFrame.from_records(records, columns=TABLE_COLUMNS)


def aggregate(
    attempts: Sequence[Attempt],
    bucket_fn: BucketFn,
    group_by_category: bool,
) -> AggregationTable:
    """Count correct and total attempts per bucket, optionally nested under category."""
    if not attempts:
        return AggregationTable(groups=MappingProxyType({}), grouped=group_by_category)

    frame = pd.DataFrame(
        {
            "category": [
                attempt.category if group_by_category else "" for attempt in attempts
            ],
            "bucket": [bucket_fn(attempt) for attempt in attempts],
            "correct": [bool(attempt.correct) for attempt in attempts],
        }
    )
    counts = frame.groupby(["category", "bucket"], sort=False).agg(
        n_correct=("correct", "sum"),
        n_total=("correct", "count"),
    )

    groups: dict[str | None, dict[BucketKey, AggregationBucket]] = {}
    for (category, key), row in zip(counts.index, counts.itertuples(index=False)):
        group_key = category if group_by_category else OVERALL
        groups.setdefault(group_key, {})[_native_key(key)] = AggregationBucket(
            correct_count=int(row.n_correct),
            total_count=int(row.n_total),
        )

    return AggregationTable(
        groups=MappingProxyType(
            {category: MappingProxyType(buckets) for category, buckets in groups.items()}
        ),
        grouped=group_by_category,
    )


def _native_key(key: object) -> BucketKey:
    # groupby hands integer keys back as numpy scalars.
    if hasattr(key, "item") and not isinstance(key, pd.Timestamp):
        return key.item()
    return key  # type: ignore[return-value]
