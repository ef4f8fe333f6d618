from __future__ import annotations

import math
from collections.abc import Callable
from datetime import date

from quiz_trends.models import Attempt, BucketKey

BucketFn = Callable[[Attempt], BucketKey]


def week_of_year(value: date) -> int:
    """Week index anchored to January 1st rather than to the nearest Monday.

    Week 1 runs from January 1st through the first Saturday of the year, and every
    later week starts on a Sunday. This is not ISO-8601 week numbering and differs
    from it around year boundaries.
    """
    start_of_year = date(value.year, 1, 1)
    days_since_start = (value - start_of_year).days
    # date.weekday() is Monday=0; the offset counts from Sunday=0.
    start_offset = (start_of_year.weekday() + 1) % 7
    return math.ceil((days_since_start + start_offset + 1) / 7)


def day_bucket(attempt: Attempt) -> date:
    return attempt.date


def week_bucket(attempt: Attempt) -> int:
    return week_of_year(attempt.date)


BUCKET_FUNCTIONS: dict[str, BucketFn] = {
    "day": day_bucket,
    "week": week_bucket,
}


def bucket_function(granularity: str) -> BucketFn:
    try:
        return BUCKET_FUNCTIONS[granularity]
    except KeyError:
        options = ", ".join(sorted(BUCKET_FUNCTIONS))
        raise ValueError(
            f"Unsupported granularity {granularity!r}; expected one of {options}"
        ) from None


def bucket_label(key: BucketKey) -> str:
    if isinstance(key, date):
        return key.isoformat()
    return str(key)
