"""Record types shared by the normalizer, aggregator and series builder."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Literal

BucketKey = date | int
Granularity = Literal["day", "week"]

__all__ = [
    "AccuracySeries",
    "AggregationBucket",
    "Attempt",
    "BucketKey",
    "Granularity",
]


@dataclass(frozen=True)
class Attempt:
    """One answered quiz question."""

    date: date
    category: str
    correct: bool


@dataclass(frozen=True)
class AggregationBucket:
    correct_count: int
    total_count: int

    def __post_init__(self) -> None:
        if self.total_count <= 0:
            raise ValueError(f"total_count must be positive, got {self.total_count}")
        if not 0 <= self.correct_count <= self.total_count:
            raise ValueError(
                f"correct_count must be within [0, {self.total_count}], got {self.correct_count}"
            )

    @property
    def ratio(self) -> float:
        """Percentage of correct attempts, in [0, 100]."""
        return self.correct_count / self.total_count * 100.0

    def __add__(self, other: AggregationBucket) -> AggregationBucket:
        return AggregationBucket(
            correct_count=self.correct_count + other.correct_count,
            total_count=self.total_count + other.total_count,
        )


@dataclass(frozen=True)
class AccuracySeries:
    """Ordered chart labels paired with correctness percentages."""

    labels: tuple[str, ...] = ()
    values: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        if len(self.labels) != len(self.values):
            raise ValueError(
                f"labels and values differ in length: {len(self.labels)} != {len(self.values)}"
            )

    @property
    def is_empty(self) -> bool:
        return not self.labels

    def __len__(self) -> int:
        return len(self.labels)

    def as_dict(self) -> dict[str, list]:
        return {"labels": list(self.labels), "values": list(self.values)}
