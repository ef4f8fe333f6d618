from __future__ import annotations

import logging
import re
from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime

from quiz_trends.config import ColumnsConfig
from quiz_trends.models import Attempt

LOGGER = logging.getLogger(__name__)

TRUE_VALUES = frozenset({"true", "1"})
FALSE_VALUES = frozenset({"false", "0"})

# Accepts unpadded months/days ("2024-2-1"), optionally followed by an ISO time part.
_DATE_PREFIX = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})(.*)$")


class RowNormalizationError(ValueError):
    def __init__(self, field_name: str, reason: str) -> None:
        super().__init__(f"{field_name}: {reason}")
        self.field_name = field_name
        self.reason = reason


@dataclass(frozen=True)
class NormalizedRows:
    attempts: tuple[Attempt, ...]
    skipped: int = 0
    skip_reasons: dict[str, int] = field(default_factory=dict)

    @property
    def total_rows(self) -> int:
        return len(self.attempts) + self.skipped


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_quiz_date(value: object) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if _is_blank(value):
        raise RowNormalizationError("quiz_date", "missing")

    text = str(value).strip()
    match = _DATE_PREFIX.match(text)
    if match is None:
        raise RowNormalizationError("quiz_date", f"not an ISO date: {text!r}")
    year, month, day, remainder = match.groups()
    try:
        parsed = date(int(year), int(month), int(day))
        if remainder:
            datetime.fromisoformat(parsed.isoformat() + remainder)
    except ValueError as exc:
        raise RowNormalizationError("quiz_date", f"not an ISO date: {text!r}") from exc
    return parsed


def parse_category(value: object) -> str:
    if _is_blank(value):
        raise RowNormalizationError("category", "missing")
    return str(value).strip()


def parse_correctness(value: object) -> bool:
    """Map a ``true``/``false`` or ``1``/``0`` encoding onto a boolean."""
    if isinstance(value, bool):
        return value
    if _is_blank(value):
        raise RowNormalizationError("correctness", "missing")
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise RowNormalizationError("correctness", f"unrecognized encoding: {value!r}")


def normalize_row(row: Mapping[str, object], columns: ColumnsConfig | None = None) -> Attempt:
    columns = columns or ColumnsConfig()
    return Attempt(
        date=parse_quiz_date(row.get(columns.quiz_date)),
        category=parse_category(row.get(columns.category)),
        correct=parse_correctness(row.get(columns.correctness)),
    )


def normalize_rows(
    rows: Iterable[Mapping[str, object]],
    columns: ColumnsConfig | None = None,
) -> NormalizedRows:
    """Normalize every row, dropping (and counting) the ones that fail validation."""
    attempts: list[Attempt] = []
    reasons: Counter[str] = Counter()
    for index, row in enumerate(rows):
        try:
            attempts.append(normalize_row(row, columns=columns))
        except RowNormalizationError as exc:
            reasons[exc.field_name] += 1
            LOGGER.debug("Skipping row %d: %s", index, exc)

    skipped = sum(reasons.values())
    if skipped:
        LOGGER.warning(
            "Skipped %d of %d rows that failed normalization (%s)",
            skipped,
            skipped + len(attempts),
            ", ".join(f"{name}={count}" for name, count in sorted(reasons.items())),
        )
    return NormalizedRows(attempts=tuple(attempts), skipped=skipped, skip_reasons=dict(reasons))
