from __future__ import annotations

from datetime import date

import pytest

from quiz_trends.config import ColumnsConfig
from quiz_trends.models import Attempt
from quiz_trends.preprocess.records import (
    RowNormalizationError,
    normalize_row,
    normalize_rows,
    parse_correctness,
    parse_quiz_date,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("true", True), ("TRUE", True), (" False ", False), ("1", True), ("0", False), (True, True)],
)
def test_parse_correctness_accepts_known_encodings(raw: object, expected: bool) -> None:
    assert parse_correctness(raw) is expected


@pytest.mark.parametrize("raw", ["maybe", "yes", "2", "t", None, ""])
def test_parse_correctness_rejects_unknown_or_missing_values(raw: object) -> None:
    with pytest.raises(RowNormalizationError) as excinfo:
        parse_correctness(raw)
    assert excinfo.value.field_name == "correctness"


def test_parse_quiz_date_handles_unpadded_and_timestamped_values() -> None:
    assert parse_quiz_date("2024-01-02") == date(2024, 1, 2)
    assert parse_quiz_date("2024-2-1") == date(2024, 2, 1)
    assert parse_quiz_date("2024-10-01T09:30:00") == date(2024, 10, 1)
    assert parse_quiz_date(" 2024-10-01 09:30 ") == date(2024, 10, 1)


@pytest.mark.parametrize("raw", ["", "not-a-date", "2024-13-01", "2024-02-30", "02/01/2024", None])
def test_parse_quiz_date_rejects_invalid_values(raw: object) -> None:
    with pytest.raises(RowNormalizationError, match="quiz_date"):
        parse_quiz_date(raw)


def test_normalize_row_builds_attempt_and_ignores_extra_fields() -> None:
    attempt = normalize_row(
        {"quiz_date": "2024-01-02", "category": " math ", "correctness": "true", "notes": "x"}
    )
    assert attempt == Attempt(date=date(2024, 1, 2), category="math", correct=True)


def test_normalize_row_rejects_blank_category() -> None:
    with pytest.raises(RowNormalizationError, match="category"):
        normalize_row({"quiz_date": "2024-01-02", "category": "   ", "correctness": "1"})


def test_normalize_row_uses_configured_column_names() -> None:
    columns = ColumnsConfig(quiz_date="Date", category="Topic", correctness="Correct")
    attempt = normalize_row({"Date": "2024-03-05", "Topic": "Science", "Correct": "0"}, columns)
    assert attempt == Attempt(date=date(2024, 3, 5), category="Science", correct=False)


def test_attempt_is_immutable() -> None:
    attempt = Attempt(date=date(2024, 1, 2), category="math", correct=True)
    with pytest.raises(AttributeError):
        attempt.correct = False  # type: ignore[misc]


def test_normalize_rows_skips_and_counts_bad_rows(caplog: pytest.LogCaptureFixture) -> None:
    rows = [
        {"quiz_date": "2024-01-02", "category": "math", "correctness": "true"},
        {"quiz_date": "2024-01-02", "category": "math", "correctness": "maybe"},
        {"quiz_date": "yesterday", "category": "math", "correctness": "1"},
        {"quiz_date": "2024-01-03", "category": "", "correctness": "0"},
        {"quiz_date": "2024-01-03", "category": "science", "correctness": "0"},
    ]

    with caplog.at_level("WARNING"):
        result = normalize_rows(rows)

    assert [attempt.category for attempt in result.attempts] == ["math", "science"]
    assert result.skipped == 3
    assert result.total_rows == 5
    assert result.skip_reasons == {"correctness": 1, "quiz_date": 1, "category": 1}
    assert "Skipped 3 of 5 rows" in caplog.text


def test_normalize_rows_empty_input() -> None:
    result = normalize_rows([])
    assert result.attempts == ()
    assert result.skipped == 0
