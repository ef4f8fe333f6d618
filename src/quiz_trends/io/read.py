from __future__ import annotations

import csv
import logging
from pathlib import Path

from quiz_trends.config import ColumnsConfig

LOGGER = logging.getLogger(__name__)

# DictReader key collecting cells beyond the header width.
_EXTRA_FIELDS = "__extra__"


class SourceUnavailableError(RuntimeError):
    """Raised when the attempts CSV cannot be read or decoded."""


def _validate_required_columns(fieldnames: list[str], columns: ColumnsConfig) -> None:
    required = [columns.quiz_date, columns.category, columns.correctness]
    missing = [column for column in required if column not in fieldnames]
    if missing:
        missing_str = ", ".join(missing)
        raise SourceUnavailableError(f"Missing required columns in CSV: {missing_str}")


def load_rows(csv_path: Path, columns: ColumnsConfig | None = None) -> list[dict[str, str]]:
    """Read a quiz results CSV into header-keyed text rows.

    Lines with more cells than the header are dropped and logged while the rest
    of the file still loads. Short lines keep their missing cells as empty
    strings, which normalization rejects later.
    """
    columns = columns or ColumnsConfig()
    rows: list[dict[str, str]] = []
    dropped_lines: list[int] = []
    try:
        # utf-8-sig strips BOM-prefixed headers commonly found in exported CSV files.
        with csv_path.open("r", encoding="utf-8-sig", newline="") as handle:
            reader = csv.DictReader(handle, restkey=_EXTRA_FIELDS, restval="")
            if not reader.fieldnames:
                raise SourceUnavailableError(f"No header row in {csv_path}")
            _validate_required_columns(list(reader.fieldnames), columns)
            for row in reader:
                if _EXTRA_FIELDS in row:
                    dropped_lines.append(reader.line_num)
                    LOGGER.debug(
                        "Dropping line %d of %s: %d cells beyond the header",
                        reader.line_num,
                        csv_path,
                        len(row[_EXTRA_FIELDS]),
                    )
                    continue
                rows.append(row)
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise SourceUnavailableError(f"Could not read attempts from {csv_path}: {exc}") from exc

    if dropped_lines:
        LOGGER.warning(
            "Dropped %d lines with more cells than the header in %s (lines %s)",
            len(dropped_lines),
            csv_path,
            ", ".join(str(line) for line in dropped_lines),
        )
    return rows
