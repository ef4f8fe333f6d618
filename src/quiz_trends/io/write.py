from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from quiz_trends.config import TableFormat
from quiz_trends.features.aggregates import AggregationTable


def write_table(table: AggregationTable, path: Path, fmt: TableFormat) -> Path:
    frame = table.to_frame()
    path.parent.mkdir(parents=True, exist_ok=True)
    if fmt == "parquet":
        frame.to_parquet(path, index=False)
    elif fmt == "csv":
        frame.to_csv(path, index=False)
    else:
        raise ValueError(f"Unsupported table format: {fmt}")
    return path


def write_summary(data: dict[str, Any], path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
    return path
