from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from quiz_trends.config import AppConfig
from quiz_trends.features.aggregates import AggregationTable, aggregate
from quiz_trends.features.bands import classify_series
from quiz_trends.features.categories import category_options, extract_categories
from quiz_trends.features.comparison import compare
from quiz_trends.features.series import build_series
from quiz_trends.io.read import load_rows
from quiz_trends.io.write import write_summary, write_table
from quiz_trends.models import AccuracySeries, Attempt
from quiz_trends.paths import build_output_paths
from quiz_trends.preprocess.buckets import bucket_function
from quiz_trends.preprocess.records import NormalizedRows, normalize_rows
from quiz_trends.viz.accuracy import (
    plot_category_accuracy,
    plot_comparison,
    plot_overall_accuracy,
)

LOGGER = logging.getLogger(__name__)

GRANULARITY_AXIS_LABELS = {"day": "Date", "week": "Week"}


@dataclass(frozen=True)
class DashboardData:
    overall_table: AggregationTable
    category_table: AggregationTable
    overall: AccuracySeries
    selected_category: str
    compare_category: str
    selected: AccuracySeries
    comparison: tuple[AccuracySeries, AccuracySeries]
    categories: list[str]

    def summary(self, config: AppConfig) -> dict[str, Any]:
        first, second = self.comparison
        return {
            "categories": self.categories,
            "overall": {
                "granularity": config.aggregation.overall_granularity,
                **self.overall.as_dict(),
            },
            "selected": {
                "category": self.selected_category,
                "granularity": config.aggregation.category_granularity,
                "bands": classify_series(self.selected, config.bands),
                **self.selected.as_dict(),
            },
            "comparison": [
                {"category": self.selected_category, **first.as_dict()},
                {"category": self.compare_category, **second.as_dict()},
            ],
        }


def prepare_attempts(rows: Iterable[Mapping[str, object]], config: AppConfig) -> NormalizedRows:
    return normalize_rows(rows, columns=config.columns)


def build_dashboard(
    attempts: Sequence[Attempt],
    *,
    selected_category: str = "",
    compare_category: str = "",
    config: AppConfig | None = None,
) -> DashboardData:
    """Recompute every chart series for the current selection."""
    config = config or AppConfig()
    overall_table = aggregate(
        attempts,
        bucket_fn=bucket_function(config.aggregation.overall_granularity),
        group_by_category=False,
    )
    category_table = aggregate(
        attempts,
        bucket_fn=bucket_function(config.aggregation.category_granularity),
        group_by_category=True,
    )
    return DashboardData(
        overall_table=overall_table,
        category_table=category_table,
        overall=build_series(overall_table),
        selected_category=selected_category,
        compare_category=compare_category,
        selected=build_series(category_table, selected_category),
        comparison=compare(category_table, selected_category, compare_category),
        categories=category_options(extract_categories(attempts)),
    )


def _render_figures(dashboard: DashboardData, out_dir: Path, config: AppConfig) -> list[Path]:
    paths = build_output_paths(out_dir)
    fmt = config.outputs.figures_format
    overall_axis = GRANULARITY_AXIS_LABELS[config.aggregation.overall_granularity]
    category_axis = GRANULARITY_AXIS_LABELS[config.aggregation.category_granularity]
    first, second = dashboard.comparison
    return [
        plot_overall_accuracy(
            dashboard.overall,
            output_path=paths.figure("overall_accuracy", fmt),
            xlabel=overall_axis,
        ),
        plot_category_accuracy(
            dashboard.selected,
            category=dashboard.selected_category,
            output_path=paths.figure("category_accuracy", fmt),
            thresholds=config.bands,
            xlabel=category_axis,
        ),
        plot_comparison(
            first,
            second,
            first_category=dashboard.selected_category,
            second_category=dashboard.compare_category,
            output_path=paths.figure("comparison", fmt),
            xlabel=category_axis,
        ),
    ]


def run_all(
    csv_path: Path,
    out_dir: Path,
    config: AppConfig,
    *,
    selected_category: str = "",
    compare_category: str = "",
) -> Path:
    """Load attempts from CSV and write tables, figures and a JSON summary."""
    rows = load_rows(csv_path, columns=config.columns)
    normalized = prepare_attempts(rows, config)
    LOGGER.info(
        "Loaded %d attempts from %s (%d rows skipped)",
        len(normalized.attempts),
        csv_path,
        normalized.skipped,
    )

    dashboard = build_dashboard(
        normalized.attempts,
        selected_category=selected_category,
        compare_category=compare_category,
        config=config,
    )

    paths = build_output_paths(out_dir)
    fmt = config.outputs.tables_format
    write_table(dashboard.overall_table, paths.table("overall_accuracy", fmt), fmt=fmt)
    write_table(dashboard.category_table, paths.table("category_accuracy", fmt), fmt=fmt)
    figures = _render_figures(dashboard, out_dir=out_dir, config=config)
    LOGGER.info("Wrote %d figures to %s", len(figures), paths.figures)

    summary = dashboard.summary(config)
    summary["rows"] = {
        "total": normalized.total_rows,
        "normalized": len(normalized.attempts),
        "skipped": normalized.skipped,
        "skip_reasons": normalized.skip_reasons,
    }
    return write_summary(summary, paths.summary_file)
