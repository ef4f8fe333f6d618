from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt

from quiz_trends.models import AccuracySeries
from quiz_trends.viz.accuracy import (
    plot_category_accuracy,
    plot_comparison,
    plot_overall_accuracy,
    union_labels,
)


def test_union_labels_orders_weeks_numerically_and_dates_chronologically() -> None:
    weeks = union_labels(
        AccuracySeries(labels=("2", "10"), values=(50.0, 75.0)),
        AccuracySeries(labels=("3",), values=(0.0,)),
    )
    assert weeks == ["2", "3", "10"]

    days = union_labels(
        AccuracySeries(labels=("2024-02-01",), values=(50.0,)),
        AccuracySeries(labels=("2024-01-15", "2024-02-01"), values=(0.0, 100.0)),
    )
    assert days == ["2024-01-15", "2024-02-01"]


def test_plots_write_files(tmp_path: Path) -> None:
    series = AccuracySeries(labels=("1", "2", "3"), values=(20.0, 50.0, 80.0))
    other = AccuracySeries(labels=("2", "4"), values=(100.0, 0.0))

    overall = plot_overall_accuracy(series, tmp_path / "overall.png")
    category = plot_category_accuracy(series, "math", tmp_path / "category.png")
    comparison = plot_comparison(series, other, "math", "science", tmp_path / "comparison.png")

    for path in (overall, category, comparison):
        assert path.exists()


def test_plots_handle_empty_series(tmp_path: Path) -> None:
    empty = AccuracySeries()

    assert plot_overall_accuracy(empty, tmp_path / "overall.png").exists()
    assert plot_category_accuracy(empty, "", tmp_path / "category.png").exists()
    assert plot_comparison(empty, empty, "", "", tmp_path / "comparison.png").exists()


def test_plots_release_their_figures(tmp_path: Path) -> None:
    plt.close("all")
    series = AccuracySeries(labels=("1", "2"), values=(40.0, 90.0))

    plot_overall_accuracy(series, tmp_path / "overall.png")
    plot_category_accuracy(series, "math", tmp_path / "category.png")
    plot_comparison(series, series, "math", "math", tmp_path / "comparison.png")

    assert plt.get_fignums() == []
