from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes

from quiz_trends.config import BandsConfig
from quiz_trends.features.bands import BAND_COLORS, classify_series
from quiz_trends.models import AccuracySeries
from quiz_trends.viz.common import save_figure

NO_DATA_TEXT = "No data for this selection"


def _label_sort_key(label: str) -> tuple[int, int, str]:
    # Week labels are bare integers; day labels are zero-padded ISO dates.
    if label.isdigit():
        return (0, int(label), label)
    return (1, 0, label)


def union_labels(first: AccuracySeries, second: AccuracySeries) -> list[str]:
    return sorted(set(first.labels) | set(second.labels), key=_label_sort_key)


def _format_accuracy_axes(ax: Axes, title: str, xlabel: str) -> None:
    ax.set_title(title)
    ax.set_xlabel(xlabel)
    ax.set_ylabel("Correctness (%)")
    ax.set_ylim(0, 100)


def _mark_empty(ax: Axes) -> None:
    ax.text(0.5, 0.5, NO_DATA_TEXT, ha="center", va="center", transform=ax.transAxes)


def plot_overall_accuracy(
    series: AccuracySeries,
    output_path: Path,
    xlabel: str = "Date",
) -> Path:
    fig, ax = plt.subplots(figsize=(12, 4))
    if series.is_empty:
        _mark_empty(ax)
    else:
        positions = np.arange(len(series))
        ax.plot(positions, series.values, linewidth=1.5, color="#4bc0c0", marker="o")
        ax.fill_between(positions, series.values, color="#4bc0c0", alpha=0.2)
        ax.set_xticks(positions, series.labels, rotation=45, ha="right")
    _format_accuracy_axes(ax, "Overall improvement over time", xlabel)
    return save_figure(fig, output_path)


def plot_category_accuracy(
    series: AccuracySeries,
    category: str,
    output_path: Path,
    thresholds: BandsConfig | None = None,
    xlabel: str = "Week",
) -> Path:
    """Bar chart for one category, each bar coloured by its accuracy band."""
    fig, ax = plt.subplots(figsize=(10, 4))
    if series.is_empty:
        _mark_empty(ax)
    else:
        colors = [BAND_COLORS[band] for band in classify_series(series, thresholds)]
        ax.bar(series.labels, series.values, color=colors, edgecolor=colors, alpha=0.6)
    _format_accuracy_axes(ax, f"{category or 'No category'} improvement", xlabel)
    return save_figure(fig, output_path)


def plot_comparison(
    first: AccuracySeries,
    second: AccuracySeries,
    first_category: str,
    second_category: str,
    output_path: Path,
    xlabel: str = "Week",
) -> Path:
    labels = union_labels(first, second)
    fig, ax = plt.subplots(figsize=(10, 4))
    if not labels:
        _mark_empty(ax)
    else:
        positions = np.arange(len(labels))
        width = 0.4
        for offset, series, category, color in (
            (-width / 2, first, first_category, "#4bc0c0"),
            (width / 2, second, second_category, "#ff6384"),
        ):
            lookup = dict(zip(series.labels, series.values))
            heights = [lookup.get(label, np.nan) for label in labels]
            ax.bar(
                positions + offset,
                heights,
                width=width,
                color=color,
                alpha=0.6,
                label=category or "(none)",
            )
        ax.set_xticks(positions, labels)
        ax.legend()
    _format_accuracy_axes(ax, "Compare improvement", xlabel)
    return save_figure(fig, output_path)
