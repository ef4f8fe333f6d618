from __future__ import annotations

from typing import Literal

from quiz_trends.config import BandsConfig
from quiz_trends.models import AccuracySeries

AccuracyBand = Literal["strong", "moderate", "weak"]

BAND_COLORS: dict[str, str] = {
    "strong": "#4bc0c0",
    "moderate": "#ffa500",
    "weak": "#ff6384",
}


def classify_accuracy(value: float, thresholds: BandsConfig | None = None) -> AccuracyBand:
    thresholds = thresholds or BandsConfig()
    if value > thresholds.strong_above:
        return "strong"
    if value >= thresholds.moderate_from:
        return "moderate"
    return "weak"


def classify_series(
    series: AccuracySeries,
    thresholds: BandsConfig | None = None,
) -> list[AccuracyBand]:
    return [classify_accuracy(value, thresholds) for value in series.values]
