from __future__ import annotations

import pytest

from quiz_trends.config import BandsConfig
from quiz_trends.features.bands import classify_accuracy, classify_series
from quiz_trends.models import AccuracySeries


@pytest.mark.parametrize(
    ("value", "band"),
    [(100.0, "strong"), (60.5, "strong"), (60.0, "moderate"), (35.0, "moderate"), (34.9, "weak")],
)
def test_classify_accuracy_default_thresholds(value: float, band: str) -> None:
    assert classify_accuracy(value) == band


def test_classify_series_uses_configured_thresholds() -> None:
    series = AccuracySeries(labels=("1", "2", "3"), values=(90.0, 75.0, 10.0))
    thresholds = BandsConfig(strong_above=80.0, moderate_from=50.0)
    assert classify_series(series, thresholds) == ["strong", "moderate", "weak"]
