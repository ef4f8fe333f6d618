from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from quiz_trends.logging import NOISY_LOGGERS, configure_logging


@pytest.fixture(autouse=True)
def _restore_logger_levels() -> Iterator[None]:
    names = ("quiz_trends", *NOISY_LOGGERS)
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


def test_configure_logging_applies_level_to_package_loggers() -> None:
    configure_logging("DEBUG")

    assert logging.getLogger("quiz_trends").level == logging.DEBUG
    assert logging.getLogger("quiz_trends.io.read").isEnabledFor(logging.DEBUG)


def test_configure_logging_keeps_chart_backends_at_warning_or_above() -> None:
    configure_logging("DEBUG")
    assert logging.getLogger("matplotlib").level == logging.WARNING

    configure_logging("ERROR")
    assert logging.getLogger("quiz_trends").level == logging.ERROR
    assert logging.getLogger("matplotlib").level == logging.ERROR
