from __future__ import annotations

import logging

from quiz_trends.config import LogLevel

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Chart backends log font discovery at DEBUG; keep them out of quiz-trends debug runs.
NOISY_LOGGERS = ("matplotlib", "PIL")


def configure_logging(level: LogLevel = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("quiz_trends").setLevel(level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(logging.WARNING, logging.getLevelName(level)))
