"""Logging setup for the API process; engine modules only call get_logger."""

import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: Union[str, int] = "INFO") -> None:
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    # basicConfig is a no-op once handlers exist, so apply the level to the package logger too
    logging.getLogger("growthcalc").setLevel(level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
