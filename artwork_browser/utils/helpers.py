"""Helper utilities for text normalisation and logging."""

from __future__ import annotations

import logging
from typing import Optional

import pandas as pd

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a module logger with a single stream handler attached."""
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(logging.INFO)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger


def normalize_text(value: object) -> str:
    """Normalize a value into a stripped string, or empty string for nulls."""
    if value is None:
        return ""
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        pass
    return str(value).strip()


def normalize_year(value: object) -> Optional[int]:
    """Coerce a remote year value into an int, or None when absent or unparsable."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    raw_value = normalize_text(value)
    if not raw_value:
        return None
    try:
        return int(float(raw_value))
    except ValueError:
        return None
