# wpmedia/common/logging.py
from __future__ import annotations

import logging

from wpmedia.common.settings import get_settings


def get_logger(name: str = "wpmedia", level: int | str | None = None) -> logging.Logger:
    """
    Return a named logger for the adapter, at `level` or else the
    configured LOG_LEVEL.
    If no handlers are set anywhere, we add a basicConfig once so messages
    are visible when the adapter is used from a plain script.
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.setLevel(level)
    return logger
