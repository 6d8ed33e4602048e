# wpmedia/common/dates.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from wpmedia.common.logging import get_logger

logger = get_logger(__name__)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse a REST date-time string (e.g. "2024-03-01T10:15:00" or with an
    offset / trailing "Z") into a datetime.

    Empty or missing values give None. Unparseable strings also give None,
    with a warning, so a bad date never fails the whole record.
    Naive inputs stay naive: the remote site's local time is not known here.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        logger.warning("Unparseable date-time value %r; leaving it unset", text)
        return None
