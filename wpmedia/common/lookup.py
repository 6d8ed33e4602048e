# wpmedia/common/lookup.py
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

_MISSING = object()


def get_field(obj: Any, key: str, default: Any = None) -> Any:
    """Read `key` from a mapping (decoded JSON) or an attribute object."""
    if obj is None:
        return default
    if isinstance(obj, Mapping):
        return obj.get(key, default)
    return getattr(obj, key, default)


def dig(obj: Any, *path: str | int, default: Any = None) -> Any:
    """
    Walk `path` one step at a time and return the value at its end.

    String steps read a key/attribute, int steps index a list. The first
    missing link (absent key, None, short list, wrong container type)
    collapses the whole lookup to `default`:

        dig(record, "_embedded", "wp:featuredmedia", 0, "source_url", default="")
    """
    cur = obj
    for step in path:
        if isinstance(step, int):
            if isinstance(cur, (str, bytes)) or not isinstance(cur, Sequence):
                return default
            if not -len(cur) <= step < len(cur):
                return default
            cur = cur[step]
        else:
            cur = get_field(cur, step, _MISSING)
            if cur is _MISSING:
                return default
        if cur is None:
            return default
    return cur


def rendered(value: Any) -> str:
    """
    Text of a `{"rendered": ...}` REST field. Plain strings pass through,
    anything else (None, missing `rendered`) becomes "".
    """
    if isinstance(value, str):
        return value
    text = get_field(value, "rendered")
    return "" if text is None else str(text)
