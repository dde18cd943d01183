"""Normalization helpers.

Centralizes the lenient parsing applied to values read back from the data
file. Every helper returns ``None`` when the value cannot be used, so the
caller decides which zero value to fall back to.
"""

from __future__ import annotations

import math
from typing import Any


def safe_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        result = float(value)
    elif isinstance(value, str):
        try:
            result = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(result):
        return None
    return result


def safe_int(value: Any) -> int | None:
    """Parse an integer the way the data file stores it.

    Numbers are truncated toward zero; strings must hold an integer
    literal (``"2022"`` parses, ``"20.5"`` does not).
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def safe_bool(value: Any) -> bool | None:
    """Return a boolean for ``True``/``False`` or a ``"true"``/``"false"`` string.

    Any other string is ``False``; non-string, non-boolean values are
    unusable.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return None


def safe_str(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    return None


def or_default(value: Any, default: Any) -> Any:
    """Return *default* when *value* is ``None``."""
    return default if value is None else value
