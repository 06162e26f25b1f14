"""Sentinel normalizer: replaces nulls with a column's configured ``no_value``."""

from __future__ import annotations

import math
from typing import Any, Optional

from framegaps.frame.frame import Column, Frame


def parse_no_value(no_value: Any) -> Optional[float]:
    """Parse a ``no_value`` setting as a finite number, or None if it doesn't parse."""
    if no_value is None or isinstance(no_value, bool):
        return None
    if isinstance(no_value, str):
        no_value = no_value.strip()
        if not no_value:
            return None
    try:
        parsed = float(no_value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(parsed):
        return None
    return parsed


def _substitute(parsed: float) -> float | int:
    return int(parsed) if parsed.is_integer() else parsed


def column_needs_no_value(column: Column) -> bool:
    """True when ``column`` has a usable no_value and at least one None to replace."""
    return parse_no_value(column.config.no_value) is not None and any(v is None for v in column.values)


def apply_no_value(frame: Frame) -> Frame:
    """Replace None with each column's parsed ``no_value``, in place.

    UNDEFINED entries are left alone. Returns ``frame``.
    """
    for col in frame.columns:
        parsed = parse_no_value(col.config.no_value)
        if parsed is None:
            continue
        substitute = _substitute(parsed)
        values = col.values
        for i, value in enumerate(values):
            if value is None:
                values[i] = substitute
    return frame
