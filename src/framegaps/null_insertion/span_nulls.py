"""Span-null reducer.

Converts null runs into UNDEFINED where the surrounding gap on the reference
axis is shorter than a column's span threshold, so a renderer may bridge them.
Mutates column values in place.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Optional, Sequence

from framegaps.conventions import SPAN_NULLS_DISABLED, UNDEFINED, is_absent
from framegaps.frame.frame import Column, Frame
from framegaps.null_insertion.threshold import get_ref_column


def null_to_undefined_threshold(
    ref_values: Sequence[float],
    values: list[Any],
    max_threshold: float,
) -> list[Any]:
    """Replace null runs with UNDEFINED where the bridged gap is < ``max_threshold``.

    Leading nulls (before the first non-null) are never converted. A non-null
    value whose reference value is absent has no position to measure from: it
    neither closes a run nor moves the measuring point, and is left as is.
    Mutates and returns ``values``.
    """
    prev_ref: Optional[float] = None
    null_idx: Optional[int] = None

    for i, value in enumerate(values):
        if is_absent(value):
            if null_idx is None and prev_ref is not None:
                null_idx = i
        elif is_absent(ref_values[i]):
            continue
        else:
            if null_idx is not None:
                if ref_values[i] - prev_ref < max_threshold:
                    for k in range(null_idx, i):
                        if is_absent(values[k]):
                            values[k] = UNDEFINED
                null_idx = None
            prev_ref = ref_values[i]

    return values


def span_threshold(column: Column) -> Optional[float]:
    """The column's span threshold, or None when span bridging is off for it."""
    span = column.config.span_nulls
    if isinstance(span, bool) or not isinstance(span, (int, float)):
        return None
    if span == SPAN_NULLS_DISABLED or not math.isfinite(span) or span <= 0:
        return None
    return float(span)


def apply_span_nulls_thresholds(
    frame: Frame,
    is_column_visible: Callable[[Column], bool],
    ref_field_name: Optional[str] = None,
) -> Frame:
    """Run :func:`null_to_undefined_threshold` over the eligible columns of ``frame``.

    Columns for which ``is_column_visible`` returns True are skipped, as is the
    reference column. Mutates ``frame`` in place and returns it; the caller must
    own the frame exclusively.
    """
    ref_column = get_ref_column(frame, ref_field_name)
    if ref_column is None:
        return frame

    for col in frame.columns:
        if col is ref_column or is_column_visible(col):
            continue
        threshold = span_threshold(col)
        if threshold is not None:
            null_to_undefined_threshold(ref_column.values, col.values, threshold)

    return frame
