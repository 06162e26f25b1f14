"""Batch entry point: null insertion then no_value normalization per frame."""

from __future__ import annotations

from typing import Iterable

from framegaps.frame.frame import Frame
from framegaps.null_insertion.insert_modes import InsertMode
from framegaps.null_insertion.no_value import apply_no_value, column_needs_no_value
from framegaps.null_insertion.null_insert import apply_null_insert_threshold
from framegaps.null_insertion.options import NullInsertOptions, TimeRange
from framegaps.utils.logging import get_logger

logger = get_logger(__name__)


def process_frame(frame: Frame, time_range: TimeRange) -> Frame:
    """Process one frame bounded by ``time_range``. The input frame is never mutated.

    A reversed ``time_range`` contributes no bounds: only gaps between present
    samples are filled.
    """
    bounded = not time_range.is_empty
    opts = NullInsertOptions(
        ref_field_pseudo_min=time_range.start if bounded else None,
        ref_field_pseudo_max=time_range.end if bounded else None,
        insert_mode=InsertMode.THRESHOLD,
    )
    result = apply_null_insert_threshold(frame, opts)

    # insertion may hand back the caller's frame; normalization mutates
    if result is frame and any(column_needs_no_value(c) for c in frame.columns):
        result = frame.copy()

    return apply_no_value(result)


def process_null_values(frames: Iterable[Frame], time_range: TimeRange) -> list[Frame]:
    """Run :func:`process_frame` over every frame, preserving order.

    The span-null pass is not part of this pipeline; callers that want
    bridging call ``apply_span_nulls_thresholds`` on the results.
    """
    results = [process_frame(frame, time_range) for frame in frames]
    logger.debug("processed %d frames for range %s..%s", len(results), time_range.start, time_range.end)
    return results
