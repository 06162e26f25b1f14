"""Null insertion entry point.

Resolves the threshold, scans the reference column and re-aligns every value
column so that missing samples show up as explicit None markers.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Optional

from framegaps.frame.frame import Frame
from framegaps.null_insertion.options import NullInsertOptions
from framegaps.null_insertion.realign import realign_frame
from framegaps.null_insertion.scanner import scan_reference
from framegaps.null_insertion.threshold import ThresholdKind, get_ref_column, resolve_threshold
from framegaps.utils.logging import get_logger

logger = get_logger(__name__)


def apply_null_insert_threshold(
    frame: Frame,
    options: Optional[NullInsertOptions] = None,
    **overrides: Any,
) -> Frame:
    """Insert null markers wherever the reference axis has gaps wider than the threshold.

    ``frame`` is never modified. When nothing needs inserting (empty frame, no
    reference column, no/non-positive threshold, several distinct per-column
    thresholds, or already-dense data) the same ``frame`` object is returned.

    Args:
        frame: Input frame.
        options: Insertion options; defaults to ``NullInsertOptions()``.
        **overrides: Field overrides applied on top of ``options``
            (e.g. ``ref_field_pseudo_max=...``).

    Returns:
        A new, longer Frame, or ``frame`` itself.
    """
    opts = options or NullInsertOptions()
    if overrides:
        opts = replace(opts, **overrides)

    if not frame.length:
        return frame

    ref_column = get_ref_column(frame, opts.ref_field_name)
    if ref_column is None:
        logger.debug("frame %r: no reference column (ref_field_name=%r)", frame.name, opts.ref_field_name)
        return frame

    resolution = resolve_threshold(frame, ref_column)
    if resolution.kind == ThresholdKind.PER_FIELD:
        logger.warning(
            "frame %r: per-column thresholds %s are not supported; nulls not inserted",
            frame.name,
            list(resolution.candidates),
        )
        return frame
    if not resolution.should_insert:
        return frame

    scan = scan_reference(
        ref_column.values,
        resolution.threshold,
        pseudo_min=opts.ref_field_pseudo_min,
        pseudo_max=opts.ref_field_pseudo_max,
        insert_mode=opts.insert_mode,
        thorough=opts.thorough,
    )
    if scan is None:
        return frame

    logger.debug(
        "frame %r: inserted %d null markers (threshold=%s, length %d -> %d)",
        frame.name,
        scan.inserted_count,
        resolution.threshold,
        frame.length,
        len(scan),
    )
    return realign_frame(frame, ref_column, scan)
