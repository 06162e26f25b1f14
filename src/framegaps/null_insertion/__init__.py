"""Gap detection and null insertion for frames."""

from framegaps.null_insertion.insert_modes import InsertMode, resolve_insert_mode
from framegaps.null_insertion.no_value import apply_no_value, parse_no_value
from framegaps.null_insertion.null_insert import apply_null_insert_threshold
from framegaps.null_insertion.options import NullInsertOptions, TimeRange
from framegaps.null_insertion.process import process_frame, process_null_values
from framegaps.null_insertion.realign import realign_frame, realign_values
from framegaps.null_insertion.scanner import ReferenceScan, scan_reference
from framegaps.null_insertion.span_nulls import apply_span_nulls_thresholds, null_to_undefined_threshold
from framegaps.null_insertion.threshold import (
    ThresholdKind,
    ThresholdResolution,
    get_ref_column,
    resolve_threshold,
)

__all__ = [
    "InsertMode",
    "NullInsertOptions",
    "ReferenceScan",
    "ThresholdKind",
    "ThresholdResolution",
    "TimeRange",
    "apply_no_value",
    "apply_null_insert_threshold",
    "apply_span_nulls_thresholds",
    "get_ref_column",
    "null_to_undefined_threshold",
    "parse_no_value",
    "process_frame",
    "process_null_values",
    "realign_frame",
    "realign_values",
    "resolve_insert_mode",
    "resolve_threshold",
    "scan_reference",
]
