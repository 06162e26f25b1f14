"""
framegaps: gap detection and null insertion for time-indexed frames.

This package provides:
- Frame / Column: columnar data model with per-column gap configuration
- apply_null_insert_threshold: explicit None markers where samples are missing
- apply_span_nulls_thresholds: UNDEFINED markers for bridgeable null runs
- apply_no_value: configured substitutes for None
- process_null_values: batch pipeline bounded by a visible time range
- pandas / Polars conversions and a Plotly figure builder
- Logging utilities for library and script use

For logging configuration in standalone scripts:
    ```python
    from framegaps.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```
"""

import logging

from framegaps.utils.logging import configure_logging, get_logger

from framegaps.conventions import SPAN_NULLS_DISABLED, UNDEFINED
from framegaps.frame import (
    Column,
    ColumnConfig,
    ColumnType,
    Frame,
    FrameShapeError,
    frame_from_pandas,
    frame_from_polars,
    frame_to_pandas,
    frame_to_polars,
)
from framegaps.null_insertion import (
    InsertMode,
    NullInsertOptions,
    TimeRange,
    apply_no_value,
    apply_null_insert_threshold,
    apply_span_nulls_thresholds,
    process_null_values,
)

# NullHandler so logs don't reach root when no application configured logging.
_logger = logging.getLogger("framegaps")
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = [
    "Column",
    "ColumnConfig",
    "ColumnType",
    "Frame",
    "FrameShapeError",
    "InsertMode",
    "NullInsertOptions",
    "SPAN_NULLS_DISABLED",
    "TimeRange",
    "UNDEFINED",
    "apply_no_value",
    "apply_null_insert_threshold",
    "apply_span_nulls_thresholds",
    "configure_logging",
    "frame_from_pandas",
    "frame_from_polars",
    "frame_to_pandas",
    "frame_to_polars",
    "get_logger",
    "process_null_values",
]

__version__ = "0.1.0"
