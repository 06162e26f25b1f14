"""Frame model and dataframe conversions."""

from framegaps.frame.frame import Column, ColumnConfig, ColumnType, Frame, FrameShapeError
from framegaps.frame.conversion import (
    HAS_POLARS,
    frame_from_pandas,
    frame_from_polars,
    frame_to_pandas,
    frame_to_polars,
    infer_interval,
)

__all__ = [
    "Column",
    "ColumnConfig",
    "ColumnType",
    "Frame",
    "FrameShapeError",
    "HAS_POLARS",
    "frame_from_pandas",
    "frame_from_polars",
    "frame_to_pandas",
    "frame_to_polars",
    "infer_interval",
]
