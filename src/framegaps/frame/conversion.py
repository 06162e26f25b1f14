"""Conversion between Frame and pandas / Polars DataFrames.

Time-like columns travel as epoch milliseconds inside a Frame, so the null
insertion passes can treat the reference axis as plain numbers. Missing
values (NaN, NaT, pd.NA, null) become ``None`` on the way in; on the way out
both ``None`` and ``UNDEFINED`` become the dataframe's missing value since
pandas and Polars have a single missing marker.
"""

from __future__ import annotations

import math
from typing import Any, Literal, Optional, Union, TYPE_CHECKING

import numpy as np
import pandas as pd

from framegaps.conventions import is_absent
from framegaps.frame.frame import Column, ColumnConfig, ColumnType, Frame
from framegaps.utils.logging import get_logger

logger = get_logger(__name__)

# Optional polars
try:  # pragma: no cover - import guard
    import polars as _pl  # type: ignore[import]
    HAS_POLARS = True
except ImportError:  # pragma: no cover - polars optional
    _pl = None  # type: ignore[assignment]
    HAS_POLARS = False

if TYPE_CHECKING:
    import polars as pl
else:
    pl = _pl  # type: ignore[assignment]

IntervalLike = Union[float, int, Literal["infer"], None]

# Name given to a DatetimeIndex that has no name of its own.
DEFAULT_TIME_COLUMN = "time"


def infer_interval(values: list[Any]) -> Optional[float]:
    """Infer a sampling interval as the median positive step between values.

    Args:
        values: Reference values; absent entries are ignored.

    Returns:
        The median of the strictly positive consecutive differences, or None
        when fewer than two distinct values are present.
    """
    arr = np.asarray([v for v in values if not is_absent(v)], dtype=float)
    if arr.size < 2:
        return None
    steps = np.diff(arr)
    steps = steps[steps > 0]
    if steps.size == 0:
        return None
    return float(np.median(steps))


def _is_missing(value: Any) -> bool:
    if value is None or value is pd.NA or value is pd.NaT:
        return True
    return isinstance(value, float) and math.isnan(value)


def _clean(values: list[Any]) -> list[Any]:
    return [None if _is_missing(v) else v for v in values]


def _apply_interval(frame: Frame, interval: IntervalLike) -> None:
    if interval is None:
        return
    ref = next((c for c in frame.columns if c.type == ColumnType.TIME), None)
    if ref is None:
        logger.debug("interval=%r given but frame has no time column; ignored", interval)
        return
    if interval == "infer":
        inferred = infer_interval(ref.values)
        logger.debug("inferred interval %r for column %r", inferred, ref.name)
        ref.config.interval = inferred
    else:
        ref.config.interval = float(interval)


# ----------------------------------------------------------------------
# pandas
# ----------------------------------------------------------------------

def _pandas_series_to_column(name: str, s: pd.Series, config: ColumnConfig) -> Column:
    if pd.api.types.is_datetime64_any_dtype(s.dtype):
        values = [None if _is_missing(v) else int(v.value // 1_000_000) for v in s]
        return Column(name=name, type=ColumnType.TIME, values=values, config=config)
    if pd.api.types.is_bool_dtype(s.dtype):
        return Column(name=name, type=ColumnType.BOOLEAN, values=_clean(s.tolist()), config=config)
    if pd.api.types.is_numeric_dtype(s.dtype):
        return Column(name=name, type=ColumnType.NUMBER, values=_clean(s.tolist()), config=config)
    return Column(name=name, type=ColumnType.STRING, values=_clean(s.tolist()), config=config)


def frame_from_pandas(
    df: pd.DataFrame,
    *,
    column_configs: Optional[dict[str, ColumnConfig]] = None,
    interval: IntervalLike = None,
    name: Optional[str] = None,
) -> Frame:
    """Build a Frame from a pandas DataFrame.

    A ``DatetimeIndex`` becomes the leading TIME column (named after the index,
    or ``"time"``). Datetime columns become TIME columns in epoch milliseconds.

    Args:
        df: Source DataFrame. It is not modified.
        column_configs: Optional ``{column_name: ColumnConfig}``.
        interval: Interval stored on the first TIME column's config: a number,
            ``"infer"`` to use :func:`infer_interval`, or None to leave it unset.
        name: Optional frame name.

    Returns:
        A new Frame.

    Raises:
        TypeError: If ``df`` is not a pandas DataFrame.
    """
    if not isinstance(df, pd.DataFrame):
        raise TypeError(f"Expected pandas.DataFrame, got {type(df).__name__}")
    column_configs = column_configs or {}

    columns: list[Column] = []
    if isinstance(df.index, pd.DatetimeIndex):
        idx_name = df.index.name or DEFAULT_TIME_COLUMN
        if idx_name not in df.columns:
            idx_series = pd.Series(df.index, index=range(len(df)), name=idx_name)
            columns.append(
                _pandas_series_to_column(idx_name, idx_series, column_configs.get(idx_name, ColumnConfig()))
            )

    for col_name in df.columns:
        key = str(col_name)
        config = column_configs.get(key, ColumnConfig())
        columns.append(_pandas_series_to_column(key, df[col_name], config))

    frame = Frame(columns=columns, length=len(df), name=name)
    _apply_interval(frame, interval)
    return frame


def _column_to_pandas(col: Column) -> pd.Series:
    values = [None if is_absent(v) else v for v in col.values]
    if col.type == ColumnType.TIME:
        return pd.Series(pd.to_datetime(values, unit="ms"), name=col.name)
    if col.type == ColumnType.BOOLEAN:
        return pd.Series(values, name=col.name, dtype="boolean")
    if col.type == ColumnType.NUMBER:
        if any(v is None for v in values):
            return pd.Series(values, name=col.name, dtype="float64")
        return pd.Series(values, name=col.name)
    return pd.Series(values, name=col.name, dtype=object)


def frame_to_pandas(frame: Frame) -> pd.DataFrame:
    """Return the frame as a new pandas DataFrame (RangeIndex).

    TIME columns are converted back to datetimes; absent values become
    NaN / NaT / <NA> depending on the column dtype.
    """
    if not frame.columns:
        return pd.DataFrame()
    return pd.concat([_column_to_pandas(c) for c in frame.columns], axis=1)


# ----------------------------------------------------------------------
# Polars
# ----------------------------------------------------------------------

def _require_polars() -> None:
    if not HAS_POLARS:
        raise ImportError(
            "Polars is not available. Install 'polars' (or 'framegaps[polars]') to use this function."
        )


def _polars_series_to_column(s: "pl.Series", config: ColumnConfig) -> Column:
    dtype = s.dtype
    if isinstance(dtype, pl.Datetime) or dtype == pl.Date:
        values = s.dt.epoch("ms").to_list()
        return Column(name=s.name, type=ColumnType.TIME, values=values, config=config)
    if dtype == pl.Boolean:
        return Column(name=s.name, type=ColumnType.BOOLEAN, values=s.to_list(), config=config)
    if dtype.is_numeric():
        return Column(name=s.name, type=ColumnType.NUMBER, values=_clean(s.to_list()), config=config)
    if dtype == pl.Utf8 or dtype == pl.Categorical:
        return Column(name=s.name, type=ColumnType.STRING, values=s.cast(pl.Utf8).to_list(), config=config)
    return Column(name=s.name, type=ColumnType.OTHER, values=s.to_list(), config=config)


def frame_from_polars(
    df: "pl.DataFrame",
    *,
    column_configs: Optional[dict[str, ColumnConfig]] = None,
    interval: IntervalLike = None,
    name: Optional[str] = None,
) -> Frame:
    """Build a Frame from a Polars DataFrame (same contract as :func:`frame_from_pandas`).

    Raises:
        ImportError: If Polars is not installed.
        TypeError: If ``df`` is not a Polars DataFrame.
    """
    _require_polars()
    if not isinstance(df, pl.DataFrame):
        raise TypeError(f"Expected polars.DataFrame, got {type(df).__name__}")
    column_configs = column_configs or {}
    columns = [
        _polars_series_to_column(df[col_name], column_configs.get(col_name, ColumnConfig()))
        for col_name in df.columns
    ]
    frame = Frame(columns=columns, length=df.height, name=name)
    _apply_interval(frame, interval)
    return frame


def _column_to_polars(col: Column) -> "pl.Series":
    values = [None if is_absent(v) else v for v in col.values]
    if col.type == ColumnType.TIME:
        ms = [None if v is None else int(v) for v in values]
        return pl.Series(col.name, ms, dtype=pl.Int64).cast(pl.Datetime("ms"))
    if col.type == ColumnType.BOOLEAN:
        return pl.Series(col.name, values, dtype=pl.Boolean)
    if col.type == ColumnType.NUMBER:
        present = [v for v in values if v is not None]
        if present and all(isinstance(v, int) for v in present):
            return pl.Series(col.name, values, dtype=pl.Int64)
        return pl.Series(col.name, values, dtype=pl.Float64)
    if col.type == ColumnType.STRING:
        return pl.Series(col.name, values, dtype=pl.Utf8)
    return pl.Series(col.name, values, strict=False)


def frame_to_polars(frame: Frame) -> "pl.DataFrame":
    """Return the frame as a new Polars DataFrame.

    Raises:
        ImportError: If Polars is not installed.
    """
    _require_polars()
    return pl.DataFrame([_column_to_polars(c) for c in frame.columns])
