"""Plotly figure building for processed frames.

None markers stay in each trace so the line breaks there; UNDEFINED markers
are dropped from the trace so the line is drawn straight across them.
"""

from __future__ import annotations

from typing import Any, Optional

import pandas as pd
import plotly.graph_objects as go

from framegaps.conventions import UNDEFINED
from framegaps.frame.frame import Column, ColumnType, Frame
from framegaps.null_insertion.threshold import get_ref_column
from framegaps.utils.logging import get_logger

logger = get_logger(__name__)


def _trace_xy(ref: Column, col: Column) -> tuple[list[Any], list[Any]]:
    xs: list[Any] = []
    ys: list[Any] = []
    for x, y in zip(ref.values, col.values):
        if y is UNDEFINED or x is None or x is UNDEFINED:
            continue
        xs.append(x)
        ys.append(y)
    if ref.type == ColumnType.TIME:
        xs = list(pd.to_datetime(xs, unit="ms"))
    return xs, ys


def make_timeseries_figure(
    frame: Frame,
    *,
    ref_field_name: Optional[str] = None,
    title: Optional[str] = None,
) -> dict:
    """Build a Plotly figure dict with one line trace per numeric value column.

    Args:
        frame: Frame to plot, typically after null insertion.
        ref_field_name: Reference column name; defaults to the first TIME column.
        title: Optional figure title.

    Returns:
        Plotly figure dictionary. Empty (no traces) when the frame has no
        reference column.
    """
    fig = go.Figure()
    ref = get_ref_column(frame, ref_field_name)
    if ref is None:
        logger.warning(f"make_timeseries_figure: frame {frame.name!r} has no reference column")
        return fig.to_dict()

    for col in frame.columns:
        if col is ref or col.type != ColumnType.NUMBER:
            continue
        xs, ys = _trace_xy(ref, col)
        fig.add_trace(
            go.Scatter(
                x=xs,
                y=ys,
                mode="lines+markers",
                name=col.name,
                connectgaps=False,
            )
        )

    fig.update_layout(
        title=title,
        xaxis_title=ref.name,
        showlegend=True,
        margin=dict(l=40, r=20, t=40 if title else 20, b=40),
    )
    return fig.to_dict()
