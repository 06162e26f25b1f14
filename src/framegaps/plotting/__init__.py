"""Plotly rendering helpers for processed frames."""

from framegaps.plotting.figure_builder import make_timeseries_figure

__all__ = [
    "make_timeseries_figure",
]
