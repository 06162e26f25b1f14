"""Smoke tests for make_timeseries_figure."""

import pandas as pd

from framegaps.conventions import UNDEFINED
from framegaps.frame.frame import ColumnType, Frame
from framegaps.plotting.figure_builder import make_timeseries_figure


def _frame():
    return Frame.from_dict(
        {
            "time": [0, 1000, 2000, 3000, 4000],
            "a": [1.0, None, 3.0, UNDEFINED, 5.0],
            "label": ["x", "y", "z", "w", "v"],
        },
        types={"time": ColumnType.TIME, "label": ColumnType.STRING},
        name="demo",
    )


def test_one_trace_per_numeric_column():
    fig = make_timeseries_figure(_frame(), title="demo")
    assert len(fig["data"]) == 1
    trace = fig["data"][0]
    assert trace["name"] == "a"
    assert trace["connectgaps"] is False


def test_null_kept_and_undefined_dropped():
    trace = make_timeseries_figure(_frame())["data"][0]
    assert list(trace["y"]) == [1.0, None, 3.0, 5.0]
    xs = [pd.Timestamp(x) for x in trace["x"]]
    assert xs[-1] == pd.Timestamp(4000, unit="ms")
    assert len(xs) == 4


def test_numeric_reference_axis_is_not_converted():
    frame = Frame.from_dict({"depth": [0, 1, 2], "t": [5.0, None, 6.0]})
    trace = make_timeseries_figure(frame, ref_field_name="depth")["data"][0]
    assert list(trace["x"]) == [0, 1, 2]


def test_no_reference_column_gives_empty_figure():
    frame = Frame.from_dict({"a": [1, 2]})
    fig = make_timeseries_figure(frame)
    assert len(fig["data"]) == 0
