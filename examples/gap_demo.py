"""Demo: make a sensor dropout visible in a line plot.

Builds a minute-sampled series with two dropouts, inserts null markers over a
visible window, lets short gaps be bridged, and writes an HTML figure.

Run:
    python examples/gap_demo.py [out.html]
"""

import sys

import numpy as np
import pandas as pd
import plotly.graph_objects as go

from framegaps import (
    ColumnConfig,
    TimeRange,
    apply_span_nulls_thresholds,
    configure_logging,
    frame_from_pandas,
    process_null_values,
)
from framegaps.plotting import make_timeseries_figure

configure_logging(level="DEBUG")

times = pd.date_range("2024-01-01 00:00", periods=60, freq="1min")
# a 2 minute dropout (bridgeable) and a 20 minute dropout (shown as a gap)
keep = np.ones(len(times), dtype=bool)
keep[10:12] = False
keep[30:50] = False
df = pd.DataFrame(
    {
        "time": times[keep],
        "temperature": 20 + np.sin(np.arange(keep.sum()) / 5.0),
    }
)

frame = frame_from_pandas(
    df,
    interval="infer",
    column_configs={"temperature": ColumnConfig(span_nulls=5 * 60_000)},
    name="sensor",
)
time_range = TimeRange.from_timestamps(times[0] - pd.Timedelta(minutes=5), times[-1] + pd.Timedelta(minutes=5))

(processed,) = process_null_values([frame], time_range)
apply_span_nulls_thresholds(processed, lambda col: False)

fig = go.Figure(make_timeseries_figure(processed, title="temperature with dropouts"))
out = sys.argv[1] if len(sys.argv) > 1 else "gap_demo.html"
fig.write_html(out)
print(f"rows: {frame.length} -> {processed.length}; wrote {out}")
