"""Unit tests for NullInsertOptions, TimeRange and insert mode resolution."""

import pandas as pd
import pytest

from framegaps.null_insertion.insert_modes import InsertMode, resolve_insert_mode
from framegaps.null_insertion.options import NullInsertOptions, TimeRange


@pytest.mark.parametrize(
    "mode, prev, nxt, threshold, expected",
    [
        (InsertMode.THRESHOLD, 10, 20, 3, 13),
        (InsertMode.MIDPOINT, 10, 20, 3, 15),
        (InsertMode.PLUS_ONE, 10, 20, 3, 11),
    ],
)
def test_insert_mode_values(mode, prev, nxt, threshold, expected):
    assert mode(prev, nxt, threshold) == expected


def test_resolve_insert_mode_from_string_and_default():
    assert resolve_insert_mode("midpoint") is InsertMode.MIDPOINT
    assert resolve_insert_mode("PlusOne") is InsertMode.PLUS_ONE
    assert resolve_insert_mode(None) is InsertMode.THRESHOLD


def test_resolve_insert_mode_unknown_raises():
    with pytest.raises(ValueError) as exc_info:
        resolve_insert_mode("nearest")
    assert "nearest" in str(exc_info.value)


def test_options_from_dict_defaults():
    opts = NullInsertOptions.from_dict({})
    assert opts.ref_field_name is None
    assert opts.insert_mode is InsertMode.THRESHOLD
    assert opts.thorough is True


def test_options_round_trip():
    opts = NullInsertOptions(
        ref_field_name="ts",
        ref_field_pseudo_min=0,
        ref_field_pseudo_max=100,
        insert_mode=InsertMode.MIDPOINT,
    )
    d = opts.to_dict()
    assert d["refFieldName"] == "ts"
    assert d["insertMode"] == "midpoint"
    assert NullInsertOptions.from_dict(d) == opts


def test_options_with_callable_mode_cannot_serialize():
    opts = NullInsertOptions(insert_mode=lambda p, n, t: p)
    with pytest.raises(ValueError):
        opts.to_dict()


def test_time_range_from_dict_numbers():
    tr = TimeRange.from_dict({"from": 1000, "to": 5000})
    assert tr.start == 1000
    assert tr.end == 5000
    assert tr.to_dict() == {"from": 1000, "to": 5000}


def test_time_range_from_timestamps():
    tr = TimeRange.from_timestamps("1970-01-01T00:00:01", pd.Timestamp("1970-01-01T00:00:02Z"))
    assert tr.start == 1000
    assert tr.end == 2000


def test_time_range_accepts_reversed_bounds():
    tr = TimeRange(10, 0)
    assert tr.is_empty
    assert not TimeRange(0, 0).is_empty


def test_time_range_from_dict_missing_key():
    with pytest.raises(ValueError) as exc_info:
        TimeRange.from_dict({"from": 0})
    assert "to" in str(exc_info.value)
