"""Unit tests for Frame, Column and ColumnConfig."""

import copy

import pytest

from framegaps.conventions import UNDEFINED, is_absent
from framegaps.frame.frame import Column, ColumnConfig, ColumnType, Frame, FrameShapeError


def test_frame_length_derived_from_columns():
    frame = Frame(columns=[Column("t", ColumnType.TIME, [0, 1, 2])])
    assert frame.length == 3
    assert len(frame) == 3


def test_from_dict_rejects_ragged_columns():
    with pytest.raises(FrameShapeError) as exc_info:
        Frame.from_dict({"a": [1, 2], "b": [1]})
    assert "'b'" in str(exc_info.value)


def test_frame_shape_error_is_value_error():
    assert issubclass(FrameShapeError, ValueError)


def test_copy_owns_independent_values():
    frame = Frame.from_dict({"a": [1, None]}, configs={"a": ColumnConfig(no_value=0)}, name="q")
    dup = frame.copy()
    dup.columns[0].values[1] = 5
    assert frame.columns[0].values == [1, None]
    assert dup.name == "q"
    assert dup.columns[0].config.no_value == 0


def test_get_column_and_names():
    frame = Frame.from_dict({"t": [0], "v": [1]}, types={"t": ColumnType.TIME})
    assert frame.column_names == ["t", "v"]
    assert frame.get_column("v").values == [1]
    assert frame.get_column("nope") is None


def test_column_item_access():
    col = Column("v", values=[1, 2, 3])
    col[1] = None
    assert col[1] is None
    assert len(col) == 3


def test_column_config_round_trip_uses_wire_keys():
    cfg = ColumnConfig(insert_nulls=60000, span_nulls=-1, no_value="0")
    d = cfg.to_dict()
    assert d == {"insertNulls": 60000, "spanNulls": -1, "noValue": "0"}
    assert ColumnConfig.from_dict(d) == cfg
    assert ColumnConfig.from_dict(None) == ColumnConfig()


def test_undefined_sentinel_is_singleton_and_falsy():
    assert copy.deepcopy(UNDEFINED) is UNDEFINED
    assert not UNDEFINED
    assert repr(UNDEFINED) == "UNDEFINED"
    assert is_absent(UNDEFINED)
    assert is_absent(None)
    assert not is_absent(0)
