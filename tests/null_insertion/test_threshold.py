"""Unit tests for reference column lookup and threshold resolution."""

from framegaps.frame.frame import ColumnConfig, ColumnType, Frame
from framegaps.null_insertion.threshold import ThresholdKind, get_ref_column, resolve_threshold


def _frame(time_cfg=None, a_cfg=None, b_cfg=None):
    return Frame.from_dict(
        {"a": [1], "time": [0], "b": [2]},
        types={"time": ColumnType.TIME},
        configs={
            "time": time_cfg or ColumnConfig(),
            "a": a_cfg or ColumnConfig(),
            "b": b_cfg or ColumnConfig(),
        },
    )


def test_get_ref_column_defaults_to_first_time_column():
    frame = _frame()
    assert get_ref_column(frame).name == "time"


def test_get_ref_column_by_name():
    frame = _frame()
    assert get_ref_column(frame, "b").name == "b"
    assert get_ref_column(frame, "missing") is None


def test_no_thresholds():
    frame = _frame()
    res = resolve_threshold(frame, get_ref_column(frame))
    assert res.kind == ThresholdKind.NONE
    assert not res.should_insert


def test_interval_is_shared_by_all_columns():
    frame = _frame(time_cfg=ColumnConfig(interval=15))
    res = resolve_threshold(frame, get_ref_column(frame))
    assert res.kind == ThresholdKind.UNIFORM
    assert res.threshold == 15
    assert res.should_insert


def test_override_equal_to_interval_stays_uniform():
    frame = _frame(time_cfg=ColumnConfig(interval=15), a_cfg=ColumnConfig(insert_nulls=15))
    res = resolve_threshold(frame, get_ref_column(frame))
    assert res.kind == ThresholdKind.UNIFORM


def test_distinct_overrides_are_per_field():
    frame = _frame(time_cfg=ColumnConfig(interval=15), a_cfg=ColumnConfig(insert_nulls=30))
    res = resolve_threshold(frame, get_ref_column(frame))
    assert res.kind == ThresholdKind.PER_FIELD
    assert set(res.candidates) == {15, 30}
    assert res.threshold is None


def test_single_non_positive_threshold_is_disabled():
    frame = _frame(time_cfg=ColumnConfig(interval=0))
    res = resolve_threshold(frame, get_ref_column(frame))
    assert res.kind == ThresholdKind.DISABLED
    assert not res.should_insert
