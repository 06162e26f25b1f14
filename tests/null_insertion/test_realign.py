"""Unit tests for the column re-aligner."""

import pytest

from framegaps.frame.frame import ColumnType, Frame
from framegaps.null_insertion.realign import realign_frame, realign_values
from framegaps.null_insertion.scanner import scan_reference


def test_realign_by_equality():
    out = realign_values([0, 10], [0, 2, 4, 10], ["a", "b"])
    assert out == ["a", None, None, "b"]


def test_realign_by_tags_ignores_coincident_values():
    """A synthetic value equal to the next real one is still synthetic with tags."""
    ref = [0, 5]
    new_ref = [0, 5, 5]
    is_real = [True, False, True]
    assert realign_values(ref, new_ref, ["x", "y"], is_real) == ["x", None, "y"]


def test_realign_by_equality_false_match_is_detected():
    """Without tags the coincident synthetic value consumes the real sample early."""
    with pytest.raises(AssertionError):
        realign_values([0, 5, 6], [0, 5, 5, 7], ["x", "y", "z"])


def test_realign_frame_builds_new_frame():
    frame = Frame.from_dict(
        {"time": [0, 6], "v": [1, 2], "s": ["a", "b"]},
        types={"time": ColumnType.TIME, "s": ColumnType.STRING},
    )
    ref = frame.columns[0]
    scan = scan_reference(ref.values, 2)
    out = realign_frame(frame, ref, scan)

    assert out is not frame
    assert out.length == 4
    assert out.columns[0].values == [0, 2, 4, 6]
    assert out.columns[1].values == [1, None, None, 2]
    assert out.columns[2].values == ["a", None, None, "b"]
    assert out.columns[2].type == ColumnType.STRING
    out.validate()
    assert frame.columns[1].values == [1, 2]


def test_realign_frame_equality_mode_matches_tags_when_unambiguous():
    frame = Frame.from_dict({"time": [0, 3, 9], "v": [1, 2, 3]}, types={"time": ColumnType.TIME})
    ref = frame.columns[0]
    scan = scan_reference(ref.values, 2)
    tagged = realign_frame(frame, ref, scan)
    untagged = realign_frame(frame, ref, scan, use_tags=False)
    assert tagged.to_dict() == untagged.to_dict()
