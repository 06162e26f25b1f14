"""Reference column lookup and gap threshold resolution."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from framegaps.frame.frame import Column, ColumnType, Frame


class ThresholdKind(Enum):
    """Outcome of threshold resolution for a frame."""
    NONE = "none"            # no column configures a threshold
    DISABLED = "disabled"    # a single threshold <= 0
    UNIFORM = "uniform"      # a single positive threshold: insertion runs
    PER_FIELD = "per_field"  # several distinct thresholds: unsupported, no insertion


@dataclass(frozen=True)
class ThresholdResolution:
    kind: ThresholdKind
    threshold: Optional[float] = None
    candidates: tuple[float, ...] = ()

    @property
    def should_insert(self) -> bool:
        return self.kind == ThresholdKind.UNIFORM


def get_ref_column(frame: Frame, ref_field_name: Optional[str] = None) -> Optional[Column]:
    """Locate the reference column.

    By ``ref_field_name`` when given, else the first TIME column. Returns None
    when there is no match.
    """
    for col in frame.columns:
        if ref_field_name is not None:
            if col.name == ref_field_name:
                return col
        elif col.type == ColumnType.TIME:
            return col
    return None


def column_threshold(column: Column, ref_column: Column) -> Optional[float]:
    """Threshold for one column: its own insert_nulls, else the reference interval."""
    if column.config.insert_nulls is not None:
        return column.config.insert_nulls
    return ref_column.config.interval


def resolve_threshold(frame: Frame, ref_column: Column) -> ThresholdResolution:
    """Determine the single gap threshold that applies to ``frame``.

    Only the uniform case is actionable. Per-field thresholds would require
    splitting the frame into (reference + same-threshold columns) parts,
    inserting into each, and outer-joining them back on the reference axis;
    that is not implemented, so the caller leaves the frame unchanged.
    """
    unique: list[float] = []
    for col in frame.columns:
        t = column_threshold(col, ref_column)
        if t is not None and t not in unique:
            unique.append(t)

    if not unique:
        return ThresholdResolution(ThresholdKind.NONE)
    if len(unique) > 1:
        return ThresholdResolution(ThresholdKind.PER_FIELD, candidates=tuple(unique))

    threshold = unique[0]
    if threshold <= 0:
        return ThresholdResolution(ThresholdKind.DISABLED, threshold=threshold, candidates=(threshold,))
    return ThresholdResolution(ThresholdKind.UNIFORM, threshold=threshold, candidates=(threshold,))
