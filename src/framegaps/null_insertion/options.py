"""Configuration records for null insertion.

NullInsertOptions and TimeRange mirror the wire-level configuration
(camelCase keys) through ``to_dict()`` / ``from_dict()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import pandas as pd

from framegaps.null_insertion.insert_modes import InsertMode, InsertModeLike, resolve_insert_mode


@dataclass
class NullInsertOptions:
    """Options for a single null insertion call.

    Attributes:
        ref_field_name: Name of the reference column. None picks the first TIME column.
        ref_field_pseudo_min: Visible-range start, seeds leading markers.
        ref_field_pseudo_max: Visible-range end, seeds trailing markers.
        insert_mode: Insertion policy; defaults to ``InsertMode.THRESHOLD``.
        thorough: Insert one marker per threshold-width of gap (True) or one per gap.
    """

    ref_field_name: Optional[str] = None
    ref_field_pseudo_min: Optional[float] = None
    ref_field_pseudo_max: Optional[float] = None
    insert_mode: InsertModeLike = InsertMode.THRESHOLD
    thorough: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Serialize using wire keys. Custom callable insert modes are not serializable.

        Raises:
            ValueError: If ``insert_mode`` is a custom callable.
        """
        mode = resolve_insert_mode(self.insert_mode)
        if not isinstance(mode, InsertMode):
            raise ValueError("custom insert_mode callables cannot be serialized")
        return {
            "refFieldName": self.ref_field_name,
            "refFieldPseudoMin": self.ref_field_pseudo_min,
            "refFieldPseudoMax": self.ref_field_pseudo_max,
            "insertMode": mode.value,
            "thorough": self.thorough,
        }

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "NullInsertOptions":
        """Deserialize from wire keys; missing keys take the defaults.

        Raises:
            ValueError: If ``insertMode`` names an unknown policy.
        """
        data = data or {}
        mode = resolve_insert_mode(data.get("insertMode"))
        return cls(
            ref_field_name=data.get("refFieldName"),
            ref_field_pseudo_min=data.get("refFieldPseudoMin"),
            ref_field_pseudo_max=data.get("refFieldPseudoMax"),
            insert_mode=mode,
            thorough=bool(data.get("thorough", True)),
        )


def _to_epoch_ms(value: Any) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    ts = pd.Timestamp(value)
    if ts is pd.NaT:
        raise ValueError(f"cannot convert {value!r} to a time range bound")
    return float(ts.value // 1_000_000)


@dataclass(frozen=True)
class TimeRange:
    """Visible time window, in epoch milliseconds.

    A reversed window (``end < start``) is accepted; the batch pipeline then
    inserts only interior markers.
    """

    start: float
    end: float

    @property
    def is_empty(self) -> bool:
        """True for a reversed range; it bounds no leading or trailing markers."""
        return self.end < self.start

    @classmethod
    def from_timestamps(cls, start: Any, end: Any) -> "TimeRange":
        """Build from epoch-ms numbers or anything ``pandas.Timestamp`` accepts.

        Naive timestamps are taken as UTC.
        """
        return cls(_to_epoch_ms(start), _to_epoch_ms(end))

    def to_dict(self) -> dict[str, float]:
        return {"from": self.start, "to": self.end}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TimeRange":
        """Deserialize from ``{"from": ..., "to": ...}``.

        Raises:
            ValueError: If either key is missing.
        """
        if "from" not in data or "to" not in data:
            raise ValueError(f"TimeRange requires 'from' and 'to' keys, got {sorted(data)}")
        return cls.from_timestamps(data["from"], data["to"])
