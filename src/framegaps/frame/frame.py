"""Columnar frame model for time-indexed data.

This module defines the ColumnType enum, the ColumnConfig dataclass holding the
per-column gap/normalization knobs, and the Column and Frame containers that the
null insertion passes operate on.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Iterator, Optional, Union


class FrameShapeError(ValueError):
    """Raised when a frame's columns disagree on length."""


class ColumnType(Enum):
    """Value type tag carried by every column."""
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    TIME = "time"
    OTHER = "other"


@dataclass
class ColumnConfig:
    """Per-column configuration record.

    Attributes:
        insert_nulls: Gap threshold override for this column, in reference units.
            ``None`` falls back to the reference column's ``interval``.
        span_nulls: Span-bridging threshold. Only a finite positive number enables
            the span-null pass; ``SPAN_NULLS_DISABLED`` (-1), booleans and ``None``
            leave the column alone.
        no_value: Substitute for null values, parsed as a number. Anything that
            does not parse is ignored.
        interval: Sampling interval of the column; only read on the reference column.
    """

    insert_nulls: Optional[float] = None
    span_nulls: Optional[Union[bool, float]] = None
    no_value: Optional[Union[str, float]] = None
    interval: Optional[float] = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dict using the camelCase wire keys, omitting unset knobs."""
        data = {
            "insertNulls": self.insert_nulls,
            "spanNulls": self.span_nulls,
            "noValue": self.no_value,
            "interval": self.interval,
        }
        return {k: v for k, v in data.items() if v is not None}

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "ColumnConfig":
        """Deserialize from a dict with camelCase wire keys (missing keys -> None)."""
        data = data or {}
        return cls(
            insert_nulls=data.get("insertNulls"),
            span_nulls=data.get("spanNulls"),
            no_value=data.get("noValue"),
            interval=data.get("interval"),
        )


@dataclass
class Column:
    """A named, typed sequence of values.

    Any element of ``values`` may be ``None`` (null sentinel) or ``UNDEFINED``.
    """

    name: str
    type: ColumnType = ColumnType.NUMBER
    values: list[Any] = field(default_factory=list)
    config: ColumnConfig = field(default_factory=ColumnConfig)

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> Any:
        return self.values[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self.values[index] = value

    def with_values(self, values: list[Any]) -> "Column":
        """Return a new Column sharing name/type/config but backed by ``values``."""
        return replace(self, values=values)


@dataclass
class Frame:
    """An ordered set of equal-length columns sharing one ordering axis.

    Attributes:
        columns: The columns, in order.
        length: Cached row count. Derived from the first column when omitted.
        name: Optional frame name (e.g. query ref id).
    """

    columns: list[Column] = field(default_factory=list)
    length: Optional[int] = None
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if self.length is None:
            self.length = len(self.columns[0].values) if self.columns else 0

    @classmethod
    def from_dict(
        cls,
        data: dict[str, list[Any]],
        *,
        types: Optional[dict[str, ColumnType]] = None,
        configs: Optional[dict[str, ColumnConfig]] = None,
        name: Optional[str] = None,
    ) -> "Frame":
        """Build a Frame from ``{column_name: values}``.

        Columns named in ``types`` get that type; others default to NUMBER.

        Raises:
            FrameShapeError: If the value lists differ in length.
        """
        types = types or {}
        configs = configs or {}
        columns = [
            Column(
                name=col_name,
                type=types.get(col_name, ColumnType.NUMBER),
                values=list(values),
                config=configs.get(col_name, ColumnConfig()),
            )
            for col_name, values in data.items()
        ]
        frame = cls(columns=columns, name=name)
        frame.validate()
        return frame

    def __iter__(self) -> Iterator[Column]:
        return iter(self.columns)

    def __len__(self) -> int:
        return self.length or 0

    @property
    def column_names(self) -> list[str]:
        return [c.name for c in self.columns]

    def get_column(self, name: str) -> Optional[Column]:
        """Return the first column named ``name``, or None."""
        for col in self.columns:
            if col.name == name:
                return col
        return None

    def copy(self) -> "Frame":
        """Return a copy whose columns own independent value lists."""
        return Frame(
            columns=[c.with_values(list(c.values)) for c in self.columns],
            length=self.length,
            name=self.name,
        )

    def validate(self) -> None:
        """Check that every column holds exactly ``length`` values.

        Raises:
            FrameShapeError: On any length mismatch.
        """
        for col in self.columns:
            if len(col.values) != self.length:
                raise FrameShapeError(
                    f"column {col.name!r} has {len(col.values)} values, frame length is {self.length}"
                )

    def to_dict(self) -> dict[str, list[Any]]:
        """Return ``{column_name: values}`` (lists are not copied)."""
        return {c.name: c.values for c in self.columns}
