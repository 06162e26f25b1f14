"""Absence sentinels shared by the null insertion passes.

Single source of truth for the two "no data" markers so Frame, the
insertion/normalization passes, the dataframe conversions, and the figure
builder all agree:

- ``None`` (the null sentinel): no data exists here; render as a gap.
- ``UNDEFINED``: no data was recorded, but the gap is short enough that a
  renderer may bridge across it.
"""

from __future__ import annotations

from typing import Any


class _Undefined:
    """Singleton type for the UNDEFINED sentinel."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Undefined":
        return self

    def __deepcopy__(self, memo: dict) -> "_Undefined":
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()

# span_nulls value meaning "never bridge null runs" for a column.
SPAN_NULLS_DISABLED = -1


def is_absent(value: Any) -> bool:
    """True for either sentinel (None or UNDEFINED)."""
    return value is None or value is UNDEFINED
