"""Column re-aligner: pads every value column to the new reference length."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from framegaps.frame.frame import Column, Frame
from framegaps.null_insertion.scanner import ReferenceScan


def realign_values(
    ref_values: Sequence[Any],
    new_ref_values: Sequence[Any],
    values: Sequence[Any],
    is_real: Optional[Sequence[bool]] = None,
) -> list[Any]:
    """Spread ``values`` over the new reference positions, None at synthetic ones.

    Two-pointer merge over ``new_ref_values``. A position consumes the next
    original value when it is real: per ``is_real`` when given, otherwise when
    ``ref_values[cursor] == new_ref_values[i]`` (exact equality, so a synthetic
    value that coincides with the next real one is taken as real).

    Args:
        ref_values: Original reference values.
        new_ref_values: Lengthened reference values from the scanner.
        values: Original values of one column, aligned with ``ref_values``.
        is_real: Optional per-position real/synthetic tags from the scanner.

    Returns:
        A new list of ``len(new_ref_values)`` values.
    """
    n = len(ref_values)
    out: list[Any] = [None] * len(new_ref_values)
    j = 0
    if is_real is not None:
        for i, real in enumerate(is_real):
            if real:
                out[i] = values[j]
                j += 1
    else:
        for i, ref in enumerate(new_ref_values):
            if j < n and ref_values[j] == ref:
                out[i] = values[j]
                j += 1

    assert j == n, f"re-align consumed {j} of {n} original values"
    return out


def realign_frame(frame: Frame, ref_column: Column, scan: ReferenceScan, *, use_tags: bool = True) -> Frame:
    """Return a new Frame re-indexed onto ``scan.values``.

    The reference column becomes exactly the new sequence; every other column
    is padded with None at synthetic positions. ``frame`` is not modified.
    """
    ref_values = ref_column.values
    is_real = scan.is_real if use_tags else None
    new_length = len(scan.values)

    columns: list[Column] = []
    for col in frame.columns:
        if col is ref_column:
            columns.append(col.with_values(list(scan.values)))
        else:
            columns.append(col.with_values(realign_values(ref_values, scan.values, col.values, is_real)))

    for col in columns:
        assert len(col.values) == new_length, (
            f"column {col.name!r} has {len(col.values)} values after re-align, expected {new_length}"
        )
    return Frame(columns=columns, length=new_length, name=frame.name)
