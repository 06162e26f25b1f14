"""Reference scanner: builds the lengthened reference sequence.

One linear pass over the real reference values, emitting synthetic marker
positions wherever consecutive values are further apart than the threshold,
plus optional leading/trailing markers out to the pseudo bounds.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence

from framegaps.conventions import is_absent
from framegaps.null_insertion.insert_modes import InsertModeLike, resolve_insert_mode


@dataclass
class ReferenceScan:
    """Result of a scan that inserted at least one marker.

    Attributes:
        values: The new reference sequence (real and synthetic values, in order).
        is_real: Same length as ``values``; True where the position is an
            original sample, False where it is a synthetic marker.
    """

    values: list[Any]
    is_real: list[bool]

    def __len__(self) -> int:
        return len(self.values)

    @property
    def inserted_count(self) -> int:
        return self.is_real.count(False)


def scan_reference(
    ref_values: Sequence[Any],
    threshold: float,
    *,
    pseudo_min: Optional[float] = None,
    pseudo_max: Optional[float] = None,
    insert_mode: InsertModeLike = None,
    thorough: bool = True,
) -> Optional[ReferenceScan]:
    """Build the reference sequence with synthetic markers inserted.

    Absent reference values (None / UNDEFINED, e.g. NaT from a dataframe) are
    kept in place as real rows; gaps are measured between the present values
    around them.

    Args:
        ref_values: Reference values, non-decreasing apart from absent entries.
        threshold: Positive gap threshold.
        pseudo_min: Visible-range start. Leading markers walk the grid
            ``pseudo_min``, ``pseudo_min + threshold``, ...; each marker is the
            policy value for the step ending at that grid point, clamped to
            ``pseudo_min``, and only markers strictly below the first present
            value are kept.
        pseudo_max: Visible-range end. Markers continue after the last present
            value while ``prev + threshold <= pseudo_max``.
        insert_mode: Insertion policy (see :func:`resolve_insert_mode`).
        thorough: If True, insert one marker per threshold-width of gap;
            otherwise a single marker per gap.

    Returns:
        A ReferenceScan, or None when nothing was inserted (including when no
        reference value is present at all).
    """
    insert = resolve_insert_mode(insert_mode)
    n = len(ref_values)
    first = next((i for i, v in enumerate(ref_values) if not is_absent(v)), None)
    if first is None:
        return None

    prev = ref_values[first]
    values: list[Any] = []
    is_real: list[bool] = []

    if pseudo_min is not None:
        marker = pseudo_min
        while marker < prev:
            value = max(pseudo_min, insert(marker - threshold, marker, threshold))
            if value >= prev:
                break
            values.append(value)
            is_real.append(False)
            marker += threshold

    values.extend(ref_values[: first + 1])
    is_real.extend([True] * (first + 1))

    for i in range(first + 1, n):
        cur = ref_values[i]
        if is_absent(cur):
            # kept as a real row; prev stays on the last present value
            values.append(cur)
            is_real.append(True)
            continue
        while cur - prev > threshold:
            values.append(insert(prev, cur, threshold))
            is_real.append(False)
            prev += threshold
            if not thorough:
                break
        values.append(cur)
        is_real.append(True)
        prev = cur

    if pseudo_max is not None:
        while prev + threshold <= pseudo_max:
            values.append(insert(prev, pseudo_max, threshold))
            is_real.append(False)
            prev += threshold

    if len(values) == n:
        return None
    return ReferenceScan(values=values, is_real=is_real)
