"""Insertion policies: where a synthetic marker sits between two real values."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Union

InsertFn = Callable[[float, float, float], float]


def _insert_threshold(prev: float, next_: float, threshold: float) -> float:
    return prev + threshold


def _insert_midpoint(prev: float, next_: float, threshold: float) -> float:
    return (prev + next_) / 2


def _insert_plus_one(prev: float, next_: float, threshold: float) -> float:
    # one unit past prev, so step renderers don't carry the prior state forward
    return prev + 1


class InsertMode(Enum):
    """Named insertion policies."""
    THRESHOLD = "threshold"
    MIDPOINT = "midpoint"
    PLUS_ONE = "plusone"

    def __call__(self, prev: float, next_: float, threshold: float) -> float:
        return _INSERT_FNS[self](prev, next_, threshold)


_INSERT_FNS: dict[InsertMode, InsertFn] = {
    InsertMode.THRESHOLD: _insert_threshold,
    InsertMode.MIDPOINT: _insert_midpoint,
    InsertMode.PLUS_ONE: _insert_plus_one,
}

InsertModeLike = Union[InsertMode, str, InsertFn, None]


def resolve_insert_mode(mode: InsertModeLike) -> InsertFn:
    """Return a callable policy for ``mode``.

    Args:
        mode: An InsertMode, its string value (``"threshold"``, ``"midpoint"``,
            ``"plusone"``), a custom ``(prev, next, threshold) -> value`` callable,
            or None for the default ``threshold`` policy.

    Raises:
        ValueError: If ``mode`` is an unknown string.
    """
    if mode is None:
        return InsertMode.THRESHOLD
    if isinstance(mode, InsertMode):
        return mode
    if isinstance(mode, str):
        try:
            return InsertMode(mode.lower())
        except ValueError:
            valid = ", ".join(m.value for m in InsertMode)
            raise ValueError(f"Unknown insert mode {mode!r}; expected one of: {valid}") from None
    if callable(mode):
        return mode
    raise ValueError(f"insert_mode must be an InsertMode, str or callable, got {type(mode).__name__}")
