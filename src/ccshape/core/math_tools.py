"""
Integer reductions used by the shape geometry.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np


def _as_array(values: Sequence[int], operation: str) -> np.ndarray:
    if len(values) == 0:
        raise ValueError(f"{operation}() arg is an empty sequence")
    try:
        return np.asarray(values, dtype=np.int64)
    except OverflowError:
        # beyond int64: reduce over Python ints
        return np.asarray(values, dtype=object)


def minimum(values: Sequence[int]) -> int:
    """Smallest value of a non-empty integer sequence."""
    return int(np.min(_as_array(values, "minimum")))


def maximum(values: Sequence[int]) -> int:
    """Largest value of a non-empty integer sequence."""
    return int(np.max(_as_array(values, "maximum")))


def average(values: Sequence[int]) -> int:
    """
    Arithmetic mean of a non-empty integer sequence, truncated toward zero.

    The sum is taken in Python integers so large coordinates keep an exact mean.
    """
    if len(values) == 0:
        raise ValueError("average() arg is an empty sequence")
    total = sum(int(v) for v in values)
    quotient, remainder = divmod(total, len(values))
    # floor division rounds negative means down; move them back toward zero
    if quotient < 0 and remainder:
        quotient += 1
    return quotient


__all__ = ["minimum", "maximum", "average"]
