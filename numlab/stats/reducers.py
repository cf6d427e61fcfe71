"""
Single-pass reducers and filters over 1-D float sequences.

All functions operate on copies of their inputs and return either a
scalar or a freshly allocated array.
"""

from __future__ import annotations

import math
from typing import List, Sequence

import numpy as np

from ..errors import InvalidArgument, check_same_length
from .rolling import as_vector, safe_div


# ---------------------------------------------------------------------------
# Sum
# ---------------------------------------------------------------------------


def total(x: Sequence[float] | np.ndarray) -> float:
    """Left-to-right sum with seed ``0.0``.

    No special handling of missing values: any ``NaN`` yields ``NaN``.

    >>> total([1.0, 2.0, 3.5])
    6.5
    >>> total([])
    0.0
    """
    acc = 0.0
    for v in as_vector(x):
        acc += v
    return float(acc)


# ---------------------------------------------------------------------------
# Weighted mean
# ---------------------------------------------------------------------------


def weighted_mean(
    x: Sequence[float] | np.ndarray,
    w: Sequence[float] | np.ndarray,
) -> float:
    """Compute ``sum(x * w) / sum(w)``.

    Parameters
    ----------
    x : array-like (N,)
        Values.
    w : array-like (N,)
        Non-negative weights.

    Returns
    -------
    float
        The weighted mean.  ``NaN`` as soon as a missing entry is met in
        either sequence, and ``NaN`` when the weights sum to zero.

    Raises
    ------
    DimensionMismatch
        If ``len(x) != len(w)``.
    InvalidArgument
        If any weight is negative.
    """
    xs = as_vector(x, "x")
    ws = as_vector(w, "w")
    n = check_same_length(x=xs, w=ws)
    if np.any(ws < 0):
        raise InvalidArgument("weights must be non-negative")

    num = 0.0
    den = 0.0
    for i in range(n):
        xi = xs[i]
        wi = ws[i]
        if math.isnan(xi) or math.isnan(wi):
            return np.nan
        num += xi * wi
        den += wi
    return safe_div(float(num), float(den))


# ---------------------------------------------------------------------------
# Positive filter
# ---------------------------------------------------------------------------


def select_positive(x: Sequence[float] | np.ndarray) -> np.ndarray:
    """Return the strictly positive elements of *x*, in order.

    Two passes: the first counts the matches, the second fills an
    output allocated at exactly that size.  ``NaN`` is not positive and
    is dropped.

    >>> select_positive([-1.0, 2.0, 0.0, 3.0])
    array([2., 3.])
    """
    arr = as_vector(x)
    out = np.empty(int(np.count_nonzero(arr > 0)), dtype=np.float64)
    j = 0
    for v in arr:
        if v > 0:
            out[j] = v
            j += 1
    return out


def select_positive_naive(x: Sequence[float] | np.ndarray) -> np.ndarray:
    """Dynamic-growth baseline for :func:`select_positive`.

    Appends matches to a list and converts once at the end.  Same
    result, kept for comparison against the two-pass version.
    """
    found: List[float] = []
    for v in as_vector(x):
        if v > 0:
            found.append(float(v))
    return np.array(found, dtype=np.float64)
