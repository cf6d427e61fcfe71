"""
Windowed statistics over 1-D float sequences.

``NaN`` is the missing-value sentinel throughout.  Every function takes
its input by value: the argument is copied into a fresh ``float64``
array and the caller's sequence is never mutated or aliased.

Typical usage::

    smooth = rolling_mean(prices, 20)
    filled = locf(readings)

For one-value-at-a-time streams use :class:`RollingMean` directly::

    window = RollingMean(20)
    for price in stream:
        window.add(price)
        if window.is_ready():
            feat = window.mean()
"""

from __future__ import annotations

import math
from collections import deque
from typing import Final, Sequence

import numpy as np

from ..errors import InvalidArgument

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def safe_div(a: float, b: float, default: float = np.nan) -> float:
    """Return *a / b*, falling back to *default* when *b* is zero or NaN.

    >>> safe_div(10, 2)
    5.0
    >>> safe_div(1, 0)
    nan
    """
    try:
        if b == 0 or math.isnan(b):
            return default
        return a / b
    except (TypeError, ValueError):
        return default


def as_vector(x: Sequence[float] | np.ndarray, name: str = "x") -> np.ndarray:
    """Copy *x* into a fresh 1-D ``float64`` array.

    Raises
    ------
    InvalidArgument
        If *x* is not one-dimensional.
    """
    arr = np.array(x, dtype=np.float64, copy=True)
    if arr.ndim != 1:
        raise InvalidArgument(
            f"{name} must be 1-D, got shape {arr.shape}"
        )
    return arr


# ---------------------------------------------------------------------------
# RollingMean
# ---------------------------------------------------------------------------

class RollingMean:
    """Fixed-size FIFO window keeping a running total of the last *N* values.

    ``add`` is O(1): the entering value is added to the total and the
    evicted one subtracted.  Missing and infinite values are counted rather
    than summed, so a ``NaN`` or ``inf`` only affects :meth:`mean` while
    it is inside the window.

    Parameters
    ----------
    size : int
        Window length.  Must be >= 1.

    Examples
    --------
    >>> w = RollingMean(3)
    >>> w.add(1.0); w.add(2.0); w.add(3.0)
    >>> w.is_ready()
    True
    >>> w.mean()
    2.0
    >>> w.add(4.0); w.mean()
    3.0
    """

    __slots__ = ("_size", "_buf", "_total", "_n_missing", "_n_pos_inf", "_n_neg_inf")

    def __init__(self, size: int) -> None:
        if size < 1:
            raise InvalidArgument(f"size must be >= 1, got {size}")
        self._size: Final[int] = size
        self._buf: deque[float] = deque(maxlen=size)
        self._total: float = 0.0
        self._n_missing: int = 0
        self._n_pos_inf: int = 0
        self._n_neg_inf: int = 0

    # -- mutators -----------------------------------------------------------

    def add(self, x: float) -> None:
        """Append *x*, evicting the oldest value if the window is full."""
        if len(self._buf) == self._size:
            self._drop(self._buf[0])
        self._buf.append(x)
        self._account(x, 1)

    def reset(self) -> None:
        """Drop all stored observations."""
        self._buf.clear()
        self._total = 0.0
        self._n_missing = 0
        self._n_pos_inf = 0
        self._n_neg_inf = 0

    def _drop(self, old: float) -> None:
        self._account(old, -1)

    def _account(self, v: float, sign: int) -> None:
        # Only finite values enter the running total.
        if math.isnan(v):
            self._n_missing += sign
        elif v == math.inf:
            self._n_pos_inf += sign
        elif v == -math.inf:
            self._n_neg_inf += sign
        else:
            self._total += sign * v

    # -- state queries ------------------------------------------------------

    def is_ready(self) -> bool:
        """``True`` once the window contains exactly *size* observations."""
        return len(self._buf) == self._size

    def __len__(self) -> int:
        return len(self._buf)

    @property
    def size(self) -> int:
        """Configured window size (read-only)."""
        return self._size

    # -- aggregations -------------------------------------------------------

    def sum(self) -> float:
        """Running total of the window.

        ``NaN`` if empty, if any value is missing, or if the window holds
        both ``inf`` and ``-inf``; ``+-inf`` if it holds only one kind.
        """
        if not self._buf or self._n_missing:
            return np.nan
        if self._n_pos_inf and self._n_neg_inf:
            return np.nan
        if self._n_pos_inf:
            return math.inf
        if self._n_neg_inf:
            return -math.inf
        return self._total

    def mean(self) -> float:
        """Mean of the current window; see :meth:`sum` for ``NaN`` / ``inf``."""
        return safe_div(self.sum(), len(self._buf))

    def __repr__(self) -> str:
        return (
            f"RollingMean(size={self._size}, "
            f"filled={len(self._buf)}/{self._size})"
        )


# ---------------------------------------------------------------------------
# Whole-sequence transforms
# ---------------------------------------------------------------------------

def rolling_mean(x: Sequence[float] | np.ndarray, window: int) -> np.ndarray:
    """Trailing fixed-window mean computed with an incremental running total.

    Parameters
    ----------
    x : array-like (N,)
        Input values.  ``NaN`` entries make every window containing them
        ``NaN``; an ``inf`` makes them ``inf`` (``NaN`` if both signs).
        Windows after the value leaves are unaffected.
    window : int
        Window length, ``1 <= window <= N``.

    Returns
    -------
    np.ndarray (N,)
        ``out[i]`` is the mean of ``x[i-window+1 : i+1]``; the first
        ``window - 1`` entries are ``NaN``.

    Raises
    ------
    InvalidArgument
        If *window* is outside ``[1, N]``.

    >>> rolling_mean([1, 2, 3, 4, 5], 3)
    array([nan, nan,  2.,  3.,  4.])
    """
    arr = as_vector(x)
    n = arr.shape[0]
    if not 1 <= window <= n:
        raise InvalidArgument(
            f"window must satisfy 1 <= window <= {n}, got {window}"
        )

    out = np.full(n, np.nan, dtype=np.float64)
    acc = RollingMean(window)
    for i in range(n):
        acc.add(float(arr[i]))
        if acc.is_ready():
            out[i] = acc.mean()
    return out


def locf(x: Sequence[float] | np.ndarray) -> np.ndarray:
    """Last observation carried forward.

    Every ``NaN`` is replaced by the closest preceding non-missing
    value.  A leading run of ``NaN`` has no prior observation and stays
    missing.

    >>> locf([1.0, np.nan, np.nan, 2.0, np.nan])
    array([1., 1., 1., 2., 2.])
    >>> locf([np.nan, 1.0])
    array([nan,  1.])
    """
    out = as_vector(x)
    if out.size == 0:
        return out
    observed = ~np.isnan(out)
    # Index of the last observation at or before each position (-1 = none).
    last = np.where(observed, np.arange(out.size), -1)
    np.maximum.accumulate(last, out=last)
    has_prior = last >= 0
    out[has_prior] = out[last[has_prior]]
    return out


def mean_carried_forward(x: Sequence[float] | np.ndarray) -> np.ndarray:
    """Replace each ``NaN`` with the mean of all observations before it.

    Only original observations feed the running mean; imputed values do
    not.  A ``NaN`` with no earlier observation stays ``NaN``.

    >>> mean_carried_forward([1.0, np.nan, 3.0, np.nan])
    array([1., 1., 3., 2.])
    """
    arr = as_vector(x)
    out = arr.copy()
    total = 0.0
    count = 0
    for i in range(arr.shape[0]):
        v = arr[i]
        if math.isnan(v):
            out[i] = safe_div(total, count)
        else:
            total += v
            count += 1
    return out
