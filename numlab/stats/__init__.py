"""
Deterministic statistics package.

Public API
----------
- :func:`total`, :func:`weighted_mean` -- reducers.
- :func:`select_positive` / :func:`select_positive_naive` -- positive filter.
- :func:`rolling_mean` / :class:`RollingMean` -- fixed-window mean.
- :func:`locf`, :func:`mean_carried_forward` -- missing-value fills.
"""

from .reducers import select_positive, select_positive_naive, total, weighted_mean
from .rolling import (
    RollingMean,
    as_vector,
    locf,
    mean_carried_forward,
    rolling_mean,
    safe_div,
)

__all__ = [
    "total",
    "weighted_mean",
    "select_positive",
    "select_positive_naive",
    "RollingMean",
    "rolling_mean",
    "locf",
    "mean_carried_forward",
    "as_vector",
    "safe_div",
]
