"""
numlab -- small numerics library of stateless sequence routines.

Missing values are ``np.nan``; every stochastic routine takes an explicit
``rng`` (``numpy.random.Generator``, integer seed or ``None``).
"""

from .errors import (
    DimensionMismatch,
    InvalidArgument,
    NumlabError,
    PreconditionViolation,
)
from .simulate import (
    ARMASpec,
    as_generator,
    choose_component,
    sample_mixture,
    simulate_ar,
    simulate_arma,
    simulate_ma,
)
from .stats import (
    RollingMean,
    locf,
    mean_carried_forward,
    rolling_mean,
    select_positive,
    select_positive_naive,
    total,
    weighted_mean,
)

__version__ = "0.1.0"

__all__ = [
    "NumlabError",
    "DimensionMismatch",
    "InvalidArgument",
    "PreconditionViolation",
    "total",
    "weighted_mean",
    "select_positive",
    "select_positive_naive",
    "RollingMean",
    "rolling_mean",
    "locf",
    "mean_carried_forward",
    "ARMASpec",
    "as_generator",
    "choose_component",
    "sample_mixture",
    "simulate_ar",
    "simulate_ma",
    "simulate_arma",
]
