"""
Recurrence-based simulators for AR(p), MA(q) and ARMA(p, q) processes.

Every generator returns exactly ``n`` values.  Indices before the
recurrence can start (the warm-up) are left at ``0.0``, which is also
the history the recurrence reads for them.

Start index per model
---------------------
==========  ===================  =================================
model       first simulated i    noise
==========  ===================  =================================
AR(p)       ``p``                one fresh draw per index
MA(q)       ``q``                ``n`` draws generated up front
ARMA(p,q)   ``max(p, q) + 1``    ``n`` draws generated up front
==========  ===================  =================================
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal, Sequence, Tuple

import numpy as np

from ..errors import InvalidArgument
from ..stats.rolling import as_vector
from .mixture import RngLike, as_generator

log = logging.getLogger(__name__)

ModelStr = Literal["ar", "ma", "arma"]


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def _check_common(n: int, noise_sd: float) -> None:
    if n < 0:
        raise InvalidArgument(f"n must be >= 0, got {n}")
    if not noise_sd >= 0:
        raise InvalidArgument(f"noise_sd must be >= 0, got {noise_sd}")


def _lag_term(coef: np.ndarray, series: np.ndarray, i: int) -> float:
    """``sum_j coef[j] * series[i - j - 1]``."""
    p = coef.shape[0]
    if p == 0:
        return 0.0
    # series[i-1], series[i-2], ..., series[i-p]
    history = series[i - p:i][::-1]
    return float(np.dot(coef, history))


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------


def simulate_ar(
    n: int,
    constant: float,
    phi: Sequence[float] | np.ndarray,
    noise_sd: float,
    *,
    rng: RngLike = None,
) -> np.ndarray:
    """Simulate an AR(p) process.

    For ``i >= p``::

        x[i] = N(constant, noise_sd) + sum_j phi[j] * x[i - j - 1]

    with a fresh shock drawn at each index.  The first ``p`` values are
    ``0.0``.

    Raises
    ------
    InvalidArgument
        If *n* or *noise_sd* is negative.
    """
    coef = as_vector(phi, "phi")
    _check_common(n, noise_sd)
    gen = as_generator(rng)
    p = coef.shape[0]
    log.debug("simulate_ar: n=%d p=%d", n, p)

    x = np.zeros(n, dtype=np.float64)
    for i in range(p, n):
        x[i] = gen.normal(constant, noise_sd) + _lag_term(coef, x, i)
    return x


def simulate_ma(
    n: int,
    mu: float,
    theta: Sequence[float] | np.ndarray,
    noise_sd: float,
    *,
    rng: RngLike = None,
) -> np.ndarray:
    """Simulate an MA(q) process.

    Draws ``eps ~ N(0, noise_sd)`` for all ``n`` positions first, then
    for ``i >= q``::

        x[i] = mu + eps[i] + sum_j theta[j] * eps[i - j - 1]

    The first ``q`` values are ``0.0``.

    Raises
    ------
    InvalidArgument
        If *n* or *noise_sd* is negative.
    """
    coef = as_vector(theta, "theta")
    _check_common(n, noise_sd)
    gen = as_generator(rng)
    q = coef.shape[0]
    log.debug("simulate_ma: n=%d q=%d", n, q)

    eps = gen.normal(0.0, noise_sd, size=n)
    x = np.zeros(n, dtype=np.float64)
    for i in range(q, n):
        x[i] = mu + eps[i] + _lag_term(coef, eps, i)
    return x


def simulate_arma(
    n: int,
    mu: float,
    phi: Sequence[float] | np.ndarray,
    theta: Sequence[float] | np.ndarray,
    noise_sd: float,
    *,
    rng: RngLike = None,
) -> np.ndarray:
    """Simulate an ARMA(p, q) process.

    Draws the noise sequence once, then for ``i >= max(p, q) + 1``::

        x[i] = mu + eps[i]
               + sum_j theta[j] * eps[i - j - 1]
               + sum_j phi[j] * x[i - j - 1]

    The recurrence starts one index later than ``max(p, q)``; the first
    ``max(p, q) + 1`` values are ``0.0``.

    Raises
    ------
    InvalidArgument
        If *n* or *noise_sd* is negative.
    """
    ar = as_vector(phi, "phi")
    ma = as_vector(theta, "theta")
    _check_common(n, noise_sd)
    gen = as_generator(rng)
    start = max(ar.shape[0], ma.shape[0]) + 1
    log.debug(
        "simulate_arma: n=%d p=%d q=%d start=%d",
        n, ar.shape[0], ma.shape[0], start,
    )

    eps = gen.normal(0.0, noise_sd, size=n)
    x = np.zeros(n, dtype=np.float64)
    for i in range(start, n):
        x[i] = mu + eps[i] + _lag_term(ma, eps, i) + _lag_term(ar, x, i)
    return x


# ---------------------------------------------------------------------------
# ARMASpec: bundled model parameters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ARMASpec:
    """Parameters of one simulated series.

    ``mu`` is the AR constant for ``model="ar"`` and the process mean
    for ``"ma"`` / ``"arma"``.  Unused coefficient sequences are ignored.
    """

    model: ModelStr = "arma"
    n: int = 500
    mu: float = 0.0
    phi: Tuple[float, ...] = field(default_factory=tuple)
    theta: Tuple[float, ...] = field(default_factory=tuple)
    noise_sd: float = 1.0

    def __post_init__(self) -> None:
        if self.model not in ("ar", "ma", "arma"):
            raise InvalidArgument(
                f"model must be one of 'ar', 'ma', 'arma', got {self.model!r}"
            )
        object.__setattr__(self, "phi", tuple(float(v) for v in self.phi))
        object.__setattr__(self, "theta", tuple(float(v) for v in self.theta))

    @property
    def warmup(self) -> int:
        """Number of leading ``0.0`` entries in a simulated series."""
        if self.model == "ar":
            return len(self.phi)
        if self.model == "ma":
            return len(self.theta)
        return max(len(self.phi), len(self.theta)) + 1

    def simulate(self, rng: RngLike = None) -> np.ndarray:
        """Run the generator selected by :attr:`model`."""
        if self.model == "ar":
            return simulate_ar(self.n, self.mu, self.phi, self.noise_sd, rng=rng)
        if self.model == "ma":
            return simulate_ma(self.n, self.mu, self.theta, self.noise_sd, rng=rng)
        return simulate_arma(
            self.n, self.mu, self.phi, self.theta, self.noise_sd, rng=rng
        )
