"""
Gaussian mixture sampling.

Randomness always comes from an explicit :class:`numpy.random.Generator`
passed as ``rng`` (a generator, an integer seed, or ``None`` for fresh
OS entropy).  No module-level random state is touched, so concurrent
callers with their own generators never interfere.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

import numpy as np

from ..errors import InvalidArgument, PreconditionViolation, check_same_length
from ..stats.rolling import as_vector

log = logging.getLogger(__name__)

RngLike = np.random.Generator | int | None

_TOTAL_RTOL: float = 1e-9


# ---------------------------------------------------------------------------
# Random source
# ---------------------------------------------------------------------------


def as_generator(rng: RngLike = None) -> np.random.Generator:
    """Return *rng* as a :class:`numpy.random.Generator`.

    An existing generator is returned unchanged (its state is shared
    with the caller); an integer seeds a new one; ``None`` draws fresh
    entropy from the OS.
    """
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


# ---------------------------------------------------------------------------
# Component selection
# ---------------------------------------------------------------------------


def choose_component(
    weights: Sequence[float] | np.ndarray,
    total_weight: float,
    *,
    rng: RngLike = None,
) -> int:
    """Pick an index with probability proportional to its weight.

    Draws ``u`` uniformly from ``[0, total_weight)`` and walks the
    weights, subtracting each one from ``u`` until ``u`` falls below the
    current weight.

    Parameters
    ----------
    weights : array-like (K,)
        Non-negative component weights.  They need not sum to 1.
    total_weight : float
        ``sum(weights)``, precomputed by the caller.
    rng : Generator, int or None
        Random source.

    Returns
    -------
    int
        Index in ``[0, K)``.

    Raises
    ------
    InvalidArgument
        If *weights* is empty or has a negative entry.
    PreconditionViolation
        If *total_weight* is not positive or disagrees with
        ``sum(weights)``.
    """
    ws = as_vector(weights, "weights")
    _check_weights(ws)
    actual = float(ws.sum())
    if not total_weight > 0 or not math.isclose(
        total_weight, actual, rel_tol=_TOTAL_RTOL
    ):
        raise PreconditionViolation(
            f"total_weight={total_weight!r} does not match sum(weights)={actual!r}"
        )
    return _walk(ws, float(as_generator(rng).uniform(0.0, total_weight)))


def _walk(ws: np.ndarray, u: float) -> int:
    for i in range(ws.shape[0]):
        if u < ws[i]:
            return i
        u -= ws[i]
    # Round-off can leave u >= the last weight; fall back to the last
    # component that can actually be drawn.
    return int(np.flatnonzero(ws > 0)[-1])


def _check_weights(ws: np.ndarray) -> None:
    if ws.size == 0:
        raise InvalidArgument("weights must be non-empty")
    if np.any(np.isnan(ws)) or np.any(ws < 0):
        raise InvalidArgument(f"weights must be non-negative, got {ws.tolist()}")
    if not np.any(ws > 0):
        raise InvalidArgument("weights must not all be zero")


# ---------------------------------------------------------------------------
# Mixture sampler
# ---------------------------------------------------------------------------


def sample_mixture(
    n: int,
    weights: Sequence[float] | np.ndarray,
    means: Sequence[float] | np.ndarray,
    sds: Sequence[float] | np.ndarray,
    *,
    rng: RngLike = None,
) -> np.ndarray:
    """Draw *n* values from a mixture of normal distributions.

    Each draw first selects a component with :func:`choose_component`
    and then samples ``N(means[k], sds[k])``.

    Parameters
    ----------
    n : int
        Number of draws, >= 0.
    weights, means, sds : array-like (K,)
        Parallel component parameters.  Weights are non-negative and
        not all zero; standard deviations are non-negative.
    rng : Generator, int or None
        Random source.  The same seed and parameters always give the
        same output.

    Returns
    -------
    np.ndarray (n,)

    Raises
    ------
    DimensionMismatch
        If the three parameter sequences differ in length.
    InvalidArgument
        If *n* is negative, a weight is negative, all weights are zero,
        or a standard deviation is negative.
    """
    ws = as_vector(weights, "weights")
    mus = as_vector(means, "means")
    sigmas = as_vector(sds, "sds")
    check_same_length(weights=ws, means=mus, sds=sigmas)
    if n < 0:
        raise InvalidArgument(f"n must be >= 0, got {n}")
    _check_weights(ws)
    if np.any(np.isnan(sigmas)) or np.any(sigmas < 0):
        raise InvalidArgument(f"sds must be non-negative, got {sigmas.tolist()}")

    gen = as_generator(rng)
    total_weight = float(ws.sum())
    log.debug("sample_mixture: n=%d components=%d", n, ws.size)

    out = np.empty(n, dtype=np.float64)
    for i in range(n):
        k = choose_component(ws, total_weight, rng=gen)
        out[i] = gen.normal(mus[k], sigmas[k])
    return out
