"""
Stochastic simulators.

Public API
----------
- :func:`as_generator` -- normalise a seed / generator into a ``Generator``.
- :func:`choose_component` / :func:`sample_mixture` -- Gaussian mixtures.
- :func:`simulate_ar`, :func:`simulate_ma`, :func:`simulate_arma` -- recurrences.
- :class:`ARMASpec` -- bundled model parameters.
"""

from .arma import ARMASpec, simulate_ar, simulate_arma, simulate_ma
from .mixture import as_generator, choose_component, sample_mixture

__all__ = [
    "ARMASpec",
    "as_generator",
    "choose_component",
    "sample_mixture",
    "simulate_ar",
    "simulate_ma",
    "simulate_arma",
]
