"""
Simulation runner.

Connects the library pieces into a single runnable job:

::

    RunConfig (YAML / CLI flags)
         |
         v
    ARMASpec.simulate()          -> x
    sample_mixture()  (optional) -> mixture
         |
         v
    locf() + rolling_mean()      -> x_filled, x_mean
         |
         v
    SimulationResult
        frame, stats

Entry points
------------
- :func:`run_simulation` -- programmatic API
- :func:`main` -- CLI entry point (``python -m numlab``)
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
from dataclasses import dataclass
from typing import Dict, List

import numpy as np
import pandas as pd

from ..config.load_config import (
    OutputConfig,
    RollingConfig,
    RunConfig,
    load_run_config,
)
from ..data.storage import save_frame, series_frame
from ..simulate.mixture import as_generator, sample_mixture
from ..stats.reducers import select_positive, total
from ..stats.rolling import locf, rolling_mean

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass
class SimulationResult:
    """Output of :func:`run_simulation`.

    Attributes
    ----------
    frame : pd.DataFrame
        Step-indexed columns: ``x`` (simulated series) and, when
        configured, ``x_mean`` (rolling mean of ``x``).
    mixture : np.ndarray
        Mixture draws (empty when ``mixture.n == 0``).
    stats : dict[str, float]
        Summary statistics of ``x`` past the warm-up.
    """

    frame: pd.DataFrame
    mixture: np.ndarray
    stats: Dict[str, float]


# ---------------------------------------------------------------------------
# Core runner
# ---------------------------------------------------------------------------


def _summary(x: np.ndarray, warmup: int) -> Dict[str, float]:
    body = x[warmup:]
    n = int(body.shape[0])
    mean = total(body) / n if n else float("nan")
    return {
        "n": float(n),
        "mean": mean,
        "std": float(np.std(body)) if n else float("nan"),
        "frac_positive": select_positive(body).shape[0] / n if n else float("nan"),
    }


def run_simulation(config: RunConfig) -> SimulationResult:
    """Simulate the configured series and derive its rolling mean."""
    spec = config.simulation
    rng = as_generator(config.seed)

    log.info(
        "Simulating %s: n=%d p=%d q=%d noise_sd=%g seed=%s",
        spec.model, spec.n, len(spec.phi), len(spec.theta),
        spec.noise_sd, config.seed,
    )
    x = spec.simulate(rng=rng)

    columns: Dict[str, np.ndarray] = {"x": x}
    window = config.rolling.window
    if window is not None:
        if window > spec.n:
            log.warning(
                "Rolling window %d exceeds series length %d, skipping",
                window, spec.n,
            )
        else:
            columns["x_mean"] = rolling_mean(locf(x), window)

    mix = config.mixture
    mixture = sample_mixture(mix.n, mix.weights, mix.means, mix.sds, rng=rng)
    if mix.n:
        log.info("Sampled %d mixture draws from %d components", mix.n, len(mix.weights))

    frame = series_frame(columns)
    stats = _summary(x, spec.warmup)
    log.info("Summary: %s", {k: round(v, 6) for k, v in stats.items()})
    return SimulationResult(frame=frame, mixture=mixture, stats=stats)


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def _parse_floats(text: str) -> List[float]:
    return [float(v) for v in text.split(",") if v.strip()]


def main(argv: List[str] | None = None) -> SimulationResult:
    """Run a simulation from the command line.

    Examples
    --------
    ::

        # Everything from a YAML file
        python -m numlab --config run.yaml

        # ARMA(1,1), 1000 steps, 20-step rolling mean, written to CSV
        python -m numlab --model arma --n 1000 --phi 0.5 --theta 0.3 \\
            --window 20 --seed 7 --out out/arma.csv

    """
    parser = argparse.ArgumentParser(
        description="Simulate an AR / MA / ARMA series.",
    )
    parser.add_argument(
        "--config", default=None,
        help="YAML run configuration (flags below override it).",
    )
    parser.add_argument(
        "--model", choices=["ar", "ma", "arma"], default=None,
        help="Process to simulate.",
    )
    parser.add_argument("--n", type=int, default=None, help="Series length.")
    parser.add_argument(
        "--mu", type=float, default=None,
        help="AR constant or MA/ARMA mean.",
    )
    parser.add_argument(
        "--phi", type=_parse_floats, default=None,
        help="Comma-separated AR coefficients, e.g. 0.5,-0.2.",
    )
    parser.add_argument(
        "--theta", type=_parse_floats, default=None,
        help="Comma-separated MA coefficients.",
    )
    parser.add_argument(
        "--noise-sd", type=float, default=None,
        help="Standard deviation of the shocks.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed.")
    parser.add_argument(
        "--window", type=int, default=None,
        help="Rolling-mean window (default: none).",
    )
    parser.add_argument(
        "--out", default=None,
        help="Write the series to this .csv or .parquet file.",
    )
    parser.add_argument(
        "--log-level", default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO).",
    )
    args = parser.parse_args(argv)

    # ── Logging ───────────────────────────────────────────────────────
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)-30s %(levelname)-5s %(message)s",
        datefmt="%H:%M:%S",
    )

    # ── Config ────────────────────────────────────────────────────────
    config = load_run_config(args.config) if args.config else RunConfig()
    overrides = {
        "model": args.model,
        "n": args.n,
        "mu": args.mu,
        "phi": args.phi,
        "theta": args.theta,
        "noise_sd": args.noise_sd,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    config = dataclasses.replace(
        config,
        seed=args.seed if args.seed is not None else config.seed,
        simulation=dataclasses.replace(config.simulation, **overrides),
        rolling=(
            RollingConfig(window=args.window)
            if args.window is not None else config.rolling
        ),
        output=OutputConfig(path=args.out) if args.out else config.output,
    )

    # ── Run ───────────────────────────────────────────────────────────
    result = run_simulation(config)

    if config.output.path:
        path = save_frame(result.frame, config.output.path)
        log.info("Saved %d rows to %s", len(result.frame), path)
    else:
        print(result.frame.tail(10).to_string())

    return result
