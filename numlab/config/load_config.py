from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from ..simulate.arma import ARMASpec


# ---------- dataclasses for run config ----------

@dataclass(frozen=True)
class MixtureConfig:
    n: int = 0
    weights: Tuple[float, ...] = (1.0,)
    means: Tuple[float, ...] = (0.0,)
    sds: Tuple[float, ...] = (1.0,)


@dataclass(frozen=True)
class RollingConfig:
    window: Optional[int] = None


@dataclass(frozen=True)
class OutputConfig:
    path: Optional[str] = None


@dataclass(frozen=True)
class RunConfig:
    seed: Optional[int] = None
    simulation: ARMASpec = field(default_factory=ARMASpec)
    mixture: MixtureConfig = MixtureConfig()
    rolling: RollingConfig = RollingConfig()
    output: OutputConfig = OutputConfig()


def _load_yaml(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML at {p} must contain a mapping/object.")
    return data


def _tuples(raw: Dict[str, Any], *keys: str) -> Dict[str, Any]:
    out = dict(raw)
    for k in keys:
        if k in out:
            out[k] = tuple(out[k] or ())
    return out


def parse_run_config(raw: Dict[str, Any]) -> RunConfig:
    sim_raw = (raw.get("simulation") or {})
    mix_raw = (raw.get("mixture") or {})
    roll_raw = (raw.get("rolling") or {})
    out_raw = (raw.get("output") or {})

    return RunConfig(
        seed=raw.get("seed"),
        simulation=ARMASpec(**_tuples(sim_raw, "phi", "theta")),
        mixture=MixtureConfig(**_tuples(mix_raw, "weights", "means", "sds")),
        rolling=RollingConfig(**roll_raw),
        output=OutputConfig(**out_raw),
    )


def load_run_config(path: str | Path) -> RunConfig:
    return parse_run_config(_load_yaml(path))
